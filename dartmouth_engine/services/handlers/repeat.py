"""Re-explains the most recent answer when a customer asks the same thing again."""

from __future__ import annotations

import time

from dartmouth_engine.core.intents import Intent, IntentType
from dartmouth_engine.core.models import HandlerContext, Response, Suggestion
from dartmouth_engine.services.handlers.base import BaseHandler

REPEAT_VARIATIONS = (
    "Just to recap what we discussed: {answer}\n\n"
    "Is there a specific part you'd like me to explain differently?",
    "Let me try explaining this another way: {answer}\n\nDoes that make more sense?",
    "I want to make sure this is clear! Here's what I said before: {answer}\n\n"
    "What part would you like me to clarify?",
    "Good question - let me break this down differently: {answer}\n\n"
    "Is there something specific that's confusing?",
)

NO_PREVIOUS_ANSWER = (
    "I understand you're asking again. Let me try to provide more clarity."
)


class RepeatHandler(BaseHandler):
    """Rephrase the last answer given in this session."""

    name = "RepeatHandler"
    version = "1.0.0"
    priority = 40

    def can_handle(self, intent: Intent) -> bool:
        return intent.is_type(IntentType.REPEAT)

    async def handle(self, message: str, intent: Intent, context: HandlerContext) -> Response:
        started = time.perf_counter()
        previous = context.conversation_state.last_answer()
        if previous is not None and previous.answer:
            content = self.choose(REPEAT_VARIATIONS).format(answer=previous.answer)
        else:
            content = NO_PREVIOUS_ANSWER

        return Response(
            content=content,
            success=True,
            metadata=self.metadata(started, confidence=0.9),
            suggestions=[
                Suggestion(
                    type="clarification",
                    text="Ask for clarification on a specific part",
                    action="clarify",
                    priority="high",
                ),
                Suggestion(
                    type="example",
                    text="Ask for an example",
                    action="example",
                    priority="medium",
                ),
            ],
        )


__all__ = ["RepeatHandler", "REPEAT_VARIATIONS", "NO_PREVIOUS_ANSWER"]

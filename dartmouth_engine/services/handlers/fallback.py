"""Catch-all handler for intents nothing else claims."""

from __future__ import annotations

import time

from dartmouth_engine.core.intents import Intent
from dartmouth_engine.core.models import HandlerContext, Response, Suggestion
from dartmouth_engine.services.handlers.base import BaseHandler

FALLBACK_RESPONSES = (
    "Hmm, I'm not quite sure what you're asking. Could you tell me a bit more about what "
    "you're trying to do? I'm here to help!",
    "I want to make sure I give you the right answer! Could you rephrase that or give me "
    "a bit more detail?",
    "I'm not following - but I really want to help! Can you explain what you need in a "
    "different way?",
    "Let me make sure I understand you correctly. Could you give me a bit more context "
    "about what you're looking for?",
)


class FallbackHandler(BaseHandler):
    """Ask the customer to clarify; accepts every intent.

    The router always evaluates this handler last, whatever its priority.
    """

    name = "FallbackHandler"
    version = "1.0.0"
    priority = 1_000_000

    def can_handle(self, intent: Intent) -> bool:
        return True

    async def handle(self, message: str, intent: Intent, context: HandlerContext) -> Response:
        started = time.perf_counter()
        return Response(
            content=self.choose(FALLBACK_RESPONSES),
            success=True,
            metadata=self.metadata(started, confidence=0.5, requires_follow_up=True),
            suggestions=[
                Suggestion(
                    type="rephrase",
                    text="Try rephrasing your question",
                    action="rephrase",
                    priority="high",
                ),
                Suggestion(
                    type="help",
                    text="Ask for help",
                    action="help",
                    priority="medium",
                ),
            ],
        )


__all__ = ["FallbackHandler", "FALLBACK_RESPONSES"]

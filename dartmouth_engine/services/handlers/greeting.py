"""Greets customers, mentioning their uploaded artwork when there is one."""

from __future__ import annotations

import time
from typing import Optional

from dartmouth_engine.core.intents import Intent, IntentType
from dartmouth_engine.core.models import ConversationState, HandlerContext, Response
from dartmouth_engine.services.handlers.base import BaseHandler

GREETINGS = (
    "Hi there! I'm here to help with your artwork and print questions. "
    "What can I help you with?",
    "Hello! Ready to help you get the perfect print. What are we working on today?",
    "Hey! Let's get your artwork print-ready together. What do you need?",
    "Hi! Ask me about print sizes, DPI, or anything else about your order.",
)


def _artwork_name(state: ConversationState) -> Optional[str]:
    artwork = state.artwork()
    if artwork is None:
        return None
    name = artwork.get("file_name")
    return name if isinstance(name, str) and name.strip() else None


class GreetingHandler(BaseHandler):
    """Say hello."""

    name = "GreetingHandler"
    version = "1.0.0"
    priority = 50

    def can_handle(self, intent: Intent) -> bool:
        return intent.is_type(IntentType.GREETING)

    async def handle(self, message: str, intent: Intent, context: HandlerContext) -> Response:
        started = time.perf_counter()
        content = self.choose(GREETINGS)
        artwork = _artwork_name(context.state)
        if artwork:
            content += (
                f"\n\nI see you've uploaded {artwork}. "
                "Would you like to check how it will print?"
            )
        return Response(
            content=content,
            success=True,
            metadata=self.metadata(started, confidence=1.0, sentiment="positive"),
        )


__all__ = ["GreetingHandler", "GREETINGS"]

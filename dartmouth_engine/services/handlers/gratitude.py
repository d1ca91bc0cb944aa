"""Replies to thank-you messages from customers."""

from __future__ import annotations

import time

from dartmouth_engine.core.intents import Intent, IntentType
from dartmouth_engine.core.logging import get_logger
from dartmouth_engine.core.models import HandlerContext, Response
from dartmouth_engine.services.handlers.base import BaseHandler

logger = get_logger(__name__)

GRATITUDE_RESPONSES = (
    "You're very welcome! It's been our pleasure to help you. If you need anything else "
    "in the future, please don't hesitate to reach out!",
    "Thank you for your kind words! We're always happy to help. Feel free to contact us "
    "anytime you need assistance.",
    "We really appreciate your feedback! It's wonderful to hear that we could help. "
    "We're here whenever you need us!",
    "You're most welcome! We're glad we could assist you. Don't hesitate to get in touch "
    "if you need anything else.",
    "Thank you so much! We're thrilled we could help. Looking forward to working with "
    "you again!",
)


class GratitudeHandler(BaseHandler):
    """Acknowledge gratitude warmly; never touches conversation state."""

    name = "GratitudeHandler"
    version = "1.0.0"
    priority = 30

    def can_handle(self, intent: Intent) -> bool:
        return intent.is_type(IntentType.GRATITUDE)

    async def handle(self, message: str, intent: Intent, context: HandlerContext) -> Response:
        started = time.perf_counter()
        logger.debug("Handling gratitude message")
        return Response(
            content=self.choose(GRATITUDE_RESPONSES),
            success=True,
            metadata=self.metadata(
                started,
                confidence=0.95,
                sentiment="positive",
                requires_follow_up=False,
            ),
        )


__all__ = ["GratitudeHandler", "GRATITUDE_RESPONSES"]

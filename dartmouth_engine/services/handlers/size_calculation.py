"""Reverse DPI calculation: what resolution does the artwork reach at a given size?

Examples of messages this handler claims:

- "if my artwork is 26.6 × 24.0 cm what dpi is that?"
- "what dpi would I get at 30 x 25 cm?"
- "at 10 inches wide what's my dpi?"
"""

from __future__ import annotations

import time

from dartmouth_engine.core.intents import Intent
from dartmouth_engine.core.logging import get_logger
from dartmouth_engine.core.models import AnswerRecord, HandlerContext, Response, StatePatch
from dartmouth_engine.services.handlers.base import BaseHandler
from dartmouth_engine.services.print_sizing import (
    DpiResult,
    dpi_for_size,
    extract_size,
    format_number,
    looks_like_size_query,
    quality_badge,
)

logger = get_logger(__name__)

MISSING_ARTWORK_MESSAGE = (
    "I need artwork data to calculate DPI. Please upload an artwork first!"
)
UNPARSABLE_SIZE_MESSAGE = (
    "I couldn't understand the size you mentioned. Could you specify it like "
    "'26.6 × 24.0 cm' or '10 × 9 inches'?"
)


def format_dpi_answer(result: DpiResult) -> str:
    """Render a DPI result as the sentence shown to the customer."""
    return (
        f"At **{format_number(result.width_cm)} × {format_number(result.height_cm)} cm** "
        f'({format_number(result.width_inches)}" × {format_number(result.height_inches)}"), '
        f"your DPI would be **{result.dpi_average}**. "
        f"{quality_badge(result.quality)} **Quality: {result.quality}**"
    )


class SizeCalculationHandler(BaseHandler):
    """Compute the DPI of the uploaded artwork at a physical size named in the message."""

    name = "SizeCalculationHandler"
    version = "1.0.0"
    priority = 10

    def can_handle(self, intent: Intent) -> bool:
        return looks_like_size_query(intent.original_message)

    async def handle(self, message: str, intent: Intent, context: HandlerContext) -> Response:
        started = time.perf_counter()
        text = intent.original_message or message

        pixels = context.state.artwork_pixels()
        if pixels is None:
            logger.info("Size calculation requested without artwork data")
            return Response(
                content=MISSING_ARTWORK_MESSAGE,
                success=False,
                metadata=self.metadata(started, confidence=0.9, requires_follow_up=True),
            )

        size = extract_size(text)
        if size is None:
            logger.info("Could not parse a print size from the message")
            return Response(
                content=UNPARSABLE_SIZE_MESSAGE,
                success=False,
                metadata=self.metadata(started, confidence=0.9, requires_follow_up=True),
            )

        width_px, height_px = pixels
        result = dpi_for_size(width_px, height_px, size.width_cm, size.height_cm)
        content = format_dpi_answer(result)
        data = result.as_dict()
        return Response(
            content=content,
            success=True,
            metadata=self.metadata(started, confidence=1.0, requires_follow_up=False),
            data=data,
            state_patch=StatePatch(
                append_answers=(AnswerRecord(question=text, answer=content),),
                metadata={"last_size_calculation": data},
            ),
        )


__all__ = [
    "SizeCalculationHandler",
    "MISSING_ARTWORK_MESSAGE",
    "UNPARSABLE_SIZE_MESSAGE",
    "format_dpi_answer",
]

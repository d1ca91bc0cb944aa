"""Forward print-size calculation: how large does the artwork print at a given DPI?"""

from __future__ import annotations

import time

from dartmouth_engine.core.intents import Intent, IntentType
from dartmouth_engine.core.models import AnswerRecord, HandlerContext, Response, StatePatch
from dartmouth_engine.services.handlers.base import BaseHandler
from dartmouth_engine.services.print_sizing import (
    RECOMMENDED_PRINT_DPI,
    PrintSizeResult,
    extract_pixel_request,
    format_number,
    print_size_for_dpi,
)

CALCULATION_GUIDANCE = (
    "Hey! I can help with print size calculations. Please provide artwork dimensions in "
    "pixels and desired DPI (e.g., '4000x6000 pixels at 300 DPI')."
)

_QUALITY_ADVICE = {
    "Optimal": "That's excellent quality for professional printing! 🎨",
    "Good": "That's good quality - suitable for most printing needs.",
    "Poor": (
        "⚠️ Heads up - that's really low for printing. You'll likely see pixelation and the "
        "print won't look sharp. For best results, I'd recommend at least 200 DPI, "
        "ideally 300 DPI."
    ),
}


def format_print_size_answer(result: PrintSizeResult) -> str:
    """Render a print-size result as the reply shown to the customer."""
    lines = [
        "Great question! Let me break this down for you:",
        "",
        f"📐 **Your Artwork:** {result.width_pixels} x {result.height_pixels} pixels "
        f"at {result.dpi} DPI",
        "",
        f"📏 **Print Size:** {result.width_cm:.2f}cm x {result.height_cm:.2f}cm "
        f'({result.width_inches:.2f}" x {result.height_inches:.2f}")',
        "",
        f"✨ **Quality:** {result.quality.upper()}",
        _QUALITY_ADVICE[result.quality],
    ]
    if result.quality == "Poor":
        lines.extend(
            [
                "",
                "💡 **My Recommendation:** For sharp, professional prints, try printing at "
                f'{format_number(result.recommended_width_inches)}" x '
                f'{format_number(result.recommended_height_inches)}" '
                f"(at {RECOMMENDED_PRINT_DPI} DPI) instead. The smaller size will look much better!",
            ]
        )
    return "\n".join(lines)


class CalculationHandler(BaseHandler):
    """Report the print size for pixel dimensions at a target DPI.

    Pixel dimensions come from the message when given, otherwise from the
    artwork recorded in the session. The DPI defaults to 300.
    """

    name = "CalculationHandler"
    version = "1.0.0"
    priority = 20

    def can_handle(self, intent: Intent) -> bool:
        return intent.is_type(IntentType.CALCULATION)

    async def handle(self, message: str, intent: Intent, context: HandlerContext) -> Response:
        started = time.perf_counter()
        text = intent.original_message or message
        request = extract_pixel_request(text)

        width, height = request.width_pixels, request.height_pixels
        if width is None or height is None:
            pixels = context.state.artwork_pixels()
            if pixels is not None:
                width, height = pixels
        dpi = request.dpi or RECOMMENDED_PRINT_DPI

        if not width or not height or dpi <= 0:
            return Response(
                content=CALCULATION_GUIDANCE,
                success=False,
                metadata=self.metadata(started, confidence=0.5, requires_follow_up=True),
            )

        result = print_size_for_dpi(width, height, dpi)
        content = format_print_size_answer(result)
        data = result.as_dict()
        return Response(
            content=content,
            success=True,
            metadata=self.metadata(started, confidence=1.0),
            data=data,
            state_patch=StatePatch(
                append_answers=(AnswerRecord(question=text, answer=content),),
                metadata={"last_print_size_calculation": data},
            ),
        )


__all__ = ["CalculationHandler", "CALCULATION_GUIDANCE", "format_print_size_answer"]

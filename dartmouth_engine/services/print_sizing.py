"""Print sizing helpers: DPI from physical size, print size from DPI, size parsing.

Everything here is pure. Rounding is half-up: 286.5 → 287, never 286.
"""

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass
from typing import Any, Literal, Optional

CM_PER_INCH = 2.54
OPTIMAL_DPI_THRESHOLD = 250
GOOD_DPI_THRESHOLD = 200
RECOMMENDED_PRINT_DPI = 300

Quality = Literal["Optimal", "Good", "Poor"]

_NUMBER = r"\d+(?:\.\d+)?"
_SEPARATOR = r"\s*[×x]\s*"
_CM_UNIT = r"(?:cm|centimet(?:er|re)s?)"
_INCH_UNIT = r"(?:inches|inch|\"|”)"
_ANY_UNIT = rf"(?:{_CM_UNIT}|{_INCH_UNIT})"
_DIMENSION = rf"{_NUMBER}\s*(?:[×x]\s*{_NUMBER}\s*)?{_ANY_UNIT}"

_SIZE_QUERY_PATTERNS = (
    re.compile(r"what.*dpi.*at.*\d+"),
    re.compile(r"if.*size.*\d+.*what.*dpi"),
    re.compile(rf"{_DIMENSION}.*dpi"),
    re.compile(rf"dpi.*{_DIMENSION}"),
)

_CM_PAIR = re.compile(rf"({_NUMBER}){_SEPARATOR}({_NUMBER})\s*{_CM_UNIT}")
_INCH_PAIR = re.compile(rf"({_NUMBER}){_SEPARATOR}({_NUMBER})\s*{_INCH_UNIT}")
_CM_SINGLE = re.compile(rf"({_NUMBER})\s*{_CM_UNIT}")
_INCH_SINGLE = re.compile(rf"({_NUMBER})\s*{_INCH_UNIT}")

# Whole integers only, so decimals such as "26.6 × 24.0" are not read as pixels.
_PIXEL_PAIR = re.compile(
    rf"(?<!\d)(?<!\d\.)(\d+){_SEPARATOR}(\d+)(?!\d)(?!\.\d)\s*(?:pixels?|px)?"
)
_DPI_VALUE = re.compile(r"(\d+)\s*dpi")


@dataclass(frozen=True, slots=True)
class PhysicalSize:
    """A requested print size, always normalised to centimetres."""

    width_cm: float
    height_cm: float
    unit: Literal["cm", "inch"]
    assumed_square: bool = False


@dataclass(frozen=True, slots=True)
class DpiResult:
    """Resolution an artwork reaches when printed at a given physical size."""

    width_cm: float
    height_cm: float
    width_inches: float
    height_inches: float
    dpi_width: int
    dpi_height: int
    dpi_average: int
    quality: Quality

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly copy of the result."""
        return asdict(self)


@dataclass(frozen=True, slots=True)
class PrintSizeResult:
    """Physical size an artwork prints at for a given DPI."""

    width_pixels: int
    height_pixels: int
    dpi: int
    width_cm: float
    height_cm: float
    width_inches: float
    height_inches: float
    quality: Quality
    recommended_width_inches: float
    recommended_height_inches: float

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly copy of the result."""
        return asdict(self)


@dataclass(frozen=True, slots=True)
class PixelRequest:
    """Pixel dimensions and target DPI read from a customer message."""

    width_pixels: Optional[int]
    height_pixels: Optional[int]
    dpi: Optional[int]


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` to ``ndigits`` decimals, sending halves upward."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    """Round ``value`` to the nearest integer, sending halves upward."""
    return int(math.floor(value + 0.5))


def classify_quality(dpi: float) -> Quality:
    """Map a DPI value to its print quality band (inclusive lower bounds)."""
    if dpi >= OPTIMAL_DPI_THRESHOLD:
        return "Optimal"
    if dpi >= GOOD_DPI_THRESHOLD:
        return "Good"
    return "Poor"


def quality_badge(quality: Quality) -> str:
    """Return the emoji shown next to a quality band."""
    if quality == "Optimal":
        return "✨"
    if quality == "Good":
        return "👌"
    return "⚠️"


def format_number(value: float) -> str:
    """Render ``value`` without trailing zeros (24.0 → "24", 10.47 → "10.47")."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return text or "0"


def looks_like_size_query(text: str) -> bool:
    """Return True when ``text`` asks what DPI a given physical size yields."""
    lowered = text.lower()
    return any(pattern.search(lowered) for pattern in _SIZE_QUERY_PATTERNS)


def extract_size(text: str) -> Optional[PhysicalSize]:
    """Read a physical print size from free text.

    Tries a centimetre pair, then an inch pair, then a single dimension (cm
    before inches) which is assumed to describe a square.
    """
    lowered = text.lower()

    match = _CM_PAIR.search(lowered)
    if match:
        return _positive_size(float(match.group(1)), float(match.group(2)), "cm")

    match = _INCH_PAIR.search(lowered)
    if match:
        return _positive_size(
            float(match.group(1)) * CM_PER_INCH,
            float(match.group(2)) * CM_PER_INCH,
            "inch",
        )

    match = _CM_SINGLE.search(lowered)
    if match:
        size = float(match.group(1))
        return _positive_size(size, size, "cm", assumed_square=True)

    match = _INCH_SINGLE.search(lowered)
    if match:
        size = float(match.group(1)) * CM_PER_INCH
        return _positive_size(size, size, "inch", assumed_square=True)

    return None


def _positive_size(
    width_cm: float,
    height_cm: float,
    unit: Literal["cm", "inch"],
    *,
    assumed_square: bool = False,
) -> Optional[PhysicalSize]:
    if width_cm <= 0 or height_cm <= 0:
        return None
    return PhysicalSize(width_cm, height_cm, unit, assumed_square)


def extract_pixel_request(text: str) -> PixelRequest:
    """Read ``W x H`` pixel dimensions and an ``N dpi`` target from free text."""
    lowered = text.lower()
    width = height = dpi = None
    dims = _PIXEL_PAIR.search(lowered)
    if dims:
        width, height = int(dims.group(1)), int(dims.group(2))
    dpi_match = _DPI_VALUE.search(lowered)
    if dpi_match:
        dpi = int(dpi_match.group(1))
    return PixelRequest(width_pixels=width, height_pixels=height, dpi=dpi)


def dpi_for_size(
    width_pixels: int, height_pixels: int, width_cm: float, height_cm: float
) -> DpiResult:
    """Compute the DPI an artwork reaches when printed at ``width_cm × height_cm``."""
    if width_cm <= 0 or height_cm <= 0:
        raise ValueError("print size must be positive")
    width_inches = width_cm / CM_PER_INCH
    height_inches = height_cm / CM_PER_INCH

    dpi_width = round_to_int(width_pixels / width_inches)
    dpi_height = round_to_int(height_pixels / height_inches)
    dpi_average = round_to_int((dpi_width + dpi_height) / 2)

    return DpiResult(
        width_cm=round_half_up(width_cm, 1),
        height_cm=round_half_up(height_cm, 1),
        width_inches=round_half_up(width_inches, 2),
        height_inches=round_half_up(height_inches, 2),
        dpi_width=dpi_width,
        dpi_height=dpi_height,
        dpi_average=dpi_average,
        quality=classify_quality(dpi_average),
    )


def print_size_for_dpi(width_pixels: int, height_pixels: int, dpi: int) -> PrintSizeResult:
    """Compute the physical print size of an artwork at ``dpi``."""
    if dpi <= 0:
        raise ValueError("dpi must be positive")
    width_inches = width_pixels / dpi
    height_inches = height_pixels / dpi
    return PrintSizeResult(
        width_pixels=width_pixels,
        height_pixels=height_pixels,
        dpi=dpi,
        width_cm=round_half_up(width_inches * CM_PER_INCH, 2),
        height_cm=round_half_up(height_inches * CM_PER_INCH, 2),
        width_inches=round_half_up(width_inches, 2),
        height_inches=round_half_up(height_inches, 2),
        quality=classify_quality(dpi),
        recommended_width_inches=round_half_up(width_pixels / RECOMMENDED_PRINT_DPI, 2),
        recommended_height_inches=round_half_up(height_pixels / RECOMMENDED_PRINT_DPI, 2),
    )


__all__ = [
    "CM_PER_INCH",
    "OPTIMAL_DPI_THRESHOLD",
    "GOOD_DPI_THRESHOLD",
    "RECOMMENDED_PRINT_DPI",
    "Quality",
    "PhysicalSize",
    "DpiResult",
    "PrintSizeResult",
    "PixelRequest",
    "round_half_up",
    "round_to_int",
    "classify_quality",
    "quality_badge",
    "format_number",
    "looks_like_size_query",
    "extract_size",
    "extract_pixel_request",
    "dpi_for_size",
    "print_size_for_dpi",
]

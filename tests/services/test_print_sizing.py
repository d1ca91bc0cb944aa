"""Unit tests for the print sizing helpers."""

from __future__ import annotations

import pytest

from dartmouth_engine.services import print_sizing as ps

# pylint: disable=missing-function-docstring


def test_dpi_for_size_reference_artwork() -> None:
    """3000×2832 px printed at 26.6 × 24.0 cm reaches an Optimal 293 DPI."""
    result = ps.dpi_for_size(3000, 2832, 26.6, 24.0)
    assert result.dpi_width == 286
    assert result.dpi_height == 300
    assert result.dpi_average == 293
    assert result.quality == "Optimal"
    assert result.width_cm == 26.6
    assert result.height_cm == 24.0
    assert result.width_inches == 10.47
    assert result.height_inches == 9.45


@pytest.mark.parametrize(
    ("dpi", "expected"),
    [(300, "Optimal"), (250, "Optimal"), (249, "Good"), (200, "Good"), (199, "Poor"), (72, "Poor")],
)
def test_classify_quality_inclusive_lower_bounds(dpi: int, expected: str) -> None:
    assert ps.classify_quality(dpi) == expected


def test_dpi_average_rounds_half_up() -> None:
    # 300 and 301 average to 300.5, which must round to 301
    result = ps.dpi_for_size(300, 301, 2.54, 2.54)
    assert (result.dpi_width, result.dpi_height) == (300, 301)
    assert result.dpi_average == 301


def test_round_half_up_differs_from_bankers_rounding() -> None:
    assert ps.round_to_int(2.5) == 3
    assert ps.round_to_int(286.47) == 286
    assert ps.round_half_up(10.25, 1) == 10.3
    assert ps.round_half_up(9.4488, 2) == 9.45


@pytest.mark.parametrize(
    ("text", "width", "height", "unit", "square"),
    [
        ("if my artwork is 26.6 × 24.0 cm what dpi is that?", 26.6, 24.0, "cm", False),
        ("what dpi would I get at 30 x 25 cm?", 30.0, 25.0, "cm", False),
        ("10 x 9 inches - what dpi?", 25.4, 22.86, "inch", False),
        ('what dpi at 8x10"', 20.32, 25.4, "inch", False),
        ("what dpi at 20cm?", 20.0, 20.0, "cm", True),
        ("at 10 inches wide what's my dpi?", 25.4, 25.4, "inch", True),
    ],
)
def test_extract_size(text: str, width: float, height: float, unit: str, square: bool) -> None:
    size = ps.extract_size(text)
    assert size is not None
    assert size.width_cm == pytest.approx(width)
    assert size.height_cm == pytest.approx(height)
    assert size.unit == unit
    assert size.assumed_square is square


def test_extract_size_prefers_cm_pair_over_inches() -> None:
    size = ps.extract_size("is 20 x 30 cm (about 8 x 12 inches) ok for dpi?")
    assert size is not None
    assert (size.width_cm, size.height_cm) == (20.0, 30.0)


@pytest.mark.parametrize("text", ["what dpi is that?", "what dpi at 0 cm", "how big can I go"])
def test_extract_size_unparsable(text: str) -> None:
    assert ps.extract_size(text) is None


@pytest.mark.parametrize(
    "text",
    [
        "if my artwork is 26.6 × 24.0 cm what dpi is that?",
        "what dpi would I get at 30 x 25 cm?",
        "at 10 inches wide what's my dpi?",
        "26 x 24 cm dpi?",
        "DPI for 12 x 10 inches please",
        "If the size is 40cm, what DPI do I get?",
    ],
)
def test_looks_like_size_query_positive(text: str) -> None:
    assert ps.looks_like_size_query(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "thanks so much!",
        "what is dpi?",
        "4000x6000 pixels at 300 dpi, how big will it print?",
        "can you say that again",
    ],
)
def test_looks_like_size_query_negative(text: str) -> None:
    assert ps.looks_like_size_query(text) is False


def test_print_size_for_dpi() -> None:
    result = ps.print_size_for_dpi(4000, 6000, 300)
    assert result.width_inches == 13.33
    assert result.height_inches == 20.0
    assert result.width_cm == 33.87
    assert result.height_cm == 50.8
    assert result.quality == "Optimal"
    assert result.recommended_width_inches == 13.33


def test_print_size_for_dpi_rejects_zero_dpi() -> None:
    with pytest.raises(ValueError):
        ps.print_size_for_dpi(100, 100, 0)


def test_extract_pixel_request() -> None:
    request = ps.extract_pixel_request("My file is 4000 x 6000 px, what size at 150 DPI?")
    assert (request.width_pixels, request.height_pixels, request.dpi) == (4000, 6000, 150)
    empty = ps.extract_pixel_request("how big can I print?")
    assert (empty.width_pixels, empty.height_pixels, empty.dpi) == (None, None, None)


@pytest.mark.parametrize(
    "text",
    ["if my artwork is 26.6 × 24.0 cm what dpi is that?", "print at 10.5x8.25 inches"],
)
def test_extract_pixel_request_ignores_decimal_sizes(text: str) -> None:
    """Decimal print sizes are never mistaken for pixel dimensions."""
    request = ps.extract_pixel_request(text)
    assert (request.width_pixels, request.height_pixels) == (None, None)


def test_extract_pixel_request_allows_sentence_punctuation() -> None:
    request = ps.extract_pixel_request("It is 4000x6000. What size at 300 dpi?")
    assert (request.width_pixels, request.height_pixels, request.dpi) == (4000, 6000, 300)


def test_format_number_and_badge() -> None:
    assert ps.format_number(24.0) == "24"
    assert ps.format_number(10.47) == "10.47"
    assert ps.format_number(26.6) == "26.6"
    assert ps.quality_badge("Optimal") == "✨"
    assert ps.quality_badge("Good") == "👌"
    assert ps.quality_badge("Poor") == "⚠️"

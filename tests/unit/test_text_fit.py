import pytest

from pack_mockup.schema import FontSizeRange
from pack_mockup.utils.text import (
    available_text_width,
    base_font_size,
    fit_font_size,
    outline_width,
)


def test_fit_shrinks_overflowing_text() -> None:
    assert fit_font_size(14, 150, 100) == pytest.approx(8.4)


def test_fit_keeps_size_when_text_fits() -> None:
    assert fit_font_size(14, 80, 100) == 14
    assert fit_font_size(14, 100, 100) == 14


def test_fit_ignores_empty_available_width() -> None:
    assert fit_font_size(14, 150, 0) == 14


def test_base_font_size_is_clamped_to_range() -> None:
    # 14 * 2 * 0.8 = 22.4 exceeds the default maximum
    assert base_font_size(None, 2.0) == pytest.approx(16.0)
    # 14 * 1 * 0.8 = 11.2 is below the element minimum
    assert base_font_size(FontSizeRange(12, 22), 1.0) == pytest.approx(12.0)
    assert base_font_size(FontSizeRange(10, 18), 1.25) == pytest.approx(14.0)


def test_available_width_and_outline() -> None:
    assert available_text_width(400) == pytest.approx(320)
    assert outline_width(5) == 1.0
    assert outline_width(25) == pytest.approx(2.0)

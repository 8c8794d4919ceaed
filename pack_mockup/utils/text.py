"""Font size arithmetic for text elements."""

from typing import Optional

from pack_mockup.schema import FontSizeRange

DEFAULT_MIN_FONT_SIZE = 10.0
DEFAULT_MAX_FONT_SIZE = 16.0
BASE_FONT_SIZE_CAP = 14.0
FONT_SCALE_FACTOR = 0.8
AVAILABLE_WIDTH_RATIO = 0.8
FIT_MARGIN = 0.9


def base_font_size(font_size: Optional[FontSizeRange], scale: float) -> float:
    """Initial device font size, clamped to the element's allowed range."""
    lo = font_size.min if font_size is not None else DEFAULT_MIN_FONT_SIZE
    hi = font_size.max if font_size is not None else DEFAULT_MAX_FONT_SIZE
    size = min(hi, BASE_FONT_SIZE_CAP) * scale * FONT_SCALE_FACTOR
    return max(lo, min(hi, size))


def available_text_width(device_width: float) -> float:
    return device_width * AVAILABLE_WIDTH_RATIO


def fit_font_size(size: float, measured_width: float, available_width: float) -> float:
    """Shrink ``size`` so a run measuring ``measured_width`` fits, with a 10% margin.

    Runs that already fit keep their size.
    """
    if available_width <= 0 or measured_width <= available_width:
        return size
    return size * (available_width / measured_width) * FIT_MARGIN


def outline_width(size: float) -> float:
    return max(1.0, size * 0.08)

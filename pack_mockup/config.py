"""Renderer configuration.

``RenderConfig`` gathers the tunables that are not part of a template: the
preview viewport the mockup is fitted into, the scale cap, the encoder
quality used for lossy exports and the font files tried for text.
Instances are immutable; derive variants with :func:`dataclasses.replace`.
"""

from dataclasses import dataclass
from typing import Tuple

DEFAULT_MAX_VIEW_WIDTH = 500.0
DEFAULT_MAX_VIEW_HEIGHT = 600.0
DEFAULT_SCALE_CAP = 3.0
DEFAULT_LOSSY_QUALITY = 90

DEFAULT_BOLD_FONTS: Tuple[str, ...] = (
    "DejaVuSans-Bold.ttf",
    "arialbd.ttf",
    "Arial Bold.ttf",
    "LiberationSans-Bold.ttf",
)
DEFAULT_REGULAR_FONTS: Tuple[str, ...] = (
    "DejaVuSans.ttf",
    "arial.ttf",
    "Arial.ttf",
    "LiberationSans-Regular.ttf",
)


@dataclass(frozen=True)
class RenderConfig:
    """Viewport, export and font settings.

    Attributes:
        max_view_width: Width of the preview box in device pixels.
        max_view_height: Height of the preview box in device pixels.
        scale_cap: Upper bound for the design-to-device scale.
        lossy_quality: Encoder quality (1-100) for JPEG exports.
        bold_fonts: TrueType files tried, in order, for text elements.
        regular_fonts: TrueType files tried, in order, for logo text.
    """

    max_view_width: float = DEFAULT_MAX_VIEW_WIDTH
    max_view_height: float = DEFAULT_MAX_VIEW_HEIGHT
    scale_cap: float = DEFAULT_SCALE_CAP
    lossy_quality: int = DEFAULT_LOSSY_QUALITY
    bold_fonts: Tuple[str, ...] = DEFAULT_BOLD_FONTS
    regular_fonts: Tuple[str, ...] = DEFAULT_REGULAR_FONTS


DEFAULT_RENDER_CONFIG = RenderConfig()

"""Package background shape strategies.

Each template ``sub_category`` maps to one drawing strategy in
:data:`SHAPE_STRATEGY_REGISTRY`. A strategy receives the surface and the
current customizations and paints the full package background; it reads two
colour customizations (a background plus one accent) and derives shades with
:func:`pack_mockup.utils.color.adjust_brightness`.

All proportions are relative to the surface size so the same strategy works
at any scale. Unknown sub-categories use :func:`draw_default_shape`.
"""

from typing import Callable, Dict, Mapping

from loguru import logger

from pack_mockup.renderer.surface import Surface
from pack_mockup.types import HexColor
from pack_mockup.utils.color import adjust_brightness, is_hex_color

OUTLINE_COLOR = "#2D3748"
DEFAULT_OUTLINE_COLOR = "#E5E7EB"
DEFAULT_BACKGROUND = "#FFFFFF"

BACKGROUND_KEY = "background-color"
MAIN_KEY = "main-color"
BRAND_KEY = "brand-color"
ELEGANT_KEY = "elegant-color"

ShapeStrategy = Callable[[Surface, Mapping[str, str]], None]


def customization_color(
    customizations: Mapping[str, str], key: str, default: HexColor
) -> HexColor:
    """Customization value for ``key`` if it is a usable colour, else ``default``."""
    value = customizations.get(key) or ""
    return value if is_hex_color(value) else default


def _draw_outline(surface: Surface) -> None:
    surface.stroke_rect(0, 0, surface.width, surface.height, OUTLINE_COLOR, 2)


def draw_rice_package(surface: Surface, customizations: Mapping[str, str]) -> None:
    """Bordered frame: accent bands on every edge around a lighter panel."""
    w, h = surface.width, surface.height
    bg = customization_color(customizations, BACKGROUND_KEY, DEFAULT_BACKGROUND)
    main = customization_color(customizations, MAIN_KEY, "#D35400")

    surface.fill_rect(0, 0, w, h, bg)

    # Traditional border bands
    surface.fill_rect(0, 0, w, h * 0.08, main)
    surface.fill_rect(0, h * 0.92, w, h * 0.08, main)
    surface.fill_rect(0, 0, w * 0.05, h, main)
    surface.fill_rect(w * 0.95, 0, w * 0.05, h, main)

    surface.fill_rect(w * 0.08, h * 0.12, w * 0.84, h * 0.76, adjust_brightness(bg, 3))

    corner = adjust_brightness(main, -20)
    size = min(w, h) * 0.06
    for cx, cy in ((0.08, 0.12), (0.84, 0.12), (0.08, 0.8), (0.84, 0.8)):
        surface.fill_rect(w * cx, h * cy, size, size, corner)

    _draw_outline(surface)


def draw_juice_pouch(surface: Surface, customizations: Mapping[str, str]) -> None:
    """Rounded pouch with a top seal strip and an accent brand area."""
    w, h = surface.width, surface.height
    bg = customization_color(customizations, BACKGROUND_KEY, DEFAULT_BACKGROUND)
    main = customization_color(customizations, MAIN_KEY, "#FF8C00")
    radius = w * 0.1

    surface.fill_rounded_rect(0, 0, w, h, radius, bg)
    surface.fill_rounded_rect(
        w * 0.1, 0, w * 0.8, h * 0.15, radius * 0.5, adjust_brightness(bg, -8)
    )
    surface.fill_rounded_rect(w * 0.15, h * 0.2, w * 0.7, h * 0.25, radius * 0.3, main)
    surface.stroke_rounded_rect(0, 0, w, h, radius, OUTLINE_COLOR, 2)


def draw_coffee_package(surface: Surface, customizations: Mapping[str, str]) -> None:
    """Dotted bean pattern behind a framed brand label panel."""
    w, h = surface.width, surface.height
    bg = customization_color(customizations, BACKGROUND_KEY, DEFAULT_BACKGROUND)
    brand = customization_color(customizations, BRAND_KEY, "#8B4513")

    surface.fill_rect(0, 0, w, h, bg)

    dot = adjust_brightness(bg, -3)
    x = w * 0.15
    while x < w * 0.85:
        y = h * 0.15
        while y < h * 0.85:
            surface.fill_ellipse(x, y, 3, 3, dot)
            y += 20
        x += 20

    surface.fill_rounded_rect(w * 0.1, h * 0.25, w * 0.8, h * 0.5, 10, brand)
    surface.stroke_rounded_rect(
        w * 0.08, h * 0.23, w * 0.84, h * 0.54, 12, adjust_brightness(brand, -30), 3
    )
    _draw_outline(surface)


def draw_tea_package(surface: Surface, customizations: Mapping[str, str]) -> None:
    """Elegant inset frame with an inner rule and a leaf pattern."""
    w, h = surface.width, surface.height
    bg = customization_color(customizations, BACKGROUND_KEY, DEFAULT_BACKGROUND)
    elegant = customization_color(customizations, ELEGANT_KEY, "#2E8B57")

    surface.fill_rect(0, 0, w, h, bg)

    surface.fill_rect(w * 0.05, h * 0.05, w * 0.9, h * 0.08, elegant)
    surface.fill_rect(w * 0.05, h * 0.87, w * 0.9, h * 0.08, elegant)
    surface.fill_rect(w * 0.05, h * 0.05, w * 0.08, h * 0.9, elegant)
    surface.fill_rect(w * 0.87, h * 0.05, w * 0.08, h * 0.9, elegant)

    surface.stroke_rect(
        w * 0.15, h * 0.15, w * 0.7, h * 0.7, adjust_brightness(elegant, -20), 1
    )

    leaf = adjust_brightness(elegant, 40)
    x = w * 0.2
    while x < w * 0.8:
        y = h * 0.2
        while y < h * 0.8:
            surface.fill_ellipse(x, y, 4, 6, leaf)
            y += 30
        x += 25

    _draw_outline(surface)


def draw_default_shape(surface: Surface, customizations: Mapping[str, str]) -> None:
    """Plain bordered rectangle in the background colour."""
    bg = customization_color(customizations, BACKGROUND_KEY, DEFAULT_BACKGROUND)
    surface.fill_rect(0, 0, surface.width, surface.height, bg)
    surface.stroke_rect(0, 0, surface.width, surface.height, DEFAULT_OUTLINE_COLOR, 2)


SHAPE_STRATEGY_REGISTRY: Dict[str, ShapeStrategy] = {
    "Rice Package": draw_rice_package,
    "Juice Pouch": draw_juice_pouch,
    "Coffee Package": draw_coffee_package,
    "Tea Package": draw_tea_package,
}


def shape_strategy(sub_category: str) -> ShapeStrategy:
    strategy = SHAPE_STRATEGY_REGISTRY.get(sub_category)
    if strategy is None:
        logger.debug(f"No shape strategy for {sub_category!r}; using default")
        return draw_default_shape
    return strategy


def draw_package_shape(
    surface: Surface, sub_category: str, customizations: Mapping[str, str]
) -> None:
    shape_strategy(sub_category)(surface, customizations)

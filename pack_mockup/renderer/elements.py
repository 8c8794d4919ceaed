"""Element drawers.

One drawer per :class:`pack_mockup.types.ElementType`, registered in
:data:`ELEMENT_DRAWERS`. Drawers receive the element, its current value and
the render context, and paint on top of the package background. Colour
elements have no drawer of their own: their values are consumed by the shape
strategies.
"""

from typing import Callable, Dict, Mapping

from pack_mockup.renderer.context import RenderContext
from pack_mockup.renderer.surface import Surface
from pack_mockup.schema import Element
from pack_mockup.state import UploadedImage
from pack_mockup.types import ElementID, ElementType
from pack_mockup.utils.coords import to_device
from pack_mockup.utils.elements import (
    IMAGE_BOX_SIZE,
    bounding_box_size,
    current_position,
    schema_position,
)
from pack_mockup.utils.text import (
    available_text_width,
    base_font_size,
    fit_font_size,
    outline_width,
)

TEXT_FILL = "#FFFFFF"
TEXT_OUTLINE = "#2D3748"
TEXT_BASELINE_OFFSET = 15.0

LOGO_SIZE = (100.0, 60.0)
LOGO_RADIUS = 8
LOGO_FILL = (255, 255, 255, 230)
LOGO_BORDER = "#CBD5E0"
LOGO_TEXT = "#4A5568"
LOGO_FONT_SIZE = 14.0

IMAGE_CLIP_RADIUS = 8

HIGHLIGHT_COLOR = "#3B82F6"
HIGHLIGHT_WIDTH = 3
HIGHLIGHT_DASH = (8, 4)
HIGHLIGHT_PADDING = 5

ElementDrawer = Callable[
    [Surface, Element, str, RenderContext, Mapping[ElementID, UploadedImage]], None
]


def text_font_size(
    surface: Surface, element: Element, text: str, ctx: RenderContext
) -> float:
    """Font size for ``text``: clamped base size, shrunk to fit 80% of the package."""
    size = base_font_size(element.constraints.font_size, ctx.scale)
    measured = surface.measure_text(text, size, bold=True)
    available = available_text_width(ctx.device_width)
    return fit_font_size(size, measured, available)


def draw_text_element(
    surface: Surface,
    element: Element,
    value: str,
    ctx: RenderContext,
    uploaded_images: Mapping[ElementID, UploadedImage],
) -> None:
    """Outlined white text, centred on the package horizontally."""
    size = text_font_size(surface, element, value, ctx)
    y = to_device(schema_position(element).y, ctx.scale)
    surface.draw_text(
        value,
        ctx.device_width / 2,
        y + TEXT_BASELINE_OFFSET * ctx.scale,
        size,
        TEXT_FILL,
        bold=True,
        outline=TEXT_OUTLINE,
        outline_width=outline_width(size),
    )


def draw_logo_element(
    surface: Surface,
    element: Element,
    value: str,
    ctx: RenderContext,
    uploaded_images: Mapping[ElementID, UploadedImage],
) -> None:
    """Translucent rounded panel with the logo text centred inside."""
    origin = to_device(schema_position(element), ctx.scale)
    width, height = LOGO_SIZE[0] * ctx.scale, LOGO_SIZE[1] * ctx.scale
    surface.fill_rounded_rect(origin.x, origin.y, width, height, LOGO_RADIUS, LOGO_FILL)
    surface.stroke_rounded_rect(
        origin.x, origin.y, width, height, LOGO_RADIUS, LOGO_BORDER, 2
    )
    surface.draw_text(
        value,
        origin.x + width / 2,
        origin.y + height / 2,
        LOGO_FONT_SIZE * ctx.scale,
        LOGO_TEXT,
    )


def draw_image_element(
    surface: Surface,
    element: Element,
    value: str,
    ctx: RenderContext,
    uploaded_images: Mapping[ElementID, UploadedImage],
) -> None:
    """Uploaded bitmap clipped to a rounded box; nothing before an upload."""
    uploaded = uploaded_images.get(element.element_id)
    if uploaded is None:
        return
    origin = to_device(current_position(element, uploaded_images), ctx.scale)
    surface.blit_image(
        uploaded.bitmap,
        origin.x,
        origin.y,
        IMAGE_BOX_SIZE[0] * ctx.scale,
        IMAGE_BOX_SIZE[1] * ctx.scale,
        clip_radius=IMAGE_CLIP_RADIUS,
    )


ELEMENT_DRAWERS: Dict[ElementType, ElementDrawer] = {
    ElementType.TEXT: draw_text_element,
    ElementType.LOGO: draw_logo_element,
    ElementType.IMAGE: draw_image_element,
}


def draw_element(
    surface: Surface,
    element: Element,
    value: str,
    ctx: RenderContext,
    uploaded_images: Mapping[ElementID, UploadedImage],
) -> None:
    """Draw one element. Empty values draw nothing, except for image slots."""
    drawer = ELEMENT_DRAWERS.get(element.element_type)
    if drawer is None:
        return
    if not value and element.element_type != ElementType.IMAGE:
        return
    drawer(surface, element, value, ctx, uploaded_images)


def draw_selection(
    surface: Surface,
    element: Element,
    ctx: RenderContext,
    uploaded_images: Mapping[ElementID, UploadedImage],
) -> None:
    """Dashed highlight around the element's interactive box."""
    origin = to_device(current_position(element, uploaded_images), ctx.scale)
    width, height = bounding_box_size(element)
    surface.stroke_rect(
        origin.x - HIGHLIGHT_PADDING,
        origin.y - HIGHLIGHT_PADDING,
        width * ctx.scale + 2 * HIGHLIGHT_PADDING,
        height * ctx.scale + 2 * HIGHLIGHT_PADDING,
        HIGHLIGHT_COLOR,
        HIGHLIGHT_WIDTH,
        dash=HIGHLIGHT_DASH,
    )

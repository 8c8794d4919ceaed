"""Render orchestration.

:func:`render` is a pure function of ``(template, schema, session, config)``:
it computes the scale, allocates a fresh surface, draws the package shape and
then every visible element in schema order, finishing each selected element
with its highlight. Nothing is cached between calls, so identical inputs
always yield pixel-identical output and per-pointer-move redraws are safe.

A failure while drawing the shape or a single element is logged and the
pass continues with a visible default; no exception escapes a render pass.
"""

import math
from typing import Optional

from loguru import logger
from PIL import Image

from pack_mockup.config import DEFAULT_RENDER_CONFIG, RenderConfig
from pack_mockup.renderer.context import RenderContext
from pack_mockup.renderer.elements import draw_element, draw_selection
from pack_mockup.renderer.shapes import draw_default_shape, draw_package_shape
from pack_mockup.renderer.surface import PillowSurface, Surface
from pack_mockup.schema import CustomizationSchema, Template
from pack_mockup.state import Session
from pack_mockup.utils.coords import compute_scale


def _extent(value: float) -> float:
    return value if math.isfinite(value) and value > 0 else 0.0


def _pixels(value: float) -> int:
    # Surfaces are at least 1x1 so a broken template still yields an image
    if not math.isfinite(value):
        return 1
    return max(1, int(round(value)))


def render_context(
    template: Template,
    session: Optional[Session] = None,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> RenderContext:
    dims = template.standard_dimensions
    scale = compute_scale(
        dims.width,
        dims.height,
        config.max_view_width,
        config.max_view_height,
        config.scale_cap,
    )
    return RenderContext(
        scale=scale,
        device_width=_extent(dims.width) * scale,
        device_height=_extent(dims.height) * scale,
        selected_element_id=session.selected_element_id if session else None,
    )


def render_to(
    surface: Surface,
    template: Template,
    schema: CustomizationSchema,
    session: Session,
    ctx: RenderContext,
) -> None:
    """Draw the full mockup onto an existing ``surface``."""
    try:
        draw_package_shape(surface, template.sub_category, session.customizations)
    except Exception:
        logger.exception(f"Shape drawing failed for {template.sub_category!r}")
        draw_default_shape(surface, session.customizations)

    for element in schema.visible_elements:
        value = session.customizations.get(element.element_id, "")
        try:
            draw_element(surface, element, value, ctx, session.uploaded_images)
            if element.element_id == ctx.selected_element_id:
                draw_selection(surface, element, ctx, session.uploaded_images)
        except Exception:
            logger.exception(f"Drawing element {element.element_id!r} failed")


def render(
    template: Template,
    schema: CustomizationSchema,
    session: Session,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> Image.Image:
    """Render the mockup as a new RGBA image sized to the scaled package."""
    ctx = render_context(template, session, config)
    surface = PillowSurface(_pixels(ctx.device_width), _pixels(ctx.device_height), config)
    render_to(surface, template, schema, session, ctx)
    return surface.image


class MockupRenderer:
    config: RenderConfig

    def __init__(self, config: RenderConfig = DEFAULT_RENDER_CONFIG):
        self.config = config

    def context(self, template: Template, session: Session) -> RenderContext:
        return render_context(template, session, self.config)

    def render(
        self, template: Template, schema: CustomizationSchema, session: Session
    ) -> Image.Image:
        return render(template, schema, session, config=self.config)

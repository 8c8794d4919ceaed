from dataclasses import replace

import numpy as np
import pytest

from pack_mockup.renderer import elements as element_drawers
from pack_mockup.renderer import shapes
from pack_mockup.renderer.mockup import MockupRenderer, render, render_context
from pack_mockup.systems.interaction import pointer_down_system
from pack_mockup.types import ElementType, Point
from pack_mockup.utils.color import to_rgba
from tests.test_utils import (
    make_color_elements,
    make_element,
    make_schema,
    make_session,
    make_template,
    with_upload,
)

HIGHLIGHT = (59, 130, 246)


def _has_colour(image, rgb) -> bool:
    return bool(np.any(np.all(np.asarray(image)[..., :3] == rgb, axis=-1)))


def test_render_context_scale_and_size() -> None:
    ctx = render_context(make_template(width=150, height=220))
    assert ctx.scale == pytest.approx(600 / 220)
    assert ctx.device_height == pytest.approx(600)


def test_invalid_dimensions_render_at_unit_scale() -> None:
    template = make_template(width=0, height=0)
    schema = make_schema(*make_color_elements())
    ctx = render_context(template)
    assert ctx.scale == 1.0
    image = render(template, schema, make_session(schema))
    assert image.size == (1, 1)


@pytest.mark.parametrize(
    "width, height", [(float("inf"), 220), (150, float("nan")), (float("-inf"), 0)]
)
def test_non_finite_dimensions_still_render(width, height) -> None:
    template = make_template(width=width, height=height)
    schema = make_schema(*make_color_elements())
    ctx = render_context(template)
    assert ctx.scale == 1.0
    image = render(template, schema, make_session(schema))
    assert image.size[0] >= 1 and image.size[1] >= 1


def test_render_is_idempotent() -> None:
    template = make_template()
    schema = make_schema(
        *make_color_elements(),
        make_element("brand", position=(0, 25), default_value="Premium Rice"),
        make_element("logo", ElementType.LOGO, position=(40, 150), default_value="ACME"),
    )
    state = make_session(schema)
    first = render(template, schema, state)
    second = render(template, schema, state)
    assert first.tobytes() == second.tobytes()


def test_text_element_is_drawn() -> None:
    template = make_template()
    colours = make_color_elements()
    plain = make_schema(*colours)
    with_text = make_schema(*colours, make_element("brand", position=(0, 100), default_value="HELLO"))
    assert (
        render(template, plain, make_session(plain)).tobytes()
        != render(template, with_text, make_session(with_text)).tobytes()
    )


def test_empty_text_draws_nothing() -> None:
    template = make_template()
    colours = make_color_elements()
    plain = make_schema(*colours)
    empty = make_schema(*colours, make_element("brand", position=(0, 100)))
    assert (
        render(template, plain, make_session(plain)).tobytes()
        == render(template, empty, make_session(empty)).tobytes()
    )


def test_excluded_elements_are_not_rendered() -> None:
    template = make_template()
    colours = make_color_elements()
    plain = make_schema(*colours)
    with_mascot = make_schema(
        *colours,
        make_element("mascot", label="Mascot Character", position=(0, 100), default_value="HI"),
    )
    state = make_session(with_mascot)
    assert "mascot" not in state.customizations
    forced = replace(state, customizations=state.customizations.set("mascot", "HI"))
    assert (
        render(template, plain, make_session(plain)).tobytes()
        == render(template, with_mascot, forced).tobytes()
    )


def test_uploaded_image_is_drawn_at_its_position() -> None:
    template = make_template()
    schema = make_schema(
        *make_color_elements(),
        make_element("photo", ElementType.IMAGE, position=(25, 85)),
    )
    state = make_session(schema)
    before = render(template, schema, state)
    assert before.getpixel((150, 250)) == (255, 255, 255, 255)

    state = with_upload(state, "photo")
    after = render(template, schema, state)
    assert after.getpixel((150, 250)) == (255, 0, 0, 255)

    moved = with_upload(state, "photo", position=Point(25, 200))
    image = render(template, schema, moved)
    assert image.getpixel((150, 250)) == (255, 255, 255, 255)
    assert image.getpixel((150, 480)) == (255, 0, 0, 255)


def test_selection_highlight() -> None:
    template = make_template()
    schema = make_schema(
        *make_color_elements(),
        make_element("photo", ElementType.IMAGE, position=(25, 85)),
    )
    state = make_session(schema)
    assert not _has_colour(render(template, schema, state), HIGHLIGHT)

    selected = pointer_down_system(state, schema, Point(30, 90))
    assert selected.selected_element_id == "photo"
    assert _has_colour(render(template, schema, selected), HIGHLIGHT)


def test_failing_shape_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(surface, customizations):
        raise RuntimeError("boom")

    monkeypatch.setitem(shapes.SHAPE_STRATEGY_REGISTRY, "Rice Package", broken)
    template = make_template()
    schema = make_schema(*make_color_elements())
    image = render(template, schema, make_session(schema))
    assert image.getpixel((0, 300)) == to_rgba(shapes.DEFAULT_OUTLINE_COLOR)


def test_failing_element_does_not_abort_render(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(surface, element, value, ctx, uploaded_images):
        raise RuntimeError("boom")

    monkeypatch.setitem(element_drawers.ELEMENT_DRAWERS, ElementType.TEXT, broken)
    template = make_template()
    schema = make_schema(
        *make_color_elements(),
        make_element("brand", position=(0, 25), default_value="Premium Rice"),
        make_element("logo", ElementType.LOGO, position=(40, 150), default_value="ACME"),
    )
    image = MockupRenderer().render(template, schema, make_session(schema))
    assert image.size == (400, 600)
    # The logo after the failing text element is still drawn
    assert _has_colour(image, to_rgba(element_drawers.LOGO_BORDER)[:3])

from dataclasses import replace

import numpy as np
import pytest

from pack_mockup.renderer import shapes
from pack_mockup.renderer.mockup import render
from pack_mockup.renderer.surface import PillowSurface
from pack_mockup.utils.color import to_rgba
from tests.test_utils import make_color_elements, make_schema, make_session, make_template


def _render(sub_category: str, main: str = "#D35400", background: str = "#FFFFFF"):
    template = make_template(sub_category=sub_category)
    schema = make_schema(*make_color_elements(main, background))
    return render(template, schema, make_session(schema))


def test_rice_package_bands_and_panel() -> None:
    image = _render("Rice Package")
    assert image.size == (400, 600)

    main = to_rgba("#D35400")
    for xy in [(200, 20), (10, 300), (390, 300), (200, 580)]:
        assert image.getpixel(xy) == main, xy
    assert image.getpixel((200, 300)) == (255, 255, 255, 255)


def test_rice_package_corner_ornaments() -> None:
    image = _render("Rice Package")
    corner = to_rgba("#a94300")
    # 24px squares anchored at (8%, 12%), (84%, 12%), (8%, 80%), (84%, 80%)
    for xy in [(40, 80), (340, 80), (40, 490), (340, 490)]:
        assert image.getpixel(xy) == corner, xy
    assert image.getpixel((60, 80)) == (255, 255, 255, 255)


def test_unknown_sub_category_uses_default_shape() -> None:
    image = _render("Mystery Box", background="#123456")
    assert image.getpixel((200, 300)) == to_rgba("#123456")
    assert image.getpixel((0, 300)) == to_rgba(shapes.DEFAULT_OUTLINE_COLOR)


def test_shape_strategy_registry() -> None:
    assert shapes.shape_strategy("Rice Package") is shapes.draw_rice_package
    assert shapes.shape_strategy("Juice Pouch") is shapes.draw_juice_pouch
    assert shapes.shape_strategy("Coffee Package") is shapes.draw_coffee_package
    assert shapes.shape_strategy("Tea Package") is shapes.draw_tea_package
    assert shapes.shape_strategy("") is shapes.draw_default_shape


def test_juice_pouch_has_rounded_corners() -> None:
    image = _render("Juice Pouch", main="#FF8C00")
    assert image.getpixel((0, 0))[3] == 0
    assert image.getpixel((200, 300)) == (255, 255, 255, 255)
    # Accent brand area spans 15%..85% horizontally and 20%..45% vertically
    assert image.getpixel((200, 200)) == to_rgba("#FF8C00")


@pytest.mark.parametrize(
    "sub_category, accent_key",
    [("Coffee Package", "brand-color"), ("Tea Package", "elegant-color")],
)
def test_accent_colour_comes_from_its_own_key(sub_category: str, accent_key: str) -> None:
    template = make_template(sub_category=sub_category)
    schema = make_schema(*make_color_elements())
    state = make_session(schema)
    base = render(template, schema, state)
    custom = state.customizations.set(accent_key, "#0000FF")
    recoloured = render(template, schema, replace(state, customizations=custom))
    assert np.any(np.all(np.asarray(recoloured)[..., :3] == (0, 0, 255), axis=-1))
    assert not np.any(np.all(np.asarray(base)[..., :3] == (0, 0, 255), axis=-1))


def test_invalid_colour_customization_falls_back() -> None:
    surface = PillowSurface(100, 100)
    shapes.draw_default_shape(surface, {"background-color": "oops"})
    assert surface.image.getpixel((50, 50)) == (255, 255, 255, 255)

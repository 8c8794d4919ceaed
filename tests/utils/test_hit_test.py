from pyrsistent import pmap

from pack_mockup.state import UploadedImage
from pack_mockup.types import ElementType, Point
from pack_mockup.utils.elements import (
    DEFAULT_ELEMENT_POSITION,
    bounding_box_size,
    current_position,
    hit_test,
    schema_position,
)
from tests.test_utils import make_element, make_schema, solid_bitmap


def test_box_sizes_per_type() -> None:
    assert bounding_box_size(make_element("img", ElementType.IMAGE)) == (100, 80)
    assert bounding_box_size(make_element("txt", ElementType.TEXT)) == (120, 30)
    assert bounding_box_size(make_element("logo", ElementType.LOGO)) == (120, 30)


def test_missing_position_defaults() -> None:
    assert schema_position(make_element("txt")) == DEFAULT_ELEMENT_POSITION
    # An explicit zero coordinate is a real position
    assert schema_position(make_element("txt", position=(0, 0))) == Point(0, 0)


def test_hit_inside_and_outside() -> None:
    element = make_element("txt", position=(10, 10))
    schema = make_schema(element)
    assert hit_test(schema, pmap(), Point(10, 10)) == element
    assert hit_test(schema, pmap(), Point(130, 40)) == element
    assert hit_test(schema, pmap(), Point(131, 40)) is None
    assert hit_test(schema, pmap(), Point(5, 20)) is None


def test_first_element_in_schema_order_wins() -> None:
    first = make_element("first", position=(0, 0))
    second = make_element("second", position=(10, 10))
    schema = make_schema(first, second)
    assert hit_test(schema, pmap(), Point(20, 20)) == first


def test_excluded_elements_are_never_hit() -> None:
    mascot = make_element("mascot", label="Brand Mascot", position=(0, 0))
    text = make_element("txt", position=(0, 0))
    schema = make_schema(mascot, text)
    assert hit_test(schema, pmap(), Point(5, 5)) == text


def test_hit_box_follows_drag_override() -> None:
    image = make_element("img", ElementType.IMAGE, position=(0, 0))
    schema = make_schema(image)
    uploads = pmap({"img": UploadedImage(solid_bitmap(), position=Point(300, 300))})
    assert current_position(image, uploads) == Point(300, 300)
    assert hit_test(schema, uploads, Point(10, 10)) is None
    assert hit_test(schema, uploads, Point(350, 350)) == image

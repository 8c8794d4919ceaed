"""Element geometry helpers: anchor positions, bounding boxes and hit-tests.

All values here are in design units. Bounding boxes are anchored at the
element's *current* top-left position, i.e. the drag override for an image
element that has one.
"""

from typing import Mapping, Optional, Tuple

from pack_mockup.schema import CustomizationSchema, Element
from pack_mockup.state import UploadedImage
from pack_mockup.types import ElementID, ElementType, Point

DEFAULT_ELEMENT_POSITION = Point(50.0, 50.0)

IMAGE_BOX_SIZE: Tuple[float, float] = (100.0, 80.0)
DEFAULT_BOX_SIZE: Tuple[float, float] = (120.0, 30.0)


def bounding_box_size(element: Element) -> Tuple[float, float]:
    """Per-type (width, height) of the interactive box."""
    if element.element_type == ElementType.IMAGE:
        return IMAGE_BOX_SIZE
    return DEFAULT_BOX_SIZE


def schema_position(element: Element) -> Point:
    return element.constraints.position or DEFAULT_ELEMENT_POSITION


def current_position(
    element: Element, uploaded_images: Mapping[ElementID, UploadedImage]
) -> Point:
    """Where the element is drawn now.

    Only image elements with an uploaded bitmap honour a position override;
    everything else is fixed by its schema constraint.
    """
    if element.element_type == ElementType.IMAGE:
        uploaded = uploaded_images.get(element.element_id)
        if uploaded is not None and uploaded.position is not None:
            return uploaded.position
    return schema_position(element)


def contains(element: Element, origin: Point, point: Point) -> bool:
    width, height = bounding_box_size(element)
    return (
        origin.x <= point.x <= origin.x + width
        and origin.y <= point.y <= origin.y + height
    )


def hit_test(
    schema: CustomizationSchema,
    uploaded_images: Mapping[ElementID, UploadedImage],
    point: Point,
) -> Optional[Element]:
    """First visible element (schema order) whose box contains ``point``."""
    for element in schema.visible_elements:
        if contains(element, current_position(element, uploaded_images), point):
            return element
    return None


def is_draggable(
    element: Element, uploaded_images: Mapping[ElementID, UploadedImage]
) -> bool:
    return (
        element.element_type == ElementType.IMAGE
        and element.element_id in uploaded_images
    )

"""Customization schema: the ordered element list plus color schemes.

Element order matters: it is both the draw order (later elements paint over
earlier ones) and the hit-test scan order (first match wins).
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from pack_mockup.schema.color_scheme import ColorScheme
from pack_mockup.schema.element import Element
from pack_mockup.types import ElementID

EXCLUDED_LABEL_KEYWORDS: Tuple[str, ...] = ("character", "mascot")


def is_excluded_label(label: str) -> bool:
    """Return True if an element with ``label`` must never be rendered or edited."""
    lowered = label.lower()
    return any(keyword in lowered for keyword in EXCLUDED_LABEL_KEYWORDS)


@dataclass(frozen=True)
class CustomizationSchema:
    """Editable structure of a template.

    Attributes:
        elements: Ordered element descriptors (ids must be unique).
        color_schemes: Named schemes, in collaborator order.

    Raises:
        ValueError: If two elements share an ``element_id``.
    """

    elements: Tuple[Element, ...] = ()
    color_schemes: Tuple[ColorScheme, ...] = ()

    def __post_init__(self) -> None:
        seen: set[ElementID] = set()
        for element in self.elements:
            if element.element_id in seen:
                raise ValueError(f"Duplicate element id: {element.element_id}")
            seen.add(element.element_id)

    @property
    def visible_elements(self) -> Tuple[Element, ...]:
        """Elements in schema order, minus character / mascot slots."""
        return tuple(e for e in self.elements if not is_excluded_label(e.label))

    def find_element(self, element_id: ElementID) -> Optional[Element]:
        return next((e for e in self.elements if e.element_id == element_id), None)

    def find_visible_element(self, element_id: ElementID) -> Optional[Element]:
        element = self.find_element(element_id)
        if element is None or is_excluded_label(element.label):
            return None
        return element

    def find_scheme(self, name: str) -> Optional[ColorScheme]:
        return next((s for s in self.color_schemes if s.name == name), None)

    @property
    def default_scheme(self) -> Optional[ColorScheme]:
        return next((s for s in self.color_schemes if s.is_default), None)

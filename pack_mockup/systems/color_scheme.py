"""Colour scheme application system.

Scheme colours are matched to colour elements with a two-tier rule, in
scheme order, first match wins:

1. ``application`` tag equal to the lower-cased element label;
2. otherwise, a colour whose lower-cased name contains the lower-cased label.

Scheme colours whose hex is not ``#RRGGBB`` are ignored, and applied colours
are stored in the same upper-case form as edited ones. Elements without a
match keep their prior value.
"""

from dataclasses import replace
from typing import Iterable, Optional

from loguru import logger
from pyrsistent import PMap

from pack_mockup.schema import ColorScheme, CustomizationSchema, Element, SchemeColor
from pack_mockup.state import Session
from pack_mockup.types import ElementID, ElementType
from pack_mockup.utils.color import is_hex_color, normalize_hex


def find_scheme_color(element: Element, scheme: ColorScheme) -> Optional[SchemeColor]:
    label = element.label.lower()
    usable = [c for c in scheme.colors if is_hex_color(c.hex)]
    for color in usable:
        if color.application is not None and color.application.lower() == label:
            return color
    for color in usable:
        if label in color.name.lower():
            return color
    return None


def apply_scheme(
    scheme_name: str,
    elements: Iterable[Element],
    schemes: Iterable[ColorScheme],
    customizations: PMap[ElementID, str],
) -> PMap[ElementID, str]:
    """Return ``customizations`` with matched colour elements rewritten.

    Only colour-type elements are touched. An unknown ``scheme_name`` returns
    the input map unchanged.
    """
    scheme = next((s for s in schemes if s.name == scheme_name), None)
    if scheme is None:
        return customizations

    evolver = customizations.evolver()
    for element in elements:
        if element.element_type != ElementType.COLOR:
            continue
        color = find_scheme_color(element, scheme)
        if color is None:
            continue
        hex_value = normalize_hex(color.hex)
        if hex_value is not None:
            evolver[element.element_id] = hex_value
    return evolver.persistent()


def color_scheme_system(
    state: Session, schema: CustomizationSchema, scheme_name: str
) -> Session:
    """Apply ``scheme_name`` as one atomic session transition."""
    if schema.find_scheme(scheme_name) is None:
        logger.warning(f"Unknown colour scheme: {scheme_name}")
        return state
    customizations = apply_scheme(
        scheme_name, schema.visible_elements, schema.color_schemes, state.customizations
    )
    logger.info(f"Applied {scheme_name} colour scheme")
    return replace(state, customizations=customizations, selected_scheme=scheme_name)

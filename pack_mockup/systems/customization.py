"""Value editing system.

Seeds a fresh :class:`Session` from schema defaults and applies explicit
value edits. Values are never reset silently: only :func:`initial_session`
writes defaults, and only for elements that are not excluded.
"""

from dataclasses import replace
from typing import Optional

from loguru import logger
from pyrsistent import pmap

from pack_mockup.schema import CustomizationSchema
from pack_mockup.state import Session
from pack_mockup.types import ElementID, ElementType
from pack_mockup.utils.color import normalize_hex


def initial_session(schema: CustomizationSchema) -> Session:
    """Build the starting session for ``schema``.

    Every visible element is seeded with its ``default_value`` (empty string
    when absent). The default colour scheme, if any, is recorded as selected
    but not applied: defaults already reflect the template's intended colours.
    """
    customizations = pmap(
        {e.element_id: e.default_value or "" for e in schema.visible_elements}
    )
    default_scheme = schema.default_scheme
    return Session(
        customizations=customizations,
        selected_scheme=default_scheme.name if default_scheme is not None else None,
    )


def set_value_system(
    state: Session, schema: CustomizationSchema, element_id: ElementID, value: str
) -> Session:
    """Apply an explicit edit to one element value.

    Args:
        state (Session): Current session.
        schema (CustomizationSchema): Schema the session was seeded from.
        element_id (str): Target element.
        value (str): New raw value as typed / picked by the operator.

    Returns:
        Session: Updated session. Unchanged if the element is unknown,
        excluded, an image slot, or the value is not a valid ``#RRGGBB``
        colour for a colour element. Text is truncated to ``max_length``.
    """
    element = schema.find_visible_element(element_id)
    if element is None or element.element_type == ElementType.IMAGE:
        return state

    new_value: Optional[str] = value
    if element.element_type == ElementType.COLOR:
        new_value = normalize_hex(value)
        if new_value is None:
            logger.warning(f"Ignoring invalid colour {value!r} for {element_id}")
            return state
    elif element.constraints.max_length is not None:
        new_value = value[: element.constraints.max_length]

    return replace(state, customizations=state.customizations.set(element_id, new_value))


def select_system(
    state: Session, schema: CustomizationSchema, element_id: Optional[ElementID]
) -> Session:
    """Select an element directly; ends any drag in progress."""
    if element_id is not None and schema.find_visible_element(element_id) is None:
        return state
    return replace(state, selected_element_id=element_id, drag=None)

"""Pointer interaction system: hit-testing and the select / drag machine.

Phases (see :class:`pack_mockup.state.InteractionPhase`):

* ``IDLE`` -> ``SELECTED(id)`` on a pointer-down that hits an element.
* ``SELECTED`` / ``IDLE`` -> ``DRAGGING(id, offset)`` when the hit element is
  an image with an uploaded bitmap.
* ``DRAGGING`` -> ``SELECTED`` on pointer-up.

A pointer-down on an image slot without a bitmap raises the file picker
signal instead of dragging. Dragging is unbounded: artwork may be moved
outside the package outline.

All points handled here are already in design space.
"""

from dataclasses import replace

from pack_mockup.schema import CustomizationSchema
from pack_mockup.state import DragSession, Session
from pack_mockup.types import ElementType, Point
from pack_mockup.utils.elements import current_position, hit_test, is_draggable


def pointer_down_system(
    state: Session, schema: CustomizationSchema, point: Point
) -> Session:
    """Select (and possibly start dragging) the first element under ``point``.

    Args:
        state (Session): Current session.
        schema (CustomizationSchema): Schema providing element geometry.
        point (Point): Pointer position in design units.

    Returns:
        Session: Session with updated selection, drag and file-picker signal.
        A miss clears the selection.
    """
    element = hit_test(schema, state.uploaded_images, point)
    if element is None:
        return replace(state, selected_element_id=None, drag=None)

    drag = None
    file_picker_request = state.file_picker_request
    if is_draggable(element, state.uploaded_images):
        origin = current_position(element, state.uploaded_images)
        drag = DragSession(element_id=element.element_id, pointer_offset=point - origin)
    elif element.element_type == ElementType.IMAGE:
        file_picker_request = element.element_id

    return replace(
        state,
        selected_element_id=element.element_id,
        drag=drag,
        file_picker_request=file_picker_request,
    )


def pointer_move_system(state: Session, point: Point) -> Session:
    """Move the dragged image so the grab offset is preserved. No-op otherwise."""
    drag = state.drag
    if drag is None:
        return state
    uploaded = state.uploaded_images.get(drag.element_id)
    if uploaded is None:
        return replace(state, drag=None)
    moved = replace(uploaded, position=point - drag.pointer_offset)
    return replace(
        state, uploaded_images=state.uploaded_images.set(drag.element_id, moved)
    )


def pointer_up_system(state: Session) -> Session:
    if state.drag is None:
        return state
    return replace(state, drag=None)

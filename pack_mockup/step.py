"""Session reducer.

:func:`step` is the single entry point for session mutation. It is pure: it
returns a *new* :class:`pack_mockup.state.Session` and never touches the
input. Pointer events arrive in device space and are converted to design
space with the render scale current at the time of the event.
"""

from pack_mockup.actions import (
    ApplyScheme,
    DismissFilePicker,
    Event,
    ImageDecoded,
    PointerDown,
    PointerMove,
    PointerUp,
    RemoveImage,
    SelectElement,
    SetValue,
    UploadFailed,
)
from pack_mockup.schema import CustomizationSchema
from pack_mockup.state import Session
from pack_mockup.systems.color_scheme import color_scheme_system
from pack_mockup.systems.customization import select_system, set_value_system
from pack_mockup.systems.interaction import (
    pointer_down_system,
    pointer_move_system,
    pointer_up_system,
)
from pack_mockup.systems.upload import (
    dismiss_file_picker_system,
    image_decoded_system,
    remove_image_system,
    upload_failed_system,
)
from pack_mockup.utils.coords import FALLBACK_SCALE, to_design


def step(
    state: Session,
    schema: CustomizationSchema,
    event: Event,
    scale: float = FALLBACK_SCALE,
) -> Session:
    """Apply one editing event.

    Args:
        state (Session): Previous immutable session.
        schema (CustomizationSchema): Schema the session belongs to.
        event (Event): Event to apply.
        scale (float): Current design-to-device scale, used for pointer
            events only. Non-positive values fall back to 1.

    Returns:
        Session: Next session snapshot; may be the same object when the event
        has no effect.

    Raises:
        ValueError: If the event type is not recognized.
    """
    if scale <= 0:
        scale = FALLBACK_SCALE

    if isinstance(event, SetValue):
        return set_value_system(state, schema, event.element_id, event.value)
    if isinstance(event, ApplyScheme):
        return color_scheme_system(state, schema, event.name)
    if isinstance(event, SelectElement):
        return select_system(state, schema, event.element_id)
    if isinstance(event, PointerDown):
        return pointer_down_system(state, schema, to_design(event.point, scale))
    if isinstance(event, PointerMove):
        return pointer_move_system(state, to_design(event.point, scale))
    if isinstance(event, PointerUp):
        return pointer_up_system(state)
    if isinstance(event, ImageDecoded):
        return image_decoded_system(
            state,
            schema,
            event.element_id,
            event.bitmap,
            filename=event.filename,
            mime_type=event.mime_type,
        )
    if isinstance(event, UploadFailed):
        return upload_failed_system(state, event.element_id, event.reason)
    if isinstance(event, RemoveImage):
        return remove_image_system(state, event.element_id)
    if isinstance(event, DismissFilePicker):
        return dismiss_file_picker_system(state)
    raise ValueError(f"Event is not valid: {event!r}")

"""Uploaded artwork bookkeeping.

Decoding happens outside the reducer (see :mod:`pack_mockup.decode`); these
systems only fold the outcome into the session.
"""

from dataclasses import replace

from loguru import logger
from PIL import Image

from pack_mockup.schema import CustomizationSchema
from pack_mockup.state import Session, UploadedImage
from pack_mockup.types import ElementID, ElementType


def image_decoded_system(
    state: Session,
    schema: CustomizationSchema,
    element_id: ElementID,
    bitmap: Image.Image,
    filename: str = "",
    mime_type: str = "",
) -> Session:
    """Attach a decoded bitmap to an image element.

    A re-upload replaces the previous bitmap and drops its position override.
    Non-image or excluded targets leave the session unchanged.
    """
    element = schema.find_visible_element(element_id)
    if element is None or element.element_type != ElementType.IMAGE:
        logger.warning(f"Discarding decoded image for non-image element {element_id}")
        return state

    uploaded = UploadedImage(bitmap=bitmap, filename=filename, mime_type=mime_type)
    file_picker_request = state.file_picker_request
    if file_picker_request == element_id:
        file_picker_request = None
    drag = state.drag if state.drag is None or state.drag.element_id != element_id else None
    return replace(
        state,
        uploaded_images=state.uploaded_images.set(element_id, uploaded),
        file_picker_request=file_picker_request,
        drag=drag,
        message=None,
    )


def upload_failed_system(state: Session, element_id: ElementID, reason: str) -> Session:
    """Record a user-visible notice; artwork state is untouched so a retry works."""
    return replace(state, message=reason)


def remove_image_system(state: Session, element_id: ElementID) -> Session:
    if element_id not in state.uploaded_images:
        return state
    drag = state.drag if state.drag is None or state.drag.element_id != element_id else None
    return replace(
        state, uploaded_images=state.uploaded_images.remove(element_id), drag=drag
    )


def dismiss_file_picker_system(state: Session) -> Session:
    if state.file_picker_request is None:
        return state
    return replace(state, file_picker_request=None)

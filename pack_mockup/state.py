"""Immutable editing-session state.

This module defines the frozen :class:`Session` record that represents the
whole interactive state of one customization session: element values,
uploaded artwork, selection, the transient drag session and the pending
file-picker signal. All systems are pure functions that take a previous
``Session`` plus inputs and return a *new* ``Session``; nothing is mutated in
place. This keeps the interaction state machine independent of any UI
toolkit and easy to test.

Design notes:

* Per-element stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``ElementID``. Absence of a key in ``uploaded_images`` means the image
    slot has no bitmap yet.
* The pointer state machine is encoded by two fields: ``selected_element_id``
    (``Selected``) and ``drag`` (``Dragging``). ``drag`` is only ever set
    together with a selection of the same element.
* ``file_picker_request`` is an outbound signal for the UI layer; it is
    cleared by :class:`pack_mockup.actions.DismissFilePicker` or by a
    successful upload.

See :mod:`pack_mockup.step` for how the reducer dispatches events.
"""

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any, Optional

from PIL import Image
from pyrsistent import PMap, pmap

from pack_mockup.types import ElementID, Point


class InteractionPhase(StrEnum):
    """Pointer state machine phases."""

    IDLE = auto()
    SELECTED = auto()
    DRAGGING = auto()


@dataclass(frozen=True)
class UploadedImage:
    """Decoded artwork for an image element.

    Attributes:
        bitmap: Decoded RGBA bitmap.
        position: Design-space override set by dragging, ``None`` until moved.
        filename: Original file name reported by the uploader.
        mime_type: MIME type reported by the uploader.
    """

    bitmap: Image.Image = field(repr=False)
    position: Optional[Point] = None
    filename: str = ""
    mime_type: str = ""


@dataclass(frozen=True)
class DragSession:
    """Transient drag bookkeeping.

    Attributes:
        element_id: Image element being dragged.
        pointer_offset: Pointer position minus image position at grab time,
            in design units.
    """

    element_id: ElementID
    pointer_offset: Point


def _point(point: Optional[Point]) -> Optional[PMap[str, float]]:
    if point is None:
        return None
    return pmap({"x": point.x, "y": point.y})


@dataclass(frozen=True)
class Session:
    """Immutable customization session.

    Attributes:
        customizations (PMap[ElementID, str]): Element values (text, hex
            colour or logo text), seeded from schema defaults.
        uploaded_images (PMap[ElementID, UploadedImage]): Decoded artwork per
            image element.
        selected_element_id (str | None): Currently selected element.
        drag (DragSession | None): Active drag, if a pointer is held on an
            image.
        selected_scheme (str | None): Name of the last applied (or default)
            colour scheme.
        file_picker_request (str | None): Image element whose empty slot was
            clicked and needs a file.
        message (str | None): Last user-facing notice (rejections, failures).
    """

    customizations: PMap[ElementID, str] = pmap()
    uploaded_images: PMap[ElementID, UploadedImage] = pmap()
    selected_element_id: Optional[ElementID] = None
    drag: Optional[DragSession] = None
    selected_scheme: Optional[str] = None
    file_picker_request: Optional[ElementID] = None
    message: Optional[str] = None

    @property
    def phase(self) -> InteractionPhase:
        if self.drag is not None:
            return InteractionPhase.DRAGGING
        if self.selected_element_id is not None:
            return InteractionPhase.SELECTED
        return InteractionPhase.IDLE

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse, JSON-friendly summary for diagnostics.

        Bitmaps are summarised by size so the result can be dumped into a UI
        inspector without serialising pixels.
        """
        description: PMap[str, Any] = pmap(
            {
                "phase": self.phase.value,
                "customizations": self.customizations,
            }
        )
        if self.uploaded_images:
            description = description.set(
                "uploaded_images",
                pmap(
                    {
                        eid: pmap(
                            {
                                "size": upload.bitmap.size,
                                "position": _point(upload.position),
                                "filename": upload.filename,
                            }
                        )
                        for eid, upload in self.uploaded_images.items()
                    }
                ),
            )
        if self.drag is not None:
            description = description.set(
                "drag",
                pmap(
                    {
                        "element_id": self.drag.element_id,
                        "pointer_offset": _point(self.drag.pointer_offset),
                    }
                ),
            )
        for name in (
            "selected_element_id",
            "selected_scheme",
            "file_picker_request",
            "message",
        ):
            value = getattr(self, name)
            if value is not None:
                description = description.set(name, value)
        return description

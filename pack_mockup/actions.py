"""Editing events.

Every state change in a session is expressed as one of the frozen event
records below and applied by :func:`pack_mockup.step.step`. Pointer events
carry *device-space* coordinates; the reducer converts them with the current
render scale.

``Event`` is the closed union of all members; checks like
``isinstance(event, POINTER_EVENTS)`` are preferred over type-name
comparisons.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from PIL import Image

from pack_mockup.types import ElementID, Point


@dataclass(frozen=True)
class SetValue:
    """Edit a text / colour / logo value."""

    element_id: ElementID
    value: str


@dataclass(frozen=True)
class ApplyScheme:
    """Bulk-apply a named colour scheme to colour elements."""

    name: str


@dataclass(frozen=True)
class SelectElement:
    """Select an element from outside the canvas (e.g. a side panel)."""

    element_id: Optional[ElementID]


@dataclass(frozen=True)
class PointerDown:
    point: Point


@dataclass(frozen=True)
class PointerMove:
    point: Point


@dataclass(frozen=True)
class PointerUp:
    pass


@dataclass(frozen=True)
class ImageDecoded:
    """A decode future resolved successfully for ``element_id``."""

    element_id: ElementID
    bitmap: Image.Image = field(repr=False)
    filename: str = ""
    mime_type: str = ""


@dataclass(frozen=True)
class UploadFailed:
    """An upload was rejected or failed to decode; ``reason`` is user-facing."""

    element_id: ElementID
    reason: str


@dataclass(frozen=True)
class RemoveImage:
    element_id: ElementID


@dataclass(frozen=True)
class DismissFilePicker:
    pass


Event = Union[
    SetValue,
    ApplyScheme,
    SelectElement,
    PointerDown,
    PointerMove,
    PointerUp,
    ImageDecoded,
    UploadFailed,
    RemoveImage,
    DismissFilePicker,
]

POINTER_EVENTS = (PointerDown, PointerMove, PointerUp)

"""Common type aliases and enumerations.

``ElementID`` keys every per-element store on the session state;
``HexColor`` values are always ``#RRGGBB`` strings.
"""

from dataclasses import dataclass
from enum import StrEnum


ElementID = str
HexColor = str
RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, int]


class ElementType(StrEnum):
    """Kinds of customizable template regions."""

    TEXT = "text"
    COLOR = "color"
    LOGO = "logo"
    IMAGE = "image"
    OTHER = "other"


class ExportFormat(StrEnum):
    """Raster formats supported by the exporter."""

    PNG = "png"
    JPEG = "jpeg"


@dataclass(frozen=True)
class Point:
    """2D coordinate, in design or device space depending on context.

    Attributes:
        x: Horizontal offset (0 at left).
        y: Vertical offset (0 at top).
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

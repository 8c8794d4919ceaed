"""Customizable element descriptors.

Elements are immutable value objects describing one editable region of a
template. Geometry lives in ``constraints``; the editable value lives in the
session state keyed by ``element_id``.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from pack_mockup.types import ElementID, ElementType, HexColor, Point


@dataclass(frozen=True)
class FontSizeRange:
    """Allowed font size range for text elements (device pixels)."""

    min: float
    max: float


@dataclass(frozen=True)
class ColorOption:
    """Preset swatch offered for a color element."""

    name: str
    hex: HexColor
    pantone: Optional[str] = None


@dataclass(frozen=True)
class Constraints:
    """Layout and input constraints.

    Attributes:
        position: Top-left anchor in design units, ``None`` if unspecified.
        font_size: Font size limits for text elements.
        max_length: Maximum number of characters for text values.
        locked: Informational flag carried over from the template record.
    """

    position: Optional[Point] = None
    font_size: Optional[FontSizeRange] = None
    max_length: Optional[int] = None
    locked: bool = False


@dataclass(frozen=True)
class Element:
    """A single customizable region of a template.

    Attributes:
        element_id: Unique key within the schema.
        label: Display label; also used for scheme matching and exclusion.
        element_type: Region kind, drives rendering and interaction.
        constraints: Layout / input constraints.
        color_options: Preset swatches (color elements only).
        default_value: Initial value seeded into the session.
    """

    element_id: ElementID
    label: str
    element_type: ElementType
    constraints: Constraints = Constraints()
    color_options: Tuple[ColorOption, ...] = ()
    default_value: str = ""

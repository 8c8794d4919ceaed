"""Named color schemes that can be bulk-applied to color elements."""

from dataclasses import dataclass
from typing import Optional, Tuple

from pack_mockup.types import HexColor


@dataclass(frozen=True)
class SchemeColor:
    """One colour of a scheme.

    ``application`` is a free-form tag such as ``"background"`` or
    ``"primary"``; it is compared against element labels when applying.
    """

    name: str
    hex: HexColor
    application: Optional[str] = None


@dataclass(frozen=True)
class ColorScheme:
    name: str
    colors: Tuple[SchemeColor, ...] = ()
    is_default: bool = False
    description: str = ""

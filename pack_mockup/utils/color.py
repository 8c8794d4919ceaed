import re
from typing import Optional

import numpy as np
import numpy.typing as npt

from pack_mockup.types import RGB, RGBA, HexColor

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def parse_hex(value: str) -> Optional[RGB]:
    """Parse ``#RRGGBB`` (leading ``#`` optional) into an RGB tuple, or None."""
    match = HEX_PATTERN.match(value.strip()) if value else None
    if match is None:
        return None
    r, g, b = (int(part, 16) for part in match.groups())
    return r, g, b


def is_hex_color(value: str) -> bool:
    return parse_hex(value) is not None


def normalize_hex(value: str) -> Optional[HexColor]:
    """Canonical upper-case ``#RRGGBB`` form, or None for malformed input."""
    rgb = parse_hex(value)
    if rgb is None:
        return None
    return "#{:02X}{:02X}{:02X}".format(*rgb)


def to_hex(rgb: RGB) -> HexColor:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def to_rgba(value: str, alpha: int = 255, fallback: RGB = (0, 0, 0)) -> RGBA:
    """Resolve a hex string to an RGBA tuple; malformed input uses ``fallback``."""
    r, g, b = parse_hex(value) or fallback
    return r, g, b, alpha


def adjust_brightness(value: HexColor, percent: float) -> HexColor:
    """Scale each RGB channel by ``percent`` of itself.

    Each channel becomes ``c + c * percent / 100``, clamped to ``[0, 255]``
    and rounded half-up. Pure black therefore stays black. Malformed input is
    returned unchanged so callers can pass user-typed values straight in.

    Args:
        value (str): ``#RRGGBB`` colour.
        percent (float): Signed adjustment, e.g. ``-20`` darkens by 20%.

    Returns:
        str: Lower-case ``#rrggbb`` colour.
    """
    rgb = parse_hex(value)
    if rgb is None:
        return value
    channels: npt.NDArray[np.float64] = np.array(rgb, dtype=np.float64)
    channels = np.clip(channels + channels * percent / 100.0, 0.0, 255.0)
    r, g, b = (int(c) for c in np.floor(channels + 0.5))
    return to_hex((r, g, b))

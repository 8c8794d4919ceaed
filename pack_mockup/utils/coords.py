"""Design-space <-> device-space transforms.

A single uniform ``scale`` maps design units (a template's standard
dimensions) to device pixels. All helpers are pure.
"""

import math
from typing import Optional, Union, overload

from pack_mockup.types import Point

FALLBACK_SCALE = 1.0


def _positive(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def compute_scale(
    design_width: Optional[float],
    design_height: Optional[float],
    max_view_width: float,
    max_view_height: float,
    scale_cap: float,
) -> float:
    """Largest uniform scale that fits the design into the view box.

    Args:
        design_width (float | None): Template width in design units.
        design_height (float | None): Template height in design units.
        max_view_width (float): Available width in device pixels.
        max_view_height (float): Available height in device pixels.
        scale_cap (float): Upper bound for the returned scale.

    Returns:
        float: ``min(max_view_width / design_width, max_view_height /
        design_height, scale_cap)``, or ``FALLBACK_SCALE`` when any input is
        missing, zero, negative or not finite.
    """
    if (
        design_width is None
        or design_height is None
        or not all(
            _positive(v)
            for v in (design_width, design_height, max_view_width, max_view_height, scale_cap)
        )
    ):
        return FALLBACK_SCALE
    return min(max_view_width / design_width, max_view_height / design_height, scale_cap)


@overload
def to_device(p: float, scale: float) -> float: ...
@overload
def to_device(p: Point, scale: float) -> Point: ...
def to_device(p: Union[float, Point], scale: float) -> Union[float, Point]:
    if isinstance(p, Point):
        return Point(p.x * scale, p.y * scale)
    return p * scale


@overload
def to_design(p: float, scale: float) -> float: ...
@overload
def to_design(p: Point, scale: float) -> Point: ...
def to_design(p: Union[float, Point], scale: float) -> Union[float, Point]:
    if isinstance(p, Point):
        return Point(p.x / scale, p.y / scale)
    return p / scale

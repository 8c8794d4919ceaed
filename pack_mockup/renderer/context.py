from dataclasses import dataclass
from typing import Optional

from pack_mockup.types import ElementID


@dataclass(frozen=True)
class RenderContext:
    """Per-pass render parameters.

    Attributes:
        scale: Uniform design-to-device scale.
        device_width: Package width in device pixels (unrounded).
        device_height: Package height in device pixels (unrounded).
        selected_element_id: Element to highlight, if any.
    """

    scale: float
    device_width: float
    device_height: float
    selected_element_id: Optional[ElementID] = None

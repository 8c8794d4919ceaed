"""pack_mockup.schema
=====================

Aggregate import surface for the immutable data model consumed from the
template collaborator: templates, element descriptors, color schemes and the
customization schema that groups them.

All classes are frozen ``@dataclass`` value objects; they carry no behaviour
beyond small lookup helpers. Editing happens on
:class:`pack_mockup.state.Session`, never on these records::

    from pack_mockup.schema import Element, Template, CustomizationSchema
"""

from .template import Dimensions, Template
from .element import ColorOption, Constraints, Element, FontSizeRange
from .color_scheme import ColorScheme, SchemeColor
from .customization import (
    EXCLUDED_LABEL_KEYWORDS,
    CustomizationSchema,
    is_excluded_label,
)

__all__ = [
    "ColorOption",
    "ColorScheme",
    "Constraints",
    "CustomizationSchema",
    "Dimensions",
    "Element",
    "EXCLUDED_LABEL_KEYWORDS",
    "FontSizeRange",
    "SchemeColor",
    "Template",
    "is_excluded_label",
]

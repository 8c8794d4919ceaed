"""Template record.

A ``Template`` carries the identity of a package design plus the
``sub_category`` that selects its shape strategy and the standard dimensions
that define its design space.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Dimensions:
    """Design-space size of a template.

    Attributes:
        width: Package width in design units.
        height: Package height in design units.
        unit: Physical unit label (informational only).
    """

    width: float
    height: float
    unit: str = "mm"


@dataclass(frozen=True)
class Template:
    """Parametric package template.

    Attributes:
        id: Collaborator-assigned identifier.
        name: Human readable name (also used for export filenames).
        category: Packaging category (e.g. "Food Packaging").
        sub_category: Shape-strategy key (e.g. "Rice Package").
        standard_dimensions: Native design-space size.
    """

    id: str
    name: str
    category: str
    sub_category: str
    standard_dimensions: Dimensions

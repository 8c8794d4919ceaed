"""Conversion between collaborator JSON records and model dataclasses.

The template service speaks camelCase JSON. Records may carry the template
and its customization data in one object (``customizableElements`` plus
``flexoSpecs.standardDimensions``) or split across a template record and a
customization response (``elements`` / ``colorSchemes``). Both shapes are
accepted.

Parsing is lenient: a dimension that is not a finite number becomes ``0``
(the renderer then falls back to scale 1), and an unrecognised element type
becomes :attr:`ElementType.OTHER`.
"""

import math
from typing import Any, Dict, List, Mapping, Optional

from pack_mockup.schema.color_scheme import ColorScheme, SchemeColor
from pack_mockup.schema.customization import CustomizationSchema
from pack_mockup.schema.element import (
    ColorOption,
    Constraints,
    Element,
    FontSizeRange,
)
from pack_mockup.schema.template import Dimensions, Template
from pack_mockup.types import ElementType, Point

Record = Mapping[str, Any]


def _optional_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # "inf" and "nan" parse as floats but are not usable coordinates
    return number if math.isfinite(number) else None


def _number(value: Any, default: float = 0.0) -> float:
    number = _optional_number(value)
    return default if number is None else number


def _dimensions_record(record: Record) -> Record:
    flexo = record.get("flexoSpecs") or {}
    return flexo.get("standardDimensions") or record.get("standardDimensions") or {}


def dimensions_from_record(record: Record) -> Dimensions:
    return Dimensions(
        width=_number(record.get("width")),
        height=_number(record.get("height")),
        unit=str(record.get("unit") or "mm"),
    )


def template_from_record(record: Record) -> Template:
    """Build a :class:`Template` from a collaborator template record."""
    return Template(
        id=str(record.get("id") or record.get("_id") or record.get("templateId") or ""),
        name=str(record.get("name") or record.get("templateName") or ""),
        category=str(record.get("category") or ""),
        sub_category=str(record.get("subCategory") or ""),
        standard_dimensions=dimensions_from_record(_dimensions_record(record)),
    )


def _position_from_record(record: Optional[Record]) -> Optional[Point]:
    if not record:
        return None
    x = _optional_number(record.get("x"))
    y = _optional_number(record.get("y"))
    if x is None or y is None:
        return None
    return Point(x, y)


def _font_size_from_record(record: Optional[Record]) -> Optional[FontSizeRange]:
    if not record:
        return None
    lo = _optional_number(record.get("min"))
    hi = _optional_number(record.get("max"))
    if lo is None and hi is None:
        return None
    return FontSizeRange(min=lo if lo is not None else 10.0, max=hi if hi is not None else 16.0)


def constraints_from_record(record: Optional[Record]) -> Constraints:
    if not record:
        return Constraints()
    position_record = record.get("position")
    max_length = _optional_number(record.get("maxLength"))
    return Constraints(
        position=_position_from_record(position_record),
        font_size=_font_size_from_record(record.get("fontSize")),
        max_length=int(max_length) if max_length is not None else None,
        locked=bool((position_record or {}).get("locked", False)),
    )


def element_type_from_value(value: Any) -> ElementType:
    try:
        return ElementType(str(value).lower())
    except ValueError:
        return ElementType.OTHER


def element_from_record(record: Record) -> Element:
    constraints_record = record.get("constraints") or {}
    # Swatches live on the element in stored templates and under constraints
    # in some customization responses.
    options = record.get("colorOptions") or constraints_record.get("colorOptions") or []
    return Element(
        element_id=str(record["elementId"]),
        label=str(record.get("label") or ""),
        element_type=element_type_from_value(record.get("elementType")),
        constraints=constraints_from_record(constraints_record),
        color_options=tuple(
            ColorOption(
                name=str(option.get("name") or ""),
                hex=str(option.get("hex") or ""),
                pantone=option.get("pantone"),
            )
            for option in options
        ),
        default_value=str(record.get("defaultValue") or ""),
    )


def color_scheme_from_record(record: Record) -> ColorScheme:
    return ColorScheme(
        name=str(record.get("name") or ""),
        colors=tuple(
            SchemeColor(
                name=str(color.get("name") or ""),
                hex=str(color.get("hex") or ""),
                application=color.get("application"),
            )
            for color in record.get("colors") or []
        ),
        is_default=bool(record.get("isDefault", False)),
        description=str(record.get("description") or ""),
    )


def schema_from_record(record: Record) -> CustomizationSchema:
    """Build a :class:`CustomizationSchema` from a customization response.

    Raises:
        ValueError: If element ids are not unique.
        KeyError: If an element record has no ``elementId``.
    """
    elements = record.get("elements")
    if elements is None:
        elements = record.get("customizableElements") or []
    return CustomizationSchema(
        elements=tuple(element_from_record(e) for e in elements),
        color_schemes=tuple(
            color_scheme_from_record(s) for s in record.get("colorSchemes") or []
        ),
    )


def _point_record(point: Optional[Point]) -> Optional[Dict[str, float]]:
    if point is None:
        return None
    return {"x": point.x, "y": point.y}


def element_to_record(element: Element) -> Dict[str, Any]:
    constraints: Dict[str, Any] = {}
    if element.constraints.position is not None:
        constraints["position"] = {
            **(_point_record(element.constraints.position) or {}),
            "locked": element.constraints.locked,
        }
    if element.constraints.font_size is not None:
        constraints["fontSize"] = {
            "min": element.constraints.font_size.min,
            "max": element.constraints.font_size.max,
        }
    if element.constraints.max_length is not None:
        constraints["maxLength"] = element.constraints.max_length
    record: Dict[str, Any] = {
        "elementId": element.element_id,
        "elementType": element.element_type.value,
        "label": element.label,
        "defaultValue": element.default_value,
        "constraints": constraints,
    }
    if element.color_options:
        record["colorOptions"] = [
            {"name": o.name, "hex": o.hex, "pantone": o.pantone}
            for o in element.color_options
        ]
    return record


def color_scheme_to_record(scheme: ColorScheme) -> Dict[str, Any]:
    return {
        "name": scheme.name,
        "description": scheme.description,
        "isDefault": scheme.is_default,
        "colors": [
            {"name": c.name, "hex": c.hex, "application": c.application}
            for c in scheme.colors
        ],
    }


def to_record(template: Template, schema: CustomizationSchema) -> Dict[str, Any]:
    """Serialize a template and its schema into one collaborator record."""
    dims = template.standard_dimensions
    elements: List[Dict[str, Any]] = [element_to_record(e) for e in schema.elements]
    return {
        "id": template.id,
        "name": template.name,
        "category": template.category,
        "subCategory": template.sub_category,
        "flexoSpecs": {
            "standardDimensions": {
                "width": dims.width,
                "height": dims.height,
                "unit": dims.unit,
            }
        },
        "customizableElements": elements,
        "colorSchemes": [color_scheme_to_record(s) for s in schema.color_schemes],
    }


__all__ = [
    "color_scheme_from_record",
    "color_scheme_to_record",
    "constraints_from_record",
    "dimensions_from_record",
    "element_from_record",
    "element_to_record",
    "element_type_from_value",
    "schema_from_record",
    "template_from_record",
    "to_record",
]

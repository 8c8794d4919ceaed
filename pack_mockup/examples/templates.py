"""Sample template catalog.

Four ready-made packaging templates (rice, juice pouch, coffee and tea), one
per built-in shape strategy. They are kept as collaborator-style records and
parsed through :mod:`pack_mockup.schema.convert`, so they double as fixtures
for the record format.
"""

from typing import Any, Dict, List, Optional, Tuple

from pack_mockup.schema import CustomizationSchema, Template
from pack_mockup.schema.convert import schema_from_record, template_from_record

SampleTemplate = Tuple[Template, CustomizationSchema]


def _position(x: float, y: float, locked: bool = False) -> Dict[str, Any]:
    return {"x": x, "y": y, "locked": locked}


def _text(
    element_id: str,
    label: str,
    default: str,
    max_length: int,
    font_size: Tuple[int, int],
    y: float,
) -> Dict[str, Any]:
    return {
        "elementId": element_id,
        "elementType": "text",
        "label": label,
        "defaultValue": default,
        "constraints": {
            "maxLength": max_length,
            "fontSize": {"min": font_size[0], "max": font_size[1]},
            "position": _position(0, y),
        },
    }


def _color(
    element_id: str,
    label: str,
    default: str,
    options: Optional[List[Tuple[str, str, str]]] = None,
) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "elementId": element_id,
        "elementType": "color",
        "label": label,
        "defaultValue": default,
        "constraints": {"position": _position(0, 0, locked=True)},
    }
    if options:
        record["colorOptions"] = [
            {"name": name, "hex": hex_value, "pantone": pantone}
            for name, hex_value, pantone in options
        ]
    return record


RICE_PACKAGE: Dict[str, Any] = {
    "id": "premium-rice-package",
    "name": "Premium Rice Package",
    "category": "Food Packaging",
    "subCategory": "Rice Package",
    "flexoSpecs": {"standardDimensions": {"width": 150, "height": 220, "unit": "mm"}},
    "customizableElements": [
        _text("brand-name", "Brand Name", "Premium Rice", 20, (12, 22), 25),
        _text("rice-variety", "Rice Variety", "Basmati Rice", 30, (10, 18), 50),
        {
            "elementId": "rice-image",
            "elementType": "image",
            "label": "Rice Image",
            "defaultValue": "",
            "constraints": {"position": _position(25, 85)},
        },
        _text(
            "origin-info",
            "Origin Information",
            "Premium Quality from India",
            35,
            (8, 14),
            150,
        ),
        _color(
            "main-color",
            "Main Color",
            "#D35400",
            [
                ("Golden", "#D35400", "PMS 166"),
                ("Royal Blue", "#2874A6", "PMS 2925"),
                ("Deep Red", "#A93226", "PMS 1807"),
            ],
        ),
        _color("background-color", "Background Color", "#FFFFFF"),
    ],
    "colorSchemes": [
        {
            "name": "Golden Harvest",
            "description": "Warm golden colors representing quality rice",
            "isDefault": True,
            "colors": [
                {"name": "Golden Orange", "hex": "#D35400", "application": "primary"},
                {"name": "Warm White", "hex": "#FDF2E9", "application": "background"},
                {"name": "Dark Brown", "hex": "#6E2C00", "application": "text"},
                {"name": "Light Gold", "hex": "#F8C471", "application": "accent"},
            ],
        }
    ],
}

JUICE_POUCH: Dict[str, Any] = {
    "id": "fresh-juice-pouch",
    "name": "Fresh Juice Pouch",
    "category": "Beverage Packaging",
    "subCategory": "Juice Pouch",
    "flexoSpecs": {"standardDimensions": {"width": 80, "height": 120, "unit": "mm"}},
    "customizableElements": [
        _text("juice-name", "Juice Name", "Fresh Orange", 20, (10, 18), 20),
        _text("fruit-type", "Fruit Type", "100% Orange Juice", 25, (7, 12), 40),
        _color(
            "main-color",
            "Main Color",
            "#FF8C00",
            [
                ("Orange", "#FF8C00", "PMS 144"),
                ("Apple Red", "#DC143C", "PMS 18-1664"),
                ("Grape Purple", "#8E44AD", "PMS 2612"),
                ("Tropical Yellow", "#FFD700", "PMS 116"),
            ],
        ),
    ],
    "colorSchemes": [
        {
            "name": "Citrus Fresh",
            "description": "Fresh citrus colors for natural appeal",
            "isDefault": True,
            "colors": [
                {"name": "Orange Zest", "hex": "#FF8C00", "application": "primary"},
                {"name": "Light Cream", "hex": "#FFFACD", "application": "background"},
                {"name": "Dark Orange", "hex": "#FF6347", "application": "accent"},
            ],
        }
    ],
}

COFFEE_PACKAGE: Dict[str, Any] = {
    "id": "premium-coffee-package",
    "name": "Premium Coffee Package",
    "category": "Food Packaging",
    "subCategory": "Coffee Package",
    "flexoSpecs": {"standardDimensions": {"width": 100, "height": 160, "unit": "mm"}},
    "customizableElements": [
        _text("coffee-brand", "Coffee Brand", "Premium Roast", 20, (12, 20), 20),
        _text("coffee-origin", "Origin", "Ethiopian Highlands", 30, (8, 14), 45),
        _text("roast-level", "Roast Level", "Medium Roast", 15, (7, 12), 65),
        _color(
            "brand-color",
            "Brand Color",
            "#8B4513",
            [
                ("Coffee Brown", "#8B4513", "PMS 476"),
                ("Rich Black", "#2C1810", "PMS Black 6"),
                ("Deep Gold", "#B8860B", "PMS 131"),
                ("Burgundy", "#800020", "PMS 188"),
            ],
        ),
    ],
    "colorSchemes": [
        {
            "name": "Rich Coffee",
            "description": "Deep, rich colors reflecting premium coffee quality",
            "isDefault": True,
            "colors": [
                {"name": "Coffee Brown", "hex": "#8B4513", "application": "primary"},
                {"name": "Cream", "hex": "#F5F5DC", "application": "background"},
                {"name": "Dark Brown", "hex": "#654321", "application": "text"},
                {"name": "Golden Accent", "hex": "#DAA520", "application": "accent"},
            ],
        }
    ],
}

TEA_PACKAGE: Dict[str, Any] = {
    "id": "elegant-tea-package",
    "name": "Elegant Tea Package",
    "category": "Food Packaging",
    "subCategory": "Tea Package",
    "flexoSpecs": {"standardDimensions": {"width": 85, "height": 130, "unit": "mm"}},
    "customizableElements": [
        _text("tea-name", "Tea Name", "Earl Grey", 20, (12, 20), 20),
        _text("tea-type", "Tea Type", "Black Tea Blend", 25, (7, 12), 40),
        _color(
            "elegant-color",
            "Elegant Color",
            "#2E8B57",
            [
                ("Tea Green", "#2E8B57", "PMS 348"),
                ("Royal Purple", "#663399", "PMS 2612"),
                ("Deep Blue", "#191970", "PMS 2757"),
                ("Elegant Gold", "#DAA520", "PMS 131"),
            ],
        ),
    ],
    "colorSchemes": [
        {
            "name": "Traditional Tea",
            "description": "Classic colors for premium tea experience",
            "isDefault": True,
            "colors": [
                {"name": "Tea Green", "hex": "#2E8B57", "application": "primary"},
                {"name": "Ivory", "hex": "#FFFFF0", "application": "background"},
                {"name": "Dark Green", "hex": "#006400", "application": "text"},
            ],
        }
    ],
}

SAMPLE_RECORDS: List[Dict[str, Any]] = [
    RICE_PACKAGE,
    JUICE_POUCH,
    COFFEE_PACKAGE,
    TEA_PACKAGE,
]


def load_sample(record: Dict[str, Any]) -> SampleTemplate:
    return template_from_record(record), schema_from_record(record)


def sample_templates() -> List[SampleTemplate]:
    """All sample templates, parsed fresh on each call."""
    return [load_sample(record) for record in SAMPLE_RECORDS]


def rice_package() -> SampleTemplate:
    return load_sample(RICE_PACKAGE)


def juice_pouch() -> SampleTemplate:
    return load_sample(JUICE_POUCH)


def coffee_package() -> SampleTemplate:
    return load_sample(COFFEE_PACKAGE)


def tea_package() -> SampleTemplate:
    return load_sample(TEA_PACKAGE)

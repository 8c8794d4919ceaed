"""Submission payload for the order collaborator.

Shape::

    {
        "templateId": str,
        "customizations": {elementId: value},
        "uploadedImages": {elementId: {"rasterDataUrl": str,
                                       "position": {"x": float, "y": float}}},
        "notes": str,
    }

Image positions are the effective design-space positions (drag override or
schema constraint). Excluded elements never appear.
"""

from typing import Any, Dict, Optional

from pyrsistent import thaw

from pack_mockup.export import export_data_url
from pack_mockup.schema import CustomizationSchema, Template
from pack_mockup.state import Session
from pack_mockup.types import ExportFormat
from pack_mockup.utils.elements import current_position


def default_notes(template: Template) -> str:
    return f'Template "{template.name}" customized and submitted'


def build_submission_payload(
    template: Template,
    schema: CustomizationSchema,
    session: Session,
    notes: Optional[str] = None,
) -> Dict[str, Any]:
    uploaded_images: Dict[str, Any] = {}
    for element in schema.visible_elements:
        uploaded = session.uploaded_images.get(element.element_id)
        if uploaded is None:
            continue
        position = current_position(element, session.uploaded_images)
        uploaded_images[element.element_id] = {
            "rasterDataUrl": export_data_url(uploaded.bitmap, ExportFormat.PNG),
            "position": {"x": position.x, "y": position.y},
        }

    return {
        "templateId": template.id,
        "customizations": thaw(session.customizations),
        "uploadedImages": uploaded_images,
        "notes": notes if notes is not None else default_notes(template),
    }

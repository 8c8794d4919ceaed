import json
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger

from pack_mockup.schema.convert import schema_from_record, template_from_record
from pack_mockup.schema.customization import CustomizationSchema
from pack_mockup.schema.template import Template

CatalogEntry = Tuple[Template, CustomizationSchema]


class TemplateLoader:
    """Read a JSON template catalog of the form ``{"templates": [...]}``.

    Each entry is a full template record (see
    :mod:`pack_mockup.schema.convert`). A missing catalog file yields an empty
    catalog; malformed entries raise.
    """

    def __init__(self, templates_file: Optional[Path] = None):
        if templates_file is None:
            self.templates_file = Path.cwd() / "data" / "templates.json"
        else:
            self.templates_file = Path(templates_file)

        self.entries: List[CatalogEntry] = []
        self._load_templates()

    def _load_templates(self) -> None:
        if not self.templates_file.exists():
            logger.debug(f"Template catalog not found at {self.templates_file}")
            return

        with open(self.templates_file, "r", encoding="utf-8") as f:
            data = json.load(f)
        self.entries = [
            (template_from_record(t), schema_from_record(t))
            for t in data.get("templates", [])
        ]
        logger.info(
            f"Loaded {len(self.entries)} templates from {self.templates_file}"
        )

    def get_template(self, template_id: str) -> Optional[CatalogEntry]:
        for template, schema in self.entries:
            if template.id == template_id:
                return template, schema
        return None

    def list_templates(self) -> List[Template]:
        return [template for template, _ in self.entries]

    def filter_templates(
        self,
        category: Optional[str] = None,
        sub_category: Optional[str] = None,
    ) -> List[Template]:
        filtered = self.list_templates()

        if category:
            filtered = [t for t in filtered if t.category == category]

        if sub_category:
            filtered = [t for t in filtered if t.sub_category == sub_category]

        return filtered

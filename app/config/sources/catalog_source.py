from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import streamlit as st

from pack_mockup.config import DEFAULT_RENDER_CONFIG, RenderConfig
from pack_mockup.schema.loader import TemplateLoader
from .base import TEMPLATE_SOURCES, TemplateEntry, TemplateSource
from ..shared_ui import render_config_section

DEFAULT_CATALOG_PATH = "data/templates.json"


@dataclass(frozen=True)
class CatalogConfig:
    catalog_path: str
    template_id: Optional[str]
    render_config: RenderConfig


@st.cache_resource
def _load_catalog(path: str, mtime: float) -> TemplateLoader:
    # mtime is part of the cache key so edits to the file are picked up
    return TemplateLoader(Path(path))


def _catalog(path: str) -> TemplateLoader:
    file = Path(path)
    mtime = file.stat().st_mtime if file.exists() else 0.0
    return _load_catalog(path, mtime)


def build_catalog_config(current: object) -> CatalogConfig:
    st.info("Load templates from a JSON catalog file.", icon="🗂️")
    base = current if isinstance(current, CatalogConfig) else _default_catalog_config()
    catalog_path = st.text_input(
        "Catalog file", value=base.catalog_path, key="catalog_path"
    )
    template_id: Optional[str] = None
    try:
        loader = _catalog(catalog_path)
    except (ValueError, KeyError) as e:
        st.error(f"Catalog could not be read: {e}")
        loader = None
    if loader is not None:
        templates = loader.list_templates()
        if not templates:
            st.warning(f"No templates found in {catalog_path}")
        else:
            ids = [t.id for t in templates]
            labels = {t.id: f"{t.name} ({t.sub_category})" for t in templates}
            default_id = base.template_id if base.template_id in ids else ids[0]
            template_id = st.selectbox(
                "Template",
                ids,
                index=ids.index(default_id),
                format_func=lambda i: labels[i],
                key="catalog_template_select",
            )
    render_config = render_config_section(base.render_config)
    return CatalogConfig(
        catalog_path=catalog_path,
        template_id=template_id,
        render_config=render_config,
    )


def _load_catalog_entry(cfg: CatalogConfig) -> TemplateEntry:
    if cfg.template_id is None:
        raise ValueError("No template selected")
    entry = _catalog(cfg.catalog_path).get_template(cfg.template_id)
    if entry is None:
        raise ValueError(f"Unknown template id: {cfg.template_id}")
    return entry


def _default_catalog_config() -> CatalogConfig:
    return CatalogConfig(
        catalog_path=DEFAULT_CATALOG_PATH,
        template_id=None,
        render_config=DEFAULT_RENDER_CONFIG,
    )


TEMPLATE_SOURCES.register(
    TemplateSource(
        name="JSON Catalog",
        config_type=CatalogConfig,
        initial_config=_default_catalog_config,
        build_config=build_catalog_config,
        load_template=_load_catalog_entry,
    )
)

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

import streamlit as st

from pack_mockup.config import DEFAULT_RENDER_CONFIG, RenderConfig
from pack_mockup.examples import templates
from .base import TEMPLATE_SOURCES, TemplateEntry, TemplateSource
from ..shared_ui import render_config_section


@dataclass(frozen=True)
class SampleConfig:
    template_name: str
    render_config: RenderConfig


_NAME_TO_BUILDER: Dict[str, Callable[[], templates.SampleTemplate]] = {
    "Premium Rice Package": templates.rice_package,
    "Fresh Juice Pouch": templates.juice_pouch,
    "Premium Coffee Package": templates.coffee_package,
    "Elegant Tea Package": templates.tea_package,
}

_TEMPLATE_NAMES: List[str] = list(_NAME_TO_BUILDER.keys())


def build_sample_config(current: object) -> SampleConfig:
    st.info("Pick one of the built-in sample templates.", icon="📦")
    base_name = (
        current.template_name
        if isinstance(current, SampleConfig) and current.template_name in _TEMPLATE_NAMES
        else _TEMPLATE_NAMES[0]
    )
    template_name = st.selectbox(
        "Sample Template",
        _TEMPLATE_NAMES,
        index=_TEMPLATE_NAMES.index(base_name),
        key="sample_template_select",
    )
    render_config = render_config_section(
        current.render_config
        if isinstance(current, SampleConfig)
        else DEFAULT_RENDER_CONFIG
    )
    return SampleConfig(template_name=template_name, render_config=render_config)


def _load_sample(cfg: SampleConfig) -> TemplateEntry:
    builder = _NAME_TO_BUILDER.get(cfg.template_name)
    if builder is None:
        raise ValueError(f"Unknown sample template: {cfg.template_name}")
    return builder()


def _default_sample_config() -> SampleConfig:
    return SampleConfig(
        template_name=_TEMPLATE_NAMES[0], render_config=DEFAULT_RENDER_CONFIG
    )


TEMPLATE_SOURCES.register(
    TemplateSource(
        name="Sample Templates",
        config_type=SampleConfig,
        initial_config=_default_sample_config,
        build_config=build_sample_config,
        load_template=_load_sample,
        is_default=True,
    )
)

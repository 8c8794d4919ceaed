import streamlit as st
from .session_factory import make_session_and_reset
from .sources import sample_source, catalog_source  # registration side-effects
from .sources.base import TEMPLATE_SOURCES, TemplateSource

from .types import AppConfig

__all__ = [
    "AppConfig",
    "TEMPLATE_SOURCES",
    "make_session_and_reset",
    "set_default_config",
    "get_config_from_widgets",
    "TemplateSource",
]


# Keep the imported plugin modules referenced so their registration runs
_ = (sample_source, catalog_source)


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = TEMPLATE_SOURCES.default_config()


def get_config_from_widgets() -> AppConfig:
    current: AppConfig = st.session_state["config"]
    st.subheader("Template Source")
    names = TEMPLATE_SOURCES.names
    current_source = TEMPLATE_SOURCES.for_config(current)
    selected_name = st.selectbox(
        "Source Type",
        names,
        index=names.index(current_source.name),
        help="Select where templates are loaded from.",
        key="source_mode_select",
    )
    return TEMPLATE_SOURCES.get(selected_name).build_config(current)

from __future__ import annotations

import streamlit as st
from loguru import logger

from pack_mockup.session import CustomizerSession
from .types import AppConfig
from .sources.base import TEMPLATE_SOURCES


def make_session_and_reset(config: AppConfig) -> None:
    """Open a customization session for ``config`` and reset the UI state.

    The previous session, if any, is closed. Click tracking and the uploader
    generation are reset so stale widget values do not leak into the new
    template.
    """
    try:
        session = TEMPLATE_SOURCES.open_session(config)
    except ValueError as e:
        logger.warning(f"Session creation failed: {e}")
        st.error(f"Session creation failed: {e}")
        return
    previous: CustomizerSession | None = st.session_state.get("session")
    if previous is not None:
        previous.close()
    logger.info(f"Customizing template {session.template.id} ({session.template.name})")
    st.session_state["session"] = session
    st.session_state["last_click"] = None
    st.session_state["canvas_generation"] = 0

from __future__ import annotations

from dataclasses import replace

import streamlit as st

from pack_mockup.config import RenderConfig


def render_config_section(current: RenderConfig) -> RenderConfig:
    st.subheader("Preview & Export")
    max_view_width = st.slider(
        "Preview width (px)",
        200,
        1200,
        int(current.max_view_width),
        step=50,
        key="max_view_width",
    )
    max_view_height = st.slider(
        "Preview height (px)",
        200,
        1200,
        int(current.max_view_height),
        step=50,
        key="max_view_height",
    )
    scale_cap = st.slider(
        "Maximum scale",
        1.0,
        6.0,
        float(current.scale_cap),
        step=0.5,
        key="scale_cap",
    )
    lossy_quality = st.slider(
        "JPEG quality", 10, 100, current.lossy_quality, key="lossy_quality"
    )
    return replace(
        current,
        max_view_width=float(max_view_width),
        max_view_height=float(max_view_height),
        scale_cap=float(scale_cap),
        lossy_quality=int(lossy_quality),
    )


__all__ = ["render_config_section"]

import json

import streamlit as st
from pyrsistent import thaw

from config import (
    AppConfig,
    set_default_config,
    get_config_from_widgets,
    make_session_and_reset,
)
from components import (
    color_scheme_select,
    element_inputs,
    export_buttons,
    mockup_canvas,
    status_messages,
)
from pack_mockup.session import CustomizerSession

st.set_page_config(layout="wide", page_title="Pack Mockup")


# --------- Main App ---------

set_default_config()
tab_design, tab_config, tab_state = st.tabs(["Design", "Config", "State"])

with tab_config:
    config: AppConfig = get_config_from_widgets()

    if st.button("Load", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = config
        make_session_and_reset(config)
    st.divider()

with tab_design:
    if "session" not in st.session_state:
        make_session_and_reset(st.session_state["config"])

    session: CustomizerSession | None = st.session_state.get("session")
    if session is None:
        st.stop()

    session.poll_uploads()

    left_col, middle_col, right_col = st.columns([0.3, 0.45, 0.25])

    with left_col:
        st.subheader(session.template.name)
        st.caption(f"{session.template.category} · {session.template.sub_category}")
        element_inputs(session)

    with middle_col:
        status_messages(session)
        mockup_canvas(session)

    with right_col:
        color_scheme_select(session)
        st.divider()
        if st.button("🔁 Reset", key="reset_btn", use_container_width=True):
            session.reset()
            st.session_state["canvas_generation"] = (
                st.session_state.get("canvas_generation", 0) + 1
            )
            st.session_state["seen_uploads"] = {}
            st.rerun()
        if session.state.selected_element_id is not None:
            if st.button("Deselect", key="deselect_btn", use_container_width=True):
                session.select(None)
                st.rerun()
        st.divider()
        export_buttons(session)
        st.divider()
        st.subheader("Submit")
        notes = st.text_area("Notes", key="submission_notes")
        payload = session.submission_payload(notes or None)
        st.download_button(
            "📤 Submission JSON",
            data=json.dumps(payload, indent=2),
            file_name=f"{session.template.id or 'design'}-submission.json",
            mime="application/json",
            key="download_submission",
            use_container_width=True,
        )

with tab_state:
    session = st.session_state.get("session")
    if session is not None:
        st.json(thaw(session.state.description), expanded=1)

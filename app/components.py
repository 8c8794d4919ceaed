from __future__ import annotations

from typing import Any, Dict, Optional

import streamlit as st
from loguru import logger
from streamlit_image_coordinates import streamlit_image_coordinates

from pack_mockup.decode import ImageUpload
from pack_mockup.schema import Element
from pack_mockup.session import CustomizerSession
from pack_mockup.types import ElementType, ExportFormat, Point

UPLOAD_TIMEOUT_S = 10.0


def text_element_input(session: CustomizerSession, element: Element) -> None:
    current = session.state.customizations.get(element.element_id, "")
    max_chars = element.constraints.max_length
    value = st.text_input(
        element.label,
        value=current,
        max_chars=max_chars if max_chars else None,
        key=f"text_{element.element_id}",
    )
    if value != current:
        session.set_value(element.element_id, value)


def color_element_input(session: CustomizerSession, element: Element) -> None:
    current = session.state.customizations.get(element.element_id) or "#000000"
    # Keyed by value so a scheme application refreshes the picker
    value = st.color_picker(
        element.label, value=current, key=f"color_{element.element_id}_{current}"
    )
    if value.upper() != current.upper():
        session.set_value(element.element_id, value)
    if element.color_options:
        cols = st.columns(len(element.color_options))
        for col, option in zip(cols, element.color_options):
            with col:
                if st.button(
                    option.name,
                    key=f"swatch_{element.element_id}_{option.hex}",
                    help=option.pantone or option.hex,
                    use_container_width=True,
                ):
                    session.set_value(element.element_id, option.hex)
                    st.rerun()


def image_element_input(session: CustomizerSession, element: Element) -> None:
    eid = element.element_id
    if session.state.file_picker_request == eid:
        st.info(f"Choose an image for **{element.label}**", icon="🖼️")
    uploaded = st.file_uploader(
        element.label,
        key=f"upload_{eid}_{st.session_state.get('canvas_generation', 0)}",
    )
    if uploaded is not None:
        seen: Dict[str, Any] = st.session_state.setdefault("seen_uploads", {})
        file_id = getattr(uploaded, "file_id", None) or f"{uploaded.name}:{uploaded.size}"
        if seen.get(eid) != file_id:
            seen[eid] = file_id
            session.upload(
                eid,
                ImageUpload(
                    filename=uploaded.name,
                    mime_type=uploaded.type or "",
                    data=uploaded.getvalue(),
                ),
            )
            session.wait_for_uploads(timeout=UPLOAD_TIMEOUT_S)
    if eid in session.state.uploaded_images:
        if st.button("Remove image", key=f"remove_{eid}", use_container_width=True):
            session.remove_image(eid)
            st.session_state.setdefault("seen_uploads", {}).pop(eid, None)
            st.session_state["canvas_generation"] = (
                st.session_state.get("canvas_generation", 0) + 1
            )
            st.rerun()


_ELEMENT_INPUTS = {
    ElementType.TEXT: text_element_input,
    ElementType.LOGO: text_element_input,
    ElementType.COLOR: color_element_input,
    ElementType.IMAGE: image_element_input,
}


def element_inputs(session: CustomizerSession) -> None:
    for element in session.schema.visible_elements:
        widget = _ELEMENT_INPUTS.get(element.element_type)
        if widget is None:
            continue
        widget(session, element)


def color_scheme_select(session: CustomizerSession) -> None:
    schemes = session.schema.color_schemes
    if not schemes:
        return
    st.subheader("Color Scheme")
    names = [s.name for s in schemes]
    for col, scheme in zip(st.columns(len(schemes)), schemes):
        with col:
            label = f"✅ {scheme.name}" if scheme.name == session.state.selected_scheme else scheme.name
            if st.button(
                label,
                key=f"scheme_{names.index(scheme.name)}",
                help=scheme.description or None,
                use_container_width=True,
            ):
                session.apply_scheme(scheme.name)
                st.rerun()


def _device_point(value: Dict[str, Any], image_width: int, image_height: int) -> Point:
    # The component reports coordinates in displayed pixels
    shown_w = value.get("width") or image_width
    shown_h = value.get("height") or image_height
    return Point(
        value["x"] * image_width / shown_w,
        value["y"] * image_height / shown_h,
    )


def mockup_canvas(session: CustomizerSession) -> None:
    """Clickable preview.

    A click selects; a click on an uploaded image picks it up and the next
    click drops it at the new location.
    """
    image = session.render()
    value: Optional[Dict[str, Any]] = streamlit_image_coordinates(
        image, key=f"canvas_{st.session_state.get('canvas_generation', 0)}"
    )
    if value is None:
        return
    click = (value["x"], value["y"], value.get("unix_time"))
    if st.session_state.get("last_click") == click:
        return
    st.session_state["last_click"] = click

    point = _device_point(value, image.width, image.height)
    if session.state.drag is not None:
        session.pointer_move(point)
        session.pointer_up()
        logger.debug(f"Dropped {session.state.selected_element_id} at {point}")
    else:
        session.pointer_down(point)
    st.rerun()


def status_messages(session: CustomizerSession) -> None:
    state = session.state
    if state.message:
        st.warning(state.message, icon="⚠️")
    if state.drag is not None:
        st.info(
            f"Moving **{state.drag.element_id}**: click where it should go.",
            icon="✋",
        )
    elif state.selected_element_id is not None:
        st.info(f"Selected **{state.selected_element_id}**", icon="🎯")


def export_buttons(session: CustomizerSession) -> None:
    st.subheader("Export")
    png_col, jpeg_col = st.columns(2)
    with png_col:
        st.download_button(
            "⬇️ PNG",
            data=session.export(ExportFormat.PNG),
            file_name=session.export_filename(ExportFormat.PNG),
            mime="image/png",
            key="download_png",
            use_container_width=True,
        )
    with jpeg_col:
        st.download_button(
            "⬇️ JPEG",
            data=session.export(ExportFormat.JPEG),
            file_name=session.export_filename(ExportFormat.JPEG),
            mime="image/jpeg",
            key="download_jpeg",
            use_container_width=True,
        )

"""
Segment Panel UI

Renders the launcher button while closed and the editing panel while open.
All state changes go through composer operations inside widget callbacks.
"""

from __future__ import annotations

import streamlit as st

from segment_app.constants import (
    ADD_BUTTON_KEY,
    ADD_NEW_SCHEMA,
    ADD_SCHEMA_SEGMENT,
    CANCEL,
    CANCEL_BUTTON_KEY,
    ENTER_SEGMENT,
    NAME_WIDGET_KEY,
    OPEN_BUTTON_KEY,
    PENDING_WIDGET_KEY,
    REMOVE_BUTTON_PREFIX,
    SAVE_CHANGES,
    SAVE_SEGMENT,
    SAVE_THE_SEGMENT,
    SAVING_SEGMENT,
    SEGMENT_NAME_PLACEHOLDER,
    SUBMIT_BUTTON_KEY,
)
from segment_app.state import get_composer


# ---- Callbacks ----

def _clear_widgets() -> None:
    st.session_state[NAME_WIDGET_KEY] = ""
    st.session_state[PENDING_WIDGET_KEY] = None


def _on_open() -> None:
    get_composer().open()
    _clear_widgets()


def _on_name_change() -> None:
    get_composer().set_name(st.session_state.get(NAME_WIDGET_KEY, ""))


def _on_pending_change() -> None:
    get_composer().set_pending(st.session_state.get(PENDING_WIDGET_KEY))


def _on_add() -> None:
    composer = get_composer()
    composer.set_pending(st.session_state.get(PENDING_WIDGET_KEY))
    if composer.add_to_chosen():
        st.session_state[PENDING_WIDGET_KEY] = None


def _on_remove(key: str) -> None:
    get_composer().remove_from_chosen(key)


def _on_submit() -> None:
    composer = get_composer()
    # Typed text may not have been committed through on_change yet
    composer.set_name(st.session_state.get(NAME_WIDGET_KEY, ""))
    name = composer.name
    if composer.submit() is not None:
        st.session_state.last_submitted = name
    _clear_widgets()


def _on_cancel() -> None:
    get_composer().cancel()
    _clear_widgets()


# ---- Rendering ----

def _render_chosen() -> None:
    chosen = get_composer().chosen
    if not chosen:
        return
    for item in chosen:
        col_label, col_remove = st.columns([6, 1])
        with col_label:
            st.markdown(f"**{item.label}**")
        with col_remove:
            st.button(
                "−",
                key=f"{REMOVE_BUTTON_PREFIX}{item.key}",
                help=f"Remove {item.label}",
                on_click=_on_remove,
                args=(item.key,),
            )


def _render_add_schema() -> None:
    composer = get_composer()
    labels = {item.key: item.label for item in composer.available}
    st.selectbox(
        ADD_SCHEMA_SEGMENT,
        options=list(labels.keys()),
        index=None,
        placeholder=ADD_SCHEMA_SEGMENT,
        format_func=lambda key: labels.get(key, key),
        key=PENDING_WIDGET_KEY,
        on_change=_on_pending_change,
        label_visibility="collapsed",
    )
    st.button(ADD_NEW_SCHEMA, key=ADD_BUTTON_KEY, on_click=_on_add)


def render_segment_panel() -> None:
    """
    Render the composer for the current session.
    """
    composer = get_composer()

    if not composer.is_open:
        st.button(SAVE_CHANGES, key=OPEN_BUTTON_KEY, type="primary", on_click=_on_open)
        if st.session_state.get("last_submitted") is not None:
            st.caption(f"Submitted segment '{st.session_state.last_submitted}'.")
        return

    with st.container(border=True):
        st.subheader(f"‹ {SAVING_SEGMENT}")
        st.text_input(
            ENTER_SEGMENT,
            key=NAME_WIDGET_KEY,
            placeholder=SEGMENT_NAME_PLACEHOLDER,
            on_change=_on_name_change,
        )
        st.caption(SAVE_SEGMENT)

        _render_chosen()
        _render_add_schema()

        st.divider()
        col_save, col_cancel = st.columns(2)
        with col_save:
            st.button(
                SAVE_THE_SEGMENT,
                key=SUBMIT_BUTTON_KEY,
                type="primary",
                use_container_width=True,
                on_click=_on_submit,
            )
        with col_cancel:
            st.button(
                CANCEL,
                key=CANCEL_BUTTON_KEY,
                use_container_width=True,
                on_click=_on_cancel,
            )

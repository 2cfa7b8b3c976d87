"""Presentation start and navigation controls."""

from typing import Any

import streamlit as st

from app.components.content_source import load_source_lines
from app.services.presentation_service import (
    close_window,
    press_key,
    start_presentation,
)
from app.state import get_session


def render_start_section(content_source: str, uploaded_file: Any) -> bool:
    """Render the start button and start a presentation when clicked.
    
    Returns:
        True if a presentation was started
    """
    session = get_session()
    start_clicked = st.button(
        "▶️ Present",
        type="primary",
        use_container_width=True,
        disabled=session.is_active,
    )
    
    if not start_clicked:
        return False
    
    lines = load_source_lines(content_source, uploaded_file)
    if lines is None:
        return False
    
    result = start_presentation(lines)
    if result.success:
        st.success(f"✅ Presenting {result.slide_count} slide(s)")
        return True
    
    st.error(f"❌ {result.error_message}")
    if result.exception:
        st.exception(result.exception)
    return False


def render_navigation_section() -> None:
    """Render the key buttons bound on the body viewport."""
    session = get_session()
    if not session.is_active:
        return
    
    from mdpresent.session import EventKind
    
    keys = {kind: key for key, kind in session.keymap.items()}
    col_prev, col_next, col_quit, col_close = st.columns(4)
    
    with col_prev:
        if st.button(f"⬅️ Previous ({keys[EventKind.PREV_SLIDE]})", use_container_width=True):
            press_key(keys[EventKind.PREV_SLIDE])
    with col_next:
        if st.button(f"➡️ Next ({keys[EventKind.NEXT_SLIDE]})", use_container_width=True):
            press_key(keys[EventKind.NEXT_SLIDE])
    with col_quit:
        if st.button(f"⏹️ Quit ({keys[EventKind.QUIT]})", use_container_width=True):
            press_key(keys[EventKind.QUIT])
    with col_close:
        if st.button("✖️ Close window", use_container_width=True):
            close_window()

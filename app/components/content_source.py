"""Document selection with a slide outline preview."""

from typing import Any

import streamlit as st

from app.constants import (
    CONTENT_FILE_TYPES,
    CONTENT_SOURCE_DEFAULT,
    CONTENT_SOURCE_UPLOAD,
    CONTENT_SOURCES,
    DEFAULT_CONTENT_PATH,
    SessionKeys,
)
from app.services.presentation_service import (
    decode_upload,
    document_outline,
    read_default_content,
)


def load_source_lines(content_source: str, uploaded_file: Any) -> list[str] | None:
    """Read the selected document, reporting problems in the UI.
    
    Returns:
        The document lines, or None if they could not be read
    """
    if content_source == CONTENT_SOURCE_UPLOAD:
        if uploaded_file is None:
            st.error("❌ Please upload a Markdown file first.")
            return None
        try:
            return decode_upload(uploaded_file.getvalue())
        except UnicodeDecodeError as e:
            st.error(f"❌ {uploaded_file.name} is not UTF-8 text: {e}")
            return None
    
    try:
        return read_default_content()
    except FileNotFoundError as e:
        st.error(f"❌ File not found: {e}")
        return None


def _render_outline(lines: list[str]) -> None:
    titles = document_outline(lines)
    if not titles:
        st.warning("⚠️ This document has no slides to present.")
        return
    
    with st.expander(f"🗂️ Outline: {len(titles)} slide(s)", expanded=False):
        for index, title in enumerate(titles, start=1):
            st.text(f"{index:>3}  {title}")


def render_content_source_section(base_config: dict[str, Any]) -> tuple[str, Any]:
    """Render the document picker and preview its slide outline.
    
    Args:
        base_config: Base configuration dictionary
        
    Returns:
        Tuple of (content_source, uploaded_file)
    """
    st.subheader("📄 Document")
    
    content_source = st.radio(
        "Present from:",
        CONTENT_SOURCES,
        horizontal=True,
        key=SessionKeys.CONTENT_SOURCE
    )
    
    uploaded_file = None
    if content_source == CONTENT_SOURCE_UPLOAD:
        uploaded_file = st.file_uploader(
            "Markdown document",
            type=CONTENT_FILE_TYPES,
            help="UTF-8 text; each line starting with # opens a new slide"
        )
    else:
        default_content = base_config.get('paths', {}).get('content', DEFAULT_CONTENT_PATH)
        st.caption(f"Presenting `{default_content}`")
    
    if content_source == CONTENT_SOURCE_DEFAULT or uploaded_file is not None:
        lines = load_source_lines(content_source, uploaded_file)
        if lines is not None:
            _render_outline(lines)
    
    st.divider()
    
    return content_source, uploaded_file

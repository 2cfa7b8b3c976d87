"""Virtual terminal screen component."""

import streamlit as st

from app.state import get_host, get_session


def render_screen_section() -> None:
    """Render the composed viewports of the running presentation."""
    session = get_session()
    
    st.subheader("🖥️ Screen")
    if not session.is_active:
        st.info("No presentation running. Choose a document and press Present.")
        return
    
    st.code("\n".join(get_host().screen()), language=None)
    st.caption(f"Slide {session.current_slide} of {len(session.deck)}")

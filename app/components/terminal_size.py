"""Virtual terminal size component."""

from typing import Any

import streamlit as st

from app.constants import SessionKeys, DEFAULT_TERMINAL_COLUMNS, DEFAULT_TERMINAL_LINES
from app.services.presentation_service import resize_terminal


def render_terminal_size_section(base_config: dict[str, Any]) -> None:
    """Render the terminal size inputs and apply size changes.
    
    Changing either value resizes the virtual terminal, which re-plans the
    presentation viewports when a presentation is running.
    
    Args:
        base_config: Base configuration dictionary
    """
    terminal_config = base_config.get('ui', {}).get('terminal', {})
    
    with st.sidebar:
        st.subheader("🖥️ Terminal")
        columns = st.number_input(
            "Columns",
            min_value=20,
            max_value=300,
            value=int(terminal_config.get('columns', DEFAULT_TERMINAL_COLUMNS)),
            key=SessionKeys.TERMINAL_COLUMNS,
        )
        lines = st.number_input(
            "Lines",
            min_value=8,
            max_value=120,
            value=int(terminal_config.get('lines', DEFAULT_TERMINAL_LINES)),
            key=SessionKeys.TERMINAL_LINES,
        )
    
    resize_terminal(int(columns), int(lines))

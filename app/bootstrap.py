"""Application bootstrap and initialization."""

import sys
from typing import Any

import streamlit as st

from app.constants import (
    CONFIG_DIR,
    SRC_DIR,
    SessionKeys,
    DEFAULT_PAGE_TITLE,
    DEFAULT_PAGE_LAYOUT,
    DEFAULT_TERMINAL_COLUMNS,
    DEFAULT_TERMINAL_LINES,
)
from app.config_loader import load_base_config
from app.state import set_state_value, has_state_key


def setup_python_path() -> None:
    """Add src directory to Python path for imports.
    
    This must be called before importing from mdpresent.
    """
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))


def init_session_state() -> None:
    """Initialize session state with base configuration and presenter objects.
    
    The host and session are created once per browser session, mirroring
    the one-time setup of a terminal presenter process.
    """
    from mdpresent.commands import setup
    from mdpresent.config import Config
    from mdpresent.memory_host import InMemoryHost
    
    if not has_state_key(SessionKeys.BASE_CONFIG):
        set_state_value(SessionKeys.BASE_CONFIG, load_base_config())
    
    if not has_state_key(SessionKeys.SESSION):
        config = Config.from_dict(st.session_state[SessionKeys.BASE_CONFIG], CONFIG_DIR)
        terminal = config.get('ui.terminal', {}) or {}
        host = InMemoryHost(
            width=terminal.get('columns', DEFAULT_TERMINAL_COLUMNS),
            height=terminal.get('lines', DEFAULT_TERMINAL_LINES),
            options=config.original_display,
        )
        set_state_value(SessionKeys.HOST, host)
        set_state_value(SessionKeys.SESSION, setup(host, config))


def configure_page(base_config: dict[str, Any]) -> None:
    """Configure Streamlit page settings.
    
    Args:
        base_config: Base configuration dictionary
    """
    ui_config = base_config.get('ui', {})
    page_config = ui_config.get('page', {})
    
    st.set_page_config(
        page_title=page_config.get('title', DEFAULT_PAGE_TITLE),
        layout=page_config.get('layout', DEFAULT_PAGE_LAYOUT)
    )


def render_header() -> None:
    """Render the application header."""
    st.title("🎞️ Markdown Presenter")
    st.markdown("Present a Markdown document as slides: `#` lines start a new slide.")
    st.divider()


def bootstrap_app() -> dict[str, Any]:
    """Bootstrap the application.
    
    Sets up Python path, initializes session state, and configures the page.
    
    Returns:
        The base configuration dictionary
    """
    setup_python_path()

    if not has_state_key(SessionKeys.BASE_CONFIG):
        set_state_value(SessionKeys.BASE_CONFIG, load_base_config())

    base_config = st.session_state[SessionKeys.BASE_CONFIG]
    configure_page(base_config)
    init_session_state()
    render_header()

    return base_config

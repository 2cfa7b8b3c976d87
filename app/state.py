"""Session state management for the presenter objects."""

from typing import Any

import streamlit as st

from app.constants import SessionKeys


# === Session State Wrapper Functions ===

def get_state_value(key: str, default: Any = None) -> Any:
    """Get a value from session state with default.
    
    Args:
        key: Session state key
        default: Default value if key not found
        
    Returns:
        Value from session state or default
    """
    return st.session_state.get(key, default)


def set_state_value(key: str, value: Any) -> None:
    """Set a value in session state.
    
    Args:
        key: Session state key
        value: Value to set
    """
    st.session_state[key] = value


def has_state_key(key: str) -> bool:
    """Check if a key exists in session state."""
    return key in st.session_state


def get_base_config() -> dict[str, Any]:
    """Get the base configuration from session state."""
    return get_state_value(SessionKeys.BASE_CONFIG, {})


def get_paths_config() -> dict[str, Any]:
    """Get the paths configuration section."""
    return get_base_config().get('paths', {})


def get_settings_config() -> dict[str, Any]:
    """Get the settings configuration section."""
    return get_base_config().get('settings', {})


def get_host():
    """Get the in-memory host backing this browser session."""
    return get_state_value(SessionKeys.HOST)


def get_session():
    """Get the presentation session bound to the host."""
    return get_state_value(SessionKeys.SESSION)

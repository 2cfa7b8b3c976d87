"""Advanced settings component."""

import logging
from typing import Any

import streamlit as st

from app.constants import LOG_LEVELS, DEFAULT_LOG_LEVEL, SessionKeys
from app.state import get_settings_config, get_host


def render_advanced_settings(base_config: dict[str, Any]) -> None:
    """Render the advanced settings expander.
    
    Args:
        base_config: Base configuration dictionary
    """
    st.divider()
    
    with st.expander("🔧 Advanced Settings", expanded=False):
        settings_config = get_settings_config()
        
        st.markdown("##### Logging")
        current_level = settings_config.get('logging', {}).get('level', DEFAULT_LOG_LEVEL)
        default_index = LOG_LEVELS.index(current_level) if current_level in LOG_LEVELS else 1
        
        level = st.selectbox(
            "Log level",
            options=LOG_LEVELS,
            index=default_index,
            key=SessionKeys.LOG_LEVEL,
            help="Verbosity of logging output"
        )
        logging.getLogger().setLevel(level)
        
        st.markdown("##### Display options")
        st.caption("Live values; presentation values apply while a presentation runs")
        st.json(get_host().options)

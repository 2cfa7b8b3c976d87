"""UI components for the Streamlit app."""

from app.components.content_source import render_content_source_section
from app.components.terminal_size import render_terminal_size_section
from app.components.controls import render_start_section, render_navigation_section
from app.components.screen_view import render_screen_section
from app.components.advanced_settings import render_advanced_settings

__all__ = [
    'render_content_source_section',
    'render_terminal_size_section',
    'render_start_section',
    'render_navigation_section',
    'render_screen_section',
    'render_advanced_settings',
]

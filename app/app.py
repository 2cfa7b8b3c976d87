"""Streamlit UI for the Markdown Presenter."""

import sys
from pathlib import Path

# Make the `app` package importable when run via `streamlit run app/app.py`
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from app.bootstrap import bootstrap_app
from app.components import (
    render_content_source_section,
    render_terminal_size_section,
    render_start_section,
    render_navigation_section,
    render_screen_section,
    render_advanced_settings,
)


def main():
    """Render the presenter page."""
    base_config = bootstrap_app()
    
    render_terminal_size_section(base_config)
    content_source, uploaded_file = render_content_source_section(base_config)
    
    render_start_section(content_source, uploaded_file)
    render_navigation_section()
    render_screen_section()
    
    render_advanced_settings(base_config)


if __name__ == "__main__":
    main()

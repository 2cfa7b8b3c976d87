"""Constants and configuration paths for the Streamlit app."""

from pathlib import Path

# === Directory Paths ===
APP_DIR = Path(__file__).parent
PROJECT_ROOT = APP_DIR.parent
CONFIG_DIR = PROJECT_ROOT / "configs"
SRC_DIR = PROJECT_ROOT / "src"

# File types for the content uploader (without dots)
CONTENT_FILE_TYPES: list[str] = ['md', 'markdown', 'txt']

# Content source choices
CONTENT_SOURCE_DEFAULT = 'Default document'
CONTENT_SOURCE_UPLOAD = 'Upload a document'
CONTENT_SOURCES = [CONTENT_SOURCE_DEFAULT, CONTENT_SOURCE_UPLOAD]
UNTITLED_SLIDE = '(untitled)'
DEFAULT_CONTENT_PATH = 'content/slides.md'

# === Session State Keys ===
class SessionKeys:
    """Session state key constants to avoid magic strings."""
    BASE_CONFIG = 'base_config'
    HOST = 'presenter_host'
    SESSION = 'presenter_session'
    LOG_LEVEL = 'log_level'
    CONTENT_SOURCE = 'content_source'
    TERMINAL_COLUMNS = 'terminal_columns'
    TERMINAL_LINES = 'terminal_lines'


# === UI Configuration Defaults ===
DEFAULT_PAGE_TITLE = 'Markdown Presenter'
DEFAULT_PAGE_LAYOUT = 'wide'
DEFAULT_TERMINAL_COLUMNS = 100
DEFAULT_TERMINAL_LINES = 30
DEFAULT_LOG_LEVEL = 'INFO'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

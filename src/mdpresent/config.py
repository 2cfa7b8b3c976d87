"""Configuration management for the markdown presenter."""

import yaml
import logging
from pathlib import Path
from typing import Dict, Any


def load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Load a YAML file and return its contents."""
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


class Config:
    """Configuration manager backed by a YAML file."""

    def __init__(self, config_path: str = 'configs/config.yaml'):
        """Initialize configuration by loading the YAML file.

        Args:
            config_path: Path to main configuration file
        """
        self.config_path = Path(config_path)
        self._init_from_dict(load_yaml_file(self.config_path), self.config_path.parent)
        logging.debug(f"Loaded config from: {self.config_path}")

    @classmethod
    def from_dict(cls, main_config: Dict[str, Any], config_dir: Path) -> "Config":
        """Create Config instance from dictionary (for Streamlit integration).

        Args:
            main_config: Configuration dictionary (already loaded)
            config_dir: Directory containing the config file (for path resolution)

        Returns:
            Configured Config instance
        """
        config = cls.__new__(cls)
        config.config_path = config_dir / "config.yaml"  # Virtual path
        config._init_from_dict(main_config, config_dir)
        return config

    def _init_from_dict(self, main_config: Dict[str, Any], config_dir: Path) -> None:
        # Set up project_root from paths.project_root if present
        paths_config = main_config.get('paths', {}) or {}
        if 'project_root' in paths_config:
            self.project_root = (config_dir / paths_config['project_root']).resolve()
        else:
            self.project_root = Path.cwd()

        self._paths = paths_config
        self._config = main_config.copy()
        self._setup_logging()

    def _resolve_path_value(self, value: str) -> Path:
        """Resolve a path value relative to project_root if not absolute."""
        if not value:
            return Path()
        p = Path(value)
        if not p.is_absolute():
            return self.project_root / p
        return p.resolve()

    def _setup_logging(self):
        """Setup logging based on configuration.

        The terminal presenter owns the screen, so records go to
        settings.logging.file when one is configured, and nowhere when
        settings.logging.enabled is false.
        """
        log_level = self.get('settings.logging.level', 'INFO')
        numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)
        log_file = self.get('settings.logging.file')
        if not self.get('settings.logging.enabled', True):
            logging.basicConfig(level=numeric_level, handlers=[logging.NullHandler()])
        elif log_file:
            log_path = self._resolve_path_value(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            logging.basicConfig(
                level=numeric_level,
                filename=str(log_path),
                format='%(asctime)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
        else:
            logging.basicConfig(
                level=numeric_level,
                format='%(asctime)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation.

        Args:
            key_path: Dot-separated path to config value (e.g., 'presentation.keys.next')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_path(self, key: str) -> Path:
        """Get a path from configuration, resolved relative to project_root.

        Args:
            key: Path key in config (e.g., 'content')

        Returns:
            Resolved Path object
        """
        path_str = self._paths.get(key)
        if path_str is None:
            raise ValueError(f"Path '{key}' not found in configuration")
        return self._resolve_path_value(path_str)

    def validate_paths(self, required_paths: tuple[str, ...] = ('content',)):
        """Validate that required paths exist using resolved paths."""
        missing = []

        for path_key in required_paths:
            try:
                path = self.get_path(path_key)
                if not path.exists():
                    missing.append(f"{path_key}: {path}")
            except ValueError:
                missing.append(f"{path_key}: not configured")

        if missing:
            raise FileNotFoundError(
                f"Required files not found:\n" + "\n".join(f"  - {p}" for p in missing)
            )

    @property
    def content_path(self) -> Path:
        """Get the default markdown document path."""
        return self.get_path('content')

    @property
    def filetype(self) -> str:
        """Content kind declared on the presentation viewports."""
        return self.get('presentation.filetype', 'markdown')

    @property
    def keys(self) -> Dict[str, str]:
        """Key bindings for next/prev/quit."""
        return dict(self.get('presentation.keys', {}) or {})

    @property
    def present_display(self) -> Dict[str, Any]:
        """Presentation-mode display option overrides."""
        return dict(self.get('display.present', {}) or {})

    @property
    def original_display(self) -> Dict[str, Any]:
        """Initial display option values of the hosts."""
        return dict(self.get('display.original', {}) or {})

"""Command-line interface for the markdown presenter."""

import argparse
import curses
import sys
import logging
from pathlib import Path
from .commands import PRESENT_COMMAND, setup
from .config import Config
from .curses_host import CursesHost
from .session import SessionError

DEFAULT_CONFIG_PATH = Path('configs') / 'config.yaml'

# Built-in config when no config file exists: logging stays off while
# curses owns the terminal.
FALLBACK_CONFIG = {'settings': {'logging': {'enabled': False}}}


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description='Present a markdown document as slides in the terminal.'
    )

    parser.add_argument(
        'document',
        nargs='?',
        help='Markdown file to present (default: paths.content from config)'
    )

    parser.add_argument(
        '--config',
        help=f'Path to configuration file (default: {DEFAULT_CONFIG_PATH} if present)'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (overrides config)'
    )

    return parser.parse_args(argv)


def load_config(config_path: str | None) -> Config:
    """Load the configuration file, or built-in defaults if none exists.

    Raises:
        FileNotFoundError: If an explicitly given config file is missing.
    """
    if config_path:
        return Config(config_path)
    if DEFAULT_CONFIG_PATH.exists():
        return Config(str(DEFAULT_CONFIG_PATH))
    return Config.from_dict(FALLBACK_CONFIG, Path.cwd())


def resolve_document(config: Config, document: str | None) -> Path:
    """Pick the document to present: the argument, else paths.content.

    Raises:
        FileNotFoundError: If no document is given and paths.content is
            unset or points at a missing file.
    """
    if document:
        return Path(document)
    config.validate_paths(('content',))
    return config.content_path


def run_presenter(stdscr, config: Config, document: Path) -> None:
    """Present a document on a curses screen until the user quits."""
    host = CursesHost(stdscr, current_document=document, options=config.original_display)
    setup(host, config)
    host.run_command(PRESENT_COMMAND)
    host.run()


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)

    # Load configuration
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print(f"Please ensure the configuration file exists at: {args.config}")
        return 1
    except Exception as e:
        print(f"Error loading configuration: {e}")
        return 1

    if args.log_level:
        logging.getLogger().setLevel(args.log_level)

    try:
        document = resolve_document(config, args.document)
        if not document.exists():
            raise FileNotFoundError(f"Markdown file not found: {document}")
        curses.wrapper(run_presenter, config, document)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1
    except SessionError as e:
        print(f"Error: {e}")
        return 1
    except Exception as e:
        logging.exception("Error running presentation")
        print(f"Error running presentation: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())

"""Command-line entry point for the editor."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import ConfigManager
from .window import MainWindow

logger = logging.getLogger(__name__)

APPLICATION_VERSION = "0.1.4"


def default_config_path(home) -> Path:
    """The settings file under the user's configuration directory."""
    return Path(home) / ".config" / "notepanda" / "config.json"


def main(argv: list[str] | None = None) -> int:
    """Open the editor, optionally on a source file, and report its state."""
    parser = argparse.ArgumentParser(prog="notepanda")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {APPLICATION_VERSION}"
    )
    parser.add_argument("source", nargs="?", help="The source file to open.")
    parser.add_argument(
        "-c", dest="config", metavar="config.json", help="specify configuration file."
    )
    args = parser.parse_args(argv)

    if args.config:
        config_file = Path(args.config)
    else:
        config_file = default_config_path(Path.home())
        config_file.parent.mkdir(parents=True, exist_ok=True)
    logger.debug("configuration file: %s", config_file)

    window = MainWindow(ConfigManager(config_file))
    if args.source:
        try:
            window.open_file(args.source)
        except OSError as error:
            print(f"Cannot open file: {error}", file=sys.stderr)

    print(window.window_title())
    print(window.status_message())
    print("Welcome to Notepanda!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
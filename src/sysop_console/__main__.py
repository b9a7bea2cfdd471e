"""
Main entry point for SysOp Console.
Usage: python -m sysop_console [--profile NAME] [--config FILE] [--data DIR]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QCoreApplication

from . import __version__
from .errors import ConsoleError
from .editor.controller import EditorController, MessageLevel
from .editor.declarations import build_catalog
from .console import TextConsole
from .settings import ConsoleSettings
from .settings.core import APPLICATION, ORGANIZATION
from .stores import JsonCollectionStore
from .stores.menus import ensure_default_menu
from .utils.logging_config import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sysop-console", description="BBS configuration editor"
    )
    parser.add_argument("--profile", default="default", help="settings profile name")
    parser.add_argument("--config", type=Path, help="settings INI file (default: per-user location)")
    parser.add_argument("--data", type=Path, help="collection directory (default: <database>/collections)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    logger = logging.getLogger(f"{__name__}.main")
    args = parse_args(argv)
    try:
        app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
        app.setApplicationName(APPLICATION)
        app.setApplicationVersion(__version__)
        app.setOrganizationName(ORGANIZATION)

        settings = ConsoleSettings(args.profile, args.config)
        setup_logging(settings)

        logger.info("Starting SysOp Console")
        logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

        # Invalid values stay editable, so validation only reports
        validation = settings.validate()
        if validation.warnings:
            logger.warning("Configuration warnings detected:")
            for warning in validation.warnings:
                logger.warning(f"  {warning}")
        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")

        store = JsonCollectionStore(args.data or settings.paths.collections)
        ensure_default_menu(store)

        controller = EditorController(build_catalog(settings), store)
        console = TextConsole(controller)
        if not validation.is_valid:
            for error in validation.errors:
                controller.post(MessageLevel.WARNING, error)

        result = console.run()
        if settings.is_first_run:
            settings.set_first_run_complete()
        logger.info(f"Session closed after {controller.modified_count} changes")
        return result

    except ConsoleError as e:
        logger.error(f"SysOp Console cannot start: {e}")
        return 1
    except Exception:
        logger.exception("Unhandled exception in main")
        return 1


if __name__ == "__main__":
    sys.exit(main())

# src/taskdeck/cli/main.py

"""
CLI entrypoint.

Loads settings, initializes logging, builds AppState (loading the task file),
then runs the console loop in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.errors import TaskFileCorruptError

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    log_dir = settings.log_dir if settings.file_logging else None
    try:
        setup_logging(log_dir=log_dir, console_level=console_level)
    except OSError as e:
        # Fall back to console-only logging; the task file may still be usable.
        setup_logging(console_level=console_level)
        logger.warning("File logging disabled (%s).", e)

    logger.info("Starting %s (data=%s)...", settings.app_name, settings.tasks_path)

    try:
        state = create_initial_state(settings=settings)
    except TaskFileCorruptError as e:
        logger.error("%s", e)
        print(f"Cannot start: {e}\nFix or move the file away and try again.", file=sys.stderr)
        return 2
    except OSError as e:
        logger.exception("Cannot read task file %s", settings.tasks_path)
        print(f"Cannot start: {e}", file=sys.stderr)
        return 1

    try:
        run_console_loop(state)
    except OSError as e:
        logger.exception("Storage failure; stopping.")
        print(f"Could not save tasks: {e}", file=sys.stderr)
        return 1

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

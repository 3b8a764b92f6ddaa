# src/taskdeck/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import Command
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "taskdeck> "


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Interactive loop: read a command, run it, print the reply, save if it changed the store.

    OSError from saving is not caught here; it ends the run (see cli/main.py).
    """
    app_name = str(getattr(state.settings, "app_name", "taskdeck"))
    logger.info("Console started (tasks=%d path=%s).", len(state.task_store), state.tasks_path)
    write(f"[{app_name}] Type /help for commands, /exit to quit.")

    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        result = command_registry.handle(state, line)
        if result is None:
            continue

        if result.needs_save:
            state.save()

        write(result.reply)

        if result.command is Command.EXIT:
            logger.info("Console exit command received.")
            break

    logger.info("Console finished.")

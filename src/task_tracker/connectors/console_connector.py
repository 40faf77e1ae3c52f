# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..cli.render import render_board
from ..core.state import AppState

logger = logging.getLogger(__name__)

# Read-only commands already print what the user asked for; no redraw after them.
_NO_REDRAW = ("/list", "/ls", "/help", "/h", "/?", "/status")


def _redraw(state: AppState, write: Callable[[str], None]) -> None:
    try:
        board = render_board(state)
    except Exception:
        logger.exception("Board rendering crashed.")
        board = "Internal error while rendering the board."
    write(board)


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Interactive REPL: one command per line, board redrawn after each mutation.

    read_line/write are injectable so the loop can be driven from tests.
    """
    logger.info("Console connector started.")
    write("Type /help for commands, /exit to quit.\n")
    _redraw(state, write)

    while True:
        try:
            user_input = read_line("\n> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not user_input.startswith("/"):
            # Bare text is treated as a new task line.
            user_input = f"/add {user_input}"

        try:
            response = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            write(response)

        if user_input.split()[0].lower() not in _NO_REDRAW:
            write("")
            _redraw(state, write)

    logger.info("Console connector finished.")

# src/taskbug/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.assistant import TaskAssistant

logger = logging.getLogger(__name__)


def run_console_loop(
    assistant: TaskAssistant,
    *,
    prompt: str = "> ",
    read_line: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> None:
    """
    Minimal line-based front end: read, hand to the assistant, print the reply.

    Stops on "bye", EOF or Ctrl+C. Saving on exit is the caller's business.
    """
    read_line = read_line or input
    write = write or print

    logger.info("Console connector started.")
    write("Hmph. What do you want? (type help if you must)")

    while not assistant.exit_requested:
        try:
            line = read_line(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not line:
            continue

        reply = assistant.handle(line)
        if reply:
            write(reply)

    logger.info("Console connector finished.")

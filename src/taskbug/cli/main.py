# src/taskbug/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task file into AppState, then runs the
console front end until "bye" / EOF.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, save_on_exit
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.assistant import TaskAssistant
from ..errors import CorruptDataError, StorageError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (data file %s)...", settings.app_name, settings.tasks_path)

    try:
        state = create_initial_state(settings=settings)
    except (CorruptDataError, StorageError) as e:
        # The data file is left exactly as it was; fixing it is up to the user.
        logger.error("Cannot load tasks from %s: %s", settings.tasks_path, e)
        print(f"Your task file is a mess ({e}). Fix it and come back.", file=sys.stderr)
        raise SystemExit(1) from e

    for warning in state.load_warnings:
        print(f"[warn] {warning}", file=sys.stderr)

    assistant = TaskAssistant(state)
    try:
        run_console_loop(assistant, prompt=settings.prompt)
    finally:
        save_on_exit(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()

# src/taskbug/core/assistant.py

"""
The one surface a front end talks to.

A front end feeds it raw lines, shows the returned text and stops once
exit_requested turns true. Rendering, lifecycle and process exit stay
on the front end's side.
"""

from __future__ import annotations

import logging

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as default_registry
from .state import AppState

logger = logging.getLogger(__name__)


class TaskAssistant:
    def __init__(self, state: AppState, registry: CommandRegistry | None = None) -> None:
        self._state = state
        self._registry = registry or default_registry

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def exit_requested(self) -> bool:
        return self._state.exit_requested

    def handle(self, line: str) -> str:
        logger.debug("Input: %r", line)
        return self._registry.handle(self._state, line)

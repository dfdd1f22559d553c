# src/taskbug/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..errors import (
    DateFormatError,
    IndexOutOfRangeError,
    InputFormatError,
    LogicalOrderError,
    StorageError,
    TaskbugError,
)
from ..tasks.dates import DATE_FORMAT, parse_date

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)

MSG_NOT_UNDERSTOOD = "I don't understand what you just said, stupid..."
MSG_INTERNAL_ERROR = "Something broke inside me. Check the logs."
MSG_BYE = "Finally. Bye."
MSG_SAVED = "Saved. You're welcome."
MSG_SAVE_FAILED = "Oops, could not write the data file: {reason}"
MSG_GIVE_NUMBER = "Give a number you silly goose, stupid!"
MSG_BAD_NUMBER = "That was not understood. Silly."
MSG_OUT_OF_BOUNDS = "Out of bounds. Get your head in the game, please."
MSG_MARKED = "Ok it's done. What else do you want..."
MSG_DELETED = "Ok it's gone. What else do you want..."
MSG_EMPTY_QUERY = "Give a non-empty search query, you stupid!"
MSG_EMPTY_NAME = "Give a non-empty name for the task, you stupid!"
MSG_TODO_ADDED = "k added..."
MSG_ADDED = "k"
MSG_WRONG_ARGS = "Give the correct number of arguments! This should be simple by now."
MSG_BAD_DATE = (
    f"Ugh, I don't get it. Date should be in {DATE_FORMAT} format... "
    "And keep the title spaceless!"
)
MSG_TIME_TRAVEL = (
    "I don't think we can time-travel. How come it ends before it starts? Lol..."
)

_INT_RE = re.compile(r"[+-]?[0-9]+")
# Indices are 32-bit signed ints; anything wider is not a number we understand.
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


@dataclass(slots=True)
class _Command:
    name: str
    handler: CommandHandler
    help_text: str
    exact: bool

    def matches(self, line: str) -> bool:
        return line == self.name if self.exact else line.startswith(self.name)


class CommandRegistry:
    """
    Verb registry used by the assistant (list, todo, mark, ...).

    Verbs are tried in registration order. Exact verbs must equal the whole
    line; prefix verbs only need to start it ("marks 2" runs "mark").
    """

    def __init__(self) -> None:
        self._commands: list[_Command] = []

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        exact: bool = False,
    ) -> None:
        self._commands.append(_Command(name, handler, help_text, exact))

    def match(self, line: str) -> _Command | None:
        for cmd in self._commands:
            if cmd.matches(line):
                return cmd
        return None

    def handle(self, state: AppState, line: str) -> str:
        """
        Run one input line and return the reply.
        Never raises: every failure becomes a (grumpy) reply.
        """
        cmd = self.match(line)
        if cmd is None:
            logger.debug("Unrecognized input %r", line)
            return MSG_NOT_UNDERSTOOD

        try:
            return cmd.handler(state, line)
        except TaskbugError as e:
            logger.info("Command %s rejected: %s", cmd.name, e)
            return str(e)
        except Exception:
            logger.exception("Command handler %s crashed.", cmd.name)
            return MSG_INTERNAL_ERROR

    def build_help(self) -> str:
        lines = ["Commands (as if you'd remember them):"]
        for cmd in self._commands:
            lines.append(f"  {cmd.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def split_args(line: str, nparts: int) -> list[str]:
    """Split on single spaces into at most `nparts` parts; the last part keeps the rest."""
    return line.split(" ", nparts - 1)


def parse_index(raw: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise InputFormatError(MSG_BAD_NUMBER)
    value = int(raw)
    if not _INT_MIN <= value <= _INT_MAX:
        raise InputFormatError(MSG_BAD_NUMBER)
    return value


def cmd_list(state: AppState, line: str) -> str:
    return state.tasks.get_tasks()


def cmd_bye(state: AppState, line: str) -> str:
    state.exit_requested = True
    logger.debug("Exit requested.")
    return MSG_BYE


def cmd_save(state: AppState, line: str) -> str:
    try:
        state.store.write(state.tasks)
    except StorageError as e:
        logger.error("Save failed: %s", e)
        return MSG_SAVE_FAILED.format(reason=e)
    return MSG_SAVED


def cmd_help(state: AppState, line: str) -> str:
    return registry.build_help()


def _set_done(state: AppState, line: str, done: bool) -> str:
    words = split_args(line, 2)
    if len(words) < 2 or not words[1]:
        return MSG_GIVE_NUMBER
    index = parse_index(words[1])
    try:
        if done:
            state.tasks.mark(index)
        else:
            state.tasks.unmark(index)
    except IndexOutOfRangeError as e:
        logger.debug("%s", e)
        return MSG_OUT_OF_BOUNDS
    return MSG_MARKED


def cmd_mark(state: AppState, line: str) -> str:
    return _set_done(state, line, True)


def cmd_unmark(state: AppState, line: str) -> str:
    return _set_done(state, line, False)


def cmd_find(state: AppState, line: str) -> str:
    words = split_args(line, 2)
    if len(words) < 2 or not words[1]:
        return MSG_EMPTY_QUERY
    return state.tasks.find_matches(words[1])


def cmd_todo(state: AppState, line: str) -> str:
    words = split_args(line, 2)
    if len(words) < 2 or not words[1]:
        return MSG_EMPTY_NAME
    state.tasks.add_todo(words[1])
    return MSG_TODO_ADDED


def cmd_deadline(state: AppState, line: str) -> str:
    """
    deadline DESC DATE

    A blind three-way split: DESC is a single word, anything after the
    second space lands in the date slot.
    """
    words = split_args(line, 3)
    if len(words) < 3:
        return MSG_WRONG_ARGS
    if not words[1]:
        return MSG_EMPTY_NAME
    try:
        due = parse_date(words[2])
    except DateFormatError:
        return MSG_BAD_DATE
    state.tasks.add_deadline(words[1], due)
    return MSG_ADDED


def cmd_event(state: AppState, line: str) -> str:
    """event DESC START END (same single-word DESC rule as deadline)."""
    words = split_args(line, 4)
    if len(words) < 4:
        return MSG_WRONG_ARGS
    if not words[1]:
        return MSG_EMPTY_NAME
    try:
        start = parse_date(words[2])
        end = parse_date(words[3])
    except DateFormatError:
        return MSG_BAD_DATE
    try:
        state.tasks.add_event(words[1], start, end)
    except LogicalOrderError:
        return MSG_TIME_TRAVEL
    return MSG_ADDED


def cmd_delete(state: AppState, line: str) -> str:
    words = split_args(line, 2)
    if len(words) < 2:
        return MSG_WRONG_ARGS
    index = parse_index(words[1])
    try:
        state.tasks.delete(index)
    except IndexOutOfRangeError as e:
        logger.debug("%s", e)
        return MSG_OUT_OF_BOUNDS
    return MSG_DELETED


# Order matters: prefixes are tried top to bottom.
registry.register("list", cmd_list, "list                     show every task", exact=True)
registry.register("bye", cmd_bye, "bye                      leave me alone", exact=True)
registry.register("save", cmd_save, "save                     write tasks to disk", exact=True)
registry.register("help", cmd_help, "help                     this text", exact=True)
registry.register("mark", cmd_mark, "mark N                   mark task N as done")
registry.register("unmark", cmd_unmark, "unmark N                 mark task N as not done")
registry.register("find", cmd_find, "find KEYWORD             tasks whose description contains KEYWORD")
registry.register("todo", cmd_todo, "todo DESC                add a todo")
registry.register("deadline", cmd_deadline, "deadline DESC DATE       add a deadline (DESC is one word)")
registry.register("event", cmd_event, "event DESC START END     add an event (DESC is one word)")
registry.register("delete", cmd_delete, "delete N                 remove task N")

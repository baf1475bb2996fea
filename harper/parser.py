"""Command interpreter for Harper.

Turns one line of user input into a Command. Keywords are case-sensitive;
``bye`` and ``list`` must match exactly, every other keyword is a prefix that
must be followed by a space:

- todo <description>
- deadline <description> /by <d/M/yyyy H:mm>
- event <description> /from <d/M/yyyy H:mm> /to <d/M/yyyy H:mm>
- delete <n>, mark <n>, unmark <n>
- find <keyword>
- update <n> <field> <new value>

Task numbers are 1-based in the input and 0-based in the resulting command.
They are not checked against the list here; the task list does that when the
command runs.
"""

import logging
import re
from typing import Callable, Dict

from harper.commands import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    UpdateCommand,
)
from harper.exceptions import (
    InvalidCommandError,
    InvalidDeadlineError,
    InvalidEventError,
    InvalidIndexError,
    InvalidUpdateError,
)
from harper.models import Task, parse_date_time

logger = logging.getLogger(__name__)

INDEX_RE = re.compile(r"[+-]?\d+")


def _argument(line: str, keyword: str) -> str:
    return line[len(keyword) + 1:].strip()


def _parse_index(token: str) -> int:
    """Convert a 1-based task number to a 0-based index.

    Raises:
        InvalidIndexError: If the token is not an integer
    """
    token = token.strip()
    if not INDEX_RE.fullmatch(token):
        raise InvalidIndexError()
    return int(token) - 1


def parse_todo(line: str) -> Command:
    description = _argument(line, "todo")
    if not description:
        raise InvalidCommandError()
    return AddCommand(Task.todo(description))


def parse_deadline(line: str) -> Command:
    parts = _argument(line, "deadline").split("/by", 1)
    if len(parts) != 2:
        raise InvalidDeadlineError()

    description, by = parts[0].strip(), parts[1].strip()
    if not description or not by:
        raise InvalidDeadlineError()

    return AddCommand(Task.deadline(description, parse_date_time(by)))


def parse_event(line: str) -> Command:
    parts = _argument(line, "event").split("/from", 1)
    if len(parts) != 2:
        raise InvalidEventError()

    description = parts[0].strip()
    start_and_end = parts[1].strip().split("/to", 1)
    if len(start_and_end) != 2 or not description:
        raise InvalidEventError()

    start, end = start_and_end[0].strip(), start_and_end[1].strip()
    if not start or not end:
        raise InvalidEventError()

    start_time = parse_date_time(start)
    end_time = parse_date_time(end)
    if start_time > end_time:
        raise InvalidEventError()

    return AddCommand(Task.event(description, start_time, end_time))


def parse_delete(line: str) -> Command:
    return DeleteCommand(_parse_index(_argument(line, "delete")))


def parse_mark(line: str) -> Command:
    keyword, argument = line.split(" ", 1)
    return MarkCommand(_parse_index(argument), done=keyword == "mark")


def parse_find(line: str) -> Command:
    keyword = _argument(line, "find")
    if not keyword:
        raise InvalidCommandError()
    return FindCommand(keyword)


def parse_update(line: str) -> Command:
    index_and_field = _argument(line, "update").split(None, 1)
    if not index_and_field:
        raise InvalidIndexError()

    index = _parse_index(index_and_field[0])
    if len(index_and_field) != 2:
        raise InvalidUpdateError()

    return UpdateCommand(index, index_and_field[1].strip())


# Prefix keywords, each requiring a following space
PREFIX_PARSERS: Dict[str, Callable[[str], Command]] = {
    "todo": parse_todo,
    "deadline": parse_deadline,
    "event": parse_event,
    "delete": parse_delete,
    "mark": parse_mark,
    "unmark": parse_mark,
    "find": parse_find,
    "update": parse_update,
}


def parse(line: str) -> Command:
    """Parse one line of user input.

    Args:
        line: The raw command line (the caller trims surrounding whitespace)

    Returns:
        The Command the line describes

    Raises:
        InvalidCommandError: If the line matches no known command
        InvalidIndexError: If a task number is not an integer
        InvalidDeadlineError: If a deadline is missing its parts
        InvalidEventError: If an event is missing its parts or ends before it starts
        InvalidDateTimeError: If a date/time does not match d/M/yyyy H:mm
        InvalidUpdateError: If an update has no field to change
    """
    if line == "bye":
        return ExitCommand()
    if line == "list":
        return ListCommand()

    keyword = line.split(" ", 1)[0]
    handler = PREFIX_PARSERS.get(keyword)
    if handler is None or not line.startswith(keyword + " "):
        logger.info("Unrecognized command: %r", line)
        raise InvalidCommandError()

    command = handler(line)
    logger.debug("Parsed %r as %r", line, command)
    return command

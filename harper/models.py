"""Core models for Harper.

This module defines the task data structures and the date handling they share:
- TaskType: Enum tagging the task variant (and its persisted letter)
- Task: A dataclass holding the shared fields plus the variant's dates
- parse_date_time / format_date_time: the single fixed date/time format
"""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from harper.exceptions import InvalidDateTimeError

# d/M/yyyy H:mm, 24-hour clock, no timezone
DATE_TIME_FORMAT = "%d/%m/%Y %H:%M"
DISPLAY_FORMAT = "%b %d %Y %H:%M"
DATE_TIME_RE = re.compile(r"\d{1,2}/\d{1,2}/\d{4} \d{1,2}:\d{2}", re.ASCII)


def parse_date_time(text: str) -> datetime:
    """Parse a date/time written as ``d/M/yyyy H:mm``.

    Args:
        text: Raw date/time text, e.g. ``2/12/2024 18:00``

    Returns:
        The parsed naive datetime

    Raises:
        InvalidDateTimeError: If the text does not match the format
    """
    text = text.strip()
    # strptime alone allows a one-digit minute and any whitespace run
    if not DATE_TIME_RE.fullmatch(text):
        raise InvalidDateTimeError()

    try:
        return datetime.strptime(text, DATE_TIME_FORMAT)
    except ValueError as e:
        raise InvalidDateTimeError() from e


def format_date_time(value: datetime) -> str:
    """Format a datetime the way it is typed in (inverse of parse_date_time)."""
    return f"{value.day}/{value.month}/{value.year} {value.hour}:{value.minute:02d}"


class TaskType(Enum):
    """Task variants, valued by their persisted type letter."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


UPDATABLE_FIELDS = {
    TaskType.TODO: ("description",),
    TaskType.DEADLINE: ("description", "by"),
    TaskType.EVENT: ("description", "from", "to"),
}


@dataclass
class Task:
    """Task model representing a single todo, deadline or event.

    Attributes:
        description: What the task is about
        task_type: Which variant this task is
        is_done: Whether the task has been completed
        by: Due date/time (deadlines only)
        start: Start date/time (events only)
        end: End date/time (events only)
    """

    description: str
    task_type: TaskType = TaskType.TODO
    is_done: bool = False
    by: Optional[datetime] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @classmethod
    def todo(cls, description: str, is_done: bool = False) -> "Task":
        return cls(description=description, task_type=TaskType.TODO, is_done=is_done)

    @classmethod
    def deadline(cls, description: str, by: datetime, is_done: bool = False) -> "Task":
        return cls(description=description, task_type=TaskType.DEADLINE, is_done=is_done, by=by)

    @classmethod
    def event(
        cls, description: str, start: datetime, end: datetime, is_done: bool = False
    ) -> "Task":
        return cls(
            description=description,
            task_type=TaskType.EVENT,
            is_done=is_done,
            start=start,
            end=end,
        )

    @property
    def updatable_fields(self) -> Tuple[str, ...]:
        """Field names accepted by the update command for this variant."""
        return UPDATABLE_FIELDS[self.task_type]

    def mark_done(self) -> None:
        self.is_done = True

    def mark_not_done(self) -> None:
        self.is_done = False

    def __str__(self) -> str:
        status_icon = "X" if self.is_done else " "
        text = f"[{self.task_type.value}][{status_icon}] {self.description}"

        if self.task_type == TaskType.DEADLINE:
            text += f" (by: {self.by.strftime(DISPLAY_FORMAT)})"
        elif self.task_type == TaskType.EVENT:
            text += (
                f" (from: {self.start.strftime(DISPLAY_FORMAT)}"
                f" to: {self.end.strftime(DISPLAY_FORMAT)})"
            )

        return text

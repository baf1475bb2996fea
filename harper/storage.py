"""Storage layer for Harper.

This module provides an abstract storage interface and a flat-file
implementation for persisting tasks. FileStorage keeps one task per line in a
pipe-delimited format and always rewrites the whole file, going through a
temporary file and an atomic rename so a crash never leaves it truncated.
"""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Union

from harper.exceptions import FileLoadingError, InvalidDateTimeError
from harper.models import Task, TaskType, format_date_time, parse_date_time

logger = logging.getLogger(__name__)

SEPARATOR = " | "
RANGE_SEPARATOR = " - "
DEFAULT_FILE_PATH = "data/harper.txt"


def encode_task(task: Task) -> str:
    """Convert a task to its line in the task file.

    Args:
        task: Task to encode

    Returns:
        The line, without a trailing newline
    """
    fields = [task.task_type.value, "1" if task.is_done else "0", task.description]

    if task.task_type == TaskType.DEADLINE:
        fields.append(format_date_time(task.by))
    elif task.task_type == TaskType.EVENT:
        fields.append(format_date_time(task.start) + RANGE_SEPARATOR + format_date_time(task.end))

    return SEPARATOR.join(fields)


def decode_task(line: str) -> Task:
    """Rebuild a task from its line in the task file.

    Args:
        line: One line of the task file

    Returns:
        The decoded Task

    Raises:
        FileLoadingError: If the line does not follow the expected format
    """
    parts = line.split(SEPARATOR, 2)
    if len(parts) != 3 or parts[1] not in ("0", "1"):
        raise FileLoadingError()

    type_letter, done_flag, rest = parts
    is_done = done_flag == "1"

    try:
        task_type = TaskType(type_letter)
    except ValueError as e:
        raise FileLoadingError() from e

    if task_type == TaskType.TODO:
        return Task.todo(rest, is_done)

    # Descriptions may contain the separator; dates never do
    pieces = rest.rsplit(SEPARATOR, 1)
    if len(pieces) != 2:
        raise FileLoadingError()
    description, when = pieces

    try:
        if task_type == TaskType.DEADLINE:
            return Task.deadline(description, parse_date_time(when), is_done)

        span = when.split(RANGE_SEPARATOR, 1)
        if len(span) != 2:
            raise FileLoadingError()
        return Task.event(description, parse_date_time(span[0]), parse_date_time(span[1]), is_done)
    except InvalidDateTimeError as e:
        raise FileLoadingError() from e


class Storage(ABC):
    """Abstract base class for task storage implementations."""

    @abstractmethod
    def save(self, tasks: Iterable[Task]) -> None:
        """Save tasks to storage, replacing whatever was stored before.

        Args:
            tasks: Tasks in display order
        """
        pass

    @abstractmethod
    def load(self) -> List[Task]:
        """Load tasks from storage.

        Returns:
            Tasks in display order
        """
        pass

    @abstractmethod
    def delete(self) -> None:
        """Delete all data from storage."""
        pass


class FileStorage(Storage):
    """Flat text file storage implementation.

    Attributes:
        file_path: Path to the task file
    """

    def __init__(self, file_path: Optional[Union[str, Path]] = None):
        """Initialize FileStorage with a file path.

        Args:
            file_path: Path to the task file. If None, uses the
                      HARPER_DATA_FILE environment variable or defaults to
                      data/harper.txt
        """
        if file_path is None:
            file_path = os.environ.get("HARPER_DATA_FILE", DEFAULT_FILE_PATH)
        self.file_path = Path(file_path)

    def save(self, tasks: Iterable[Task]) -> None:
        """Write all tasks to the file atomically.

        Args:
            tasks: Tasks in display order
        """
        # Ensure parent directory exists
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

        lines = [encode_task(task) + "\n" for task in tasks]

        fd, temp_path = tempfile.mkstemp(
            dir=self.file_path.parent, prefix=f".{self.file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.writelines(lines)
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, self.file_path)
        except BaseException:
            Path(temp_path).unlink(missing_ok=True)
            raise

        logger.debug("Saved %d tasks to %s", len(lines), self.file_path)

    def load(self) -> List[Task]:
        """Load tasks from the file.

        Returns:
            Tasks in file order. Returns an empty list if the file doesn't
            exist or is empty.

        Raises:
            FileLoadingError: If any line is malformed
        """
        if not self.file_path.exists():
            return []

        with open(self.file_path, "r", encoding="utf-8", newline="") as f:
            content = f.read()

        tasks = []
        for line_number, line in enumerate(content.split("\n"), start=1):
            line = line.rstrip("\r")  # tolerate CRLF files edited by hand
            if not line.strip():
                continue
            try:
                tasks.append(decode_task(line))
            except FileLoadingError:
                logger.warning("Malformed line %d in %s: %r", line_number, self.file_path, line)
                raise

        logger.info("Loaded %d tasks from %s", len(tasks), self.file_path)
        return tasks

    def delete(self) -> None:
        """Delete the task file.

        If the file doesn't exist, this method does nothing.
        """
        if self.file_path.exists():
            self.file_path.unlink()

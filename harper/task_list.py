"""In-memory task list.

This module provides the TaskList class that owns the session's tasks. It
handles adding, deleting, marking, updating and searching tasks. Persisting
the list is left to the commands, which save it after every mutation.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from harper.exceptions import InvalidEventError, InvalidIndexError, InvalidUpdateError
from harper.models import Task, parse_date_time

logger = logging.getLogger(__name__)


class TaskList:
    """Ordered collection of tasks.

    Positions are 0-based here and 1-based for the user. Deleting a task
    shifts every later task down by one.

    Attributes:
        tasks: Copy of the tasks in display order
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        """Initialize TaskList, optionally with previously saved tasks.

        Args:
            tasks: Tasks to start with, in display order
        """
        self._tasks: List[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            logger.info("Task index %d out of range (size=%d)", index, len(self._tasks))
            raise InvalidIndexError()

    def get_task(self, index: int) -> Task:
        """Get the task at a 0-based position.

        Raises:
            InvalidIndexError: If index is outside the list
        """
        self._check_index(index)
        return self._tasks[index]

    def add_task(self, task: Task) -> Task:
        """Append a task to the end of the list.

        Args:
            task: Task to add

        Returns:
            The added task
        """
        self._tasks.append(task)
        return task

    def delete_task(self, index: int) -> Task:
        """Remove a task.

        Args:
            index: 0-based position of the task

        Returns:
            The removed task

        Raises:
            InvalidIndexError: If index is outside the list
        """
        self._check_index(index)
        return self._tasks.pop(index)

    def mark_task(self, index: int, done: bool) -> Task:
        """Mark a task as done or not done.

        Args:
            index: 0-based position of the task
            done: New completion state

        Returns:
            The updated task

        Raises:
            InvalidIndexError: If index is outside the list
        """
        task = self.get_task(index)
        if done:
            task.mark_done()
        else:
            task.mark_not_done()
        return task

    def update_task(self, index: int, field_text: str) -> Task:
        """Change one field of a task.

        Args:
            index: 0-based position of the task
            field_text: Field name followed by the new value,
                e.g. ``description read book`` or ``by 2/12/2024 18:00``

        Returns:
            The updated task

        Raises:
            InvalidIndexError: If index is outside the list
            InvalidUpdateError: If the field is unknown for the task or the
                value is missing
            InvalidDateTimeError: If a date value does not parse
            InvalidEventError: If an event would end before it starts
        """
        task = self.get_task(index)

        parts = field_text.strip().split(None, 1)
        if len(parts) != 2:
            raise InvalidUpdateError()
        field_name, value = parts[0], parts[1].strip()

        if field_name not in task.updatable_fields:
            raise InvalidUpdateError(
                f"This {task.task_type.name.lower()} has no field '{field_name}'.\n"
                f"You can update: {', '.join(task.updatable_fields)}."
            )

        if field_name == "description":
            task.description = value
        elif field_name == "by":
            task.by = parse_date_time(value)
        else:
            new_time = parse_date_time(value)
            start = new_time if field_name == "from" else task.start
            end = new_time if field_name == "to" else task.end
            if start > end:
                raise InvalidEventError()
            task.start, task.end = start, end

        logger.debug("Updated %s of task %d", field_name, index + 1)
        return task

    def find_tasks(self, keyword: str) -> List[Task]:
        """Find tasks whose description contains a keyword.

        Args:
            keyword: Case-sensitive substring to look for

        Returns:
            Matching tasks in list order
        """
        return [task for task in self._tasks if keyword in task.description]

"""Commands produced by the parser.

Each command is an immutable value describing one user request. ``execute``
dispatches a command to its handler, which applies it to the task list,
saves the full list after any change and returns the response text built by
the UI.
"""

import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, Type

from harper.models import Task
from harper.storage import Storage
from harper.task_list import TaskList
from harper.ui import Ui

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    """Base for all commands.

    Attributes:
        is_exit: Whether running this command ends the session
    """

    is_exit: ClassVar[bool] = False


@dataclass(frozen=True)
class ExitCommand(Command):
    is_exit: ClassVar[bool] = True


@dataclass(frozen=True)
class ListCommand(Command):
    pass


@dataclass(frozen=True)
class AddCommand(Command):
    task: Task


@dataclass(frozen=True)
class DeleteCommand(Command):
    index: int


@dataclass(frozen=True)
class MarkCommand(Command):
    index: int
    done: bool


@dataclass(frozen=True)
class FindCommand(Command):
    keyword: str


@dataclass(frozen=True)
class UpdateCommand(Command):
    index: int
    field_text: str


def cmd_exit(command: ExitCommand, task_list: TaskList, ui: Ui, storage: Storage) -> str:
    return ui.goodbye()


def cmd_list(command: ListCommand, task_list: TaskList, ui: Ui, storage: Storage) -> str:
    return ui.task_list(task_list.tasks)


def cmd_add(command: AddCommand, task_list: TaskList, ui: Ui, storage: Storage) -> str:
    task = task_list.add_task(command.task)
    storage.save(task_list)
    return ui.added(task, len(task_list))


def cmd_delete(command: DeleteCommand, task_list: TaskList, ui: Ui, storage: Storage) -> str:
    task = task_list.delete_task(command.index)
    storage.save(task_list)
    return ui.deleted(task, len(task_list))


def cmd_mark(command: MarkCommand, task_list: TaskList, ui: Ui, storage: Storage) -> str:
    task = task_list.mark_task(command.index, command.done)
    storage.save(task_list)
    return ui.marked(task)


def cmd_find(command: FindCommand, task_list: TaskList, ui: Ui, storage: Storage) -> str:
    return ui.matches(task_list.find_tasks(command.keyword))


def cmd_update(command: UpdateCommand, task_list: TaskList, ui: Ui, storage: Storage) -> str:
    task = task_list.update_task(command.index, command.field_text)
    storage.save(task_list)
    return ui.updated(task)


HANDLERS: Dict[Type[Command], Callable[..., str]] = {
    ExitCommand: cmd_exit,
    ListCommand: cmd_list,
    AddCommand: cmd_add,
    DeleteCommand: cmd_delete,
    MarkCommand: cmd_mark,
    FindCommand: cmd_find,
    UpdateCommand: cmd_update,
}


def execute(command: Command, task_list: TaskList, ui: Ui, storage: Storage) -> str:
    """Run a command against the task list.

    Args:
        command: Parsed command
        task_list: The session's tasks
        ui: Builds the response text
        storage: Receives the full list after every change

    Returns:
        The response to show the user

    Raises:
        HarperError: If the command cannot be applied; the list is unchanged
    """
    handler = HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"Unknown command type: {type(command).__name__}")

    logger.debug("Executing %r", command)
    return handler(command, task_list, ui, storage)

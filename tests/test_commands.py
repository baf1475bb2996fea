"""Tests for command execution."""

from datetime import datetime
from typing import List

import pytest

from harper.commands import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    UpdateCommand,
    execute,
)
from harper.exceptions import InvalidIndexError, InvalidUpdateError
from harper.models import Task
from harper.storage import Storage
from harper.task_list import TaskList
from harper.ui import Ui


class RecordingStorage(Storage):
    """Storage double that keeps a snapshot of every save."""

    def __init__(self):
        self.saves: List[List[Task]] = []

    def save(self, tasks):
        self.saves.append(list(tasks))

    def load(self):
        return []

    def delete(self):
        self.saves.clear()


class TestExecute:
    """Test suite for execute and the command handlers."""

    @pytest.fixture
    def storage(self):
        return RecordingStorage()

    @pytest.fixture
    def ui(self):
        return Ui()

    @pytest.fixture
    def task_list(self):
        return TaskList([Task.todo("buy milk"), Task.todo("walk dog")])

    def test_add_appends_and_saves(self, task_list, ui, storage):
        """Test that AddCommand appends the task and saves the full list."""
        task = Task.deadline("return book", datetime(2024, 12, 2, 18, 0))

        response = execute(AddCommand(task), task_list, ui, storage)

        assert task_list.tasks[-1] is task
        assert len(storage.saves) == 1
        assert storage.saves[0] == task_list.tasks
        assert "return book" in response
        assert "Now you have 3 tasks in the list." in response

    def test_delete_removes_and_saves(self, task_list, ui, storage):
        """Test that DeleteCommand removes the task and reports it."""
        response = execute(DeleteCommand(0), task_list, ui, storage)

        assert [t.description for t in task_list] == ["walk dog"]
        assert storage.saves == [task_list.tasks]
        assert "buy milk" in response
        assert "Now you have 1 task in the list." in response

    def test_delete_out_of_range_does_not_save(self, task_list, ui, storage):
        """Test that a failed delete leaves list and storage untouched."""
        with pytest.raises(InvalidIndexError):
            execute(DeleteCommand(2), task_list, ui, storage)

        assert len(task_list) == 2
        assert storage.saves == []

    def test_mark_and_unmark(self, task_list, ui, storage):
        """Test that MarkCommand sets completion and saves each time."""
        response = execute(MarkCommand(1, True), task_list, ui, storage)
        assert task_list.get_task(1).is_done is True
        assert "marked this task as done" in response

        response = execute(MarkCommand(1, False), task_list, ui, storage)
        assert task_list.get_task(1).is_done is False
        assert "not done yet" in response

        assert len(storage.saves) == 2

    def test_update_changes_field_and_saves(self, task_list, ui, storage):
        """Test that UpdateCommand changes the field and saves."""
        response = execute(UpdateCommand(0, "description buy oat milk"), task_list, ui, storage)

        assert task_list.get_task(0).description == "buy oat milk"
        assert len(storage.saves) == 1
        assert "buy oat milk" in response

    def test_update_invalid_field_does_not_save(self, task_list, ui, storage):
        """Test that a rejected update does not save."""
        with pytest.raises(InvalidUpdateError):
            execute(UpdateCommand(0, "by 2/12/2024 18:00"), task_list, ui, storage)
        assert storage.saves == []

    def test_find_does_not_save(self, task_list, ui, storage):
        """Test that FindCommand only reports matches."""
        response = execute(FindCommand("milk"), task_list, ui, storage)

        assert "1. [T][ ] buy milk" in response
        assert "walk dog" not in response
        assert storage.saves == []

    def test_find_no_match(self, task_list, ui, storage):
        """Test that FindCommand reports when nothing matches."""
        response = execute(FindCommand("cat"), task_list, ui, storage)
        assert response == "No matching tasks found."

    def test_list_does_not_save(self, task_list, ui, storage):
        """Test that ListCommand renders every task in order."""
        response = execute(ListCommand(), task_list, ui, storage)

        assert "1. [T][ ] buy milk" in response
        assert "2. [T][ ] walk dog" in response
        assert storage.saves == []

    def test_exit(self, task_list, ui, storage):
        """Test that ExitCommand says goodbye without touching the list."""
        response = execute(ExitCommand(), task_list, ui, storage)

        assert "Bye" in response
        assert len(task_list) == 2
        assert storage.saves == []

    def test_only_exit_ends_session(self):
        """Test the is_exit flag of every command."""
        assert ExitCommand().is_exit is True
        for command in [ListCommand(), DeleteCommand(0), MarkCommand(0, True),
                        FindCommand("x"), UpdateCommand(0, "description y"),
                        AddCommand(Task.todo("x"))]:
            assert command.is_exit is False

    def test_unknown_command_type(self, task_list, ui, storage):
        """Test that an unregistered command type is a programming error."""
        with pytest.raises(TypeError):
            execute(Command(), task_list, ui, storage)

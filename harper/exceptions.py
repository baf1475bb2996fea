"""Errors raised by Harper.

Every error carries a user-facing message. They are raised where the problem
is detected and caught once by the interpreter loop, which shows the message
and waits for the next command.
"""

from typing import Optional


class HarperError(Exception):
    """Base class for all Harper errors."""

    default_message = "Something went wrong."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class InvalidCommandError(HarperError):
    default_message = (
        "Sorry, I don't understand that command.\n"
        "Try: todo, deadline, event, list, mark, unmark, delete, find, update or bye."
    )


class InvalidIndexError(HarperError):
    default_message = "Please enter a valid task number from the list."


class InvalidDeadlineError(HarperError):
    default_message = (
        "A deadline needs a description and a due date:\n"
        "deadline [description] /by [d/M/yyyy H:mm]"
    )


class InvalidEventError(HarperError):
    default_message = (
        "An event needs a description, a start and an end, "
        "and the start must not be after the end:\n"
        "event [description] /from [d/M/yyyy H:mm] /to [d/M/yyyy H:mm]"
    )


class InvalidDateTimeError(HarperError):
    default_message = "Please write dates as d/M/yyyy H:mm, e.g. 2/12/2024 18:00."


class InvalidUpdateError(HarperError):
    default_message = (
        "Please tell me what to update:\n"
        "update [task number] [field] [new value]\n"
        "Fields: description (any task), by (deadline), from / to (event)."
    )


class FileLoadingError(HarperError):
    default_message = (
        "Error occurs during loading!\n"
        "Please make sure the content of the task file follows the expected format:\n"
        'ToDo: "T | [0 or 1] | [description]"\n'
        'Deadline: "D | [0 or 1] | [description] | [by]"\n'
        'Event: "E | [0 or 1] | [description] | [start] - [end]"'
    )

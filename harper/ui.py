"""Text user interface for Harper.

Reads command lines and builds every message shown to the user. The message
builders return strings so commands can hand their response back to the
interpreter loop; ``show`` is the only method that writes output.
"""

import sys
from typing import List, Optional, Sequence, TextIO

from harper.models import Task

DIVIDER = "_" * 60
INDENT = "    "


def _count(size: int) -> str:
    noun = "task" if size == 1 else "tasks"
    return f"Now you have {size} {noun} in the list."


def _numbered(tasks: Sequence[Task]) -> List[str]:
    return [f"{position}. {task}" for position, task in enumerate(tasks, start=1)]


class Ui:
    """Console input and output.

    Attributes:
        in_stream: Where command lines are read from
        out_stream: Where responses are written to
    """

    def __init__(self, in_stream: Optional[TextIO] = None, out_stream: Optional[TextIO] = None):
        self.in_stream = in_stream or sys.stdin
        self.out_stream = out_stream or sys.stdout

    def read_command(self) -> Optional[str]:
        """Read the next command line.

        Returns:
            The line with surrounding whitespace removed, or None at end of input
        """
        line = self.in_stream.readline()
        if not line:
            return None
        return line.strip()

    def show(self, message: str) -> None:
        """Print a message between dividers."""
        body = "\n".join(INDENT + line for line in message.split("\n"))
        print(f"{INDENT}{DIVIDER}\n{body}\n{INDENT}{DIVIDER}", file=self.out_stream)

    def welcome(self) -> str:
        return "Hello! I'm Harper\nWhat can I do for you?"

    def goodbye(self) -> str:
        return "Bye. Hope to see you again soon!"

    def added(self, task: Task, size: int) -> str:
        return f"Got it. I've added this task:\n  {task}\n{_count(size)}"

    def deleted(self, task: Task, size: int) -> str:
        return f"Noted. I've removed this task:\n  {task}\n{_count(size)}"

    def marked(self, task: Task) -> str:
        if task.is_done:
            return f"Nice! I've marked this task as done:\n  {task}"
        return f"OK, I've marked this task as not done yet:\n  {task}"

    def updated(self, task: Task) -> str:
        return f"Got it. I've updated this task:\n  {task}"

    def task_list(self, tasks: Sequence[Task]) -> str:
        if not tasks:
            return "Your list is empty. Add a task with todo, deadline or event."
        return "\n".join(["Here are the tasks in your list:"] + _numbered(tasks))

    def matches(self, tasks: Sequence[Task]) -> str:
        if not tasks:
            return "No matching tasks found."
        return "\n".join(["Here are the matching tasks in your list:"] + _numbered(tasks))

    def error(self, error: Exception) -> str:
        return f"OOPS!!! {error}"

"""Command-line interface for Harper.

This module runs the interactive session: it loads the saved tasks, then
reads one command per line, parses and executes it, and shows the response
until the user types ``bye`` or input ends. Recognized commands:
- todo, deadline, event: Add a task
- list: Show all tasks
- mark, unmark: Change a task's completion
- delete: Remove a task
- find: Search descriptions
- update: Change one field of a task
- bye: Save and quit
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from harper.commands import execute
from harper.config import get_settings
from harper.exceptions import FileLoadingError, HarperError
from harper.logging_setup import setup_logging
from harper.parser import parse
from harper.storage import FileStorage, Storage
from harper.task_list import TaskList
from harper.ui import Ui

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    return argparse.ArgumentParser(
        prog="harper",
        description="Personal task tracker: type commands such as "
        "'todo read book', 'list' or 'bye' once it starts.",
    )


def handle_line(line: str, task_list: TaskList, ui: Ui, storage: Storage) -> Tuple[str, bool]:
    """Parse and execute one command line.

    Args:
        line: Trimmed command line
        task_list: The session's tasks
        ui: Builds the response text
        storage: Receives the full list after every change

    Returns:
        The response text and whether the session should end
    """
    try:
        command = parse(line)
        return execute(command, task_list, ui, storage), command.is_exit
    except HarperError as e:
        logger.info("Rejected %r: %s", line, type(e).__name__)
        return ui.error(e), False


def load_tasks(storage: Storage, ui: Ui) -> TaskList:
    """Load the saved tasks, starting empty if the file is malformed."""
    try:
        return TaskList(storage.load())
    except FileLoadingError as e:
        ui.show(ui.error(e))
        return TaskList()


def run(task_list: TaskList, ui: Ui, storage: Storage) -> None:
    """Read and run commands until ``bye`` or end of input.

    Args:
        task_list: The session's tasks
        ui: Console input and output
        storage: Receives the full list after every change
    """
    ui.show(ui.welcome())

    while True:
        line = ui.read_command()
        if line is None:
            logger.info("End of input, exiting.")
            break
        if not line:
            continue

        response, is_exit = handle_line(line, task_list, ui, storage)
        ui.show(response)
        if is_exit:
            break

    storage.save(task_list)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:]

    Returns:
        Exit code (0 for success, 1 if the task file cannot be read or written)
    """
    create_parser().parse_args(argv)

    settings = get_settings()
    console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    storage = FileStorage(settings.data_file)
    ui = Ui()

    try:
        task_list = load_tasks(storage, ui)
        run(task_list, ui, storage)
    except OSError:
        logger.exception("Cannot access task file %s", settings.data_file)
        print(f"Error: cannot access task file {settings.data_file}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command line entry point: new, read, list and finish."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from iptm.dates import IptmError
from iptm.prompts import create_subtask, create_task, get_number, get_subtask, get_task
from iptm.schedule import DEFAULT_PATH, Calendar
from iptm.task import details_dir

__all__ = ["handle_new", "handle_read", "handle_finish", "handle_list", "main"]

_NO_TASKS = "You have no upcoming tasks!"
_NO_SUBTASKS = "Task has no subtasks yet!"
_MISSING = "Error, missing arguments after new"
_UNRECOGNIZED = "Error, unrecognized arguments after new"


def _action(args: Sequence[str]) -> str:
    if not args:
        raise IptmError(_MISSING)
    return args[0]


def _open_editor(file: Path) -> None:
    try:
        details_dir().mkdir(parents=True, exist_ok=True)
    except OSError:
        raise IptmError("Error: failed to create directory") from None
    editor = os.environ.get("EDITOR") or "nvim"
    try:
        subprocess.run([editor, str(file)], check=False)
    except OSError:
        raise IptmError("Error, failed to load editor") from None


def handle_new(args: Sequence[str], path=DEFAULT_PATH) -> None:
    """Create a task or a subtask; *args* are the words after 'new'."""
    action = _action(args)
    if action == "task":
        calendar = Calendar.load(path)
        calendar.push(create_task())
        calendar.save(path)
    elif action == "subtask":
        calendar = Calendar.load(path)
        calendar.print_tasks()
        if not calendar.tasks:
            return
        index = get_number("Enter parent task index: ")
        if index >= len(calendar.tasks):
            raise IptmError("Error, invalid Task index")
        parent = calendar.tasks[index]
        parent.push(create_subtask())
        calendar.save(path)
    else:
        raise IptmError(_UNRECOGNIZED)


def handle_read(args: Sequence[str], path=DEFAULT_PATH) -> None:
    """Open the details file of a task or subtask in the editor."""
    action = _action(args)
    if action == "related":
        return
    if action == "task":
        calendar = Calendar.load(path)
        calendar.print_tasks()
        task = get_task(calendar, "Enter task index: ")
        if task is None:
            raise IptmError(_NO_TASKS)
        _open_editor(task.details_file)
    elif action == "subtask":
        calendar = Calendar.load(path)
        calendar.print_tasks()
        parent = get_task(calendar, "Enter parent task index: ")
        if parent is None:
            raise IptmError(_NO_TASKS)
        parent.print_subtasks()
        subtask = get_subtask(parent, "Enter subtask index: ")
        if subtask is None:
            raise IptmError(_NO_SUBTASKS)
        _open_editor(subtask.details_file)
    else:
        raise IptmError(_UNRECOGNIZED)


def handle_finish(args: Sequence[str], path=DEFAULT_PATH) -> None:
    """Toggle the finished state of a task or subtask."""
    action = _action(args)
    if action == "task":
        calendar = Calendar.load(path)
        calendar.print_tasks()
        task = get_task(calendar, "Enter task index: ")
        if task is None:
            raise IptmError(_NO_TASKS)
        task.finished = not task.finished
        calendar.save(path)
    elif action == "subtask":
        calendar = Calendar.load(path)
        calendar.save(path)
        calendar.print_tasks()
        parent = get_task(calendar, "Enter parent task index: ")
        if parent is None:
            raise IptmError(_NO_TASKS)
        parent.print_subtasks()
        subtask = get_subtask(parent, "Enter subtask index: ")
        if subtask is None:
            raise IptmError(_NO_SUBTASKS)
        subtask.finished = not subtask.finished
        calendar.save(path)
    else:
        raise IptmError(_UNRECOGNIZED)


def handle_list(path=DEFAULT_PATH) -> None:
    """Print every task with its subtasks."""
    calendar = Calendar.load(path)
    calendar.print()
    calendar.save(path)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    handlers = {"new": handle_new, "read": handle_read, "finish": handle_finish}
    try:
        if not args:
            raise IptmError("Error, missing arguments")
        command, rest = args[0], args[1:]
        if command == "list":
            handle_list()
        elif command in handlers:
            handlers[command](rest)
        else:
            raise IptmError("Error, unrecognized arguments")
    except IptmError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
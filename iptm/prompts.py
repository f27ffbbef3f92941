"""Interactive prompts that read tasks, subtasks, dates and indices from stdin."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from datetime import date
from typing import TypeVar

from iptm.dates import IptmError, parse_date, parse_days
from iptm.schedule import Calendar
from iptm.task import Subtask, Task

__all__ = [
    "get_input",
    "get_number",
    "get_task",
    "get_subtask",
    "get_date",
    "get_days",
    "create_task",
    "create_subtask",
]

_NUMBER_RE = re.compile(r"\d*")

_T = TypeVar("_T")


def get_input(message: str) -> str:
    """Show *message*, read one line and return it without trailing whitespace."""
    try:
        print(message, end="", flush=True)
    except OSError:
        raise IptmError("Error, user input failed") from None
    try:
        line = sys.stdin.readline()
    except (OSError, UnicodeDecodeError):
        raise IptmError("Error, failed to read user input") from None
    return line.rstrip()


def get_number(message: str) -> int:
    """Read a non-negative integer given by the leading digits of the answer."""
    text = get_input(message)
    match = _NUMBER_RE.match(text)
    digits = match.group() if match else ""
    if not digits:
        raise IptmError("failed to parse error")
    return int(digits)


def _pick(items: Sequence[_T], message: str) -> _T | None:
    if not items:
        return None
    index = get_number(message)
    if index >= len(items):
        raise IptmError("Error, non valid index")
    return items[index]


def get_task(calendar: Calendar, message: str) -> Task | None:
    """Ask for a task index; None if the calendar holds no tasks."""
    return _pick(calendar.tasks, message)


def get_subtask(task: Task, message: str) -> Subtask | None:
    """Ask for a subtask index; None if the task has no subtasks."""
    return _pick(task.subtasks, message)


def get_date(message: str) -> date:
    """Ask for an absolute date such as '15/06/2024' or './+1/.'."""
    return parse_date(get_input(message))


def get_days(message: str) -> int:
    """Ask for a relative date and return its offset in days from today."""
    return parse_days(get_input(message))


def create_task(home=None) -> Task:
    """Ask for a name and a due date and build a new task."""
    name = get_input("Enter task name: ")
    due_date = get_date("Enter due date: ")
    return Task.create(name, due_date, home)


def create_subtask(home=None) -> Subtask:
    """Ask for a name and a relative duration and build a new subtask."""
    name = get_input("Enter subtask name: ")
    days = get_days("Enter duration relative date: ")
    return Subtask.create(name, days, home)
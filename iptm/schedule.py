"""The calendar: the saved list of tasks."""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from iptm.dates import IptmError, days_from_today
from iptm.task import FINISHED_MARK, PENDING_MARK, Task

__all__ = ["Calendar", "DEFAULT_PATH", "EMPTY_MESSAGE"]

DEFAULT_PATH = Path("test_cal.json")
EMPTY_MESSAGE = "you have no upcoming tasks!"
_DUE_ICON = "\U000f00f0"


def _mark(finished: bool) -> str:
    return FINISHED_MARK if finished else PENDING_MARK


@dataclass
class Calendar:
    """An ordered collection of tasks persisted as JSON."""

    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __getitem__(self, index: int) -> Task:
        return self.tasks[index]

    def push(self, task: Task) -> None:
        self.tasks.append(task)

    def format(self, today: date | None = None) -> str:
        """Full listing of tasks with their subtasks."""
        if not self.tasks:
            return EMPTY_MESSAGE
        lines = []
        for task in self.tasks:
            days = days_from_today(task.due_date, today)
            lines.append(
                f"{_mark(task.finished)}{task.name}: [ : {days}] "
                f"[{_DUE_ICON} : {task.due_date.isoformat()}]"
            )
            lines.extend(
                f"      {_mark(sub.finished)}{sub.name}: [ : {sub.days_required}]"
                for sub in task.subtasks
            )
            lines.append("")
        return "\n".join(lines)

    def print(self, today: date | None = None) -> None:
        print(self.format(today))

    def format_tasks(self) -> str:
        """Numbered listing of the tasks, one per line."""
        if not self.tasks:
            return EMPTY_MESSAGE
        return "\n".join(
            f"{i}) {_mark(task.finished)}{task.name}: "
            f"[{_DUE_ICON} : {task.due_date.isoformat()}]"
            for i, task in enumerate(self.tasks)
        )

    def print_tasks(self) -> None:
        print(self.format_tasks())

    def to_json(self) -> str:
        return json.dumps([t.to_dict() for t in self.tasks], indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> Calendar:
        try:
            data = json.loads(text)
            if not isinstance(data, list):
                raise IptmError("Error, calendar is not a list")
            return cls([Task.from_dict(item) for item in data])
        except (ValueError, IptmError):
            raise IptmError("Error, failed to load calendar") from None

    def save(self, path: str | Path = DEFAULT_PATH) -> None:
        text = self.to_json()
        try:
            handle = open(path, "w", encoding="utf-8")
        except OSError:
            raise IptmError(
                "Error, failed to create json file, all changes were lost"
            ) from None
        with handle:
            try:
                handle.write(text + "\n")
            except OSError:
                raise IptmError(
                    "Error, failed to write to json file, all changes were lost"
                ) from None

    @classmethod
    def load(cls, path: str | Path = DEFAULT_PATH) -> Calendar:
        """Load the calendar, or return an empty one if the file cannot be opened."""
        try:
            handle = open(path, encoding="utf-8")
        except OSError:
            return cls()
        with handle:
            try:
                text = handle.read()
            except (OSError, UnicodeDecodeError):
                raise IptmError("Error, failed to load calendar") from None
        return cls.from_json(text)
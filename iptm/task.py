"""Tasks and their subtasks."""

from __future__ import annotations

import os
import uuid
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

from iptm.dates import IptmError

__all__ = [
    "FINISHED_MARK",
    "PENDING_MARK",
    "Subtask",
    "Task",
    "details_dir",
]

FINISHED_MARK = "\u2713 "
PENDING_MARK = "\u25cb "


def details_dir(home: str | os.PathLike[str] | None = None) -> Path:
    """Directory holding the markdown details files."""
    if home is None:
        home = os.environ.get("HOME")
        if home is None:
            raise IptmError("Error, failed to access user home")
    return Path(home) / ".local" / "share" / "iptm" / "details_files"


def _field(data: Any, key: str, kind: type) -> Any:
    try:
        value = data[key]
    except (KeyError, TypeError):
        raise IptmError(f"Error, missing field {key!r}") from None
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise IptmError(f"Error, invalid field {key!r}")
    return value


def _uuid(data: Any) -> uuid.UUID:
    try:
        return uuid.UUID(_field(data, "id", str))
    except ValueError:
        raise IptmError("Error, invalid field 'id'") from None


def _mark(finished: bool) -> str:
    return FINISHED_MARK if finished else PENDING_MARK


@dataclass
class Subtask:
    """A step of a task, due a number of days from now."""

    id: uuid.UUID
    name: str
    details_file: Path
    days_required: int
    finished: bool = False

    @classmethod
    def create(cls, name: str, days_required: int, home=None) -> Subtask:
        new_id = uuid.uuid4()
        return cls(
            id=new_id,
            name=name,
            details_file=details_dir(home) / f"{new_id}.md",
            days_required=days_required,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "details_file": str(self.details_file),
            "days_required": self.days_required,
            "finished": self.finished,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Subtask:
        return cls(
            id=_uuid(data),
            name=_field(data, "name", str),
            details_file=Path(_field(data, "details_file", str)),
            days_required=_field(data, "days_required", int),
            finished=_field(data, "finished", bool),
        )


@dataclass
class Task:
    """A task with a due date and optional subtasks."""

    id: uuid.UUID
    name: str
    due_date: date
    details_file: Path
    related_files: list[Path] = field(default_factory=list)
    subtasks: list[Subtask] = field(default_factory=list)
    finished: bool = False

    @classmethod
    def create(cls, name: str, due_date: date, home=None) -> Task:
        new_id = uuid.uuid4()
        return cls(
            id=new_id,
            name=name,
            due_date=due_date,
            details_file=details_dir(home) / f"{new_id}.md",
        )

    def push(self, subtask: Subtask) -> None:
        self.subtasks.append(subtask)

    def format_subtasks(self) -> str:
        """Numbered listing of the subtasks, one per line."""
        return "\n".join(
            f"{i}) {_mark(sub.finished)}{sub.name}: [ : {sub.days_required}]"
            for i, sub in enumerate(self.subtasks)
        )

    def print_subtasks(self) -> None:
        if self.subtasks:
            print(self.format_subtasks())

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "due_date": self.due_date.isoformat(),
            "details_file": str(self.details_file),
            "related_files": [str(p) for p in self.related_files],
            "subtasks": [s.to_dict() for s in self.subtasks],
            "finished": self.finished,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        try:
            due = date.fromisoformat(_field(data, "due_date", str))
        except ValueError:
            raise IptmError("Error, invalid field 'due_date'") from None
        related = _field(data, "related_files", list)
        if not all(isinstance(p, str) for p in related):
            raise IptmError("Error, invalid field 'related_files'")
        return cls(
            id=_uuid(data),
            name=_field(data, "name", str),
            due_date=due,
            details_file=Path(_field(data, "details_file", str)),
            related_files=[Path(p) for p in related],
            subtasks=[Subtask.from_dict(s) for s in _field(data, "subtasks", list)],
            finished=_field(data, "finished", bool),
        )
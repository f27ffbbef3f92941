import io
from datetime import date

import pytest

from iptm.dates import IptmError
from iptm.prompts import (
    create_subtask,
    create_task,
    get_date,
    get_days,
    get_input,
    get_number,
    get_subtask,
    get_task,
)
from iptm.schedule import Calendar
from iptm.task import Subtask, Task, details_dir


def feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


@pytest.fixture
def calendar(tmp_path):
    first = Task.create("Essay", date(2030, 1, 1), home=tmp_path)
    second = Task.create("Exam", date(2030, 2, 1), home=tmp_path)
    first.push(Subtask.create("Outline", 2, home=tmp_path))
    return Calendar([first, second])


def test_get_input_prints_prompt_and_strips(monkeypatch, capsys):
    feed(monkeypatch, "hello world  \n")
    assert get_input("Prompt: ") == "hello world"
    assert capsys.readouterr().out == "Prompt: "


def test_get_input_at_end_of_file_is_empty(monkeypatch):
    feed(monkeypatch, "")
    assert get_input("> ") == ""


def test_get_number_reads_leading_digits(monkeypatch):
    feed(monkeypatch, "12abc\n")
    assert get_number("> ") == 12


@pytest.mark.parametrize("text", ["abc\n", " 3\n", "\n"])
def test_get_number_rejects_non_numbers(monkeypatch, text):
    feed(monkeypatch, text)
    with pytest.raises(IptmError, match="failed to parse error"):
        get_number("> ")


def test_get_task_on_empty_calendar_returns_none(monkeypatch, capsys):
    feed(monkeypatch, "0\n")
    assert get_task(Calendar(), "> ") is None
    assert capsys.readouterr().out == ""


def test_get_task_returns_selected_task(monkeypatch, calendar):
    feed(monkeypatch, "1\n")
    assert get_task(calendar, "> ") is calendar.tasks[1]


def test_get_task_out_of_range(monkeypatch, calendar):
    feed(monkeypatch, "2\n")
    with pytest.raises(IptmError, match="non valid index"):
        get_task(calendar, "> ")


def test_get_subtask_returns_selected_subtask(monkeypatch, calendar):
    feed(monkeypatch, "0\n")
    assert get_subtask(calendar.tasks[0], "> ") is calendar.tasks[0].subtasks[0]


def test_get_subtask_without_subtasks_returns_none(monkeypatch, calendar):
    feed(monkeypatch, "0\n")
    assert get_subtask(calendar.tasks[1], "> ") is None


def test_get_subtask_out_of_range(monkeypatch, calendar):
    feed(monkeypatch, "1\n")
    with pytest.raises(IptmError, match="non valid index"):
        get_subtask(calendar.tasks[0], "> ")


def test_get_date_absolute(monkeypatch):
    feed(monkeypatch, "15/06/2024\n")
    assert get_date("> ") == date(2024, 6, 15)


def test_get_date_invalid(monkeypatch):
    feed(monkeypatch, "tomorrow\n")
    with pytest.raises(IptmError, match="invalid date format"):
        get_date("> ")


def test_get_days_relative(monkeypatch):
    feed(monkeypatch, "+3/./.\n")
    assert get_days("> ") == 3


def test_get_days_rejects_absolute(monkeypatch):
    feed(monkeypatch, "15/06/2024\n")
    with pytest.raises(IptmError):
        get_days("> ")


def test_create_task(monkeypatch, tmp_path):
    feed(monkeypatch, "Homework\n15/06/2024\n")
    task = create_task(tmp_path)
    assert task.name == "Homework"
    assert task.due_date == date(2024, 6, 15)
    assert task.details_file == details_dir(tmp_path) / f"{task.id}.md"
    assert task.finished is False
    assert task.subtasks == []


def test_create_subtask(monkeypatch, tmp_path):
    feed(monkeypatch, "Read\n+2/./.\n")
    subtask = create_subtask(tmp_path)
    assert subtask.name == "Read"
    assert subtask.days_required == 2
    assert subtask.details_file.parent == details_dir(tmp_path)
    assert subtask.finished is False
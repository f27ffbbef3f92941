# iptm

A small command-line planner. You keep a list of tasks, each with a due
date, and break every task into subtasks that take a number of days. Each
task and subtask has its own Markdown notes file that you can open in your
editor.

The calendar is stored as JSON in `test_cal.json` in the current directory.
If that file does not exist, the calendar starts out empty. Notes files are
named after the task's or subtask's id and live under
`~/.local/share/iptm/details_files/`.

## Installing

```
pip install .
```

## Commands

```
iptm new task        # add a task: asks for a name and a due date
iptm new subtask     # add a subtask to a task: asks for the task, a name and a duration
iptm list            # show every task with its subtasks
iptm finish task     # toggle a task between finished and unfinished
iptm finish subtask  # toggle a subtask between finished and unfinished
iptm read task       # open a task's notes file in the editor
iptm read subtask    # open a subtask's notes file in the editor
```

Tasks and subtasks are picked by the index shown in the list that is
printed before the prompt. An index is read from the leading digits of
what you type; an index past the end of the list is an error.

`iptm list` shows, for each task, how many days remain until its due date
and the date itself, followed by its subtasks with their durations.

`iptm read` opens the notes file with the program named in the `EDITOR`
environment variable, or `nvim` if it is not set. The notes directory is
created if needed; the file itself is created by the editor when you save.

Errors are printed to standard error and the command exits with status 1.

## Entering dates

A due date is written as `day/month/year` (a `-` may be used in place of
`/`). Each part can be:

- a number: `14/3/2025`; a year below 1000 has 2000 added, so `14/3/25` is
  the same date;
- `.` for today's value: `./12/.` is this day of December this year;
- `+N` to add to today's value: `+3/./.` is three days from now.

Days that run past the end of the month roll over into the next month, and
months are kept between 1 and 12.

A subtask's duration uses the same form, but only with `.` and `+N`; it is
stored as a number of days from today, for example `+5/./.` for five days.

## Using it from Python

The building blocks can be used directly:

- `iptm.dates`: `parse_date`, `parse_days`, `normalize_date`,
  `days_from_today` and the `IptmError` exception raised for every
  user-facing failure;
- `iptm.task`: the `Task` and `Subtask` dataclasses with `create`,
  `to_dict` and `from_dict`;
- `iptm.schedule`: `Calendar`, with `load`, `save`, `to_json`,
  `from_json`, `format` and `format_tasks`;
- `iptm.cli`: `main(argv=None)`, which returns the exit status.

## What it does not do

- Tasks and subtasks cannot be renamed, rescheduled or deleted from the
  command line; edit `test_cal.json` for that.
- Each task has a `related_files` list that is saved and loaded, but there
  is no command to add to it, and `iptm read related` does nothing.
- The calendar location is fixed to `test_cal.json` in the current
  directory when run as a command.

## Running the tests

```
pip install .[test]
pytest
```
"""Command-line planner for tasks with due dates and subtasks."""

__version__ = "0.1.0"
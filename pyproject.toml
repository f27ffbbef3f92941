[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iptm"
version = "0.1.0"
description = "A small command-line planner for tasks with due dates and subtasks with relative durations"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "planner", "calendar", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
iptm = "iptm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["iptm"]

[tool.pytest.ini_options]
addopts = "-ra"

"""Task listing options, the editor output format and Taskfile creation."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from typing import Any, TextIO

from taskrun.errors import TaskfileAlreadyExistsError

DEFAULT_TASKFILE = """version: '3'

vars:
  GREETING: Hello, World!

tasks:
  default:
    cmds:
      - echo "{{.GREETING}}"
    silent: true
"""

DEFAULT_TASKFILE_NAME = "Taskfile.yml"


@dataclass
class ListOptions:
    """Which tasks to list and how."""

    list_only_tasks_with_descriptions: bool = False
    list_all_tasks: bool = False
    format_task_list_as_json: bool = False

    def should_list_tasks(self) -> bool:
        """Whether one of the listing options is set."""
        return self.list_only_tasks_with_descriptions or self.list_all_tasks

    def validate(self) -> None:
        """Raise ValueError when the options contradict each other."""
        if self.list_only_tasks_with_descriptions and self.list_all_tasks:
            raise ValueError("task: cannot use --list and --list-all at the same time")
        if self.format_task_list_as_json and not self.should_list_tasks():
            raise ValueError("task: --json only applies to --list or --list-all")


@dataclass
class EditorLocation:
    """Where a task is defined."""

    line: int = 0
    column: int = 0
    taskfile: str = ""


@dataclass
class EditorTask:
    """A single task as shown to editor integrations."""

    name: str
    desc: str = ""
    summary: str = ""
    up_to_date: bool = False
    location: EditorLocation | None = None


@dataclass
class EditorTaskfile:
    """Task list output for editor integrations."""

    tasks: list[EditorTask] = field(default_factory=list)
    location: str = ""

    def to_dict(self) -> dict[str, Any]:
        """The output as plain data."""
        return asdict(self)

    def to_json(self) -> str:
        """The output as indented JSON ending with a newline."""
        return json.dumps(self.to_dict(), indent=2) + "\n"


def init_taskfile(stream: TextIO, directory: str) -> str:
    """Create a default Taskfile in ``directory`` and return its path."""
    path = os.path.join(directory, DEFAULT_TASKFILE_NAME)
    if os.path.exists(path):
        raise TaskfileAlreadyExistsError()
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(DEFAULT_TASKFILE)
    stream.write(f"{DEFAULT_TASKFILE} created in the current directory\n")
    return path
"""Environment variables as seen by tasks."""

from __future__ import annotations

import os
from typing import Any

from taskrun.orderedmap import OrderedMap


def get_environ() -> OrderedMap[str, str]:
    """Return every variable of the process environment, in order."""
    return OrderedMap.from_map(dict(os.environ))


def task_env(task: Any) -> list[str] | None:
    """Build the ``KEY=value`` environment for running commands of ``task``.

    Returns None when the task declares no environment. Variables already set
    in the process environment win over the task's own values, and values
    that are not strings are left out.
    """
    env = getattr(task, "env", None)
    if env is None:
        return None
    environ = [f"{key}={value}" for key, value in os.environ.items()]
    for key, value in env.items():
        if not isinstance(value, str):
            continue
        if key in os.environ:
            continue
        environ.append(f"{key}={value}")
    return environ
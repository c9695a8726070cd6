"""Deciding whether a task is up to date from its status commands and sources."""

from __future__ import annotations

import subprocess
from typing import Any, Protocol

from taskrun.environ import task_env
from taskrun.execext import run_command
from taskrun.logger import Color, Logger
from taskrun.sources import SourcesCheckable, new_sources_checker


class StatusCheckable(Protocol):
    """Anything able to tell whether a task's status commands pass."""

    def is_up_to_date(self, task: Any) -> bool:
        ...


class StatusChecker:
    """Up to date when every status command of the task exits with zero."""

    def __init__(self, logger: Logger | None = None) -> None:
        self.logger = logger

    def _log(self, message: str, *args: Any) -> None:
        if self.logger is not None:
            self.logger.verbose_outf(Color.YELLOW, message, *args)

    def is_up_to_date(self, task: Any) -> bool:
        """Run the status commands; False at the first that fails."""
        for command in getattr(task, "status", None) or ():
            try:
                run_command(command, dir=task.dir or None, env=task_env(task))
            except (subprocess.CalledProcessError, OSError) as err:
                self._log("task: status command %s exited non-zero: %s\n", command, err)
                return False
            self._log("task: status command %s exited zero\n", command)
        return True


def is_task_up_to_date(
    task: Any,
    *,
    method: str = "none",
    temp_dir: str = "",
    dry: bool = False,
    logger: Logger | None = None,
    status_checker: StatusCheckable | None = None,
    sources_checker: SourcesCheckable | None = None,
) -> bool:
    """Whether ``task`` is up to date.

    With both status and sources set, both must be up to date; with neither,
    the task is never up to date.
    """
    if status_checker is None:
        status_checker = StatusChecker(logger)
    if sources_checker is None:
        sources_checker = new_sources_checker(method, temp_dir, dry)

    status_is_set = bool(getattr(task, "status", None))
    sources_is_set = bool(getattr(task, "sources", None))

    status_up_to_date = status_checker.is_up_to_date(task) if status_is_set else False
    sources_up_to_date = sources_checker.is_up_to_date(task) if sources_is_set else False

    if status_is_set and sources_is_set:
        return status_up_to_date and sources_up_to_date
    if status_is_set:
        return status_up_to_date
    if sources_is_set:
        return sources_up_to_date
    return False
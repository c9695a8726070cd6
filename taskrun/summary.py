"""Printing of task summaries."""

from __future__ import annotations

from typing import Any, Iterable

from taskrun.errors import TaskNotFoundError
from taskrun.logger import Color, Logger


def _task_name(task: Any) -> str:
    return getattr(task, "label", "") or task.task


def print_tasks(logger: Logger, tasks: Any, calls: Iterable[Any]) -> None:
    """Print the summary of each called task, separated by blank lines."""
    for index, call in enumerate(calls):
        print_space_between_summaries(logger, index)
        task = tasks.get(call.task)
        if task is None:
            raise TaskNotFoundError(call.task)
        print_task(logger, task)


def print_space_between_summaries(logger: Logger, index: int) -> None:
    """Print two blank lines before every summary but the first."""
    if index > 0:
        logger.outf(Color.DEFAULT, "\n")
        logger.outf(Color.DEFAULT, "\n")


def print_task(logger: Logger, task: Any) -> None:
    """Print the name, description, dependencies, aliases and commands of a task."""
    _print_name(logger, task)
    _print_describing_text(logger, task)
    _print_dependencies(logger, task)
    _print_aliases(logger, task)
    _print_commands(logger, task)


def _print_name(logger: Logger, task: Any) -> None:
    logger.outf(Color.DEFAULT, "task: ")
    logger.outf(Color.GREEN, "%s\n", _task_name(task))
    logger.outf(Color.DEFAULT, "\n")


def _print_describing_text(logger: Logger, task: Any) -> None:
    summary = getattr(task, "summary", "")
    desc = getattr(task, "desc", "")
    if summary:
        lines = summary.split("\n")
        last = len(lines) - 1
        for index, line in enumerate(lines):
            if index < last or line:
                logger.outf(Color.DEFAULT, "%s\n", line)
    elif desc:
        logger.outf(Color.DEFAULT, "%s\n", desc)
    else:
        logger.outf(Color.DEFAULT, "(task does not have description or summary)\n")


def _print_dependencies(logger: Logger, task: Any) -> None:
    deps = getattr(task, "deps", None) or []
    if not deps:
        return
    logger.outf(Color.DEFAULT, "\n")
    logger.outf(Color.DEFAULT, "dependencies:\n")
    for dep in deps:
        logger.outf(Color.DEFAULT, " - %s\n", dep.task)


def _print_aliases(logger: Logger, task: Any) -> None:
    aliases = getattr(task, "aliases", None) or []
    if not aliases:
        return
    logger.outf(Color.DEFAULT, "\n")
    logger.outf(Color.DEFAULT, "aliases:\n")
    for alias in aliases:
        logger.outf(Color.DEFAULT, " - ")
        logger.outf(Color.CYAN, "%s\n", alias)


def _print_commands(logger: Logger, task: Any) -> None:
    cmds = getattr(task, "cmds", None) or []
    if not cmds:
        return
    logger.outf(Color.DEFAULT, "\n")
    logger.outf(Color.DEFAULT, "commands:\n")
    for cmd in cmds:
        logger.outf(Color.DEFAULT, " - ")
        if getattr(cmd, "cmd", ""):
            logger.outf(Color.YELLOW, "%s\n", cmd.cmd)
        else:
            logger.outf(Color.GREEN, "Task: %s\n", cmd.task)
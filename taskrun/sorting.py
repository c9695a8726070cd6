"""Orderings for task listings."""

from __future__ import annotations

from typing import Any


class Noop:
    """Leaves tasks in the order they were given."""

    def sort(self, tasks: list[Any]) -> None:
        """Keep the given order: a stable sort on a constant key."""
        tasks.sort(key=lambda _task: 0)


class AlphaNumeric:
    """Sorts tasks by name."""

    def sort(self, tasks: list[Any]) -> None:
        """Sort ``tasks`` in place by name."""
        tasks.sort(key=lambda t: t.task)


class AlphaNumericWithRootTasksFirst:
    """Sorts tasks by name, putting tasks without a namespace first."""

    def sort(self, tasks: list[Any]) -> None:
        """Sort ``tasks`` in place; names without ':' come before namespaced ones."""
        tasks.sort(key=lambda t: (":" in t.task, t.task))
"""Parsing of command line arguments into task calls and variables."""

from __future__ import annotations

from dataclasses import dataclass

from taskrun.orderedmap import OrderedMap


@dataclass
class Call:
    """A request to run a task, with optional call variables."""

    task: str
    vars: OrderedMap[str, str] | None = None
    direct: bool = False


def _split_var(arg: str) -> tuple[str, str]:
    name, _, value = arg.partition("=")
    return name, value


def parse_v3(*args: str) -> tuple[list[Call], OrderedMap[str, str]]:
    """Split arguments into task calls and global variables."""
    calls: list[Call] = []
    globals_: OrderedMap[str, str] = OrderedMap()
    for arg in args:
        if "=" not in arg:
            calls.append(Call(task=arg, direct=True))
            continue
        globals_.set(*_split_var(arg))
    return calls, globals_


def parse_v2(*args: str) -> tuple[list[Call], OrderedMap[str, str]]:
    """Split arguments into task calls; variables bind to the preceding task."""
    calls: list[Call] = []
    globals_: OrderedMap[str, str] = OrderedMap()
    for arg in args:
        if "=" not in arg:
            calls.append(Call(task=arg, direct=True))
            continue
        if not calls:
            globals_.set(*_split_var(arg))
            continue
        last = calls[-1]
        if last.vars is None:
            last.vars = OrderedMap()
        last.vars.set(*_split_var(arg))
    return calls, globals_
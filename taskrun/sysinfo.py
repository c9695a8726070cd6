"""Facts about files and the terminal."""

from __future__ import annotations

import os
import sys


def owner(path: str) -> int:
    """The user id owning ``path``; -1 on Windows where it is not known."""
    info = os.stat(path)
    if os.name == "nt":
        return -1
    return info.st_uid


def is_terminal() -> bool:
    """Whether both standard input and output are terminals."""
    try:
        return sys.stdin.isatty() and sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False
"""Path helpers aware of the runner's special directory variables."""

from __future__ import annotations

import os

_KNOWN_ABS_DIRS = (".ROOT_DIR", ".TASKFILE_DIR", ".USER_WORKING_DIR")


def _join(*elements: str) -> str:
    parts = [e for e in elements if e]
    if not parts:
        return ""
    return os.path.normpath(os.path.join(*parts))


def smart_join(a: str, b: str) -> str:
    """Join two paths unless the second one is already absolute."""
    if is_abs(b):
        return b
    return _join(a, b)


def is_abs(path: str) -> bool:
    """Whether the path is absolute or refers to a known absolute variable."""
    if any(d in path for d in _KNOWN_ABS_DIRS):
        return True
    return os.path.isabs(path)


def try_abs_to_rel(abs_path: str) -> str:
    """Make an absolute path relative to the working directory, if possible."""
    if not os.path.isabs(abs_path):
        return abs_path
    try:
        return os.path.relpath(abs_path, os.getcwd())
    except (OSError, ValueError):
        return abs_path
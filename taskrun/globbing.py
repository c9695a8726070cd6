"""Matching of source and generated file patterns."""

from __future__ import annotations

import glob as _glob
import os
import stat
from typing import Iterable

from taskrun.execext import expand

_KNOWN_ABS_DIRS = (".ROOT_DIR", ".TASKFILE_DIR", ".USER_WORKING_DIR")


def _smart_join(a: str, b: str) -> str:
    if any(d in b for d in _KNOWN_ABS_DIRS) or os.path.isabs(b):
        return b
    return os.path.join(a, b)


def globs(directory: str, patterns: Iterable[str]) -> list[str]:
    """Return the sorted files matched by any of ``patterns``.

    Patterns that fail to expand or match are skipped.
    """
    files: list[str] = []
    for pattern in patterns or ():
        try:
            files.extend(glob(directory, pattern))
        except (ValueError, OSError):
            continue
    return sorted(files)


def glob(directory: str, pattern: str) -> list[str]:
    """Return the files (not directories) matched by ``pattern`` under ``directory``."""
    expanded = expand(_smart_join(directory or "", pattern))
    files: list[str] = []
    for path in _glob.glob(expanded, recursive=True):
        if stat.S_ISDIR(os.stat(path).st_mode):
            continue
        files.append(path)
    return files
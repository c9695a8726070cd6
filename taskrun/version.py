"""The version of the program."""

from __future__ import annotations

import taskrun

_VERSION = ""


def get_version() -> str:
    """The configured version, the package version, or ``unknown``."""
    if _VERSION:
        return _VERSION
    return getattr(taskrun, "__version__", "") or "unknown"
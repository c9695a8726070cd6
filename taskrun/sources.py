"""Checkers that decide whether a task's sources changed since its last run."""

from __future__ import annotations

import hashlib
import os
import re
import time
from typing import Any, Protocol, Union

from taskrun.globbing import glob, globs

_CHUNK = 128 * 1024
_FILENAME_INVALID = re.compile(r"[^A-z0-9]")


class SourcesCheckable(Protocol):
    """Anything able to tell whether a task's sources are up to date."""

    kind: str

    def is_up_to_date(self, task: Any) -> bool:
        ...

    def value(self, task: Any) -> Any:
        ...

    def on_error(self, task: Any) -> None:
        ...


def normalize_filename(name: str) -> str:
    """Replace characters unfit for file names with ``-``."""
    return _FILENAME_INVALID.sub("-", name)


def _task_name(task: Any) -> str:
    return getattr(task, "label", "") or task.task


def _require_task(task: Any) -> None:
    if task is None:
        raise TypeError("a task is required")


class ChecksumChecker:
    """Up to date when the checksum of the source files did not change."""

    kind = "checksum"

    def __init__(self, temp_dir: str, dry: bool = False) -> None:
        self.temp_dir = temp_dir
        self.dry = dry

    def _checksum_file(self, task: Any) -> str:
        return os.path.join(self.temp_dir, "checksum", normalize_filename(_task_name(task)))

    def _checksum(self, task: Any) -> str:
        digest = hashlib.blake2b(digest_size=16)
        for path in globs(task.dir, task.sources):
            # the name is hashed too, so renaming a file changes the checksum
            digest.update(os.path.basename(path).encode())
            with open(path, "rb") as handle:
                for chunk in iter(lambda: handle.read(_CHUNK), b""):
                    digest.update(chunk)
        return digest.hexdigest()

    def is_up_to_date(self, task: Any) -> bool:
        """Compare the current checksum with the stored one, storing the new one."""
        if not task.sources:
            return False
        checksum_file = self._checksum_file(task)
        try:
            with open(checksum_file, encoding="utf-8") as handle:
                old_hash = handle.read().strip()
        except OSError:
            old_hash = ""
        try:
            new_hash = self._checksum(task)
        except OSError:
            return False

        if not self.dry and old_hash != new_hash:
            os.makedirs(os.path.dirname(checksum_file), exist_ok=True)
            with open(checksum_file, "w", encoding="utf-8") as handle:
                handle.write(new_hash + "\n")

        for pattern in getattr(task, "generates", None) or ():
            try:
                generated = glob(task.dir, pattern)
            except FileNotFoundError:
                return False
            if not generated:
                return False

        return old_hash == new_hash

    def value(self, task: Any) -> str:
        """The current checksum of the task's sources."""
        return self._checksum(task)

    def on_error(self, task: Any) -> None:
        """Forget the stored checksum so the task runs again next time."""
        if not task.sources:
            return
        os.remove(self._checksum_file(task))


class TimestampChecker:
    """Up to date when no source is newer than the generated files."""

    kind = "timestamp"

    def __init__(self, temp_dir: str, dry: bool = False) -> None:
        self.temp_dir = temp_dir
        self.dry = dry

    def _timestamp_file(self, task: Any) -> str:
        return os.path.join(self.temp_dir, "timestamp", normalize_filename(task.task))

    def is_up_to_date(self, task: Any) -> bool:
        """Compare modification times of sources and generated files."""
        if not task.sources:
            return False
        sources = globs(task.dir, task.sources)
        generates = globs(task.dir, getattr(task, "generates", None) or [])

        timestamp_file = self._timestamp_file(task)
        if os.path.exists(timestamp_file):
            generates.append(timestamp_file)
        elif not self.dry:
            os.makedirs(os.path.dirname(timestamp_file), exist_ok=True)
            open(timestamp_file, "w").close()

        task_time = time.time_ns()

        try:
            generated_max = _max_mtime(generates)
        except OSError:
            return False
        if generated_max == 0:
            return False

        try:
            should_update = _any_newer_than(sources, generated_max)
        except OSError:
            return False

        if not self.dry:
            os.utime(timestamp_file, ns=(task_time, task_time))

        return not should_update

    def value(self, task: Any) -> float:
        """The newest modification time of the sources, as a POSIX timestamp."""
        sources = globs(task.dir, task.sources)
        return _max_mtime(sources) / 1e9

    def on_error(self, task: Any) -> None:
        """Nothing is undone for timestamps; only the task is checked."""
        _require_task(task)


class NoneChecker:
    """Never up to date."""

    kind = "none"

    def is_up_to_date(self, task: Any) -> bool:
        """Always False: there is no fingerprint to compare."""
        _require_task(task)
        return False

    def value(self, task: Any) -> str:
        """Always an empty fingerprint."""
        _require_task(task)
        return ""

    def on_error(self, task: Any) -> None:
        """Nothing is stored, so nothing is undone; only the task is checked."""
        _require_task(task)


def _max_mtime(files: list[str]) -> int:
    return max((os.stat(f).st_mtime_ns for f in files), default=0)


def _any_newer_than(files: list[str], limit: int) -> bool:
    return any(os.stat(f).st_mtime_ns > limit for f in files)


SourcesChecker = Union[ChecksumChecker, TimestampChecker, NoneChecker]


def new_sources_checker(method: str, temp_dir: str, dry: bool) -> SourcesChecker:
    """Build the checker for the fingerprinting ``method``."""
    if method == "timestamp":
        return TimestampChecker(temp_dir, dry)
    if method == "checksum":
        return ChecksumChecker(temp_dir, dry)
    if method == "none":
        return NoneChecker()
    raise ValueError(f'task: invalid method "{method}"')
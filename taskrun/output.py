"""Output styles that decide how a task's stdout and stderr are written."""

from __future__ import annotations

import json
from typing import Callable, Protocol, TextIO, Union

CloseFunc = Callable[[Union[BaseException, None]], None]


class Templater(Protocol):
    """Renders template strings."""

    def replace(self, tmpl: str) -> str:
        ...


class Interleaved:
    """Writes output straight through, as it comes."""

    def wrap_writer(
        self, stdout: TextIO, stderr: TextIO, prefix: str, templater: Templater | None
    ) -> tuple[TextIO, TextIO, CloseFunc]:
        """Return the streams unchanged."""

        def close(err: BaseException | None) -> None:
            stdout.flush()
            stderr.flush()

        return stdout, stderr, close


class _GroupWriter:
    def __init__(self, writer: TextIO, begin: str, end: str) -> None:
        self._writer = writer
        self._begin = begin
        self._end = end
        self._chunks: list[str] = []

    def write(self, text: str) -> int:
        self._chunks.append(text)
        return len(text)

    def flush(self) -> None:
        self._writer.flush()

    def close(self) -> None:
        data = "".join(self._chunks)
        self._chunks.clear()
        if not data:
            return
        self._writer.write(self._begin)
        self._writer.write(data + self._end)


class Group:
    """Buffers a task's output and writes it as one block when the task ends."""

    def __init__(self, begin: str = "", end: str = "", error_only: bool = False) -> None:
        self.begin = begin
        self.end = end
        self.error_only = error_only

    def wrap_writer(
        self, stdout: TextIO, stderr: TextIO, prefix: str, templater: Templater | None
    ) -> tuple[_GroupWriter, _GroupWriter, CloseFunc]:
        """Return one buffering writer for both streams and its close function."""
        begin = templater.replace(self.begin) + "\n" if self.begin else ""
        end = templater.replace(self.end) + "\n" if self.end else ""
        writer = _GroupWriter(stdout, begin, end)

        def close(err: BaseException | None) -> None:
            if self.error_only and err is None:
                return
            writer.close()

        return writer, writer, close


class _PrefixWriter:
    def __init__(self, writer: TextIO, prefix: str) -> None:
        self._writer = writer
        self._prefix = prefix
        self._pending = ""

    def write(self, text: str) -> int:
        self._pending += text
        self._emit(force=False)
        return len(text)

    def flush(self) -> None:
        self._writer.flush()

    def close(self) -> None:
        self._emit(force=True)

    def _emit(self, force: bool) -> None:
        *complete, rest = self._pending.split("\n")
        for line in complete:
            self._write_line(line + "\n")
        if force:
            self._pending = ""
            self._write_line(rest)
        else:
            self._pending = rest

    def _write_line(self, line: str) -> None:
        if not line:
            return
        if not line.endswith("\n"):
            line += "\n"
        self._writer.write(f"[{self._prefix}] {line}")


class Prefixed:
    """Writes every line of output with the task name in front."""

    def wrap_writer(
        self, stdout: TextIO, stderr: TextIO, prefix: str, templater: Templater | None
    ) -> tuple[_PrefixWriter, _PrefixWriter, CloseFunc]:
        """Return one prefixing writer for both streams and its close function."""
        writer = _PrefixWriter(stdout, prefix)

        def close(err: BaseException | None) -> None:
            writer.close()

        return writer, writer, close


Output = Union[Interleaved, Group, Prefixed]


def _check_group_unset(name: str, begin: str, end: str) -> None:
    if begin or end:
        raise ValueError(
            f"task: output style {json.dumps(name)} does not support the "
            "group begin/end parameter"
        )


def build_for(
    name: str, begin: str = "", end: str = "", error_only: bool = False
) -> Output:
    """Build the output style with the given name."""
    if name in ("interleaved", ""):
        _check_group_unset(name, begin, end)
        return Interleaved()
    if name == "group":
        return Group(begin=begin, end=end, error_only=error_only)
    if name == "prefixed":
        _check_group_unset(name, begin, end)
        return Prefixed()
    raise ValueError(f"task: output style {json.dumps(name)} not recognized")
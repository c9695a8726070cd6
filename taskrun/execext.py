"""Running shell commands and expanding shell words."""

from __future__ import annotations

import os
import re
import shutil
import subprocess
from typing import IO, Any, Iterable, Mapping, Union

EnvLike = Union[Mapping[str, str], Iterable[str], None]

_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_BLANK = " \t\n"


def _shell() -> str:
    return shutil.which("bash") or shutil.which("sh") or "/bin/sh"


def _environment(env: EnvLike) -> dict[str, str]:
    if not env:
        return dict(os.environ)
    if isinstance(env, Mapping):
        return dict(env)
    result: dict[str, str] = {}
    for entry in env:
        key, _, value = entry.partition("=")
        result[key] = value
    return result


def _sink(stream: Any) -> tuple[Any, Any]:
    """Return the subprocess target for a stream and the stream to copy into."""
    if stream is None:
        return subprocess.DEVNULL, None
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return subprocess.PIPE, stream
    flush = getattr(stream, "flush", None)
    if callable(flush):
        flush()
    return fd, None


def _copy_into(stream: Any, data: bytes | None) -> None:
    if stream is None or not data:
        return
    try:
        stream.write(data.decode(errors="replace"))
    except TypeError:
        stream.write(data)


def run_command(
    command: str,
    *,
    dir: str | os.PathLike[str] | None = None,
    env: EnvLike = None,
    posix_opts: Iterable[str] = (),
    bash_opts: Iterable[str] = (),
    stdin: IO[Any] | None = None,
    stdout: IO[Any] | None = None,
    stderr: IO[Any] | None = None,
) -> None:
    """Run ``command`` in a shell with errexit set.

    Raises ``subprocess.CalledProcessError`` when it exits non-zero.
    """
    params = [
        f"-{opt}" if len(opt) == 1 else f"-o {opt}" for opt in [*posix_opts, "e"]
    ]
    lines = ["set " + " ".join(params)]
    bash_opts = list(bash_opts)
    if bash_opts:
        lines.append("shopt -s " + " ".join(bash_opts))
    lines.append(command)
    script = "\n".join(lines)

    kwargs: dict[str, Any] = {}
    if stdin is None:
        kwargs["stdin"] = subprocess.DEVNULL
    else:
        try:
            kwargs["stdin"] = stdin.fileno()
        except (AttributeError, OSError, ValueError):
            data = stdin.read()
            kwargs["input"] = data.encode() if isinstance(data, str) else data

    out_target, out_copy = _sink(stdout)
    err_target, err_copy = _sink(stderr)

    completed = subprocess.run(
        [_shell(), "-c", script],
        cwd=os.fspath(dir) if dir else None,
        env=_environment(env),
        stdout=out_target,
        stderr=err_target,
        check=False,
        **kwargs,
    )
    _copy_into(out_copy, completed.stdout)
    _copy_into(err_copy, completed.stderr)
    if completed.returncode != 0:
        raise subprocess.CalledProcessError(completed.returncode, command)


def is_exit_error(err: BaseException) -> bool:
    """Whether ``err`` reports a command's non-zero exit status."""
    return isinstance(err, subprocess.CalledProcessError)


def expand(s: str) -> str:
    """Expand tildes, variables and quotes in ``s``, keeping spaces as-is."""
    if os.sep != "/":
        s = s.replace(os.sep, "/")
    s = s.replace(" ", "\\ ")
    fields = _fields(s)
    return fields[0] if fields else ""


def _parameter(s: str, i: int) -> tuple[str, int]:
    j = i + 1
    if j < len(s) and s[j] == "{":
        end = s.find("}", j + 1)
        if end < 0:
            raise ValueError("reached EOF without matching ${ with }")
        name = s[j + 1 : end]
        if not _NAME.fullmatch(name):
            raise ValueError(f"unsupported parameter expansion: ${{{name}}}")
        return os.environ.get(name, ""), end + 1
    match = _NAME.match(s, j)
    if match:
        return os.environ.get(match.group(), ""), match.end()
    return "$", j


def _double_quoted(s: str, i: int, cur: list[str]) -> int:
    n = len(s)
    while i < n:
        c = s[i]
        if c == '"':
            return i + 1
        if c == "\\" and i + 1 < n and s[i + 1] in '$`"\\\n':
            if s[i + 1] != "\n":
                cur.append(s[i + 1])
            i += 2
        elif c == "$":
            value, i = _parameter(s, i)
            cur.append(value)
        else:
            cur.append(c)
            i += 1
    raise ValueError('reached EOF without closing quote "')


def _fields(s: str) -> list[str]:
    fields: list[str] = []
    cur: list[str] = []
    started = False
    i, n = 0, len(s)
    while i < n:
        c = s[i]
        if c in _BLANK:
            if started:
                fields.append("".join(cur))
                cur = []
                started = False
            i += 1
            continue
        if c == "~" and not started:
            j = i + 1
            while j < n and s[j] not in "/" + _BLANK:
                j += 1
            prefix = s[i:j]
            if not any(ch in prefix for ch in "'\"\\$"):
                cur.append(os.path.expanduser(prefix))
                started = True
                i = j
                continue
        started = True
        if c == "\\":
            if i + 1 < n:
                if s[i + 1] != "\n":
                    cur.append(s[i + 1])
                i += 2
            else:
                cur.append(c)
                i += 1
        elif c == "'":
            end = s.find("'", i + 1)
            if end < 0:
                raise ValueError("reached EOF without closing quote '")
            cur.append(s[i + 1 : end])
            i = end + 1
        elif c == '"':
            i = _double_quoted(s, i + 1, cur)
        elif c == "$":
            value, i = _parameter(s, i)
            cur.append(value)
        else:
            cur.append(c)
            i += 1
    if started:
        fields.append("".join(cur))
    return fields
"""Error types raised by the task runner, each carrying a process exit code."""

from __future__ import annotations

import json
from enum import IntEnum
from http import HTTPStatus
from typing import Iterable


class ExitCode(IntEnum):
    """Exit codes used by the program, grouped by the kind of failure."""

    OK = 0
    UNKNOWN = 1

    TASKFILE_NOT_FOUND = 100
    TASKFILE_ALREADY_EXISTS = 101
    TASKFILE_INVALID = 102
    TASKFILE_FETCH_FAILED = 103
    TASKFILE_NOT_TRUSTED = 104
    TASKFILE_NOT_SECURE = 105
    TASKFILE_CACHE_NOT_FOUND = 106

    TASK_NOT_FOUND = 200
    TASK_RUN_ERROR = 201
    TASK_INTERNAL = 202
    TASK_NAME_CONFLICT = 203
    TASK_CALLED_TOO_MANY_TIMES = 204
    TASK_CANCELLED = 205
    TASK_MISSING_REQUIRED_VARS = 206


def _q(value: str) -> str:
    """Quote a string the way diagnostic messages show names."""
    return json.dumps(value, ensure_ascii=False)


class TaskError(Exception):
    """Base class for errors that map to a specific exit code."""

    code: ExitCode = ExitCode.UNKNOWN


# --- task errors -----------------------------------------------------------


class TaskNotFoundError(TaskError):
    """The requested task does not exist in the Taskfile."""

    code = ExitCode.TASK_NOT_FOUND

    def __init__(self, task_name: str, did_you_mean: str = "") -> None:
        self.task_name = task_name
        self.did_you_mean = did_you_mean
        if did_you_mean:
            message = (
                f"task: Task {_q(task_name)} does not exist. "
                f"Did you mean {_q(did_you_mean)}?"
            )
        else:
            message = f"task: Task {_q(task_name)} does not exist"
        super().__init__(message)


class TaskRunError(TaskError):
    """A command of a task finished with a non-zero exit status."""

    code = ExitCode.TASK_RUN_ERROR

    def __init__(self, task_name: str, err: BaseException) -> None:
        self.task_name = task_name
        self.err = err
        super().__init__(f"task: Failed to run task {_q(task_name)}: {err}")

    def task_exit_code(self) -> int:
        """Exit status of the failed command, or this error's own code."""
        returncode = getattr(self.err, "returncode", None)
        if isinstance(returncode, int) and not isinstance(returncode, bool):
            return returncode
        return int(self.code)


class TaskInternalError(TaskError):
    """An internal task was called directly."""

    code = ExitCode.TASK_INTERNAL

    def __init__(self, task_name: str) -> None:
        self.task_name = task_name
        super().__init__(f'task: Task "{task_name}" is internal')


class TaskNameConflictError(TaskError):
    """Several tasks share the same name or alias."""

    code = ExitCode.TASK_NAME_CONFLICT

    def __init__(self, alias_name: str, task_names: Iterable[str]) -> None:
        self.alias_name = alias_name
        self.task_names = list(task_names)
        super().__init__(
            f"task: Multiple tasks ({', '.join(self.task_names)}) "
            f"with alias {_q(alias_name)} found"
        )


class TaskCalledTooManyTimesError(TaskError):
    """The call limit for a task was exceeded, likely a cycle."""

    code = ExitCode.TASK_CALLED_TOO_MANY_TIMES

    def __init__(self, task_name: str, maximum_task_call: int) -> None:
        self.task_name = task_name
        self.maximum_task_call = maximum_task_call
        super().__init__(
            f"task: Maximum task call exceeded ({maximum_task_call}) for task "
            f"{_q(task_name)}: probably an cyclic dep or infinite loop"
        )


class TaskCancelledByUserError(TaskError):
    """The user declined the prompt of a task."""

    code = ExitCode.TASK_CANCELLED

    def __init__(self, task_name: str) -> None:
        self.task_name = task_name
        super().__init__(f"task: Task {_q(task_name)} cancelled by user")


class TaskCancelledNoTerminalError(TaskError):
    """A task with a prompt was run outside a terminal."""

    code = ExitCode.TASK_CANCELLED

    def __init__(self, task_name: str) -> None:
        self.task_name = task_name
        super().__init__(
            f"task: Task {_q(task_name)} cancelled because it has a prompt and "
            "the environment is not a terminal. Use --yes (-y) to run anyway."
        )


class TaskMissingRequiredVars(TaskError):
    """A task was called without the variables it requires."""

    code = ExitCode.TASK_MISSING_REQUIRED_VARS

    def __init__(self, task_name: str, missing_vars: Iterable[str]) -> None:
        self.task_name = task_name
        self.missing_vars = list(missing_vars)
        super().__init__(
            f"task: Task {_q(task_name)} cancelled because it is missing "
            f"required variables: {', '.join(self.missing_vars)}"
        )


# --- taskfile errors -------------------------------------------------------


class TaskfileNotFoundError(TaskError):
    """No Taskfile was found where one was looked for."""

    code = ExitCode.TASKFILE_NOT_FOUND

    def __init__(self, uri: str, walk: bool = False) -> None:
        self.uri = uri
        self.walk = walk
        walk_text = " (or any of the parent directories)" if walk else ""
        super().__init__(f"task: No Taskfile found at {_q(uri)}{walk_text}")


class TaskfileAlreadyExistsError(TaskError):
    """A Taskfile already exists where a new one was to be created."""

    code = ExitCode.TASKFILE_ALREADY_EXISTS

    def __init__(self) -> None:
        super().__init__("task: A Taskfile already exists")


class TaskfileInvalidError(TaskError):
    """The Taskfile could not be parsed."""

    code = ExitCode.TASKFILE_INVALID

    def __init__(self, uri: str, err: BaseException) -> None:
        self.uri = uri
        self.err = err
        super().__init__(f"task: Failed to parse {uri}:\n{err}")


class TaskfileFetchFailedError(TaskError):
    """A remote Taskfile could not be downloaded."""

    code = ExitCode.TASKFILE_FETCH_FAILED

    def __init__(self, uri: str, http_status_code: int = 0) -> None:
        self.uri = uri
        self.http_status_code = http_status_code
        status_text = ""
        if http_status_code:
            try:
                phrase = HTTPStatus(http_status_code).phrase
            except ValueError:
                phrase = ""
            status_text = f" with status code {http_status_code} ({phrase})"
        super().__init__(f"task: Download of {_q(uri)} failed{status_text}")


class TaskfileNotTrustedError(TaskError):
    """The user did not trust a remote Taskfile."""

    code = ExitCode.TASKFILE_NOT_TRUSTED

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"task: Taskfile {_q(uri)} not trusted by user")


class TaskfileNotSecureError(TaskError):
    """A remote Taskfile was requested over an insecure connection."""

    code = ExitCode.TASKFILE_NOT_SECURE

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(
            f"task: Taskfile {_q(uri)} cannot be downloaded over an insecure "
            "connection. You can override this by using the --insecure flag"
        )


class TaskfileCacheNotFound(TaskError):
    """An offline Taskfile was requested but is missing from the cache."""

    code = ExitCode.TASKFILE_CACHE_NOT_FOUND

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(
            f"task: Taskfile {_q(uri)} was not found in the cache. Remove the "
            "--offline flag to use a remote copy or download it using the "
            "--download flag"
        )
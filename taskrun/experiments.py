"""Experimental features switched on through TASK_X_* environment variables."""

from __future__ import annotations

import io
import os
import sys
from dataclasses import dataclass
from typing import TextIO

from dotenv import dotenv_values

from taskrun.logger import Color, Logger

ENV_PREFIX = "TASK_X_"


@dataclass(frozen=True)
class Experiments:
    """Which experiments are enabled."""

    gentle_force: bool = False
    remote_taskfiles: bool = False


def parse_env(name: str) -> bool:
    """Whether the experiment ``name`` is enabled in the environment."""
    return os.environ.get(f"{ENV_PREFIX}{name}") == "1"


def load(dotenv_path: str | None = None) -> Experiments:
    """Apply experiment variables from a dotenv file, then read the environment."""
    path = dotenv_path or ".env"
    if os.path.isfile(path):
        for key, value in dotenv_values(path).items():
            if key.startswith(ENV_PREFIX) and value is not None:
                os.environ[key] = value
    return Experiments(
        gentle_force=parse_env("GENTLE_FORCE"),
        remote_taskfiles=parse_env("REMOTE_TASKFILES"),
    )


def list_experiments(
    logger: Logger, experiments: Experiments, stream: TextIO | None = None
) -> None:
    """Print every experiment and whether it is enabled, in aligned columns."""
    out = stream or sys.stdout
    rows = [
        ("GENTLE_FORCE", experiments.gentle_force),
        ("REMOTE_TASKFILES", experiments.remote_taskfiles),
    ]
    width = max(len(f"* {name}: ") for name, _ in rows)
    for name, value in rows:
        cell = io.StringIO()
        logger.foutf(cell, Color.YELLOW, "* ")
        logger.foutf(cell, Color.GREEN, name)
        logger.foutf(cell, Color.DEFAULT, ": ")
        padding = " " * (width - len(f"* {name}: "))
        out.write(cell.getvalue() + padding)
        logger.foutf(out, Color.DEFAULT, "%s\n", "true" if value else "false")
"""Console logger writing to standard output and error, with optional colour."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, TextIO


class Color(Enum):
    """Colours the logger knows, each with an environment override."""

    DEFAULT = ("TASK_COLOR_RESET", 0)
    BLUE = ("TASK_COLOR_BLUE", 34)
    GREEN = ("TASK_COLOR_GREEN", 32)
    CYAN = ("TASK_COLOR_CYAN", 36)
    YELLOW = ("TASK_COLOR_YELLOW", 33)
    MAGENTA = ("TASK_COLOR_MAGENTA", 35)
    RED = ("TASK_COLOR_RED", 31)

    def __init__(self, env: str, attribute: int) -> None:
        self.env = env
        self.default_attribute = attribute

    @property
    def attribute(self) -> int:
        """The SGR attribute, taken from the environment when it holds a number."""
        try:
            return int(os.environ.get(self.env, ""))
        except ValueError:
            return self.default_attribute

    def paint(self, text: str) -> str:
        """Wrap ``text`` in escape sequences for this colour."""
        return f"\x1b[{self.attribute}m{text}\x1b[0m"


def _colors_enabled() -> bool:
    if os.environ.get("FORCE_COLOR"):
        return True
    if "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False


@dataclass
class Logger:
    """Prints messages to stdout or stderr, optionally coloured."""

    stdout: TextIO | None = None
    stderr: TextIO | None = None
    verbose: bool = False
    color: bool = False
    stdin: TextIO | None = None

    def _render(self, color: Color, s: str, args: tuple[Any, ...]) -> str:
        text = s % args if args else s
        if self.color and color is not Color.DEFAULT and _colors_enabled():
            return color.paint(text)
        if self.color and _colors_enabled():
            return Color.DEFAULT.paint(text)
        return text

    def outf(self, color: Color, s: str, *args: Any) -> None:
        """Print to stdout."""
        self.foutf(self.stdout or sys.stdout, color, s, *args)

    def foutf(self, w: TextIO, color: Color, s: str, *args: Any) -> None:
        """Print to the given stream."""
        w.write(self._render(color, s, args))

    def verbose_outf(self, color: Color, s: str, *args: Any) -> None:
        """Print to stdout in verbose mode only."""
        if self.verbose:
            self.outf(color, s, *args)

    def errf(self, color: Color, s: str, *args: Any) -> None:
        """Print to stderr."""
        self.foutf(self.stderr or sys.stderr, color, s, *args)

    def verbose_errf(self, color: Color, s: str, *args: Any) -> None:
        """Print to stderr in verbose mode only."""
        if self.verbose:
            self.errf(color, s, *args)

    def prompt(self, color: Color, s: str, default_value: str, *args: str) -> bool:
        """Ask a question; True when the answer is one of the continue values."""
        continue_values = args
        if not continue_values:
            return False
        self.outf(
            color,
            "%s [%s/%s]\n",
            s,
            continue_values[0].lower(),
            default_value.upper(),
        )
        line = (self.stdin or sys.stdin).readline()
        if not line:
            raise EOFError("no answer given")
        return line.strip().lower() in continue_values
"""Sleep for a given duration, optionally handling SIGINT with a cleanup phase."""

from __future__ import annotations

import argparse
import os
import queue
import re
import signal
import sys
import threading
import time
from typing import Sequence

USAGE = """sleepit: sleep for the specified duration, optionally handling signals
When the line "sleepit: ready" is printed, it means that it is safe to send signals to it
Usage: sleepit <command> [<args>]
Commands
  default     Use default action: on reception of SIGINT terminate abruptly
  handle      Handle signals: on reception of SIGINT perform cleanup before exiting
  version     Show the sleepit version"""

FULL_VERSION = "unknown"

_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def _parse_duration(text: str) -> float:
    """Parse a duration such as ``10s``, ``50ms`` or ``1m30s`` into seconds."""
    if text == "0":
        return 0.0
    pos, total = 0, 0.0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if not match:
            raise argparse.ArgumentTypeError(f"invalid duration {text!r}")
        total += float(match.group(1)) * _UNITS[match.group(2)]
        pos = match.end()
    if not text:
        raise argparse.ArgumentTypeError("invalid duration ''")
    return total


def _format_duration(seconds: float) -> str:
    if seconds == 0:
        return "0s"
    if seconds < 1:
        return f"{seconds * 1000:g}ms"
    return f"{seconds:g}s"


def _say(message: str) -> None:
    print(f"sleepit: {message}", flush=True)


def _worker(cancel: threading.Event, how_long: float, name: str) -> threading.Event:
    """Start a worker thread; the returned event is set when it finishes its work."""
    done = threading.Event()
    deadline = time.monotonic() + how_long

    def work() -> None:
        _say(f"{name} started")
        while True:
            if cancel.is_set():
                _say(f"{name} canceled")
                return
            if time.monotonic() > deadline:
                _say(f"{name} done")
                done.set()
                return
            cancel.wait(0.1)

    thread = threading.Thread(target=work, daemon=True)
    thread.start()
    done.thread = thread  # type: ignore[attr-defined]
    return done


def supervisor(
    sleep: float,
    cleanup: float,
    term_after: int,
    signals: "queue.Queue[str] | None",
) -> int:
    """Do the work and react to signals: 0 when done, 3 after cleanup, 4 when terminated."""
    _say("ready")
    _say(f"PID={os.getpid()} sleep={_format_duration(sleep)} cleanup={_format_duration(cleanup)}")

    cancel_work = threading.Event()
    worker_done = _worker(cancel_work, sleep, "work")
    cancel_cleaner = threading.Event()
    cleaner_done: threading.Event | None = None

    count = 0
    while True:
        sig = None
        if signals is not None:
            try:
                sig = signals.get(timeout=0.01)
            except queue.Empty:
                sig = None
        else:
            time.sleep(0.01)
        if sig is not None:
            count += 1
            _say(f"got signal={sig} count={count}")
            if count == 1:
                cancel_work.set()
                worker_done.thread.join()  # type: ignore[attr-defined]
                cleaner_done = _worker(cancel_cleaner, cleanup, "cleanup")
            if count == term_after:
                cancel_cleaner.set()
                if cleaner_done is not None:
                    cleaner_done.thread.join()  # type: ignore[attr-defined]
                return 4
            continue
        if worker_done.is_set():
            return 0
        if cleaner_done is not None and cleaner_done.is_set():
            return 3


def _parser(name: str) -> argparse.ArgumentParser:
    return argparse.ArgumentParser(prog=name, add_help=False)


def _add_duration(parser: argparse.ArgumentParser, name: str, help_text: str) -> None:
    parser.add_argument(
        f"-{name}", f"--{name}", dest=name.replace("-", "_"),
        type=_parse_duration, default=5.0, help=help_text,
    )


def run(args: Sequence[str]) -> int:
    """Run the command line ``args`` and return the exit status."""
    args = list(args)
    if not args:
        print(USAGE, file=sys.stderr)
        return 2
    command, rest = args[0], args[1:]

    if command == "default":
        parser = _parser("default")
        _add_duration(parser, "sleep", "Sleep duration")
        opts, extra = parser.parse_known_args(rest)
        if extra:
            print(f"default: unexpected arguments: {extra}", file=sys.stderr)
            return 2
        return supervisor(opts.sleep, 0.0, 0, None)

    if command == "handle":
        parser = _parser("handle")
        _add_duration(parser, "sleep", "Sleep duration")
        _add_duration(parser, "cleanup", "Cleanup duration")
        parser.add_argument("-term-after", "--term-after", dest="term_after", type=int, default=0)
        opts, extra = parser.parse_known_args(rest)
        if opts.term_after == 1:
            print("handle: term-after cannot be 1", file=sys.stderr)
            return 2
        if extra:
            print(f"handle: unexpected arguments: {extra}", file=sys.stderr)
            return 2
        signals: queue.Queue[str] = queue.Queue()
        previous = signal.signal(signal.SIGINT, lambda *_: signals.put("interrupt"))
        try:
            return supervisor(opts.sleep, opts.cleanup, opts.term_after, signals)
        finally:
            signal.signal(signal.SIGINT, previous)

    if command == "version":
        if rest:
            print(f"version: unexpected arguments: {rest}", file=sys.stderr)
            return 2
        print(f"sleepit version {FULL_VERSION}")
        return 0

    print(USAGE, file=sys.stderr)
    return 2


def main(argv: Sequence[str] | None = None) -> None:
    """Command line entry point."""
    sys.exit(run(sys.argv[1:] if argv is None else argv))
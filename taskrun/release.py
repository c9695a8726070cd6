"""Release helper: bump the version, stamp the changelog and JSON manifests."""

from __future__ import annotations

import datetime as _dt
import re
import subprocess
import sys
from pathlib import Path
from typing import Sequence

import semver

CHANGELOG_SOURCE = "CHANGELOG.md"
CHANGELOG_TARGET = "docs/docs/changelog.md"
ISSUES_BASE = "issues/"

CHANGELOG_TEMPLATE = """---
slug: /changelog/
sidebar_position: 14
---"""

_RELEASE_RE = re.compile(r"## Unreleased")
_USER_RE = re.compile(r"@(\w+)")
_ISSUE_RE = re.compile(r"#(\d+)")
_VERSION_RE = re.compile(r'^  "version": "\d+\.\d+\.\d+",$', re.MULTILINE)


def _parse(text: str) -> semver.Version:
    text = text.strip()
    if text[:1] in ("v", "V"):
        text = text[1:]
    return semver.Version.parse(text)


def get_version() -> semver.Version:
    """The latest version tag of the git repository."""
    out = subprocess.run(
        ["git", "describe", "--tags", "--abbrev=0"],
        check=True, capture_output=True, text=True,
    ).stdout
    return _parse(out)


def bump_version(version: semver.Version, verb: str) -> semver.Version:
    """Apply ``major``, ``minor`` or ``patch``, or take ``verb`` as the new version."""
    if verb == "major":
        return version.bump_major()
    if verb == "minor":
        return version.bump_minor()
    if verb == "patch":
        return version.bump_patch()
    return _parse(verb)


def render_changelog(
    text: str, version: semver.Version, date: str
) -> tuple[str, str]:
    """Return the released changelog and its documentation page."""
    released = _RELEASE_RE.sub(f"## v{version} - {date}", text)
    page = f"{CHANGELOG_TEMPLATE}\n\n{released}"
    page = _USER_RE.sub(r"[@\1](https://github.com/\1)", page)
    page = _ISSUE_RE.sub(lambda m: f"[#{m.group(1)}]({ISSUES_BASE}{m.group(1)})", page)
    return released, page


def changelog(
    version: semver.Version,
    source: str = CHANGELOG_SOURCE,
    target: str = CHANGELOG_TARGET,
    date: str | None = None,
) -> None:
    """Stamp the source changelog and write the documentation page."""
    if date is None:
        date = _dt.date.today().strftime("%Y-%m-%d")
    released, page = render_changelog(Path(source).read_text(), version, date)
    Path(source).write_text(released)
    Path(target).write_text(page)


def set_json_version(file_name: str, version: semver.Version) -> None:
    """Rewrite the top-level ``"version"`` line of a JSON manifest."""
    path = Path(file_name)
    text = _VERSION_RE.sub(f'  "version": "{version}",', path.read_text())
    path.write_text(text)


def release(verb: str) -> semver.Version:
    """Bump the version with ``verb`` and update every release file."""
    version = bump_version(get_version(), verb)
    print(version)
    changelog(version)
    set_json_version("package.json", version)
    set_json_version("package-lock.json", version)
    return version


def main(argv: Sequence[str] | None = None) -> int:
    """Command line entry point."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("error: expected version number")
        return 1
    try:
        release(args[0])
    except (OSError, ValueError, subprocess.CalledProcessError) as err:
        print(err)
        return 1
    return 0
# taskrun

Building blocks for a task runner driven by a YAML Taskfile:

- parsing of command-line task calls and variables (`taskrun.args`)
- an insertion-ordered map with sorting, merging and YAML loading (`taskrun.orderedmap`)
- output styles for task output: interleaved, grouped and prefixed (`taskrun.output`)
- up-to-date checks based on checksums, timestamps or status commands
  (`taskrun.sources`, `taskrun.fingerprint`, with file matching in `taskrun.globbing`)
- running shell commands and expanding shell words (`taskrun.execext`)
- task summaries (`taskrun.summary`) and task sorters (`taskrun.sorting`)
- listing options, the JSON task list for editors and Taskfile creation (`taskrun.listing`)
- a coloured logger (`taskrun.logger`) and typed errors carrying exit codes (`taskrun.errors`)
- smaller helpers: `taskrun.environ`, `taskrun.filepathext`, `taskrun.slicesext`,
  `taskrun.experiments`, `taskrun.version`, `taskrun.knownplatforms`, `taskrun.sysinfo`

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### Parsing command-line calls

```python
from taskrun.args import parse_v3, parse_v2

calls, global_vars = parse_v3("build", "FOO=bar", "test")
# calls hold Call(task="build") and Call(task="test"); FOO=bar is a global variable

calls, global_vars = parse_v2("build", "FOO=bar", "test")
# with version 2 rules, FOO=bar belongs to the "build" call's vars
```

Each `Call` has `task`, `vars` (an `OrderedMap` or `None`) and `direct`.

### Ordered maps

```python
from taskrun.orderedmap import OrderedMap

m = OrderedMap()
m.set("b", 2)
m.set("a", 1)
m.keys()      # ["b", "a"]
m.sort()
m.keys()      # ["a", "b"]

loaded = OrderedMap.from_yaml("3: three\n1: one\n2: two\n")
loaded.keys()  # [3, 1, 2]
```

`from_map_with_order` raises `ValueError` when the order does not match the
mapping's keys; `from_yaml` raises `ValueError` for a document that is not a
mapping.

### Output styles

`build_for(name, begin, end, error_only)` returns the style for `""`,
`"interleaved"`, `"group"` or `"prefixed"` and raises `ValueError` for any other
name, or when begin/end are given for a style other than `"group"`. Each style
has `wrap_writer(stdout, stderr, prefix, templater)`, returning two writers and
a close function taking the task's error (or `None`):

- `Interleaved` passes the streams through.
- `Group` buffers everything and writes it on close, framed by the begin/end
  templates rendered with `templater.replace`; with `error_only` the output is
  dropped when the task succeeded. Nothing is written if nothing was buffered.
- `Prefixed` writes each complete line as `[prefix] line`; close flushes the
  last partial line.

### Up-to-date checks

```python
from taskrun.fingerprint import is_task_up_to_date

is_task_up_to_date(task, method="checksum", temp_dir=".task")
```

A task is any object with `task`, `dir`, `sources`, `generates` and `status`
attributes. Status commands must all exit with zero; sources are checked by
the checker from `new_sources_checker(method, temp_dir, dry)`, where the method
is `"checksum"`, `"timestamp"` or `"none"`. When both are set both must be up
to date; a task with neither is never up to date. Checksums and timestamps are
stored under `temp_dir`, except in dry mode.

### Running commands

`taskrun.execext.run_command(command, dir=..., env=..., ...)` runs the command
in `bash` (or `sh`) with `errexit` set and raises
`subprocess.CalledProcessError` on a non-zero exit. `expand(s)` expands tildes,
`$VAR`/`${VAR}` and quotes and returns the first word.

### Listing and starting a Taskfile

`ListOptions.validate()` rejects `--list` together with `--list-all`, and
`--json` without either. `EditorTaskfile.to_json()` renders the task list for
editor integrations. `init_taskfile(stream, directory)` writes a starter
`Taskfile.yml` and raises `TaskfileAlreadyExistsError` if one is there.

### Errors

Every error derives from `TaskError` and has a `code` from `ExitCode`.
`TaskRunError.task_exit_code()` gives the failed command's exit status when
known.

## Commands

`taskrun-sleepit` sleeps for a while and optionally handles SIGINT. It is
handy for trying out how a runner passes signals on to its children:

```
taskrun-sleepit default --sleep 2s
taskrun-sleepit handle --sleep 10s --cleanup 2s --term-after 2
taskrun-sleepit version
```

It prints `sleepit: ready` once signals may be sent. It exits with 0 when the
work finishes, 3 after a cleanup that ran to the end, 4 when the
`--term-after` count is reached, and 2 on bad usage.

`taskrun-release` is a release helper run in a git checkout. It takes
`major`, `minor`, `patch` or an explicit version and bumps the latest git tag
to get the new version, which it prints. It then replaces `## Unreleased` in
`CHANGELOG.md` with the version and date, writes the docs copy to
`docs/docs/changelog.md` with `@user` and `#issue` references turned into
links, and sets the version in `package.json` and `package-lock.json`:

```
taskrun-release minor
```

## What is not included

This package does not read or parse Taskfiles, resolve variables or render
templates, and it has no executor and no `task` command that runs tasks from a
Taskfile, watches files or downloads remote Taskfiles. It offers the pieces
listed above for a program that does.
import io

import pytest

from taskrun.output import Group, Interleaved, Prefixed, build_for


class FakeTemplater:
    def __init__(self, values):
        self.values = values

    def replace(self, tmpl):
        for key, value in self.values.items():
            tmpl = tmpl.replace("{{ .%s }}" % key, value)
        return tmpl


def test_interleaved():
    b = io.StringIO()
    w, _, _ = Interleaved().wrap_writer(b, io.StringIO(), "", None)
    print("foo\nbar", file=w)
    assert b.getvalue() == "foo\nbar\n"
    print("baz", file=w)
    assert b.getvalue() == "foo\nbar\nbaz\n"


def test_group():
    b = io.StringIO()
    stdout, stderr, cleanup = Group().wrap_writer(b, io.StringIO(), "", None)
    print("out\nout", file=stdout)
    assert b.getvalue() == ""
    print("err\nerr", file=stderr)
    assert b.getvalue() == ""
    print("out", file=stdout)
    assert b.getvalue() == ""
    print("err", file=stderr)
    assert b.getvalue() == ""
    cleanup(None)
    assert b.getvalue() == "out\nout\nerr\nerr\nout\nerr\n"


def group_with_begin_end():
    return Group(begin="::group::{{ .VAR1 }}", end="::endgroup::")


def test_group_with_begin_end_simple():
    tmpl = FakeTemplater({"VAR1": "example-value"})
    b = io.StringIO()
    w, _, cleanup = group_with_begin_end().wrap_writer(b, io.StringIO(), "", tmpl)
    print("foo\nbar", file=w)
    assert b.getvalue() == ""
    print("baz", file=w)
    assert b.getvalue() == ""
    cleanup(None)
    assert b.getvalue() == "::group::example-value\nfoo\nbar\nbaz\n::endgroup::\n"


def test_group_with_begin_end_no_output():
    tmpl = FakeTemplater({"VAR1": "example-value"})
    b = io.StringIO()
    _, _, cleanup = group_with_begin_end().wrap_writer(b, io.StringIO(), "", tmpl)
    cleanup(None)
    assert b.getvalue() == ""


def test_group_error_only_swallows_output_on_no_error():
    b = io.StringIO()
    stdout, stderr, cleanup = Group(error_only=True).wrap_writer(b, io.StringIO(), "", None)
    print("std-out", file=stdout)
    print("std-err", file=stderr)
    cleanup(None)
    assert b.getvalue() == ""


def test_group_error_only_shows_output_on_error():
    b = io.StringIO()
    stdout, stderr, cleanup = Group(error_only=True).wrap_writer(b, io.StringIO(), "", None)
    print("std-out", file=stdout)
    print("std-err", file=stderr)
    cleanup(RuntimeError("any-error"))
    assert b.getvalue() == "std-out\nstd-err\n"


def test_prefixed_simple():
    b = io.StringIO()
    w, _, cleanup = Prefixed().wrap_writer(b, io.StringIO(), "prefix", None)
    print("foo\nbar", file=w)
    assert b.getvalue() == "[prefix] foo\n[prefix] bar\n"
    print("baz", file=w)
    assert b.getvalue() == "[prefix] foo\n[prefix] bar\n[prefix] baz\n"
    cleanup(None)
    assert b.getvalue() == "[prefix] foo\n[prefix] bar\n[prefix] baz\n"


def test_prefixed_multiple_writes_for_single_line():
    b = io.StringIO()
    w, _, cleanup = Prefixed().wrap_writer(b, io.StringIO(), "prefix", None)
    for char in ["T", "e", "s", "t", "!"]:
        print(char, end="", file=w)
        assert b.getvalue() == ""
    cleanup(None)
    assert b.getvalue() == "[prefix] Test!\n"


def test_build_for_styles():
    assert isinstance(build_for(""), Interleaved)
    assert isinstance(build_for("interleaved"), Interleaved)
    assert isinstance(build_for("prefixed"), Prefixed)
    group = build_for("group", begin="b", end="e", error_only=True)
    assert (group.begin, group.end, group.error_only) == ("b", "e", True)


def test_build_for_rejects_group_params_on_other_styles():
    with pytest.raises(ValueError, match="does not support"):
        build_for("prefixed", begin="x")
    with pytest.raises(ValueError, match="does not support"):
        build_for("", end="x")


def test_build_for_unknown_style():
    with pytest.raises(ValueError, match="not recognized"):
        build_for("fancy")
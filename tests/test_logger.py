import io

import pytest

from taskrun.logger import Color, Logger


def make_logger(**kwargs):
    out, err = io.StringIO(), io.StringIO()
    return out, err, Logger(stdout=out, stderr=err, **kwargs)


def test_outf_formats_arguments():
    out, err, log = make_logger()
    log.outf(Color.GREEN, "task: %s\n", "build")
    assert out.getvalue() == "task: build\n"
    assert err.getvalue() == ""


def test_outf_without_args_writes_literal():
    out, _, log = make_logger()
    log.outf(Color.DEFAULT, "100%")
    assert out.getvalue() == "100%"


def test_errf_goes_to_stderr():
    out, err, log = make_logger()
    log.errf(Color.RED, "%s\n", "boom")
    assert err.getvalue() == "boom\n"
    assert out.getvalue() == ""


def test_verbose_only_when_enabled():
    out, err, log = make_logger(verbose=False)
    log.verbose_outf(Color.YELLOW, "hidden")
    log.verbose_errf(Color.YELLOW, "hidden")
    assert out.getvalue() + err.getvalue() == ""
    out, err, log = make_logger(verbose=True)
    log.verbose_outf(Color.YELLOW, "shown")
    log.verbose_errf(Color.YELLOW, "shown")
    assert out.getvalue() == "shown"
    assert err.getvalue() == "shown"


def test_no_escapes_when_color_disabled(monkeypatch):
    monkeypatch.setenv("FORCE_COLOR", "1")
    out, _, log = make_logger(color=False)
    log.outf(Color.GREEN, "plain")
    assert out.getvalue() == "plain"


def test_colored_output_when_forced(monkeypatch):
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.delenv("TASK_COLOR_GREEN", raising=False)
    out, _, log = make_logger(color=True)
    log.outf(Color.GREEN, "hi")
    value = out.getvalue()
    assert value.startswith("\x1b[")
    assert "hi" in value
    assert value.endswith("\x1b[0m")


def test_color_override_from_environment(monkeypatch):
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("TASK_COLOR_GREEN", "35")
    out, _, log = make_logger(color=True)
    log.outf(Color.GREEN, "hi")
    assert "35" in out.getvalue()
    assert "hi" in out.getvalue()
    assert Color.GREEN.attribute == 35
    monkeypatch.setenv("TASK_COLOR_GREEN", "not-a-number")
    assert Color.GREEN.attribute == Color.GREEN.default_attribute


def test_prompt_accepts_continue_value():
    out, _, log = make_logger(stdin=io.StringIO("Y\n"))
    assert log.prompt(Color.YELLOW, "Continue?", "n", "y", "yes") is True
    assert "Continue?" in out.getvalue()


def test_prompt_rejects_other_answers():
    _, _, log = make_logger(stdin=io.StringIO("no\n"))
    assert log.prompt(Color.YELLOW, "Continue?", "n", "y", "yes") is False


def test_prompt_without_continue_values():
    out, _, log = make_logger(stdin=io.StringIO("y\n"))
    assert log.prompt(Color.YELLOW, "Continue?", "n") is False
    assert out.getvalue() == ""


def test_prompt_raises_on_eof():
    _, _, log = make_logger(stdin=io.StringIO(""))
    with pytest.raises(EOFError):
        log.prompt(Color.YELLOW, "Continue?", "n", "y")
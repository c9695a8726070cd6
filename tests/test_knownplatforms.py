import pytest

from taskrun.knownplatforms import is_known_arch, is_known_os


@pytest.mark.parametrize("name", ["linux", "darwin", "windows", "zos"])
def test_known_os(name):
    assert is_known_os(name) is True


@pytest.mark.parametrize("name", ["amd64", "arm64", "wasm", "386"])
def test_known_arch(name):
    assert is_known_arch(name) is True


def test_unknown():
    assert is_known_os("amd64") is False
    assert is_known_arch("linux") is False
    assert is_known_os("Linux") is False
import sys

import pytest

from path_validator.rules import (
    POSIX_RULES,
    WINDOWS_RULES,
    TargetOS,
    get_current_os,
    get_rule_set,
    resolve_os,
)


def test_current_os_is_concrete():
    assert get_current_os() in (TargetOS.WINDOWS, TargetOS.POSIX)
    assert get_current_os() in ("windows", "posix")


def test_auto_follows_host_on_every_call(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    assert resolve_os("auto") is TargetOS.WINDOWS
    assert get_rule_set(None) is WINDOWS_RULES

    monkeypatch.setattr(sys, "platform", "linux")
    assert resolve_os(TargetOS.AUTO) is TargetOS.POSIX
    assert get_rule_set() is POSIX_RULES


def test_explicit_os_is_kept():
    assert resolve_os("windows") is TargetOS.WINDOWS
    assert resolve_os(TargetOS.POSIX) is TargetOS.POSIX


def test_rule_set_limits():
    windows = get_rule_set("windows")
    posix = get_rule_set("posix")

    assert windows.max_path_length == 260
    assert windows.case_fold is True
    assert windows.separator == "\\"

    assert posix.max_path_length == 4096
    assert posix.case_fold is False
    assert posix.separator == "/"


@pytest.mark.parametrize("char", list('<>:"|?*') + ["\x00", "\x1f"])
def test_windows_illegal_characters(char):
    assert get_rule_set("windows").illegal_chars.search(f"a{char}b")


def test_posix_only_rejects_nul():
    illegal = get_rule_set("posix").illegal_chars
    assert illegal.search("a\x00b")
    assert not illegal.search('a<>:"|?*\x01b')


def test_unknown_os_name():
    with pytest.raises(ValueError):
        resolve_os("amiga")

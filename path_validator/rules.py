"""
Per-OS path rules.

Each target platform maps to a fixed RuleSet. "auto" is never stored:
it is resolved against the host platform every time a rule set is needed.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Pattern, Union

WINDOWS_MAX_PATH = 260
POSIX_MAX_PATH = 4096

WINDOWS_ILLEGAL_CHARS = re.compile(r'[<>:"|?*\x00-\x1F]')
POSIX_ILLEGAL_CHARS = re.compile(r"\x00")

WINDOWS_SEPARATOR = "\\"
POSIX_SEPARATOR = "/"

# Both separators split segments regardless of the target OS.
SEPARATORS = ("/", "\\")

CURRENT_DIR = "."
PARENT_DIR = ".."


class TargetOS(str, Enum):
    WINDOWS = "windows"
    POSIX = "posix"
    AUTO = "auto"


@dataclass(frozen=True)
class RuleSet:
    os: TargetOS
    max_path_length: int
    illegal_chars: Pattern[str]
    case_fold: bool
    separator: str


WINDOWS_RULES = RuleSet(
    os=TargetOS.WINDOWS,
    max_path_length=WINDOWS_MAX_PATH,
    illegal_chars=WINDOWS_ILLEGAL_CHARS,
    case_fold=True,
    separator=WINDOWS_SEPARATOR,
)

POSIX_RULES = RuleSet(
    os=TargetOS.POSIX,
    max_path_length=POSIX_MAX_PATH,
    illegal_chars=POSIX_ILLEGAL_CHARS,
    case_fold=False,
    separator=POSIX_SEPARATOR,
)


def get_current_os() -> TargetOS:
    """Host platform, read fresh on every call."""
    return TargetOS.WINDOWS if sys.platform == "win32" else TargetOS.POSIX


def resolve_os(target: Union[TargetOS, str, None] = TargetOS.AUTO) -> TargetOS:
    """Turn a requested target (possibly "auto" or None) into WINDOWS or POSIX."""
    if target is None:
        return get_current_os()
    target = TargetOS(target)
    if target is TargetOS.AUTO:
        return get_current_os()
    return target


def get_rule_set(target: Union[TargetOS, str, None] = TargetOS.AUTO) -> RuleSet:
    if resolve_os(target) is TargetOS.WINDOWS:
        return WINDOWS_RULES
    return POSIX_RULES

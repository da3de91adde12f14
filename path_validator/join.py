"""Lexical join and relative-path computation."""

from __future__ import annotations

from typing import List, Union

from .normalize import resolve_segments
from .rules import CURRENT_DIR, PARENT_DIR, SEPARATORS, TargetOS, get_rule_set

_SEPARATOR_CHARS = "".join(SEPARATORS)


def join_paths(*segments: str, os: Union[TargetOS, str] = TargetOS.AUTO) -> str:
    """
    Join segments with the OS separator.

    - empty segments are skipped
    - no segments at all gives "."
    - a single segment is returned untouched
    - separators meeting at a junction collapse into one
    """
    parts = [s for s in segments if s]
    if not parts:
        return CURRENT_DIR
    if len(parts) == 1:
        return parts[0]

    sep = get_rule_set(os).separator
    joined = parts[0]
    for part in parts[1:]:
        joined = joined.rstrip(_SEPARATOR_CHARS) + sep + part.lstrip(_SEPARATOR_CHARS)
    return joined


def get_relative_path(from_path: str, to_path: str, os: Union[TargetOS, str] = TargetOS.AUTO) -> str:
    """
    Path that leads from ``from_path`` to ``to_path``, computed on segments alone.

    Identical locations give "". When the roots differ (other drive, or one
    side absolute and the other relative) there is no relative route and the
    resolved ``to_path`` is returned instead.
    """
    rules = get_rule_set(os)
    sep = rules.separator

    from_root, from_segments = resolve_segments(from_path, rules.os)
    to_root, to_segments = resolve_segments(to_path, rules.os)

    if _key(from_root, rules.case_fold) != _key(to_root, rules.case_fold):
        return to_root + sep.join(to_segments)

    common = 0
    for left, right in zip(from_segments, to_segments):
        if _key(left, rules.case_fold) != _key(right, rules.case_fold):
            break
        common += 1

    route: List[str] = [PARENT_DIR] * (len(from_segments) - common) + to_segments[common:]
    return sep.join(route)


def _key(segment: str, case_fold: bool) -> str:
    return segment.lower() if case_fold else segment

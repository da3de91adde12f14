"""
Lexical path normalization.

Responsibilities:
- split a path into its root and segments (both separators accepted)
- resolve "." and ".." segments on the string alone, no filesystem lookups
- render with the OS separator, then apply slash/trailing/case options
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional, Tuple, Union

from .models import NormalizationOptions
from .rules import CURRENT_DIR, PARENT_DIR, POSIX_SEPARATOR, SEPARATORS, TargetOS, get_rule_set

_UNC_ROOT = re.compile(r"^[\\/]{2}([^\\/]+)[\\/]+([^\\/]+)[\\/]*")
DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")
_SEGMENT_SPLIT = re.compile(r"[\\/]+")


def split_root(path: str, os: Union[TargetOS, str] = TargetOS.AUTO) -> Tuple[str, str]:
    """
    Split ``path`` into (root, remainder). The root is rendered with the OS separator.

    Roots:
    - Posix: a leading "/" -> "/"
    - Windows: UNC "\\\\server\\share\\", "C:\\", drive-relative "C:", or a leading "\\"
    """
    rules = get_rule_set(os)
    sep = rules.separator

    if rules.os is TargetOS.WINDOWS:
        unc = _UNC_ROOT.match(path)
        if unc:
            return sep * 2 + unc.group(1) + sep + unc.group(2) + sep, path[unc.end():]
        if DRIVE_PREFIX.match(path):
            if path[2:].startswith(SEPARATORS):
                return path[:2] + sep, path[3:]
            return path[:2], path[2:]
        roots = SEPARATORS
    else:
        # "\" is an ordinary filename character on posix; only "/" anchors a path.
        roots = (POSIX_SEPARATOR,)

    if path.startswith(roots):
        return sep, path[1:]
    return "", path


def is_absolute(path: str, os: Union[TargetOS, str] = TargetOS.AUTO) -> bool:
    root, _ = split_root(path, os)
    # A bare drive ("C:foo") is relative to that drive's working directory.
    return bool(root) and not DRIVE_PREFIX.fullmatch(root)


def resolve_segments(path: str, os: Union[TargetOS, str] = TargetOS.AUTO) -> Tuple[str, List[str]]:
    """
    Resolve "." and ".." lexically.

    Empty and "." segments are dropped; ".." pops the previous segment unless
    there is none (or it is itself ".."), in which case it is kept literally.
    The root is never popped.
    """
    root, rest = split_root(path, os)
    resolved: List[str] = []
    for segment in _SEGMENT_SPLIT.split(rest):
        if not segment or segment == CURRENT_DIR:
            continue
        if segment == PARENT_DIR and resolved and resolved[-1] != PARENT_DIR:
            resolved.pop()
        else:
            resolved.append(segment)
    return root, resolved


def normalize_path(
    path: str,
    options: Union[NormalizationOptions, Mapping[str, Any], None] = None,
) -> str:
    """
    Canonicalize ``path`` without touching the filesystem.

    Rules:
    - Empty input is returned as "".
    - A path that resolves to the current directory is returned exactly as given.
    - Backslashes become "/" when force_forward_slash is on.
    - One trailing separator is removed when remove_trailing_slash is on (never the root itself).
    - Case is folded when to_lower_case is on; left unset it follows the OS (Windows folds).

    Normalizing an already normalized path with the same options returns it unchanged.
    """
    if not path:
        return ""

    opts = NormalizationOptions.coerce(options)
    rules = get_rule_set(opts.os)
    sep = rules.separator

    root, segments = resolve_segments(path, rules.os)
    trailing = path.endswith(SEPARATORS)

    if not root and not segments:
        if not trailing:
            return path
        normalized = CURRENT_DIR + sep
    else:
        normalized = root + sep.join(segments)
        if segments and trailing:
            normalized += sep

    if opts.force_forward_slash:
        normalized = normalized.replace("\\", "/")

    if opts.remove_trailing_slash and len(normalized) > max(len(root), 1):
        if normalized.endswith(SEPARATORS):
            normalized = normalized[:-1]

    if _folds_case(opts.to_lower_case, rules.case_fold):
        normalized = normalized.lower()

    return normalized


def _folds_case(requested: Optional[bool], os_default: bool) -> bool:
    return os_default if requested is None else requested

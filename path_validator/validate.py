"""
Path validation, traversal detection and sanitization.

validate_path runs every check and reports all findings at once; only an
empty path stops early. Nothing here raises for string input.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from .models import ErrorCode, NormalizationOptions, ValidationError, ValidationOptions, ValidationResult
from .normalize import DRIVE_PREFIX, is_absolute, normalize_path, resolve_segments
from .rules import PARENT_DIR, SEPARATORS, RuleSet, TargetOS, get_rule_set

logger = logging.getLogger(__name__)


def validate_path(
    path: str,
    options: Union[ValidationOptions, Mapping[str, Any], None] = None,
) -> ValidationResult:
    opts = ValidationOptions.coerce(options)
    rules = get_rule_set(opts.os)

    if not path:
        return ValidationResult.failed(
            [ValidationError(code=ErrorCode.EMPTY_PATH, message="Path cannot be empty")]
        )

    errors: List[ValidationError] = []

    # Unset or non-positive limits fall back to the OS default.
    max_length = opts.max_length if opts.max_length and opts.max_length > 0 else rules.max_path_length
    if len(path) > max_length:
        errors.append(ValidationError(
            code=ErrorCode.TOO_LONG,
            message=f"Path exceeds maximum length of {max_length} characters",
        ))

    # Raw substring test: "a..b" is rejected too.
    if not opts.allow_traversal and PARENT_DIR in path:
        errors.append(ValidationError(
            code=ErrorCode.TRAVERSAL,
            message="Path traversal (..) is not allowed",
        ))

    position = _first_illegal_char(path, rules)
    if position is not None:
        errors.append(ValidationError(
            code=ErrorCode.ILLEGAL_CHAR,
            message=f"Path contains illegal character: {path[position]!r}",
            position=position,
        ))

    absolute = is_absolute(path, rules.os)
    if absolute and not opts.allow_absolute:
        errors.append(ValidationError(
            code=ErrorCode.ABSOLUTE_NOT_ALLOWED,
            message="Absolute paths are not allowed",
        ))
    if not absolute and not opts.allow_relative:
        errors.append(ValidationError(
            code=ErrorCode.RELATIVE_NOT_ALLOWED,
            message="Relative paths are not allowed",
        ))

    if errors:
        logger.debug("rejected path %r: %s", path, ", ".join(e.code.value for e in errors))
        return ValidationResult.failed(errors)

    return ValidationResult.ok(normalize_path(path, NormalizationOptions(os=rules.os)))


def is_path_traversal(path: str, os: Union[TargetOS, str] = TargetOS.AUTO) -> bool:
    """
    True when the normalized path still has a ".." segment, i.e. it climbs above its start.

    Unlike the raw check in validate_path, "a..b" is not traversal here,
    while "./a/../../b" (which resolves to "../b") is.
    """
    if not path:
        return False
    rules = get_rule_set(os)
    normalized = normalize_path(path, NormalizationOptions(os=rules.os))
    _, segments = resolve_segments(normalized, rules.os)
    return PARENT_DIR in segments


def sanitize_path(path: str, os: Union[TargetOS, str] = TargetOS.AUTO) -> str:
    """Delete characters that are illegal on ``os``, then normalize with that OS's defaults."""
    if not path:
        return ""

    rules = get_rule_set(os)
    start = _prefix_length(path, rules)
    cleaned = path[:start] + rules.illegal_chars.sub("", path[start:])
    if cleaned != path:
        logger.debug("removed %d illegal character(s) from %r", len(path) - len(cleaned), path)

    return normalize_path(cleaned, NormalizationOptions(os=rules.os))


def _first_illegal_char(path: str, rules: RuleSet) -> Optional[int]:
    match = rules.illegal_chars.search(path, _prefix_length(path, rules))
    return match.start() if match else None


def _prefix_length(path: str, rules: RuleSet) -> int:
    # The colon of an absolute drive root like "C:/" is syntax, not an illegal character.
    if rules.os is TargetOS.WINDOWS and DRIVE_PREFIX.match(path) and path[2:].startswith(SEPARATORS):
        return 2
    return 0

from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .rules import TargetOS


class ErrorCode(str, Enum):
    EMPTY_PATH = "EMPTY_PATH"
    TOO_LONG = "TOO_LONG"
    ILLEGAL_CHAR = "ILLEGAL_CHAR"
    TRAVERSAL = "TRAVERSAL"
    # Reserved for malformed drive/UNC prefixes; no check emits it yet.
    SYNTAX = "SYNTAX"
    ABSOLUTE_NOT_ALLOWED = "ABSOLUTE_NOT_ALLOWED"
    RELATIVE_NOT_ALLOWED = "RELATIVE_NOT_ALLOWED"


class _Options(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def coerce(cls, options: Union["_Options", Mapping[str, Any], None]):
        """Accept a model instance, a plain mapping (snake_case or camelCase keys) or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(options)


class ValidationOptions(_Options):
    os: TargetOS = TargetOS.AUTO
    allow_traversal: bool = Field(default=False, alias="allowTraversal")
    max_length: Optional[int] = Field(default=None, alias="maxLength")
    allow_absolute: bool = Field(default=True, alias="allowAbsolute")
    allow_relative: bool = Field(default=True, alias="allowRelative")


class NormalizationOptions(_Options):
    os: TargetOS = TargetOS.AUTO
    force_forward_slash: bool = Field(default=True, alias="forceForwardSlash")
    remove_trailing_slash: bool = Field(default=True, alias="removeTrailingSlash")
    # None means: fold case only when the resolved OS is Windows.
    to_lower_case: Optional[bool] = Field(default=None, alias="toLowerCase")


class ValidationError(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str
    position: Optional[int] = None


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: Optional[List[ValidationError]] = None
    normalized_path: Optional[str] = None

    @model_validator(mode="after")
    def _valid_xor_errors(self) -> "ValidationResult":
        if self.is_valid:
            if self.errors or self.normalized_path is None:
                raise ValueError("valid result must carry a normalized path and no errors")
        elif not self.errors or self.normalized_path is not None:
            raise ValueError("invalid result must carry errors and no normalized path")
        return self

    @classmethod
    def ok(cls, normalized_path: str) -> "ValidationResult":
        return cls(is_valid=True, normalized_path=normalized_path)

    @classmethod
    def failed(cls, errors: List[ValidationError]) -> "ValidationResult":
        return cls(is_valid=False, errors=list(errors))

    @property
    def codes(self) -> List[ErrorCode]:
        return [e.code for e in self.errors or []]


# --- HTTP envelopes ---


class ValidateRequest(BaseModel):
    path: str
    options: ValidationOptions = Field(default_factory=ValidationOptions)


class NormalizeRequest(BaseModel):
    path: str
    options: NormalizationOptions = Field(default_factory=NormalizationOptions)


class SanitizeRequest(BaseModel):
    path: str
    os: TargetOS = TargetOS.AUTO


class JoinRequest(BaseModel):
    segments: List[str] = Field(default_factory=list, examples=[["path", "to", "file.txt"]])
    os: TargetOS = TargetOS.AUTO


class RelativeRequest(BaseModel):
    from_path: str = Field(examples=["/path/to/dir"])
    to_path: str = Field(examples=["/path/file.txt"])
    os: TargetOS = TargetOS.AUTO


class TraversalRequest(BaseModel):
    path: str
    os: TargetOS = TargetOS.AUTO


class PathResponse(BaseModel):
    path: str


class TraversalResponse(BaseModel):
    path: str
    traversal: bool


class OSResponse(BaseModel):
    os: TargetOS


class HealthResponse(BaseModel):
    ok: bool = True

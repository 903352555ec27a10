"""Validation request/response models (Pydantic).

`Constraints` carries the checks a host form control has already evaluated; `ValidationOptions`
carries the caller's kind-specific limits; `ValidationOutcome` is the single result shape returned
by `validate`.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class InputKind(StrEnum):
    """Supported kinds of raw input."""

    text = "text"
    email = "email"
    number = "number"
    multiline = "multiline"

    @classmethod
    def _missing_(cls, value: object) -> InputKind | None:
        # Form controls call multi-line inputs "textarea".
        if isinstance(value, str) and value.lower() == "textarea":
            return cls.multiline
        return None


class ValidationOptions(BaseModel):
    """Kind-specific limits. A limit applies whenever it is not `None`."""

    model_config = ConfigDict(extra="forbid")

    max_length: int | None = Field(default=None, ge=0)
    min: float | None = None
    max: float | None = None

    @model_validator(mode="after")
    def validate_bounds(self) -> ValidationOptions:
        """Validate that the numeric bounds are ordered (`min <= max`)."""

        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError("min must be <= max")
        return self


class Constraints(BaseModel):
    """Results of host-level checks, mirroring an HTML form control's validity state.

    The limit fields are only used to render error messages.
    """

    model_config = ConfigDict(extra="forbid")

    required: bool = False
    pattern_mismatch: bool = False
    too_long: bool = False
    range_underflow: bool = False
    range_overflow: bool = False
    valid: bool = True

    max_length: int | None = None
    min: float | None = None
    max: float | None = None

    @property
    def passes(self) -> bool:
        """Whether every host-level check succeeded."""

        return self.valid and not (
                self.pattern_mismatch
                or self.too_long
                or self.range_underflow
                or self.range_overflow
        )


class ValidationOutcome(BaseModel):
    """Result of validating a raw value: exactly one of `sanitized`/`error` is set."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    valid: bool
    sanitized: str | float | None = None
    error: str | None = None

    @model_validator(mode="after")
    def validate_shape(self) -> ValidationOutcome:
        """Enforce that a valid outcome has a sanitized value and an invalid one an error."""

        if self.valid:
            if self.sanitized is None or self.error is not None:
                raise ValueError("a valid outcome needs `sanitized` and no `error`")
        elif self.error is None or self.sanitized is not None:
            raise ValueError("an invalid outcome needs `error` and no `sanitized`")
        return self

    @classmethod
    def ok(cls, sanitized: str | float) -> ValidationOutcome:
        return cls(valid=True, sanitized=sanitized)

    @classmethod
    def fail(cls, error: str) -> ValidationOutcome:
        return cls(valid=False, error=error)

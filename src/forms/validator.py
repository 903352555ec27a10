"""Type-dispatched validation and sanitization of raw form input.

Strategy:
    1) Host-level constraint failures are reported first, in a fixed precedence
       (required-empty, pattern, too long, underflow, overflow, generic).
    2) Otherwise the trimmed value is checked and sanitized according to its `InputKind`.

Invalid user input never raises; it is reported as a failed `ValidationOutcome`.
"""

from __future__ import annotations

import logging
import re

from src.forms.schema import Constraints, InputKind, ValidationOptions, ValidationOutcome
from src.text.html import strip_html

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

_NON_TEXT_RE = re.compile(r"[^a-zA-Z0-9\s]")
_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")
# Longest numeric prefix, so "12.5.3" reads as 12.5 and "4-2" as 4.
_NUMBER_PREFIX_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def is_valid_email(value: str) -> bool:
    """Whether `value` looks like `local@domain.tld` (no whitespace, a single `@`)."""

    return EMAIL_RE.fullmatch(value) is not None


def _format_limit(value: float | None) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def _constraint_error(value: str, constraints: Constraints) -> str | None:
    if constraints.required and not value:
        return "This field is required."
    if constraints.passes:
        return None
    if constraints.pattern_mismatch:
        return "Invalid format."
    if constraints.too_long:
        return f"Input exceeds maximum length of {constraints.max_length}."
    if constraints.range_underflow:
        return f"Value is below the minimum of {_format_limit(constraints.min)}."
    if constraints.range_overflow:
        return f"Value exceeds the maximum of {_format_limit(constraints.max)}."
    return "Invalid input."


def _check_length(sanitized: str, options: ValidationOptions) -> ValidationOutcome:
    if options.max_length is not None and len(sanitized) > options.max_length:
        return ValidationOutcome.fail(f"Text exceeds maximum length of {options.max_length}")
    return ValidationOutcome.ok(sanitized)


def _validate_text(value: str, options: ValidationOptions) -> ValidationOutcome:
    return _check_length(_NON_TEXT_RE.sub("", value), options)


def _validate_email(value: str) -> ValidationOutcome:
    lowered = value.lower()
    if not is_valid_email(lowered):
        return ValidationOutcome.fail("Invalid email format")
    return ValidationOutcome.ok(lowered)


def _validate_number(value: str, options: ValidationOptions) -> ValidationOutcome:
    match = _NUMBER_PREFIX_RE.match(_NON_NUMERIC_RE.sub("", value))
    if match is None:
        return ValidationOutcome.fail("Invalid number format")

    number = float(match.group(0))
    if options.min is not None and number < options.min:
        return ValidationOutcome.fail(
            f"Number is less than minimum value of {_format_limit(options.min)}"
        )
    if options.max is not None and number > options.max:
        return ValidationOutcome.fail(
            f"Number exceeds maximum value of {_format_limit(options.max)}"
        )
    return ValidationOutcome.ok(number)


def _validate_multiline(value: str, options: ValidationOptions) -> ValidationOutcome:
    return _check_length(strip_html(value), options)


def validate(
        raw_value: str,
        kind: InputKind | str = InputKind.text,
        options: ValidationOptions | None = None,
        constraints: Constraints | None = None,
) -> ValidationOutcome:
    """Validate and sanitize `raw_value` as the given kind of input.

    Examples:
        >>> validate(" test123!", "text", ValidationOptions(max_length=50)).sanitized
        'test123'
    """

    options = options or ValidationOptions()
    constraints = constraints or Constraints()
    value = (raw_value or "").strip()

    error = _constraint_error(value, constraints)
    if error is not None:
        logger.debug("constraint check failed error=%r", error)
        return ValidationOutcome.fail(error)

    try:
        resolved = InputKind(kind)
    except ValueError:
        logger.debug("unsupported input kind=%r", kind)
        return ValidationOutcome.fail("Unsupported input type")

    match resolved:
        case InputKind.text:
            outcome = _validate_text(value, options)
        case InputKind.email:
            outcome = _validate_email(value)
        case InputKind.number:
            outcome = _validate_number(value, options)
        case InputKind.multiline:
            outcome = _validate_multiline(value, options)

    if not outcome.valid:
        logger.debug("validation failed kind=%s error=%r", resolved, outcome.error)
    return outcome

"""Tests for type-dispatched input validation and sanitization."""

from __future__ import annotations

import pytest

from src.forms.schema import Constraints, ValidationOptions
from src.forms.validator import is_valid_email, validate

ALL_PASS = Constraints()


def test_text_is_sanitized_to_alphanumerics_and_whitespace() -> None:
    outcome = validate(" test123!", "text", ValidationOptions(max_length=50), ALL_PASS)
    assert outcome.valid
    assert outcome.sanitized == "test123"
    assert outcome.error is None


def test_text_length_is_checked_after_sanitizing() -> None:
    assert validate("ab!!!c", "text", ValidationOptions(max_length=3)).sanitized == "abc"

    outcome = validate("abcdef", "text", ValidationOptions(max_length=3))
    assert not outcome.valid
    assert outcome.error == "Text exceeds maximum length of 3"


def test_email() -> None:
    assert validate("BAD@@", "email", ValidationOptions(), ALL_PASS).valid is False
    assert validate("BAD@@", "email").error == "Invalid email format"
    assert validate(" John@Example.COM ", "email").sanitized == "john@example.com"
    assert validate("john@example", "email").valid is False


def test_is_valid_email() -> None:
    assert is_valid_email("a@b.co")
    assert not is_valid_email("a b@c.de")
    assert not is_valid_email("a@b.c\n")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("$1,234.50", 1234.5), ("-3", -3.0), ("12.5.3", 12.5), (".5", 0.5)],
)
def test_number_is_parsed_from_sanitized_prefix(raw: str, expected: float) -> None:
    outcome = validate(raw, "number")
    assert outcome.valid
    assert outcome.sanitized == expected
    assert isinstance(outcome.sanitized, float)


def test_number_errors() -> None:
    assert validate("abc", "number").error == "Invalid number format"
    assert validate("-", "number").error == "Invalid number format"
    assert (
            validate("5", "number", ValidationOptions(min=10)).error
            == "Number is less than minimum value of 10"
    )
    assert (
            validate("50", "number", ValidationOptions(max=20.5)).error
            == "Number exceeds maximum value of 20.5"
    )
    assert validate("10", "number", ValidationOptions(min=10, max=10)).sanitized == 10.0


def test_multiline_strips_tags() -> None:
    outcome = validate("<b>Hello</b> world<script>", "multiline")
    assert outcome.sanitized == "Hello world"
    assert validate("<p>abcd</p>", "textarea", ValidationOptions(max_length=3)).valid is False


def test_unknown_kind_is_unsupported() -> None:
    outcome = validate("x", "date")
    assert not outcome.valid
    assert outcome.error == "Unsupported input type"


@pytest.mark.parametrize(
    ("constraints", "raw", "expected"),
    [
        (Constraints(required=True, pattern_mismatch=True), "   ", "This field is required."),
        (Constraints(pattern_mismatch=True, too_long=True), "x", "Invalid format."),
        (
            Constraints(too_long=True, range_underflow=True, max_length=5),
            "x",
            "Input exceeds maximum length of 5.",
        ),
        (
            Constraints(range_underflow=True, range_overflow=True, min=1),
            "x",
            "Value is below the minimum of 1.",
        ),
        (Constraints(range_overflow=True, max=10), "x", "Value exceeds the maximum of 10."),
        (Constraints(valid=False), "x", "Invalid input."),
    ],
)
def test_constraint_precedence(constraints: Constraints, raw: str, expected: str) -> None:
    outcome = validate(raw, "date", ValidationOptions(), constraints)
    assert not outcome.valid
    assert outcome.error == expected


def test_required_field_with_value_proceeds_to_kind_checks() -> None:
    outcome = validate(" hi ", "text", constraints=Constraints(required=True))
    assert outcome.sanitized == "hi"

"""Case-style conversion and small string helpers."""

from __future__ import annotations

import re

_CAMEL_BOUNDARY_RE = re.compile(r"^\w|[A-Z]|\b\w", flags=re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")
_SEPARATOR_RE = re.compile(r"[-_]")
_LOWER_UPPER_RE = re.compile(r"([a-z])([A-Z])")
_KEBAB_SEPARATOR_RE = re.compile(r"[\s_]+")
_SNAKE_SEPARATOR_RE = re.compile(r"[\s-]+")
_WORD_START_RE = re.compile(r"\b\w", flags=re.ASCII)


def _camel_boundary(match: re.Match[str]) -> str:
    char = match.group(0)
    return char.lower() if match.start() == 0 else char.upper()


def camel_case(value: str) -> str:
    """Convert `value` to camelCase.

    The first character is lower-cased; every uppercase letter and every character starting a new
    word is upper-cased. Whitespace, hyphens and underscores are then removed.

    Examples:
        >>> camel_case("hello world")
        'helloWorld'
        >>> camel_case("background-color")
        'backgroundColor'
    """

    value = _CAMEL_BOUNDARY_RE.sub(_camel_boundary, value)
    value = _WHITESPACE_RE.sub("", value)
    return _SEPARATOR_RE.sub("", value)


def kebab_case(value: str) -> str:
    """Convert `value` to kebab-case (`"fooBar baz" -> "foo-bar-baz"`)."""

    value = _LOWER_UPPER_RE.sub(r"\1-\2", value)
    value = _KEBAB_SEPARATOR_RE.sub("-", value)
    return value.lower()


def snake_case(value: str) -> str:
    """Convert `value` to snake_case (`"fooBar baz" -> "foo_bar_baz"`)."""

    value = _LOWER_UPPER_RE.sub(r"\1_\2", value)
    value = _SNAKE_SEPARATOR_RE.sub("_", value)
    return value.lower()


def capitalize_words(value: str) -> str:
    """Upper-case the first character of every word, leaving the rest untouched."""

    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), value)


def truncate(value: str, length: int = 100) -> str:
    """Cut `value` to `length` characters and append an ellipsis if it was longer."""

    if len(value) <= length:
        return value
    return value[:length] + "..."

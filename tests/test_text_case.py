"""Tests for case-style converters and small string helpers."""

from __future__ import annotations

import random
import string

import pytest

from src.text.case import camel_case, capitalize_words, kebab_case, snake_case, truncate


def test_camel_case_from_words_and_separators() -> None:
    assert camel_case("hello world") == "helloWorld"
    assert camel_case("background-color") == "backgroundColor"
    assert camel_case("Foo Bar") == "fooBar"


def test_kebab_case() -> None:
    assert kebab_case("fooBar baz") == "foo-bar-baz"
    assert kebab_case("foo_bar") == "foo-bar"
    assert kebab_case("Already-Kebab") == "already-kebab"


def test_snake_case() -> None:
    assert snake_case("fooBar-baz qux") == "foo_bar_baz_qux"
    assert snake_case("HTTP request") == "http_request"


@pytest.mark.parametrize("value", ["fooBar", "helloWorld42", "ABC", "a1B2c3", "xYz", "abC1D"])
def test_kebab_camel_kebab_is_stable(value: str) -> None:
    assert kebab_case(camel_case(kebab_case(value))) == kebab_case(value)


def test_kebab_camel_kebab_is_stable_for_random_identifiers() -> None:
    rng = random.Random(7)
    alphabet = string.ascii_letters + string.digits
    for _ in range(100):
        value = rng.choice(string.ascii_letters) + "".join(
            rng.choice(alphabet) for _ in range(rng.randint(0, 12))
        )
        assert kebab_case(camel_case(kebab_case(value))) == kebab_case(value), value


def test_capitalize_words() -> None:
    assert capitalize_words("hello world-wide") == "Hello World-Wide"


def test_truncate_appends_ellipsis_only_when_longer() -> None:
    assert truncate("abcdef", 3) == "abc..."
    assert truncate("abc", 3) == "abc"
    assert truncate("x" * 100) == "x" * 100


def test_word_boundaries_are_ascii_only() -> None:
    # Non-ASCII letters are not word characters, so the next ASCII letter starts a word.
    assert camel_case("élan vital") == "éLanVital"
    assert capitalize_words("über cool") == "üBer Cool"

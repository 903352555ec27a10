"""Tests for sequence and mapping helpers."""

from __future__ import annotations

import pytest

from src.data.collections import (
    chunk,
    clamp,
    find_duplicates,
    flatten,
    group_by,
    inclusive_range,
    median,
    omit,
    pick,
)


def test_flatten() -> None:
    assert flatten([1, [2, [3, (4,)]], []]) == [1, 2, 3, 4]


def test_chunk() -> None:
    assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert chunk([], 3) == []
    with pytest.raises(ValueError):
        chunk([1], 0)


def test_group_by_callable_and_key() -> None:
    assert group_by(["apple", "banana", "avocado"], lambda s: s[0]) == {
        "a": ["apple", "avocado"],
        "b": ["banana"],
    }
    rows = [{"k": 1, "v": "a"}, {"k": 2, "v": "b"}, {"k": 1, "v": "c"}]
    assert group_by(rows, "k") == {1: [rows[0], rows[2]], 2: [rows[1]]}


def test_pick_and_omit() -> None:
    data = {"a": 1, "b": 2, "c": 3}
    assert pick(data, ["a", "missing"]) == {"a": 1}
    assert pick(None, ["a"]) == {}
    assert omit(data, ["b", "missing"]) == {"a": 1, "c": 3}
    assert data == {"a": 1, "b": 2, "c": 3}


def test_find_duplicates_in_order_of_first_repeat() -> None:
    assert find_duplicates([1, 2, 1, 3, 2, 1]) == [1, 2]
    assert find_duplicates([]) == []


def test_median() -> None:
    assert median([3, 1, 2]) == 2
    assert median([4, 1, 3, 2]) == 2.5
    with pytest.raises(ValueError):
        median([])


def test_clamp() -> None:
    assert clamp(5, 0, 10) == 5
    assert clamp(-3, 0, 10) == 0
    assert clamp(12.5, 0, 10) == 10


def test_inclusive_range() -> None:
    assert inclusive_range(1, 5) == [1, 2, 3, 4, 5]
    assert inclusive_range(0, 10, 5) == [0, 5, 10]
    assert inclusive_range(0, 9, 4) == [0, 4, 8]
    assert inclusive_range(3, 1) == []
    with pytest.raises(ValueError):
        inclusive_range(0, 1, 0)

"""Small helpers over sequences and mappings."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from typing import Any


def flatten(items: Iterable[Any]) -> list[Any]:
    """Recursively flatten nested lists and tuples into a single list."""

    flat: list[Any] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            flat.extend(flatten(item))
        else:
            flat.append(item)
    return flat


def chunk(items: Sequence[Any], size: int) -> list[Sequence[Any]]:
    """Split `items` into consecutive slices of `size` (the last one may be shorter)."""

    if size <= 0:
        raise ValueError("size must be a positive integer")
    return [items[i: i + size] for i in range(0, len(items), size)]


def group_by(items: Iterable[Any], key: Callable[[Any], Hashable] | Hashable) -> dict[Any, list[Any]]:
    """Group items by a callable or by a mapping key, preserving first-seen group order."""

    groups: dict[Any, list[Any]] = {}
    for item in items:
        group_key = key(item) if callable(key) else item[key]
        groups.setdefault(group_key, []).append(item)
    return groups


def pick(mapping: Mapping[str, Any] | None, keys: Iterable[str]) -> dict[str, Any]:
    """Return a new dict with only the requested keys that exist in `mapping`."""

    if not mapping:
        return {}
    return {key: mapping[key] for key in keys if key in mapping}


def omit(mapping: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Return a new dict without the given keys."""

    excluded = set(keys)
    return {key: value for key, value in mapping.items() if key not in excluded}


def find_duplicates(items: Iterable[Hashable]) -> list[Hashable]:
    """Values that occur more than once, in the order their first repeat is seen."""

    seen: set[Hashable] = set()
    duplicates: dict[Hashable, None] = {}
    for item in items:
        if item in seen:
            duplicates[item] = None
        else:
            seen.add(item)
    return list(duplicates)


def median(numbers: Iterable[float]) -> float:
    """Middle value of `numbers` (mean of the two middle values for an even count)."""

    ordered = sorted(numbers)
    if not ordered:
        raise ValueError("median() of an empty sequence")
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def clamp(value: float, low: float, high: float) -> float:
    """Limit `value` to the closed interval `[low, high]`."""

    return min(max(value, low), high)


def inclusive_range(start: float, end: float, step: float = 1) -> list[float]:
    """Numbers from `start` up to and including `end`, `step` apart."""

    if step <= 0:
        raise ValueError("step must be positive")
    values: list[float] = []
    current = start
    while current <= end:
        values.append(current)
        current += step
    return values

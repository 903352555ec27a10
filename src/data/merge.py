"""Structural deep merge of nested mappings and sequences.

Values are viewed through `ValueKind`:
    - mappings merge key by key (recursively when both sides hold a mapping),
    - sequences from the source replace the target wholesale,
    - scalars (including `None`) from the source replace the target.

The result never shares a container with either input, and neither input is mutated. Inputs must
be acyclic; a container revisited on the current recursion path raises `MergeError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any


class MergeError(ValueError):
    """Raised when the inputs cannot be merged (cyclic structures)."""


class ValueKind(StrEnum):
    """Structural kind of a mergeable value."""

    scalar = "scalar"
    sequence = "sequence"
    mapping = "mapping"


def classify(value: Any) -> ValueKind:
    """Return the structural kind of `value`.

    Strings and bytes are scalars even though they are sequences of characters.
    """

    if isinstance(value, Mapping):
        return ValueKind.mapping
    if isinstance(value, (list, tuple)):
        return ValueKind.sequence
    return ValueKind.scalar


def _enter(value: Any, side: str, path: set[tuple[str, int]]) -> tuple[str, int]:
    marker = (side, id(value))
    if marker in path:
        raise MergeError("cyclic input: inputs to deep_merge must be acyclic")
    path.add(marker)
    return marker


def _merge(target: Any, source: Any, path: set[tuple[str, int]], side: str = "source") -> Any:
    # `side` tags the containers of `source`: target-only values are copied as "target".
    match classify(source):
        case ValueKind.scalar:
            return source

        case ValueKind.sequence:
            marker = _enter(source, side, path)
            try:
                return [_merge(None, item, path, side) for item in source]
            finally:
                path.discard(marker)

        case ValueKind.mapping:
            markers = [_enter(source, side, path)]
            base: Mapping[str, Any] = {}
            if classify(target) is ValueKind.mapping:
                markers.append(_enter(target, "target", path))
                base = target
            try:
                result: dict[str, Any] = {
                    key: _merge(None, value, path, "target") for key, value in base.items()
                }
                for key, source_value in source.items():
                    target_value = base.get(key)
                    if (
                            classify(source_value) is ValueKind.mapping
                            and classify(target_value) is ValueKind.mapping
                    ):
                        result[key] = _merge(target_value, source_value, path, side)
                    else:
                        result[key] = _merge(None, source_value, path, side)
                return result
            finally:
                for marker in markers:
                    path.discard(marker)

    raise AssertionError(f"unhandled value kind for {type(source).__name__}")


def deep_merge(target: Any, source: Any) -> Any:
    """Merge `source` into a copy of `target`.

    Key order of a merged mapping is the target's key order followed by keys that only appear in
    the source, in source order. A non-mapping `target` is treated as empty when `source` is a
    mapping.

    Raises:
        MergeError: If either input contains a cycle.
    """

    return _merge(target, source, set())


def is_equal(a: Any, b: Any) -> bool:
    """Structural equality over the same value kinds `deep_merge` understands.

    Mappings compare key by key regardless of their concrete type, sequences element by element
    (so a list equals a tuple with the same items); scalars use `==`.
    """

    kind = classify(a)
    if kind is not classify(b):
        return False

    match kind:
        case ValueKind.mapping:
            return a.keys() == b.keys() and all(is_equal(a[key], b[key]) for key in a)
        case ValueKind.sequence:
            return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
        case _:
            return a == b

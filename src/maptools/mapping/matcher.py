from __future__ import annotations

from typing import Any

from maptools.mapping.keypath import ABSENT, resolve_key_path


def matches(payload: Any, key_path: str, expected_value: Any) -> bool:
    """
    True when the value at ``key_path`` in ``payload`` equals ``expected_value``.

    Equality is ``==``, never identity, and nothing is coerced ("1" != 1).
    An expected value of None matches an explicit null, or a missing last
    key under a dict or list that was actually reached. A malformed path or
    one that runs through a scalar never matches, whatever is expected.
    """
    parent_reached, value = resolve_key_path(payload, key_path)
    if not parent_reached:
        return False
    if expected_value is None:
        return value is None or value is ABSENT
    if value is ABSENT:
        return False
    return bool(value == expected_value)


class PathMatcher:
    """One declarative key path / value test, evaluated against many payloads."""

    __slots__ = ("key_path", "expected_value")

    def __init__(self, key_path: str, expected_value: Any):
        self.key_path = key_path
        self.expected_value = expected_value

    def matches(self, payload: Any) -> bool:
        return matches(payload, self.key_path, self.expected_value)

    def __repr__(self) -> str:
        return f"PathMatcher({self.key_path!r} == {self.expected_value!r})"

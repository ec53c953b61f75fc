from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, List, Optional, Tuple


class _Absent:
    """Marker for a key path that does not resolve to any value."""

    _instance: Optional["_Absent"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


def split_key_path(path: str) -> List[str]:
    """Split "a.b.0" into ["a", "b", "0"]; empty segments make the path malformed."""
    if not isinstance(path, str) or not path:
        raise ValueError(f"Malformed key path: {path!r}")
    parts = path.split(".")
    if any(not p for p in parts):
        raise ValueError(f"Malformed key path: {path!r}")
    return parts


def _index(token: str) -> Optional[int]:
    # only plain non-negative integers index into sequences
    if not token.isdigit():
        return None
    return int(token)


def _is_container(node: Any) -> bool:
    if isinstance(node, Mapping):
        return True
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def _step(node: Any, token: str) -> Any:
    if isinstance(node, Mapping):
        return node[token] if token in node else ABSENT
    if _is_container(node):
        idx = _index(token)
        if idx is None or idx >= len(node):
            return ABSENT
        return node[idx]
    return ABSENT


def value_for_key_path(payload: Any, path: str, default: Any = ABSENT) -> Any:
    """
    Walk a dot-separated key path through nested dicts and lists.

    Dict nodes are indexed by key, list/tuple nodes by integer segment.
    A missing key, an out-of-range index, a scalar node or a malformed
    path all yield ``default`` rather than raising.

    Examples:
      value_for_key_path({"a": {"b": 1}}, "a.b")          -> 1
      value_for_key_path({"a": [{"b": 1}]}, "a.0.b")      -> 1
      value_for_key_path({"a": "text"}, "a.b")            -> ABSENT
    """
    _, value = resolve_key_path(payload, path)
    return default if value is ABSENT else value


def resolve_key_path(payload: Any, path: str) -> Tuple[bool, Any]:
    """
    Walk ``path`` and report how far it got: ``(parent_reached, value)``.

    ``parent_reached`` is True only when the path is well formed and every
    segment but the last landed on a dict or list, so that an ABSENT value
    means "the last key is missing" rather than "the path is broken".

      resolve_key_path({"a": {}}, "a.b")       -> (True, ABSENT)
      resolve_key_path({"a": "text"}, "a.b")   -> (False, ABSENT)
      resolve_key_path({"a": 1}, "a..b")       -> (False, ABSENT)
    """
    try:
        tokens = split_key_path(path)
    except ValueError:
        return False, ABSENT

    cur: Any = payload
    for token in tokens[:-1]:
        cur = _step(cur, token)
        if cur is ABSENT:
            return False, ABSENT
    if not _is_container(cur):
        return False, ABSENT
    return True, _step(cur, tokens[-1])

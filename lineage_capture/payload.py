"""
Tolerant access into untyped lineage event payloads.

Lineage events arrive as arbitrary JSON. Every lookup here resolves to
``None`` when a key is missing, an index is out of range, or a value has an
unexpected type, so callers never have to guard individual hops.
"""

from typing import Any, Optional, Union

__all__ = [
    "extract_path",
    "extract_text",
]

PathHop = Union[str, int]


def extract_path(value: Any, *hops: PathHop) -> Optional[Any]:
    """
    Follow a sequence of keys and indexes into a JSON value.

    String hops index into objects, integer hops index into arrays.

    Args:
        value: Parsed JSON value (dict, list or scalar)
        *hops: Keys and indexes to follow in order

    Returns:
        The value at the end of the path, or None if any hop is absent

    Examples:
        >>> extract_path({"run": {"runId": "r1"}}, "run", "runId")
        'r1'
        >>> extract_path({"run": []}, "run", "runId") is None
        True
        >>> extract_path({"plan": [{"@class": "X"}]}, "plan", 0, "@class")
        'X'
    """
    current = value
    for hop in hops:
        if current is None:
            return None
        if isinstance(hop, str):
            if not isinstance(current, dict):
                return None
            current = current.get(hop)
        else:
            # bool is an int subclass but never a valid array index here
            if isinstance(hop, bool) or not isinstance(current, list):
                return None
            if hop < 0 or hop >= len(current):
                return None
            current = current[hop]
    return current


def extract_text(value: Any, *hops: PathHop) -> Optional[str]:
    """
    Follow a path and render the scalar at its end as text.

    Strings are returned as-is and numbers are rendered with ``str()``.
    Objects, arrays, booleans and null resolve to None.

    Examples:
        >>> extract_text({"run": {"runId": 42}}, "run", "runId")
        '42'
        >>> extract_text({"job": {"name": {"x": 1}}}, "job", "name") is None
        True
    """
    found = extract_path(value, *hops)
    if isinstance(found, bool):
        return None
    if isinstance(found, str):
        return found
    if isinstance(found, (int, float)):
        return str(found)
    return None

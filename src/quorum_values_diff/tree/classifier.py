"""Variant classification and JSON Pointer helpers for configuration trees.

``classify`` maps a loader-produced Python value onto its ``ValueType``.
The dispatch order is critical: bool MUST be checked before int because
bool is a subclass of int in Python, and str MUST be checked before the
array check because str is a Sequence.

JSON Pointer paths (RFC 6901) identify positions in diagnostics and errors:
- Root is "" (empty string)
- Each level appends "/{key_or_index}" with "~" and "/" escaped
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from quorum_values_diff.tree.nodes import ValueType

__all__ = ["child_path", "classify", "classify_all", "key_identity"]


def classify(value: Any) -> ValueType:
    """Return the ``ValueType`` variant of a configuration value.

    Args:
        value: Any loader-produced value (dict, list, tuple, str, int, float,
            bool, None).

    Returns:
        The matching ``ValueType`` member.

    Raises:
        TypeError: If value is not a supported configuration type.
    """
    # CRITICAL: bool MUST be checked before int — bool subclasses int in Python
    if isinstance(value, bool):
        return ValueType.BOOL

    if value is None:
        return ValueType.NULL

    if isinstance(value, int):
        return ValueType.INT

    if isinstance(value, float):
        return ValueType.REAL

    if isinstance(value, str):
        return ValueType.STRING

    if isinstance(value, Mapping):
        return ValueType.MAP

    if isinstance(value, (list, tuple)):
        return ValueType.ARRAY

    raise TypeError(f"Unsupported configuration value type: {type(value)!r}")


def classify_all(values: Iterable[Any]) -> list[ValueType]:
    """Classify every value, preserving input order."""
    return [classify(value) for value in values]


def key_identity(key: Any) -> tuple[bool, bool, Any]:
    """Return a hashable identity for a map key that keeps variants apart.

    Python dicts treat ``True``, ``1`` and ``1.0`` as the same key.  Tagging
    the key with its bool/float-ness makes those three distinct while
    leaving every other key equal to itself.
    """
    return isinstance(key, bool), isinstance(key, float), key


def child_path(path: str, key: Any) -> str:
    """Append one reference token to a JSON Pointer path.

    Args:
        path: Parent pointer ("" for the root).
        key:  Map key or array index; non-string keys are rendered with str().

    Returns:
        The child pointer, e.g. ``child_path("/a", "b/c") == "/a/b~1c"``.
    """
    token = str(key).replace("~", "~0").replace("/", "~1")
    return f"{path}/{token}"

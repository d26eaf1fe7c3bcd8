"""Type-aware structural equality over configuration trees.

Python's ``==`` is not usable as the equality primitive: it treats ``1``,
``1.0`` and ``True`` as equal and ``nan`` as unequal to itself.  Here the
variants must match before values are compared, and two NaN reals are equal
so that every value is equal to itself.

Map keys follow the same rule: ``{True: "a"}`` and ``{1: "a"}`` are different
maps even though Python would find the key ``1`` in either of them.
"""

from __future__ import annotations

import math
from typing import Any

from quorum_values_diff.tree.classifier import classify, key_identity
from quorum_values_diff.tree.nodes import ValueType

__all__ = ["deep_equal"]


def deep_equal(a: Any, b: Any) -> bool:
    """Return True if two configuration values are structurally identical.

    - Scalars: same variant and same value.
    - Arrays: same length and pairwise ``deep_equal``.
    - Maps: same key set (keys compared by variant) and pairwise
      ``deep_equal`` values.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True when the trees are identical, False otherwise.

    Raises:
        TypeError: If either tree contains an unsupported value type.
    """
    if a is b:
        return True

    type_a = classify(a)
    if type_a != classify(b):
        return False

    if type_a == ValueType.MAP:
        if len(a) != len(b):
            return False
        other = {key_identity(key): value for key, value in b.items()}
        for key, value in a.items():
            ident = key_identity(key)
            if ident not in other or not deep_equal(value, other[ident]):
                return False
        return True

    if type_a == ValueType.ARRAY:
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b, strict=True))

    if type_a == ValueType.REAL and math.isnan(a) and math.isnan(b):
        return True

    return bool(a == b)

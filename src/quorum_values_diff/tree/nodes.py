"""ValueType StrEnum and the ABSENT sentinel for configuration-value trees.

Provides the foundational types used by the classifier, the equality
primitive, and both diff algorithms.  A configuration tree is plain Python
data as produced by a YAML or JSON loader; ``ValueType`` names the variant
of each node and ``ABSENT`` expresses "no value" where ``None`` would be
ambiguous (``None`` is itself a legitimate Null value).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum, StrEnum, auto
from typing import Any, Final, Literal, TypeAlias


class ValueType(StrEnum):
    """Enumeration of the seven variants of a configuration value.

    StrEnum values are the lowercased member names:
    - NULL   -> "null"   : None
    - BOOL   -> "bool"   : True / False
    - INT    -> "int"    : integers (never bool)
    - REAL   -> "real"   : floats
    - STRING -> "string" : text
    - ARRAY  -> "array"  : ordered sequence of values
    - MAP    -> "map"    : key -> value mapping, order not significant
    """

    NULL = auto()
    BOOL = auto()
    INT = auto()
    REAL = auto()
    STRING = auto()
    ARRAY = auto()
    MAP = auto()

    @property
    def is_scalar(self) -> bool:
        """True for every variant except ARRAY and MAP."""
        return self not in (ValueType.ARRAY, ValueType.MAP)


class Absent(Enum):
    """Type of the ``ABSENT`` singleton.

    ``ABSENT`` is falsy so ``if result:`` reads naturally, but callers that
    need to tell it apart from an empty container or ``None`` must compare
    by identity (``result is ABSENT``).
    """

    ABSENT = auto()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = Absent.ABSENT

# Type alias for a configuration value (loader output)
Value: TypeAlias = (
    Mapping[Any, Any] | Sequence[Any] | str | int | float | bool | None
)

# A value, or ABSENT where the result has nothing at this position
MaybeValue: TypeAlias = Value | Literal[Absent.ABSENT]

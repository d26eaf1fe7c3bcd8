"""DiffConfig and ArrayReduceMode for diff and quorum-reduction configuration.

DiffConfig is a frozen (immutable) dataclass holding the algorithm
parameters.  ArrayReduceMode selects how a column of arrays is reduced:
copied verbatim into every diff, or voted on as whole values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum, auto
from numbers import Real

from quorum_values_diff.errors import InvalidQuorumError

DEFAULT_QUORUM = 1.0
DEFAULT_MAX_DEPTH = 256


class ArrayReduceMode(StrEnum):
    """How to reduce a column of arrays during quorum reduction.

    - VERBATIM: No base is ever formed; every input array is kept whole in
                its own diff.
    - ATOMIC:   Arrays are voted on as whole values, like scalars.
    """

    VERBATIM = auto()
    ATOMIC = auto()


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for the differ and the quorum reducer.

    Attributes:
        quorum: Fraction of inputs in (0, 1] that must agree on a value for it
            to become the base.  Default 1.0 (unanimous).
        array_mode: How same-typed array columns are reduced.
        max_depth: Maximum nesting depth processed before
            ``DepthLimitExceededError`` is raised (≥ 1).
    """

    quorum: float = DEFAULT_QUORUM
    array_mode: ArrayReduceMode = ArrayReduceMode.VERBATIM
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if (
            isinstance(self.quorum, bool)
            or not isinstance(self.quorum, Real)
            or not 0.0 < self.quorum <= 1.0
        ):
            raise InvalidQuorumError(self.quorum)
        try:
            # Accept the plain string value as well as the member
            object.__setattr__(self, "array_mode", ArrayReduceMode(self.array_mode))
        except ValueError:
            allowed = [m.value for m in ArrayReduceMode]
            msg = f"array_mode must be one of {allowed}, got {self.array_mode!r}"
            raise ValueError(msg) from None
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            msg = f"max_depth must be an int, got {self.max_depth!r}"
            raise ValueError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)

    def quorum_count(self, n: int) -> int:
        """Return the number of agreeing inputs required among ``n``.

        ``ceil(quorum * n)``, with the product rounded to 9 decimal places
        first so binary floating-point error cannot raise the threshold.
        """
        return math.ceil(round(self.quorum * n, 9))

"""ReductionResult dataclass for quorum-reduction output.

This module provides the result type returned by reduce() calls.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from quorum_values_diff.tree.nodes import ABSENT

__all__ = ["ReductionResult"]


@dataclass(frozen=True, slots=True)
class ReductionResult:
    """Result of a reduce() call.

    Unpacks as a ``(base, diffs)`` pair::

        base, diffs = reduce(values, quorum=0.6)

    Attributes:
        base:  The common baseline meeting the quorum, or ``ABSENT`` when no
            position met it.
        diffs: One entry per input, index-aligned with the inputs: the input's
            deviation from ``base``, or ``ABSENT`` when it has none.
    """

    base: Any
    diffs: list[Any]

    def __iter__(self) -> Iterator[Any]:
        yield self.base
        yield self.diffs

    @property
    def has_base(self) -> bool:
        """True when a common base was found."""
        return self.base is not ABSENT

    @property
    def changed_indices(self) -> list[int]:
        """Indices of the inputs that deviate from the base."""
        return [i for i, d in enumerate(self.diffs) if d is not ABSENT]

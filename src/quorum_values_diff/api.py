"""Public API functions for quorum-values-diff.

This module provides the two user-facing functions: diff and reduce.  Each
call creates a fresh PairwiseDiffer or QuorumReducer to guarantee zero global
state mutation between calls.
"""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from quorum_values_diff.algorithm.config import DiffConfig
from quorum_values_diff.algorithm.differ import PairwiseDiffer
from quorum_values_diff.algorithm.reducer import QuorumReducer
from quorum_values_diff.errors import DepthLimitExceededError
from quorum_values_diff.result import ReductionResult

if TYPE_CHECKING:
    from quorum_values_diff.protocols import DiagnosticObserver
    from quorum_values_diff.tree.nodes import MaybeValue

__all__ = ["diff", "reduce"]


def diff(
    candidate: Any,
    baseline: Any,
    config: DiffConfig | None = None,
) -> MaybeValue:
    """Return the directed diff of ``candidate`` relative to ``baseline``.

    Only the candidate's keys and positions are considered.  Equal-length
    arrays are diffed position by position with ``None`` placeholders;
    arrays of different length, type mismatches and differing scalars are
    returned whole.

    Args:
        candidate: The tree being described.
        baseline:  The reference tree.
        config:    Only ``max_depth`` is used.  Defaults to ``DiffConfig()``.

    Returns:
        ``ABSENT`` when the trees are equal, otherwise the diff tree.  Whole
        replacements are the candidate objects themselves; treat the result
        as read-only.

    Raises:
        DepthLimitExceededError: If the trees are nested too deeply.
    """
    differ = PairwiseDiffer(config=config)
    try:
        return differ.diff(candidate, baseline)
    except DepthLimitExceededError:
        raise
    except RecursionError as exc:
        raise _exhausted(config) from exc


def reduce(
    values: Sequence[Any],
    quorum: float | None = None,
    config: DiffConfig | None = None,
    observer: DiagnosticObserver | None = None,
) -> ReductionResult:
    """Compute the quorum-common base of ``values`` and each input's diff.

    Args:
        values:   The input trees.
        quorum:   Fraction in (0, 1] of inputs that must agree on a value.
                  Overrides ``config.quorum`` when given.
        config:   Algorithm parameters.  Defaults to ``DiffConfig()``.
        observer: Optional ``DiagnosticObserver`` receiving observations.

    Returns:
        A ``ReductionResult``; unpacks as ``(base, diffs)`` with
        ``len(diffs) == len(values)``.

    Raises:
        InvalidQuorumError: If ``quorum`` is not in (0, 1].
        DepthLimitExceededError: If the trees are nested too deeply.
    """
    if config is None:
        config = DiffConfig()
    if quorum is not None:
        config = dataclasses.replace(config, quorum=quorum)

    reducer = QuorumReducer(config=config, observer=observer)
    try:
        return reducer.reduce(values)
    except DepthLimitExceededError:
        raise
    except RecursionError as exc:
        raise _exhausted(config) from exc


def _exhausted(config: DiffConfig | None) -> DepthLimitExceededError:
    """Translate an interpreter stack overflow into the library error."""
    max_depth = (config if config is not None else DiffConfig()).max_depth
    return DepthLimitExceededError(
        "", max_depth, recursion_limit=sys.getrecursionlimit()
    )

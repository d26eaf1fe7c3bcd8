"""algorithm subpackage — public API for the diff and quorum-reduction algorithms.

Provides the directed pairwise differ, the multi-way quorum reducer, and
their shared configuration.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from quorum_values_diff.algorithm import DiffConfig, PairwiseDiffer, QuorumReducer

    PairwiseDiffer().diff({"replicas": 3}, {"replicas": 1})
    # {"replicas": 3}

    QuorumReducer(DiffConfig(quorum=0.5)).reduce([{"x": 1}, {"x": 2}])
    # ReductionResult(base={"x": 1}, diffs=[ABSENT, {"x": 2}])
"""

from __future__ import annotations

from quorum_values_diff.algorithm.config import ArrayReduceMode, DiffConfig
from quorum_values_diff.algorithm.differ import PairwiseDiffer
from quorum_values_diff.algorithm.reducer import QuorumReducer

__all__ = ["ArrayReduceMode", "DiffConfig", "PairwiseDiffer", "QuorumReducer"]

"""Quorum values diff - directed diffs and quorum baselines for configuration trees."""

from __future__ import annotations

from quorum_values_diff.algorithm.config import ArrayReduceMode, DiffConfig
from quorum_values_diff.algorithm.differ import PairwiseDiffer
from quorum_values_diff.algorithm.reducer import QuorumReducer
from quorum_values_diff.api import diff, reduce
from quorum_values_diff.errors import (
    DepthLimitExceededError,
    DocumentLoadError,
    InvalidQuorumError,
    QuorumDiffError,
)
from quorum_values_diff.result import ReductionResult
from quorum_values_diff.tree.equality import deep_equal
from quorum_values_diff.tree.nodes import ABSENT, Absent, ValueType

__version__: str = "0.1.0"
__all__: list[str] = [
    "ABSENT",
    "Absent",
    "ArrayReduceMode",
    "DepthLimitExceededError",
    "DiffConfig",
    "DocumentLoadError",
    "InvalidQuorumError",
    "PairwiseDiffer",
    "QuorumDiffError",
    "QuorumReducer",
    "ReductionResult",
    "ValueType",
    "deep_equal",
    "diff",
    "reduce",
]

"""PairwiseDiffer: directed structural diff of a candidate tree against a baseline.

Answers "what in the candidate diverges from the baseline?".  The diff is
asymmetric: only the candidate's keys and positions are considered, so keys
that exist solely in the baseline never appear in the result.

Architecture:
- Equal trees:              ABSENT (no diff).
- MAP vs MAP:               per-key recursion over the candidate's keys; a
                            missing baseline key compares against None.
- ARRAY vs ARRAY, same len: per-position recursion; unchanged positions are
                            filled with the None placeholder.
- ARRAY vs ARRAY, diff len: the whole candidate array (full replacement).
- Anything else:            the whole candidate value.

Wholesale results are the candidate object itself (no copy).  Partial map and
array diffs are freshly built containers.  Inputs are never mutated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from quorum_values_diff.algorithm.config import DiffConfig
from quorum_values_diff.errors import DepthLimitExceededError
from quorum_values_diff.tree.classifier import child_path, classify, key_identity
from quorum_values_diff.tree.equality import deep_equal
from quorum_values_diff.tree.nodes import ABSENT, ValueType

if TYPE_CHECKING:
    from quorum_values_diff.tree.nodes import MaybeValue

__all__ = ["PairwiseDiffer"]


class PairwiseDiffer:
    """Recursive directed diff between two configuration trees.

    Example::

        from quorum_values_diff.algorithm.differ import PairwiseDiffer

        differ = PairwiseDiffer()
        differ.diff({"image": {"tag": "1.2"}, "replicas": 3},
                    {"image": {"tag": "1.1"}, "replicas": 3})
        # {"image": {"tag": "1.2"}}
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        """Initialise the differ.

        Args:
            config: Only ``max_depth`` is used.  Defaults to ``DiffConfig()``.
        """
        self._config = config if config is not None else DiffConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diff(self, candidate: Any, baseline: Any) -> MaybeValue:
        """Return what in ``candidate`` differs from ``baseline``.

        Args:
            candidate: The tree being described.
            baseline:  The reference tree.

        Returns:
            ``ABSENT`` when the trees are equal, otherwise the diff tree.

        Raises:
            DepthLimitExceededError: If nesting exceeds ``config.max_depth``.
            TypeError: If either tree contains an unsupported value type.
        """
        return self._diff(candidate, baseline, path="", depth=0)

    # ------------------------------------------------------------------
    # Recursive dispatch
    # ------------------------------------------------------------------

    def _diff(self, candidate: Any, baseline: Any, path: str, depth: int) -> MaybeValue:
        if depth > self._config.max_depth:
            raise DepthLimitExceededError(path, self._config.max_depth)

        if deep_equal(candidate, baseline):
            return ABSENT

        candidate_type = classify(candidate)
        baseline_type = classify(baseline)

        if candidate_type == ValueType.MAP and baseline_type == ValueType.MAP:
            return self._diff_maps(candidate, baseline, path, depth)

        if candidate_type == ValueType.ARRAY and baseline_type == ValueType.ARRAY:
            if len(candidate) != len(baseline):
                # Positional diffing is meaningless across a length change
                return candidate
            return self._diff_arrays(candidate, baseline, path, depth)

        # Type mismatch or differing scalars: full replacement
        return candidate

    def _diff_maps(
        self, candidate: Any, baseline: Any, path: str, depth: int
    ) -> MaybeValue:
        """Diff two maps over the candidate's keys only.

        Returns:
            A new dict holding the changed keys, or ``ABSENT`` when none changed.
        """
        reference = {key_identity(key): value for key, value in baseline.items()}
        changed: dict[Any, Any] = {}
        for key, value in candidate.items():
            sub = self._diff(
                value,
                reference.get(key_identity(key)),
                child_path(path, key),
                depth + 1,
            )
            if sub is not ABSENT:
                changed[key] = sub
        return changed if changed else ABSENT

    def _diff_arrays(
        self, candidate: Any, baseline: Any, path: str, depth: int
    ) -> MaybeValue:
        """Diff two equal-length arrays position by position.

        Returns:
            A new list of the same length with ``None`` at unchanged positions,
            or ``ABSENT`` when no position changed.
        """
        items: list[Any] = []
        has_diff = False
        for idx, (cand_item, base_item) in enumerate(
            zip(candidate, baseline, strict=True)
        ):
            sub = self._diff(cand_item, base_item, child_path(path, idx), depth + 1)
            if sub is ABSENT:
                items.append(None)
            else:
                items.append(sub)
                has_diff = True
        return items if has_diff else ABSENT

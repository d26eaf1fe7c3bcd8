"""QuorumReducer: common baseline plus per-input diffs across N configuration trees.

Given N trees and a quorum fraction, every tree position is partitioned into
a value that at least ``ceil(quorum * N)`` inputs agree on (the base) and the
per-input deviations from that base (the diffs).

Architecture:
- Mixed variants: no base; every non-null input is kept whole in its own diff.
- Scalars:        distinct values are counted by ``deep_equal`` in first-seen
                  order; the first one reaching the quorum count is the base.
- Maps:           the union of keys is reduced column by column (missing keys
                  read as None) and the sub-results are reassembled into a
                  base map and one diff map per input.
- Arrays:         kept whole in every diff (VERBATIM), or voted on as whole
                  values like scalars (ATOMIC).

The critical invariant: ``diffs`` is always index-aligned with the inputs,
at every recursion level.  N never shrinks inside one reduction.

Map keys are matched by variant (``True``, ``1`` and ``1.0`` are three
columns).  Known limitation: when two such keys both reach the quorum, the
base is still a Python dict and holds only one entry for them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from quorum_values_diff.algorithm.config import ArrayReduceMode, DiffConfig
from quorum_values_diff.errors import DepthLimitExceededError
from quorum_values_diff.result import ReductionResult
from quorum_values_diff.tree.classifier import child_path, classify_all, key_identity
from quorum_values_diff.tree.equality import deep_equal
from quorum_values_diff.tree.nodes import ABSENT, ValueType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from quorum_values_diff.protocols import DiagnosticObserver
    from quorum_values_diff.tree.nodes import MaybeValue

__all__ = ["QuorumReducer"]


class QuorumReducer:
    """Recursive quorum reduction over N configuration trees.

    Example::

        from quorum_values_diff.algorithm.config import DiffConfig
        from quorum_values_diff.algorithm.reducer import QuorumReducer

        reducer = QuorumReducer(config=DiffConfig(quorum=0.6))
        base, diffs = reducer.reduce(
            [{"a": 1, "b": 2}, {"a": 1, "b": 3}, {"a": 1, "b": 2}]
        )
        # base  == {"a": 1, "b": 2}
        # diffs == [ABSENT, {"b": 3}, ABSENT]
    """

    def __init__(
        self,
        config: DiffConfig | None = None,
        observer: DiagnosticObserver | None = None,
    ) -> None:
        """Initialise the reducer.

        Args:
            config:   Quorum, array mode and depth limit.  Defaults to
                ``DiffConfig()`` (unanimous quorum, VERBATIM arrays).
            observer: Optional diagnostic sink.  Results are identical with
                or without one.
        """
        self._config = config if config is not None else DiffConfig()
        self._observer = observer

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def reduce(self, values: Sequence[Any]) -> ReductionResult:
        """Split ``values`` into a quorum-common base and per-input diffs.

        Args:
            values: The input trees, in a meaningful order (diffs are aligned
                to it).

        Returns:
            A ``ReductionResult`` with ``len(diffs) == len(values)``.

        Raises:
            DepthLimitExceededError: If nesting exceeds ``config.max_depth``.
            TypeError: If any tree contains an unsupported value type.
        """
        base, diffs = self._reduce(list(values), path="", depth=0)
        return ReductionResult(base=base, diffs=diffs)

    # ------------------------------------------------------------------
    # Recursive dispatch
    # ------------------------------------------------------------------

    def _reduce(
        self, values: list[Any], path: str, depth: int
    ) -> tuple[MaybeValue, list[MaybeValue]]:
        if depth > self._config.max_depth:
            raise DepthLimitExceededError(path, self._config.max_depth)

        if not values:
            return ABSENT, []

        quorum_count = self._config.quorum_count(len(values))
        if self._observer is not None:
            self._observer.on_reduce(path, len(values), quorum_count)

        tags = classify_all(values)
        if len(set(tags)) > 1:
            if self._observer is not None:
                self._observer.on_type_mismatch(path, [str(t) for t in tags])
            return ABSENT, self._keep_non_null(values)

        value_type = tags[0]

        if value_type == ValueType.MAP:
            return self._reduce_maps(values, path, depth)

        if value_type == ValueType.ARRAY and (
            self._config.array_mode == ArrayReduceMode.VERBATIM
        ):
            return ABSENT, list(values)

        # Scalars (and ATOMIC arrays): vote on whole values
        base = self._vote(values, quorum_count)
        if base is ABSENT:
            return ABSENT, self._keep_non_null(values)
        diffs: list[MaybeValue] = [
            ABSENT if deep_equal(value, base) else value for value in values
        ]
        return base, diffs

    def _reduce_maps(
        self, values: list[Any], path: str, depth: int
    ) -> tuple[MaybeValue, list[MaybeValue]]:
        """Reduce a column of maps key by key.

        Returns:
            ``(base, diffs)`` where ``base`` is a new dict of the keys that
            produced a sub-base (or ``ABSENT``), and each diff is a new dict of
            that input's deviating keys (or ``ABSENT`` when it has none).
        """
        indexed = [
            {key_identity(key): value for key, value in mapping.items()}
            for mapping in values
        ]

        # Union of keys, first-seen order across inputs
        all_keys: dict[Any, Any] = {}
        for mapping in values:
            for key in mapping:
                all_keys.setdefault(key_identity(key), key)

        base_map: dict[Any, Any] = {}
        diff_maps: list[dict[Any, Any]] = [{} for _ in values]
        has_base = False

        for ident, key in all_keys.items():
            key_path = child_path(path, key)
            if self._observer is not None:
                self._observer.on_key(path, key)

            column = [index.get(ident) for index in indexed]
            sub_base, sub_diffs = self._reduce(column, key_path, depth + 1)

            if sub_base is not ABSENT:
                base_map[key] = sub_base
                has_base = True

            for i, sub_diff in enumerate(sub_diffs):
                # None here would only be a placeholder, never a real override
                if sub_diff is not ABSENT and sub_diff is not None:
                    diff_maps[i][key] = sub_diff

        base: MaybeValue = base_map if has_base else ABSENT
        diffs: list[MaybeValue] = [d if d else ABSENT for d in diff_maps]
        return base, diffs

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _vote(values: list[Any], quorum_count: int) -> MaybeValue:
        """Return the first value (in input order) reaching ``quorum_count``.

        Distinct values are tallied by ``deep_equal`` rather than hashing so
        that unhashable values (ATOMIC arrays) and NaN are counted correctly.

        Returns:
            The winning value, or ``ABSENT`` when no value reaches the quorum.
        """
        tally: list[list[Any]] = []  # [value, count] in first-seen order
        for value in values:
            for entry in tally:
                if deep_equal(entry[0], value):
                    entry[1] += 1
                    break
            else:
                tally.append([value, 1])

        for value, count in tally:
            if count >= quorum_count:
                return value
        return ABSENT

    @staticmethod
    def _keep_non_null(values: list[Any]) -> list[MaybeValue]:
        """Every value kept whole in its own diff slot; Nulls become ABSENT."""
        return [ABSENT if value is None else value for value in values]

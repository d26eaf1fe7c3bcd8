"""Tests for the deep_equal structural equality primitive.

Covers:
- Scalars compare by variant AND value (1, 1.0 and True are all different)
- NaN equals NaN
- Arrays: length and pairwise equality, order significant
- Maps: key set and pairwise equality, insertion order not significant,
  keys compared by variant
- Nested trees
"""

from __future__ import annotations

import pytest

from quorum_values_diff.tree.equality import deep_equal

# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


class TestScalarEquality:
    @pytest.mark.parametrize("value", [None, True, False, 0, 7, 1.5, "", "x"])
    def test_reflexive(self, value: object) -> None:
        assert deep_equal(value, value)

    def test_int_and_real_differ(self) -> None:
        assert not deep_equal(1, 1.0)

    def test_bool_and_int_differ(self) -> None:
        assert not deep_equal(True, 1)
        assert not deep_equal(False, 0)

    def test_null_and_falsy_differ(self) -> None:
        assert not deep_equal(None, 0)
        assert not deep_equal(None, "")
        assert not deep_equal(None, False)

    def test_string_and_number_differ(self) -> None:
        assert not deep_equal("1", 1)

    def test_different_values(self) -> None:
        assert not deep_equal(1, 2)
        assert not deep_equal("a", "b")

    def test_nan_equals_nan(self) -> None:
        assert deep_equal(float("nan"), float("nan"))

    def test_nan_differs_from_number(self) -> None:
        assert not deep_equal(float("nan"), 0.0)


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------


class TestArrayEquality:
    def test_equal_arrays(self) -> None:
        assert deep_equal([1, "a", None], [1, "a", None])

    def test_order_matters(self) -> None:
        assert not deep_equal([1, 2], [2, 1])

    def test_length_matters(self) -> None:
        assert not deep_equal([1], [1, 1])

    def test_element_type_matters(self) -> None:
        assert not deep_equal([1], [1.0])

    def test_list_equals_tuple(self) -> None:
        assert deep_equal([1, 2], (1, 2))

    def test_empty_arrays(self) -> None:
        assert deep_equal([], [])

    def test_empty_array_is_not_empty_map(self) -> None:
        assert not deep_equal([], {})


# ---------------------------------------------------------------------------
# Maps
# ---------------------------------------------------------------------------


class TestMapEquality:
    def test_insertion_order_ignored(self) -> None:
        assert deep_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})

    def test_extra_key(self) -> None:
        assert not deep_equal({"a": 1}, {"a": 1, "b": 2})
        assert not deep_equal({"a": 1, "b": 2}, {"a": 1})

    def test_same_size_different_keys(self) -> None:
        assert not deep_equal({"a": 1}, {"b": 1})

    def test_null_value_is_not_missing_key(self) -> None:
        assert not deep_equal({"a": None}, {})

    def test_value_type_matters(self) -> None:
        assert not deep_equal({"a": 1}, {"a": True})

    def test_key_variants_differ(self) -> None:
        assert not deep_equal({True: "a"}, {1: "a"})
        assert not deep_equal({1: "a"}, {1.0: "a"})
        assert not deep_equal({0: "a"}, {False: "a"})

    def test_same_key_variant_equal(self) -> None:
        assert deep_equal({1: "a", False: "b"}, {False: "b", 1: "a"})

    def test_nested(self) -> None:
        left = {"image": {"repo": "nginx", "tags": ["1.25", "latest"]}, "port": 80}
        right = {"port": 80, "image": {"tags": ["1.25", "latest"], "repo": "nginx"}}
        assert deep_equal(left, right)

    def test_nested_difference(self) -> None:
        left = {"image": {"repo": "nginx", "tags": ["1.25"]}}
        right = {"image": {"repo": "nginx", "tags": ["1.26"]}}
        assert not deep_equal(left, right)


class TestUnsupported:
    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError):
            deep_equal({"a": {1, 2}}, {"a": {1, 2}})

"""tree subpackage — value variants, classification and structural equality."""

from __future__ import annotations

from quorum_values_diff.tree.classifier import child_path, classify
from quorum_values_diff.tree.equality import deep_equal
from quorum_values_diff.tree.nodes import ABSENT, Absent, ValueType

__all__ = ["ABSENT", "Absent", "ValueType", "child_path", "classify", "deep_equal"]

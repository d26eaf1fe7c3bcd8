"""pytest plugin for quorum-values-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from quorum_values_diff import ABSENT, DiffConfig, diff
from quorum_values_diff.documents import dumps_yaml


@pytest.fixture(scope="session")
def assert_values_equal() -> Any:
    """Fixture that returns a callable configuration-tree equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to diff() which creates a fresh PairwiseDiffer per call).

    Usage in tests::

        def test_render(assert_values_equal):
            assert_values_equal(render_values(), {"replicas": 3})

        def test_override(assert_values_equal):
            with pytest.raises(AssertionError, match=r"replicas: 5"):
                assert_values_equal({"replicas": 5}, {"replicas": 3})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` when ``actual`` differs from ``expected``.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two configuration trees are identical.

        Both directions are checked so keys present only in ``expected`` are
        reported as well.

        Args:
            actual:   The tree produced by the code under test.
            expected: The expected/reference tree.
            config:   Optional DiffConfig (only ``max_depth`` applies).

        Raises:
            AssertionError: When the trees differ, with the diff of each side
                against the other rendered as YAML.
        """
        forward = diff(actual, expected, config=config)
        backward = diff(expected, actual, config=config)
        if forward is ABSENT and backward is ABSENT:
            return
        raise AssertionError(
            "configuration values differ\n"
            f"actual vs expected:\n{_render(forward)}"
            f"expected vs actual:\n{_render(backward)}"
        )

    return _assert


def _render(result: Any) -> str:
    if result is ABSENT:
        return "  (no difference)\n"
    return "".join(f"  {line}\n" for line in dumps_yaml(result).splitlines())

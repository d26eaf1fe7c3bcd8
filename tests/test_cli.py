"""Tests for the quorum-values-diff command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from quorum_values_diff import __version__
from quorum_values_diff.cli import main, output_names
from quorum_values_diff.documents import load_document

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def instances(tmp_path: Path) -> list[Path]:
    """Three per-environment values files sharing most of their content."""
    documents = {
        "dev.yaml": "replicas: 1\nimage:\n  repo: nginx\n  tag: '1.25'\n",
        "staging.yaml": "replicas: 2\nimage:\n  repo: nginx\n  tag: '1.25'\n",
        "prod.yaml": "replicas: 2\nimage:\n  repo: nginx\n  tag: '1.26'\n",
    }
    paths = []
    for name, text in documents.items():
        path = tmp_path / name
        path.write_text(text)
        paths.append(path)
    return paths


def _args(paths: list[Path]) -> list[str]:
    return [str(p) for p in paths]


# ---------------------------------------------------------------------------
# diff
# ---------------------------------------------------------------------------


class TestDiffCommand:
    def test_no_difference_exits_zero(
        self, runner: CliRunner, instances: list[Path]
    ) -> None:
        result = runner.invoke(main, ["diff", *_args([instances[0], instances[0]])])
        assert result.exit_code == 0
        assert "No differences." in result.output

    def test_difference_printed_as_yaml(
        self, runner: CliRunner, instances: list[Path]
    ) -> None:
        result = runner.invoke(main, ["diff", *_args([instances[2], instances[0]])])
        assert result.exit_code == 1
        assert "replicas: 2" in result.output
        assert "tag: '1.26'" in result.output
        assert "repo" not in result.output

    def test_output_file(
        self, runner: CliRunner, instances: list[Path], tmp_path: Path
    ) -> None:
        out = tmp_path / "out" / "diff.yaml"
        result = runner.invoke(
            main, ["diff", *_args([instances[1], instances[0]]), "-o", str(out)]
        )
        assert result.exit_code == 1
        assert load_document(out) == {"replicas": 2}

    def test_invalid_document_exits_two(
        self, runner: CliRunner, instances: list[Path], tmp_path: Path
    ) -> None:
        bad = tmp_path / "bad.yaml"
        bad.write_text("a: [1\n")
        result = runner.invoke(main, ["diff", str(bad), str(instances[0])])
        assert result.exit_code == 2
        assert "Error:" in result.output

    def test_missing_file_is_usage_error(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            main, ["diff", str(tmp_path / "a.yaml"), str(tmp_path / "b.yaml")]
        )
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# reduce
# ---------------------------------------------------------------------------


class TestReduceCommand:
    def test_writes_base_and_diffs(
        self, runner: CliRunner, instances: list[Path], tmp_path: Path
    ) -> None:
        out_dir = tmp_path / "out"
        result = runner.invoke(
            main, ["reduce", *_args(instances), "-q", "0.6", "-d", str(out_dir)]
        )
        assert result.exit_code == 0, result.output
        assert load_document(out_dir / "base.yaml") == {
            "replicas": 2,
            "image": {"repo": "nginx", "tag": "1.25"},
        }
        assert load_document(out_dir / "dev.yaml") == {"replicas": 1}
        assert load_document(out_dir / "staging.yaml") == {}
        assert load_document(out_dir / "prod.yaml") == {"image": {"tag": "1.26"}}

    def test_unanimous_default(
        self, runner: CliRunner, instances: list[Path], tmp_path: Path
    ) -> None:
        out_dir = tmp_path / "out"
        result = runner.invoke(main, ["reduce", *_args(instances), "-d", str(out_dir)])
        assert result.exit_code == 0, result.output
        assert load_document(out_dir / "base.yaml") == {"image": {"repo": "nginx"}}

    def test_custom_base_name(
        self, runner: CliRunner, instances: list[Path], tmp_path: Path
    ) -> None:
        out_dir = tmp_path / "out"
        result = runner.invoke(
            main,
            ["reduce", *_args(instances), "-d", str(out_dir), "--base-name", "common.yaml"],
        )
        assert result.exit_code == 0, result.output
        assert (out_dir / "common.yaml").exists()

    def test_base_name_collision_rejected(
        self, runner: CliRunner, instances: list[Path], tmp_path: Path
    ) -> None:
        result = runner.invoke(
            main,
            ["reduce", *_args(instances), "-d", str(tmp_path), "--base-name", "dev.yaml"],
        )
        assert result.exit_code == 2

    def test_no_base(self, runner: CliRunner, tmp_path: Path) -> None:
        first = tmp_path / "a.yaml"
        second = tmp_path / "b.yaml"
        first.write_text("x: 1\n")
        second.write_text("x: 2\n")
        out_dir = tmp_path / "out"
        result = runner.invoke(main, ["reduce", str(first), str(second), "-d", str(out_dir)])
        assert result.exit_code == 0, result.output
        assert "No value met the quorum" in result.output
        assert load_document(out_dir / "base.yaml") == {}
        assert load_document(out_dir / "a.yaml") == {"x": 1}

    def test_atomic_array_mode(self, runner: CliRunner, tmp_path: Path) -> None:
        paths = []
        for name in ("a.yaml", "b.yaml"):
            path = tmp_path / name
            path.write_text("ports: [80, 443]\n")
            paths.append(path)
        out_dir = tmp_path / "out"
        result = runner.invoke(
            main,
            ["reduce", *_args(paths), "-d", str(out_dir), "--array-mode", "atomic"],
        )
        assert result.exit_code == 0, result.output
        assert load_document(out_dir / "base.yaml") == {"ports": [80, 443]}
        assert load_document(out_dir / "a.yaml") == {}

    @pytest.mark.parametrize("quorum", ["0", "-1", "1.5"])
    def test_invalid_quorum(
        self, runner: CliRunner, instances: list[Path], tmp_path: Path, quorum: str
    ) -> None:
        result = runner.invoke(
            main, ["reduce", *_args(instances), "-q", quorum, "-d", str(tmp_path / "o")]
        )
        assert result.exit_code == 2
        assert "quorum must be in (0, 1]" in result.output
        assert not (tmp_path / "o").exists()

    def test_verbose(
        self, runner: CliRunner, instances: list[Path], tmp_path: Path
    ) -> None:
        result = runner.invoke(
            main, ["--verbose", "reduce", *_args(instances), "-d", str(tmp_path / "o")]
        )
        assert result.exit_code == 0, result.output
        assert "DEBUG" in result.output

    def test_requires_inputs(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(main, ["reduce", "-d", str(tmp_path)])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# Misc
# ---------------------------------------------------------------------------


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


class TestOutputNames:
    def test_unique_names_kept(self) -> None:
        assert output_names((Path("a/dev.yaml"), Path("b/prod.yaml"))) == [
            "dev.yaml",
            "prod.yaml",
        ]

    def test_colliding_names_prefixed(self) -> None:
        assert output_names((Path("a/values.yaml"), Path("b/values.yaml"))) == [
            "0-values.yaml",
            "1-values.yaml",
        ]

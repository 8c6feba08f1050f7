"""CLI tests for the querybench command."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

import querybench.cli as cli
from querybench.types import Candidate, Scenario

runner = CliRunner()


def test_cli_rejects_dataset_below_minimum() -> None:
    result = runner.invoke(cli.app, ["9"])
    assert result.exit_code == 1
    assert "QB_INVALID_INPUT" in result.output


def test_cli_runs_filtered_scenario(tmp_path: Path) -> None:
    result = runner.invoke(
        cli.app,
        [
            "20",
            "--filter",
            "Aggregating arrays custom",
            "--seed",
            "3",
            "--artifact-dir",
            str(tmp_path),
        ],
    )
    assert result.exit_code == 0, result.output
    assert "Aggregating arrays custom" in result.output
    assert "Joining arrays" not in result.output
    assert result.output.rstrip().endswith("Done!")


def test_cli_reads_filter_from_environment(tmp_path: Path) -> None:
    result = runner.invoke(
        cli.app,
        ["20", "--artifact-dir", str(tmp_path)],
        env={"QUERYBENCH_FILTER": "Counting values in arrays deep"},
    )
    assert result.exit_code == 0, result.output
    assert "Counting values in arrays deep" in result.output
    assert "Sorting" not in result.output


def test_cli_exits_non_zero_on_mismatch(tmp_path: Path, monkeypatch) -> None:
    def disagreeing(data, size):
        return [
            Scenario(
                name="Disagree",
                repeat=1,
                groups={"Python": [Candidate(lambda: 1)], "NumPy": [Candidate(lambda: 2)]},
            )
        ]

    monkeypatch.setattr(cli, "build_scenarios", disagreeing)
    artifact_dir = tmp_path / "artifacts"

    result = runner.invoke(cli.app, ["10", "--artifact-dir", str(artifact_dir)])

    assert result.exit_code == 1
    assert "QB_VALIDATION_MISMATCH" in result.output
    assert (artifact_dir / "result-0.txt").read_text(encoding="utf-8") == "1"
    assert (artifact_dir / "result-1.txt").read_text(encoding="utf-8") == "2"
    assert "Done!" not in result.output

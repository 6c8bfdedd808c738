"""Tests for the command-line interface."""

from pathlib import Path

from typer.testing import CliRunner

from diet_journal.cli.main import app

runner = CliRunner()

CONFIG = """\
journal:
  timezone: America/New_York
  weight_unit: lbs
  trend:
    window_size: 7
    min_points: 2
logging:
  level: WARNING
  console: false
"""


def _write_inputs(tmp_path: Path, rows: str) -> tuple[Path, Path]:
    config_file = tmp_path / "config.yaml"
    config_file.write_text(CONFIG, encoding="utf-8")

    csv_file = tmp_path / "journal.csv"
    csv_file.write_text(
        "date,weight,protein,exercise_type,exercise_intensity,notes\n" + rows,
        encoding="utf-8",
    )
    return config_file, csv_file


def test_report_prints_journal_and_exports(tmp_path: Path) -> None:
    """Test report output and export of derived views."""
    config_file, csv_file = _write_inputs(
        tmp_path,
        "2024-01-01,180,,,,\n"
        "2024-01-02,179,150,Cardio,High,Good run\n"
        "2024-01-01,181,,,,edited\n",
    )
    output_dir = tmp_path / "out"

    result = runner.invoke(
        app,
        [
            "report",
            str(csv_file),
            "--config-path",
            str(config_file),
            "--output-dir",
            str(output_dir),
        ],
    )

    if result.exit_code != 0:
        raise AssertionError(f"Expected exit code 0, got {result.exit_code}: {result.output}")

    if "7-day trend: -2.0 lbs" not in result.output:
        raise AssertionError(f"Expected trend banner in output: {result.output}")

    if result.output.index("Tue, Jan 2") > result.output.index("Mon, Jan 1"):
        raise AssertionError("Expected newest entry first")

    if "Cardio - High" not in result.output or "edited" not in result.output:
        raise AssertionError(f"Missing entry details: {result.output}")

    for name in ("entries.csv", "chart_series.csv", "exercise_series.csv", "summary.json"):
        if not (output_dir / name).exists():
            raise AssertionError(f"Expected {name} to be written")


def test_trend_insufficient_data(tmp_path: Path) -> None:
    """Test trend command with a single weigh-in."""
    config_file, csv_file = _write_inputs(tmp_path, "2024-01-01,180,,,,\n")

    result = runner.invoke(app, ["trend", str(csv_file), "--config-path", str(config_file)])

    if result.exit_code != 0:
        raise AssertionError(f"Expected exit code 0, got {result.exit_code}: {result.output}")

    if "insufficient data" not in result.output:
        raise AssertionError(f"Expected insufficient data message: {result.output}")


def test_invalid_draft_exits_with_error(tmp_path: Path) -> None:
    """Test that a non-numeric weight fails the command."""
    config_file, csv_file = _write_inputs(tmp_path, "2024-01-01,heavy,,,,\n")

    result = runner.invoke(app, ["trend", str(csv_file), "--config-path", str(config_file)])

    if result.exit_code != 1:
        raise AssertionError(f"Expected exit code 1, got {result.exit_code}")


def test_missing_config_exits_with_error(tmp_path: Path) -> None:
    """Test that a missing configuration file fails the command."""
    _, csv_file = _write_inputs(tmp_path, "2024-01-01,180,,,,\n")

    result = runner.invoke(
        app, ["report", str(csv_file), "--config-path", str(tmp_path / "missing.yaml")]
    )

    if result.exit_code != 1:
        raise AssertionError(f"Expected exit code 1, got {result.exit_code}")

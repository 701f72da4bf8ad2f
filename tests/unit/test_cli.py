"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from superellipse import __version__
from superellipse.cli.app import app
from superellipse.core.path import (
    generate_asymmetric_path,
    generate_per_corner_path,
    generate_symmetric_path,
)
from superellipse.domain import CornerExponents, SampleOptions


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestPathCommand:
    """Tests for the path command."""

    def test_default_shape(self, runner: CliRunner) -> None:
        """Test the defaults print a 320 x 400 path with exponent 4."""
        result = runner.invoke(app, ["path"])

        assert result.exit_code == 0
        assert result.stdout.strip() == generate_symmetric_path(320, 400, 4)

    def test_symmetric(self, runner: CliRunner) -> None:
        """Test an explicit exponent and sampling options."""
        result = runner.invoke(
            app, ["path", "-W", "100", "-H", "100", "-n", "2", "-s", "4", "-p", "0"]
        )

        assert result.exit_code == 0
        assert result.stdout.strip() == "M 100 50 L 50 100 L 0 50 L 50 0 L 100 50 Z"

    def test_wide_shape_uses_more_steps(self, runner: CliRunner) -> None:
        """Test wide shapes default to the larger step count."""
        result = runner.invoke(app, ["path", "-W", "800", "-H", "200"])

        assert result.exit_code == 0
        assert result.stdout.strip().count("L") == 720

    def test_asymmetric(self, runner: CliRunner) -> None:
        """Test --exponent-x and --exponent-y select asymmetric mode."""
        result = runner.invoke(
            app,
            ["path", "-W", "120", "-H", "80", "--exponent-x", "2", "--exponent-y", "6"],
        )

        assert result.exit_code == 0
        assert result.stdout.strip() == generate_asymmetric_path(120, 80, 2, 6)

    def test_per_corner(self, runner: CliRunner) -> None:
        """Test the four corner options select per-corner mode."""
        result = runner.invoke(
            app,
            [
                "path",
                "-W", "200",
                "-H", "200",
                "--top-left", "2",
                "--top-right", "6",
                "--bottom-right", "2",
                "--bottom-left", "6",
                "-s", "36",
            ],
        )

        corners = CornerExponents(top_left=2, top_right=6, bottom_right=2, bottom_left=6)
        expected = generate_per_corner_path(200, 200, corners, SampleOptions(steps=36))
        assert result.exit_code == 0
        assert result.stdout.strip() == expected

    def test_invalid_width(self, runner: CliRunner) -> None:
        """Test an invalid dimension exits with an error and no path."""
        result = runner.invoke(app, ["path", "--width=0"])

        assert result.exit_code == 1
        assert "M " not in result.stdout

    def test_invalid_exponent(self, runner: CliRunner) -> None:
        """Test a non-positive exponent exits with an error."""
        result = runner.invoke(app, ["path", "--exponent=0"])
        assert result.exit_code == 1

    def test_conflicting_options(self, runner: CliRunner) -> None:
        """Test mixing exponent modes is rejected."""
        result = runner.invoke(app, ["path", "-n", "3", "--exponent-x", "2", "--exponent-y", "2"])
        assert result.exit_code == 1

    def test_incomplete_corners(self, runner: CliRunner) -> None:
        """Test a partial set of corner options is rejected."""
        result = runner.invoke(app, ["path", "--top-left", "2"])
        assert result.exit_code == 1

    def test_incomplete_asymmetric(self, runner: CliRunner) -> None:
        """Test a single axis exponent is rejected."""
        result = runner.invoke(app, ["path", "--exponent-x", "2"])
        assert result.exit_code == 1


class TestMetricsCommand:
    """Tests for the metrics command."""

    def test_json(self, runner: CliRunner) -> None:
        """Test --json prints perimeter and area."""
        result = runner.invoke(app, ["metrics", "-W", "100", "-H", "100", "-n", "2", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["perimeter"] == pytest.approx(314.16, rel=0.01)
        assert data["area"] == pytest.approx(7854, rel=0.01)

    def test_table(self, runner: CliRunner) -> None:
        """Test the default output is a table."""
        result = runner.invoke(app, ["metrics", "-W", "100", "-H", "100"])

        assert result.exit_code == 0
        assert "Perimeter" in result.stdout
        assert "Area" in result.stdout

    def test_per_corner(self, runner: CliRunner) -> None:
        """Test corner options are accepted."""
        result = runner.invoke(
            app,
            [
                "metrics",
                "--top-left", "2",
                "--top-right", "4",
                "--bottom-right", "2",
                "--bottom-left", "4",
                "--json",
            ],
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["area"] > 0

    def test_exponent_and_corners_conflict(self, runner: CliRunner) -> None:
        """Test exponent and corner options cannot be combined."""
        result = runner.invoke(
            app,
            [
                "metrics",
                "-n", "3",
                "--top-left", "2",
                "--top-right", "4",
                "--bottom-right", "2",
                "--bottom-left", "4",
            ],
        )
        assert result.exit_code == 1

    def test_invalid_height(self, runner: CliRunner) -> None:
        """Test an invalid dimension exits with an error."""
        result = runner.invoke(app, ["metrics", "--height=-4", "--json"])

        assert result.exit_code == 1
        assert "perimeter" not in result.stdout


class TestBatchCommand:
    """Tests for the batch command."""

    def test_writes_results(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test every request produces a result in order."""
        requests_file = tmp_path / "requests.json"
        requests_file.write_text(
            json.dumps(
                [
                    {"mode": "symmetric", "width": 100, "height": 100, "exponent": 2},
                    {"mode": "symmetric", "width": 100, "height": 100, "exponent": 0},
                    {"mode": "asymmetric", "width": 80, "height": 40, "exponent_x": 2, "exponent_y": 4},
                ]
            ),
            encoding="utf-8",
        )
        output = tmp_path / "results.json"

        result = runner.invoke(
            app, ["batch", str(requests_file), "-o", str(output), "-j", "1", "--quiet"]
        )

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert [item["success"] for item in data] == [True, False, True]
        assert data[0]["path"] == generate_symmetric_path(100, 100, 2)
        assert data[1]["code"] == "E_INVALID_EXPONENT"
        assert data[2]["path"] == generate_asymmetric_path(80, 40, 2, 4)

    def test_summary_shows_timing_range(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test the summary reports average and range of request times."""
        requests_file = tmp_path / "requests.json"
        requests_file.write_text(
            json.dumps(
                [
                    {"mode": "symmetric", "width": 100, "height": 100, "exponent": n}
                    for n in (2, 3)
                ]
            ),
            encoding="utf-8",
        )
        output = tmp_path / "results.json"

        result = runner.invoke(app, ["batch", str(requests_file), "-o", str(output), "-j", "1"])

        assert result.exit_code == 0
        assert "avg per path" in result.output
        assert "ms range" in result.output

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a missing request file exits with an error."""
        result = runner.invoke(app, ["batch", str(tmp_path / "missing.json"), "--quiet"])
        assert result.exit_code == 1

    def test_invalid_request_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a malformed request file exits with an error."""
        requests_file = tmp_path / "requests.json"
        requests_file.write_text('{"mode": "symmetric"}', encoding="utf-8")

        result = runner.invoke(app, ["batch", str(requests_file), "--quiet"])
        assert result.exit_code == 1

    def test_malformed_corners(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a corner list exits with an error instead of a traceback."""
        requests_file = tmp_path / "requests.json"
        requests_file.write_text(
            json.dumps(
                [{"mode": "per-corner", "width": 10, "height": 10, "corners": [1, 2, 3, 4]}]
            ),
            encoding="utf-8",
        )

        result = runner.invoke(app, ["batch", str(requests_file), "--quiet"])
        assert result.exit_code == 1
        assert not isinstance(result.exception, TypeError)


class TestVersion:
    """Tests for the version option."""

    def test_version(self, runner: CliRunner) -> None:
        """Test --version exits cleanly."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

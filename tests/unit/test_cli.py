"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from curvebool import __version__
from curvebool.cli.app import app

runner = CliRunner()


def write_document(path: Path, curves: list[dict]) -> Path:
    """Write a curve document and return its path."""
    path.write_text(json.dumps({"curves": curves}), encoding="utf-8")
    return path


@pytest.fixture
def lens_document(tmp_path: Path) -> Path:
    """Document with two overlapping circles."""
    return write_document(
        tmp_path / "lens.json",
        [
            {"kind": "circle", "center": [0, 0], "radius": 1},
            {"kind": "circle", "center": [0, 1], "radius": 1},
        ],
    )


@pytest.fixture
def disjoint_document(tmp_path: Path) -> Path:
    """Document with two separated circles."""
    return write_document(
        tmp_path / "apart.json",
        [
            {"kind": "circle", "center": [0, 0], "radius": 1},
            {"kind": "circle", "center": [3, 0], "radius": 1},
        ],
    )


class TestCli:
    """Tests for the curvebool command."""

    def test_version(self):
        """Test --version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_input(self, tmp_path: Path):
        """Test that a missing input file fails."""
        result = runner.invoke(app, [str(tmp_path / "missing.json"), "--quiet"])
        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_verbose_and_quiet(self, lens_document: Path):
        """Test that --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, [str(lens_document), "-v", "-q"])
        assert result.exit_code == 1
        assert "Cannot use --verbose and --quiet together" in result.output

    def test_invalid_operation(self, lens_document: Path):
        """Test that unknown operations are rejected."""
        result = runner.invoke(app, [str(lens_document), "--operation", "xor", "--quiet"])
        assert result.exit_code == 1
        assert "Invalid operation" in result.output

    def test_invalid_tolerance(self, lens_document: Path):
        """Test that settings outside their bounds are rejected."""
        result = runner.invoke(app, [str(lens_document), "--tolerance", "1.0", "--quiet"])
        assert result.exit_code == 1
        assert "Invalid settings" in result.output

    def test_default_output_path(self, lens_document: Path):
        """Test that results land next to the input by default."""
        result = runner.invoke(
            app, [str(lens_document), "--operation", "intersection", "--quiet"]
        )
        assert result.exit_code == 0

        output = lens_document.parent / "lens-intersection.json"
        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["operation"] == "intersection"
        assert len(document["regions"]) == 1

    def test_explicit_output_path(self, tmp_path: Path, lens_document: Path):
        """Test --output and the short operation flag."""
        output = tmp_path / "result.json"
        result = runner.invoke(
            app, [str(lens_document), "-p", "difference", "-o", str(output), "--quiet"]
        )
        assert result.exit_code == 0

        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["operation"] == "difference"
        assert len(document["regions"][0]["exterior"]["spans"]) == 3

    def test_summary_output(self, lens_document: Path, tmp_path: Path):
        """Test the console summary for a normal run."""
        result = runner.invoke(
            app, [str(lens_document), "-p", "union", "-o", str(tmp_path / "u.json")]
        )
        assert result.exit_code == 0
        assert "Curvebool" in result.output
        assert "2 transversal crossings" in result.output
        assert "Complete" in result.output

    def test_no_intersection(self, disjoint_document: Path):
        """Test that disjoint curves exit with an error."""
        result = runner.invoke(app, [str(disjoint_document), "--quiet"])
        assert result.exit_code == 1
        assert "No intersection" in result.output

    def test_invalid_document(self, tmp_path: Path):
        """Test that schema errors are reported."""
        path = write_document(tmp_path / "bad.json", [{"kind": "spiral"}])
        result = runner.invoke(app, [str(path), "--quiet"])
        assert result.exit_code == 1
        assert "Invalid curve document" in result.output

    def test_log_file(self, tmp_path: Path, lens_document: Path):
        """Test that --log-file receives structured log lines."""
        log_file = tmp_path / "run.log"
        result = runner.invoke(
            app,
            [
                str(lens_document),
                "-o",
                str(tmp_path / "out.json"),
                "--log-file",
                str(log_file),
                "--quiet",
            ],
        )
        assert result.exit_code == 0
        assert "Boolean operation complete" in log_file.read_text(encoding="utf-8")

"""Integration tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from vectorgeom import __version__
from vectorgeom.cli.app import app

runner = CliRunner()

SQUARE_A = "M 0 0 L 10 0 L 10 10 L 0 10 Z"
SQUARE_B = "M 5 2 L 15 2 L 15 12 L 5 12 Z"
FAR_SQUARE = "M 100 100 L 110 100 L 110 110 L 100 110 Z"


class TestGlobalOptions:
    """Tests for options handled by the app callback."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_verbose_and_quiet_conflict(self) -> None:
        result = runner.invoke(app, ["--verbose", "--quiet", "rect", "0", "0", "1", "1"])
        assert result.exit_code == 1
        assert "Cannot use --verbose and --quiet together" in result.output

    def test_invalid_log_level(self) -> None:
        result = runner.invoke(app, ["--log-level", "LOUD", "rect", "0", "0", "1", "1"])
        assert result.exit_code == 1
        assert "Invalid log level" in result.output

    def test_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "cli.log"
        result = runner.invoke(app, ["--log-file", str(log_file), "rect", "0", "0", "1", "1"])
        assert result.exit_code == 0
        assert "Operation complete" in log_file.read_text(encoding="utf-8")

    def test_precision(self) -> None:
        result = runner.invoke(app, ["--precision", "2", "polygon", "0", "0", "10", "3"])
        assert result.exit_code == 0
        numbers = [t for t in result.stdout.split() if t not in ("M", "L", "Z")]
        assert all(len(n.split(".")[-1]) <= 2 for n in numbers if "." in n)

    def test_verbose_summary(self) -> None:
        result = runner.invoke(app, ["--verbose", "rect", "0", "0", "10", "5"])
        assert result.exit_code == 0
        assert "5 segments" in result.stdout
        assert "10 x 5" in result.stdout


class TestShapeCommands:
    """Tests for rect, ellipse, polygon and star."""

    def test_rect(self) -> None:
        result = runner.invoke(app, ["rect", "0", "0", "10", "5"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "M 0 0 L 10 0 L 10 5 L 0 5 Z"

    def test_rect_rounded(self) -> None:
        result = runner.invoke(app, ["rect", "0", "0", "100", "50", "-r", "10"])
        assert result.exit_code == 0
        assert result.stdout.split().count("C") == 4

    def test_rect_per_corner(self) -> None:
        args = ["rect", "0", "0", "100", "50", "-r", "0", "-r", "5", "-r", "0", "-r", "5"]
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert result.stdout.split().count("C") == 2

    def test_rect_wrong_radius_count(self) -> None:
        result = runner.invoke(app, ["rect", "0", "0", "100", "50", "-r", "1", "-r", "2"])
        assert result.exit_code == 1
        assert "corner_radius" in result.output

    def test_rect_negative_width(self) -> None:
        result = runner.invoke(app, ["rect", "--", "0", "0", "-10", "5"])
        assert result.exit_code == 1
        assert "width" in result.output

    def test_rect_json(self) -> None:
        result = runner.invoke(app, ["rect", "0", "0", "10", "5", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["closed"] is True
        assert data["winding_rule"] == "NONZERO"
        assert [s["command"] for s in data["segments"]] == ["M", "L", "L", "L", "Z"]

    def test_ellipse(self) -> None:
        result = runner.invoke(app, ["ellipse", "0", "0", "10", "10"])
        assert result.exit_code == 0
        tokens = result.stdout.split()
        assert tokens[:3] == ["M", "10", "0"]
        assert tokens.count("C") == 4

    def test_ellipse_arc(self) -> None:
        result = runner.invoke(app, ["ellipse", "0", "0", "10", "10", "--end", "180"])
        assert result.exit_code == 0
        assert result.stdout.split().count("A") == 1

    def test_ellipse_donut(self) -> None:
        args = ["ellipse", "0", "0", "10", "10", "--end", "90", "--inner", "0.5"]
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert result.stdout.split().count("A") == 2

    def test_ellipse_invalid_inner(self) -> None:
        result = runner.invoke(app, ["ellipse", "0", "0", "10", "10", "--inner", "1.5"])
        assert result.exit_code == 1

    def test_polygon(self) -> None:
        result = runner.invoke(app, ["polygon", "0", "0", "10", "6"])
        assert result.exit_code == 0
        assert result.stdout.split().count("L") == 5

    def test_polygon_rounded(self) -> None:
        result = runner.invoke(app, ["polygon", "0", "0", "10", "4", "--corner-radius", "2"])
        assert result.exit_code == 0
        assert result.stdout.split().count("Q") == 4

    def test_polygon_too_few_sides(self) -> None:
        result = runner.invoke(app, ["polygon", "0", "0", "10", "2"])
        assert result.exit_code == 1
        assert "sides" in result.output

    def test_star_json(self) -> None:
        result = runner.invoke(app, ["star", "0", "0", "10", "4", "5", "--json"])
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["segments"]) == 11


class TestCombine:
    """Tests for the combine command."""

    def test_disjoint_subtract_returns_first(self) -> None:
        result = runner.invoke(app, ["combine", SQUARE_A, FAR_SQUARE, "--op", "subtract"])
        assert result.exit_code == 0
        assert result.stdout.strip() == SQUARE_A

    def test_disjoint_union_keeps_both(self) -> None:
        result = runner.invoke(app, ["combine", SQUARE_A, FAR_SQUARE])
        assert result.exit_code == 0
        assert result.stdout.strip() == (
            "M 0 0 L 10 0 L 10 10 L 0 10 M 100 100 L 110 100 L 110 110 L 100 110 Z"
        )

    def test_overlap_intersect(self) -> None:
        result = runner.invoke(app, ["combine", SQUARE_A, SQUARE_B, "--op", "INTERSECT"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "M 10 10 Z"

    def test_overlap_subtract_with_resolution(self) -> None:
        args = ["combine", SQUARE_A, SQUARE_B, "-o", "subtract", "--resolution", "0.5"]
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert result.stdout.strip() == "M 0 0 L 10 0 L 0 10 Z"

    def test_exclude_json(self) -> None:
        args = ["combine", SQUARE_A, FAR_SQUARE, "--op", "exclude", "--json"]
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert json.loads(result.stdout)["winding_rule"] == "EVENODD"

    def test_invalid_operation(self) -> None:
        result = runner.invoke(app, ["combine", SQUARE_A, SQUARE_B, "--op", "xor"])
        assert result.exit_code == 1
        assert "Invalid operation" in result.output

    def test_invalid_resolution(self) -> None:
        result = runner.invoke(app, ["combine", SQUARE_A, SQUARE_B, "--resolution", "0"])
        assert result.exit_code == 1
        assert "Invalid resolution" in result.output

    @pytest.mark.parametrize(
        "data,reason",
        [
            ("M 0 0 l 10 10", "relative commands are not supported"),
            ("M 0 0 H 10", "unsupported path command"),
            ("L 1 1", "path data must begin with M"),
        ],
    )
    def test_parse_errors(self, data: str, reason: str) -> None:
        result = runner.invoke(app, ["combine", data, SQUARE_B])
        assert result.exit_code == 1
        assert reason in result.output


class TestSample:
    """Tests for the sample command."""

    def test_polyline(self) -> None:
        result = runner.invoke(app, ["sample", "M 0 0 L 10 0 L 10 5"])
        assert result.exit_code == 0
        assert result.stdout.strip().splitlines() == ["0 0", "10 0", "10 5"]

    def test_subpaths_separated(self) -> None:
        result = runner.invoke(app, ["sample", "M 0 0 L 1 0 M 5 5 L 6 5"])
        assert result.exit_code == 0
        assert result.stdout.strip().split("\n\n") == ["0 0\n1 0", "5 5\n6 5"]

    def test_curve_resolution(self) -> None:
        result = runner.invoke(
            app, ["sample", "M 0 0 C 3 5 7 5 10 0", "--resolution", "1", "--json"]
        )
        assert result.exit_code == 0
        contours = json.loads(result.stdout)
        assert len(contours) == 1
        assert len(contours[0]) == 11
        assert contours[0][-1] == [10, 0]

    def test_invalid_resolution(self) -> None:
        result = runner.invoke(app, ["sample", "M 0 0 L 1 1", "--resolution", "0"])
        assert result.exit_code == 1
        assert "resolution" in result.output

    def test_parse_error(self) -> None:
        result = runner.invoke(app, ["sample", "M 0 0 L 1"])
        assert result.exit_code == 1
        assert "Could not parse path data" in result.output

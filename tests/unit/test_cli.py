"""Unit tests for the developer CLI."""

import logging

import pytest
from typer.testing import CliRunner

from pathgeom import __version__
from pathgeom.cli import app
from pathgeom.core.shape import Shape
from pathgeom.domain import CornerPoint, Point
from pathgeom.io import ShapeReader, ShapeWriter

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """Drop the handlers each CLI run installs on the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def shape_file(tmp_path):
    shape = Shape.from_points(
        [
            CornerPoint(Point(0, 0)),
            CornerPoint(Point(10, 0)),
            CornerPoint(Point(10, 10), out_ctrl=Point(5, 15)),
        ]
    )
    return ShapeWriter(shape, tmp_path / "shape.json").save()


class TestGlobalOptions:
    """Tests for options shared by every command."""

    def test_version(self):
        """Test --version prints the version and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_log_level(self, shape_file):
        """Test an unknown log level is rejected."""
        result = runner.invoke(app, ["--log-level", "LOUD", "info", str(shape_file)])
        assert result.exit_code == 1
        assert "Invalid log level" in result.output

    def test_log_file(self, shape_file, tmp_path):
        """Test --log-file writes a log."""
        log_path = tmp_path / "pathgeom.log"
        result = runner.invoke(app, ["--log-file", str(log_path), "info", str(shape_file)])
        assert result.exit_code == 0
        assert log_path.exists()


class TestInfo:
    """Tests for the info command."""

    def test_summary(self, shape_file):
        """Test point and curve counts are shown."""
        result = runner.invoke(app, ["info", str(shape_file)])
        assert result.exit_code == 0
        assert "3 points" in result.output
        assert "3 curves" in result.output
        assert "bezier" in result.output

    def test_missing_file(self, tmp_path):
        """Test a missing shape file exits with an error."""
        result = runner.invoke(app, ["info", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_file(self, tmp_path):
        """Test an invalid shape file exits with an error."""
        path = tmp_path / "bad.json"
        path.write_text("[]", encoding="utf-8")
        result = runner.invoke(app, ["info", str(path)])
        assert result.exit_code == 1
        assert "Could not load shape" in result.output


class TestNearest:
    """Tests for the nearest command."""

    def test_interior(self, shape_file):
        """Test the nearest curve point is reported."""
        result = runner.invoke(app, ["nearest", str(shape_file), "5", "3"])
        assert result.exit_code == 0
        assert "(5, 0)" in result.output
        assert "distance  3" in result.output

    def test_endpoints(self, shape_file):
        """Test --endpoints lets a vertex win."""
        result = runner.invoke(app, ["nearest", str(shape_file), "--endpoints", "--", "-1", "-1"])
        assert result.exit_code == 0
        assert "(0, 0)" in result.output

    def test_non_finite_shape(self, tmp_path):
        """Test a shape with NaN coordinates exits with an error."""
        path = tmp_path / "nan.json"
        path.write_text(
            '{"closed": false, "points": ['
            '{"kind": "corner", "point": {"x": 0, "y": 0}, "out_ctrl": {"x": NaN, "y": 5}},'
            '{"kind": "corner", "point": {"x": 10, "y": 0}}]}',
            encoding="utf-8",
        )
        result = runner.invoke(app, ["nearest", str(path), "5", "3"])
        assert result.exit_code == 1
        assert "must be finite" in result.output


class TestInsert:
    """Tests for the insert command."""

    def test_insert_to_output(self, shape_file, tmp_path):
        """Test the split shape is written to --output."""
        out = tmp_path / "out.json"
        result = runner.invoke(app, ["insert", str(shape_file), "0", "0.5", "-o", str(out)])
        assert result.exit_code == 0
        assert len(ShapeReader(out).load()) == 4
        assert len(ShapeReader(shape_file).load()) == 3

    def test_insert_in_place(self, shape_file):
        """Test the input is overwritten without --output."""
        result = runner.invoke(app, ["insert", str(shape_file), "1", "0.25"])
        assert result.exit_code == 0
        assert len(ShapeReader(shape_file).load()) == 4

    def test_bad_curve_index(self, shape_file):
        """Test a missing curve exits with an error."""
        result = runner.invoke(app, ["insert", str(shape_file), "7", "0.5"])
        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_bad_parameter(self, shape_file):
        """Test a parameter outside [0, 1] exits with an error."""
        result = runner.invoke(app, ["insert", str(shape_file), "0", "2"])
        assert result.exit_code == 1
        assert "outside [0, 1]" in result.output


class TestRoots:
    """Tests for the roots command."""

    def test_cubic(self):
        """Test the roots of (x - 1)(x - 2)(x - 3)."""
        result = runner.invoke(app, ["roots", "--", "1", "-6", "11", "-6"])
        assert result.exit_code == 0
        assert "3 real roots" in result.output

    def test_interval(self):
        """Test --start and --end restrict the search."""
        result = runner.invoke(
            app, ["roots", "--start", "1.5", "--end", "2.5", "--", "1", "-6", "11", "-6"]
        )
        assert result.exit_code == 0
        assert "1 real roots" in result.output

    def test_no_roots(self):
        """Test x^2 + 1 has no real roots."""
        result = runner.invoke(app, ["roots", "1", "0", "1"])
        assert result.exit_code == 0
        assert "No real roots" in result.output

    def test_zero_polynomial(self):
        """Test the zero polynomial is reported as vanishing everywhere."""
        result = runner.invoke(app, ["roots", "0"])
        assert result.exit_code == 0
        assert "every x is a root" in result.output

    def test_empty_interval(self):
        """Test a reversed interval is rejected."""
        result = runner.invoke(
            app, ["roots", "--start", "2", "--end", "1", "--", "1", "0", "-2"]
        )
        assert result.exit_code == 1
        assert "Empty interval" in result.output

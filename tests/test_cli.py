"""Tests for the polymat command-line interface."""

from typer.testing import CliRunner

from polymat import __version__
from polymat.cli import app

runner = CliRunner()


class TestVersion:
    """Tests for the --version flag."""

    def test_version(self) -> None:
        """--version should print the package version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestMatrixDemo:
    """Tests for the matrix-demo command."""

    def test_prints_determinant(self) -> None:
        """The sample matrix has determinant -18."""
        result = runner.invoke(app, ["matrix-demo"])
        assert result.exit_code == 0
        assert "Determinant: -18" in result.output
        assert "Adjoint" in result.output


class TestRoots:
    """Tests for the roots command."""

    def test_quadratic(self) -> None:
        """x² - x - 6 should converge."""
        result = runner.invoke(app, ["roots", "--", "-6", "-1", "1"])
        assert result.exit_code == 0
        assert "converged after" in result.output
        assert "Roots" in result.output

    def test_complex_coefficient_syntax(self) -> None:
        """Coefficients may use an i suffix."""
        result = runner.invoke(app, ["roots", "1", "0", "1+0i"])
        assert result.exit_code == 0

    def test_iteration_ceiling(self) -> None:
        """A tiny ceiling should be reported as non-convergence."""
        result = runner.invoke(app, ["roots", "--max-iter", "1", "--", "2", "-3", "1"])
        assert result.exit_code == 0
        assert "did not converge" in result.output

    def test_rank_one_fails(self) -> None:
        """Linear polynomials are rejected."""
        result = runner.invoke(app, ["roots", "5", "1"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_number(self) -> None:
        """Non-numeric coefficients are a usage error."""
        result = runner.invoke(app, ["roots", "1", "abc", "1"])
        assert result.exit_code == 2


class TestExpand:
    """Tests for the expand command."""

    def test_expand(self) -> None:
        """Roots 3 and -2 expand to x² - x - 6."""
        result = runner.invoke(app, ["expand", "--", "3", "-2"])
        assert result.exit_code == 0
        assert "(x-3)(x+2)" in result.output
        assert "-6 -1x 1x^2" in result.output


class TestBenchmark:
    """Tests for the benchmark command."""

    def test_runs(self) -> None:
        """Benchmark should print a table."""
        result = runner.invoke(app, ["benchmark", "-n", "2", "-n", "3"])
        assert result.exit_code == 0
        assert "Determinant Benchmark" in result.output

    def test_unknown_kind(self) -> None:
        """Unknown element kinds exit with an error."""
        result = runner.invoke(app, ["benchmark", "--kind", "quaternion"])
        assert result.exit_code == 1

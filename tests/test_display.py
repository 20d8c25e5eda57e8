"""Tests for text rendering helpers."""

from polymat.algebra.matrix import Matrix
from polymat.display import format_factors, format_polynomial, format_scalar, matrix_table
from polymat.scalars import Complex, PolarComplex


class TestFormatScalar:
    """Tests for format_scalar function."""

    def test_real(self) -> None:
        """Reals use the shortest %g form."""
        assert format_scalar(-18) == "-18"
        assert format_scalar(0.5) == "0.5"

    def test_complex(self) -> None:
        """Complex values show both parts unless the imaginary part is zero."""
        assert format_scalar(Complex(1, -2)) == "(1-2i)"
        assert format_scalar(Complex(3, 0)) == "3"
        assert format_scalar(PolarComplex(2, 0)) == "2"


class TestFormatPolynomial:
    """Tests for format_polynomial function."""

    def test_skips_zero_terms(self) -> None:
        """Zero coefficients do not appear."""
        assert format_polynomial([-6, -1, 1]) == "-6 -1x 1x^2"
        assert format_polynomial([0, 2, 0, 3]) == "2x 3x^3"

    def test_all_zero(self) -> None:
        """The zero polynomial prints as 0."""
        assert format_polynomial([0, 0]) == "0"


class TestFormatFactors:
    """Tests for format_factors function."""

    def test_monic_and_scaled(self) -> None:
        """Monic factors omit the linear coefficient."""
        assert format_factors([(1, -3), (2, 1)]) == "(x-3)(2x+1)"


class TestMatrixTable:
    """Tests for matrix_table function."""

    def test_dimensions(self) -> None:
        """Table should have one column per matrix column."""
        table = matrix_table(Matrix([[1, 2, 3], [4, 5, 6]]), title="M")
        assert len(table.columns) == 3
        assert table.row_count == 2
        assert table.title == "M"

"""Tests for element-type dispatch used by Vector and Matrix."""

import pytest

from polymat.scalars import Complex, PolarComplex
from polymat.scalars.scalar_ops import conjugate_of, is_scalar, modulus, square_root


class TestSquareRoot:
    """Tests for square_root dispatch."""

    def test_real(self) -> None:
        """Reals should use math.sqrt."""
        assert square_root(4.0) == 2.0
        assert square_root(9) == 3.0

    def test_builtin_complex(self) -> None:
        """Built-in complex should use cmath.sqrt."""
        assert square_root(-4 + 0j) == 2j

    def test_rectangular_complex(self) -> None:
        """Complex should stay Complex and take the principal root."""
        result = square_root(Complex(-4, 0))
        assert isinstance(result, Complex)
        assert result.real == pytest.approx(0.0, abs=1e-15)
        assert result.imaginary == pytest.approx(2.0)

    def test_polar_complex(self) -> None:
        """PolarComplex should stay polar."""
        assert square_root(PolarComplex(9, 1.0)) == PolarComplex(3.0, 0.5)

    def test_unsupported_type_raises(self) -> None:
        """Non-numeric values should raise TypeError."""
        with pytest.raises(TypeError, match="No square root"):
            square_root("4")


class TestConjugateOf:
    """Tests for conjugate_of dispatch."""

    def test_real_is_own_conjugate(self) -> None:
        """Reals should be returned unchanged."""
        assert conjugate_of(3.5) == 3.5

    def test_builtin_complex(self) -> None:
        """Built-in complex should be conjugated."""
        assert conjugate_of(1 + 2j) == 1 - 2j

    def test_complex_types(self) -> None:
        """Both representations should be conjugated in place."""
        assert conjugate_of(Complex(1, 2)) == Complex(1, -2)
        assert conjugate_of(PolarComplex(2, 0.5)) == PolarComplex(2, -0.5)


class TestModulus:
    """Tests for modulus dispatch."""

    def test_real(self) -> None:
        """The modulus of a real is its absolute value."""
        assert modulus(-3) == 3.0

    def test_builtin_complex(self) -> None:
        """|3+4j| = 5."""
        assert modulus(3 + 4j) == 5.0

    def test_complex_types(self) -> None:
        """Negative polar magnitudes should still give a positive modulus."""
        assert modulus(Complex(3, 4)) == 5.0
        assert modulus(PolarComplex(-2, 1.0)) == 2.0


class TestIsScalar:
    """Tests for is_scalar."""

    @pytest.mark.parametrize("value", [3, 2.5, 1 + 2j, Complex(1, 2), PolarComplex(1, 0.5)])
    def test_numbers(self, value: object) -> None:
        """Built-in numbers and both complex types are scalars."""
        assert is_scalar(value)

    @pytest.mark.parametrize("value", ["x", [1, 2], None])
    def test_non_numbers(self, value: object) -> None:
        """Strings, lists and None are not."""
        assert not is_scalar(value)

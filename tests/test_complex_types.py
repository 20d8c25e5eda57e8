"""Tests for rectangular and polar complex number types."""

import math

import pytest

from polymat.scalars.complex_types import (
    Complex,
    PolarComplex,
    absolute,
    argument,
    cart_to_polar,
    conjugate,
    polar_to_cart,
    pow_complex,
    pow_real,
    raise_e_complex,
    to_complex,
)


class TestComplexArithmetic:
    """Tests for Complex operators."""

    def test_addition(self) -> None:
        """Components should add independently."""
        assert Complex(1, 2) + Complex(3, 4) == Complex(4, 6)

    def test_mixed_real_operands(self) -> None:
        """Reals should combine with Complex from either side."""
        z = Complex(1, 2)
        assert z + 1 == Complex(2, 2)
        assert 1 + z == Complex(2, 2)
        assert 2 - Complex(1, 1) == Complex(1, -1)
        assert z * 2 == Complex(2, 4)
        assert 2 * z == Complex(2, 4)

    def test_builtin_complex_operand(self) -> None:
        """Built-in complex numbers should be accepted as operands."""
        assert Complex(1, 1) + 1j == Complex(1, 2)

    def test_multiplication(self) -> None:
        """(1+2i)(3+4i) = -5+10i."""
        assert Complex(1, 2) * Complex(3, 4) == Complex(-5, 10)

    def test_division_inverts_multiplication(self) -> None:
        """(-5+10i)/(3+4i) should give back 1+2i."""
        assert Complex(-5, 10) / Complex(3, 4) == Complex(1, 2)

    def test_real_divided_by_complex(self) -> None:
        """1/i = -i."""
        assert 1 / Complex(0, 1) == Complex(0, -1)

    def test_division_by_zero_follows_ieee(self) -> None:
        """Dividing by zero should produce inf/nan instead of raising."""
        # num·conj(0)/|0|² is 0/0 in both components
        result = Complex(1, 1) / Complex(0, 0)
        assert math.isnan(result.real)
        assert math.isnan(result.imaginary)

        scaled = Complex(1, 0) / 0
        assert math.isinf(scaled.real)
        assert math.isnan(scaled.imaginary)

    def test_negation(self) -> None:
        """Negation should flip both components."""
        assert -Complex(1, -2) == Complex(-1, 2)

    def test_integer_power_is_exact(self) -> None:
        """Integer powers should not go through logarithms."""
        assert Complex(0, 1) ** 2 == Complex(-1, 0)
        assert Complex(0, 0) ** 0 == Complex(1, 0)
        assert Complex(0, 0) ** 3 == Complex(0, 0)

    def test_negative_integer_power(self) -> None:
        """z^-1 should equal 1/z."""
        assert Complex(0, 2) ** -1 == 1 / Complex(0, 2)


class TestComplexProperties:
    """Tests for Complex measurements, equality and formatting."""

    def test_absolute(self) -> None:
        """|3+4i| = 5."""
        assert Complex(3, 4).absolute() == 5.0
        assert abs(Complex(3, 4)) == 5.0

    def test_argument_of_zero(self) -> None:
        """The argument of zero should be defined as 0."""
        assert Complex(0, 0).argument() == 0.0

    def test_argument_range(self) -> None:
        """Arguments should lie in (-π, π]."""
        assert Complex(-1, 0).argument() == math.pi
        assert Complex(-1, -0.0).argument() == math.pi
        assert Complex(0, -1).argument() == pytest.approx(-math.pi / 2)

    def test_conjugate(self) -> None:
        """Conjugation should negate the imaginary component."""
        assert Complex(1, 2).conjugate() == Complex(1, -2)

    def test_conjugate_product_is_real(self) -> None:
        """z·conj(z) should equal |z|²."""
        z = Complex(3, 4)
        assert z * z.conjugate() == 25

    def test_equality_with_real(self) -> None:
        """A Complex with zero imaginary part should equal the real."""
        assert Complex(2, 0) == 2
        assert Complex(2, 1) != 2

    def test_hash_matches_equal_real(self) -> None:
        """Equal values should hash equally."""
        assert hash(Complex(2, 0)) == hash(2.0)

    def test_immutable(self) -> None:
        """Complex should be immutable."""
        z = Complex(1, 2)
        with pytest.raises(AttributeError):
            z.real = 5.0  # type: ignore[misc]

    def test_str_format(self) -> None:
        """Components should print with sign and six decimals."""
        assert str(Complex(3, -4)) == "+3.000000-4.000000i"
        assert str(Complex(2, 0)) == "+2.000000"


class TestPolarComplex:
    """Tests for PolarComplex operators and canonical form."""

    def test_multiplication_on_magnitude_and_angle(self) -> None:
        """Magnitudes multiply and angles add."""
        assert PolarComplex(2, 0.5) * PolarComplex(3, 0.25) == PolarComplex(6, 0.75)

    def test_division_on_magnitude_and_angle(self) -> None:
        """Magnitudes divide and angles subtract."""
        assert PolarComplex(6, 1.0) / PolarComplex(3, 0.5) == PolarComplex(2, 0.5)

    def test_addition_through_rectangular_form(self) -> None:
        """Addition should convert through rectangular form."""
        assert PolarComplex(1, 0) + PolarComplex(1, 0) == PolarComplex(2, 0)

    def test_negation_flips_magnitude(self) -> None:
        """Negation should produce a negative magnitude at the same angle."""
        negated = -PolarComplex(2, 0.3)
        assert negated == PolarComplex(-2, 0.3)
        assert negated.absolute() == 2.0

    def test_canonical_form(self) -> None:
        """canonical() should give magnitude >= 0 and angle in (-π, π]."""
        canon = PolarComplex(-2, 0.3).canonical()
        assert canon.magnitude == 2.0
        assert canon.angle == pytest.approx(0.3 - math.pi)
        assert PolarComplex(-2, 0.3).argument() == pytest.approx(0.3 - math.pi)

    def test_zero_magnitudes_are_equal(self) -> None:
        """Zero is zero regardless of the stored angle."""
        assert PolarComplex(0, 1.0) == PolarComplex(0, 2.0)
        assert PolarComplex(0, 1.0) == 0

    def test_components(self) -> None:
        """real and imaginary should be derived from magnitude and angle."""
        z = PolarComplex(2, math.pi / 2)
        assert z.real == pytest.approx(0.0, abs=1e-15)
        assert z.imaginary == pytest.approx(2.0)

    def test_str_format(self) -> None:
        """Angles should print as multiples of π."""
        assert str(PolarComplex(2, math.pi / 2)) == "+2.000000∠ +0.500000π"


FIELD_OPERANDS = [
    (Complex(1.5, -2), Complex(0.25, 3), Complex(-4, 0.5)),
    (Complex(0.1, 0.7), Complex(-3.3, 1.2), Complex(2.9, -0.4)),
    (PolarComplex(2, 0.3), PolarComplex(1.5, -2.0), PolarComplex(0.5, 2.8)),
    (PolarComplex(3, 1.0), Complex(1, -1), PolarComplex(-2, 0.6)),
]


class TestFieldLaws:
    """Tests for the field axioms over both representations."""

    @pytest.mark.parametrize(("a", "b", "c"), FIELD_OPERANDS)
    def test_addition_commutes(self, a, b, c) -> None:
        """a + b = b + a."""
        assert complex(a + b) == pytest.approx(complex(b + a))

    @pytest.mark.parametrize(("a", "b", "c"), FIELD_OPERANDS)
    def test_distributive(self, a, b, c) -> None:
        """a·(b + c) = a·b + a·c."""
        assert complex(a * (b + c)) == pytest.approx(complex(a * b + a * c))

    @pytest.mark.parametrize(("a", "b", "c"), FIELD_OPERANDS)
    def test_self_division_is_one(self, a, b, c) -> None:
        """a / a = 1 for non-zero a."""
        for value in (a, b, c):
            assert complex(value / value) == pytest.approx(1 + 0j)


class TestConversions:
    """Tests for conversion and module-level helpers."""

    def test_round_trip(self) -> None:
        """cart -> polar -> cart should preserve the value."""
        back = polar_to_cart(cart_to_polar(Complex(3, 4)))
        assert back.real == pytest.approx(3.0)
        assert back.imaginary == pytest.approx(4.0)

    @pytest.mark.parametrize(
        ("magnitude", "angle"),
        [(1.0, 0.0), (2.5, 0.75), (3.0, -2.5), (0.5, 4.0), (7.0, 7.0), (1.0, math.pi)],
    )
    def test_polar_round_trip(self, magnitude: float, angle: float) -> None:
        """polar -> cart -> polar should preserve r and θ (mod 2π)."""
        back = cart_to_polar(polar_to_cart(PolarComplex(magnitude, angle)))
        assert back.magnitude == pytest.approx(magnitude)
        assert math.remainder(back.angle - angle, 2 * math.pi) == pytest.approx(0.0, abs=1e-12)

    def test_polar_of_known_value(self) -> None:
        """3+4i has magnitude 5 and angle atan2(4, 3)."""
        polar = Complex(3, 4).to_polar()
        assert polar.magnitude == 5.0
        assert polar.angle == pytest.approx(math.atan2(4, 3))

    def test_to_complex_accepts_numbers(self) -> None:
        """Numbers of every kind should convert."""
        assert to_complex(2) == Complex(2, 0)
        assert to_complex(1 - 2j) == Complex(1, -2)
        assert to_complex(Complex(1, 1)) == Complex(1, 1)

    def test_to_complex_rejects_non_numbers(self) -> None:
        """Strings should not be silently converted."""
        with pytest.raises(TypeError, match="Cannot interpret"):
            to_complex("1+2i")

    def test_helpers_keep_representation(self) -> None:
        """conjugate should keep the input representation."""
        assert conjugate(PolarComplex(2, 0.5)) == PolarComplex(2, -0.5)
        assert conjugate(Complex(1, 2)) == Complex(1, -2)
        assert absolute(PolarComplex(-3, 0.1)) == 3.0
        assert argument(Complex(0, 0)) == 0.0


class TestExponentiation:
    """Tests for e^z and general powers."""

    def test_euler_identity(self) -> None:
        """e^(iπ) = -1."""
        result = raise_e_complex(Complex(0, math.pi))
        assert result.real == pytest.approx(-1.0)
        assert result.imaginary == pytest.approx(0.0, abs=1e-15)

    def test_i_to_the_i(self) -> None:
        """i^i = e^(-π/2), a real number."""
        result = pow_complex(Complex(0, 1), Complex(0, 1))
        assert result.real == pytest.approx(math.exp(-math.pi / 2))
        assert result.imaginary == pytest.approx(0.0, abs=1e-15)

    def test_pow_complex_of_zero_is_nan(self) -> None:
        """ln(0) is undefined so a zero base should give nan."""
        result = pow_complex(Complex(0, 0), Complex(2, 0))
        assert math.isnan(result.real)

    @pytest.mark.parametrize(
        ("base", "exponent"),
        [
            (Complex(0, 0), Complex(1, 1)),
            (Complex(0, 0), Complex(0, 1)),
            (PolarComplex(0, 0), Complex(2, -1)),
        ],
    )
    def test_zero_base_with_complex_exponent_is_nan(
        self, base: Complex | PolarComplex, exponent: Complex
    ) -> None:
        """An infinite phase should give nan rather than raise."""
        result = to_complex(pow_complex(base, exponent))
        assert math.isnan(result.real)
        assert math.isnan(result.imaginary)

    def test_zero_base_operator_power(self) -> None:
        """``**`` with a complex exponent should not raise on a zero base."""
        result = Complex(0, 0) ** Complex(0, 1)
        assert math.isnan(result.real)

    def test_pow_complex_keeps_polar(self) -> None:
        """A polar base should give a polar result."""
        assert isinstance(pow_complex(PolarComplex(1, 0.5), 2), PolarComplex)

    def test_pow_real_square_root(self) -> None:
        """sqrt(4i) = √2 + √2·i."""
        result = pow_real(Complex(0, 4), 0.5)
        assert result.real == pytest.approx(math.sqrt(2))
        assert result.imaginary == pytest.approx(math.sqrt(2))

    def test_pow_real_uses_stored_polar_angle(self) -> None:
        """Polar values should be raised without re-deriving the angle."""
        result = pow_real(PolarComplex(4, 3.0), 0.5)
        assert result == PolarComplex(2.0, 1.5)

    def test_fractional_operator_power(self) -> None:
        """``**`` with a float exponent should use pow_real."""
        result = Complex(0, 4) ** 0.5
        assert result.real == pytest.approx(math.sqrt(2))

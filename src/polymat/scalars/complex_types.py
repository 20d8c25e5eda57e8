"""
Complex Number Types - Rectangular and Polar Representations

Two interchangeable value types for complex numbers:

- ``Complex``: rectangular form ``real + i·imaginary``
- ``PolarComplex``: polar form ``magnitude·e^(i·angle)``

Both are immutable. Arithmetic between a complex value and a real number is
supported from either side; the real-left forms reuse the complex-left
implementations wherever the operation is commutative.

Degenerate inputs (division by a zero-magnitude value, ``log(0)`` inside
``pow_complex``) follow IEEE 754 and produce ``nan``/``inf`` rather than
raising. Plain Python floats raise ``ZeroDivisionError`` in those cases, so
the affected primitives are evaluated through numpy with warnings silenced.

References:
    - Needham: "Visual Complex Analysis" (1997), Chapter 1
    - https://math.stackexchange.com/q/476998 (complex exponentiation)
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any

import numpy as np

# =============================================================================
# IEEE 754 PRIMITIVES
# =============================================================================


def _divide(numerator: float, denominator: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(numerator, denominator))


def _power(base: float, exponent: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.power(float(base), float(exponent)))


def _log(value: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.log(value))


def _exp(value: float) -> float:
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.exp(value))


def _cos_sin(angle: float) -> tuple[float, float]:
    # Infinite angles give nan instead of a math domain error
    with np.errstate(invalid="ignore"):
        return float(np.cos(angle)), float(np.sin(angle))


def _wrap_angle(angle: float) -> float:
    """Wrap an angle into (-π, π]."""
    wrapped = math.remainder(angle, 2 * math.pi)
    if wrapped == -math.pi:
        return math.pi
    return wrapped


def _format_signed(value: float) -> str:
    sign = "-" if value < 0 else "+"
    return f"{sign}{abs(value):f}"


# =============================================================================
# RECTANGULAR FORM
# =============================================================================


@dataclass(frozen=True, slots=True, eq=False)
class Complex:
    """Complex number in rectangular form.

    Example:
        >>> z = Complex(3.0, 4.0)
        >>> z.absolute()
        5.0
        >>> str(z * z.conjugate())
        '+25.000000'
    """

    real: float
    """Real component."""

    imaginary: float = 0.0
    """Imaginary component."""

    @classmethod
    def from_polar(cls, magnitude: float, angle: float) -> Complex:
        """Build a rectangular value from a magnitude and an angle."""
        return cls(magnitude * math.cos(angle), magnitude * math.sin(angle))

    @staticmethod
    def _coerce(value: Any) -> Complex | None:
        if isinstance(value, Complex):
            return value
        if isinstance(value, PolarComplex):
            return polar_to_cart(value)
        if isinstance(value, numbers.Real):
            return Complex(float(value), 0.0)
        if isinstance(value, numbers.Complex):
            return Complex(float(value.real), float(value.imag))
        return None

    # ---------- arithmetic ----------

    def __add__(self, other: Any) -> Complex:
        rhs = Complex._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.real + rhs.real, self.imaginary + rhs.imaginary)

    # + is commutative so reuse the complex-left arrangement
    __radd__ = __add__

    def __sub__(self, other: Any) -> Complex:
        rhs = Complex._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.real - rhs.real, self.imaginary - rhs.imaginary)

    def __rsub__(self, other: Any) -> Complex:
        lhs = Complex._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Any) -> Complex:
        if isinstance(other, numbers.Real):
            return Complex(self.real * other, self.imaginary * other)
        rhs = Complex._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(
            self.real * rhs.real - self.imaginary * rhs.imaginary,
            self.real * rhs.imaginary + self.imaginary * rhs.real,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Complex:
        if isinstance(other, numbers.Real):
            return Complex(_divide(self.real, other), _divide(self.imaginary, other))
        rhs = Complex._coerce(other)
        if rhs is None:
            return NotImplemented
        # num * conj(d) / |d|²
        div = rhs.real * rhs.real + rhs.imaginary * rhs.imaginary
        return Complex(
            _divide(self.real * rhs.real + self.imaginary * rhs.imaginary, div),
            _divide(self.imaginary * rhs.real - self.real * rhs.imaginary, div),
        )

    def __rtruediv__(self, other: Any) -> Complex:
        if isinstance(other, numbers.Real):
            div = self.real * self.real + self.imaginary * self.imaginary
            return Complex(
                _divide(other * self.real, div),
                _divide(-other * self.imaginary, div),
            )
        lhs = Complex._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __pow__(self, exponent: Any) -> Complex:
        if isinstance(exponent, numbers.Integral):
            return _integer_power(self, int(exponent), Complex(1.0, 0.0))
        if isinstance(exponent, numbers.Real):
            return pow_real(self, float(exponent))
        power = Complex._coerce(exponent)
        if power is None:
            return NotImplemented
        return pow_complex(self, power)

    def __rpow__(self, base: Any) -> Complex:
        lhs = Complex._coerce(base)
        if lhs is None:
            return NotImplemented
        return pow_complex(lhs, self)

    def __neg__(self) -> Complex:
        return Complex(-self.real, -self.imaginary)

    def __pos__(self) -> Complex:
        return self

    def __abs__(self) -> float:
        return self.absolute()

    # ---------- comparison ----------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Complex):
            return self.real == other.real and self.imaginary == other.imaginary
        if isinstance(other, numbers.Real):
            return self.real == other and self.imaginary == 0
        if isinstance(other, numbers.Complex):
            return self.real == other.real and self.imaginary == other.imag
        return NotImplemented

    def __hash__(self) -> int:
        return hash(complex(self.real, self.imaginary))

    def __bool__(self) -> bool:
        return self.real != 0 or self.imaginary != 0

    # ---------- conversions ----------

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def conjugate(self) -> Complex:
        """Negate the imaginary component."""
        return Complex(self.real, -self.imaginary)

    def absolute(self) -> float:
        """Euclidean norm sqrt(real² + imaginary²)."""
        return math.hypot(self.real, self.imaginary)

    def argument(self) -> float:
        """Angle from the positive real axis in (-π, π]; zero maps to 0."""
        if self.real == 0 and self.imaginary == 0:
            return 0.0
        angle = math.atan2(self.imaginary, self.real)
        if angle == -math.pi:
            return math.pi
        return angle

    def to_polar(self) -> PolarComplex:
        """Convert to polar form."""
        return cart_to_polar(self)

    def __str__(self) -> str:
        text = _format_signed(self.real)
        if self.imaginary != 0:
            text += f"{_format_signed(self.imaginary)}i"
        return text

    def __repr__(self) -> str:
        return f"Complex({self.real!r}, {self.imaginary!r})"


# =============================================================================
# POLAR FORM
# =============================================================================


@dataclass(frozen=True, slots=True, eq=False)
class PolarComplex:
    """Complex number in polar form.

    The angle is kept exactly as produced by arithmetic and is not wrapped.
    Negation flips the sign of the magnitude, so a negative magnitude is a
    legitimate intermediate value; ``canonical()`` restores magnitude >= 0
    and an angle in (-π, π].

    Multiplication and division act directly on magnitude and angle.
    Addition and subtraction go through the rectangular form.
    """

    magnitude: float
    angle: float = 0.0

    @staticmethod
    def _coerce(value: Any) -> PolarComplex | None:
        if isinstance(value, PolarComplex):
            return value
        if isinstance(value, Complex):
            return cart_to_polar(value)
        if isinstance(value, numbers.Real):
            return PolarComplex(float(value), 0.0)
        if isinstance(value, numbers.Complex):
            return cart_to_polar(Complex(float(value.real), float(value.imag)))
        return None

    @property
    def real(self) -> float:
        """Real component, magnitude·cos(angle)."""
        return self.magnitude * math.cos(self.angle)

    @property
    def imaginary(self) -> float:
        """Imaginary component, magnitude·sin(angle)."""
        return self.magnitude * math.sin(self.angle)

    # ---------- arithmetic ----------

    def __add__(self, other: Any) -> PolarComplex:
        rhs = PolarComplex._coerce(other)
        if rhs is None:
            return NotImplemented
        return cart_to_polar(polar_to_cart(self) + polar_to_cart(rhs))

    __radd__ = __add__

    def __sub__(self, other: Any) -> PolarComplex:
        rhs = PolarComplex._coerce(other)
        if rhs is None:
            return NotImplemented
        return cart_to_polar(polar_to_cart(self) - polar_to_cart(rhs))

    def __rsub__(self, other: Any) -> PolarComplex:
        lhs = PolarComplex._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Any) -> PolarComplex:
        if isinstance(other, numbers.Real):
            return PolarComplex(self.magnitude * other, self.angle)
        rhs = PolarComplex._coerce(other)
        if rhs is None:
            return NotImplemented
        return PolarComplex(self.magnitude * rhs.magnitude, self.angle + rhs.angle)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> PolarComplex:
        if isinstance(other, numbers.Real):
            return PolarComplex(_divide(self.magnitude, other), self.angle)
        rhs = PolarComplex._coerce(other)
        if rhs is None:
            return NotImplemented
        return PolarComplex(
            _divide(self.magnitude, rhs.magnitude), self.angle - rhs.angle
        )

    def __rtruediv__(self, other: Any) -> PolarComplex:
        lhs = Complex._coerce(other)
        if lhs is None:
            return NotImplemented
        return cart_to_polar(lhs / polar_to_cart(self))

    def __pow__(self, exponent: Any) -> PolarComplex:
        if isinstance(exponent, numbers.Real):
            return pow_real(self, float(exponent))
        power = Complex._coerce(exponent)
        if power is None:
            return NotImplemented
        return pow_complex(self, power)

    def __neg__(self) -> PolarComplex:
        return PolarComplex(-self.magnitude, self.angle)

    def __pos__(self) -> PolarComplex:
        return self

    def __abs__(self) -> float:
        return self.absolute()

    # ---------- comparison ----------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PolarComplex):
            if self.magnitude == 0 and other.magnitude == 0:
                return True
            return self.magnitude == other.magnitude and self.angle == other.angle
        if isinstance(other, numbers.Real):
            if self.magnitude == 0:
                return other == 0
            return self.magnitude == other and self.angle == 0
        return NotImplemented

    def __hash__(self) -> int:
        return hash(complex(self.real, self.imaginary))

    def __bool__(self) -> bool:
        return self.magnitude != 0

    # ---------- conversions ----------

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def conjugate(self) -> PolarComplex:
        """Mirror the value across the real axis."""
        return PolarComplex(self.magnitude, -self.angle)

    def absolute(self) -> float:
        """Distance from the origin."""
        return abs(self.magnitude)

    def argument(self) -> float:
        """Canonical angle in (-π, π]; zero maps to 0."""
        return self.canonical().angle

    def canonical(self) -> PolarComplex:
        """Equivalent value with magnitude >= 0 and angle in (-π, π]."""
        if self.magnitude == 0:
            return PolarComplex(0.0, 0.0)
        if self.magnitude < 0:
            return PolarComplex(-self.magnitude, _wrap_angle(self.angle + math.pi))
        return PolarComplex(self.magnitude, _wrap_angle(self.angle))

    def to_cart(self) -> Complex:
        """Convert to rectangular form."""
        return polar_to_cart(self)

    def __str__(self) -> str:
        return f"{_format_signed(self.magnitude)}∠ {_format_signed(self.angle / math.pi)}π"

    def __repr__(self) -> str:
        return f"PolarComplex({self.magnitude!r}, {self.angle!r})"


ComplexLike = Complex | PolarComplex


# =============================================================================
# PUBLIC API
# =============================================================================


def polar_to_cart(value: PolarComplex) -> Complex:
    """Convert polar (r, θ) to rectangular (r·cosθ, r·sinθ)."""
    return Complex(value.real, value.imaginary)


def cart_to_polar(value: Complex) -> PolarComplex:
    """Convert rectangular to polar via (absolute, argument)."""
    return PolarComplex(value.absolute(), value.argument())


def to_complex(value: Any) -> Complex:
    """Coerce a number or complex value of either representation to ``Complex``.

    Raises:
        TypeError: If value is not a number.
    """
    result = Complex._coerce(value)
    if result is None:
        raise TypeError(f"Cannot interpret {type(value).__name__} as a complex number")
    return result


def conjugate(value: ComplexLike) -> ComplexLike:
    """Complex conjugate, same representation as the input."""
    return value.conjugate()


def absolute(value: ComplexLike) -> float:
    """Modulus of a complex value."""
    return value.absolute()


def argument(value: ComplexLike) -> float:
    """Argument of a complex value in (-π, π]; ``argument(0) == 0``."""
    return value.argument()


def raise_e_complex(value: ComplexLike) -> ComplexLike:
    """Compute e^value = e^real·(cos(imaginary) + i·sin(imaginary))."""
    cart = to_complex(value)
    scale = _exp(cart.real)
    cos, sin = _cos_sin(cart.imaginary)
    result = Complex(scale * cos, scale * sin)
    if isinstance(value, PolarComplex):
        return cart_to_polar(result)
    return result


def pow_complex(base: ComplexLike, exponent: Any) -> ComplexLike:
    """General complex exponentiation base^exponent.

    Computes exp(ln|base|·exponent + i·arg(base)·exponent). A zero base
    yields ``nan`` components since ln(0) is undefined.

    Args:
        base: Value to raise.
        exponent: Complex (or real) exponent.

    Returns:
        Result in the same representation as ``base``.
    """
    cart = to_complex(base)
    power = to_complex(exponent)
    log_abs = _log(cart.absolute())
    arg = cart.argument()
    result = raise_e_complex(
        Complex(
            log_abs * power.real - power.imaginary * arg,
            log_abs * power.imaginary + power.real * arg,
        )
    )
    if isinstance(base, PolarComplex):
        return cart_to_polar(result)
    return result


def pow_real(base: ComplexLike, exponent: float) -> ComplexLike:
    """Raise to a real exponent: |base|^exponent at angle arg(base)·exponent.

    For polar values the stored magnitude and angle are used directly.
    """
    if isinstance(base, PolarComplex):
        return PolarComplex(_power(base.magnitude, exponent), base.angle * exponent)
    powered = _power(base.absolute(), exponent)
    angle = base.argument() * exponent
    return Complex(powered * math.cos(angle), powered * math.sin(angle))


def _integer_power(base: Complex, exponent: int, one: Complex) -> Complex:
    # Exponentiation by squaring keeps integer powers exact around zero
    if exponent < 0:
        return one / _integer_power(base, -exponent, one)
    result = one
    factor = base
    while exponent:
        if exponent & 1:
            result = result * factor
        exponent >>= 1
        if exponent:
            factor = factor * factor
    return result


__all__ = [
    "Complex",
    "ComplexLike",
    "PolarComplex",
    "absolute",
    "argument",
    "cart_to_polar",
    "conjugate",
    "polar_to_cart",
    "pow_complex",
    "pow_real",
    "raise_e_complex",
    "to_complex",
]

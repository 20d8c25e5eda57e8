"""Polynomial coefficient vectors and factored forms.

A polynomial is stored as its complex coefficients in ascending power
order: index ``i`` holds the coefficient of ``x^i``. Zero coefficients at
either end are kept as given, so the rank is always ``len(coefficients) - 1``.

A factor ``(linear, constant)`` stands for the linear term
``linear·x + constant``; the canonical factor for a root ``r`` is
``(1, -r)``, i.e. ``(x - r)``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, NamedTuple

from polymat.errors import InvalidDimensionsError
from polymat.scalars.complex_types import Complex, to_complex

if TYPE_CHECKING:
    from polymat.polynomial.durand_kerner import RootFinderConfig

Coefficients = list[Complex]


class Factor(NamedTuple):
    """Linear factor ``linear·x + constant``."""

    linear: Any
    """Coefficient of x."""

    constant: Any
    """Constant term (``-root`` for a monic factor)."""

    @property
    def root(self) -> Complex:
        """Value of x at which the factor vanishes."""
        return -to_complex(self.constant) / to_complex(self.linear)


def as_coefficients(values: Iterable[Any]) -> Coefficients:
    """Coerce numbers or complex values into a coefficient list.

    Raises:
        InvalidDimensionsError: If no coefficients are given.
    """
    coeffs = [to_complex(value) for value in values]
    if not coeffs:
        raise InvalidDimensionsError("A polynomial needs at least one coefficient")
    return coeffs


def add_coefficients(left: Sequence[Any], right: Sequence[Any]) -> Coefficients:
    """Sum of two coefficient vectors, the shorter padded with zeros."""
    lhs, rhs = as_coefficients(left), as_coefficients(right)
    length = max(len(lhs), len(rhs))
    zero = Complex(0.0, 0.0)
    return [
        (lhs[i] if i < len(lhs) else zero) + (rhs[i] if i < len(rhs) else zero)
        for i in range(length)
    ]


def subtract_coefficients(left: Sequence[Any], right: Sequence[Any]) -> Coefficients:
    """Difference of two coefficient vectors, the shorter padded with zeros."""
    lhs, rhs = as_coefficients(left), as_coefficients(right)
    out: Coefficients = []
    for i in range(max(len(lhs), len(rhs))):
        if i < len(lhs) and i < len(rhs):
            out.append(lhs[i] - rhs[i])
        elif i < len(lhs):
            out.append(lhs[i])
        else:
            out.append(-rhs[i])
    return out


def multiply_coefficients(left: Sequence[Any], right: Sequence[Any]) -> Coefficients:
    """Product of two polynomials as the discrete convolution of coefficients."""
    lhs, rhs = as_coefficients(left), as_coefficients(right)
    out = [Complex(0.0, 0.0)] * (len(lhs) + len(rhs) - 1)
    for i, a in enumerate(lhs):
        for j, b in enumerate(rhs):
            out[i + j] = out[i + j] + a * b
    return out


def compress_factors(factors: Iterable[tuple[Any, Any] | Factor]) -> Coefficients:
    """Expand a product of linear factors into coefficient form.

    e.g. (x-3)(x+2) -> x^2 - x - 6 -> [-6, -1, 1]

    Every coefficient of the product is an elementary symmetric sum of the
    factor components: the constant term is the product of all constants,
    the leading term the product of all linear coefficients. Multiplying the
    factors in one at a time builds all of them in O(n²).

    Args:
        factors: Pairs ``(linear, constant)``, e.g. (2x-3) -> (2, -3).

    Returns:
        Coefficients in ascending power order, ``len(factors) + 1`` long.
    """
    compressed: Coefficients = [Complex(1.0, 0.0)]
    for linear, constant in factors:
        compressed = multiply_coefficients(compressed, [constant, linear])
    return compressed


def evaluate_polynomial(x: Any, coefficients: Sequence[Any]) -> Complex:
    """Evaluate ``Σ coefficients[i]·x^i`` at ``x``.

    Zero coefficients are skipped. Powers use exact complex integer
    exponentiation, so evaluation at 0 is well defined.
    """
    point = to_complex(x)
    total = Complex(0.0, 0.0)
    for power, coeff in enumerate(coefficients):
        if coeff != 0:
            total = total + to_complex(coeff) * point**power
    return total


class Polynomial:
    """Single-variable polynomial with complex coefficients.

    Example:
        >>> p = Polynomial.from_factors([(1, -1), (1, -2)])
        >>> [c.real for c in p.coefficients]
        [2.0, -3.0, 1.0]
        >>> p(2)
        Complex(0.0, 0.0)
    """

    __slots__ = ("_coefficients",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, coefficients: Iterable[Any]) -> None:
        self._coefficients: tuple[Complex, ...] = tuple(as_coefficients(coefficients))

    @classmethod
    def from_factors(cls, factors: Iterable[tuple[Any, Any] | Factor]) -> Polynomial:
        """Build the polynomial equal to the product of linear factors."""
        return cls(compress_factors(factors))

    @classmethod
    def from_roots(cls, roots: Iterable[Any], leading: Any = 1.0) -> Polynomial:
        """Build ``leading · Π(x - root)``."""
        factors = [Factor(1.0, -to_complex(root)) for root in roots]
        return cls([to_complex(leading) * c for c in compress_factors(factors)])

    @property
    def coefficients(self) -> Coefficients:
        """Copy of the coefficients, ascending power order."""
        return list(self._coefficients)

    @property
    def rank(self) -> int:
        """Degree of the polynomial (``len(coefficients) - 1``)."""
        return len(self._coefficients) - 1

    def __len__(self) -> int:
        return len(self._coefficients)

    def __iter__(self) -> Iterator[Complex]:
        return iter(self._coefficients)

    def __getitem__(self, power: int) -> Complex:
        return self._coefficients[power]

    def __call__(self, x: Any) -> Complex:
        return evaluate_polynomial(x, self._coefficients)

    def __add__(self, other: Any) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(add_coefficients(self._coefficients, other._coefficients))

    def __sub__(self, other: Any) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(subtract_coefficients(self._coefficients, other._coefficients))

    def __mul__(self, other: Any) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(multiply_coefficients(self._coefficients, other._coefficients))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def factorize(self, config: RootFinderConfig | None = None) -> list[Factor]:
        """Factors ``(1, -root)`` found by Durand-Kerner iteration."""
        from polymat.polynomial.durand_kerner import factorize_polynomial

        return factorize_polynomial(self._coefficients, config)

    def roots(self, config: RootFinderConfig | None = None) -> list[Complex]:
        """Root estimates found by Durand-Kerner iteration."""
        from polymat.polynomial.durand_kerner import run_durand_kerner

        return run_durand_kerner(self._coefficients, config).roots

    def __str__(self) -> str:
        from polymat.display import format_polynomial

        return format_polynomial(self._coefficients)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coefficients)!r})"


__all__ = [
    "Coefficients",
    "Factor",
    "Polynomial",
    "add_coefficients",
    "as_coefficients",
    "compress_factors",
    "evaluate_polynomial",
    "multiply_coefficients",
    "subtract_coefficients",
]

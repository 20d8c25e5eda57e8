"""Element-type capabilities used by the generic vector and matrix code.

Vector and Matrix are generic over any scalar-like element type. The few
operations whose correct form depends on the element type (square root,
conjugation, modulus) are resolved here with ``functools.singledispatch``
so the container code never inspects element types itself.

A plain ``math.sqrt`` is wrong for complex sums of squares, which is why
``square_root`` dispatches to ``pow_real(value, 0.5)`` for both complex
representations.
"""

from __future__ import annotations

import cmath
import math
import numbers
from functools import singledispatch
from typing import Any

from polymat.scalars.complex_types import Complex, PolarComplex, pow_real


@singledispatch
def square_root(value: Any) -> Any:
    """Principal square root in the element's own type."""
    raise TypeError(f"No square root defined for {type(value).__name__}")


@square_root.register
def _(value: numbers.Real) -> float:
    return math.sqrt(value)


@square_root.register
def _(value: numbers.Complex) -> complex:
    return cmath.sqrt(value)


@square_root.register
def _(value: Complex) -> Complex:
    return pow_real(value, 0.5)


@square_root.register
def _(value: PolarComplex) -> PolarComplex:
    return pow_real(value, 0.5)


@singledispatch
def conjugate_of(value: Any) -> Any:
    """Complex conjugate; reals are their own conjugate."""
    raise TypeError(f"No conjugate defined for {type(value).__name__}")


@conjugate_of.register
def _(value: numbers.Real) -> numbers.Real:
    return value


@conjugate_of.register
def _(value: numbers.Complex) -> numbers.Complex:
    return value.conjugate()


@conjugate_of.register(Complex)
@conjugate_of.register(PolarComplex)
def _(value: Complex | PolarComplex) -> Complex | PolarComplex:
    return value.conjugate()


@singledispatch
def modulus(value: Any) -> float:
    """Non-negative real magnitude of a scalar."""
    raise TypeError(f"No modulus defined for {type(value).__name__}")


@modulus.register
def _(value: numbers.Complex) -> float:
    return float(abs(value))


@modulus.register(Complex)
@modulus.register(PolarComplex)
def _(value: Complex | PolarComplex) -> float:
    return value.absolute()


def is_scalar(value: Any) -> bool:
    """True for numbers the vector and matrix types can scale by."""
    return isinstance(value, (numbers.Number, Complex, PolarComplex))


__all__ = [
    "conjugate_of",
    "is_scalar",
    "modulus",
    "square_root",
]

"""Scalar types: rectangular and polar complex numbers plus type dispatch."""

from polymat.scalars.complex_types import (
    Complex,
    ComplexLike,
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
from polymat.scalars.scalar_ops import conjugate_of, is_scalar, modulus, square_root

__all__ = [
    # Complex types
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
    # Type dispatch
    "conjugate_of",
    "is_scalar",
    "modulus",
    "square_root",
]

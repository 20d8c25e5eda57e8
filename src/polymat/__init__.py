"""polymat: complex numbers, generic matrix algebra and polynomial root finding."""

import logging

__version__ = "0.1.0"

from polymat.algebra.matrix import Matrix
from polymat.algebra.vector import Vector
from polymat.polynomial.coefficients import (
    Factor,
    Polynomial,
    compress_factors,
    evaluate_polynomial,
)
from polymat.polynomial.durand_kerner import RootFinderConfig, factorize_polynomial
from polymat.scalars.complex_types import Complex, PolarComplex

# Library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Complex",
    "Factor",
    "Matrix",
    "PolarComplex",
    "Polynomial",
    "RootFinderConfig",
    "Vector",
    "compress_factors",
    "evaluate_polynomial",
    "factorize_polynomial",
]

"""Polynomial engine.

This module contains:
- Coefficient-vector arithmetic (addition, subtraction, convolution)
- Expansion of factored form into coefficient form
- Durand-Kerner simultaneous root finding
"""

from polymat.polynomial.coefficients import (
    Coefficients,
    Factor,
    Polynomial,
    add_coefficients,
    as_coefficients,
    compress_factors,
    evaluate_polynomial,
    multiply_coefficients,
    subtract_coefficients,
)
from polymat.polynomial.durand_kerner import (
    DEFAULT_ROOT_FINDER_CONFIG,
    DurandKerner,
    IterationResult,
    RootFinderConfig,
    RootFindingTrace,
    factorize_polynomial,
    run_durand_kerner,
)

__all__ = [
    # Coefficient form
    "Coefficients",
    "Factor",
    "Polynomial",
    "add_coefficients",
    "as_coefficients",
    "compress_factors",
    "evaluate_polynomial",
    "multiply_coefficients",
    "subtract_coefficients",
    # Root finding
    "DEFAULT_ROOT_FINDER_CONFIG",
    "DurandKerner",
    "IterationResult",
    "RootFinderConfig",
    "RootFindingTrace",
    "factorize_polynomial",
    "run_durand_kerner",
]

"""Generic vector and matrix algebra.

This module contains:
- Vector: fixed-length vectors with dot/cross products and normalization
- Matrix: dense matrices with cofactor determinant, adjoint, inverse and QR
- Random matrix generation and timing utilities for benchmarks
"""

from polymat.algebra.benchmark import (
    DEFAULT_SEED,
    BenchmarkResult,
    ElementKind,
    Stopwatch,
    create_random_matrix,
    parse_element_kind,
    run_determinant_benchmark,
)
from polymat.algebra.matrix import QR_RANK_TOLERANCE, Matrix
from polymat.algebra.vector import Vector

__all__ = [
    # Containers
    "Matrix",
    "QR_RANK_TOLERANCE",
    "Vector",
    # Benchmarking
    "DEFAULT_SEED",
    "BenchmarkResult",
    "ElementKind",
    "Stopwatch",
    "create_random_matrix",
    "parse_element_kind",
    "run_determinant_benchmark",
]

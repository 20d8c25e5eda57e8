"""Random matrix generation and timing for determinant benchmarks.

Key Features:
- Reproducible random matrices with seed control
- Real, rectangular-complex and polar-complex element kinds
- Stopwatch context manager based on ``time.perf_counter``

Cofactor expansion is factorial in the matrix size, so useful benchmark
sizes stay small (n <= 8 on typical hardware).
"""

from __future__ import annotations

import math
import time
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from types import TracebackType
from typing import Any

import numpy as np

from polymat.algebra.matrix import Matrix
from polymat.scalars.complex_types import Complex, PolarComplex

DEFAULT_SEED: int = 42
"""Default random seed for reproducible benchmarks."""


class ElementKind(Enum):
    """Scalar element types a random matrix can be filled with."""

    REAL = "real"
    COMPLEX = "complex"
    POLAR = "polar"


def parse_element_kind(kind: ElementKind | str) -> ElementKind:
    """Parse a string such as ``'complex'`` or ``'POLAR'`` into an ElementKind.

    Raises:
        ValueError: If the kind is unknown.
    """
    if isinstance(kind, ElementKind):
        return kind

    normalized = kind.strip().lower()
    for member in ElementKind:
        if member.value == normalized:
            return member

    valid = [member.value for member in ElementKind]
    raise ValueError(f"Unknown element kind: '{kind}'. Valid: {valid}")


def create_random_matrix(
    rows: int,
    cols: int,
    *,
    element_kind: ElementKind | str = ElementKind.REAL,
    seed: int | None = None,
    low: float = -10.0,
    high: float = 10.0,
) -> Matrix:
    """Create a matrix with uniformly distributed random entries.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        element_kind: Element type to generate.
        seed: Random seed for reproducibility.
        low: Lower bound for real and imaginary parts.
        high: Upper bound for real and imaginary parts (and polar magnitude).

    Returns:
        rows×cols Matrix.

    Example:
        >>> m = create_random_matrix(3, 3, element_kind="complex", seed=42)
        >>> m.shape
        (3, 3)
    """
    kind = parse_element_kind(element_kind)
    rng = np.random.default_rng(seed)

    if kind is ElementKind.REAL:
        values = rng.uniform(low, high, size=(rows, cols))
        return Matrix([[float(v) for v in row] for row in values])

    if kind is ElementKind.COMPLEX:
        real = rng.uniform(low, high, size=(rows, cols))
        imag = rng.uniform(low, high, size=(rows, cols))
        return Matrix(
            [
                [Complex(float(re), float(im)) for re, im in zip(real_row, imag_row)]
                for real_row, imag_row in zip(real, imag)
            ]
        )

    magnitude = rng.uniform(0.0, high, size=(rows, cols))
    angle = rng.uniform(-math.pi, math.pi, size=(rows, cols))
    return Matrix(
        [
            [PolarComplex(float(r), float(a)) for r, a in zip(mag_row, ang_row)]
            for mag_row, ang_row in zip(magnitude, angle)
        ]
    )


class Stopwatch:
    """Wall-clock timer usable as a context manager.

    Example:
        >>> with Stopwatch() as watch:
        ...     _ = sum(range(1000))
        >>> watch.elapsed > 0
        True
    """

    __slots__ = ("_start", "_stop")

    def __init__(self) -> None:
        self._start: float | None = None
        self._stop: float | None = None

    def start(self) -> None:
        self._start = time.perf_counter()
        self._stop = None

    def stop(self) -> float:
        if self._start is None:
            raise RuntimeError("Stopwatch was never started")
        self._stop = time.perf_counter()
        return self.elapsed

    @property
    def elapsed(self) -> float:
        """Seconds since start (or between start and stop)."""
        if self._start is None:
            return 0.0
        end = self._stop if self._stop is not None else time.perf_counter()
        return end - self._start

    def __enter__(self) -> Stopwatch:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    """Timing of one determinant computation."""

    size: int
    """Matrix dimension n."""

    element_kind: ElementKind
    """Element type of the matrix."""

    determinant: Any
    """Computed determinant."""

    elapsed: float
    """Wall clock time (seconds)."""


def run_determinant_benchmark(
    sizes: Iterable[int],
    *,
    element_kind: ElementKind | str = ElementKind.REAL,
    seed: int = DEFAULT_SEED,
) -> list[BenchmarkResult]:
    """Time ``determinant()`` on one random matrix per requested size.

    Args:
        sizes: Matrix dimensions to benchmark.
        element_kind: Element type for the random matrices.
        seed: Random seed (each size uses ``seed + size``).

    Returns:
        One BenchmarkResult per size, in input order.
    """
    kind = parse_element_kind(element_kind)
    results: list[BenchmarkResult] = []

    for size in sizes:
        matrix = create_random_matrix(size, size, element_kind=kind, seed=seed + size)
        with Stopwatch() as watch:
            det = matrix.determinant()
        results.append(
            BenchmarkResult(
                size=size,
                element_kind=kind,
                determinant=det,
                elapsed=watch.elapsed,
            )
        )

    return results


__all__ = [
    "DEFAULT_SEED",
    "BenchmarkResult",
    "ElementKind",
    "Stopwatch",
    "create_random_matrix",
    "parse_element_kind",
    "run_determinant_benchmark",
]

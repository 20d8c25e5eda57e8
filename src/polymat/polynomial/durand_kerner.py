"""Durand-Kerner simultaneous root finding with ping-pong estimate buffers.

Finds every root of a polynomial at once. Each iteration applies the
Weierstrass correction to all estimates using a snapshot of the previous
iteration:

    v_i' = v_i - P(v_i) / (a_n · Π_{j≠i} (v_i - v_j))

Starting points sit evenly on a circle of radius
``(|a_k| / |a_n|)^(1/n)``, where ``a_k`` is the first non-zero coefficient,
offset by half a step so that no starting point lies on the real axis.

Convergence is not guaranteed for every polynomial. A run that reaches the
iteration ceiling returns whatever estimates it holds at that point with
``converged=False``; this is a quality failure, not an error.

Real-coefficient polynomials whose start points are mapped onto a
conjugate pair stay conjugate under the update and cannot reach two
real roots. x² - 3x + 2 is one: its first step lands on 1.5 ± i and the
run ends at the iteration ceiling unconverged.

References:
- Durand (1960), Kerner (1966): "Ein Gesamtschrittverfahren zur Berechnung
  der Nullstellen von Polynomen"
- Weierstrass (1891), simultaneous correction formula
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from polymat.errors import DegeneratePolynomialError
from polymat.polynomial.coefficients import (
    Coefficients,
    Factor,
    as_coefficients,
    evaluate_polynomial,
)
from polymat.scalars.complex_types import Complex, PolarComplex, polar_to_cart

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RootFinderConfig:
    """Iteration limits for the Durand-Kerner root finder."""

    max_iterations: int = 1000
    """Iteration ceiling."""

    convergence_epsilon: float = 1e-10
    """Every root's magnitude must change by less than this in one iteration."""

    min_start_value: float = 1e-9
    """Starting-point components smaller than this are snapped to exactly 0."""

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            msg = f"max_iterations must be at least 1, got {self.max_iterations}"
            raise ValueError(msg)
        if self.convergence_epsilon <= 0:
            msg = f"convergence_epsilon must be positive, got {self.convergence_epsilon}"
            raise ValueError(msg)
        if self.min_start_value < 0:
            msg = f"min_start_value must not be negative, got {self.min_start_value}"
            raise ValueError(msg)


DEFAULT_ROOT_FINDER_CONFIG = RootFinderConfig()


@dataclass(frozen=True, slots=True)
class IterationResult:
    """Result of a single Durand-Kerner iteration."""

    max_change: float
    """Largest change in root magnitude over this iteration."""

    converged: bool
    """True if every root's magnitude changed by less than epsilon."""

    algorithm_time: float
    """Time for iteration (seconds)."""


class DurandKerner:
    """Durand-Kerner engine with ping-pong buffer optimization.

    Two estimate buffers alternate roles: one holds the previous iteration's
    snapshot that every update reads, the other receives the new estimates.

    Example:
        >>> engine = DurandKerner([-6, -1, 1])
        >>> for _ in range(100):
        ...     if engine.iterate().converged:
        ...         break
        >>> sorted(round(r.real, 6) for r in engine.roots)
        [-2.0, 3.0]
    """

    __slots__ = (
        "_coefficients",
        "_config",
        "_rank",
        "_leading",
        "_buffers",
        "_current_idx",
    )

    def __init__(
        self,
        coefficients: Sequence[Any],
        config: RootFinderConfig | None = None,
    ) -> None:
        """Initialize the root finder.

        Args:
            coefficients: Polynomial coefficients, ascending power order.
            config: Iteration limits (defaults to DEFAULT_ROOT_FINDER_CONFIG).

        Raises:
            DegeneratePolynomialError: If the polynomial rank is below 2.
        """
        self._coefficients: Coefficients = as_coefficients(coefficients)
        self._config = config if config is not None else DEFAULT_ROOT_FINDER_CONFIG
        self._rank = len(self._coefficients) - 1

        if self._rank < 2:
            msg = (
                f"Polynomials below rank 2 have trivial solutions, got rank {self._rank}"
            )
            raise DegeneratePolynomialError(msg)

        self._leading = self._coefficients[self._rank]

        start = self.initial_guesses()
        self._buffers: list[list[Complex]] = [start, list(start)]
        self._current_idx = 0

    @property
    def rank(self) -> int:
        """Degree of the polynomial being solved."""
        return self._rank

    @property
    def config(self) -> RootFinderConfig:
        return self._config

    @property
    def roots(self) -> list[Complex]:
        """Copy of the current root estimates."""
        return list(self._buffers[self._current_idx])

    def initial_guesses(self) -> list[Complex]:
        """Starting points evenly spaced on the start circle.

        Point ``i`` sits at angle ``i·(2π/n) + π/(2n)``. Components whose
        absolute value is below ``min_start_value`` are set to exactly 0.
        """
        reference = next((c for c in self._coefficients if c != 0), self._coefficients[0])
        ratio = reference.absolute() / self._leading.absolute() if self._leading != 0 else math.inf
        radius = float(np.power(ratio, 1.0 / self._rank))

        base_angle = (2 * math.pi) / self._rank
        offset = math.pi / (2 * self._rank)
        threshold = self._config.min_start_value

        guesses: list[Complex] = []
        for i in range(self._rank):
            point = polar_to_cart(PolarComplex(radius, i * base_angle + offset))
            real = 0.0 if abs(point.real) < threshold else point.real
            imaginary = 0.0 if abs(point.imaginary) < threshold else point.imaginary
            guesses.append(Complex(real, imaginary))

        logger.debug("Durand-Kerner start radius %.6g for rank %d", radius, self._rank)
        return guesses

    def iterate(self) -> IterationResult:
        """Execute one simultaneous update of every root estimate.

        Returns:
            IterationResult with the largest magnitude change and timing.
        """
        start = time.perf_counter()

        next_idx = 1 - self._current_idx
        current = self._buffers[self._current_idx]
        following = self._buffers[next_idx]

        for i, value in enumerate(current):
            denominator = self._leading
            for j, other in enumerate(current):
                if j != i:
                    denominator = denominator * (value - other)
            following[i] = value - evaluate_polynomial(value, self._coefficients) / denominator

        changes = np.array(
            [abs(old.absolute() - new.absolute()) for old, new in zip(current, following)]
        )
        # nan changes never count as converged
        converged = bool(np.all(changes < self._config.convergence_epsilon))

        self._current_idx = next_idx

        return IterationResult(
            max_change=float(np.max(changes)),
            converged=converged,
            algorithm_time=time.perf_counter() - start,
        )


@dataclass(frozen=True, slots=True)
class RootFindingTrace:
    """Complete trace of a Durand-Kerner run."""

    roots: list[Complex]
    """Final root estimates (not deduplicated)."""

    iterations: int
    """Number of iterations performed."""

    converged: bool
    """Whether the convergence test passed before the iteration ceiling."""

    max_change: float
    """Largest magnitude change in the final iteration."""

    total_time: float
    """Total execution time (seconds)."""

    history: list[dict]
    """Per-iteration metrics."""


def run_durand_kerner(
    coefficients: Sequence[Any],
    config: RootFinderConfig | None = None,
) -> RootFindingTrace:
    """Run Durand-Kerner iteration until convergence or the iteration ceiling.

    Args:
        coefficients: Polynomial coefficients, ascending power order.
        config: Iteration limits (defaults to DEFAULT_ROOT_FINDER_CONFIG).

    Returns:
        RootFindingTrace with the final estimates and execution history.

    Raises:
        DegeneratePolynomialError: If the polynomial rank is below 2.
    """
    engine = DurandKerner(coefficients, config)
    limits = engine.config

    history: list[dict] = []
    start_time = time.perf_counter()
    cumulative_algo_time = 0.0
    result: IterationResult | None = None

    while len(history) < limits.max_iterations:
        result = engine.iterate()
        cumulative_algo_time += result.algorithm_time

        history.append(
            {
                "iteration": len(history),
                "max_change": result.max_change,
                "algorithm_time": result.algorithm_time,
                "cumulative_algorithm_time": cumulative_algo_time,
            }
        )

        if result.converged:
            break

    converged = result is not None and result.converged
    if converged:
        logger.debug(
            "Durand-Kerner converged in %d iterations (rank %d)", len(history), engine.rank
        )
    else:
        logger.warning(
            "Durand-Kerner did not converge within %d iterations (rank %d)",
            limits.max_iterations,
            engine.rank,
        )

    return RootFindingTrace(
        roots=engine.roots,
        iterations=len(history),
        converged=converged,
        max_change=result.max_change if result is not None else float("nan"),
        total_time=time.perf_counter() - start_time,
        history=history,
    )


def factorize_polynomial(
    coefficients: Sequence[Any],
    config: RootFinderConfig | None = None,
) -> list[Factor]:
    """Factor a polynomial into ``rank`` linear factors ``(1, -root)``.

    Repeated roots are not merged, so the result always holds exactly
    ``rank`` factors. The factors omit the leading coefficient: multiplying
    ``compress_factors(result)`` by it reproduces the polynomial.

    Raises:
        DegeneratePolynomialError: If the polynomial rank is below 2.
    """
    trace = run_durand_kerner(coefficients, config)
    return [Factor(1.0, -root) for root in trace.roots]


__all__ = [
    "DEFAULT_ROOT_FINDER_CONFIG",
    "DurandKerner",
    "IterationResult",
    "RootFinderConfig",
    "RootFindingTrace",
    "factorize_polynomial",
    "run_durand_kerner",
]

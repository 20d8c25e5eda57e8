"""Human-readable rendering of polynomials, factors and matrices."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from rich.table import Table

from polymat.scalars.complex_types import Complex, PolarComplex

if TYPE_CHECKING:
    from polymat.algebra.matrix import Matrix


def format_scalar(value: Any) -> str:
    """Render a real with ``%g``, a complex value as ``(re±im i)``.

    Complex values with a zero imaginary part render as plain reals.
    """
    if isinstance(value, numbers.Real):
        return f"{value:g}"
    if isinstance(value, (Complex, PolarComplex)):
        if value.imaginary == 0:
            return f"{value.real:g}"
        return f"({value.real:g}{value.imaginary:+g}i)"
    return str(value)


def format_polynomial(coefficients: Sequence[Any]) -> str:
    """Render ascending coefficients, omitting zero terms.

    e.g. [-6, -1, 1] -> ``-6 -1x 1x^2``
    """
    terms: list[str] = []
    for power, coeff in enumerate(coefficients):
        if coeff == 0:
            continue
        text = format_scalar(coeff)
        if power == 1:
            text += "x"
        elif power > 1:
            text += f"x^{power}"
        terms.append(text)
    return " ".join(terms) if terms else "0"


def format_factors(factors: Iterable[tuple[Any, Any]]) -> str:
    """Render linear factors, e.g. [(1, -3), (2, 1)] -> ``(x-3)(2x+1)``."""
    parts: list[str] = []
    for linear, constant in factors:
        x_term = "x" if linear == 1 else f"{format_scalar(linear)}x"
        const = format_scalar(constant)
        if not const.startswith(("+", "-")):
            const = f"+{const}"
        parts.append(f"({x_term}{const})")
    return "".join(parts)


def matrix_table(matrix: Matrix, title: str | None = None) -> Table:
    """Build a rich Table showing every element of ``matrix``."""
    table = Table(title=title, show_header=False)
    for _ in range(matrix.col_count):
        table.add_column(justify="right")
    for row in matrix.to_list():
        table.add_row(*[format_scalar(value) for value in row])
    return table


__all__ = [
    "format_factors",
    "format_polynomial",
    "format_scalar",
    "matrix_table",
]

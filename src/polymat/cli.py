"""
Command-line interface for polymat.

Usage:
    polymat matrix-demo        Determinant and adjoint of a sample matrix
    polymat roots C0 C1 ...    Find polynomial roots (ascending coefficients)
    polymat expand R1 R2 ...   Expand (x - R1)(x - R2)... into coefficients
    polymat benchmark          Time cofactor determinants on random matrices

Negative values must follow ``--`` so they are not read as options, e.g.
``polymat roots -- 0 -16 0 0 0 4``.
"""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from polymat import __version__
from polymat.algebra import DEFAULT_SEED, Matrix, run_determinant_benchmark
from polymat.display import format_factors, format_polynomial, format_scalar, matrix_table
from polymat.errors import PolymatError
from polymat.polynomial import (
    RootFinderConfig,
    compress_factors,
    evaluate_polynomial,
    run_durand_kerner,
)
from polymat.scalars import Complex, to_complex

app = typer.Typer(
    name="polymat",
    help="Complex numbers, generic matrix algebra and polynomial root finding",
    add_completion=False,
)
console = Console()

SAMPLE_MATRIX = ((5, 6, 9), (2, 1, 6), (1, 2, 3))


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"polymat version {__version__}")
        raise typer.Exit()


def _parse_number(text: str) -> Complex:
    # Accept both 1+2i and 1+2j
    if text.endswith("i"):
        text = text[:-1] + "j"
    try:
        return to_complex(complex(text))
    except ValueError:
        raise typer.BadParameter(f"'{text}' is not a number") from None


@app.callback()  # type: ignore[misc]
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging."),
    ] = False,
) -> None:
    """polymat - numeric algebra toolkit."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@app.command("matrix-demo")  # type: ignore[misc]
def matrix_demo() -> None:
    """Show determinant and adjoint of a sample 3×3 matrix."""
    mat = Matrix(SAMPLE_MATRIX)

    console.print(matrix_table(mat, title="Matrix"))
    console.print(matrix_table(mat.adjoint(), title="Adjoint"))
    console.print(f"Determinant: {format_scalar(mat.determinant())}")


@app.command()  # type: ignore[misc]
def roots(
    coefficients: Annotated[
        list[str],
        typer.Argument(help="Coefficients in ascending power order (e.g. -- 2 -3 1)"),
    ],
    max_iterations: Annotated[
        int,
        typer.Option("--max-iter", "-i", help="Maximum iterations"),
    ] = 1000,
    epsilon: Annotated[
        float,
        typer.Option("--epsilon", "-e", help="Convergence threshold"),
    ] = 1e-10,
) -> None:
    """Find every root of a polynomial by Durand-Kerner iteration."""
    coeffs = [_parse_number(text) for text in coefficients]

    try:
        config = RootFinderConfig(max_iterations=max_iterations, convergence_epsilon=epsilon)
        trace = run_durand_kerner(coeffs, config)
    except (PolymatError, ValueError) as exc:
        console.print(f"[red]Error:[/] {exc}")
        raise typer.Exit(code=1) from None

    console.print(f"Polynomial: {format_polynomial(coeffs)}")

    table = Table(title="Roots")
    table.add_column("#", justify="right")
    table.add_column("Real", justify="right")
    table.add_column("Imaginary", justify="right")
    table.add_column("|P(root)|", justify="right")

    for index, root in enumerate(trace.roots, start=1):
        residual = evaluate_polynomial(root, coeffs).absolute()
        table.add_row(
            str(index),
            f"{root.real:.10g}",
            f"{root.imaginary:.10g}",
            f"{residual:.2e}",
        )

    console.print(table)

    status = "[green]converged[/]" if trace.converged else "[yellow]did not converge[/]"
    console.print(f"{status} after {trace.iterations} iterations")


@app.command()  # type: ignore[misc]
def expand(
    roots_: Annotated[
        list[str],
        typer.Argument(metavar="ROOTS", help="Roots r of the factors (x - r)"),
    ],
) -> None:
    """Expand a product of factors (x - r) into coefficient form."""
    factors = [(1.0, -_parse_number(text)) for text in roots_]
    console.print(f"Factors: {format_factors(factors)}")
    console.print(f"Polynomial: {format_polynomial(compress_factors(factors))}")


@app.command()  # type: ignore[misc]
def benchmark(
    sizes: Annotated[
        list[int] | None,
        typer.Option("--size", "-n", help="Matrix dimension (repeatable)"),
    ] = None,
    kind: Annotated[
        str,
        typer.Option("--kind", "-k", help="Element kind: real, complex or polar"),
    ] = "real",
    seed: Annotated[
        int,
        typer.Option("--seed", "-s", help="Random seed"),
    ] = DEFAULT_SEED,
) -> None:
    """Time cofactor-expansion determinants of random matrices."""
    if sizes is None:
        sizes = [3, 4, 5, 6]

    try:
        results = run_determinant_benchmark(sizes, element_kind=kind, seed=seed)
    except ValueError as exc:
        console.print(f"[red]Error:[/] {exc}")
        raise typer.Exit(code=1) from None

    table = Table(title="Determinant Benchmark")
    table.add_column("Size", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Determinant", justify="right")
    table.add_column("Time (ms)", justify="right")

    for result in results:
        table.add_row(
            f"{result.size}×{result.size}",
            result.element_kind.value,
            format_scalar(result.determinant),
            f"{result.elapsed * 1e3:.3f}",
        )

    console.print(table)


if __name__ == "__main__":
    app()

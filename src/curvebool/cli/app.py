"""CLI application entry point for curvebool.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from curvebool import __version__
from curvebool.cli.output import (
    console,
    print_curve_info,
    print_diagnostics,
    print_error,
    print_header,
    print_intersections_found,
    print_region_table,
    print_step,
    print_success,
)
from curvebool.config import (
    CurveboolSettings,
    LoggingConfig,
    SolverConfig,
    TraversalConfig,
)
from curvebool.core import BooleanOperation, CurveBoolean
from curvebool.exceptions import (
    CurveboolError,
    CurveFormatError,
    CurveLoadError,
    RegionSaveError,
)
from curvebool.io import CurveReader, RegionWriter
from curvebool.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="curvebool",
    help="Compute union, intersection and difference of two closed NURBS curves.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Curvebool[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def run(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON curve document holding exactly two curves",
            show_default=False,
        ),
    ],
    operation: Annotated[
        str,
        typer.Option(
            "--operation",
            "-p",
            help="Boolean operation (union|intersection|difference)",
        ),
    ] = "union",
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-{operation}.json)",
        ),
    ] = None,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            help="Crossing refinement tolerance (model units)",
        ),
    ] = 1e-9,
    max_iterations: Annotated[
        int,
        typer.Option(
            "--max-iterations",
            help="Newton iteration budget per crossing",
            min=1,
        ),
    ] = 32,
    division: Annotated[
        int,
        typer.Option(
            "--division",
            help="Flattening segments per knot span",
            min=2,
            max=512,
        ),
    ] = 16,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail on inconsistent traversal pairs instead of dropping them",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Apply a boolean operation to the two closed curves in a JSON document.

    The first curve is the subject, the second the clip. Difference keeps the
    part of the subject outside the clip.

    Example:
        curvebool shapes.json --operation intersection

    This will create shapes-intersection.json holding the resulting regions,
    the crossings and the node graph.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_file.exists():
        print_error(
            f"Input file not found: {input_file}",
            details=f"The file '{input_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_file.is_file():
        print_error(
            f"Input path is not a file: {input_file}",
            details="Please provide a path to a JSON curve document.",
        )
        raise typer.Exit(code=1)

    try:
        boolean_op = BooleanOperation(operation.lower())
    except ValueError:
        print_error(
            f"Invalid operation: {operation}",
            details="Valid values: union, intersection, difference",
        )
        raise typer.Exit(code=1)

    try:
        settings = CurveboolSettings(
            solver=SolverConfig(
                tolerance=tolerance,
                max_iterations=max_iterations,
                knot_domain_division=division,
            ),
            traversal=TraversalConfig(strict=strict),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    output_path = output if output is not None else RegionWriter.get_output_path(
        input_file, boolean_op
    )

    start_time = time.time()

    try:
        if not quiet:
            print_step("Loading curves")

        reader = CurveReader(input_file)
        reader.load()
        subject, clip = reader.pair()

        if not quiet:
            print_curve_info(
                path=str(input_file),
                curve_count=len(reader.curves),
                degrees=[subject.degree, clip.degree],
            )
            print_step(f"Computing {boolean_op.value}")

        engine = CurveBoolean(settings, logger=logger)
        result = engine.boolean(boolean_op, subject, clip)

        if not quiet:
            print_intersections_found(len(result.intersections))
            print_region_table(result.regions)
            print_diagnostics(result.diagnostics, verbose)

        RegionWriter(output_path).write(result, division)

        if not quiet:
            print_success(
                output_path=str(output_path),
                total_time_s=time.time() - start_time,
                operation=boolean_op.value,
                regions=len(result.regions),
                diagnostics=len(result.diagnostics),
            )

    except CurveLoadError as e:
        print_error(f"Could not load curves: {e.reason}")
        raise typer.Exit(code=1)
    except CurveFormatError as e:
        print_error(f"Invalid curve document: {e.details}")
        raise typer.Exit(code=1)
    except RegionSaveError as e:
        print_error(f"Could not save regions: {e.reason}")
        raise typer.Exit(code=1)
    except CurveboolError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

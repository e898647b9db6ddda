"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from curvebool.core.traversal import TraversalDiagnostic
from curvebool.domain import Region

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Curvebool[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_curve_info(path: str, curve_count: int, degrees: list[int]) -> None:
    """Print loaded document information.

    Args:
        path: Path to the curve document
        curve_count: Number of curves in the document
        degrees: Degree of each curve
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    degree_str = ", ".join(str(d) for d in degrees)
    console.print(f"  {curve_count} curves {SYM_DOT} degree {degree_str}")


def print_intersections_found(count: int) -> None:
    """Print crossing discovery result."""
    console.print(f"  [green]{count}[/green] transversal crossings")


def print_region_table(regions: list[Region], division: int = 64) -> None:
    """Print one row per region with span count and boundary length.

    Args:
        regions: Regions to list
        division: Flattening density for length estimates
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Region", justify="right")
    table.add_column("Spans", justify="right")
    table.add_column("Length", justify="right")

    for index, region in enumerate(regions):
        table.add_row(
            str(index),
            str(len(region.exterior)),
            f"{region.boundary_length(division):.4f}",
        )

    console.print(table)


def print_diagnostics(diagnostics: list[TraversalDiagnostic], verbose: bool) -> None:
    """Print a warning for dropped traversal pairs.

    Args:
        diagnostics: Dropped pairs
        verbose: Whether to list each pair
    """
    if not diagnostics:
        return

    console.print(
        f"\n[bold yellow]{SYM_WARN} {len(diagnostics)} inconsistent pairs dropped[/bold yellow]"
        " (near-degenerate input)"
    )
    if verbose:
        for d in diagnostics:
            console.print(f"  {d.first} {SYM_DOT} {d.second} {SYM_DOT} {d.message}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    operation: str,
    regions: int,
    diagnostics: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        operation: Applied boolean operation
        regions: Number of regions produced
        diagnostics: Number of dropped traversal pairs
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    warn_style = "yellow" if diagnostics > 0 else "green"
    console.print(
        f"  {operation} {SYM_DOT} {regions} regions {SYM_DOT} "
        f"[{warn_style}]{diagnostics} diagnostics[/{warn_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")

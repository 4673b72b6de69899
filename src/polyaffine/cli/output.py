"""Rich console output helpers for the CLI.

This module provides the console adapter: vertex listings for each sample
polygon and the tangent/normal comparison table.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from polyaffine.core.showcase import NormalDemo, TransformSample
from polyaffine.domain import Polygon

console = Console(highlight=False)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error


def format_vector(v: Sequence[float]) -> str:
    """Format a vector as [x, y] with up to 6 decimals."""
    return "[" + ", ".join(f"{round(c, 6)!r}" for c in v) + "]"


def format_matrix(m: Sequence[Sequence[float]]) -> str:
    """Format a matrix as [[a, b], [c, d]]."""
    return "[" + ", ".join(format_vector(row) for row in m) + "]"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Polyaffine[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_polygon(label: str, polygon: Polygon) -> None:
    """Print a polygon's vertices, one per line.

    Args:
        label: Heading printed above the vertices
        polygon: Polygon to list
    """
    console.print(Text(f"{label}:", style="bold"))
    for i, point in enumerate(polygon, start=1):
        console.print(Text(f"  P{i:<2d} {point}"))
    console.print()


def print_samples(samples: list[TransformSample]) -> None:
    """Print every sample polygon in order."""
    for sample in samples:
        print_polygon(sample.label, sample.polygon)


def print_normal_demo(demo: NormalDemo) -> None:
    """Print the naive and corrected normal transformation side by side.

    Args:
        demo: Tangent/normal comparison to display
    """
    console.print(Text("Normal transformation (inverse transpose)", style="bold"))
    console.print("-" * 50)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("name", style="dim")
    table.add_column("value")
    table.add_column("check")

    table.add_row("Tangent", format_vector(demo.tangent), "")
    table.add_row("Normal", format_vector(demo.normal), "")
    table.add_row("M", format_matrix(demo.matrix), "")
    table.add_row("M*t", format_vector(demo.transformed_tangent), "")
    table.add_row(
        "M*n (wrong)",
        format_vector(demo.naive_normal),
        Text(f"dot(M*t, M*n)={round(demo.naive_dot, 6)}", style="red"),
    )
    table.add_row(
        "inv(M)^T*n (right)",
        format_vector(demo.corrected_normal),
        Text(f"dot(M*t, invT*n)={round(demo.corrected_dot, 6)}", style="green"),
    )
    console.print(table)
    console.print()


def print_exported(path: str) -> None:
    """Print the location of an exported document."""
    line = Text(f"{SYM_OK} HTML written: ", style="bold green")
    line.append(path, style="bold")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    line = Text(f"\n{SYM_ERR} Error: ", style="bold red")
    line.append(message)
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))

"""Console output — route summary with Rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from gridroute.engine import RouteResult


def format_distance(value: float) -> str:
    return f"{value:g}"


def render_console(
    result: RouteResult,
    separator: str = " -> ",
    show_trace: bool = False,
    console: Console | None = None,
) -> None:
    """Print the path as a label sequence and its total distance."""
    console = console or Console()

    if show_trace:
        table = Table(title="Relaxations")
        table.add_column("Round", justify="right")
        table.add_column("Current")
        table.add_column("Neighbor")
        table.add_column("Previous", justify="right")
        table.add_column("Candidate", justify="right")
        table.add_column("Relabeled")
        for r in result.relaxations:
            table.add_row(
                str(r.round),
                r.current.label,
                r.neighbor.label,
                format_distance(r.previous),
                format_distance(r.candidate),
                "yes" if r.improved else "",
            )
        console.print(table)

    console.print(f"Path: {result.labels(separator)}")
    if result.reached:
        console.print(f"Total distance: {format_distance(result.total_distance)}")
    else:
        console.print(
            f"[red]Unreachable:[/red] {result.destination.label} "
            f"cannot be reached from {result.source.label}"
        )
    console.print(f"Rounds: {result.rounds}")

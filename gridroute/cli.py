"""CLI entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn

import typer

from gridroute.config import load_config
from gridroute.engine import ShortestPathEngine
from gridroute.graph import InvalidNodeError
from gridroute.graph_file import GraphFileError, load_graph, resolve_node
from gridroute.output_console import render_console
from gridroute.output_json import build_report, render_json
from gridroute.samples import SAMPLES, get_sample

app = typer.Typer(no_args_is_help=True)


@app.callback(invoke_without_command=True)
def _callback() -> None:
    """gridroute — shortest paths over directed grids."""


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise SystemExit(2)


@app.command()
def route(
    sample: Annotated[
        str | None, typer.Option("--sample", help="Name of a built-in geometry")
    ] = None,
    graph_path: Annotated[
        Path | None, typer.Option("--graph", help="Path to a YAML/JSON graph document")
    ] = None,
    source_label: Annotated[
        str | None, typer.Option("--from", help="Source node label")
    ] = None,
    destination_label: Annotated[
        str | None, typer.Option("--to", help="Destination node label")
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Settings file (default: ./gridroute.yml if present)"),
    ] = None,
    out: Annotated[
        Path | None, typer.Option("--out", help="Directory to write route.json into")
    ] = None,
    trace: Annotated[bool, typer.Option("--trace", help="Show every relaxation")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")] = False,
) -> None:
    """Compute the shortest path between two nodes."""
    if verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG)

    if (sample is None) == (graph_path is None):
        _fail("pass exactly one of --sample or --graph")

    if sample is not None:
        try:
            loaded = get_sample(sample)
        except KeyError:
            _fail(f"unknown sample '{sample}'. Valid values: {', '.join(SAMPLES)}.")
        graph, source, destination = loaded.graph, loaded.source, loaded.destination
    else:
        try:
            doc = load_graph(graph_path)
        except GraphFileError as e:
            _fail(str(e))
        graph, source, destination = doc.graph, doc.source, doc.destination

    try:
        if source_label is not None:
            source = resolve_node(graph, source_label)
        if destination_label is not None:
            destination = resolve_node(graph, destination_label)
    except InvalidNodeError as e:
        _fail(e.args[0])

    if source is None or destination is None:
        _fail("source and destination are required (--from/--to or in the graph file)")

    cfg = load_config(config_path)
    result = ShortestPathEngine(cfg).run(graph, source, destination)

    render_console(result, cfg.label_separator, show_trace=trace)

    if out is not None:
        report = build_report(result, graph, cfg.label_separator)
        json_path = render_json(report, out)
        typer.echo(f"Wrote route (JSON): {json_path.resolve()}")

    if not result.reached and cfg.fail_on_unreachable:
        raise SystemExit(1)


@app.command()
def samples() -> None:
    """List the built-in geometries."""
    for name in SAMPLES:
        s = get_sample(name)
        typer.echo(
            f"{name}: {s.description} ({len(s.graph)} nodes, "
            f"{s.source.label} -> {s.destination.label})"
        )

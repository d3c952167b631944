"""JSON output — deterministic route.json generation."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from gridroute.engine import RouteResult
    from gridroute.graph import Graph
    from gridroute.model import Node

from gridroute.model import INFINITY, ReportNode, ReportRelaxation, RouteReport


def build_report(result: RouteResult, graph: Graph, separator: str = " -> ") -> RouteReport:
    """Convert a run into its serializable report."""
    return RouteReport(
        nodes=[_node(n) for n in graph.nodes],
        source=_node(result.source),
        destination=_node(result.destination),
        outcome=result.outcome,
        path=[_node(n) for n in result.path],
        path_labels=result.labels(separator),
        total_distance=result.total_distance if result.reached else None,
        rounds=result.rounds,
        relaxations=[
            ReportRelaxation(
                round=r.round,
                current=r.current.id,
                neighbor=r.neighbor.id,
                previous=None if r.previous == INFINITY else r.previous,
                candidate=r.candidate,
                improved=r.improved,
            )
            for r in result.relaxations
        ],
    )


def render_json(report: RouteReport, out_path: Path) -> Path:
    """Write byte-deterministic route.json and return the written path."""
    from pathlib import Path as _Path

    data = report.model_dump(mode="json")
    _Path(str(out_path)).mkdir(parents=True, exist_ok=True)
    out_file = _Path(str(out_path), "route.json")
    out_file.write_text(
        json.dumps(data, sort_keys=True, indent=2) + "\n",
        encoding="utf-8",
    )
    return out_file


def _node(node: Node) -> ReportNode:
    return ReportNode(id=node.id, label=node.label)

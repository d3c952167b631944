"""Path reconstruction and distance accumulation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridroute.graph import Graph
    from gridroute.ledger import DistanceLedger
    from gridroute.model import Node


def reconstruct(ledger: DistanceLedger, destination: Node) -> list[Node]:
    """Walk predecessors back from *destination*; the result always contains it."""
    path: list[Node] = [destination]
    current = ledger.predecessor(destination)
    while current is not None:
        path.append(current)
        current = ledger.predecessor(current)
    path.reverse()
    return path


def total_distance(graph: Graph, path: list[Node]) -> float:
    """Sum of edge weights along *path*, INFINITY if a hop has no direct edge."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        total += graph.weight(a, b)
    return total

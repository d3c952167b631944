"""Distance ledger — per-run tentative distances, predecessors, unvisited set."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridroute.model import INFINITY

if TYPE_CHECKING:
    from gridroute.graph import Graph
    from gridroute.model import Node


class LedgerError(RuntimeError):
    """Raised when a write would break a ledger invariant."""


class DistanceLedger:
    """Mutable state of a single shortest-path run.

    Keys are node ids, never labels. The source starts at distance 0 and is
    excluded from the unvisited set because it is the first current node.
    """

    def __init__(self, graph: Graph, source: Node) -> None:
        graph.require(source)
        self.source = source
        self._distances: dict[int, float] = {source.id: 0.0}
        self._predecessors: dict[int, Node] = {}
        # dict keeps insertion order, which gives the frontier a stable scan order
        self._unvisited: dict[int, Node] = {
            n.id: n for n in graph.nodes if n.id != source.id
        }
        self._visited: set[int] = set()

    def distance(self, node: Node) -> float:
        return self._distances.get(node.id, INFINITY)

    def set_distance(self, node: Node, value: float) -> None:
        self._check_writable(node)
        if value > self.distance(node):
            raise LedgerError(
                f"Distance of {node.label!r} would increase from {self.distance(node)} to {value}"
            )
        self._distances[node.id] = value

    def predecessor(self, node: Node) -> Node | None:
        return self._predecessors.get(node.id)

    def set_predecessor(self, node: Node, value: Node) -> None:
        self._check_writable(node)
        self._predecessors[node.id] = value

    def mark_visited(self, node: Node) -> None:
        self._unvisited.pop(node.id, None)
        self._visited.add(node.id)

    def is_unvisited(self, node: Node) -> bool:
        return node.id in self._unvisited

    def unvisited_nodes(self) -> list[Node]:
        return list(self._unvisited.values())

    def _check_writable(self, node: Node) -> None:
        if node.id in self._visited:
            raise LedgerError(f"Node {node.label!r} is already settled")

"""Graph model — build_graph, weight and adjacency queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from gridroute.model import INFINITY, Direction, Node

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from gridroute.model import Edge


class InvalidNodeError(KeyError):
    """Raised when a node passed to a graph query does not belong to that graph."""


class GraphBuildError(ValueError):
    """Raised when nodes or edges cannot form a valid graph."""


@dataclass(frozen=True)
class Graph:
    nodes: tuple[Node, ...] = ()
    # node id -> direction -> (target id, weight)
    adjacency: Mapping[int, Mapping[Direction, tuple[int, float]]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node: object) -> bool:
        if not isinstance(node, Node):
            return False
        return node.id < len(self.nodes) and self.nodes[node.id] is node

    def require(self, node: Node) -> Node:
        """Return *node* if it is one of this graph's nodes, else raise InvalidNodeError."""
        if node not in self:
            raise InvalidNodeError(f"Node {node!r} does not belong to this graph")
        return node

    def node_at(self, index: int) -> Node:
        if not 0 <= index < len(self.nodes):
            raise InvalidNodeError(f"No node at index {index}")
        return self.nodes[index]

    def find(self, label: str) -> list[Node]:
        """All nodes carrying *label*, in table order."""
        return [n for n in self.nodes if n.label == label]

    def weight(self, from_node: Node, to_node: Node) -> float:
        """Direct edge weight from *from_node* to *to_node*, or INFINITY."""
        self.require(from_node)
        self.require(to_node)
        for target_id, weight in self.adjacency[from_node.id].values():
            if target_id == to_node.id:
                return weight
        return INFINITY

    def neighbors(self, node: Node) -> list[Node]:
        """Directly reachable nodes, east first."""
        self.require(node)
        out = self.adjacency[node.id]
        return [self.nodes[out[d][0]] for d in Direction if d in out]

    def east(self, node: Node) -> Node | None:
        return self._step(node, Direction.EAST)

    def south(self, node: Node) -> Node | None:
        return self._step(node, Direction.SOUTH)

    def _step(self, node: Node, direction: Direction) -> Node | None:
        self.require(node)
        hop = self.adjacency[node.id].get(direction)
        if hop is None:
            return None
        return self.nodes[hop[0]]


def make_nodes(labels: Iterable[str]) -> list[Node]:
    """Build a node table from display labels."""
    return [Node(id=i, label=label) for i, label in enumerate(labels)]


def build_graph(nodes: list[Node], edges: list[Edge]) -> Graph:
    """Build an immutable graph from a node table and directed edges."""
    for position, node in enumerate(nodes):
        if node.id != position:
            raise GraphBuildError(
                f"Node {node.label!r} has id {node.id}, expected {position}"
            )

    adjacency: dict[int, dict[Direction, tuple[int, float]]] = {n.id: {} for n in nodes}
    for edge in edges:
        for endpoint in (edge.from_id, edge.to_id):
            if endpoint not in adjacency:
                raise GraphBuildError(f"Edge endpoint {endpoint} is not a node id")
        if edge.from_id == edge.to_id:
            raise GraphBuildError(f"Self-loop on node {edge.from_id}")
        out = adjacency[edge.from_id]
        if edge.direction in out:
            raise GraphBuildError(
                f"Node {edge.from_id} already has an {edge.direction.value} edge"
            )
        if any(target == edge.to_id for target, _ in out.values()):
            raise GraphBuildError(
                f"Node {edge.from_id} already has an edge to node {edge.to_id}"
            )
        out[edge.direction] = (edge.to_id, edge.weight)

    frozen = {node_id: MappingProxyType(out) for node_id, out in adjacency.items()}
    return Graph(nodes=tuple(nodes), adjacency=MappingProxyType(frozen))

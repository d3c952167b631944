"""Graph document loader — parses a YAML/JSON graph file into a Graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gridroute.graph import Graph, GraphBuildError, InvalidNodeError, build_graph, make_nodes
from gridroute.logger import logger
from gridroute.model import Direction, Edge, Node

if TYPE_CHECKING:
    from pathlib import Path

NodeRef = int | str


class GraphFileError(Exception):
    """Raised when a graph document is unreadable, malformed or inconsistent."""


class EdgeSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_ref: NodeRef = Field(alias="from")
    to_ref: NodeRef = Field(alias="to")
    direction: Direction
    weight: float = Field(ge=0)


class GraphDocument(BaseModel):
    nodes: list[str]
    edges: list[EdgeSpec] = Field(default_factory=list)
    source: NodeRef | None = None
    destination: NodeRef | None = None


@dataclass
class LoadedGraph:
    graph: Graph
    source: Node | None = None
    destination: Node | None = None


def resolve_node(graph: Graph, ref: NodeRef) -> Node:
    """Resolve an index or a unique label to one of *graph*'s nodes."""
    if isinstance(ref, int):
        return graph.node_at(ref)
    matches = graph.find(ref)
    if not matches:
        raise InvalidNodeError(f"No node labelled {ref!r}")
    if len(matches) > 1:
        raise InvalidNodeError(
            f"Label {ref!r} is shared by {len(matches)} nodes; refer to it by index"
        )
    return matches[0]


def parse_document(raw: object) -> LoadedGraph:
    """Validate an already-decoded document and build its graph."""
    if not isinstance(raw, dict):
        raise GraphFileError("Graph document must be a mapping")
    try:
        doc = GraphDocument.model_validate(raw)
    except ValidationError as e:
        raise GraphFileError(f"Invalid graph document: {e}") from e

    nodes = make_nodes(doc.nodes)
    # A graph without edges is enough to resolve references
    table = build_graph(nodes, [])
    try:
        edges = [
            Edge(
                from_id=resolve_node(table, spec.from_ref).id,
                to_id=resolve_node(table, spec.to_ref).id,
                direction=spec.direction,
                weight=spec.weight,
            )
            for spec in doc.edges
        ]
        graph = build_graph(nodes, edges)
        source = resolve_node(graph, doc.source) if doc.source is not None else None
        destination = (
            resolve_node(graph, doc.destination) if doc.destination is not None else None
        )
    except InvalidNodeError as e:
        raise GraphFileError(e.args[0]) from e
    except GraphBuildError as e:
        raise GraphFileError(str(e)) from e

    logger.debug("Loaded graph with %d node(s) and %d edge(s)", len(nodes), len(edges))
    return LoadedGraph(graph=graph, source=source, destination=destination)


def load_graph(path: Path) -> LoadedGraph:
    """Read a graph document from *path*."""
    from pathlib import Path as _Path

    p = _Path(str(path))
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise GraphFileError(f"Graph file not found: {path}") from e
    except OSError as e:
        raise GraphFileError(f"Cannot read graph file {path}: {e}") from e

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise GraphFileError(f"Malformed graph file {path}: {e}") from e

    return parse_document(raw)

"""Built-in sample geometries.

Geometry one is a 3x3 grid::

    a - 2 - b - 3 - c
    |       |       |
    1       2       1
    |       |       |
    d - 1 - e - 1 - f
    |               |
    2               4
    |               |
    g - 1 - h - 2 - i

Geometry two adds a fourth column ``j``/``k`` east of ``c`` and ``i``::

    c - 1 - j
            |
            1
            |
    i - 2 - k
"""

from __future__ import annotations

from dataclasses import dataclass

from gridroute.graph import Graph, build_graph, make_nodes
from gridroute.model import Direction, Edge, Node

E = Direction.EAST
S = Direction.SOUTH

_GRID_ONE_LABELS = ["a", "b", "c", "d", "e", "f", "g", "h", "i"]

_GRID_ONE_EDGES: list[tuple[str, str, Direction, float]] = [
    ("a", "b", E, 2),
    ("b", "c", E, 3),
    ("c", "f", S, 1),
    ("f", "i", S, 4),
    ("b", "e", S, 2),
    ("e", "f", E, 1),
    ("a", "d", S, 1),
    ("d", "g", S, 2),
    ("g", "h", E, 1),
    ("h", "i", E, 2),
    ("d", "e", E, 1),
]

_GRID_TWO_EXTRA: list[tuple[str, str, Direction, float]] = [
    ("c", "j", E, 1),
    ("j", "k", S, 1),
    ("i", "k", E, 2),
]


@dataclass(frozen=True)
class Sample:
    name: str
    description: str
    graph: Graph
    source: Node
    destination: Node


def _build(
    name: str,
    description: str,
    labels: list[str],
    edges: list[tuple[str, str, Direction, float]],
    source: str,
    destination: str,
) -> Sample:
    nodes = make_nodes(labels)
    index = {n.label: n.id for n in nodes}
    graph = build_graph(
        nodes,
        [
            Edge(from_id=index[a], to_id=index[b], direction=d, weight=w)
            for a, b, d, w in edges
        ],
    )
    return Sample(
        name=name,
        description=description,
        graph=graph,
        source=graph.nodes[index[source]],
        destination=graph.nodes[index[destination]],
    )


def geometry_one() -> Sample:
    return _build(
        "one", "3x3 grid, a to i", _GRID_ONE_LABELS, _GRID_ONE_EDGES, "a", "i"
    )


def geometry_two() -> Sample:
    return _build(
        "two",
        "3x3 grid plus j/k column, a to k",
        _GRID_ONE_LABELS + ["j", "k"],
        _GRID_ONE_EDGES + _GRID_TWO_EXTRA,
        "a",
        "k",
    )


SAMPLES = {
    "one": geometry_one,
    "two": geometry_two,
}


def get_sample(name: str) -> Sample:
    """Build the sample registered under *name*, raise KeyError if unknown."""
    return SAMPLES[name]()

"""Tests for graph.build_graph and graph queries."""

from __future__ import annotations

import pytest

from gridroute.graph import GraphBuildError, InvalidNodeError, build_graph, make_nodes
from gridroute.model import INFINITY, Direction, Edge, Node
from gridroute.samples import Sample


def _edge(a: int, b: int, direction: Direction, weight: float = 1.0) -> Edge:
    return Edge(from_id=a, to_id=b, direction=direction, weight=weight)


class TestQueries:
    def test_weight_of_direct_edge(self, grid_one: Sample) -> None:
        g = grid_one.graph
        a, b = g.find("a")[0], g.find("b")[0]
        assert g.weight(a, b) == 2

    def test_missing_edge_is_infinite(self, grid_one: Sample) -> None:
        g = grid_one.graph
        a, i = g.find("a")[0], g.find("i")[0]
        assert g.weight(a, i) == INFINITY

    def test_edges_are_directed(self, grid_one: Sample) -> None:
        g = grid_one.graph
        a, b = g.find("a")[0], g.find("b")[0]
        assert g.weight(b, a) == INFINITY

    def test_neighbors_east_then_south(self, grid_one: Sample) -> None:
        g = grid_one.graph
        a = g.find("a")[0]
        assert [n.label for n in g.neighbors(a)] == ["b", "d"]

    def test_east_and_south(self, grid_one: Sample) -> None:
        g = grid_one.graph
        c = g.find("c")[0]
        assert g.east(c) is None
        assert g.south(c) is g.find("f")[0]

    def test_sink_has_no_neighbors(self, grid_one: Sample) -> None:
        g = grid_one.graph
        assert g.neighbors(g.find("i")[0]) == []


class TestIdentity:
    def test_shared_labels_stay_distinct(self) -> None:
        nodes = make_nodes(["x", "x"])
        g = build_graph(nodes, [_edge(0, 1, Direction.EAST, 3)])
        first, second = g.find("x")
        assert first is not second
        assert g.weight(first, second) == 3
        assert g.weight(second, first) == INFINITY

    def test_foreign_node_rejected(self, grid_one: Sample) -> None:
        stranger = Node(id=0, label="a")
        with pytest.raises(InvalidNodeError):
            grid_one.graph.neighbors(stranger)

    def test_out_of_range_node_rejected(self, grid_one: Sample) -> None:
        with pytest.raises(InvalidNodeError):
            grid_one.graph.weight(grid_one.source, Node(id=99, label="zz"))

    def test_node_at(self, grid_one: Sample) -> None:
        assert grid_one.graph.node_at(0) is grid_one.source
        with pytest.raises(InvalidNodeError):
            grid_one.graph.node_at(-1)


class TestBuildValidation:
    def test_ids_must_match_positions(self) -> None:
        with pytest.raises(GraphBuildError):
            build_graph([Node(id=1, label="a")], [])

    def test_unknown_endpoint(self) -> None:
        with pytest.raises(GraphBuildError):
            build_graph(make_nodes(["a"]), [_edge(0, 5, Direction.EAST)])

    def test_duplicate_direction(self) -> None:
        nodes = make_nodes(["a", "b", "c"])
        with pytest.raises(GraphBuildError):
            build_graph(nodes, [_edge(0, 1, Direction.EAST), _edge(0, 2, Direction.EAST)])

    def test_self_loop(self) -> None:
        with pytest.raises(GraphBuildError):
            build_graph(make_nodes(["a"]), [_edge(0, 0, Direction.SOUTH)])

    def test_negative_weight_rejected_by_model(self) -> None:
        with pytest.raises(ValueError):
            _edge(0, 1, Direction.EAST, -1)

    def test_east_and_south_to_same_node(self) -> None:
        nodes = make_nodes(["a", "b"])
        with pytest.raises(GraphBuildError, match="already has an edge to node 1"):
            build_graph(
                nodes,
                [_edge(0, 1, Direction.EAST, 5), _edge(0, 1, Direction.SOUTH, 1)],
            )


class TestImmutability:
    def test_adjacency_is_read_only(self, grid_one: Sample) -> None:
        g = grid_one.graph
        with pytest.raises(TypeError):
            g.adjacency[0] = {}  # type: ignore[index]
        with pytest.raises(TypeError):
            g.adjacency[0][Direction.EAST] = (8, 0.0)  # type: ignore[index]
        assert g.east(grid_one.source) is g.find("b")[0]

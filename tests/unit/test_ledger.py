"""Tests for ledger.DistanceLedger and frontier.select_next."""

from __future__ import annotations

import pytest

from gridroute.frontier import select_next
from gridroute.graph import InvalidNodeError, build_graph, make_nodes
from gridroute.ledger import DistanceLedger, LedgerError
from gridroute.model import INFINITY, Node
from gridroute.samples import Sample


class TestInitialState:
    def test_source_at_zero_others_infinite(self, grid_one: Sample) -> None:
        ledger = DistanceLedger(grid_one.graph, grid_one.source)
        assert ledger.distance(grid_one.source) == 0
        assert ledger.distance(grid_one.destination) == INFINITY

    def test_source_not_unvisited(self, grid_one: Sample) -> None:
        ledger = DistanceLedger(grid_one.graph, grid_one.source)
        assert not ledger.is_unvisited(grid_one.source)
        assert len(ledger.unvisited_nodes()) == len(grid_one.graph) - 1

    def test_no_predecessors(self, grid_one: Sample) -> None:
        ledger = DistanceLedger(grid_one.graph, grid_one.source)
        assert all(ledger.predecessor(n) is None for n in grid_one.graph.nodes)

    def test_foreign_source_rejected(self, grid_one: Sample) -> None:
        with pytest.raises(InvalidNodeError):
            DistanceLedger(grid_one.graph, Node(id=0, label="a"))


class TestWrites:
    def test_set_and_read(self, grid_one: Sample) -> None:
        g = grid_one.graph
        ledger = DistanceLedger(g, grid_one.source)
        b = g.find("b")[0]
        ledger.set_distance(b, 2)
        ledger.set_predecessor(b, grid_one.source)
        assert ledger.distance(b) == 2
        assert ledger.predecessor(b) is grid_one.source

    def test_distance_cannot_increase(self, grid_one: Sample) -> None:
        g = grid_one.graph
        ledger = DistanceLedger(g, grid_one.source)
        b = g.find("b")[0]
        ledger.set_distance(b, 2)
        with pytest.raises(LedgerError):
            ledger.set_distance(b, 3)

    def test_settled_node_is_frozen(self, grid_one: Sample) -> None:
        g = grid_one.graph
        ledger = DistanceLedger(g, grid_one.source)
        b = g.find("b")[0]
        ledger.set_distance(b, 2)
        ledger.mark_visited(b)
        assert not ledger.is_unvisited(b)
        with pytest.raises(LedgerError):
            ledger.set_distance(b, 1)
        with pytest.raises(LedgerError):
            ledger.set_predecessor(b, grid_one.source)


class TestSelectNext:
    def test_picks_minimum(self, grid_one: Sample) -> None:
        g = grid_one.graph
        ledger = DistanceLedger(g, grid_one.source)
        b, d = g.find("b")[0], g.find("d")[0]
        ledger.set_distance(b, 2)
        ledger.set_distance(d, 1)
        assert select_next(ledger) is d

    def test_tie_goes_to_first_in_table_order(self) -> None:
        nodes = make_nodes(["s", "p", "q"])
        g = build_graph(nodes, [])
        ledger = DistanceLedger(g, nodes[0])
        ledger.set_distance(nodes[2], 4)
        ledger.set_distance(nodes[1], 4)
        assert select_next(ledger) is nodes[1]

    def test_all_infinite_returns_none(self, grid_one: Sample) -> None:
        ledger = DistanceLedger(grid_one.graph, grid_one.source)
        assert select_next(ledger) is None

    def test_empty_returns_none(self) -> None:
        nodes = make_nodes(["only"])
        ledger = DistanceLedger(build_graph(nodes, []), nodes[0])
        assert select_next(ledger) is None

"""Frontier selection — next node to settle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridroute.model import INFINITY

if TYPE_CHECKING:
    from gridroute.ledger import DistanceLedger
    from gridroute.model import Node


def select_next(ledger: DistanceLedger) -> Node | None:
    """Return the unvisited node with the smallest finite distance.

    Ties go to the first node in the ledger's iteration order. Returns None
    when nothing is unvisited or every unvisited node is still at infinity.
    """
    best: Node | None = None
    best_distance = INFINITY
    for node in ledger.unvisited_nodes():
        d = ledger.distance(node)
        if d < best_distance:
            best = node
            best_distance = d
    return best

"""Shortest-path engine — relaxation rounds over a distance ledger."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from gridroute.frontier import select_next
from gridroute.ledger import DistanceLedger
from gridroute.logger import logger
from gridroute.model import INFINITY, RouteConfig, RouteOutcome
from gridroute.path import reconstruct, total_distance

if TYPE_CHECKING:
    from gridroute.graph import Graph
    from gridroute.model import Node


class EngineState(StrEnum):
    ACTIVE = "active"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class Relaxation:
    """One neighbour examined during a round."""

    round: int
    current: Node
    neighbor: Node
    previous: float
    candidate: float
    improved: bool


@dataclass
class RouteResult:
    ledger: DistanceLedger
    source: Node
    destination: Node
    path: list[Node] = field(default_factory=list)
    total_distance: float = INFINITY
    outcome: RouteOutcome = RouteOutcome.UNREACHABLE
    rounds: int = 0
    relaxations: list[Relaxation] = field(default_factory=list)

    @property
    def reached(self) -> bool:
        return self.outcome == RouteOutcome.REACHED

    def labels(self, separator: str = " -> ") -> str:
        return separator.join(n.label for n in self.path)


class ShortestPathEngine:
    """Dijkstra over a Graph, one fresh ledger per run.

    The engine holds no per-run state, so one instance may serve many runs
    against the same read-only graph.
    """

    def __init__(self, config: RouteConfig | None = None) -> None:
        self.config = config or RouteConfig()

    def run(self, graph: Graph, source: Node, destination: Node) -> RouteResult:
        graph.require(source)
        graph.require(destination)

        ledger = DistanceLedger(graph, source)
        result = RouteResult(ledger=ledger, source=source, destination=destination)

        state = EngineState.ACTIVE
        current = source
        while state == EngineState.ACTIVE:
            result.rounds += 1
            self._relax_neighbors(graph, ledger, current, result)
            ledger.mark_visited(current)
            logger.debug(
                "Round %d settled %s at %s", result.rounds, current.label, ledger.distance(current)
            )

            if not ledger.unvisited_nodes():
                state = EngineState.TERMINATED
            elif self.config.stop_at_destination and current.id == destination.id:
                state = EngineState.TERMINATED
            else:
                nxt = select_next(ledger)
                if nxt is None:
                    logger.debug(
                        "%d node(s) left at infinite distance", len(ledger.unvisited_nodes())
                    )
                    state = EngineState.TERMINATED
                else:
                    current = nxt

        result.path = reconstruct(ledger, destination)
        if ledger.distance(destination) == INFINITY:
            result.outcome = RouteOutcome.UNREACHABLE
            result.total_distance = INFINITY
            logger.info(
                "Destination %s unreachable from %s after %d round(s)",
                destination.label,
                source.label,
                result.rounds,
            )
        else:
            result.outcome = RouteOutcome.REACHED
            result.total_distance = total_distance(graph, result.path)
            logger.info(
                "Shortest path %s -> %s: %s hop(s), distance %s, %d round(s)",
                source.label,
                destination.label,
                len(result.path) - 1,
                result.total_distance,
                result.rounds,
            )
        return result

    def _relax_neighbors(
        self, graph: Graph, ledger: DistanceLedger, current: Node, result: RouteResult
    ) -> None:
        base = ledger.distance(current)
        for neighbor in graph.neighbors(current):
            if not ledger.is_unvisited(neighbor):
                continue
            previous = ledger.distance(neighbor)
            candidate = base + graph.weight(current, neighbor)
            improved = candidate < previous
            if improved:
                ledger.set_distance(neighbor, candidate)
                ledger.set_predecessor(neighbor, current)
            result.relaxations.append(
                Relaxation(
                    round=result.rounds,
                    current=current,
                    neighbor=neighbor,
                    previous=previous,
                    candidate=candidate,
                    improved=improved,
                )
            )

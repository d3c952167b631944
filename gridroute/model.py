"""Canonical model — nodes, edges, route outcomes, config."""

from __future__ import annotations

import math
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

INFINITY = math.inf


class Direction(StrEnum):
    """The only two edge directions a grid node can have."""

    EAST = "east"
    SOUTH = "south"


class RouteOutcome(StrEnum):
    REACHED = "reached"
    UNREACHABLE = "unreachable"


class Node(BaseModel):
    """A graph node. ``id`` is its position in the node table; labels may repeat."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    label: str


class Edge(BaseModel):
    model_config = ConfigDict(frozen=True)

    from_id: int
    to_id: int
    direction: Direction
    weight: float = Field(ge=0)


class RouteConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    stop_at_destination: bool = False
    fail_on_unreachable: bool = True
    label_separator: str = Field(default=" -> ", min_length=1)


class ReportNode(BaseModel):
    id: int
    label: str


class ReportRelaxation(BaseModel):
    round: int
    current: int
    neighbor: int
    previous: float | None
    candidate: float
    improved: bool


class RouteReport(BaseModel):
    """Serialized form of a run, written as route.json."""

    nodes: list[ReportNode]
    source: ReportNode
    destination: ReportNode
    outcome: RouteOutcome
    path: list[ReportNode] = Field(default_factory=list)
    path_labels: str = ""
    # None when the destination is unreachable
    total_distance: float | None = None
    rounds: int = 0
    relaxations: list[ReportRelaxation] = Field(default_factory=list)

"""Layout IR — positioned nodes and routed edges, plus geometry constants."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import networkx as nx

from automaton_sketch.graph import Edge, GraphKind, Node, build_digraph

# ─── Geometry Constants (canvas units) ────────────────────────────────────────

DEFAULT_WIDTH: int = 800
DEFAULT_HEIGHT: int = 600

NODE_RADIUS: int = 30  # rendered state circle radius
CURVE_OFFSET: int = 40  # control-point distance from the chord midpoint
LABEL_OFFSET: int = 10  # straight-edge label distance from the line

# Self-loop cubic, relative to the top of the node circle.
SELF_LOOP_SPREAD: int = 10  # half the gap between loop start and end
SELF_LOOP_CONTROL_SPREAD: int = 30
SELF_LOOP_HEIGHT: int = 50
SELF_LOOP_LABEL_RISE: int = 55


@dataclass(frozen=True)
class Point:
    """A 2D point in canvas coordinates (y grows downward)."""

    x: float
    y: float


# ─── Positioned Graph ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class PositionedNode:
    """A state with the coordinates layout assigned to its centre."""

    node: Node
    x: float
    y: float

    @property
    def id(self) -> str:
        return self.node.id

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        out = self.node.to_dict()
        out["x"] = self.x
        out["y"] = self.y
        return out


@dataclass
class LaidOutGraph:
    """The output of ``compute_layout``.

    Same kind, alphabet and edges as the input graph; every node carries
    concrete coordinates. Edges are carried unchanged and may still reference
    unknown states.
    """

    kind: GraphKind
    alphabet: list[str]
    nodes: list[PositionedNode]
    edges: list[Edge]
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT

    def node_map(self) -> dict[str, PositionedNode]:
        return {n.id: n for n in self.nodes}

    def to_digraph(self) -> nx.MultiDiGraph:
        return build_digraph((n.id for n in self.nodes), self.edges)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "alphabet": list(self.alphabet),
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


# ─── Routed Edges ─────────────────────────────────────────────────────────────


class EdgeShape(Enum):
    SelfLoop = "self_loop"
    Curve = "curve"
    Straight = "straight"


@dataclass
class RoutedEdge:
    """Render geometry for one edge.

    The path runs from ``start`` to ``end``:
      - SelfLoop: cubic Bezier, ``control_points`` holds both controls.
      - Curve: quadratic Bezier, ``control_points`` holds the single control.
      - Straight: a segment, ``control_points`` is empty.

    For Curve and Straight, ``end`` is the arrow tip, inset from the target
    centre by the node radius so the arrowhead touches the circle.
    """

    edge: Edge
    shape: EdgeShape
    start: Point
    end: Point
    label: str
    label_pos: Point
    control_points: list[Point] = field(default_factory=list)

    @property
    def from_id(self) -> str:
        return self.edge.from_id

    @property
    def to_id(self) -> str:
        return self.edge.to_id

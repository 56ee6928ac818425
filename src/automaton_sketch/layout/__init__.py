"""Layout package — node placement and edge routing.

Pipeline:
  1. ``compute_layout``: fixed placement of states on the canvas.
  2. ``route_edges``: self-loop / curve / straight geometry per edge.
"""

from automaton_sketch.layout.placement import circle_position, compute_layout, place_nodes
from automaton_sketch.layout.routing import classify_edge, route_edge, route_edges
from automaton_sketch.layout.types import (
    CURVE_OFFSET,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    LABEL_OFFSET,
    NODE_RADIUS,
    EdgeShape,
    LaidOutGraph,
    Point,
    PositionedNode,
    RoutedEdge,
)

__all__ = [
    "CURVE_OFFSET",
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "LABEL_OFFSET",
    "NODE_RADIUS",
    "EdgeShape",
    "LaidOutGraph",
    "Point",
    "PositionedNode",
    "RoutedEdge",
    "circle_position",
    "classify_edge",
    "compute_layout",
    "place_nodes",
    "route_edge",
    "route_edges",
]

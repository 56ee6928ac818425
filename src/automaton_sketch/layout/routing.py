"""Edge routing — per-edge render geometry on a laid-out graph.

Every edge is classified into exactly one shape, in priority order:

  1. SelfLoop: ``from == to``; a cubic loop above the node.
  2. Curve: another edge runs the opposite way between the same two
     states; a quadratic bow so the pair does not overlap.
  3. Straight: everything else; a segment between the centres.

Edges naming a state that is not in the laid-out graph are dropped (routed
to ``None``). Routing never raises.
"""

from __future__ import annotations

import logging
import math

import networkx as nx

from automaton_sketch.graph import Edge
from automaton_sketch.layout.types import (
    CURVE_OFFSET,
    LABEL_OFFSET,
    NODE_RADIUS,
    SELF_LOOP_CONTROL_SPREAD,
    SELF_LOOP_HEIGHT,
    SELF_LOOP_LABEL_RISE,
    SELF_LOOP_SPREAD,
    EdgeShape,
    LaidOutGraph,
    Point,
    PositionedNode,
    RoutedEdge,
)

logger = logging.getLogger(__name__)


# ─── Classification ───────────────────────────────────────────────────────────


def classify_edge(edge: Edge, digraph: nx.MultiDiGraph) -> EdgeShape:
    """Pick the shape for ``edge`` given all edges of its graph.

    A reverse edge counts regardless of its symbols: ``a→b:[0]`` and
    ``b→a:[1]`` still bow apart.
    """
    if edge.is_self_loop:
        return EdgeShape.SelfLoop
    if digraph.has_edge(edge.to_id, edge.from_id):
        return EdgeShape.Curve
    return EdgeShape.Straight


# ─── Vector Helpers ───────────────────────────────────────────────────────────


def unit_normal(src: Point, dst: Point) -> tuple[float, float]:
    """Normalised (-dy, dx) for the vector src→dst.

    Coincident points have no direction; fall back to straight up.
    """
    dx = dst.x - src.x
    dy = dst.y - src.y
    dist = math.hypot(dx, dy)
    if dist == 0:
        return (0.0, -1.0)
    return (-dy / dist, dx / dist)


def inset_point(target: Point, toward: Point, distance: float) -> Point:
    """Move ``target`` toward ``toward`` by ``distance``, never past it."""
    dx = toward.x - target.x
    dy = toward.y - target.y
    length = math.hypot(dx, dy)
    if length == 0:
        return target
    step = min(distance, length) / length
    return Point(target.x + dx * step, target.y + dy * step)


def quadratic_point(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    """Point at parameter ``t`` on the quadratic Bezier p0, p1, p2."""
    u = 1 - t
    return Point(
        u * u * p0.x + 2 * u * t * p1.x + t * t * p2.x,
        u * u * p0.y + 2 * u * t * p1.y + t * t * p2.y,
    )


# ─── Shapes ───────────────────────────────────────────────────────────────────


def route_self_loop(edge: Edge, node: PositionedNode) -> RoutedEdge:
    """Loop leaving and re-entering the top of the node circle.

    Geometry is fixed relative to NODE_RADIUS and does not grow with the label.
    """
    top = node.y - NODE_RADIUS
    return RoutedEdge(
        edge=edge,
        shape=EdgeShape.SelfLoop,
        start=Point(node.x - SELF_LOOP_SPREAD, top),
        end=Point(node.x + SELF_LOOP_SPREAD, top),
        control_points=[
            Point(node.x - SELF_LOOP_CONTROL_SPREAD, top - SELF_LOOP_HEIGHT),
            Point(node.x + SELF_LOOP_CONTROL_SPREAD, top - SELF_LOOP_HEIGHT),
        ],
        label=edge.display_label,
        label_pos=Point(node.x, top - SELF_LOOP_LABEL_RISE),
    )


def route_curve(edge: Edge, src: PositionedNode, dst: PositionedNode) -> RoutedEdge:
    """Quadratic bow offset along the normal of src→dst.

    The reverse edge has the opposite normal, so the pair bows to opposite
    sides of the chord.
    """
    p0, p2 = src.center, dst.center
    nx_, ny_ = unit_normal(p0, p2)
    control = Point((p0.x + p2.x) / 2 + nx_ * CURVE_OFFSET, (p0.y + p2.y) / 2 + ny_ * CURVE_OFFSET)
    return RoutedEdge(
        edge=edge,
        shape=EdgeShape.Curve,
        start=p0,
        end=inset_point(p2, control, NODE_RADIUS),
        control_points=[control],
        label=edge.display_label,
        label_pos=quadratic_point(p0, control, p2, 0.5),
    )


def route_straight(edge: Edge, src: PositionedNode, dst: PositionedNode) -> RoutedEdge:
    p0, p1 = src.center, dst.center
    nx_, ny_ = unit_normal(p0, p1)
    return RoutedEdge(
        edge=edge,
        shape=EdgeShape.Straight,
        start=p0,
        end=inset_point(p1, p0, NODE_RADIUS),
        label=edge.display_label,
        label_pos=Point((p0.x + p1.x) / 2 - nx_ * LABEL_OFFSET, (p0.y + p1.y) / 2 - ny_ * LABEL_OFFSET),
    )


# ─── Public API ───────────────────────────────────────────────────────────────


def route_edge(
    graph: LaidOutGraph,
    edge: Edge,
    digraph: nx.MultiDiGraph | None = None,
    node_map: dict[str, PositionedNode] | None = None,
) -> RoutedEdge | None:
    """Route one edge of ``graph``.

    ``digraph`` and ``node_map`` may be passed in to avoid rebuilding them for
    every edge; ``route_edges`` does exactly that.

    Returns None when either endpoint is not a node of ``graph``.
    """
    if node_map is None:
        node_map = graph.node_map()
    src = node_map.get(edge.from_id)
    dst = node_map.get(edge.to_id)
    if src is None or dst is None:
        logger.debug("dropping edge %s -> %s: unknown endpoint", edge.from_id, edge.to_id)
        return None

    if digraph is None:
        digraph = graph.to_digraph()

    shape = classify_edge(edge, digraph)
    if shape is EdgeShape.SelfLoop:
        return route_self_loop(edge, src)
    if shape is EdgeShape.Curve:
        return route_curve(edge, src, dst)
    return route_straight(edge, src, dst)


def route_edges(graph: LaidOutGraph) -> list[RoutedEdge]:
    """Route every drawable edge of ``graph``, in edge order."""
    digraph = graph.to_digraph()
    node_map = graph.node_map()
    routed: list[RoutedEdge] = []
    for edge in graph.edges:
        route = route_edge(graph, edge, digraph=digraph, node_map=node_map)
        if route is not None:
            routed.append(route)
    return routed

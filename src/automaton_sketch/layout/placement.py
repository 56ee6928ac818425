"""Node placement — fixed circular scheme with a two-state override.

No solver, no iteration: a node's position depends only on its index, the
node count and the canvas size, so identical input always yields bit-identical
coordinates.
"""

from __future__ import annotations

import logging
import math

from automaton_sketch.graph import Graph, Node
from automaton_sketch.layout.types import DEFAULT_HEIGHT, DEFAULT_WIDTH, LaidOutGraph, PositionedNode

logger = logging.getLogger(__name__)


def circle_position(index: int, count: int, width: float, height: float) -> tuple[float, float]:
    """Position of node ``index`` of ``count`` on the layout circle.

    Radius is min(width, height) / 3 around the canvas centre. Index 0 sits at
    12 o'clock and each following node is 360/count degrees further clockwise
    (y grows downward, so increasing angle runs clockwise on screen).
    """
    radius = min(width, height) / 3
    angle = (2 * math.pi * index) / count - math.pi / 2
    return (width / 2 + radius * math.cos(angle), height / 2 + radius * math.sin(angle))


def place_nodes(nodes: list[Node], width: float, height: float) -> list[PositionedNode]:
    count = len(nodes)
    placed: list[PositionedNode] = []
    for index, node in enumerate(nodes):
        if count == 2:
            # Two states sit side by side on the centre line.
            x = width * 0.3 if index == 0 else width * 0.7
            y = height / 2
        else:
            x, y = circle_position(index, count, width, height)
        placed.append(PositionedNode(node=node, x=x, y=y))
    return placed


def compute_layout(graph: Graph, width: float = DEFAULT_WIDTH, height: float = DEFAULT_HEIGHT) -> LaidOutGraph:
    """Assign coordinates to every node of ``graph``.

    Nodes keep their input order. Edges are passed through untouched; a graph
    without nodes yields an empty layout rather than an error.
    """
    nodes = place_nodes(list(graph.nodes or []), width, height)
    logger.debug("placed %d nodes on a %sx%s canvas", len(nodes), width, height)
    return LaidOutGraph(
        kind=graph.kind,
        alphabet=list(graph.alphabet),
        nodes=nodes,
        edges=list(graph.edges or []),
        width=width,
        height=height,
    )

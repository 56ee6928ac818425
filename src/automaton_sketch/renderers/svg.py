"""SVG renderer — renders a laid-out state machine to an SVG string."""

from __future__ import annotations

from automaton_sketch.layout.routing import route_edges
from automaton_sketch.layout.types import (
    NODE_RADIUS,
    EdgeShape,
    LaidOutGraph,
    Point,
    PositionedNode,
    RoutedEdge,
)

# ─── Constants ──────────────────────────────────────────────────────────────

STROKE = "#2563eb"
STROKE_WIDTH = 2
BACKGROUND = "#f9fafb"
NODE_TEXT = "#1e293b"
FONT_SIZE = 14
LOOP_FONT_SIZE = 12
FONT_FAMILY = "sans-serif"

ACCEPTING_RING_RADIUS = 36
START_ARROW_FROM = 60  # distance left of the centre where the start arrow begins
START_ARROW_TO = 35

ARROW_MARKER = "arrowhead"

_STROKE_ATTRS = f'stroke="{STROKE}" stroke-width="{STROKE_WIDTH}"'


def _escape(s: str) -> str:
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def _font(size: int = FONT_SIZE) -> str:
    return f'font-family="{FONT_FAMILY}" font-size="{size}"'


def _num(v: float) -> str:
    """Format a coordinate with at most two decimals and no trailing zeros."""
    s = f"{v:.2f}".rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


def _pt(p: Point) -> str:
    return f"{_num(p.x)} {_num(p.y)}"


# ─── Edge Rendering ─────────────────────────────────────────────────────────


def path_data(re: RoutedEdge) -> str:
    """SVG path ``d`` attribute for a routed edge."""
    if re.shape is EdgeShape.SelfLoop:
        c1, c2 = re.control_points
        return f"M {_pt(re.start)} C {_pt(c1)}, {_pt(c2)}, {_pt(re.end)}"
    if re.shape is EdgeShape.Curve:
        (control,) = re.control_points
        return f"M {_pt(re.start)} Q {_pt(control)} {_pt(re.end)}"
    return f"M {_pt(re.start)} L {_pt(re.end)}"


def _render_edge(re: RoutedEdge) -> str:
    parts = [
        f'<path d="{path_data(re)}" fill="none" {_STROKE_ATTRS} marker-end="url(#{ARROW_MARKER})"/>',
    ]
    if re.label:
        size = LOOP_FONT_SIZE if re.shape is EdgeShape.SelfLoop else FONT_SIZE
        lp = re.label_pos
        parts.append(
            f'<text x="{_num(lp.x)}" y="{_num(lp.y)}" text-anchor="middle" {_font(size)} fill="black">'
            f"{_escape(re.label)}</text>"
        )
    return "\n".join(parts)


# ─── Node Rendering ─────────────────────────────────────────────────────────


def _render_node(pn: PositionedNode) -> str:
    x, y = _num(pn.x), _num(pn.y)
    parts: list[str] = []
    if pn.node.is_accepting:
        parts.append(f'<circle cx="{x}" cy="{y}" r="{ACCEPTING_RING_RADIUS}" fill="none" {_STROKE_ATTRS}/>')
    parts.append(f'<circle cx="{x}" cy="{y}" r="{NODE_RADIUS}" fill="white" {_STROKE_ATTRS}/>')
    parts.append(
        f'<text x="{x}" y="{y}" dy=".3em" text-anchor="middle" {_font()} font-weight="bold" fill="{NODE_TEXT}">'
        f"{_escape(pn.node.display_label)}</text>"
    )
    if pn.node.is_start:
        x0, x1 = _num(pn.x - START_ARROW_FROM), _num(pn.x - START_ARROW_TO)
        parts.append(f'<path d="M {x0} {y} L {x1} {y}" {_STROKE_ATTRS} marker-end="url(#{ARROW_MARKER})"/>')
    return "\n".join(parts)


# ─── Public Renderer ────────────────────────────────────────────────────────


class SvgRenderer:
    """SVG renderer — consumes a LaidOutGraph, produces an SVG string.

    Edges are drawn first so node circles cover the line ends at the source
    centre. Edges with unknown endpoints are not drawn.
    """

    def render(self, graph: LaidOutGraph) -> str:
        w, h = _num(graph.width), _num(graph.height)
        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
            "<defs>",
            f'  <marker id="{ARROW_MARKER}" markerWidth="10" markerHeight="7" refX="10" refY="3.5" orient="auto">',
            f'    <polygon points="0 0, 10 3.5, 0 7" fill="{STROKE}"/>',
            "  </marker>",
            "</defs>",
            f'<rect width="{w}" height="{h}" fill="{BACKGROUND}"/>',
        ]

        for re in route_edges(graph):
            parts.append(_render_edge(re))

        for pn in graph.nodes:
            parts.append(_render_node(pn))

        parts.append("</svg>")
        return "\n".join(parts)

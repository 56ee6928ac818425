"""End-to-end: the canonical two-state machine through every stage."""

from __future__ import annotations

from automaton_sketch import Graph, compute_layout, route_edges, validate
from automaton_sketch.api import render_svg
from automaton_sketch.layout import EdgeShape


def test_two_state_machine(two_state) -> None:
    """Validates cleanly, takes the two-node layout, routes loops and a curve pair."""
    graph = Graph.from_dict(two_state)

    result = validate(graph)
    assert result.valid
    assert result.errors == []

    laid_out = compute_layout(graph, 800, 600)
    assert [(n.id, n.x, n.y) for n in laid_out.nodes] == [("q0", 240.0, 300.0), ("q1", 560.0, 300.0)]

    shapes = {(r.from_id, r.to_id): r.shape for r in route_edges(laid_out)}
    assert shapes == {
        ("q0", "q0"): EdgeShape.SelfLoop,
        ("q1", "q1"): EdgeShape.SelfLoop,
        ("q0", "q1"): EdgeShape.Curve,
        ("q1", "q0"): EdgeShape.Curve,
    }


def test_render_is_deterministic(two_state) -> None:
    """Two renders of the same input are byte-identical."""
    assert render_svg(two_state) == render_svg(two_state)

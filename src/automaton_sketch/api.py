"""Public API — dict in, validation result / layout / SVG out."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from automaton_sketch.errors import GraphFormatError, InvalidAutomatonError
from automaton_sketch.graph import Graph
from automaton_sketch.layout.placement import compute_layout
from automaton_sketch.layout.types import DEFAULT_HEIGHT, DEFAULT_WIDTH
from automaton_sketch.renderers.base import Renderer
from automaton_sketch.renderers.svg import SvgRenderer
from automaton_sketch.validator import IssueKind, ValidationIssue, ValidationResult, validate

logger = logging.getLogger(__name__)


def validate_data(data: Mapping[str, Any]) -> ValidationResult:
    """Parse and validate a graph description. Never raises.

    Input that cannot be read as a graph at all is reported as a single
    structural issue.
    """
    try:
        graph = Graph.from_dict(data)
    except GraphFormatError as exc:
        return ValidationResult(
            issues=[
                ValidationIssue(
                    kind=IssueKind.MissingStructure,
                    message=f"Invalid semantic model structure: {exc}.",
                )
            ]
        )
    return validate(graph)


def layout_data(
    data: Mapping[str, Any],
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
) -> dict[str, Any]:
    """Parse a graph description and return it with x/y added to every node.

    Raises:
        GraphFormatError: if ``data`` cannot be read as a graph.
    """
    return compute_layout(Graph.from_dict(data), width, height).to_dict()


def render_svg(
    data: Mapping[str, Any],
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    strict: bool = False,
    renderer: Renderer | None = None,
) -> str:
    """Parse, validate, lay out and render a graph description to SVG.

    An invalid graph is still rendered (with a warning logged) unless
    ``strict`` is set. ``renderer`` defaults to a fresh ``SvgRenderer``.

    Raises:
        GraphFormatError: if ``data`` cannot be read as a graph.
        InvalidAutomatonError: in strict mode, if validation fails.
    """
    graph = Graph.from_dict(data)
    result = validate(graph)
    if not result.valid:
        if strict:
            raise InvalidAutomatonError(result)
        logger.warning("rendering %s graph with %d validation errors", graph.kind.value, len(result.errors))
    if renderer is None:
        renderer = SvgRenderer()
    return renderer.render(compute_layout(graph, width, height))

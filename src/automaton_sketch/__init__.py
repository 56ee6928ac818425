"""automaton_sketch — validate, lay out and render finite-state machine graphs."""

import logging

from automaton_sketch.api import layout_data, render_svg, validate_data
from automaton_sketch.errors import AutomatonSketchError, GraphFormatError, InvalidAutomatonError
from automaton_sketch.graph import Edge, Graph, GraphKind, Node
from automaton_sketch.layout import LaidOutGraph, RoutedEdge, compute_layout, route_edge, route_edges
from automaton_sketch.table import TransitionTable, infer_alphabet
from automaton_sketch.validator import IssueKind, ValidationResult, validate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AutomatonSketchError",
    "Edge",
    "Graph",
    "GraphFormatError",
    "GraphKind",
    "InvalidAutomatonError",
    "IssueKind",
    "LaidOutGraph",
    "Node",
    "RoutedEdge",
    "TransitionTable",
    "ValidationResult",
    "compute_layout",
    "infer_alphabet",
    "layout_data",
    "render_svg",
    "route_edge",
    "route_edges",
    "validate",
    "validate_data",
]

"""Graph model — the semantic description of a state machine.

A ``Graph`` is what the generative step hands over once its response has been
parsed: a kind, an alphabet, a list of states and a list of symbol-labelled
transitions. The model is deliberately permissive. ``nodes`` and ``edges`` may
be ``None`` (the validator reports that as a structural problem), edges may
reference states that do not exist or leave an endpoint out, and nothing here
checks DFA rules. The wire shape is read through the pydantic models in
``automaton_sketch.schema``.

Wire format (camelCase, as produced upstream)::

    {
      "type": "DFA",
      "alphabet": ["0", "1"],
      "nodes": [{"id": "q0", "label": "q0", "isStart": true, "isAccepting": false}],
      "edges": [{"from": "q0", "to": "q0", "symbols": ["0"], "label": "0"}]
    }
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import networkx as nx
from pydantic import ValidationError

from automaton_sketch.errors import GraphFormatError
from automaton_sketch.schema import EdgeModel, GraphModel, NodeModel

EPSILON = "ε"


class GraphKind(Enum):
    """Which family of machine a graph describes; selects validation rules."""

    DFA = "DFA"
    NFA = "NFA"
    Graph = "Graph"

    @classmethod
    def parse(cls, value: Any) -> GraphKind:
        if value is None:
            return cls.DFA
        if isinstance(value, GraphKind):
            return value
        for kind in cls:
            if str(value).strip().lower() == kind.value.lower():
                return kind
        raise GraphFormatError(f"unknown graph type {value!r}")


# ─── Nodes and Edges ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Node:
    """A state. ``label`` falls back to ``id`` for display."""

    id: str
    label: str | None = None
    is_start: bool = False
    is_accepting: bool = False

    @property
    def display_label(self) -> str:
        return self.label or self.id

    @classmethod
    def from_model(cls, model: NodeModel) -> Node:
        return cls(id=model.id, label=model.label, is_start=model.is_start, is_accepting=model.is_accepting)

    @classmethod
    def from_dict(cls, data: Any) -> Node:
        return cls.from_model(_read(NodeModel, data, "node"))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id}
        if self.label is not None:
            out["label"] = self.label
        out["isStart"] = self.is_start
        out["isAccepting"] = self.is_accepting
        return out


@dataclass(frozen=True)
class Edge:
    """A transition from ``from_id`` to ``to_id`` on each of ``symbols``.

    ``symbols`` is an ordered set: duplicates are collapsed when parsing.
    Self-edges (``from_id == to_id``) are ordinary self-loop transitions.
    An endpoint missing from the input is ``None`` and counts as a dangling
    reference.
    """

    from_id: str | None
    to_id: str | None
    symbols: tuple[str, ...] = ()
    label: str | None = None

    @property
    def is_self_loop(self) -> bool:
        return self.is_complete and self.from_id == self.to_id

    @property
    def display_label(self) -> str:
        if self.label is not None:
            return self.label
        return ",".join(self.symbols)

    @property
    def is_complete(self) -> bool:
        """Both endpoints were given."""
        return self.from_id is not None and self.to_id is not None

    @classmethod
    def from_model(cls, model: EdgeModel) -> Edge:
        return cls(
            from_id=model.from_id,
            to_id=model.to_id,
            symbols=tuple(dict.fromkeys(model.symbols)),
            label=model.label,
        )

    @classmethod
    def from_dict(cls, data: Any) -> Edge:
        return cls.from_model(_read(EdgeModel, data, "edge"))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.from_id is not None:
            out["from"] = self.from_id
        if self.to_id is not None:
            out["to"] = self.to_id
        out["symbols"] = list(self.symbols)
        if self.label is not None:
            out["label"] = self.label
        return out


# ─── Graph ────────────────────────────────────────────────────────────────────


@dataclass
class Graph:
    """The top-level unit handed to validation and layout.

    Attributes:
        kind: Machine family; absent on the wire means DFA.
        alphabet: Declared input symbols, in declaration order. May be empty.
        nodes: States in emission order, or ``None`` if the input had none.
        edges: Transitions in emission order, or ``None`` if the input had none.
    """

    kind: GraphKind = GraphKind.DFA
    alphabet: list[str] = field(default_factory=list)
    nodes: list[Node] | None = field(default_factory=list)
    edges: list[Edge] | None = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Graph:
        """Read a graph from its JSON-like wire shape.

        Raises:
            GraphFormatError: if ``data`` cannot be interpreted as a graph.
        """
        model = _read(GraphModel, data, "graph")
        return cls(
            kind=GraphKind.parse(model.kind),
            alphabet=list(model.alphabet),
            nodes=None if model.nodes is None else [Node.from_model(n) for n in model.nodes],
            edges=None if model.edges is None else [Edge.from_model(e) for e in model.edges],
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.kind.value, "alphabet": list(self.alphabet)}
        if self.nodes is not None:
            out["nodes"] = [n.to_dict() for n in self.nodes]
        if self.edges is not None:
            out["edges"] = [e.to_dict() for e in self.edges]
        return out

    def to_digraph(self) -> nx.MultiDiGraph:
        return build_digraph((n.id for n in self.nodes or []), self.edges or [])


def _read(model_cls, data: Any, what: str):
    try:
        return model_cls.model_validate(data)
    except ValidationError as exc:
        raise GraphFormatError(f"unreadable {what}: {exc.error_count()} problem(s), first: {_first_error(exc)}") from exc


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    where = ".".join(str(p) for p in err["loc"]) or "<root>"
    return f"{where}: {err['msg']}"


def build_digraph(node_ids: Iterable[str], edges: Iterable[Edge]) -> nx.MultiDiGraph:
    """Build a MultiDiGraph keyed by node id, one graph edge per ``Edge``.

    Parallel transitions between the same pair of states stay distinct.
    Edges naming unknown states implicitly add those ids as bare nodes, so
    callers that care about dangling references must check membership against
    their own node set. Edges with a missing endpoint are left out.
    """
    g: nx.MultiDiGraph = nx.MultiDiGraph()
    for node_id in node_ids:
        g.add_node(node_id)
    for edge in edges:
        if edge.is_complete:
            g.add_edge(edge.from_id, edge.to_id, data=edge)
    return g

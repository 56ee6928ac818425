"""Transition table — the tabular view of a state machine.

Unlike the validator, the table infers an alphabet from the edges when none is
declared, and it shows every target for a (state, symbol) cell, so missing and
nondeterministic transitions stay visible instead of being reported.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from automaton_sketch.graph import Graph
from automaton_sketch.validator import MISSING_ID

EMPTY_CELL = "-"
START_MARK = "->"
ACCEPT_MARK = "*"


def infer_alphabet(graph: Graph) -> list[str]:
    """Declared alphabet if there is one, else the sorted symbols on edges."""
    if graph.alphabet:
        return list(graph.alphabet)
    return sorted({s for e in graph.edges or [] for s in e.symbols})


@dataclass
class TableRow:
    state: str
    label: str
    is_start: bool
    is_accepting: bool
    cells: dict[str, list[str]] = field(default_factory=dict)


@dataclass
class TransitionTable:
    """Rows sorted by state id, one column per alphabet symbol."""

    alphabet: list[str]
    rows: list[TableRow]

    @classmethod
    def from_graph(cls, graph: Graph) -> TransitionTable:
        nodes = graph.nodes or []
        edges = graph.edges or []
        alphabet = infer_alphabet(graph)
        labels = {n.id: n.display_label for n in nodes}

        rows: list[TableRow] = []
        for node in sorted(nodes, key=lambda n: n.id):
            row = TableRow(
                state=node.id,
                label=node.display_label,
                is_start=node.is_start,
                is_accepting=node.is_accepting,
            )
            for symbol in alphabet:
                row.cells[symbol] = [
                    labels.get(e.to_id, MISSING_ID if e.to_id is None else e.to_id)
                    for e in edges
                    if e.from_id == node.id and (symbol in e.symbols or e.label == symbol)
                ]
            rows.append(row)
        return cls(alphabet=alphabet, rows=rows)

    def render_text(self) -> str:
        """Plain-text grid. ``->`` marks the start state, ``*`` accepting ones."""
        header = ["State", *(f"Input ({s})" for s in self.alphabet), "Accepting?"]
        body: list[list[str]] = []
        for row in self.rows:
            marks = (START_MARK if row.is_start else "") + (ACCEPT_MARK if row.is_accepting else "")
            state = f"{marks} {row.label}" if marks else row.label
            cells = [", ".join(row.cells[s]) or EMPTY_CELL for s in self.alphabet]
            body.append([state, *cells, "Yes" if row.is_accepting else "No"])

        widths = [max(len(r[i]) for r in [header, *body]) for i in range(len(header))]

        def fmt(cols: list[str]) -> str:
            return "| " + " | ".join(c.ljust(w) for c, w in zip(cols, widths)) + " |"

        rule = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
        lines = [rule, fmt(header), rule, *(fmt(r) for r in body), rule]
        return "\n".join(lines)

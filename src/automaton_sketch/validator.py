"""Automaton validator — checks a Graph against the DFA contract.

Checks (in order, all accumulating):
  1. Structural presence: nodes and edges must exist (short-circuits).
  2. Start-state cardinality: exactly one start state.
  3. No epsilon transitions.
  4. Referential integrity: every edge endpoint names a known state.
  5. Totality and determinism: one transition per (state, symbol) pair,
     only when an alphabet is declared.

Which checks run depends on the graph kind: DFA runs all of them, NFA skips
the epsilon and totality/determinism checks, a plain Graph only gets the
structural and referential checks.

``validate`` never raises and never mutates its input. Every problem is
reported as a ``ValidationIssue``; callers decide whether to reject, warn, or
render anyway.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from automaton_sketch.graph import EPSILON, Edge, Graph, GraphKind

logger = logging.getLogger(__name__)

# Shown in messages for an edge endpoint absent from the input.
MISSING_ID = "<missing>"


class IssueKind(Enum):
    MissingStructure = "missing_structure"
    StartStateCount = "start_state_count"
    EpsilonTransition = "epsilon_transition"
    DanglingReference = "dangling_reference"
    MissingTransition = "missing_transition"
    Nondeterminism = "nondeterminism"


@dataclass(frozen=True)
class ValidationIssue:
    """One violated rule instance."""

    kind: IssueKind
    message: str
    state: str | None = None
    symbol: str | None = None


@dataclass
class ValidationResult:
    """Accumulated outcome of ``validate``. Valid iff there are no issues."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.issues

    @property
    def errors(self) -> list[str]:
        return [issue.message for issue in self.issues]

    def of_kind(self, kind: IssueKind) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.kind == kind]

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "errors": self.errors}


# ─── Rule Selection ───────────────────────────────────────────────────────────

_RULES: dict[GraphKind, frozenset[IssueKind]] = {
    GraphKind.DFA: frozenset(IssueKind),
    GraphKind.NFA: frozenset(
        {IssueKind.MissingStructure, IssueKind.StartStateCount, IssueKind.DanglingReference}
    ),
    GraphKind.Graph: frozenset({IssueKind.MissingStructure, IssueKind.DanglingReference}),
}


# ─── Individual Checks ────────────────────────────────────────────────────────


def _shown(state_id: str | None) -> str:
    return MISSING_ID if state_id is None else state_id


def check_start_states(graph: Graph) -> list[ValidationIssue]:
    count = sum(1 for n in graph.nodes if n.is_start)
    if count == 1:
        return []
    return [
        ValidationIssue(
            kind=IssueKind.StartStateCount,
            message=f"{graph.kind.value} must have exactly one start state. Found {count}.",
        )
    ]


def check_epsilon(graph: Graph) -> list[ValidationIssue]:
    return [
        ValidationIssue(
            kind=IssueKind.EpsilonTransition,
            message=f"DFA cannot contain {EPSILON} (epsilon) transitions: '{_shown(e.from_id)}' -> '{_shown(e.to_id)}'.",
            state=e.from_id,
            symbol=EPSILON,
        )
        for e in graph.edges
        if EPSILON in e.symbols
    ]


def check_references(graph: Graph) -> list[ValidationIssue]:
    node_ids = {n.id for n in graph.nodes}
    issues: list[ValidationIssue] = []
    for e in graph.edges:
        if e.from_id not in node_ids:
            issues.append(
                ValidationIssue(
                    kind=IssueKind.DanglingReference,
                    message=f"Edge from unknown state '{_shown(e.from_id)}'.",
                    state=e.from_id,
                )
            )
        if e.to_id not in node_ids:
            issues.append(
                ValidationIssue(
                    kind=IssueKind.DanglingReference,
                    message=f"Edge to unknown state '{_shown(e.to_id)}'.",
                    state=e.to_id,
                )
            )
    return issues


def transition_index(edges: list[Edge]) -> dict[tuple[str, str], list[Edge]]:
    """Map (from_id, symbol) → edges leaving from_id on symbol."""
    index: dict[tuple[str, str], list[Edge]] = defaultdict(list)
    for e in edges:
        for symbol in dict.fromkeys(e.symbols):
            index[(e.from_id, symbol)].append(e)
    return index


def check_totality(graph: Graph) -> list[ValidationIssue]:
    """One issue per (state, symbol) pair with zero or several transitions."""
    if not graph.alphabet:
        return []

    index = transition_index(graph.edges)
    issues: list[ValidationIssue] = []
    for node in graph.nodes:
        for symbol in dict.fromkeys(graph.alphabet):
            count = len(index.get((node.id, symbol), ()))
            if count == 0:
                issues.append(
                    ValidationIssue(
                        kind=IssueKind.MissingTransition,
                        message=f"State '{node.id}' is missing a transition for symbol '{symbol}'.",
                        state=node.id,
                        symbol=symbol,
                    )
                )
            elif count > 1:
                issues.append(
                    ValidationIssue(
                        kind=IssueKind.Nondeterminism,
                        message=f"State '{node.id}' has multiple transitions for symbol '{symbol}' (Nondeterminism).",
                        state=node.id,
                        symbol=symbol,
                    )
                )
    return issues


# ─── Entry Point ──────────────────────────────────────────────────────────────


def validate(graph: Graph | None) -> ValidationResult:
    """Validate ``graph`` and return every violation found."""
    if graph is None or graph.nodes is None or graph.edges is None:
        return ValidationResult(
            issues=[
                ValidationIssue(
                    kind=IssueKind.MissingStructure,
                    message="Invalid semantic model structure: missing nodes or edges.",
                )
            ]
        )

    rules = _RULES[graph.kind]
    issues: list[ValidationIssue] = []
    if IssueKind.StartStateCount in rules:
        issues.extend(check_start_states(graph))
    if IssueKind.EpsilonTransition in rules:
        issues.extend(check_epsilon(graph))
    if IssueKind.DanglingReference in rules:
        issues.extend(check_references(graph))
    if IssueKind.MissingTransition in rules:
        issues.extend(check_totality(graph))

    logger.debug(
        "validated %s graph: %d nodes, %d edges, %d issues",
        graph.kind.value,
        len(graph.nodes),
        len(graph.edges),
        len(issues),
    )
    return ValidationResult(issues=issues)

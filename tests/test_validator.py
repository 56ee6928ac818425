"""Tests for validator.py — DFA contract checks.

Covers:
  - structural presence (the only short-circuit)
  - start-state cardinality
  - epsilon rejection
  - dangling references
  - totality / determinism soundness on bijection graphs
  - rule selection by graph kind
"""

from __future__ import annotations

import pytest

from automaton_sketch.graph import Edge, Graph, GraphKind, Node
from automaton_sketch.validator import IssueKind, transition_index, validate

# ─── Helpers ──────────────────────────────────────────────────────────────────


def make_complete_dfa(state_count: int, symbols: list[str]) -> Graph:
    """Build a total, deterministic DFA: one edge per (state, symbol).

    State i on symbol j goes to state (i + j + 1) mod state_count, so the
    edges form a bijection of (state, symbol) → state.
    """
    nodes = [Node(id=f"q{i}", is_start=(i == 0)) for i in range(state_count)]
    edges = [
        Edge(from_id=f"q{i}", to_id=f"q{(i + j + 1) % state_count}", symbols=(sym,))
        for i in range(state_count)
        for j, sym in enumerate(symbols)
    ]
    return Graph(kind=GraphKind.DFA, alphabet=list(symbols), nodes=nodes, edges=edges)


def kinds(result) -> list[IssueKind]:
    return [issue.kind for issue in result.issues]


def result_has_no(result, kind: IssueKind) -> bool:
    return not result.of_kind(kind)


# ─── Structural Presence ──────────────────────────────────────────────────────


class TestStructure:
    def test_none_graph(self):
        """A missing graph yields exactly one structural error."""
        result = validate(None)
        assert not result.valid
        assert kinds(result) == [IssueKind.MissingStructure]

    def test_missing_nodes_short_circuits(self):
        """Missing nodes: one error, nothing else is checked."""
        graph = Graph(alphabet=["0"], nodes=None, edges=[Edge(from_id="x", to_id="y", symbols=("ε",))])
        result = validate(graph)
        assert result.errors == ["Invalid semantic model structure: missing nodes or edges."]

    def test_missing_edges_short_circuits(self):
        graph = Graph(nodes=[Node(id="q0")], edges=None)
        assert kinds(validate(graph)) == [IssueKind.MissingStructure]

    def test_empty_lists_are_present(self):
        """Empty lists are present; only the start-state rule fires."""
        result = validate(Graph(nodes=[], edges=[]))
        assert kinds(result) == [IssueKind.StartStateCount]


# ─── Start State ──────────────────────────────────────────────────────────────


class TestStartState:
    def test_zero_start_states(self):
        """No start state → error mentioning 'Found 0'."""
        graph = Graph(nodes=[Node(id="a"), Node(id="b")], edges=[])
        result = validate(graph)
        assert any("Found 0" in e for e in result.errors)

    def test_two_start_states(self):
        """Two start states → error mentioning 'Found 2'."""
        graph = Graph(nodes=[Node(id="a", is_start=True), Node(id="b", is_start=True)], edges=[])
        result = validate(graph)
        assert any("Found 2" in e for e in result.errors)

    def test_exactly_one_start_state(self):
        """Exactly one start state → no start-related error."""
        graph = Graph(nodes=[Node(id="a", is_start=True), Node(id="b")], edges=[])
        assert result_has_no(validate(graph), IssueKind.StartStateCount)

    def test_message_names_the_kind(self):
        """The start-state error names the machine family being checked."""
        nodes = [Node(id="a"), Node(id="b")]
        assert validate(Graph(kind=GraphKind.NFA, nodes=nodes, edges=[])).errors == [
            "NFA must have exactly one start state. Found 0."
        ]
        assert "DFA must have exactly one start state. Found 0." in validate(Graph(nodes=nodes, edges=[])).errors


# ─── Epsilon ──────────────────────────────────────────────────────────────────


class TestEpsilon:
    def test_epsilon_fails_otherwise_valid_graph(self):
        """An ε symbol makes an otherwise well-formed graph invalid."""
        graph = make_complete_dfa(2, ["0"])
        graph.edges.append(Edge(from_id="q0", to_id="q1", symbols=("ε",)))
        result = validate(graph)
        assert not result.valid
        assert len(result.of_kind(IssueKind.EpsilonTransition)) == 1

    def test_one_error_per_epsilon_edge(self):
        graph = Graph(
            nodes=[Node(id="a", is_start=True), Node(id="b")],
            edges=[
                Edge(from_id="a", to_id="b", symbols=("ε",)),
                Edge(from_id="b", to_id="a", symbols=("0", "ε")),
            ],
        )
        assert len(validate(graph).of_kind(IssueKind.EpsilonTransition)) == 2


# ─── Referential Integrity ────────────────────────────────────────────────────


class TestReferences:
    def test_each_dangling_endpoint_reported(self):
        """Unknown from and to are reported separately, by the missing id."""
        graph = Graph(
            nodes=[Node(id="a", is_start=True)],
            edges=[Edge(from_id="ghost", to_id="phantom", symbols=("0",))],
        )
        result = validate(graph)
        assert "Edge from unknown state 'ghost'." in result.errors
        assert "Edge to unknown state 'phantom'." in result.errors
        assert len(result.of_kind(IssueKind.DanglingReference)) == 2

    def test_known_endpoints_not_reported(self):
        graph = make_complete_dfa(3, ["a"])
        assert result_has_no(validate(graph), IssueKind.DanglingReference)

    def test_missing_endpoint_is_dangling(self):
        """An edge without a target is one dangling reference, not an unreadable graph."""
        graph = Graph.from_dict(
            {
                "nodes": [{"id": "a"}, {"id": "b"}],
                "edges": [{"from": "a", "to": "b", "symbols": [0]}, {"from": "b", "symbols": ["0"]}],
            }
        )
        result = validate(graph)
        assert "DFA must have exactly one start state. Found 0." in result.errors
        assert "Edge to unknown state '<missing>'." in result.errors
        dangling = result.of_kind(IssueKind.DanglingReference)
        assert len(dangling) == 1 and dangling[0].state is None


# ─── Totality / Determinism ───────────────────────────────────────────────────


class TestTotality:
    @pytest.mark.parametrize("states,symbols", [(1, ["0"]), (2, ["0", "1"]), (3, ["a", "b", "c"]), (4, ["x"])])
    def test_complete_dfa_is_valid(self, states, symbols):
        """k·m edges forming a bijection validate with no errors."""
        result = validate(make_complete_dfa(states, symbols))
        assert result.valid
        assert result.errors == []

    def test_removing_any_edge_gives_one_missing_transition(self):
        """Dropping any single edge yields exactly one MissingTransition."""
        base = make_complete_dfa(3, ["0", "1"])
        for i, removed in enumerate(base.edges):
            graph = make_complete_dfa(3, ["0", "1"])
            del graph.edges[i]
            result = validate(graph)
            assert kinds(result) == [IssueKind.MissingTransition]
            issue = result.issues[0]
            assert (issue.state, issue.symbol) == (removed.from_id, removed.symbols[0])
            assert result.errors == [
                f"State '{removed.from_id}' is missing a transition for symbol '{removed.symbols[0]}'."
            ]

    def test_duplicated_symbol_gives_one_nondeterminism(self):
        """Copying a symbol onto a second edge from the same state → one Nondeterminism."""
        graph = make_complete_dfa(3, ["0", "1"])
        # q1's edge on "1" also claims "0".
        idx = next(i for i, e in enumerate(graph.edges) if e.from_id == "q1" and e.symbols == ("1",))
        graph.edges[idx] = Edge(from_id="q1", to_id=graph.edges[idx].to_id, symbols=("1", "0"))
        result = validate(graph)
        assert kinds(result) == [IssueKind.Nondeterminism]
        assert result.errors == ["State 'q1' has multiple transitions for symbol '0' (Nondeterminism)."]

    def test_empty_alphabet_skips_totality(self):
        """Without an alphabet, totality and determinism are not checked."""
        graph = Graph(
            nodes=[Node(id="a", is_start=True), Node(id="b")],
            edges=[Edge(from_id="a", to_id="b", symbols=("0",)), Edge(from_id="a", to_id="a", symbols=("0",))],
        )
        assert validate(graph).valid

    def test_symbol_outside_alphabet_not_cross_checked(self):
        """Edges may carry undeclared symbols; only declared ones are checked."""
        graph = make_complete_dfa(2, ["0"])
        graph.edges.append(Edge(from_id="q0", to_id="q1", symbols=("9",)))
        assert validate(graph).valid

    def test_all_violations_accumulate(self):
        """No short-circuit past the structural check: every rule reports."""
        graph = Graph(
            alphabet=["0"],
            nodes=[Node(id="a"), Node(id="b")],
            edges=[
                Edge(from_id="a", to_id="zz", symbols=("0",)),
                Edge(from_id="a", to_id="b", symbols=("0", "ε")),
            ],
        )
        assert kinds(validate(graph)) == [
            IssueKind.StartStateCount,
            IssueKind.EpsilonTransition,
            IssueKind.DanglingReference,
            IssueKind.Nondeterminism,
            IssueKind.MissingTransition,
        ]

    def test_transition_index_groups_by_state_and_symbol(self):
        edges = [Edge(from_id="a", to_id="b", symbols=("0", "1")), Edge(from_id="a", to_id="a", symbols=("0",))]
        index = transition_index(edges)
        assert len(index[("a", "0")]) == 2
        assert len(index[("a", "1")]) == 1


# ─── Kind-dependent Rules ─────────────────────────────────────────────────────


class TestKinds:
    def make_nfa_like(self, kind: GraphKind) -> Graph:
        return Graph(
            kind=kind,
            alphabet=["0"],
            nodes=[Node(id="a", is_start=True), Node(id="b")],
            edges=[
                Edge(from_id="a", to_id="b", symbols=("0", "ε")),
                Edge(from_id="a", to_id="a", symbols=("0",)),
            ],
        )

    def test_nfa_allows_epsilon_and_nondeterminism(self):
        assert validate(self.make_nfa_like(GraphKind.NFA)).valid

    def test_dfa_rejects_the_same_graph(self):
        assert not validate(self.make_nfa_like(GraphKind.DFA)).valid

    def test_plain_graph_ignores_start_states(self):
        graph = Graph(kind=GraphKind.Graph, nodes=[Node(id="a")], edges=[Edge(from_id="a", to_id="x")])
        assert kinds(validate(graph)) == [IssueKind.DanglingReference]


class TestResultShape:
    def test_to_dict(self):
        result = validate(Graph(nodes=[Node(id="a", is_start=True)], edges=[]))
        assert result.to_dict() == {"valid": True, "errors": []}

    def test_input_not_mutated(self, two_state_graph):
        before = two_state_graph.to_dict()
        validate(two_state_graph)
        assert two_state_graph.to_dict() == before

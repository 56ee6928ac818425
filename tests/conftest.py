"""Shared fixtures: the canonical two-state machine used across test modules."""

from __future__ import annotations

from typing import Any

import pytest

from automaton_sketch.graph import Graph


def two_state_data() -> dict[str, Any]:
    """q0 (start) / q1 (accepting) over {0, 1}; every state loops on one symbol."""
    return {
        "type": "DFA",
        "alphabet": ["0", "1"],
        "nodes": [
            {"id": "q0", "label": "q0", "isStart": True, "isAccepting": False},
            {"id": "q1", "label": "q1", "isStart": False, "isAccepting": True},
        ],
        "edges": [
            {"from": "q0", "to": "q0", "symbols": ["0"]},
            {"from": "q0", "to": "q1", "symbols": ["1"]},
            {"from": "q1", "to": "q0", "symbols": ["0"]},
            {"from": "q1", "to": "q1", "symbols": ["1"]},
        ],
    }


@pytest.fixture
def two_state() -> dict[str, Any]:
    return two_state_data()


@pytest.fixture
def two_state_graph() -> Graph:
    return Graph.from_dict(two_state_data())

"""Exceptions raised by automaton_sketch.

Validation problems are never raised; they are reported as data through
``ValidationResult``. These exceptions cover input that cannot be read as a
graph at all, and the facade's strict mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from automaton_sketch.validator import ValidationResult


class AutomatonSketchError(Exception):
    """Base class for every error raised by this package."""


class GraphFormatError(AutomatonSketchError, ValueError):
    """The input object does not have the shape of a graph description."""


class InvalidAutomatonError(AutomatonSketchError):
    """Raised in strict mode when a graph fails validation."""

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        summary = "; ".join(result.errors) or "unknown validation failure"
        super().__init__(f"graph failed validation: {summary}")

"""Renderer protocol — anything that turns a laid-out graph into text.

``api.render_svg`` accepts any object with this shape; ``SvgRenderer`` is the
default.
"""

from __future__ import annotations

from typing import Protocol

from automaton_sketch.layout.types import LaidOutGraph


class Renderer(Protocol):
    def render(self, graph: LaidOutGraph) -> str:
        """Draw every positioned node and routable edge of ``graph``."""
        ...

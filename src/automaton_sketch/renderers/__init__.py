"""Renderers for laid-out graphs."""

from automaton_sketch.renderers.base import Renderer
from automaton_sketch.renderers.svg import SvgRenderer

__all__ = ["Renderer", "SvgRenderer"]

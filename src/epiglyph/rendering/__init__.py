"""Rendering of epicycle frames."""

from epiglyph.rendering.canvas import EpicycleCanvas

__all__ = ["EpicycleCanvas"]

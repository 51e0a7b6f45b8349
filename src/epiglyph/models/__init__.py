"""Data models for epiglyph."""

from epiglyph.models.curve import (
    ORIGIN,
    AnimationState,
    Curve,
    FourierTerm,
    Frame,
    Point2D,
)

__all__ = [
    "ORIGIN",
    "AnimationState",
    "Curve",
    "FourierTerm",
    "Frame",
    "Point2D",
]

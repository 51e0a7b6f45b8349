"""Chain rotating vectors into a point on the reconstructed curve.

Coordinates come out in the analysis frame (y up, ``x + iy``), where the
chain at ``t = n/N`` with every term reproduces sample ``n`` exactly. Pass
``flip_y=True`` when drawing onto a y-down surface; this is the one place the
imaginary axis is flipped.
"""

import math
from typing import Sequence

from epiglyph.models import ORIGIN, FourierTerm, Point2D

TAU = 2 * math.pi


def compose(
    terms: Sequence[FourierTerm],
    m: int,
    t: float,
    scale: float = 1.0,
    origin: Point2D = ORIGIN,
    flip_y: bool = False,
) -> tuple[Point2D, list[Point2D]]:
    """Sum the first ``m`` terms at cycle position ``t``.

    Args:
        terms: Fourier terms in rank order
        m: Number of terms to chain
        t: Cycle position in [0, 1)
        scale: Drawing scale applied to every radius
        origin: Anchor of the first circle
        flip_y: Negate the sine component for y-down targets

    Returns:
        tuple: (tip, joints) where joints holds one tip per chained term
    """
    count = max(0, min(m, len(terms)))
    sign = -1.0 if flip_y else 1.0

    x, y = origin.x, origin.y
    joints = []
    for c in terms[:count]:
        r = c.amp * scale
        angle = TAU * c.freq * t + c.phase
        x += r * math.cos(angle)
        y += sign * r * math.sin(angle)
        joints.append(Point2D(x, y))

    tip = joints[-1] if joints else origin
    return tip, joints


def chain_radii(terms: Sequence[FourierTerm], m: int, scale: float = 1.0) -> list[float]:
    """Circle radius for each of the first ``m`` terms."""
    count = max(0, min(m, len(terms)))
    return [c.amp * scale for c in terms[:count]]

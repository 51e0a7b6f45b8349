"""Data models for curves, Fourier terms and animation frames."""

from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class Point2D:
    """A planar coordinate."""

    x: float
    y: float

    def to_complex(self) -> complex:
        """Reinterpret the point as ``x + iy``."""
        return complex(self.x, self.y)

    @classmethod
    def from_complex(cls, z: complex) -> "Point2D":
        return cls(float(z.real), float(z.imag))


ORIGIN = Point2D(0.0, 0.0)


@dataclass(frozen=True)
class FourierTerm:
    """One DFT bin, annotated for drawing.

    Attributes:
        freq: Signed frequency, folded into (-N/2, N/2]
        re: Real part of the coefficient (already divided by N)
        im: Imaginary part of the coefficient
        amp: Circle radius, ``hypot(re, im)``
        phase: Starting angle, ``atan2(im, re)``
    """

    freq: int
    re: float
    im: float
    amp: float
    phase: float

    @property
    def coefficient(self) -> complex:
        return complex(self.re, self.im)


@dataclass(frozen=True)
class Curve:
    """Immutable snapshot of one analysed outline.

    Attributes:
        samples: Normalised complex samples, in arc-length order
        terms: Fourier terms sorted by amplitude (descending, stable)
        path_length: Arc length of the source path before normalisation
    """

    samples: np.ndarray
    terms: tuple[FourierTerm, ...]
    path_length: float

    @property
    def sample_count(self) -> int:
        return len(self.samples)


@dataclass
class AnimationState:
    """Animation clock and trail.

    ``step`` counts frame advances within the current cycle; ``t`` is derived
    from it so that exactly ``period`` advances complete one cycle.
    """

    period: int = 1
    step: int = 0
    trail: list[Point2D] = field(default_factory=list)

    @property
    def t(self) -> float:
        """Cycle position in [0, 1)."""
        return self.step / self.period

    def clear(self) -> None:
        self.step = 0
        self.trail = []


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs to draw one frame.

    Attributes:
        t: Cycle position the chain was composed at
        origin: Anchor of the first circle
        joints: Chain of vector tips, in rank order
        radii: Circle radius drawn around each joint's predecessor
        tip: Reconstructed point (last joint, or origin)
        trail: Reconstructed points accumulated this cycle
        paused: Whether the clock is frozen
    """

    t: float
    origin: Point2D
    joints: tuple[Point2D, ...]
    radii: tuple[float, ...]
    tip: Point2D
    trail: tuple[Point2D, ...]
    paused: bool = False

    @property
    def centers(self) -> tuple[Point2D, ...]:
        """Centre of each epicycle circle."""
        return (self.origin,) + self.joints[:-1] if self.joints else ()

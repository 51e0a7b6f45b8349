"""Uniform arc-length sampling of planar paths."""

import logging
import math
from typing import Iterable, Protocol, runtime_checkable

import numpy as np

from epiglyph import DegenerateCurveError, InvalidSampleCountError
from epiglyph.models import Point2D

logger = logging.getLogger(__name__)

# Paths shorter than this (in source units) are treated as empty.
MIN_PATH_LENGTH = 0.1


@runtime_checkable
class PathSource(Protocol):
    """Anything that can report its arc length and a point along it."""

    def total_length(self) -> float: ...

    def point_at_length(self, s: float) -> Point2D: ...


class OutlinePath:
    """Arc-length parameterised outline made of one or more polylines.

    Only drawn segments count towards the length; moving the pen from the end
    of one subpath to the start of the next is free, the same way an SVG path
    with several ``M`` commands measures.
    """

    def __init__(self, subpaths: Iterable[np.ndarray]):
        """Initialize outline.

        Args:
            subpaths: Arrays of shape (k, 2), one per contour
        """
        self._subpaths: list[np.ndarray] = []
        self._cumulative: list[np.ndarray] = []

        for vertices in subpaths:
            vertices = np.asarray(vertices, dtype=float).reshape(-1, 2)
            if len(vertices) < 2:
                continue
            seg = np.hypot(np.diff(vertices[:, 0]), np.diff(vertices[:, 1]))
            cumulative = np.concatenate(([0.0], np.cumsum(seg)))
            if cumulative[-1] <= 0:
                continue
            self._subpaths.append(vertices)
            self._cumulative.append(cumulative)

        lengths = [c[-1] for c in self._cumulative]
        self._ends = np.cumsum(lengths) if lengths else np.zeros(0)

    @property
    def subpath_count(self) -> int:
        return len(self._subpaths)

    def total_length(self) -> float:
        return float(self._ends[-1]) if len(self._ends) else 0.0

    def point_at_length(self, s: float) -> Point2D:
        if not self._subpaths:
            return Point2D(0.0, 0.0)

        s = min(max(s, 0.0), self.total_length())
        idx = int(np.searchsorted(self._ends, s, side="left"))
        idx = min(idx, len(self._subpaths) - 1)
        start = self._ends[idx - 1] if idx > 0 else 0.0

        local = s - start
        vertices = self._subpaths[idx]
        cumulative = self._cumulative[idx]
        x = np.interp(local, cumulative, vertices[:, 0])
        y = np.interp(local, cumulative, vertices[:, 1])
        return Point2D(float(x), float(y))


def check_sample_count(n: int) -> None:
    """Reject sample counts the pipeline cannot work with.

    Raises:
        InvalidSampleCountError: If n is not an integer >= 2
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 2:
        raise InvalidSampleCountError(f"Sample count must be an integer >= 2, got {n!r}")


def sample_path(path: PathSource, n: int) -> np.ndarray:
    """Sample ``n`` points spaced evenly by arc length, both ends included.

    Args:
        path: Path to sample
        n: Number of samples

    Returns:
        np.ndarray: Complex array, ``x + 1j*y`` per sample

    Raises:
        InvalidSampleCountError: If n < 2
        DegenerateCurveError: If the path length is not finite or too short
    """
    check_sample_count(n)

    length = path.total_length()
    if not math.isfinite(length) or length <= MIN_PATH_LENGTH:
        logger.warning("Path length %r is too short to sample", length)
        raise DegenerateCurveError(f"Nothing to draw (path length {length!r})")

    samples = np.empty(n, dtype=complex)
    for i in range(n):
        s = (i / (n - 1)) * length
        p = path.point_at_length(s)
        samples[i] = complex(p.x, p.y)

    logger.debug("Sampled %d points over length %.3f", n, length)
    return samples

"""Centre and scale sampled points into the unit square."""

import numpy as np


def normalize(points: np.ndarray) -> np.ndarray:
    """Move the centroid to the origin and scale so max(|x|, |y|) is 1.

    A curve that collapses to a single point keeps scale 1 and ends up at
    the origin.

    Args:
        points: Complex samples (consumed; treat as invalid afterwards)

    Returns:
        np.ndarray: Normalised complex samples
    """
    points = np.asarray(points, dtype=complex)
    x = points.real - points.real.mean()
    y = points.imag - points.imag.mean()

    max_abs = max(float(np.abs(x).max()), float(np.abs(y).max())) if len(points) else 0.0
    s = 1.0 / max_abs if max_abs > 0 else 1.0

    return (x * s) + 1j * (y * s)

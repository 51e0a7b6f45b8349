"""Outline to ranked Fourier terms in one call."""

import logging

from epiglyph.core.normalize import normalize
from epiglyph.core.sampling import PathSource, sample_path
from epiglyph.core.spectrum import analyze
from epiglyph.models import Curve

logger = logging.getLogger(__name__)


def build_curve(path: PathSource, n: int) -> Curve:
    """Sample, normalise and analyse a path.

    Nothing is built when sampling fails, so callers can keep whatever
    curve they already had.

    Args:
        path: Outline to trace
        n: Number of arc-length samples

    Returns:
        Curve: Immutable snapshot of samples and ranked terms

    Raises:
        InvalidSampleCountError: If n < 2
        DegenerateCurveError: If the path has no usable length
    """
    samples = normalize(sample_path(path, n))
    terms = analyze(samples)
    samples.setflags(write=False)

    length = path.total_length()
    logger.info("Built curve: length=%.1f N=%d", length, n)
    return Curve(samples=samples, terms=terms, path_length=length)

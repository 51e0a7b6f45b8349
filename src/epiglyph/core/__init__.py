"""Numerical core: sampling, normalisation, DFT and epicycle composition."""

from epiglyph.core.epicycles import chain_radii, compose
from epiglyph.core.normalize import normalize
from epiglyph.core.pipeline import build_curve
from epiglyph.core.sampling import OutlinePath, PathSource, sample_path
from epiglyph.core.spectrum import analyze, dft, signed_frequency

__all__ = [
    "OutlinePath",
    "PathSource",
    "analyze",
    "build_curve",
    "chain_radii",
    "compose",
    "dft",
    "normalize",
    "sample_path",
    "signed_frequency",
]

"""epiglyph - Draw text with rotating circles.

Glyph outline in, ranked Fourier terms out, epicycles tracing it back.
"""

__version__ = "0.1.0"


class EpiglyphError(Exception):
    """Base exception for all epiglyph errors."""

    pass


class InvalidSampleCountError(EpiglyphError):
    """Raised when fewer than two samples are requested."""

    pass


class DegenerateCurveError(EpiglyphError):
    """Raised when a path has no usable arc length (nothing to draw)."""

    pass


class FontLoadError(EpiglyphError):
    """Raised when a font file cannot be loaded."""

    pass


class ConfigurationError(EpiglyphError):
    """Raised when configuration is invalid or missing."""

    pass

"""Glyph outlines from text, via matplotlib's font machinery.

The outline comes back in font coordinates: baseline at y=0, y pointing up,
units scaled by the font size. Curved glyph segments are flattened into
polylines before measuring arc length.
"""

import logging
from pathlib import Path
from typing import Optional

from matplotlib.font_manager import FontProperties
from matplotlib.textpath import TextPath

from epiglyph import FontLoadError
from epiglyph.core.sampling import OutlinePath

logger = logging.getLogger(__name__)


def load_font(font_path: Optional[Path | str] = None) -> FontProperties:
    """Load a font for outline extraction.

    Args:
        font_path: TTF/OTF file, or None for matplotlib's default family

    Returns:
        FontProperties: Font handle usable by ``text_outline``

    Raises:
        FontLoadError: If the file is missing or cannot be read as a font
    """
    if font_path is None:
        return FontProperties()

    path = Path(font_path)
    if not path.is_file():
        raise FontLoadError(f"Font file not found: {path}")

    prop = FontProperties(fname=str(path))
    try:
        # Forces the file to be parsed so a bad font fails here, not mid-render.
        TextPath((0, 0), "a", size=10, prop=prop)
    except (OSError, RuntimeError, ValueError) as e:
        raise FontLoadError(f"Could not load font {path}: {e}") from e

    logger.info("Loaded font %s", path)
    return prop


def text_outline(
    text: str,
    font_size: float,
    font: Optional[FontProperties] = None,
) -> OutlinePath:
    """Build an arc-length parameterised outline of ``text``.

    Blank text gives an empty outline (length 0).

    Args:
        text: Text to outline
        font_size: Font size, in outline units
        font: Font from ``load_font`` (default family if None)

    Returns:
        OutlinePath: One subpath per closed glyph contour
    """
    if not text.strip():
        return OutlinePath([])

    # Literal text: a pair of "$" would otherwise switch TextPath into mathtext.
    literal = text.replace("$", r"\$")
    path = TextPath((0, 0), literal, size=font_size, prop=font or FontProperties())
    polygons = path.to_polygons(closed_only=True)
    logger.debug("Outlined %r into %d contours", text, len(polygons))
    return OutlinePath(polygons)

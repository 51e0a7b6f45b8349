"""Pipeline context: one outline, its spectrum and its animation.

A session owns everything that used to be page-global: the current curve,
the animation clock and the status line. Hosts call the command methods
(render, toggle_pause, reset, resize) between ticks; nothing here is
re-entrant and there is no module-level state, so sessions can coexist.
"""

import logging
from typing import Optional

from matplotlib.font_manager import FontProperties

from epiglyph import DegenerateCurveError, InvalidSampleCountError
from epiglyph.animation import AnimationDriver
from epiglyph.config import EpiglyphConfig, get_config
from epiglyph.core.pipeline import build_curve
from epiglyph.core.sampling import PathSource
from epiglyph.glyphs import text_outline
from epiglyph.models import Curve, Frame, Point2D

logger = logging.getLogger(__name__)


class EpicycleSession:
    """Render text as epicycles, one frame at a time."""

    def __init__(
        self,
        config: Optional[EpiglyphConfig] = None,
        font: Optional[FontProperties] = None,
    ):
        """Initialize session.

        Args:
            config: Settings for N, M, font size and canvas (defaults if None)
            font: Font from ``glyphs.load_font`` (default family if None)
        """
        self.config = config or get_config()
        self.font = font
        self.sample_count = self.config.sample_count
        self.font_size = self.config.font_size
        self.status = "Idle. Nothing rendered yet."

        self.driver = AnimationDriver(
            term_count=self.config.term_count,
            flip_y=self.config.y_down,
        )
        self.resize(self.config.width, self.config.height)

    @property
    def curve(self) -> Optional[Curve]:
        return self.driver.curve

    @property
    def paused(self) -> bool:
        return self.driver.paused

    def render(self, path: PathSource) -> Curve:
        """Analyse ``path`` and restart the animation on it.

        Raises:
            DegenerateCurveError: If the path is empty; the previous curve
                and animation are left as they were
            InvalidSampleCountError: If the sample count is below 2
        """
        try:
            curve = build_curve(path, self.sample_count)
        except DegenerateCurveError:
            self.status = "Nothing to draw (path length ~0). Try different text."
            raise
        except InvalidSampleCountError:
            self.status = f"Invalid sample count N={self.sample_count!r}; need at least 2."
            raise

        self.driver.load(curve)
        self.status = (
            f"Ready. Path length={curve.path_length:.1f} | N={curve.sample_count} "
            f"| terms sorted by amplitude"
        )
        logger.info(self.status)
        return curve

    def render_text(self, text: str, font_size: Optional[float] = None) -> Curve:
        """Outline ``text`` with the session font and render it."""
        if font_size is not None:
            self.font_size = font_size
        return self.render(text_outline(text.strip() or " ", self.font_size, self.font))

    def set_sample_count(self, n: int) -> None:
        """Use ``n`` samples from the next render on."""
        self.sample_count = n

    def set_term_count(self, m: int) -> None:
        self.driver.set_term_count(m)

    def toggle_pause(self) -> bool:
        return self.driver.toggle_pause()

    def reset(self) -> None:
        self.driver.reset()

    def resize(self, width: float, height: float) -> None:
        """Fit unit amplitude to the canvas and centre the chain; resets."""
        scale = self.config.canvas_fill * min(width, height)
        self.driver.set_geometry(scale, Point2D(width / 2, height / 2))

    def tick(self) -> Frame:
        return self.driver.tick()

"""Frame-by-frame epicycle animation."""

import logging
from typing import Optional

from epiglyph.core.epicycles import chain_radii, compose
from epiglyph.models import ORIGIN, AnimationState, Curve, Frame, Point2D

logger = logging.getLogger(__name__)


class AnimationDriver:
    """Advance the cycle clock and grow the trail, one tick per frame.

    The driver is Idle until a curve is loaded, then Running. Each running
    tick composes the chain at the current ``t``, appends the tip to the
    trail and advances ``t`` by ``1/N`` (N = the curve's sample count). When
    ``t`` reaches 1 it wraps to 0 and the trail is cleared.
    """

    def __init__(
        self,
        term_count: int = 200,
        scale: float = 1.0,
        origin: Point2D = ORIGIN,
        flip_y: bool = False,
    ):
        """Initialize driver.

        Args:
            term_count: Number of epicycles chained per frame (M)
            scale: Drawing scale applied to every radius
            origin: Anchor of the first circle
            flip_y: Compose for a y-down drawing surface
        """
        self.term_count = max(0, term_count)
        self.scale = scale
        self.origin = origin
        self.flip_y = flip_y
        self.paused = False
        self.cycles = 0

        self._curve: Optional[Curve] = None
        self._state = AnimationState()

    @property
    def curve(self) -> Optional[Curve]:
        return self._curve

    @property
    def running(self) -> bool:
        return self._curve is not None

    @property
    def t(self) -> float:
        return self._state.t

    @property
    def trail(self) -> tuple[Point2D, ...]:
        return tuple(self._state.trail)

    def load(self, curve: Curve) -> None:
        """Swap in a new curve and restart the cycle."""
        self._curve = curve
        self._state = AnimationState(period=curve.sample_count)
        logger.debug("Loaded curve with %d terms", len(curve.terms))

    def reset(self) -> None:
        """Restart the cycle: t back to 0, trail cleared."""
        self._state.clear()

    def set_geometry(self, scale: float, origin: Point2D) -> None:
        """Move the drawing frame; the old trail no longer lines up, so reset."""
        self.scale = scale
        self.origin = origin
        self.reset()

    def set_term_count(self, m: int) -> None:
        self.term_count = max(0, m)

    def toggle_pause(self) -> bool:
        """Freeze or resume the clock. Returns the new paused flag."""
        self.paused = not self.paused
        return self.paused

    def compose(self) -> Frame:
        """Compose the chain at the current ``t`` without advancing."""
        return self._frame(*self._chain())

    def tick(self) -> Frame:
        """Produce this frame, then advance the clock unless paused or idle."""
        advancing = self.running and not self.paused
        tip, joints, radii = self._chain()
        if advancing:
            self._state.trail.append(tip)
        frame = self._frame(tip, joints, radii)

        if advancing:
            self._state.step += 1
            if self._state.step >= self._state.period:
                self._state.clear()
                self.cycles += 1
        return frame

    def _chain(self) -> tuple[Point2D, list[Point2D], list[float]]:
        terms = self._curve.terms if self._curve is not None else ()
        tip, joints = compose(
            terms, self.term_count, self._state.t, self.scale, self.origin, self.flip_y
        )
        return tip, joints, chain_radii(terms, self.term_count, self.scale)

    def _frame(self, tip: Point2D, joints: list[Point2D], radii: list[float]) -> Frame:
        return Frame(
            t=self._state.t,
            origin=self.origin,
            joints=tuple(joints),
            radii=tuple(radii),
            tip=tip,
            trail=tuple(self._state.trail),
            paused=self.paused,
        )

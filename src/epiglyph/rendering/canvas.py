"""Matplotlib renderer and frame loop for an epicycle session."""

import logging
from pathlib import Path
from typing import Literal, Optional

import matplotlib.animation as animation
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection

from epiglyph.core.epicycles import chain_radii, compose
from epiglyph.models import Frame
from epiglyph.session import EpicycleSession

logger = logging.getLogger(__name__)

Style = Literal["dark", "blueprint", "neon"]

# Circles smaller than this (pixels) are not drawn.
MIN_CIRCLE_RADIUS = 0.5

_UNIT_CIRCLE = np.exp(1j * np.linspace(0, 2 * np.pi, 65))


class EpicycleCanvas:
    """Draw a session's frames: circles, arms and the growing trail."""

    STYLES = {
        "dark": {
            "bg": "#0d1117",
            "line": "#58a6ff",
            "circle": "#30363d",
            "accent": "#f78166",
            "text": "#8b949e",
        },
        "blueprint": {
            "bg": "#1a237e",
            "line": "#ffffff",
            "circle": "#3949ab",
            "accent": "#ff8a65",
            "text": "#c5cae9",
        },
        "neon": {
            "bg": "#0a0a0a",
            "line": "#00ff88",
            "circle": "#333333",
            "accent": "#ff0088",
            "text": "#ffffff",
        },
    }

    def __init__(self, session: EpicycleSession, style: Style = "dark", dpi: int = 100):
        """Initialize canvas.

        Args:
            session: Session whose frames are drawn
            style: Colour scheme
            dpi: Figure resolution; the canvas is sized from the session config
        """
        self.session = session
        self.colors = self.STYLES.get(style, self.STYLES["dark"])
        self.dpi = dpi

        config = session.config
        self.fig = plt.figure(figsize=(config.width / dpi, config.height / dpi), dpi=dpi)
        self.fig.patch.set_facecolor(self.colors["bg"])
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.ax.set_facecolor(self.colors["bg"])
        self.ax.axis("off")
        self._set_limits(config.width, config.height)

        self.circles = LineCollection(
            [], colors=self.colors["circle"], linewidths=0.8, alpha=0.8
        )
        self.ax.add_collection(self.circles)
        (self.arms,) = self.ax.plot([], [], color=self.colors["accent"], linewidth=1, alpha=0.8)
        (self.trail,) = self.ax.plot([], [], color=self.colors["line"], linewidth=2)
        self.status = self.ax.text(
            0.01, 0.01, session.status, transform=self.ax.transAxes,
            color=self.colors["text"], fontsize=9, family="monospace",
        )
        self._animation: Optional[animation.FuncAnimation] = None

    def _set_limits(self, width: float, height: float) -> None:
        self.ax.set_xlim(0, width)
        if self.session.config.y_down:
            self.ax.set_ylim(height, 0)
        else:
            self.ax.set_ylim(0, height)

    def draw(self, frame: Frame) -> tuple:
        """Update the artists from one frame."""
        segments = [
            np.column_stack((c.x + r * _UNIT_CIRCLE.real, c.y + r * _UNIT_CIRCLE.imag))
            for c, r in zip(frame.centers, frame.radii)
            if r >= MIN_CIRCLE_RADIUS
        ]
        self.circles.set_segments(segments)

        chain = (frame.origin,) + frame.joints
        self.arms.set_data([p.x for p in chain], [p.y for p in chain])
        self.trail.set_data([p.x for p in frame.trail], [p.y for p in frame.trail])

        status = self.session.status
        if frame.paused:
            status += " | paused"
        self.status.set_text(status)
        return self.circles, self.arms, self.trail, self.status

    def _init(self) -> tuple:
        # Drawn before the first frame; must not advance the clock.
        return self.draw(self.session.driver.compose())

    def _update(self, _frame_number: int) -> tuple:
        return self.draw(self.session.tick())

    def animate(self, frames: Optional[int] = None) -> animation.FuncAnimation:
        """Create the frame loop; one session tick per animation frame.

        Args:
            frames: Number of frames to run (None runs until the window closes)
        """
        self._animation = animation.FuncAnimation(
            self.fig,
            self._update,
            frames=frames,
            init_func=self._init,
            interval=1000 / self.session.config.fps,
            blit=False,
            cache_frame_data=False,
        )
        return self._animation

    def _on_key(self, event) -> None:
        if event.key == " ":
            paused = self.session.toggle_pause()
            logger.debug("Paused" if paused else "Playing")
        elif event.key == "r":
            self.session.reset()

    def _on_resize(self, event) -> None:
        self.session.resize(event.width, event.height)
        self._set_limits(event.width, event.height)

    def show(self) -> None:
        """Open an interactive window. Space toggles pause, ``r`` resets."""
        self.fig.canvas.mpl_connect("key_press_event", self._on_key)
        self.fig.canvas.mpl_connect("resize_event", self._on_resize)
        self.animate()
        plt.show()

    def save(self, output_path: Path, frames: Optional[int] = None) -> Path:
        """Write the animation to a GIF with Pillow.

        Args:
            output_path: Where to save the animation
            frames: Frames to record (default: one full cycle)

        Returns:
            Path: Path to saved animation
        """
        if frames is None:
            curve = self.session.curve
            frames = curve.sample_count if curve is not None else 1

        anim = self.animate(frames=frames)
        anim.save(
            str(output_path),
            writer=animation.PillowWriter(fps=self.session.config.fps),
            savefig_kwargs={"facecolor": self.colors["bg"]},
        )
        plt.close(self.fig)
        logger.info("Saved %d frames to %s", frames, output_path)
        return output_path

    def snapshot(self, output_path: Path, t: float = 0.125) -> Path:
        """Save a still of the full M-term reconstruction with its epicycles at ``t``.

        Args:
            output_path: Where to save the image
            t: Cycle position at which the epicycles are shown

        Returns:
            Path: Path to saved image
        """
        driver = self.session.driver
        curve = self.session.curve
        if curve is not None:
            m = driver.term_count
            geometry = (driver.scale, driver.origin, driver.flip_y)
            trace = tuple(
                compose(curve.terms, m, n / curve.sample_count, *geometry)[0]
                for n in range(curve.sample_count + 1)
            )
            tip, joints = compose(curve.terms, m, t, *geometry)
            self.draw(
                Frame(
                    t=t,
                    origin=driver.origin,
                    joints=tuple(joints),
                    radii=tuple(chain_radii(curve.terms, m, driver.scale)),
                    tip=tip,
                    trail=trace,
                )
            )
        else:
            self.status.set_text(self.session.status)

        self.fig.savefig(output_path, dpi=self.dpi, facecolor=self.colors["bg"])
        plt.close(self.fig)
        return output_path

# src/rps_sims/core/arena.py
from __future__ import annotations

import threading
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from rps_sims.utils.random import SPAWN_STREAM, rng
from .entity import VIEWPORT_RADIUS

COMPACT_BREAKPOINT_PX = 768


def viewport_for_width(width_px: float, breakpoint: float = COMPACT_BREAKPOINT_PX) -> str:
    """Viewport class for a display of the given width."""
    return "compact" if width_px <= breakpoint else "normal"


class Arena:
    """
    Axis-aligned box [0, width] x [0, height] the entities live in.

    The bounds can be changed from outside the step loop (e.g. by a window
    resize handler). They are stored as a single tuple and swapped under a
    lock so a reader always gets a matching (width, height) pair.
    """

    def __init__(self, width: float, height: float, viewport: str = "normal"):
        if viewport not in VIEWPORT_RADIUS:
            raise ValueError(f"Unknown viewport {viewport!r}")
        self._lock = threading.Lock()
        self._bounds = self._check(width, height)
        self.viewport = viewport

    @staticmethod
    def _check(width: float, height: float) -> tuple[float, float]:
        width, height = float(width), float(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"Arena size must be positive, got {width}x{height}")
        return width, height

    @property
    def bounds(self) -> tuple[float, float]:
        with self._lock:
            return self._bounds

    @property
    def width(self) -> float:
        return self.bounds[0]

    @property
    def height(self) -> float:
        return self.bounds[1]

    def resize(self, width: float, height: float) -> None:
        new_bounds = self._check(width, height)
        with self._lock:
            self._bounds = new_bounds

    def contains(self, pos: np.ndarray, radius: float = 0.0) -> bool:
        """
        Return True if a (possibly extended) point is fully inside the arena.
        """
        width, height = self.bounds
        x, y = float(pos[0]), float(pos[1])
        return (
            x - radius >= 0.0
            and x + radius <= width
            and y - radius >= 0.0
            and y + radius <= height
        )

    def sample_position(self, margin: float = 0.0) -> np.ndarray:
        """
        Sample a uniform position at least `margin` away from every wall.
        """
        width, height = self.bounds
        mx = min(margin, width / 2)
        my = min(margin, height / 2)
        x = rng(SPAWN_STREAM).uniform(mx, width - mx)
        y = rng(SPAWN_STREAM).uniform(my, height - my)
        return np.array([x, y], dtype=float)

    def plot(self, ax=None, **kwargs):
        """
        Draw the arena rectangle and fit the axes to it.

        Extra keyword arguments go to Rectangle (facecolor, edgecolor, ...).
        The y axis is inverted so y grows downward, as on a screen.

        Returns ``ax`` if one was given, otherwise ``(fig, ax)``.
        """
        created_fig = False
        if ax is None:
            fig, ax = plt.subplots()
            created_fig = True

        width, height = self.bounds
        ax.add_patch(Rectangle((0.0, 0.0), width, height, **kwargs))
        ax.set_xlim(0.0, width)
        ax.set_ylim(height, 0.0)
        ax.set_aspect("equal", adjustable="box")

        if created_fig:
            return fig, ax
        return ax

    def __repr__(self) -> str:
        width, height = self.bounds
        return f"Arena(width={width}, height={height}, viewport={self.viewport!r})"

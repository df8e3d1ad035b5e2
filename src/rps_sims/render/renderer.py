# src/rps_sims/render/renderer.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Circle

from rps_sims.core.arena import Arena
from rps_sims.utils.plotting import TYPE_COLORS, TYPE_EDGE_COLOR, fig_inches_from_pixels, get_color

if TYPE_CHECKING:
    from rps_sims.core.recording import FrameSnapshot, EntityStateSnapshot


@dataclass
class RendererConfig:
    figsize: tuple[float, float] = (8.0, 6.0)
    dpi: int = 120
    width_px: int | None = None
    height_px: int | None = None
    background_color: str | None = "black"
    world_color: str | None = "#1b1f24"
    boundary_color: str | None = "turquoise"
    type_colors: dict[str, str] = field(default_factory=lambda: dict(TYPE_COLORS))
    edge_color: str = TYPE_EDGE_COLOR
    show_hud: bool = True
    hud_color: str = "white"
    highlight_conversions: bool = True
    padding: float = 0.06   # fraction of figure size to pad around the arena


class MatplotlibRenderer:
    """
    Draws FrameSnapshots: the arena box, one disc per entity colored by type,
    and a HUD line with the per-type counts.
    """

    def __init__(self, config: RendererConfig | None = None):
        self.config = config or RendererConfig()
        self.fig = None
        self.ax = None
        self._axes_rect = None
        self._hud_text = None

    def init_figure(self, arena_aspect: float = 4 / 3):
        fig, ax = plt.subplots(
            figsize=fig_inches_from_pixels(width_px=self.config.width_px,
                                           height_px=self.config.height_px,
                                           dpi=self.config.dpi,
                                           figsize_default=self.config.figsize),
            dpi=self.config.dpi,
        )
        bg = self.config.background_color if self.config.background_color is not None else "none"
        fig.patch.set_facecolor(bg)

        self._hud_text = fig.text(0.5, 0.97, "",
                                  ha="center", va="bottom",
                                  size=13,
                                  color=self.config.hud_color)
        self.fig, self.ax = fig, ax
        self.set_arena_aspect(arena_aspect)
        return fig, ax

    def set_arena_aspect(self, arena_aspect: float) -> None:
        """Re-fit the axes after the arena (or the figure) changed shape."""
        self._axes_rect = self._compute_axes_rect(self.fig, pad=self.config.padding, arena_aspect=arena_aspect)
        self.ax.set_position(self._axes_rect)
        top = self._axes_rect[1] + self._axes_rect[3]
        self._hud_text.set_y(min(top + 0.01, 0.97))

    def _compute_axes_rect(self, fig, pad: float, arena_aspect: float) -> list[float]:
        """Largest rect with the arena's aspect that fits inside the padded figure."""
        fig_aspect = fig.get_figwidth() / fig.get_figheight()
        w = 1 - 2 * pad
        h = w * fig_aspect / arena_aspect
        if h > 1 - 2 * pad:
            h = 1 - 2 * pad
            w = h * arena_aspect / fig_aspect
        return [(1 - w) / 2, (1 - h) / 2, w, h]

    def hud_line(self, snapshot: "FrameSnapshot") -> str:
        stats = snapshot.stats or {}
        line = (f"Rock: {stats.get('rock', 0)}   "
                f"Paper: {stats.get('paper', 0)}   "
                f"Scissors: {stats.get('scissors', 0)}")
        if stats.get("winner"):
            line += f"   |   {stats['winner'].capitalize()} wins!"
        return line

    def render_snapshot(self, snapshot: "FrameSnapshot", *, ax: Axes | None = None) -> None:
        """
        Draw a single frame snapshot onto the given Axes (default: own axes).
        """
        ax = ax if ax is not None else self.ax
        if ax is None:
            raise RuntimeError("init_figure() must be called before rendering")
        ax.clear()
        self._setup_axes(ax)

        width, height = snapshot.arena if snapshot.arena is not None else (1.0, 1.0)
        self._draw_arena(ax, width, height)

        converted = set()
        if self.config.highlight_conversions:
            converted = {e.b_id for e in snapshot.events if e.type == "ConversionEvent"}

        radius = snapshot.radius if snapshot.radius is not None else 0.02 * width
        for entity_id, state in snapshot.entities.items():
            self._draw_entity(ax, state, radius, flash=entity_id in converted)

        if self._hud_text is not None:
            self._hud_text.set_text(self.hud_line(snapshot) if self.config.show_hud else "")

    # --- helpers ---

    def _setup_axes(self, ax: Axes) -> None:
        if self._axes_rect is not None:
            ax.set_position(self._axes_rect)
        ax.set_facecolor(self.config.background_color if self.config.background_color is not None else "none")
        ax.set_aspect("equal", adjustable="box")
        ax.set_axis_off()

    def _draw_arena(self, ax: Axes, width: float, height: float) -> None:
        Arena(width, height).plot(
            ax=ax,
            facecolor=self.config.world_color if self.config.world_color is not None else "none",
            edgecolor=self.config.boundary_color if self.config.boundary_color is not None else "none",
            linewidth=2,
        )

    def _draw_entity(self, ax: Axes, state: "EntityStateSnapshot", radius: float, flash: bool = False) -> None:
        base = self.config.type_colors.get(state.type, "C0")
        fc = get_color(base, gamma=0.0, light_factor=0.6) if flash else base
        ax.add_patch(Circle(state.pos, radius, fc=fc, ec=self.config.edge_color, linewidth=0.8))

    def close(self) -> None:
        if self.fig is not None:
            plt.close(self.fig)
        self.fig = None
        self.ax = None

from matplotlib import colors
import numpy as np

# face colors per entity type (matplotlib color specs)
TYPE_COLORS = {
    "rock": "#8c8c8c",
    "paper": "#f2efe6",
    "scissors": "#e0474c",
}
TYPE_EDGE_COLOR = "#202020"


def get_color(base_color, gamma, light_factor=0.7):
    """Blend a color toward white; gamma=1 keeps the base, gamma=0 is the lightest."""
    base = np.array(colors.to_rgb(base_color), dtype=float)
    white = np.ones(3, dtype=float)
    light = white * light_factor + base * (1 - light_factor)
    color = light * (1 - gamma) + base * gamma
    return tuple(color)


def fig_inches_from_pixels(width_px: int | None = None,
                           height_px: int | None = None,
                           dpi: int = 100,
                           figsize_default: tuple[float, float] = (8.0, 6.0)) -> tuple[float, float]:
    if width_px is not None and height_px is not None:
        return (width_px / dpi, height_px / dpi)
    return figsize_default

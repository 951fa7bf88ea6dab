"""Image rendering of boards (matplotlib)."""

from life_shell.viz.render import (
    build_grid_array,
    render_board_image,
    render_filmstrip,
    render_window,
)
from life_shell.viz.theme import DARK_THEME, DEFAULT_THEME, Theme, get_theme

__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "Theme",
    "build_grid_array",
    "get_theme",
    "render_board_image",
    "render_filmstrip",
    "render_window",
]

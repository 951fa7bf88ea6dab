"""Visualization theme presets for board renderers.

Themes are frozen dataclasses that group all styling constants together,
so a palette can be swapped via the ``--theme`` CLI argument or
programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    live_cell_color: str = "#FFC107"
    dead_cell_color: str = "#F0F0F0"
    grid_line_color: str = "#CCCCCC"
    title_color: str = "black"
    figure_color: str = "white"
    draw_grid_lines: bool = True


DEFAULT_THEME = Theme()

DARK_THEME = Theme(
    live_cell_color="#4CAF50",
    dead_cell_color="#1A1A1A",
    grid_line_color="#333333",
    title_color="white",
    figure_color="#1A1A1A",
)

_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme preset by name."""
    if name not in _THEMES:
        raise ValueError(f"Unknown theme: {name!r}. Available: {', '.join(sorted(_THEMES))}")
    return _THEMES[name]

"""Matplotlib-based rendering functions for board snapshots."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage

from life_shell.domain.board import Board
from life_shell.io.paths import resolve_within_base
from life_shell.metrics.spatial import BoundingBox, bounding_box
from life_shell.viz.theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)

# Per-cell grid lines are drawn only up to this many cells per side.
_MAX_GRID_LINE_CELLS = 64

# Largest window, in cells, that is rasterised into one image.
_MAX_RENDER_CELLS = 4096 * 4096


# ---------------------------------------------------------------------------
# Cell-fill helpers
# ---------------------------------------------------------------------------


def render_window(boards: Sequence[Board]) -> BoundingBox:
    """Return the rectangle of *boards* worth drawing.

    This is the bounding box of all living cells grown by one cell on each
    side and clipped to the board, the same rectangle the candidate cells
    span and the console renderer prints. Boards without living cells map
    to their top-left cell. Raises :exc:`ValueError` when the window is too
    large to rasterise.
    """
    box = bounding_box(cell for board in boards for cell in board.living_cells)
    if box is None:
        return 0, 0, 0, 0
    min_x, min_y, max_x, max_y = box
    width, height = boards[0].width, boards[0].height
    window = (
        max(min_x - 1, 0),
        max(min_y - 1, 0),
        min(max_x + 1, width - 1),
        min(max_y + 1, height - 1),
    )
    area = (window[2] - window[0] + 1) * (window[3] - window[1] + 1)
    if area > _MAX_RENDER_CELLS:
        raise ValueError(
            f"Render window {window} spans {area} cells, more than {_MAX_RENDER_CELLS}"
        )
    return window


def build_grid_array(board: Board, window: BoundingBox | None = None) -> np.ndarray:
    """Return (H, W) int array over *window*: 1 for living cells, 0 for dead cells.

    Row 0, column 0 is the window's top-left cell; *window* defaults to
    ``render_window([board])``.
    """
    if window is None:
        window = render_window([board])
    min_x, min_y, max_x, max_y = window
    grid = np.zeros((max_y - min_y + 1, max_x - min_x + 1), dtype=np.uint8)
    for x, y in board.living_cells:
        if min_x <= x <= max_x and min_y <= y <= max_y:
            grid[y - min_y, x - min_x] = 1
    return grid


def _cell_cmap(theme: Theme) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 2-color colormap (dead, alive)."""
    cmap = ListedColormap([theme.dead_cell_color, theme.live_cell_color])
    norm = BoundaryNorm([-0.5, 0.5, 1.5], cmap.N)
    return cmap, norm


def _draw_cell_grid(ax: plt.Axes, grid: np.ndarray, theme: Theme) -> AxesImage:
    """Shared renderer: imshow with subtle grid lines on *ax*."""
    cmap, norm = _cell_cmap(theme)
    img = ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = grid.shape
    if theme.draw_grid_lines and max(h, w) <= _MAX_GRID_LINE_CELLS:
        for x in range(w + 1):
            ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
        for y in range(h + 1):
            ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_facecolor(theme.dead_cell_color)
    return img


def _resolve_output(output_path: Path, base_dir: Path | None) -> Path:
    if base_dir is None:
        return Path(output_path).resolve()
    return resolve_within_base(Path(output_path), Path(base_dir).resolve())


# ---------------------------------------------------------------------------
# Public renderers
# ---------------------------------------------------------------------------


def render_board_image(
    board: Board,
    output_path: Path,
    title: str | None = None,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Render the occupied window of a board snapshot to an image file and return its path."""
    output_path = _resolve_output(output_path, base_dir)
    grid = build_grid_array(board)
    h, w = grid.shape
    fig, ax = plt.subplots(figsize=(6, max(1.0, 6 * h / w)))
    fig.patch.set_facecolor(theme.figure_color)
    _draw_cell_grid(ax, grid, theme)
    if title is not None:
        ax.set_title(title, fontsize=10, color=theme.title_color)
    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, facecolor=fig.get_facecolor())
    plt.close(fig)
    logger.info("Rendered board image to %s", output_path)
    return output_path


def render_filmstrip(
    boards: Sequence[Board],
    output_path: Path,
    n_frames: int = 6,
    start_generation: int = 0,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Render horizontal filmstrip of evenly spaced generations with labels.

    Every frame shows the same window, the one covering all frames.
    """
    if not boards:
        raise ValueError("boards must not be empty")
    if n_frames < 1:
        raise ValueError("n_frames must be >= 1")
    output_path = _resolve_output(output_path, base_dir)

    actual_n = max(1, min(n_frames, len(boards)))
    indices = [int(i * (len(boards) - 1) / max(1, actual_n - 1)) for i in range(actual_n)]
    window = render_window([boards[i] for i in indices])

    fig, axes = plt.subplots(1, actual_n, figsize=(3 * actual_n, 3), squeeze=False)
    fig.patch.set_facecolor(theme.figure_color)
    for col_idx, board_idx in enumerate(indices):
        ax = axes[0, col_idx]
        _draw_cell_grid(ax, build_grid_array(boards[board_idx], window), theme)
        ax.set_title(
            f"Generation {start_generation + board_idx}", fontsize=9, color=theme.title_color
        )

    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, facecolor=fig.get_facecolor())
    plt.close(fig)
    logger.info("Rendered %d-frame filmstrip to %s", actual_n, output_path)
    return output_path

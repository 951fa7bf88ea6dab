"""Single-generation update: candidate cells, the B3/S23 cell rule and one step."""

from __future__ import annotations

from life_shell.config.constants import BIRTH_COUNT, SURVIVAL_COUNTS
from life_shell.config.types import UpdateMode
from life_shell.domain.board import Board, Cell


def candidate_cells(board: Board) -> frozenset[Cell]:
    """Return every living cell plus its on-board neighbors.

    Cells outside this set are dead with no living neighbor, so they cannot
    change in the next generation.
    """
    cells: set[Cell] = set(board.living_cells)
    for x, y in board.living_cells:
        cells |= board.neighbors(x, y)
    return frozenset(cells)


def next_state(board: Board, x: int, y: int) -> bool:
    """Return whether (x, y) is alive in the next generation, reading *board*."""
    count = board.living_neighbor_count(x, y)
    if board.get(x, y):
        return count in SURVIVAL_COUNTS
    return count == BIRTH_COUNT


def step_cell(board: Board, x: int, y: int) -> Board:
    """Apply the Life rule to (x, y) only, using *board* for neighbor counts."""
    return board.set(x, y, next_state(board, x, y))


def step(board: Board, update_mode: UpdateMode = UpdateMode.SYNCHRONOUS) -> Board:
    """Advance one generation.

    Synchronous mode (default): every candidate's next state is computed from
    the frozen pre-step board, then applied at once.
    Sequential mode: candidates are computed once from the pre-step board and
    updated one at a time in (x, y) order, each reading the board as left by
    the previous updates.
    """
    candidates = candidate_cells(board)
    if update_mode == UpdateMode.SEQUENTIAL:
        return _step_sequential(board, candidates)
    return _step_synchronous(board, candidates)


def _step_synchronous(board: Board, candidates: frozenset[Cell]) -> Board:
    living = frozenset(cell for cell in candidates if next_state(board, *cell))
    if living == board.living_cells:
        return board
    return Board(width=board.width, height=board.height, living_cells=living)


def _step_sequential(board: Board, candidates: frozenset[Cell]) -> Board:
    for x, y in sorted(candidates):
        board = step_cell(board, x, y)
    return board

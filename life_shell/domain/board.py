"""Bounded Life board backed by a sparse set of living cells.

Bounds invariant: every coordinate in ``living_cells`` satisfies
``0 <= x < width`` and ``0 <= y < height``. Boards are immutable; every
update returns a new ``Board``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from life_shell.config.constants import MOORE_OFFSETS

Cell = tuple[int, int]
"""Board coordinate as ``(x, y)``."""


@dataclass(frozen=True)
class Board:
    """Fixed-size board holding only the coordinates of living cells."""

    width: int
    height: int
    living_cells: frozenset[Cell] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("board dimensions must be >= 1")
        off_board = [cell for cell in self.living_cells if not self.is_on_board(*cell)]
        if off_board:
            raise ValueError(f"living cells outside the board: {sorted(off_board)}")

    @classmethod
    def create(cls, width: int, height: int) -> Board:
        """Return an empty board of the given size."""
        return cls(width=width, height=height)

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Iterable[Cell]) -> Board:
        """Return a board seeded with *cells*; off-board coordinates are dropped."""
        board = cls.create(width, height)
        living = frozenset(cell for cell in cells if board.is_on_board(*cell))
        return replace(board, living_cells=living)

    def is_on_board(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, x: int, y: int) -> frozenset[Cell]:
        """Return the on-board Moore neighbors of (x, y), excluding (x, y) itself."""
        return frozenset(
            (x + dx, y + dy) for dx, dy in MOORE_OFFSETS if self.is_on_board(x + dx, y + dy)
        )

    def living_neighbor_count(self, x: int, y: int) -> int:
        return len(self.neighbors(x, y) & self.living_cells)

    def get(self, x: int, y: int) -> bool:
        return (x, y) in self.living_cells

    def set(self, x: int, y: int, alive: bool) -> Board:
        """Return a board with (x, y) set to *alive*.

        Off-board coordinates are a silent no-op, as is setting a cell to the
        state it already has; both return ``self``.
        """
        if not self.is_on_board(x, y) or self.get(x, y) == alive:
            return self
        if alive:
            return replace(self, living_cells=self.living_cells | {(x, y)})
        return replace(self, living_cells=self.living_cells - {(x, y)})

    @property
    def population(self) -> int:
        return len(self.living_cells)


def create_board(width: int, height: int) -> Board:
    """Return an empty board with the given dimensions."""
    return Board.create(width, height)


def get(board: Board, x: int, y: int) -> bool:
    """Return True iff (x, y) is alive on *board*."""
    return board.get(x, y)


def set_cell(board: Board, x: int, y: int, alive: bool) -> Board:
    """Return *board* with (x, y) set to *alive* (no-op when off-board)."""
    return board.set(x, y, alive)

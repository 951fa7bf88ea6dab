"""Conway's Game of Life on a sparse bounded board.

The core entry points are re-exported here: ``create_board``, ``get``,
``set_cell``, ``step``, ``run`` and ``candidate_cells``.
"""

from life_shell.config.types import UpdateMode
from life_shell.domain.board import Board, create_board, get, set_cell
from life_shell.simulation.engine import run
from life_shell.simulation.step import candidate_cells, step, step_cell

__all__ = [
    "Board",
    "UpdateMode",
    "candidate_cells",
    "create_board",
    "get",
    "run",
    "set_cell",
    "step",
    "step_cell",
]

"""Domain layer: board model and stability detectors."""

from life_shell.domain.board import Board, Cell, create_board, get, set_cell
from life_shell.domain.filters import (
    ExtinctionDetector,
    HaltDetector,
    ShortPeriodDetector,
    TerminationReason,
)

__all__ = [
    "Board",
    "Cell",
    "ExtinctionDetector",
    "HaltDetector",
    "ShortPeriodDetector",
    "TerminationReason",
    "create_board",
    "get",
    "set_cell",
]

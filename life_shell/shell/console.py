"""Plain-text rendering of boards, statistics and help for the shell."""

from __future__ import annotations

from life_shell.config.constants import (
    DEAD_CELL_GLYPH,
    LIVE_CELL_GLYPH,
    NO_LIVING_CELLS_MESSAGE,
)
from life_shell.domain.board import Board
from life_shell.metrics.spatial import bounding_box
from life_shell.simulation.engine import GenerationRecord
from life_shell.simulation.step import candidate_cells

HELP_TEXT = """\
Use one of the following:

set x:int y:int v:bool   set the state of a cell e.g.: set 5 9 true
get x:int y:int          get the state of a cell e.g.: get 5 9
next                     advance the state by one step
run n:int                advance the state by n steps e.g.: run 10
print                    display the current state
stats                    show population statistics
render path              save an image of the board e.g.: render board.png
help                     show this help
exit                     exit the application"""


def render_board(
    board: Board, live_glyph: str = LIVE_CELL_GLYPH, dead_glyph: str = DEAD_CELL_GLYPH
) -> str:
    """Draw the rectangle spanned by the candidate cells, one line per row.

    The rectangle includes the one-cell margin of neighbors around living
    cells, clipped to the board.
    """
    box = bounding_box(candidate_cells(board))
    if box is None:
        return NO_LIVING_CELLS_MESSAGE
    min_x, min_y, max_x, max_y = box
    rows = []
    for y in range(min_y, max_y + 1):
        rows.append(
            "".join(
                live_glyph if (x, y) in board.living_cells else dead_glyph
                for x in range(min_x, max_x + 1)
            )
        )
    return "\n".join(rows)


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_stats(record: GenerationRecord) -> str:
    """One-line summary of a generation record."""
    if record.min_x is None:
        extent = "empty"
    else:
        extent = f"({record.min_x}, {record.min_y})-({record.max_x}, {record.max_y})"
    return (
        f"generation={record.generation} population={record.population} "
        f"density={record.density:.4g} clusters={record.cluster_count} extent={extent}"
    )


def format_unknown(text: str) -> str:
    return f"Unknown command: {text}\n\n{HELP_TEXT}"

"""Centralized domain constants for the Life board and its command shell.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

BOARD_WIDTH = 100
"""Default board width in cells."""

BOARD_HEIGHT = 100
"""Default board height in cells."""

MAX_BOARD_DIMENSION = 2**63
"""Largest width or height; every coordinate then fits the int64 generation-log columns."""

SURVIVAL_COUNTS: frozenset[int] = frozenset({2, 3})
"""Living-neighbor counts that keep a live cell alive (S23)."""

BIRTH_COUNT = 3
"""Living-neighbor count that brings a dead cell to life (B3)."""

MOORE_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)
"""Relative (dx, dy) offsets of the 8 Moore neighbors, origin excluded."""

HALT_WINDOW = 1
"""Default halt-detector window (consecutive unchanged generations)."""

SHORT_PERIOD_MAX = 2
"""Longest oscillator period reported as short-period by default."""

SHORT_PERIOD_HISTORY = 8
"""Number of generations retained for short-period detection."""

PROMPT = "> "
"""Prompt printed before each command read by the shell."""

LIVE_CELL_GLYPH = "#"
"""Console glyph for a living cell."""

DEAD_CELL_GLYPH = "."
"""Console glyph for a dead cell inside the drawn rectangle."""

NO_LIVING_CELLS_MESSAGE = "There are no living cells"
"""Console output for a board without living cells."""

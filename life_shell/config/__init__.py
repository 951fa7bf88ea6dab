"""Configuration layer: constants and typed config dataclasses."""

from life_shell.config.constants import (
    BIRTH_COUNT,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DEAD_CELL_GLYPH,
    HALT_WINDOW,
    LIVE_CELL_GLYPH,
    MAX_BOARD_DIMENSION,
    MOORE_OFFSETS,
    NO_LIVING_CELLS_MESSAGE,
    PROMPT,
    SHORT_PERIOD_HISTORY,
    SHORT_PERIOD_MAX,
    SURVIVAL_COUNTS,
)
from life_shell.config.types import (
    BoardConfig,
    RunConfig,
    ShellConfig,
    SimulationResult,
    UpdateMode,
)

__all__ = [
    "BIRTH_COUNT",
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "BoardConfig",
    "DEAD_CELL_GLYPH",
    "HALT_WINDOW",
    "LIVE_CELL_GLYPH",
    "MAX_BOARD_DIMENSION",
    "MOORE_OFFSETS",
    "NO_LIVING_CELLS_MESSAGE",
    "PROMPT",
    "RunConfig",
    "SHORT_PERIOD_HISTORY",
    "SHORT_PERIOD_MAX",
    "SURVIVAL_COUNTS",
    "ShellConfig",
    "SimulationResult",
    "UpdateMode",
]

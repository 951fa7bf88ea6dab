"""Configuration dataclasses for boards, runs and the interactive shell.

All frozen dataclasses that parameterise board creation, multi-generation
runs and shell sessions live here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from life_shell.config.constants import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    HALT_WINDOW,
    MAX_BOARD_DIMENSION,
    PROMPT,
    SHORT_PERIOD_HISTORY,
    SHORT_PERIOD_MAX,
)
from life_shell.viz.theme import DEFAULT_THEME, Theme

if TYPE_CHECKING:
    from life_shell.domain.board import Board
    from life_shell.domain.filters import TerminationReason
    from life_shell.simulation.engine import GenerationRecord

__all__ = [
    "UpdateMode",
    "BoardConfig",
    "RunConfig",
    "ShellConfig",
    "SimulationResult",
]


class UpdateMode(Enum):
    """Cell update semantics for one generation."""

    SEQUENTIAL = "sequential"
    SYNCHRONOUS = "synchronous"


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BoardConfig:
    """Board dimensions."""

    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("board dimensions must be >= 1")
        if self.width > MAX_BOARD_DIMENSION or self.height > MAX_BOARD_DIMENSION:
            raise ValueError(f"board dimensions must be <= {MAX_BOARD_DIMENSION}")


@dataclass(frozen=True)
class RunConfig:
    """Multi-generation run knobs, including the optional stability detectors."""

    steps: int = 1
    update_mode: UpdateMode = UpdateMode.SYNCHRONOUS
    stop_when_stable: bool = False
    halt_window: int = HALT_WINDOW
    short_period_max_period: int = SHORT_PERIOD_MAX
    short_period_history_size: int = SHORT_PERIOD_HISTORY

    def __post_init__(self) -> None:
        if self.steps < 0:
            raise ValueError("steps must be >= 0")
        if self.halt_window < 1:
            raise ValueError("halt_window must be >= 1")
        if self.short_period_max_period < 2:
            raise ValueError("short_period_max_period must be >= 2")
        if self.short_period_history_size < self.short_period_max_period * 2:
            raise ValueError("short_period_history_size must be >= 2 * short_period_max_period")


@dataclass(frozen=True)
class ShellConfig:
    """Settings for one interactive shell session."""

    board: BoardConfig = field(default_factory=BoardConfig)
    update_mode: UpdateMode = UpdateMode.SYNCHRONOUS
    prompt: str = PROMPT
    base_dir: Path = Path(".")
    generation_log: Path | None = None
    """Parquet file receiving one row per generation when the session ends."""
    theme: Theme = DEFAULT_THEME
    """Palette for images saved by the ``render`` command."""


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one multi-generation run."""

    board: Board
    generations_run: int
    termination_reason: TerminationReason | None
    terminated_at: int | None
    records: tuple[GenerationRecord, ...] = ()

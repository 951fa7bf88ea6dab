from __future__ import annotations

from collections import deque
from enum import Enum

from life_shell.domain.board import Cell

LivingCells = frozenset[Cell]


class TerminationReason(str, Enum):
    """Reason a run was reported stable."""

    EXTINCT = "extinct"
    HALT = "halt"
    SHORT_PERIOD = "short_period"


class HaltDetector:
    """Detect N consecutive unchanged generations (still lifes)."""

    def __init__(self, window: int) -> None:
        if window < 1:
            raise ValueError("window must be >= 1")
        self.window = window
        self._last_cells: LivingCells | None = None
        self._unchanged_count = 0

    def observe(self, cells: LivingCells) -> bool:
        """Return True once the living cells have stayed unchanged for `window` checks."""
        if self._last_cells is None:
            self._last_cells = cells
            return False

        if cells == self._last_cells:
            self._unchanged_count += 1
        else:
            self._unchanged_count = 0
            self._last_cells = cells

        return self._unchanged_count >= self.window


class ExtinctionDetector:
    """Detect a generation with no living cells."""

    def observe(self, cells: LivingCells) -> bool:
        return not cells


class ShortPeriodDetector:
    """Detect oscillation with a period between 2 and `max_period`.

    Period 1 is left to :class:`HaltDetector`.
    """

    def __init__(self, max_period: int, history_size: int) -> None:
        if max_period < 2:
            raise ValueError("max_period must be >= 2")
        if history_size < max_period * 2:
            raise ValueError("history_size must be >= 2 * max_period")
        self.max_period = max_period
        self._history: deque[LivingCells] = deque(maxlen=history_size)

    def observe(self, cells: LivingCells) -> bool:
        """Return True when the last two windows of some period p repeat exactly."""
        self._history.append(cells)
        history = list(self._history)
        for period in range(2, self.max_period + 1):
            if len(history) < period * 2:
                break
            recent = history[-period:]
            previous = history[-2 * period : -period]
            if recent == previous and recent[0] != recent[1]:
                return True
        return False

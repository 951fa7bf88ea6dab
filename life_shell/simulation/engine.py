"""Multi-generation driver: n-step runs, generation records and stability detection."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from life_shell.config.types import RunConfig, SimulationResult, UpdateMode
from life_shell.domain.board import Board
from life_shell.domain.filters import (
    ExtinctionDetector,
    HaltDetector,
    ShortPeriodDetector,
    TerminationReason,
)
from life_shell.metrics.spatial import bounding_box, cluster_count, density
from life_shell.simulation.step import step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationRecord:
    """Summary statistics for one generation."""

    generation: int
    population: int
    density: float
    cluster_count: int
    min_x: int | None
    min_y: int | None
    max_x: int | None
    max_y: int | None


def record_generation(board: Board, generation: int) -> GenerationRecord:
    """Build the statistics row for *board* at *generation*."""
    box = bounding_box(board.living_cells)
    min_x, min_y, max_x, max_y = box if box is not None else (None, None, None, None)
    return GenerationRecord(
        generation=generation,
        population=board.population,
        density=density(board),
        cluster_count=cluster_count(board),
        min_x=min_x,
        min_y=min_y,
        max_x=max_x,
        max_y=max_y,
    )


def iter_generations(
    board: Board, n: int, update_mode: UpdateMode = UpdateMode.SYNCHRONOUS
) -> Iterator[Board]:
    """Yield each of the next *n* generations of *board*."""
    if n < 0:
        raise ValueError("n must be >= 0")
    for _ in range(n):
        board = step(board, update_mode)
        yield board


def run(board: Board, n: int, update_mode: UpdateMode = UpdateMode.SYNCHRONOUS) -> Board:
    """Apply :func:`step` exactly *n* times; ``n == 0`` returns *board* unchanged."""
    if n < 0:
        raise ValueError("n must be >= 0")
    for _ in range(n):
        board = step(board, update_mode)
    return board


class _StabilityMonitor:
    """Feed each generation to the extinction, halt and short-period detectors."""

    def __init__(self, config: RunConfig) -> None:
        self._extinction = ExtinctionDetector()
        self._halt = HaltDetector(window=config.halt_window)
        self._short_period = ShortPeriodDetector(
            max_period=config.short_period_max_period,
            history_size=config.short_period_history_size,
        )

    def observe(self, board: Board) -> TerminationReason | None:
        cells = board.living_cells
        # every detector must see every generation to keep its history aligned
        extinct = self._extinction.observe(cells)
        halted = self._halt.observe(cells)
        periodic = self._short_period.observe(cells)
        if extinct:
            return TerminationReason.EXTINCT
        if halted:
            return TerminationReason.HALT
        if periodic:
            return TerminationReason.SHORT_PERIOD
        return None


def simulate(board: Board, config: RunConfig, start_generation: int = 0) -> SimulationResult:
    """Run up to ``config.steps`` generations and record statistics for each.

    The starting board is recorded as well when ``start_generation`` is 0.
    Stability is always detected and reported, starting with the initial
    board (an empty one is extinct at ``start_generation``); the run stops
    early only when ``config.stop_when_stable`` is set.
    """
    if start_generation < 0:
        raise ValueError("start_generation must be >= 0")

    records: list[GenerationRecord] = []
    if start_generation == 0:
        records.append(record_generation(board, 0))

    monitor = _StabilityMonitor(config)
    termination_reason = monitor.observe(board)
    terminated_at: int | None = None
    steps = config.steps
    if termination_reason is not None:
        terminated_at = start_generation
        logger.info(
            "Board stable at generation %d: %s", start_generation, termination_reason.value
        )
        if config.stop_when_stable:
            steps = 0

    generations_run = 0
    for offset, board in enumerate(iter_generations(board, steps, config.update_mode), 1):
        generation = start_generation + offset
        generations_run = offset
        records.append(record_generation(board, generation))
        reason = monitor.observe(board)
        if reason is not None and termination_reason is None:
            termination_reason = reason
            terminated_at = generation
            logger.info("Board stable at generation %d: %s", generation, reason.value)
            if config.stop_when_stable:
                break

    return SimulationResult(
        board=board,
        generations_run=generations_run,
        termination_reason=termination_reason,
        terminated_at=terminated_at,
        records=tuple(records),
    )

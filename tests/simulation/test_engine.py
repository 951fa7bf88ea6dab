"""Tests for life_shell.simulation.engine: run, iter_generations, simulate."""

from __future__ import annotations

import logging

import pytest

from life_shell.config.types import RunConfig, UpdateMode
from life_shell.domain.board import Board, create_board
from life_shell.domain.filters import TerminationReason
from life_shell.simulation.engine import (
    GenerationRecord,
    iter_generations,
    record_generation,
    run,
    simulate,
)

BLINKER_H = frozenset({(1, 2), (2, 2), (3, 2)})
BLINKER_V = frozenset({(2, 1), (2, 2), (2, 3)})
GLIDER = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]


class TestRun:
    def test_run_zero_returns_same_board(self) -> None:
        board = Board.from_cells(5, 5, GLIDER)
        assert run(board, 0) is board

    def test_run_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="n must be >= 0"):
            run(create_board(3, 3), -1)

    def test_blinker_period_two(self) -> None:
        board = Board(width=5, height=5, living_cells=BLINKER_H)
        assert run(board, 1).living_cells == BLINKER_V
        assert run(board, 2).living_cells == BLINKER_H
        assert run(board, 7).living_cells == BLINKER_V

    @pytest.mark.parametrize("n,m", [(0, 0), (0, 3), (2, 0), (1, 4), (3, 5)])
    def test_composability(self, n: int, m: int) -> None:
        board = Board.from_cells(12, 12, GLIDER)
        assert run(board, n + m) == run(run(board, n), m)

    def test_glider_translates_diagonally(self) -> None:
        board = Board.from_cells(12, 12, GLIDER)
        moved = run(board, 4)
        assert moved.living_cells == frozenset((x + 1, y + 1) for x, y in GLIDER)

    def test_glider_dies_into_corner_within_bounds(self) -> None:
        board = Board.from_cells(6, 6, GLIDER)
        for generation in iter_generations(board, 30):
            for x, y in generation.living_cells:
                assert 0 <= x < 6 and 0 <= y < 6

    def test_sequential_mode_is_threaded_through(self) -> None:
        board = Board(width=5, height=5, living_cells=BLINKER_H)
        assert run(board, 1, UpdateMode.SEQUENTIAL) != run(board, 1)


class TestIterGenerations:
    def test_yields_n_boards(self) -> None:
        board = Board(width=5, height=5, living_cells=BLINKER_H)
        generations = list(iter_generations(board, 3))
        assert [g.living_cells for g in generations] == [BLINKER_V, BLINKER_H, BLINKER_V]

    def test_zero_yields_nothing(self) -> None:
        assert list(iter_generations(create_board(2, 2), 0)) == []

    def test_negative_raises_on_iteration(self) -> None:
        with pytest.raises(ValueError):
            list(iter_generations(create_board(2, 2), -2))


class TestRecordGeneration:
    def test_empty_board_has_no_extent(self) -> None:
        record = record_generation(create_board(3, 3), 4)
        assert record == GenerationRecord(
            generation=4,
            population=0,
            density=0.0,
            cluster_count=0,
            min_x=None,
            min_y=None,
            max_x=None,
            max_y=None,
        )

    def test_extent_and_clusters(self) -> None:
        board = Board.from_cells(10, 10, [(1, 1), (2, 2), (7, 8)])
        record = record_generation(board, 0)
        assert record.population == 3
        assert record.density == pytest.approx(0.03)
        assert record.cluster_count == 2
        assert (record.min_x, record.min_y, record.max_x, record.max_y) == (1, 1, 7, 8)


class TestSimulate:
    def test_records_start_and_every_generation(self) -> None:
        board = Board.from_cells(12, 12, GLIDER)
        result = simulate(board, RunConfig(steps=5))
        assert result.generations_run == 5
        assert [r.generation for r in result.records] == [0, 1, 2, 3, 4, 5]
        assert all(r.population == 5 for r in result.records)
        assert result.board == run(board, 5)
        assert result.termination_reason is None

    def test_start_generation_offsets_records(self) -> None:
        board = Board(width=5, height=5, living_cells=BLINKER_H)
        result = simulate(board, RunConfig(steps=2), start_generation=10)
        assert [r.generation for r in result.records] == [11, 12]

    def test_negative_start_generation_rejected(self) -> None:
        with pytest.raises(ValueError, match="start_generation"):
            simulate(create_board(3, 3), RunConfig(steps=1), start_generation=-1)

    def test_extinction_detected(self) -> None:
        board = Board.from_cells(5, 5, [(2, 2)])
        result = simulate(board, RunConfig(steps=3))
        assert result.termination_reason is TerminationReason.EXTINCT
        assert result.terminated_at == 1
        assert result.generations_run == 3

    def test_still_life_detected_and_stops(self) -> None:
        board = Board.from_cells(4, 4, [(1, 1), (1, 2), (2, 1), (2, 2)])
        result = simulate(board, RunConfig(steps=10, stop_when_stable=True))
        assert result.termination_reason is TerminationReason.HALT
        assert result.terminated_at == 1
        assert result.generations_run == 1

    def test_oscillator_detected(self) -> None:
        board = Board(width=5, height=5, living_cells=BLINKER_H)
        result = simulate(board, RunConfig(steps=10, stop_when_stable=True))
        assert result.termination_reason is TerminationReason.SHORT_PERIOD
        assert result.terminated_at == 3
        assert result.board.living_cells == BLINKER_V

    def test_zero_steps(self) -> None:
        board = Board.from_cells(4, 4, [(0, 0)])
        result = simulate(board, RunConfig(steps=0))
        assert result.board is board
        assert result.generations_run == 0
        assert len(result.records) == 1

    def test_logs_stability(self, caplog: pytest.LogCaptureFixture) -> None:
        board = Board.from_cells(5, 5, [(2, 2)])
        with caplog.at_level(logging.INFO, logger="life_shell.simulation.engine"):
            simulate(board, RunConfig(steps=2))
        assert "stable at generation 1: extinct" in caplog.text

    def test_empty_start_is_extinct_at_start(self) -> None:
        result = simulate(create_board(3, 3), RunConfig(steps=0))
        assert result.termination_reason is TerminationReason.EXTINCT
        assert result.terminated_at == 0

    def test_empty_start_stops_before_stepping(self) -> None:
        result = simulate(create_board(3, 3), RunConfig(steps=5, stop_when_stable=True))
        assert result.generations_run == 0
        assert result.terminated_at == 0
        assert len(result.records) == 1

    def test_empty_start_reported_at_start_generation(self) -> None:
        result = simulate(create_board(3, 3), RunConfig(steps=2), start_generation=7)
        assert result.termination_reason is TerminationReason.EXTINCT
        assert result.terminated_at == 7
        assert result.generations_run == 2

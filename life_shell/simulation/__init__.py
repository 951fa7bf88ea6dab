"""Simulation driver: one-step update, n-step runs and generation logs."""

from life_shell.simulation.engine import (
    GenerationRecord,
    iter_generations,
    record_generation,
    run,
    simulate,
)
from life_shell.simulation.persistence import read_generation_log, write_generation_log
from life_shell.simulation.step import candidate_cells, next_state, step, step_cell

__all__ = [
    "GenerationRecord",
    "candidate_cells",
    "iter_generations",
    "next_state",
    "read_generation_log",
    "record_generation",
    "run",
    "simulate",
    "step",
    "step_cell",
    "write_generation_log",
]

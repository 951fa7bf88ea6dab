"""Parquet persistence helpers for the generation log."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import asdict
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from life_shell.io.schemas import GENERATION_LOG_COLUMNS, GENERATION_LOG_SCHEMA
from life_shell.simulation.engine import GenerationRecord

logger = logging.getLogger(__name__)


def write_generation_log(records: Sequence[GenerationRecord], path: Path) -> Path:
    """Write *records* to a Parquet file at *path*, replacing any existing file."""
    columns: dict[str, list[int | float | None]] = {name: [] for name in GENERATION_LOG_COLUMNS}
    for record in records:
        for name, value in asdict(record).items():
            columns[name].append(value)
    table = pa.Table.from_pydict(columns, schema=GENERATION_LOG_SCHEMA)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, path)
    logger.info("Wrote %d generation rows to %s", table.num_rows, path)
    return path


def read_generation_log(path: Path) -> list[GenerationRecord]:
    """Load a generation log written by :func:`write_generation_log`."""
    table = pq.read_table(path, columns=list(GENERATION_LOG_COLUMNS))
    return [GenerationRecord(**row) for row in table.to_pylist()]

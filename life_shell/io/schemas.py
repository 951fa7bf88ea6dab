"""Parquet schema definitions for generation logs.

The Arrow schema used for persisting per-generation statistics is
centralised here so the writer and reader work against the same column
contract.
"""

from __future__ import annotations

import pyarrow as pa

GENERATION_LOG_SCHEMA_VERSION = 1

GENERATION_LOG_SCHEMA = pa.schema(
    [
        ("generation", pa.int64()),
        ("population", pa.int64()),
        ("density", pa.float64()),
        ("cluster_count", pa.int64()),
        ("min_x", pa.int64()),
        ("min_y", pa.int64()),
        ("max_x", pa.int64()),
        ("max_y", pa.int64()),
    ],
    metadata={"schema_version": str(GENERATION_LOG_SCHEMA_VERSION)},
)

GENERATION_LOG_COLUMNS: tuple[str, ...] = tuple(GENERATION_LOG_SCHEMA.names)

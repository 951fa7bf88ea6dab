"""File-layout and schema helpers for generation logs."""

from life_shell.io.paths import generation_log_path, logs_dir, resolve_within_base
from life_shell.io.schemas import (
    GENERATION_LOG_COLUMNS,
    GENERATION_LOG_SCHEMA,
    GENERATION_LOG_SCHEMA_VERSION,
)

__all__ = [
    "GENERATION_LOG_COLUMNS",
    "GENERATION_LOG_SCHEMA",
    "GENERATION_LOG_SCHEMA_VERSION",
    "generation_log_path",
    "logs_dir",
    "resolve_within_base",
]

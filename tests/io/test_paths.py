from __future__ import annotations

from pathlib import Path

import pytest

from life_shell.io.paths import generation_log_path, logs_dir, resolve_within_base
from life_shell.io.schemas import GENERATION_LOG_COLUMNS, GENERATION_LOG_SCHEMA


def test_resolve_relative_path_inside_base(tmp_path: Path) -> None:
    resolved = resolve_within_base(Path("out/board.png"), tmp_path)
    assert resolved == (tmp_path / "out" / "board.png").resolve()


def test_resolve_absolute_path_inside_base(tmp_path: Path) -> None:
    target = tmp_path / "a.png"
    assert resolve_within_base(target, tmp_path) == target.resolve()


def test_resolve_rejects_escape(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="escapes base_dir"):
        resolve_within_base(Path("../outside.png"), tmp_path)


def test_log_paths(tmp_path: Path) -> None:
    assert logs_dir(tmp_path) == tmp_path / "logs"
    assert generation_log_path(tmp_path) == tmp_path / "logs" / "generation_log.parquet"


def test_schema_columns() -> None:
    assert GENERATION_LOG_COLUMNS == (
        "generation",
        "population",
        "density",
        "cluster_count",
        "min_x",
        "min_y",
        "max_x",
        "max_y",
    )
    assert GENERATION_LOG_SCHEMA.metadata[b"schema_version"] == b"1"

from life_shell.config.constants import (
    BIRTH_COUNT,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    HALT_WINDOW,
    MOORE_OFFSETS,
    SHORT_PERIOD_HISTORY,
    SHORT_PERIOD_MAX,
    SURVIVAL_COUNTS,
)


def test_board_dimensions_are_positive_ints() -> None:
    assert isinstance(BOARD_WIDTH, int) and BOARD_WIDTH > 0
    assert isinstance(BOARD_HEIGHT, int) and BOARD_HEIGHT > 0


def test_rule_is_b3_s23() -> None:
    assert BIRTH_COUNT == 3
    assert SURVIVAL_COUNTS == frozenset({2, 3})


def test_moore_offsets_are_eight_distinct_non_origin_offsets() -> None:
    assert len(MOORE_OFFSETS) == 8
    assert len(set(MOORE_OFFSETS)) == 8
    assert (0, 0) not in MOORE_OFFSETS
    assert all(abs(dx) <= 1 and abs(dy) <= 1 for dx, dy in MOORE_OFFSETS)


def test_detector_defaults_are_consistent() -> None:
    assert HALT_WINDOW >= 1
    assert SHORT_PERIOD_MAX >= 2
    assert SHORT_PERIOD_HISTORY >= 2 * SHORT_PERIOD_MAX

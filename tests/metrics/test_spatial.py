from __future__ import annotations

import math

from life_shell.domain.board import Board, create_board
from life_shell.metrics.spatial import adjacency_graph, bounding_box, cluster_count, density


def test_density() -> None:
    board = Board.from_cells(4, 5, [(0, 0), (1, 1)])
    assert math.isclose(density(board), 0.1)
    assert density(create_board(3, 3)) == 0.0


def test_bounding_box_empty_is_none() -> None:
    assert bounding_box([]) is None


def test_bounding_box_accepts_generators() -> None:
    assert bounding_box((x, 2 * x) for x in range(1, 4)) == (1, 2, 3, 6)


def test_cluster_count_empty_board() -> None:
    assert cluster_count(create_board(3, 3)) == 0


def test_diagonal_cells_form_one_cluster() -> None:
    board = Board.from_cells(5, 5, [(0, 0), (1, 1), (2, 2)])
    assert cluster_count(board) == 1


def test_separate_patterns_are_separate_clusters() -> None:
    block = [(0, 0), (0, 1), (1, 0), (1, 1)]
    blinker = [(5, 6), (6, 6), (7, 6)]
    board = Board.from_cells(10, 10, block + blinker)
    assert cluster_count(board) == 2


def test_adjacency_graph_edges() -> None:
    board = Board.from_cells(4, 4, [(0, 0), (1, 0), (3, 3)])
    graph = adjacency_graph(board)
    assert graph.number_of_nodes() == 3
    assert graph.number_of_edges() == 1
    assert graph.has_edge((0, 0), (1, 0))

"""Spatial metrics: density, bounding box, connected clusters."""

from __future__ import annotations

from collections.abc import Iterable

import networkx as nx

from life_shell.domain.board import Board, Cell

BoundingBox = tuple[int, int, int, int]
"""Inclusive ``(min_x, min_y, max_x, max_y)`` rectangle."""


def density(board: Board) -> float:
    """Fraction of board cells that are alive, in [0, 1]."""
    return len(board.living_cells) / (board.width * board.height)


def bounding_box(cells: Iterable[Cell]) -> BoundingBox | None:
    """Return the smallest rectangle holding *cells*, or None when empty."""
    cells = list(cells)
    if not cells:
        return None
    xs = [x for x, _ in cells]
    ys = [y for _, y in cells]
    return min(xs), min(ys), max(xs), max(ys)


def adjacency_graph(board: Board) -> nx.Graph:
    """Build the Moore-adjacency graph of living cells.

    Nodes are living cells; an edge joins two living cells that are
    8-neighbors of each other.
    """
    graph = nx.Graph()
    graph.add_nodes_from(board.living_cells)
    for x, y in board.living_cells:
        for other in board.neighbors(x, y):
            if other in board.living_cells:
                graph.add_edge((x, y), other)
    return graph


def cluster_count(board: Board) -> int:
    """Count 8-connected components among living cells."""
    if not board.living_cells:
        return 0
    return nx.number_connected_components(adjacency_graph(board))

"""Population and shape metrics computed from a board."""

from life_shell.metrics.spatial import (
    BoundingBox,
    adjacency_graph,
    bounding_box,
    cluster_count,
    density,
)

__all__ = [
    "BoundingBox",
    "adjacency_graph",
    "bounding_box",
    "cluster_count",
    "density",
]

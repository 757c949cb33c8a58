"""
Graph construction for labyrinths.

Every walkable field becomes a Vertex keyed by its Point; edges join
vertices exactly one unit apart along a single axis. Stone fields never
appear in the graph.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable

from labyrinth_types import Field, Labyrinth, Point, PointData

__all__ = ["Vertex", "build_point_list", "build_vertex_list", "build_graph"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vertex:
    """A walkable cell together with its walkable neighbours."""

    point: Point
    neighbors: tuple[Point, ...] = ()


def build_point_list(labyrinth: Labyrinth) -> PointData:
    """
    Collect walkable points in layer, row, column order.

    Args:
        labyrinth: Parsed labyrinth (need not be validated)

    Returns:
        PointData with all walkable points, the start (None if absent)
        and every exit
    """
    points: list[Point] = []
    exits: list[Point] = []
    start: Point | None = None
    width = labyrinth.dimension.width

    for z, layer in enumerate(labyrinth.layers):
        for index, cell in enumerate(layer.fields):
            if not cell.walkable:
                continue
            point = Point.from_index(index, width, z)
            points.append(point)
            if cell is Field.START:
                start = point
            elif cell is Field.EXIT:
                exits.append(point)

    return PointData(points=tuple(points), start=start, exits=tuple(exits))


def build_vertex_list(points: Iterable[Point]) -> list[Vertex]:
    """
    Build vertices with adjacency from a point list.

    Node order follows the point order. Neighbour order follows
    Point.adjacent (x, then y, then z; +1 before -1).
    """
    vertex_map: dict[Point, Vertex] = {point: Vertex(point) for point in points}

    for point, vertex in vertex_map.items():
        neighbors = tuple(n for n in point.adjacent() if n in vertex_map)
        vertex_map[point] = replace(vertex, neighbors=neighbors)

    vertices = list(vertex_map.values())
    logger.info(
        "build_vertex_list: %d vertices, %d edges",
        len(vertices),
        sum(len(v.neighbors) for v in vertices) // 2,
    )
    return vertices


def build_graph(labyrinth: Labyrinth) -> tuple[PointData, list[Vertex]]:
    """Point data and vertex list for a labyrinth, built from scratch."""
    point_data = build_point_list(labyrinth)
    return point_data, build_vertex_list(point_data.points)

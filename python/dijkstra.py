"""
Single-source, single-target shortest path over a labyrinth graph.

Dijkstra's algorithm with a uniform edge cost of 1. The frontier always
yields the unfinalized vertex with the smallest distance; ties go to the
vertex that comes first in the vertex list, so results are stable for a
given graph.
"""

from __future__ import annotations

import heapq
import logging
import math
from typing import Sequence

from labyrinth_graph import Vertex
from labyrinth_types import Point

__all__ = ["shortest_path", "edge_cost"]

logger = logging.getLogger(__name__)


def edge_cost(current: Vertex, neighbor: Point) -> int:
    """Cost of stepping from current to neighbor; every step costs 1."""
    return 1


def shortest_path(vertices: Sequence[Vertex], start: Point, target: Point) -> tuple[Vertex, ...]:
    """
    Find the shortest path from start to target.

    Args:
        vertices: Graph nodes in node order
        start: Point to start from
        target: Point to reach

    Returns:
        Vertices from start to target inclusive, or an empty tuple when
        either end is not in the graph or the target cannot be reached
    """
    order = {vertex.point: index for index, vertex in enumerate(vertices)}
    if start not in order or target not in order:
        logger.debug("shortest_path: %s or %s not in graph", start.key, target.key)
        return ()

    by_point = {vertex.point: vertex for vertex in vertices}
    dist: dict[Point, float] = {point: math.inf for point in order}
    prev: dict[Point, Point | None] = {point: None for point in order}
    dist[start] = 0

    finalized: set[Point] = set()
    # Entries are (distance, node order, point); stale entries are skipped on pop
    frontier: list[tuple[float, int, Point]] = [(0, order[start], start)]

    while frontier:
        distance, _, point = heapq.heappop(frontier)
        if point in finalized or distance != dist[point]:
            continue
        finalized.add(point)

        if point == target:
            path = _build_path(by_point, prev, target)
            logger.debug("shortest_path: %s -> %s in %d step(s)", start.key, target.key, len(path) - 1)
            return path

        current = by_point[point]
        for neighbor in current.neighbors:
            if neighbor not in order or neighbor in finalized:
                continue
            candidate = distance + edge_cost(current, neighbor)
            if candidate < dist[neighbor]:
                dist[neighbor] = candidate
                prev[neighbor] = point
                heapq.heappush(frontier, (candidate, order[neighbor], neighbor))

    logger.debug("shortest_path: %s unreachable from %s", target.key, start.key)
    return ()


def _build_path(
    by_point: dict[Point, Vertex],
    prev: dict[Point, Point | None],
    target: Point,
) -> tuple[Vertex, ...]:
    path: list[Vertex] = []
    point: Point | None = target
    while point is not None:
        path.append(by_point[point])
        point = prev[point]
    path.reverse()
    return tuple(path)

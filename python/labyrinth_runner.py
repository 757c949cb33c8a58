"""
Finalization and solving of parsed labyrinths.

A batch of labyrinths is validated as a whole before any of them is
solved, so one broken labyrinth aborts the session without partial
results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from dijkstra import shortest_path
from labyrinth_graph import Vertex, build_graph
from labyrinth_parser import check_layer_length
from labyrinth_types import IncompleteLabyrinthError, Labyrinth

__all__ = [
    "RunResult",
    "validate_labyrinth",
    "run_labyrinth",
    "solve_labyrinths",
    "describe_result",
]

logger = logging.getLogger(__name__)

Path = tuple[Vertex, ...]


@dataclass(frozen=True)
class RunResult:
    """Outcome of solving one labyrinth: one path per declared exit."""

    labyrinth: Labyrinth
    paths: tuple[Path, ...]

    @property
    def best(self) -> Path:
        """Shortest non-empty path, or () when no exit is reachable."""
        found = [path for path in self.paths if path]
        return min(found, key=len) if found else ()

    @property
    def escaped(self) -> bool:
        return bool(self.best)

    @property
    def moves(self) -> int | None:
        """Number of moves along the best path, None if trapped."""
        best = self.best
        return len(best) - 1 if best else None


def validate_labyrinth(labyrinth: Labyrinth, number: int) -> None:
    """
    Check that a labyrinth is complete enough to solve.

    Args:
        labyrinth: Labyrinth to check
        number: 1-based position within the session, used in messages

    Raises:
        IncompleteLabyrinthError: Wrong layer count, no start or no exit
        LayerLengthError: A layer holds the wrong number of rows
    """
    declared = labyrinth.dimension.layers
    if len(labyrinth.layers) != declared:
        raise IncompleteLabyrinthError(
            f"Lab #{number} expected layer length ({declared}) does not match "
            f"with given input layers (={len(labyrinth.layers)})!"
        )

    for layer in labyrinth.layers:
        check_layer_length(labyrinth, layer)

    if labyrinth.start_layer is None:
        raise IncompleteLabyrinthError(f"Lab #{number} has no start!")

    if not labyrinth.exit_layers:
        raise IncompleteLabyrinthError(f"Lab #{number} has no exit!")


def run_labyrinth(labyrinth: Labyrinth) -> RunResult:
    """Build the graph once and search from the start to every exit."""
    point_data, vertices = build_graph(labyrinth)
    if point_data.start is None:
        return RunResult(labyrinth, ())

    paths: list[Path] = []
    for exit_point in point_data.exits:
        path = shortest_path(vertices, point_data.start, exit_point)
        logger.info(
            "run_labyrinth: exit %s %s",
            exit_point.key,
            f"reached in {len(path) - 1} move(s)" if path else "unreachable",
        )
        paths.append(path)

    return RunResult(labyrinth, tuple(paths))


def solve_labyrinths(labyrinths: Sequence[Labyrinth]) -> list[RunResult]:
    """Validate every labyrinth, then solve them in order."""
    for number, labyrinth in enumerate(labyrinths, start=1):
        validate_labyrinth(labyrinth, number)

    return [run_labyrinth(labyrinth) for labyrinth in labyrinths]


def describe_result(result: RunResult) -> str:
    """One-line verdict for a solved labyrinth."""
    if result.moves is None:
        return "Trapped :-("
    return f"Escaped in {result.moves} minute(s)!"

"""
Shared type definitions for the labyrinth solver.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

# Dimension order on a dimension line: L R C
DIMENSION_LABELS = ("Layer", "Length", "Width")
DIMENSION_SHORT_LABELS = ("L", "R", "C")
DIMENSION_LIMITS = ((0, 30), (0, 30), (0, 30))


class Field(Enum):
    """A single labyrinth cell."""

    START = "S"
    EXIT = "E"
    AIR = "."
    STONE = "#"

    @property
    def walkable(self) -> bool:
        return self is not Field.STONE


# =============================================================================
# Errors
# =============================================================================


class LabyrinthError(ValueError):
    """Base class for every fatal labyrinth input error."""


class DimensionError(LabyrinthError):
    """Malformed or out-of-range dimension line."""


class LayerLengthError(LabyrinthError):
    """A closed layer does not have the declared number of rows."""


class RowWidthError(LabyrinthError):
    """A layer row does not have the declared number of columns."""


class InvalidSymbolError(LabyrinthError):
    """A character outside S, E, '.' and '#'."""


class MultipleStartError(LabyrinthError):
    """More than one start cell in one labyrinth."""


class LayerOverflowError(LabyrinthError):
    """Layer content after every declared layer is complete."""


class IncompleteLabyrinthError(LabyrinthError):
    """Finalization of a labyrinth with missing layers, start or exit."""


# =============================================================================
# Grid Model
# =============================================================================


@dataclass(frozen=True)
class Dimension:
    """Declared size of a labyrinth."""

    layers: int
    length: int  # rows per layer
    width: int  # columns per row

    @property
    def fields_per_layer(self) -> int:
        return self.length * self.width


@dataclass
class Layer:
    """One horizontal slice, stored row-major."""

    fields: list[Field] = field(default_factory=list)
    has_start: bool = False
    has_exit: bool = False

    def row_count(self, width: int) -> int:
        """Number of complete rows, given the layer width."""
        if width == 0:
            return 0
        return len(self.fields) // width


@dataclass
class Labyrinth:
    """
    One puzzle instance as read from input.

    start_layer is None until a start is found; exit_layers keeps the
    index of every layer holding at least one exit, in order of first
    appearance.
    """

    dimension: Dimension
    layers: list[Layer] = field(default_factory=list)
    start_layer: int | None = None
    exit_layers: list[int] = field(default_factory=list)

    @property
    def current_layer(self) -> Layer | None:
        return self.layers[-1] if self.layers else None

    @property
    def all_layers_opened(self) -> bool:
        return len(self.layers) == self.dimension.layers

    def is_layer_complete(self, layer: Layer) -> bool:
        return len(layer.fields) >= self.dimension.fields_per_layer


# =============================================================================
# Graph primitives
# =============================================================================


@dataclass(frozen=True)
class Point:
    """Position of a walkable cell: column, row, layer."""

    x: int
    y: int
    z: int

    @classmethod
    def from_index(cls, index: int, width: int, z: int) -> Point:
        """Point for the index-th field of layer z."""
        return cls(index % width, index // width, z)

    @property
    def key(self) -> str:
        return f"{self.x},{self.y},{self.z}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def adjacent(self) -> Iterator[Point]:
        """Yield the six axis-aligned unit offsets (x, then y, then z; +1 before -1)."""
        for axis in range(3):
            for offset in (1, -1):
                coords = list(self.as_tuple())
                coords[axis] += offset
                yield Point(*coords)

    def manhattan_distance(self, other: Point) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)


@dataclass(frozen=True)
class PointData:
    """Walkable points of a labyrinth plus its start and exits."""

    points: tuple[Point, ...]
    start: Point | None
    exits: tuple[Point, ...]

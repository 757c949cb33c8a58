"""
Line-by-line labyrinth input parsing.

The parser is a two-state machine threaded through an explicit
ParseSession value:

1. AWAITING_DIMENSION - expects an "L R C" line
2. BUILDING_LAYERS    - collects layer rows separated by blank lines

A "0 0 0" line closes the session and hands every labyrinth read so far
back to the caller for solving. Any other single-digit "d d d" line while
building layers starts the next labyrinth.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from labyrinth_types import (
    DIMENSION_LABELS,
    DIMENSION_LIMITS,
    DIMENSION_SHORT_LABELS,
    Dimension,
    DimensionError,
    Field,
    InvalidSymbolError,
    Labyrinth,
    Layer,
    LayerLengthError,
    LayerOverflowError,
    MultipleStartError,
    RowWidthError,
)

__all__ = ["ParseStep", "ParseSession", "accept", "parse_dimension", "check_layer_length"]

logger = logging.getLogger(__name__)

FINISH_LINE = "0 0 0"
CONTROL_LINE = re.compile(r"[0-9] [0-9] [0-9]")
DIMENSION_TOKEN = re.compile(r"-?[0-9]+")

_FIELD_CHARS = {f.value: f for f in Field}


class ParseStep(Enum):
    """Current step of the input state machine."""

    AWAITING_DIMENSION = "awaiting_dimension"
    BUILDING_LAYERS = "building_layers"


@dataclass
class ParseSession:
    """State of the input state machine across lines."""

    step: ParseStep = ParseStep.AWAITING_DIMENSION
    labyrinths: list[Labyrinth] = field(default_factory=list)

    @property
    def current(self) -> Labyrinth | None:
        """The labyrinth currently being built, if any."""
        return self.labyrinths[-1] if self.labyrinths else None


def parse_dimension(line: str) -> Dimension:
    """
    Parse an "L R C" dimension line.

    Raises:
        DimensionError: If the line does not hold exactly three integers
            within DIMENSION_LIMITS.
    """
    tokens = line.split()
    if len(tokens) != 3:
        raise DimensionError(
            f"Invalid dimension '{line}'\n"
            f"  Expected: {' '.join(DIMENSION_SHORT_LABELS)}, like 5 4 4"
        )

    values: list[int] = []
    for index, token in enumerate(tokens):
        low, high = DIMENSION_LIMITS[index]
        # int() alone would also take "1_0", "+1" and non-ASCII digits
        if not DIMENSION_TOKEN.fullmatch(token):
            raise _dimension_out_of_range(index, token)
        value = int(token)
        if not low <= value <= high:
            raise _dimension_out_of_range(index, token)
        values.append(value)

    return Dimension(layers=values[0], length=values[1], width=values[2])


def _dimension_out_of_range(index: int, token: str) -> DimensionError:
    low, high = DIMENSION_LIMITS[index]
    return DimensionError(
        f"Invalid number for {DIMENSION_SHORT_LABELS[index]} ({DIMENSION_LABELS[index]}), "
        f"must be number between {low} and {high} (got '{token}')"
    )


def check_layer_length(labyrinth: Labyrinth, layer: Layer) -> None:
    """
    Ensure a closed layer holds exactly length x width fields.

    Raises:
        LayerLengthError: If the layer has too few or too many rows.
    """
    dimension = labyrinth.dimension
    if len(layer.fields) != dimension.fields_per_layer:
        raise LayerLengthError(
            f"Invalid layer length of {layer.row_count(dimension.width)} "
            f"(should be {dimension.length})!"
        )


def accept(session: ParseSession, line: str) -> list[Labyrinth] | None:
    """
    Feed one input line into the state machine.

    Args:
        session: Parser state, updated in place
        line: Raw input line (surrounding whitespace is ignored)

    Returns:
        The labyrinths of the session when a "0 0 0" line closed it,
        otherwise None.

    Raises:
        LabyrinthError: On the first malformed line; every error is fatal.
    """
    line = line.strip()

    if session.step is ParseStep.AWAITING_DIMENSION:
        _start_labyrinth(session, line)
        return None

    if CONTROL_LINE.fullmatch(line):
        if line == FINISH_LINE:
            finished = session.labyrinths
            session.labyrinths = []
            session.step = ParseStep.AWAITING_DIMENSION
            logger.debug("Session finished with %d labyrinth(s)", len(finished))
            return finished
        # The open labyrinth stands as accumulated; it is checked at "0 0 0".
        session.step = ParseStep.AWAITING_DIMENSION
        _start_labyrinth(session, line)
        return None

    _accept_layer_line(session, line)
    return None


def _start_labyrinth(session: ParseSession, line: str) -> None:
    dimension = parse_dimension(line)
    session.labyrinths.append(Labyrinth(dimension))
    session.step = ParseStep.BUILDING_LAYERS
    logger.debug("Labyrinth #%d declared as %s", len(session.labyrinths), dimension)


def _accept_layer_line(session: ParseSession, line: str) -> None:
    # BUILDING_LAYERS is only entered after a labyrinth was appended
    labyrinth = session.labyrinths[-1]

    if not line or not labyrinth.layers:
        # Advance to the next layer
        if labyrinth.current_layer is not None:
            check_layer_length(labyrinth, labyrinth.current_layer)
            logger.debug("Closed layer %d", len(labyrinth.layers) - 1)

        if labyrinth.all_layers_opened:
            if not line:
                return
            _raise_overflow()

        labyrinth.layers.append(Layer())
        if not line:
            return
    elif labyrinth.all_layers_opened and labyrinth.is_layer_complete(labyrinth.layers[-1]):
        _raise_overflow()

    _append_row(labyrinth, line)


def _raise_overflow() -> None:
    raise LayerOverflowError(
        "Invalid new layer! All layers are done and 0 0 0 "
        "or a new labyrinth definition was expected!"
    )


def _append_row(labyrinth: Labyrinth, line: str) -> None:
    width = labyrinth.dimension.width
    if len(line) != width:
        raise RowWidthError(
            f"Invalid line length found ({len(line)}, expected: {width}). "
            f"Cant build a labyrinth!\n"
            f"  Row: \"{line}\""
        )

    layer = labyrinth.layers[-1]
    layer_index = len(labyrinth.layers) - 1

    for col, char in enumerate(line.upper()):
        cell = _FIELD_CHARS.get(char)
        if cell is None:
            raise InvalidSymbolError(
                f"Invalid char \"{char}\" for labyrinth found!\n"
                f"  Layer {layer_index}, column {col}\n"
                f"  Valid characters: S (start), E (exit), . (air), # (stone)"
            )

        if cell is Field.START:
            if layer.has_start or labyrinth.start_layer is not None:
                raise MultipleStartError("Labyrinth has multiple Start positions!")
            layer.has_start = True
            labyrinth.start_layer = layer_index
        elif cell is Field.EXIT:
            if not layer.has_exit:
                labyrinth.exit_layers.append(layer_index)
            layer.has_exit = True

        layer.fields.append(cell)

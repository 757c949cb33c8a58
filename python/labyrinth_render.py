"""
ASCII rendering of labyrinths with an optional highlighted path.
"""

from __future__ import annotations

from typing import Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from labyrinth_graph import Vertex
from labyrinth_types import Field, Labyrinth, Point

__all__ = ["render_labyrinth"]

PATH_MARK = "*"

_FIELD_COLORS: dict[Field, Callable[[str], str]] = {
    Field.START: chalk.cyan,
    Field.EXIT: chalk.blue,
    Field.STONE: chalk.white,
}


def render_labyrinth(
    labyrinth: Labyrinth,
    path: Iterable[Vertex] | None = None,
    colorize: bool = True,
) -> str:
    """
    Render every layer of a labyrinth, rows top to bottom.

    Layers are separated by one blank line. Cells on the path are drawn
    green; without colors, path cells other than start and exit are
    drawn as '*'.

    Args:
        labyrinth: Labyrinth to draw
        path: Optional vertices to highlight
        colorize: Emit ANSI colors (default True)

    Returns:
        The rendered text, without a trailing newline
    """
    on_path: set[Point] = {vertex.point for vertex in path} if path else set()
    width = labyrinth.dimension.width

    blocks: list[str] = []
    for z, layer in enumerate(labyrinth.layers):
        lines: list[str] = []
        for row_start in range(0, len(layer.fields), max(width, 1)):
            row = layer.fields[row_start:row_start + width]
            y = row_start // width if width else 0
            lines.append(
                "".join(
                    _render_cell(cell, Point(x, y, z) in on_path, colorize)
                    for x, cell in enumerate(row)
                )
            )
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks)


def _render_cell(cell: Field, in_path: bool, colorize: bool) -> str:
    char = cell.value
    if not colorize:
        if in_path and cell is Field.AIR:
            return PATH_MARK
        return char
    if in_path:
        return chalk.green(char)
    color = _FIELD_COLORS.get(cell)
    return color(char) if color else char

"""
Labyrinth mode of the command shell.
"""

from __future__ import annotations

import simple_chalk as chalk  # type: ignore[import-untyped]

from base_cli import BaseCli
from labyrinth_parser import ParseSession, accept
from labyrinth_render import render_labyrinth
from labyrinth_runner import describe_result, solve_labyrinths
from labyrinth_types import DIMENSION_SHORT_LABELS, Labyrinth

LRC = " ".join(DIMENSION_SHORT_LABELS)


class LabyrinthCli(BaseCli):
    """Reads labyrinth definitions line by line and reports escape times."""

    def __init__(self, interactive: bool = False, debug: bool = False) -> None:
        super().__init__(interactive=interactive, debug=debug)
        self.session = ParseSession()

    def print_instructions(self) -> None:
        if not self.is_interactive:
            return

        self.output.append(chalk.cyan("Labyrinth -- Definition:"))
        self.output.append(chalk.yellow(f"[1] Define the labyrinth dimension as follow: {LRC}"))
        self.output.append(chalk.yellow(f"- {DIMENSION_SHORT_LABELS[0]} number of layers"))
        self.output.append(chalk.yellow(f"- {DIMENSION_SHORT_LABELS[1]} length of labyrinth"))
        self.output.append(chalk.yellow(f"- {DIMENSION_SHORT_LABELS[2]} width of labyrinth"))

    def process_line(self, line: str) -> None:
        previous_count = len(self.session.labyrinths)

        finished = accept(self.session, line)
        if finished is not None:
            self._output_runs(finished)
            return

        started_new = len(self.session.labyrinths) > previous_count
        if self.is_interactive and started_new and self.session.current is not None:
            self._print_layer_instructions(self.session.current)

    def _output_runs(self, labyrinths: list[Labyrinth]) -> None:
        if self.is_interactive:
            self.output.append(chalk.cyan("=== Labyrinths ==="))

        for result in solve_labyrinths(labyrinths):
            if self.is_debug:
                self.output.append(render_labyrinth(result.labyrinth, result.best))
            self.output.append(describe_result(result))

        self.is_done = True

    def _print_layer_instructions(self, labyrinth: Labyrinth) -> None:
        self.output.append(
            chalk.cyan(
                f"Great! Now define {labyrinth.dimension.layers} layers, "
                f"by using the following structure:"
            )
        )
        self.output.append(chalk.yellow("- One of the layers must have an S for start position"))
        self.output.append(
            chalk.yellow("- At least one layer must have an E for an exit (multiple are possible)")
        )
        self.output.append(chalk.yellow("- Use # for stone (not passable) or . for air (passable)"))
        self.output.append(chalk.yellow("- Use 0 0 0 to finish up the labyrinth"))
        self.output.append(
            chalk.yellow(
                f"Note you can continue to create a new labyrinth if you do not use 0 0 0 "
                f"and instead a new {LRC} line"
            )
        )

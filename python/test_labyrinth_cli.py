"""Tests for the labyrinth command shell and entry point."""

import io
import re

import pytest
from rich.console import Console

from labyrinth_app import main, split_content
from labyrinth_cli import LabyrinthCli
from labyrinth_types import IncompleteLabyrinthError, RowWidthError

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

FAILED_ESCAPE = """3 5 5
#####
#S...
#.###
#.###
#.###

#####
####.
####.
####.
#...#

#####
#E..#
#####
#...#
#####

0 0 0"""


def run_lines(cli: LabyrinthCli, lines: list[str]) -> list[str]:
    for line in lines:
        cli.process_line(line)
    return cli.output


class TestLabyrinthCli:
    """Tests for LabyrinthCli line processing."""

    def test_reports_escape(self) -> None:
        """One verdict line per labyrinth after 0 0 0."""
        cli = LabyrinthCli()
        output = run_lines(cli, ["1 3 3", "S..", "..E", "..E", "", "0 0 0"])
        assert output == ["Escaped in 3 minute(s)!"]
        assert cli.is_done

    def test_not_done_before_finish_line(self) -> None:
        """Nothing is reported until 0 0 0."""
        cli = LabyrinthCli()
        output = run_lines(cli, ["1 1 2", "SE", ""])
        assert output == []
        assert not cli.is_done

    def test_instructions_only_in_interactive_mode(self) -> None:
        """print_instructions is silent unless interactive."""
        quiet = LabyrinthCli()
        quiet.print_instructions()
        assert quiet.output == []

        chatty = LabyrinthCli(interactive=True)
        chatty.print_instructions()
        assert len(chatty.output) == 5
        assert "Labyrinth -- Definition:" in ANSI_ESCAPE.sub("", chatty.output[0])

    def test_interactive_and_debug_output(self) -> None:
        """Layer help, header, rendered grid and verdict are all emitted."""
        cli = LabyrinthCli(interactive=True, debug=True)
        output = run_lines(cli, FAILED_ESCAPE.split("\n"))
        assert len(output) == 9
        assert ANSI_ESCAPE.sub("", output[6]) == "=== Labyrinths ==="
        assert ANSI_ESCAPE.sub("", output[7]).startswith("#####\n#S...")
        assert output[8] == "Trapped :-("

    def test_debug_renders_before_each_verdict(self) -> None:
        """In debug mode every verdict is preceded by its grid."""
        cli = LabyrinthCli(debug=True)
        output = run_lines(cli, ["1 1 2", "SE", "", "1 1 3", "S#E", "", "0 0 0"])
        assert [ANSI_ESCAPE.sub("", line) for line in output] == [
            "SE",
            "Escaped in 1 minute(s)!",
            "S#E",
            "Trapped :-(",
        ]

    def test_errors_propagate(self) -> None:
        """Input errors reach the caller unchanged."""
        cli = LabyrinthCli()
        with pytest.raises(RowWidthError):
            run_lines(cli, ["1 3 3", "#####"])

        cli = LabyrinthCli()
        with pytest.raises(IncompleteLabyrinthError, match="has no exit"):
            run_lines(cli, ["1 1 2", "S.", "0 0 0"])

    def test_flush_prints_and_clears(self) -> None:
        """flush writes every buffered line and empties the buffer."""
        cli = LabyrinthCli()
        cli.output.append("Trapped :-(")
        buffer = io.StringIO()
        cli.flush(Console(file=buffer, highlight=False))
        assert buffer.getvalue() == "Trapped :-(\n"
        assert cli.output == []


class TestMain:
    """Tests for the command-line entry point."""

    def test_split_content(self) -> None:
        """Real and escaped newlines both separate lines."""
        assert split_content("1 1 2\\nSE\n0 0 0") == ["1 1 2", "SE", "0 0 0"]
        assert split_content("a\\r\\nb\r\nc") == ["a", "b", "c"]

    def test_inline_content(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Content passed as an argument is solved."""
        code = main(["1 3 3\\nS..\\n..E\\n..E\\n\\n0 0 0"])
        assert code == 0
        assert capsys.readouterr().out == "Escaped in 3 minute(s)!\n"

    def test_stdin(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without content, lines are read from stdin."""
        stdin = io.StringIO("1 3 3\nS##\n#E#\n###\n\n0 0 0\n")
        code = main([], stdin=stdin)
        assert code == 0
        assert capsys.readouterr().out == "Trapped :-(\n"

    def test_stops_after_finish_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Lines after 0 0 0 are not processed."""
        stdin = io.StringIO("1 1 2\nSE\n0 0 0\nnot a dimension\n")
        assert main([], stdin=stdin) == 0
        captured = capsys.readouterr()
        assert captured.out == "Escaped in 1 minute(s)!\n"
        assert captured.err == ""

    def test_fatal_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The first error aborts with exit code 1 and a message on stderr."""
        stdin = io.StringIO("1 1 2\nSX\nSE\n0 0 0\n")
        assert main([], stdin=stdin) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Fatal Error:" in captured.err
        assert 'Invalid char "X"' in captured.err

    def test_unfinished_input(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Input ending before 0 0 0 exits with code 1."""
        assert main([], stdin=io.StringIO("1 1 2\nSE\n")) == 1
        assert capsys.readouterr().out == ""

    def test_interactive_prints_instructions(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Interactive mode greets with the definition help."""
        assert main(["--interactive"], stdin=io.StringIO("")) == 1
        assert "Labyrinth -- Definition:" in capsys.readouterr().out

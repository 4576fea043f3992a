"""
Tests for the command-line interface.
"""

import argparse

import pytest

from .. import cli


def _feed(lines):
    it = iter(lines)

    def input_fn(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return input_fn


class TestCommands:
    """Tests for CLI subcommands."""

    def test_show(self, capsys):
        cli.main(["show"])
        out = capsys.readouterr().out
        assert "Wood Nuts Simulator" in out
        assert "r13" in out
        assert "x 7C" in out

    def test_validate_ok(self, capsys):
        cli.main(["validate"])
        assert "OK" in capsys.readouterr().out

    def test_unknown_puzzle_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["show", "--puzzle", "nope"])
        assert exc_info.value.code == 1

    def test_no_command_exits(self, capsys):
        with pytest.raises(SystemExit):
            cli.main([])


class TestPlay:
    """Tests for interactive play."""

    def test_blocked_bolt_explained(self, capsys):
        args = argparse.Namespace(puzzle="wood_nuts")
        cli.cmd_play(args, input_fn=_feed(["1A", "quit"]))
        out = capsys.readouterr().out
        assert "Cannot remove 1A: held by r1, r3" in out
        assert "Steps:" not in out

    def test_play_to_success(self, capsys, solvable_registered):
        args = argparse.Namespace(puzzle="solvable")

        cli.cmd_play(args, input_fn=_feed(["X1", "X2", "X3", "Z9"]))
        out = capsys.readouterr().out
        assert "Removed Z9" in out
        assert "Success!" in out
        assert "  - Removed X1" in out

    def test_reset_command(self, capsys, solvable_registered):
        args = argparse.Namespace(puzzle="solvable")

        cli.cmd_play(args, input_fn=_feed(["X1", "reset", "q"]))
        out = capsys.readouterr().out
        assert "Removed X1" in out
        assert "Steps:" not in out

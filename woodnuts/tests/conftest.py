"""
Pytest fixtures for Wood Nuts tests.
"""

import pytest

from ..puzzle_schema import PuzzleSpec
from ..engine_core.state import PuzzleState
from ..games import PUZZLES
from ..games.wood_nuts.spec import create_wood_nuts_spec


@pytest.fixture
def wood_nuts_spec() -> PuzzleSpec:
    """The built-in puzzle."""
    return create_wood_nuts_spec()


@pytest.fixture
def single_bolt_spec() -> PuzzleSpec:
    """One plank held by one bolt."""
    return PuzzleSpec.build(
        puzzle_id="single",
        name="Single",
        grid=[["X1"]],
        planks=[{"id": "s", "bolts": ["X1"]}],
    )


@pytest.fixture
def pair_spec() -> PuzzleSpec:
    """One plank held by two bolts."""
    return PuzzleSpec.build(
        puzzle_id="pair",
        name="Pair",
        grid=[["A", "B"]],
        planks=[{"id": "p", "bolts": ["A", "B"]}],
    )


@pytest.fixture
def solvable_spec() -> PuzzleSpec:
    """
    Only single-bolt planks, so every bolt is removable.

    X1 is shared by two planks; Z9 is held but not on the grid.
    """
    return PuzzleSpec.build(
        puzzle_id="solvable",
        name="Solvable",
        grid=[["X1", "X2"], ["X3"]],
        planks=[
            {"id": "s1", "bolts": ["X1"], "color": "blue", "level": 2},
            {"id": "s2", "bolts": ["X1"]},
            {"id": "s3", "bolts": ["X2"]},
            {"id": "s4", "bolts": ["X3"]},
            {"id": "off", "bolts": ["Z9"]},
        ],
        starter_holes=["H1"],
    )


@pytest.fixture
def wood_nuts_state(wood_nuts_spec: PuzzleSpec) -> PuzzleState:
    return PuzzleState.initial(wood_nuts_spec)


@pytest.fixture
def solvable_registered(solvable_spec, monkeypatch) -> PuzzleSpec:
    """Register the solvable test puzzle for the duration of a test."""
    monkeypatch.setitem(PUZZLES, "solvable", lambda: solvable_spec)
    return solvable_spec

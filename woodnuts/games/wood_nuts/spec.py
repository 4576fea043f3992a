"""
Wood Nuts Puzzle Specification

The built-in board: a 7-row bolt grid where full rows carry three bolts
(columns A, B, C) and the in-between rows carry two (AB, BC), with thirteen
red planks laid across it at two stacking levels.
"""

from ...puzzle_schema.puzzle_spec import PuzzleSpec


BOLT_GRID = [
    ["1A", "1B", "1C"],
    ["2AB", "2BC"],
    ["3A", "3B", "3C"],
    ["4AB", "4BC"],
    ["5A", "5B", "5C"],
    ["6AB", "6BC"],
    ["7A", "7B", "7C"],
]

STARTER_HOLES = ["H1", "H2", "H3"]

# Definition order is draw order
PLANKS = [
    {"id": "r1", "color": "red", "level": 1, "bolts": ["1A", "3A"]},
    {"id": "r2", "color": "red", "level": 1, "bolts": ["5A", "7A"]},
    {"id": "r3", "color": "red", "level": 4, "bolts": ["1A", "1B", "1C"]},
    {"id": "r4", "color": "red", "level": 1, "bolts": ["1C", "3C"]},
    {"id": "r5", "color": "red", "level": 1, "bolts": ["5C", "7C"]},
    {"id": "r6", "color": "red", "level": 1, "bolts": ["2AB", "4AB"]},
    {"id": "r7", "color": "red", "level": 1, "bolts": ["2BC", "4BC"]},
    {"id": "r8", "color": "red", "level": 4, "bolts": ["4AB", "4BC"]},
    {"id": "r9", "color": "red", "level": 4, "bolts": ["6AB", "6BC"]},
    {"id": "r10", "color": "red", "level": 4, "bolts": ["3A", "3B", "3C"]},
    {"id": "r11", "color": "red", "level": 4, "bolts": ["5A", "5B", "5C"]},
    {"id": "r12", "color": "red", "level": 1, "bolts": ["1B", "3B"]},
    {"id": "r13", "color": "red", "level": 1, "bolts": ["5B", "7B"]},
]


def create_wood_nuts_spec() -> PuzzleSpec:
    """Create the Wood Nuts puzzle specification."""
    return PuzzleSpec.build(
        puzzle_id="wood_nuts",
        name="Wood Nuts Simulator",
        grid=BOLT_GRID,
        planks=PLANKS,
        starter_holes=STARTER_HOLES,
    )

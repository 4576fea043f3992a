"""
Wood Nuts - The built-in puzzle.

Planks are bolted over a grid; remove bolts until every plank has fallen.
"""

from .spec import create_wood_nuts_spec, BOLT_GRID, PLANKS, STARTER_HOLES

__all__ = [
    "create_wood_nuts_spec",
    "BOLT_GRID",
    "PLANKS",
    "STARTER_HOLES",
]

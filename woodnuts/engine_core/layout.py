"""
Board Layout - Rendering-independent geometry for the current state.

Renderers receive a BoardView and only need to draw it:
- bolts with their grid cell and removed/removable flags
- plank rectangles in grid cells, in definition (draw) order
- the action log and completion flag
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .state import PuzzleState, PuzzlePhase
from .reducer import Reducer

if TYPE_CHECKING:
    from ..puzzle_schema import PuzzleSpec, Plank


Z_INDEX_PER_LEVEL = 10


@dataclass
class BoltView:
    bolt_id: str
    column: int
    row: int
    removed: bool
    removable: bool


@dataclass
class PlankGeometry:
    """Bounding box of a plank over its positioned bolts, in grid cells."""
    plank_id: str
    color: str
    level: int
    left: int
    top: int
    width: int
    height: int
    z_index: int
    bolts: list[str] = field(default_factory=list)
    fallen: bool = False
    dangling: bool = False


@dataclass
class BoardView:
    puzzle_id: str
    name: str
    columns: int
    rows: int
    bolts: list[BoltView]
    planks: list[PlankGeometry]
    starter_holes: list[str]
    log: list[str]
    solved: bool
    phase: PuzzlePhase


def plank_geometry(spec: PuzzleSpec, state: PuzzleState, plank: Plank) -> PlankGeometry | None:
    """
    Geometry for one plank.

    Bolts missing from the grid are skipped; a plank with no
    positioned bolts has no geometry.
    """
    positions = [spec.position_of(b) for b in plank.bolts]
    positions = [p for p in positions if p is not None]
    if not positions:
        return None

    min_x = min(p.column for p in positions)
    max_x = max(p.column for p in positions)
    min_y = min(p.row for p in positions)
    max_y = max(p.row for p in positions)

    return PlankGeometry(
        plank_id=plank.id,
        color=plank.color,
        level=plank.level,
        left=min_x,
        top=min_y,
        width=max_x - min_x + 1,
        height=max_y - min_y + 1,
        z_index=plank.level * Z_INDEX_PER_LEVEL,
        bolts=list(plank.bolts),
        fallen=state.is_fallen(plank),
        dangling=state.is_dangling(plank),
    )


def build_board_view(spec: PuzzleSpec, state: PuzzleState) -> BoardView:
    """Project the spec and current state into something a renderer can draw."""
    reducer = Reducer(spec=spec)

    bolts = []
    for bolt in spec.bolts:
        removed = state.is_removed(bolt.id)
        bolts.append(BoltView(
            bolt_id=bolt.id,
            column=bolt.position.column,
            row=bolt.position.row,
            removed=removed,
            removable=not removed and reducer.can_remove(state, bolt.id),
        ))

    planks = []
    for plank in state.planks:
        geometry = plank_geometry(spec, state, plank)
        if geometry is not None:
            planks.append(geometry)

    return BoardView(
        puzzle_id=spec.puzzle_id,
        name=spec.name,
        columns=spec.grid_columns,
        rows=spec.grid_rows,
        bolts=bolts,
        planks=planks,
        starter_holes=list(spec.starter_holes),
        log=list(state.log),
        solved=state.is_solved,
        phase=state.phase,
    )


def render_text(view: BoardView) -> str:
    """
    Plain-text board for terminals.

    o = removable, x = blocked, . = removed
    """
    by_row: dict[int, list[BoltView]] = {}
    for bolt in view.bolts:
        by_row.setdefault(bolt.row, []).append(bolt)

    width = max((len(b.bolt_id) for b in view.bolts), default=2) + 2
    lines = [view.name, "  ".join(view.starter_holes)] if view.starter_holes else [view.name]
    for row in range(view.rows):
        cells = []
        for bolt in sorted(by_row.get(row, []), key=lambda b: b.column):
            mark = "." if bolt.removed else ("o" if bolt.removable else "x")
            cells.append(f"{mark} {bolt.bolt_id}".ljust(width + 2))
        lines.append("".join(cells).rstrip())

    if view.solved:
        lines.append("Success!")
    return "\n".join(lines)

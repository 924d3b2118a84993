"""Geometry and colours for drawing a grid, plus a canvas renderer."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, ClassVar

from cellularity.cell import CellState
from cellularity.grid import Grid


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle from ``min`` (top-left) to ``max``."""

    min: Point
    max: Point


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]


Color.WHITE = Color(255, 255, 255)
Color.BLACK = Color(0, 0, 0)


def _hex(color: Color) -> str:
    return f"#{color.r:02x}{color.g:02x}{color.b:02x}"


def state_to_color(state: CellState, alive: Color, dead: Color) -> Color:
    return alive if state is CellState.ALIVE else dead


def grid_to_rect(x: float, y: float, cell_size: float, origin: Point) -> Rect:
    """The screen rectangle covered by the cell in column ``x``, row ``y``."""
    top_left = Point(origin.x + x * cell_size, origin.y + y * cell_size)
    return Rect(top_left, Point(top_left.x + cell_size, top_left.y + cell_size))


def cell_rects(
    grid: Grid, cell_size: float, origin: Point, alive: Color, dead: Color
) -> Iterator[tuple[Rect, Color]]:
    """Yield the rectangle and fill colour of every cell, row by row."""
    for y in range(grid.height()):
        for x in range(grid.width()):
            from cellularity.cell import Position

            state = grid.get(Position(x, y))
            yield grid_to_rect(x, y, cell_size, origin), state_to_color(
                state, alive, dead
            )


def draw_grid(
    canvas: Any, grid: Grid, cell_size: float, alive: Color, dead: Color
) -> None:
    """Draw the grid onto a Tk-style canvas, replacing earlier cell drawings."""
    canvas.delete("cell")
    for rect, color in cell_rects(grid, cell_size, Point(0.0, 0.0), alive, dead):
        canvas.create_rectangle(
            rect.min.x,
            rect.min.y,
            rect.max.x,
            rect.max.y,
            fill=_hex(color),
            outline="",
            tags="cell",
        )
    canvas.configure(
        width=grid.width() * cell_size, height=grid.height() * cell_size
    )
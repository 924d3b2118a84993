"""Grid interface and its dense, list-backed implementation."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Iterator

from cellularity.cell import CellState, Position
from cellularity.errors import InvalidDimensionsError, OutOfBoundsError


class Grid(ABC):
    """A rectangular field of cells."""

    @abstractmethod
    def get(self, pos: Position) -> CellState:
        """Return the state at ``pos``; raise OutOfBoundsError if outside."""

    @abstractmethod
    def set(self, pos: Position, state: CellState) -> None:
        """Store ``state`` at ``pos``; raise OutOfBoundsError if outside."""

    @abstractmethod
    def width(self) -> int:
        """Number of columns."""

    @abstractmethod
    def height(self) -> int:
        """Number of rows."""

    def size(self) -> int:
        """Total number of cells."""
        return self.width() * self.height()

    @abstractmethod
    def clear(self) -> None:
        """Set every cell to dead."""

    @abstractmethod
    def count_alive(self) -> int:
        """Number of alive cells."""


def _check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(width, height)


class DenseGrid(Grid):
    """Grid storing every cell in a flat row-major list."""

    def __init__(self, width: int, height: int) -> None:
        _check_dimensions(width, height)
        self._width = width
        self._height = height
        self._cells = [CellState.DEAD] * (width * height)

    @classmethod
    def new_random(
        cls,
        width: int,
        height: int,
        alive_probability: float,
        rng: random.Random | None = None,
    ) -> DenseGrid:
        """Create a grid where each cell is alive with ``alive_probability``."""
        grid = cls(width, height)
        rng = rng or random.Random()
        grid._cells = [
            CellState.ALIVE if rng.random() < alive_probability else CellState.DEAD
            for _ in grid._cells
        ]
        return grid

    def resize(self, new_width: int, new_height: int) -> None:
        """Change the dimensions, keeping the cells that still fit."""
        _check_dimensions(new_width, new_height)
        copy_width = min(self._width, new_width)
        rows = [
            self._cells[y * self._width : y * self._width + copy_width]
            + [CellState.DEAD] * (new_width - copy_width)
            for y in range(min(self._height, new_height))
        ]
        rows.extend(
            [CellState.DEAD] * new_width for _ in range(new_height - len(rows))
        )
        self._cells = [cell for row in rows for cell in row]
        self._width = new_width
        self._height = new_height

    def _index(self, pos: Position) -> int:
        if not pos.is_within_bounds(self._width, self._height):
            raise OutOfBoundsError(pos.x, pos.y, self._width, self._height)
        return pos.y * self._width + pos.x

    def get(self, pos: Position) -> CellState:
        return self._cells[self._index(pos)]

    def set(self, pos: Position, state: CellState) -> None:
        self._cells[self._index(pos)] = state

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def clear(self) -> None:
        self._cells = [CellState.DEAD] * len(self._cells)

    def count_alive(self) -> int:
        return sum(1 for cell in self._cells if cell.is_alive())

    def __iter__(self) -> Iterator[tuple[Position, CellState]]:
        """Yield ``(position, state)`` pairs in row-major order."""
        for index, state in enumerate(self._cells):
            y, x = divmod(index, self._width)
            yield Position(x, y), state
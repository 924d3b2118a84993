"""Simulation engine that evolves a grid under a rule."""

from __future__ import annotations

from cellularity.boundary import Boundary
from cellularity.cell import Position
from cellularity.grid import DenseGrid
from cellularity.neighborhood import Neighborhood
from cellularity.rules import Rule


class Automata:
    """Holds the grid and advances it one generation at a time."""

    def __init__(
        self,
        width: int,
        height: int,
        rule: Rule,
        boundary: Boundary,
        neighborhood: Neighborhood,
    ) -> None:
        self._grid = DenseGrid(width, height)
        self._next_grid = DenseGrid(width, height)
        self._rule = rule
        self._boundary = boundary
        self._neighborhood = neighborhood
        self._generation = 0

    def grid(self) -> DenseGrid:
        """The current grid; changes made to it affect the simulation."""
        return self._grid

    def generation(self) -> int:
        """Number of steps taken since creation or the last reset."""
        return self._generation

    def reset(self) -> None:
        """Clear the grid and return to generation 0."""
        self._grid.clear()
        self._next_grid.clear()
        self._generation = 0

    def _count_alive_neighbors(self, pos: Position) -> int:
        width, height = self._grid.width(), self._grid.height()
        count = 0
        for dx, dy in self._neighborhood.offsets():
            neighbor = self._boundary.wrap(pos.x + dx, pos.y + dy, width, height)
            if (
                neighbor is not None
                and neighbor.is_within_bounds(width, height)
                and self._grid.get(neighbor).is_alive()
            ):
                count += 1
        return count

    def step(self) -> None:
        """Advance the simulation by one generation."""
        width, height = self._grid.width(), self._grid.height()
        if (self._next_grid.width(), self._next_grid.height()) != (width, height):
            self._next_grid = DenseGrid(width, height)

        for pos, state in self._grid:
            next_state = self._rule.apply(state, self._count_alive_neighbors(pos))
            self._next_grid.set(pos, next_state)

        self._grid, self._next_grid = self._next_grid, self._grid
        self._generation += 1

    def step_n(self, steps: int) -> None:
        """Advance the simulation by ``steps`` generations."""
        for _ in range(steps):
            self.step()
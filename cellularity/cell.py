"""Cell states and grid positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CellState(Enum):
    """The state of a single cell."""

    ALIVE = "alive"
    DEAD = "dead"

    def is_alive(self) -> bool:
        return self is CellState.ALIVE

    def is_dead(self) -> bool:
        return self is CellState.DEAD

    def toggle(self) -> CellState:
        """Return the opposite state."""
        return CellState.DEAD if self is CellState.ALIVE else CellState.ALIVE

    @classmethod
    def default(cls) -> CellState:
        """The state of a freshly created cell."""
        return cls.DEAD


@dataclass(frozen=True)
class Position:
    """A cell position: ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    def is_within_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height
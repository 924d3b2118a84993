"""Transition rules for cellular automata."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cellularity.cell import CellState


class Rule(ABC):
    """Maps a cell's state and its alive-neighbour count to its next state."""

    @abstractmethod
    def apply(self, current_state: CellState, alive_neighbors: int) -> CellState:
        """Return the next state of the cell."""

    @abstractmethod
    def name(self) -> str:
        """Name of the rule."""

    def description(self) -> str:
        return "No description available"


class ConwayRule(Rule):
    """Conway's Game of Life: birth on 3, survival on 2 or 3."""

    def apply(self, current_state: CellState, alive_neighbors: int) -> CellState:
        if current_state is CellState.DEAD and alive_neighbors == 3:
            return CellState.ALIVE
        if current_state is CellState.ALIVE and alive_neighbors in (2, 3):
            return CellState.ALIVE
        return CellState.DEAD

    def name(self) -> str:
        return "Conway's Game of Life"

    def description(self) -> str:
        return "B3/S23 - Birth on 3 neighbors, Survival on 2 or 3 neighbors"
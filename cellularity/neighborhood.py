"""Neighbourhood shapes given as relative offsets."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Neighborhood(ABC):
    """A set of ``(dx, dy)`` offsets that make up a cell's neighbours."""

    @abstractmethod
    def offsets(self) -> tuple[tuple[int, int], ...]:
        """The relative offsets of the neighbours."""

    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the neighbourhood."""


class MooreNeighborhood(Neighborhood):
    """All eight surrounding cells."""

    _OFFSETS = (
        (-1, -1), (0, -1), (1, -1),
        (-1, 0), (1, 0),
        (-1, 1), (0, 1), (1, 1),
    )

    def offsets(self) -> tuple[tuple[int, int], ...]:
        return self._OFFSETS

    def name(self) -> str:
        return "Moore (8 neighbors)"


class VonNeumannNeighborhood(Neighborhood):
    """The four orthogonally adjacent cells."""

    _OFFSETS = ((0, -1), (-1, 0), (1, 0), (0, 1))

    def offsets(self) -> tuple[tuple[int, int], ...]:
        return self._OFFSETS

    def name(self) -> str:
        return "Von Neumann (4 neighbors)"
"""Boundary conditions that map raw coordinates onto a grid."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cellularity.cell import Position


class Boundary(ABC):
    """Decides where a possibly out-of-range coordinate lands."""

    @abstractmethod
    def wrap(self, x: int, y: int, width: int, height: int) -> Position | None:
        """Return the grid position for ``(x, y)``, or None if it has none."""


class ToroidalBoundary(Boundary):
    """Edges wrap round to the opposite side."""

    def wrap(self, x: int, y: int, width: int, height: int) -> Position | None:
        if width <= 0 or height <= 0:
            return None
        return Position(x % width, y % height)


class WalledBoundary(Boundary):
    """Coordinates past the far edges are clamped; negative ones are outside."""

    def wrap(self, x: int, y: int, width: int, height: int) -> Position | None:
        if width <= 0 or height <= 0:
            return None
        if x < 0 or y < 0:
            return None
        return Position(min(x, width - 1), min(y, height - 1))
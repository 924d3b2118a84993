"""Exception types raised by the cellular automaton core."""

from __future__ import annotations


class CellularityError(Exception):
    """Base class for every error raised by this package."""


class InvalidDimensionsError(CellularityError, ValueError):
    """A grid was given a width or height of zero (or less)."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Invalid grid dimensions: {width}x{height}")


class OutOfBoundsError(CellularityError, IndexError):
    """A position lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Position ({x}, {y}) is out of bounds for grid {width}x{height}"
        )


class _MessageError(CellularityError):
    """An error that carries a free-form message behind a fixed prefix."""

    prefix = ""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"{self.prefix}: {message}")


class InvalidRuleFormatError(_MessageError, ValueError):
    """A rule string could not be understood."""

    prefix = "Invalid rule format"


class PatternParseError(_MessageError, ValueError):
    """A pattern description could not be parsed."""

    prefix = "Pattern parse error"


class CellularityIOError(_MessageError, OSError):
    """Reading or writing automaton data failed."""

    prefix = "I/O error"
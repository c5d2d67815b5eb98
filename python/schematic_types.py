"""
Shared type definitions for the schematic analyzer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CellKind(Enum):
    """Classification of a single schematic cell."""

    EMPTY = "empty"
    SYMBOL = "symbol"
    DIGIT = "digit"
    OUT_OF_BOUNDS = "out_of_bounds"  # Query-time result only, never stored


DIGIT_CHARS = frozenset("0123456789")
SYMBOL_CHARS = frozenset("!@#$%^&*()-+=/")


@dataclass(frozen=True)
class RuleSet:
    """Alphabet used to classify schematic cells."""

    empty: str = "."
    symbols: frozenset[str] = SYMBOL_CHARS
    gear: str = "*"

    def kind_of(self, char: str) -> CellKind | None:
        """Classify a character, or return None if it is not in the alphabet."""
        if char in DIGIT_CHARS:
            return CellKind.DIGIT
        if char == self.empty:
            return CellKind.EMPTY
        if char in self.symbols:
            return CellKind.SYMBOL
        return None


# =============================================================================
# Errors
# =============================================================================


class MalformedSchematicError(ValueError):
    """The schematic text does not describe a rectangular grid."""


class InvalidTileError(ValueError):
    """A cell holds a character outside the schematic alphabet."""

    def __init__(self, x: int, y: int, char: str) -> None:
        super().__init__(
            f"Invalid tile '{char}' at ({x}, {y})\n"
            f"  Valid characters: digits (0-9), empty marker, or a symbol"
        )
        self.x = x
        self.y = y
        self.char = char


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True, order=True)
class Coord:
    """A cell position, column first. Orders by x, then y."""

    x: int
    y: int


@dataclass(frozen=True)
class NumberSpan:
    """A maximal run of digits within one row, identified by its start."""

    start: Coord
    length: int
    value: int

    def covers(self, pos: Coord) -> bool:
        return pos.y == self.start.y and self.start.x <= pos.x < self.start.x + self.length


@dataclass(frozen=True)
class Gear:
    """A gear-marker symbol and the distinct numbers adjacent to it."""

    position: Coord
    numbers: tuple[NumberSpan, ...]

    @property
    def is_gear(self) -> bool:
        return len(self.numbers) == 2

    @property
    def ratio(self) -> int:
        if not self.is_gear:
            return 0
        first, second = self.numbers
        return first.value * second.value


@dataclass(frozen=True)
class Schematic:
    """A rectangular 2D grid of schematic characters."""

    cells: tuple[tuple[str, ...], ...]

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def char_at(self, x: int, y: int) -> str:
        return self.cells[y][x]

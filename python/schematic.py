"""
Engine schematic analysis.
Locates numbers and symbols in a character grid and aggregates the numbers
by adjacency: part numbers (any symbol) and gear ratios ('*' with two numbers).
"""

from __future__ import annotations

import logging

from schematic_parser import parse
from schematic_types import (
    CellKind,
    Coord,
    Gear,
    InvalidTileError,
    MalformedSchematicError,
    NumberSpan,
    RuleSet,
    Schematic,
)

__all__ = [
    "CellKind",
    "Coord",
    "Gear",
    "InvalidTileError",
    "MalformedSchematicError",
    "NumberSpan",
    "RuleSet",
    "Schematic",
    "classify",
    "find_numbers",
    "gear_candidates",
    "list_symbols",
    "neighbors",
    "parse",
    "part_numbers",
    "probe",
    "read_number",
    "solve_part1",
    "solve_part2",
    "span_at",
    "span_start",
]

logger = logging.getLogger(__name__)


# =============================================================================
# Cell Classification
# =============================================================================


def in_bounds(schematic: Schematic, x: int, y: int) -> bool:
    return 0 <= x < schematic.width and 0 <= y < schematic.height


def classify(schematic: Schematic, x: int, y: int, rules: RuleSet = RuleSet()) -> CellKind:
    """
    Classify the cell at (x, y).

    Raises:
        IndexError: If (x, y) lies outside the schematic
        InvalidTileError: If the cell holds a character outside the alphabet
    """
    if not in_bounds(schematic, x, y):
        raise IndexError(
            f"Cell ({x}, {y}) is outside the {schematic.width}x{schematic.height} schematic"
        )
    char = schematic.char_at(x, y)
    kind = rules.kind_of(char)
    if kind is None:
        raise InvalidTileError(x, y, char)
    return kind


def probe(schematic: Schematic, x: int, y: int, rules: RuleSet = RuleSet()) -> CellKind:
    """Like classify, but reports OUT_OF_BOUNDS instead of raising."""
    if not in_bounds(schematic, x, y):
        return CellKind.OUT_OF_BOUNDS
    return classify(schematic, x, y, rules)


def list_symbols(schematic: Schematic, rules: RuleSet = RuleSet()) -> list[Coord]:
    """Return every symbol position in row-major order."""
    return [
        Coord(x, y)
        for y in range(schematic.height)
        for x in range(schematic.width)
        if classify(schematic, x, y, rules) is CellKind.SYMBOL
    ]


def neighbors(schematic: Schematic, x: int, y: int) -> list[Coord]:
    """
    Return the in-bounds king-move neighbors of (x, y), excluding (x, y) itself.
    Interior cells have 8, edge cells 5 and corner cells 3.
    """
    result: list[Coord] = []
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            nx, ny = x + dx, y + dy
            if in_bounds(schematic, nx, ny):
                result.append(Coord(nx, ny))
    return result


# =============================================================================
# Number Spans
# =============================================================================


def _require_digit(schematic: Schematic, x: int, y: int, rules: RuleSet) -> None:
    kind = classify(schematic, x, y, rules)
    if kind is not CellKind.DIGIT:
        raise ValueError(
            f"Cell ({x}, {y}) is {kind.value}, not a digit: '{schematic.char_at(x, y)}'"
        )


def span_start(schematic: Schematic, x: int, y: int, rules: RuleSet = RuleSet()) -> Coord:
    """Walk left from a digit cell to the first digit of its number."""
    _require_digit(schematic, x, y, rules)
    while probe(schematic, x - 1, y, rules) is CellKind.DIGIT:
        x -= 1
    return Coord(x, y)


def read_number(schematic: Schematic, x: int, y: int, rules: RuleSet = RuleSet()) -> int:
    """Read the decimal number starting at (x, y), stopping at a non-digit or the row end."""
    _require_digit(schematic, x, y, rules)
    digits = ""
    while probe(schematic, x, y, rules) is CellKind.DIGIT:
        digits += schematic.char_at(x, y)
        x += 1
    return int(digits)


def span_at(schematic: Schematic, x: int, y: int, rules: RuleSet = RuleSet()) -> NumberSpan:
    """Return the whole number span containing the digit cell (x, y)."""
    start = span_start(schematic, x, y, rules)
    value = read_number(schematic, start.x, start.y, rules)
    end = start.x
    while probe(schematic, end, y, rules) is CellKind.DIGIT:
        end += 1
    return NumberSpan(start, end - start.x, value)


def find_numbers(schematic: Schematic, rules: RuleSet = RuleSet()) -> list[NumberSpan]:
    """Return every number span in row-major order."""
    spans: list[NumberSpan] = []
    for y in range(schematic.height):
        x = 0
        while x < schematic.width:
            if classify(schematic, x, y, rules) is CellKind.DIGIT:
                span = span_at(schematic, x, y, rules)
                spans.append(span)
                x += span.length
            else:
                x += 1
    return spans


def _adjacent_span_starts(
    schematic: Schematic, pos: Coord, rules: RuleSet
) -> list[Coord]:
    """Span starts reached from the digit neighbors of pos; may contain repeats."""
    return [
        span_start(schematic, n.x, n.y, rules)
        for n in neighbors(schematic, pos.x, pos.y)
        if classify(schematic, n.x, n.y, rules) is CellKind.DIGIT
    ]


# =============================================================================
# Part 1: Part Numbers
# =============================================================================


def part_numbers(schematic: Schematic, rules: RuleSet = RuleSet()) -> list[NumberSpan]:
    """
    Return the numbers adjacent to at least one symbol, sorted by start.

    Deduplication is global: a number touching several symbols, or touching
    one symbol through several cells, appears once.
    """
    starts: set[Coord] = set()
    symbols = list_symbols(schematic, rules)
    for symbol in symbols:
        starts.update(_adjacent_span_starts(schematic, symbol, rules))

    logger.debug("%d symbols touch %d distinct numbers", len(symbols), len(starts))
    return [span_at(schematic, s.x, s.y, rules) for s in sorted(starts)]


def solve_part1(schematic: Schematic, rules: RuleSet = RuleSet()) -> int:
    """Sum every number adjacent to a symbol."""
    return sum(span.value for span in part_numbers(schematic, rules))


# =============================================================================
# Part 2: Gear Ratios
# =============================================================================


def gear_candidates(schematic: Schematic, rules: RuleSet = RuleSet()) -> list[Gear]:
    """
    Return one Gear per gear-marker symbol, with the distinct numbers around it.

    Deduplication is per gear: the same number may appear under two gears.
    Only entries with exactly two numbers are real gears (see Gear.is_gear).
    """
    gears: list[Gear] = []
    for pos in list_symbols(schematic, rules):
        if schematic.char_at(pos.x, pos.y) != rules.gear:
            continue

        starts = sorted(set(_adjacent_span_starts(schematic, pos, rules)))
        gear = Gear(pos, tuple(span_at(schematic, s.x, s.y, rules) for s in starts))
        if gear.is_gear:
            logger.debug(
                "Gear at (%d, %d): %d * %d = %d",
                pos.x, pos.y, gear.numbers[0].value, gear.numbers[1].value, gear.ratio,
            )
        gears.append(gear)
    return gears


def solve_part2(schematic: Schematic, rules: RuleSet = RuleSet()) -> int:
    """Sum the ratios of every gear adjacent to exactly two numbers."""
    return sum(gear.ratio for gear in gear_candidates(schematic, rules))

"""
Schematic parsing utilities.

Turns the puzzle's plain-text engine schematic into an immutable Schematic:
one row per non-blank line, one cell per character.
"""

from __future__ import annotations

import logging

from schematic_types import InvalidTileError, MalformedSchematicError, RuleSet, Schematic

__all__ = ["parse"]

logger = logging.getLogger(__name__)


def parse(text: str, rules: RuleSet = RuleSet()) -> Schematic:
    """
    Parse an engine schematic from text.

    Format:
    - One row per line; surrounding whitespace on each line is trimmed,
      so indented literals in source code parse cleanly
    - Blank lines are skipped
    - Each character is a cell:
      * Digit (0-9): part of a number
      * '.': empty
      * One of !@#$%^&*()-+=/ : symbol

    Example:
        \"\"\"
        467..114..
        ...*......
        \"\"\"
        Creates a 10x2 schematic with numbers 467 and 114 and one '*' symbol.

    Args:
        text: Multi-line schematic text
        rules: Alphabet used to validate cells

    Returns:
        The parsed Schematic

    Raises:
        MalformedSchematicError: If there are no rows or the rows differ in length
        InvalidTileError: If a character is outside the alphabet
    """
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if not lines:
        raise MalformedSchematicError("Empty schematic: no rows found")

    width = len(lines[0])
    mismatched = [(y, len(line)) for y, line in enumerate(lines) if len(line) != width]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in schematic\n"
            f"  Expected: {width} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for y, actual_width in mismatched:
            error_msg += f"    Row {y}: {actual_width} columns - \"{lines[y]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise MalformedSchematicError(error_msg)

    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if rules.kind_of(char) is None:
                raise InvalidTileError(x, y, char)

    schematic = Schematic(tuple(tuple(line) for line in lines))
    logger.debug("Parsed schematic: %dx%d", schematic.width, schematic.height)
    return schematic

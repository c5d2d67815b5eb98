"""
ASCII rendering for engine schematics.

Draws the schematic inside a box border, coloring each cell by its role:
part numbers, stray numbers, gears, other symbols and empty cells.
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from schematic import (
    Coord,
    RuleSet,
    Schematic,
    find_numbers,
    gear_candidates,
    part_numbers,
)

logger = logging.getLogger(__name__)

Colorizer = Callable[[str], str]


def _plain(s: str) -> str:
    return s


PALETTE: dict[str, Colorizer] = {
    "part": chalk.green,
    "stray": chalk.red,
    "gear": chalk.magenta,
    "symbol": chalk.yellow,
    "empty": chalk.white,
    "border": chalk.cyan,
}


def cell_roles(schematic: Schematic, rules: RuleSet = RuleSet()) -> dict[Coord, str]:
    """
    Map every cell to its display role.

    Roles: "part" (digit of a part number), "stray" (digit of any other
    number), "gear" ('*' touching exactly two numbers), "symbol", "empty".
    """
    roles: dict[Coord, str] = {}
    for y in range(schematic.height):
        for x in range(schematic.width):
            roles[Coord(x, y)] = "empty"

    for span in find_numbers(schematic, rules):
        for dx in range(span.length):
            roles[Coord(span.start.x + dx, span.start.y)] = "stray"
    for span in part_numbers(schematic, rules):
        for dx in range(span.length):
            roles[Coord(span.start.x + dx, span.start.y)] = "part"

    for y, row in enumerate(schematic.cells):
        for x, char in enumerate(row):
            if char in rules.symbols:
                roles[Coord(x, y)] = "symbol"
    for gear in gear_candidates(schematic, rules):
        if gear.is_gear:
            roles[gear.position] = "gear"

    return roles


def render_schematic(
    schematic: Schematic,
    rules: RuleSet = RuleSet(),
    highlight: Coord | None = None,
    color: bool = True,
    title: str = "schematic",
) -> str:
    """
    Render a schematic as a boxed character display.

    Args:
        schematic: The schematic to render
        rules: Alphabet used to classify cells
        highlight: Optional cell to draw with a white background
        color: Colorize cells by role; plain text when False
        title: Label centered in the top border

    Returns:
        The rendered lines joined by newlines
    """
    roles = cell_roles(schematic, rules) if color else {}
    border: Colorizer = PALETTE["border"] if color else _plain

    inner_width = schematic.width
    label = f" {title} "
    if title and len(label) <= inner_width:
        title_start = (inner_width - len(label)) // 2
        top = "─" * title_start + label + "─" * (inner_width - title_start - len(label))
    else:
        top = "─" * inner_width

    lines: list[str] = [border("┌" + top + "┐")]
    for y, row in enumerate(schematic.cells):
        line_parts = [border("│")]
        for x, char in enumerate(row):
            pos = Coord(x, y)
            if highlight == pos:
                content = chalk.bgWhite.black(char) if color else char
            elif color:
                content = PALETTE[roles[pos]](char)
            else:
                content = char
            line_parts.append(content)
        line_parts.append(border("│"))
        lines.append("".join(line_parts))
    lines.append(border("└" + "─" * inner_width + "┘"))

    logger.debug("Rendered %d lines", len(lines))
    return "\n".join(lines)

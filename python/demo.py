#!/usr/bin/env python3
"""
Demo of the engine schematic analyzer.

Usage:
    python demo.py [PATH] [-v]

Solves the schematic in PATH (or the built-in example) and prints the
rendered schematic followed by both answers.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from schematic import parse, part_numbers, solve_part1, solve_part2
from schematic_render import render_schematic

logger = logging.getLogger(__name__)

EXAMPLE = """
467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""


def load_text(path: str | None) -> str:
    if path is None:
        return EXAMPLE
    return Path(path).read_text()


def run(text: str, color: bool = True) -> tuple[int, int]:
    """Parse, render and solve a schematic; return (part 1, part 2)."""
    schematic = parse(text)
    print(render_schematic(schematic, color=color))
    print()

    logger.info("Found %d part numbers", len(part_numbers(schematic)))
    part1 = solve_part1(schematic)
    part2 = solve_part2(schematic)
    print(f"Part 1: {part1}")
    print(f"Part 2: {part2}")
    return part1, part2


def main(argv: list[str]) -> int:
    verbose = "-v" in argv
    args = [a for a in argv if a != "-v"]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        text = load_text(args[0] if args else None)
        run(text, color=sys.stdout.isatty())
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

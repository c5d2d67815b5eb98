"""
Interactive inspector for engine schematics.
Display a schematic and move a cursor over it with keyboard commands,
showing what the analyzer sees at each cell.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from demo import load_text
from schematic import (
    CellKind,
    Coord,
    Schematic,
    classify,
    gear_candidates,
    neighbors,
    parse,
    part_numbers,
    solve_part1,
    solve_part2,
    span_at,
)
from schematic_render import render_schematic

MOVES = {
    "w": (0, -1),
    "a": (-1, 0),
    "s": (0, 1),
    "d": (1, 0),
}


class InteractiveDemo:
    """Interactive cursor-based schematic inspector."""

    def __init__(self, schematic: Schematic) -> None:
        self.schematic = schematic
        self.cursor = Coord(0, 0)
        self.console = Console()
        self.status_message = "Ready"
        self.part_starts = {span.start for span in part_numbers(schematic)}
        self.gears = {gear.position: gear for gear in gear_candidates(schematic)}

    def move(self, dx: int, dy: int) -> None:
        """Move the cursor, clamped to the schematic."""
        x = min(max(self.cursor.x + dx, 0), self.schematic.width - 1)
        y = min(max(self.cursor.y + dy, 0), self.schematic.height - 1)
        if (x, y) == (self.cursor.x, self.cursor.y):
            self.status_message = "✗ Edge of schematic"
        else:
            self.status_message = f"✓ Moved to ({x}, {y})"
        self.cursor = Coord(x, y)

    def reset_cursor(self) -> None:
        self.cursor = Coord(0, 0)
        self.status_message = "Cursor reset to (0, 0)"

    def describe_cell(self) -> Text:
        """Describe the cell under the cursor."""
        pos = self.cursor
        kind = classify(self.schematic, pos.x, pos.y)
        char = self.schematic.char_at(pos.x, pos.y)

        info = Text()
        info.append("Cursor: ", style="bold")
        info.append(f"({pos.x}, {pos.y}) '{char}' {kind.value}\n")

        if kind is CellKind.DIGIT:
            span = span_at(self.schematic, pos.x, pos.y)
            is_part = span.start in self.part_starts
            info.append("Number: ", style="bold")
            info.append(f"{span.value} starting at ({span.start.x}, {span.start.y})")
            info.append(" part number\n" if is_part else " not adjacent to a symbol\n",
                        style="green" if is_part else "red")
        elif kind is CellKind.SYMBOL:
            adjacent = [n for n in neighbors(self.schematic, pos.x, pos.y)
                        if classify(self.schematic, n.x, n.y) is CellKind.DIGIT]
            info.append("Adjacent digit cells: ", style="bold")
            info.append(f"{len(adjacent)}\n")
            gear = self.gears.get(pos)
            if gear is not None:
                values = ", ".join(str(span.value) for span in gear.numbers) or "none"
                info.append("Gear numbers: ", style="bold")
                info.append(f"{values}")
                if gear.is_gear:
                    info.append(f" ratio {gear.ratio}\n", style="magenta")
                else:
                    info.append(" (not a gear)\n", style="dim")
        return info

    def generate_display(self) -> Panel:
        """Generate the current display with schematic and status."""
        status = Text()
        grid_text = render_schematic(self.schematic, highlight=self.cursor)
        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append(self.describe_cell())
        status.append("\n")
        status.append("Totals: ", style="bold")
        status.append(f"part 1 = {solve_part1(self.schematic)}, "
                      f"part 2 = {solve_part2(self.schematic)}\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W/A/S/D - Move cursor\n")
        status.append("  R - Reset cursor\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Engine Schematic Inspector", border_style="green", width=80)

    def run(self) -> None:
        """Run the interactive inspector."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey().lower()
                    if key == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key == 'r':
                        self.reset_cursor()
                    elif key in MOVES:
                        self.move(*MOVES[key])
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


def main(path: str | None) -> int:
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    try:
        schematic = parse(load_text(path))
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    InteractiveDemo(schematic).run()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))

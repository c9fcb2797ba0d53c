"""
Console demonstration of the signpost board.

Walks a named puzzle through a few connect/fix/disconnect steps and then
reveals the answer, printing the board after each step.

Usage:
    python demo.py [puzzle-name] [-v]
"""

import logging
import sys

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from signpost import Model
from signpost_parser import parse_solution
from signpost_render import render_board


PUZZLES = {
    "tiny": "1 2",
    "column": "2|1",
    "snake": "1 2 3|6 5 4|7 8 9",
    "diagonals": "1 14 15 5|7 2 8 16|12 11 3 13|6 10 9 4",
}


def show(console: Console, model: Model, title: str) -> None:
    """Print the board in a panel with its status line."""
    body = Text.from_ansi(render_board(model, color=True))
    body.append(f"\n\nunconnected: {model.unconnected}", style="bold")
    if model.groups:
        body.append(f"   groups: {model.groups}")
    border = "green" if model.solved else "blue"
    console.print(Panel(body, title=title, border_style=border, expand=False))


def main(model: Model) -> None:
    console = Console()
    show(console, model, "Start")
    if model.size < 5:
        model.solve()
        show(console, model, "Solved")
        return

    # Link the middle of the solution without numbers to form a group
    middle = model.size // 2
    for n in (middle - 1, middle):
        sq = model.soln_num_to_square(n)
        sq.connect(model.soln_num_to_square(n + 1))
    show(console, model, f"Linked {middle - 1} -> {middle} -> {middle + 1}")

    # Fixing one member numbers the whole group
    model.soln_num_to_square(middle).set_fixed_num(middle)
    show(console, model, f"Fixed {middle}")

    model.soln_num_to_square(middle).disconnect()
    show(console, model, f"Disconnected {middle} -/-> {middle + 1}")

    model.solve()
    show(console, model, "Solved" if model.solved else "Not solved")


if __name__ == "__main__":
    args = [a for a in sys.argv[1:] if a != "-v"]
    if "-v" in sys.argv:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(name)s: %(message)s")

    name = args[0] if args else "diagonals"
    if name not in PUZZLES:
        print(f"Unknown puzzle '{name}'. Choose from: {', '.join(PUZZLES)}")
        sys.exit(1)
    main(Model(parse_solution(PUZZLES[name])))

"""
ASCII rendering for signpost boards.

Provides two renderings of the same layout:
1. Plain text - the canonical board used in logs and golden-output tests
2. Coloured text - group labels coloured per group, fixed numbers highlighted
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from signpost import Model, Square

logger = logging.getLogger(__name__)

CELL_WIDTH = 6

# Size of alphabet used for group labels
ALPHA_SIZE = 26


def group_label(group: int) -> str:
    """
    Letter name of a group number: 1 -> "a", 26 -> "z", 27 -> "ba".

    Numbers past 26 get a leading letter as well.
    """
    g = group - 1
    prefix = "" if g < ALPHA_SIZE else chr(g // ALPHA_SIZE + ord("a"))
    return prefix + chr(g % ALPHA_SIZE + ord("a"))


def _group_colors() -> list[Callable[[str], str]]:
    return [
        chalk.red,
        chalk.green,
        chalk.yellow,
        chalk.blue,
        chalk.magenta,
        chalk.cyan,
        chalk.redBright,
        chalk.greenBright,
        chalk.yellowBright,
        chalk.blueBright,
    ]


def render_board(model: Model, color: bool = False) -> str:
    """
    Render a board as fixed-width text.

    Each square takes two lines between horizontal rules:

        +------+------+
        |+1    |a     |
        | o NE |.o S  |
        +------+------+

    The first line holds the sequence number (prefixed with '+' if fixed)
    or the group label. The second shows '.' if the square lacks a
    predecessor (except square 1), 'o' if it lacks a successor (except the
    last square), and the arrow. The top row of the board is printed first.

    Args:
        model: The board to render
        color: Colour group labels and fixed numbers with ANSI codes

    Returns:
        Rendered board, with no trailing newline
    """
    hline = "+" + "------+" * model.width
    colors = _group_colors()

    def label(sq: Square) -> str:
        if sq.fixed:
            text = f"+{sq.seq_text():<{CELL_WIDTH - 1}}"
        else:
            text = f"{sq.seq_text():<{CELL_WIDTH}}"
        if not color:
            return text
        if sq.fixed:
            return chalk.bold(text)
        if sq.group > 0:
            return colors[(sq.group - 1) % len(colors)](text)
        return text

    def markers(sq: Square) -> str:
        missing_pred = "." if sq.predecessor is None and sq.sequence_num != 1 else " "
        missing_succ = "o " if sq.successor is None and sq.sequence_num != model.size else "  "
        return f"{missing_pred}{missing_succ}{sq.direction.arrow} "

    lines: list[str] = []
    for y in range(model.height - 1, -1, -1):
        row = [model[x, y] for x in range(model.width)]
        lines.append(hline)
        lines.append("|" + "".join(label(sq) + "|" for sq in row))
        lines.append("|" + "".join(markers(sq) + "|" for sq in row))
    lines.append(hline)

    logger.debug("render_board: %dx%d, color=%s", model.width, model.height, color)
    return "\n".join(lines)

"""
Solution grid utilities for signpost.

Provides:
1. A compact text format for solution grids (top row first)
2. Validation of solution grids before a Model is built from them
"""

from __future__ import annotations

from typing import Sequence

from signpost_types import PuzzleConstructionError, dir_of, Direction

__all__ = ["parse_solution", "format_solution", "validate_solution", "Solution"]

# Column-indexed solution: solution[x][y], y increasing upwards
Solution = tuple[tuple[int, ...], ...]


def parse_solution(definition: str) -> Solution:
    """
    Parse a solution grid from a compact string format.

    Format:
    - Rows separated by |, the first row is the top of the board
    - Sequence numbers separated by whitespace

    Example:
        "1 2|4 3" describes the board

            1 2
            4 3

        and returns ((4, 1), (3, 2)), i.e. solution[x][y] with (0, 0) at
        the lower-left corner.

    Args:
        definition: The board, row by row

    Returns:
        Column-indexed solution array

    Raises:
        PuzzleConstructionError: if a value is not an integer or rows differ in length
    """
    row_strings = definition.strip().split("|")
    rows: list[list[int]] = []

    for row_idx, row_str in enumerate(row_strings):
        values: list[int] = []
        for col_idx, token in enumerate(row_str.split()):
            try:
                values.append(int(token))
            except ValueError:
                error_msg = (
                    f"Invalid sequence number: '{token}'\n"
                    f"  Row {row_idx}: \"{row_str.strip()}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Each cell must be a positive integer"
                )
                raise PuzzleConstructionError(error_msg) from None
        rows.append(values)

    _check_rectangular(rows, row_strings)

    height = len(rows)
    width = len(rows[0]) if rows else 0
    return tuple(
        tuple(rows[height - 1 - y][x] for y in range(height))
        for x in range(width)
    )


def format_solution(solution: Sequence[Sequence[int]]) -> str:
    """Inverse of parse_solution."""
    width = len(solution)
    height = len(solution[0]) if width else 0
    return "|".join(
        " ".join(str(solution[x][y]) for x in range(width))
        for y in range(height - 1, -1, -1)
    )


def _check_rectangular(rows: Sequence[Sequence[int]], row_strings: Sequence[str]) -> None:
    if not rows:
        return
    cols = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths\n"
            f"  Expected: {cols} cells (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual in mismatched:
            error_msg += f"    Row {row_idx}: {actual} cells - \"{row_strings[row_idx].strip()}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise PuzzleConstructionError(error_msg)


def validate_solution(solution: Sequence[Sequence[int]]) -> Solution:
    """
    Check that `solution` describes a signpost puzzle and return an immutable copy.

    A proper solution has at least 2 cells, contains each of 1..size exactly
    once, and places every pair of consecutive numbers a queen move apart.

    Raises:
        PuzzleConstructionError: describing the first problem found
    """
    if len(solution) == 0 or len(solution) * len(solution[0]) < 2:
        raise PuzzleConstructionError("Solution must have at least 2 squares")

    width = len(solution)
    height = len(solution[0])
    mismatched = [(x, len(col)) for x, col in enumerate(solution) if len(col) != height]
    if mismatched:
        error_msg = f"Inconsistent column lengths\n  Expected: {height} cells (from column 0)\n"
        for x, actual in mismatched:
            error_msg += f"    Column {x}: {actual} cells\n"
        raise PuzzleConstructionError(error_msg.rstrip("\n"))

    size = width * height
    where: dict[int, tuple[int, int]] = {}
    for x, col in enumerate(solution):
        for y, n in enumerate(col):
            if not isinstance(n, int) or isinstance(n, bool) or not 1 <= n <= size:
                raise PuzzleConstructionError(
                    f"Sequence number {n!r} at ({x}, {y}) is out of range\n"
                    f"  Every cell must hold an integer between 1 and {size}"
                )
            if n in where:
                raise PuzzleConstructionError(
                    f"Sequence number {n} appears more than once\n"
                    f"  First at {where[n]}, again at ({x}, {y})"
                )
            where[n] = (x, y)

    for n in range(1, size):
        (x0, y0), (x1, y1) = where[n], where[n + 1]
        if dir_of(x0, y0, x1, y1) == Direction.NONE:
            raise PuzzleConstructionError(
                f"Squares {n} and {n + 1} are not a queen move apart\n"
                f"  {n} is at ({x0}, {y0}), {n + 1} is at ({x1}, {y1})"
            )

    return tuple(tuple(col) for col in solution)

"""
Tests for board rendering.
"""

import re

from signpost import Model
from signpost_parser import parse_solution
from signpost_render import group_label, render_board

SNAKE = "1 2 3|6 5 4|7 8 9"

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def make(definition: str) -> Model:
    return Model(parse_solution(definition))


def link(model: Model, *numbers: int) -> None:
    for a, b in zip(numbers, numbers[1:]):
        assert model.soln_num_to_square(a).connect(model.soln_num_to_square(b))


class TestGroupLabel:
    """Tests for group letter names."""

    def test_single_letters(self) -> None:
        assert group_label(1) == "a"
        assert group_label(2) == "b"
        assert group_label(26) == "z"

    def test_two_letters(self) -> None:
        """Test groups past 26 get a leading letter."""
        assert group_label(27) == "ba"
        assert group_label(28) == "bb"
        assert group_label(53) == "ca"


class TestRenderBoard:
    """Tests for the canonical text board."""

    def test_fresh_board(self) -> None:
        expected = "\n".join([
            "+------+------+------+",
            "|+1    |      |      |",
            "| o E  |.o E  |.o S  |",
            "+------+------+------+",
            "|      |      |      |",
            "|.o S  |.o W  |.o W  |",
            "+------+------+------+",
            "|      |      |+9    |",
            "|.o E  |.o E  |.   * |",
            "+------+------+------+",
        ])
        model = make(SNAKE)
        assert render_board(model) == expected
        assert str(model) == expected

    def test_groups(self) -> None:
        """Test group labels count from the head of each group."""
        expected = "\n".join([
            "+------+------+------+",
            "|+1    |a     |a+1   |",
            "| o E  |.  E  | o S  |",
            "+------+------+------+",
            "|      |b+1   |b     |",
            "|.o S  | o W  |.  W  |",
            "+------+------+------+",
            "|      |      |+9    |",
            "|.o E  |.o E  |.   * |",
            "+------+------+------+",
        ])
        model = make(SNAKE)
        link(model, 2, 3)
        link(model, 4, 5)
        assert render_board(model) == expected

    def test_solved_board(self) -> None:
        """Test a solved board shows plain numbers and no markers."""
        expected = "\n".join([
            "+------+------+------+",
            "|+1    |2     |3     |",
            "|   E  |   E  |   S  |",
            "+------+------+------+",
            "|6     |5     |4     |",
            "|   S  |   W  |   W  |",
            "+------+------+------+",
            "|7     |8     |+9    |",
            "|   E  |   E  |    * |",
            "+------+------+------+",
        ])
        model = make(SNAKE)
        model.solve()
        assert render_board(model) == expected

    def test_two_squares(self) -> None:
        expected = "\n".join([
            "+------+------+",
            "|+1    |+2    |",
            "| o E  |.   * |",
            "+------+------+",
        ])
        assert render_board(Model([[1], [2]])) == expected

    def test_no_trailing_newline(self) -> None:
        assert not render_board(make(SNAKE)).endswith("\n")

    def test_color_has_same_layout(self) -> None:
        """Test the coloured board matches the plain one once ANSI codes are removed."""
        model = make(SNAKE)
        link(model, 2, 3, 4)
        link(model, 6, 7)
        model.soln_num_to_square(6).set_fixed_num(6)
        assert ANSI.sub("", render_board(model, color=True)) == render_board(model)

"""
Signpost puzzle state.

A board of width x height squares. Every square except the last one in the
solution carries an arrow pointing (by a queen move) toward the square that
follows it. The player links squares into chains; a chain of squares whose
sequence numbers are still unknown forms a *group*, shown as "a", "a+1",
"a+2", ... on the board.

Board state lives in a single BoardState value: an arena of CellState
records addressed by stable indices (index = x * height + y). Squares are
handles onto that arena, so predecessor/successor/head are index lookups
rather than object references.

Group numbers are stored only at chain heads:
-  0  numbered chain
- -1  unnumbered square with no links
- >0  unnumbered chain of two or more squares
"""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass, field, replace
from functools import lru_cache
from typing import Iterator, Sequence

from signpost_parser import Solution, validate_solution
from signpost_render import group_label, render_board
from signpost_types import Direction, FixedNumberError, Place, PlaceList

logger = logging.getLogger(__name__)

# =============================================================================
# Successor Table
# =============================================================================


SuccessorTable = tuple[tuple[tuple[PlaceList, ...], ...], ...]


@lru_cache(maxsize=None)
def successor_cells(width: int, height: int) -> SuccessorTable:
    """
    Precompute every queen move on a width x height board.

    successor_cells(w, h)[x][y][d] lists the places reachable from (x, y) in
    direction d, nearest first. Index 0 (Direction.NONE) holds the moves in
    any direction, directions 1..8 in order. The table is shared by every
    board with the same dimensions.
    """

    def inside(p: Place) -> bool:
        return 0 <= p.x < width and 0 <= p.y < height

    table: list[tuple[tuple[PlaceList, ...], ...]] = []
    for x in range(width):
        column: list[tuple[PlaceList, ...]] = []
        for y in range(height):
            start = Place(x, y)
            by_dir: list[PlaceList] = []
            for d in Direction:
                if d == Direction.NONE:
                    continue
                moves: list[Place] = []
                p = start.move(d)
                while inside(p):
                    moves.append(p)
                    p = p.move(d)
                by_dir.append(tuple(moves))
            any_dir = tuple(p for moves in by_dir for p in moves)
            column.append((any_dir, *by_dir))
        table.append(tuple(column))

    logger.debug("successor_cells: built table for %dx%d", width, height)
    return tuple(table)


# =============================================================================
# Group Allocator
# =============================================================================


class GroupAllocator:
    """
    Issues group numbers for chains of unnumbered squares.

    allocate() always returns the lowest positive number not currently in
    use. Numbers below the high-water mark that have been released are kept
    in a sorted free list.
    """

    def __init__(self) -> None:
        self._next = 1  # Every number >= _next is free
        self._free: list[int] = []  # Sorted free numbers below _next

    def allocate(self) -> int:
        if self._free:
            group = self._free.pop(0)
        else:
            group = self._next
            self._next += 1
        logger.debug("allocate group %d", group)
        return group

    def release(self, group: int) -> None:
        """Indicate that `group` is no longer in use. Ignores numbers not in use."""
        if group not in self:
            return
        logger.debug("release group %d", group)
        if group == self._next - 1:
            self._next -= 1
            while self._free and self._free[-1] == self._next - 1:
                self._free.pop()
                self._next -= 1
        else:
            bisect.insort(self._free, group)

    def join(self, g1: int, g2: int) -> int:
        """
        Group number for the chain formed by joining groups g1 and g2.

        Two singletons (-1) get a fresh number; a singleton joins the other
        side's group; otherwise the smaller number survives and the larger
        is released.
        """
        assert g1 != 0 and g2 != 0, f"cannot join numbered chains ({g1}, {g2})"
        if g1 == -1 and g2 == -1:
            return self.allocate()
        if g1 == -1:
            return g2
        if g2 == -1 or g1 == g2:
            return g1
        self.release(max(g1, g2))
        return min(g1, g2)

    def clear(self) -> None:
        self._next = 1
        self._free = []

    def copy(self) -> GroupAllocator:
        other = GroupAllocator()
        other._next = self._next
        other._free = list(self._free)
        return other

    def __contains__(self, group: object) -> bool:
        if not isinstance(group, int) or not 0 < group < self._next:
            return False
        i = bisect.bisect_left(self._free, group)
        return i == len(self._free) or self._free[i] != group

    def __iter__(self) -> Iterator[int]:
        return (g for g in range(1, self._next) if g in self)

    def __len__(self) -> int:
        return self._next - 1 - len(self._free)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupAllocator):
            return NotImplemented
        return self._next == other._next and self._free == other._free

    def __repr__(self) -> str:
        return f"GroupAllocator({sorted(self)})"


# =============================================================================
# Board State
# =============================================================================


@dataclass
class CellState:
    """Mutable state of one square."""

    sequence_num: int  # 0 if unknown
    fixed: bool
    head: int  # Index of the first square of this square's chain
    group: int = -1  # Meaningful only when head is this square
    predecessor: int | None = None
    successor: int | None = None


@dataclass
class BoardState:
    """All mutable state of a Model."""

    cells: list[CellState]
    unconnected: int
    groups: GroupAllocator = field(default_factory=GroupAllocator)

    def copy(self) -> BoardState:
        return BoardState([replace(c) for c in self.cells], self.unconnected, self.groups.copy())


# =============================================================================
# Squares
# =============================================================================


class Square:
    """
    A square on a Model's board.

    A Square is a handle onto its model's board state. Each model creates
    one handle per position, so `a.successor is b` works as expected
    within a model.
    """

    __slots__ = ("_model", "_index", "place", "direction")

    def __init__(self, model: Model, index: int, place: Place, direction: Direction) -> None:
        self._model = model
        self._index = index
        self.place = place
        self.direction = direction

    @property
    def _cell(self) -> CellState:
        return self._model._state.cells[self._index]

    @property
    def x(self) -> int:
        return self.place.x

    @property
    def y(self) -> int:
        return self.place.y

    @property
    def sequence_num(self) -> int:
        """Current fixed or imputed sequence number, or 0 if unknown."""
        return self._cell.sequence_num

    @property
    def fixed(self) -> bool:
        return self._cell.fixed

    @property
    def predecessor(self) -> Square | None:
        return self._model._square_at(self._cell.predecessor)

    @property
    def successor(self) -> Square | None:
        return self._model._square_at(self._cell.successor)

    @property
    def head(self) -> Square:
        """First square of the chain this square is in."""
        return self._model._squares[self._cell.head]

    @property
    def group(self) -> int:
        """0 if numbered, -1 if unnumbered and unlinked, else the group number of its chain."""
        cell = self._cell
        if cell.sequence_num != 0:
            return 0
        return self._model._state.cells[cell.head].group

    @property
    def successors(self) -> PlaceList:
        """Places this square's arrow points at."""
        if self.direction == Direction.NONE:
            return ()
        return self._model.all_successors(self.place, self.direction)

    @property
    def predecessors(self) -> PlaceList:
        """Places whose arrows point at this square."""
        return self._model._predecessors[self._index]

    def seq_text(self) -> str:
        """Sequence number, or group label with offset from the head ("b", "b+2")."""
        cell = self._cell
        if cell.sequence_num != 0:
            return str(cell.sequence_num)
        group = self.group
        if group < 0:
            return ""

        name = group_label(group)
        if cell.head == self._index:
            return name
        return f"{name}{self._model._distance_from_head(self._index):+d}"

    def connectable(self, other: Square) -> bool:
        return self._model.connectable(self, other)

    def connect(self, other: Square) -> bool:
        return self._model.connect(self, other)

    def disconnect(self) -> bool:
        return self._model.disconnect(self)

    def set_fixed_num(self, n: int) -> None:
        self._model.set_fixed_num(self, n)

    def unfix_num(self) -> None:
        self._model.unfix_num(self)

    def _links(self) -> tuple[Place | None, Place | None]:
        pred, succ = self.predecessor, self.successor
        return (pred.place if pred else None, succ.place if succ else None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Square):
            return NotImplemented
        return (
            self.place == other.place
            and self.direction == other.direction
            and self.fixed == other.fixed
            and self.sequence_num == other.sequence_num
            and self._links() == other._links()
        )

    def __hash__(self) -> int:
        return hash(self.place)

    def __repr__(self) -> str:
        return f"<Square {self.place} dir={self.direction.name} seq={self.sequence_num}>"


# =============================================================================
# Model
# =============================================================================


class Model:
    """
    The state of a Signpost puzzle.

    Cell (0, height - 1) is the upper-left corner and (width - 1, 0) the
    lower-right. A Model is built from a solution, solution[x][y] being the
    sequence number of (x, y). Initially only the squares numbered 1 and
    size are numbered (and fixed) and nothing is connected.

    The puzzle is solved when all squares are linked into one chain.
    """

    def __init__(self, solution: Sequence[Sequence[int]]) -> None:
        self._solution: Solution = validate_solution(solution)
        self._width = len(self._solution)
        self._height = len(self._solution[0])
        self._successors = successor_cells(self._width, self._height)

        places: list[Place | None] = [None] * (self.size + 1)
        for x, col in enumerate(self._solution):
            for y, n in enumerate(col):
                places[n] = Place(x, y)
        self._soln_num_to_place: tuple[Place | None, ...] = tuple(places)

        self._squares = [
            Square(self, self._index(x, y), Place(x, y), self.arrow_direction(x, y))
            for x in range(self._width)
            for y in range(self._height)
        ]

        predecessors: list[list[Place]] = [[] for _ in self._squares]
        for sq in self._squares:
            for p in sq.successors:
                predecessors[self._index(p.x, p.y)].append(sq.place)
        self._predecessors: tuple[PlaceList, ...] = tuple(tuple(p) for p in predecessors)

        self._state = self._initial_state()
        logger.info("Model: %dx%d board, %d squares", self._width, self._height, self.size)

    def _initial_state(self) -> BoardState:
        last = self.size
        cells: list[CellState] = []
        for x, col in enumerate(self._solution):
            for y, n in enumerate(col):
                if n == 1 or n == last:
                    cells.append(CellState(n, True, self._index(x, y), group=0))
                else:
                    cells.append(CellState(0, False, self._index(x, y), group=-1))
        return BoardState(cells, last - 1)

    def copy(self) -> Model:
        """
        An independent copy of this model.

        The solution and successor table are shared; squares and board state
        are not.
        """
        other = Model.__new__(Model)
        other._solution = self._solution
        other._width = self._width
        other._height = self._height
        other._successors = self._successors
        other._soln_num_to_place = self._soln_num_to_place
        other._predecessors = self._predecessors
        other._squares = [Square(other, sq._index, sq.place, sq.direction) for sq in self._squares]
        other._state = self._state.copy()
        return other

    __copy__ = copy

    # -------------------------------------------------------------------------
    # Geometry and lookup
    # -------------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        """Number of squares, and so the sequence number of the last one."""
        return self._width * self._height

    @property
    def solution(self) -> Solution:
        return self._solution

    def _index(self, x: int, y: int) -> int:
        return x * self._height + y

    def _square_at(self, index: int | None) -> Square | None:
        return None if index is None else self._squares[index]

    def is_cell(self, x: int | Place, y: int | None = None) -> bool:
        """True iff (x, y), or the place x, is on the board."""
        if isinstance(x, Place):
            x, y = x.x, x.y
        if y is None:
            raise TypeError("is_cell needs a Place or x and y")
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, where: Place | Square | None) -> Square | None:
        """
        The square at a place, or at the same position as a square from
        another board. Returns None for None.
        """
        if where is None:
            return None
        if isinstance(where, Square):
            where = where.place
        if not self.is_cell(where):
            raise IndexError(f"{where} is not on a {self._width}x{self._height} board")
        return self._squares[self._index(where.x, where.y)]

    def __getitem__(self, xy: tuple[int, int]) -> Square:
        x, y = xy
        if not self.is_cell(x, y):
            raise IndexError(f"({x}, {y}) is not on a {self._width}x{self._height} board")
        return self._squares[self._index(x, y)]

    def all_successors(self, place: Place, direction: Direction = Direction.NONE) -> PlaceList:
        """Places a queen move from `place` in `direction`, or in any direction for NONE."""
        return self._successors[place.x][place.y][direction]

    def arrow_direction(self, x: int, y: int) -> Direction:
        """Direction from (x, y) to its successor in the solution, NONE for the last square."""
        n = self._solution[x][y]
        if n == self.size:
            return Direction.NONE
        nxt = self._soln_num_to_place[n + 1]
        assert nxt is not None
        return Place(x, y).dir_of(nxt)

    def soln_num_to_place(self, n: int) -> Place | None:
        """Position of the square numbered n in the solution (None for 0)."""
        if n == 0:
            return None
        if not 1 <= n <= self.size:
            raise ValueError(f"No square is numbered {n} (board has {self.size} squares)")
        return self._soln_num_to_place[n]

    def soln_num_to_square(self, n: int) -> Square | None:
        return self.get(self.soln_num_to_place(n))

    def __iter__(self) -> Iterator[Square]:
        return iter(self._squares)

    def __len__(self) -> int:
        return self.size

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    @property
    def unconnected(self) -> int:
        """Number of squares (other than the last) still lacking a successor."""
        return self._state.unconnected

    @property
    def solved(self) -> bool:
        return self._state.unconnected == 0

    @property
    def groups(self) -> list[int]:
        """Group numbers currently in use, ascending."""
        return list(self._state.groups)

    # -------------------------------------------------------------------------
    # Chain walking
    # -------------------------------------------------------------------------

    def _walk_forward(self, index: int | None) -> Iterator[int]:
        cells = self._state.cells
        while index is not None:
            yield index
            index = cells[index].successor

    def _walk_backward(self, index: int | None) -> Iterator[int]:
        cells = self._state.cells
        while index is not None:
            yield index
            index = cells[index].predecessor

    def _distance_from_head(self, index: int) -> int:
        return sum(1 for _ in self._walk_backward(index)) - 1

    def _number_forward(self, index: int) -> None:
        cells = self._state.cells
        n = cells[index].sequence_num
        for i in self._walk_forward(cells[index].successor):
            n += 1
            cells[i].sequence_num = n

    def _number_backward(self, index: int) -> None:
        cells = self._state.cells
        n = cells[index].sequence_num
        for i in self._walk_backward(cells[index].predecessor):
            n -= 1
            cells[i].sequence_num = n

    # -------------------------------------------------------------------------
    # Connecting
    # -------------------------------------------------------------------------

    def connectable(self, s0: Square, s1: Square) -> bool:
        """
        True iff s0 may be connected to s1, that is:
        - s1 is in the direction of s0's arrow.
        - s1 has no predecessor, s0 has no successor, s1 is not the first
          square and s0 is not the last.
        - If both are numbered, s1's number is one more than s0's.
        - If neither is numbered, they are not already in the same chain.
        - If one is numbered, numbering the other chain from it stays
          within 1..size.
        """
        cells = self._state.cells
        c0, c1 = cells[s0._index], cells[s1._index]
        if s1.place not in s0.successors:
            return False
        if c1.predecessor is not None or c0.successor is not None:
            return False
        if c0.sequence_num == self.size or c1.sequence_num == 1:
            return False
        if c0.sequence_num != 0 and c1.sequence_num != 0:
            return c0.sequence_num + 1 == c1.sequence_num
        if c0.sequence_num == 0 and c1.sequence_num == 0:
            return c0.head != c1.head
        if c1.sequence_num != 0:
            return sum(1 for _ in self._walk_backward(s0._index)) < c1.sequence_num
        return c0.sequence_num + sum(1 for _ in self._walk_forward(s1._index)) <= self.size

    def connect(self, s0: Square, s1: Square) -> bool:
        """
        Connect s0 to s1 if they are connectable; otherwise do nothing.
        Returns True iff the squares were connected.
        """
        if not self.connectable(s0, s1):
            return False

        state = self._state
        cells = state.cells
        i0, i1 = s0._index, s1._index
        c0, c1 = cells[i0], cells[i1]
        head = c0.head
        g0, g1 = cells[head].group, c1.group

        c0.successor = i1
        c1.predecessor = i0
        state.unconnected -= 1

        if c0.sequence_num != 0:
            self._number_forward(i0)
        elif c1.sequence_num != 0:
            self._number_backward(i1)

        for i in self._walk_forward(i1):
            cells[i].head = head
        c1.group = -1

        if c0.sequence_num != 0:
            state.groups.release(g0)
            state.groups.release(g1)
            cells[head].group = 0
        else:
            cells[head].group = state.groups.join(g0, g1)

        logger.debug("connect %s -> %s (unconnected=%d)", s0.place, s1.place, state.unconnected)
        return True

    def disconnect(self, s0: Square) -> bool:
        """
        Disconnect s0 from its successor, if any. Returns True iff there was
        a link to remove.

        Numbered fragments that no longer contain a fixed square lose their
        numbers.
        """
        state = self._state
        cells = state.cells
        i0 = s0._index
        c0 = cells[i0]
        i1 = c0.successor
        if i1 is None:
            return False
        c1 = cells[i1]
        head = c0.head

        c0.successor = None
        c1.predecessor = None
        state.unconnected += 1
        for i in self._walk_forward(i1):
            cells[i].head = i1

        front_single = c0.predecessor is None
        back_single = c1.successor is None
        if c0.sequence_num == 0:
            group = cells[head].group
            if front_single and back_single:
                state.groups.release(group)
                cells[head].group = -1
                c1.group = -1
            elif front_single:
                cells[head].group = -1
                c1.group = group
            elif back_single:
                c1.group = -1
            else:
                c1.group = state.groups.allocate()
        else:
            cells[head].group = self._settle_fragment(list(self._walk_backward(i0)))
            c1.group = self._settle_fragment(list(self._walk_forward(i1)))

        logger.debug("disconnect %s -/-> %s (unconnected=%d)", s0.place, self._squares[i1].place, state.unconnected)
        return True

    def _settle_fragment(self, members: list[int]) -> int:
        """Group number for a fragment split off a numbered chain, clearing its numbers if nothing in it is fixed."""
        cells = self._state.cells
        if any(cells[i].fixed for i in members):
            return 0
        for i in members:
            cells[i].sequence_num = 0
        return -1 if len(members) == 1 else self._state.groups.allocate()

    # -------------------------------------------------------------------------
    # Fixed numbers
    # -------------------------------------------------------------------------

    def set_fixed_num(self, sq: Square, n: int) -> None:
        """
        Fix sq's sequence number at n and number the rest of its chain to
        match.

        Raises:
            FixedNumberError: if n is not in 1..size, sq already has a
                different number, or the chain would not fit around n
        """
        cells = self._state.cells
        i = sq._index
        cell = cells[i]
        if not 1 <= n <= self.size:
            raise FixedNumberError(
                f"Sequence number {n} may not be fixed at {sq.place}: must be between 1 and {self.size}",
                place=sq.place,
                number=n,
            )
        if cell.sequence_num not in (0, n):
            raise FixedNumberError(
                f"Sequence number may not be fixed at {sq.place}: it is already {cell.sequence_num}, not {n}",
                place=sq.place,
                number=n,
            )
        if cell.sequence_num == 0:
            before = sum(1 for _ in self._walk_backward(cell.predecessor))
            after = sum(1 for _ in self._walk_forward(cell.successor))
            if n - before < 1 or n + after > self.size:
                raise FixedNumberError(
                    f"Sequence number {n} may not be fixed at {sq.place}: its chain has "
                    f"{before} square(s) before and {after} after it",
                    place=sq.place,
                    number=n,
                )

        cell.fixed = True
        logger.debug("fix %s at %d", sq.place, n)
        if cell.sequence_num == n:
            return

        head = cells[cell.head]
        self._state.groups.release(head.group)
        head.group = 0
        cell.sequence_num = n
        self._number_forward(i)
        self._number_backward(i)

    def unfix_num(self, sq: Square) -> None:
        """
        Unfix sq's sequence number if it is fixed; otherwise do nothing.

        The square keeps its links. Its chain is renumbered from whatever
        fixed squares remain in it, or left unnumbered if there are none.
        """
        cells = self._state.cells
        cell = cells[sq._index]
        if not cell.fixed:
            return
        pred = self._square_at(cell.predecessor)
        succ = self._square_at(cell.successor)

        cell.fixed = False
        self.disconnect(sq)
        if pred is not None:
            self.disconnect(pred)
        assert cell.predecessor is None and cell.successor is None
        cell.sequence_num = 0
        cell.group = -1

        if succ is not None:
            self.connect(sq, succ)
        if pred is not None:
            self.connect(pred, sq)
        logger.debug("unfix %s", sq.place)

    # -------------------------------------------------------------------------
    # Whole-board operations
    # -------------------------------------------------------------------------

    def autoconnect(self) -> bool:
        """
        Connect all numbered squares with successive numbers that are not
        yet connected and are separated by a queen move in the arrow's
        direction. Returns True iff any changes were made.
        """
        cells = self._state.cells
        change = False
        for sq in self._squares:
            cell = cells[sq._index]
            if cell.sequence_num == 0 or cell.successor is not None:
                continue
            for p in sq.successors:
                nxt = self._squares[self._index(p.x, p.y)]
                if nxt.sequence_num == cell.sequence_num + 1 and self.connect(sq, nxt):
                    change = True
                    break
        return change

    def solve(self) -> None:
        """Set every square's number from the solution and connect them all."""
        cells = self._state.cells
        for sq in self._squares:
            nxt = self._square_at(cells[sq._index].successor)
            if nxt is not None and self._solution[nxt.x][nxt.y] != self._solution[sq.x][sq.y] + 1:
                self.disconnect(sq)

        for sq in self._squares:
            cell = cells[sq._index]
            cell.sequence_num = self._solution[sq.x][sq.y]
            if cell.head == sq._index:
                cell.group = 0
        self._state.groups.clear()

        self.autoconnect()
        logger.info("solve: unconnected=%d", self._state.unconnected)

    def restart(self) -> None:
        """Remove all connections and non-fixed sequence numbers."""
        for sq in self._squares:
            self.disconnect(sq)
        for cell in self._state.cells:
            if not cell.fixed:
                cell.sequence_num = 0
            cell.group = 0 if cell.sequence_num != 0 else -1
        self._state.groups.clear()
        assert self._state.unconnected == self.size - 1
        logger.info("restart: %d squares unconnected", self._state.unconnected)

    # -------------------------------------------------------------------------
    # Consistency
    # -------------------------------------------------------------------------

    def check_invariants(self) -> None:
        """Raise AssertionError if the board state is inconsistent."""
        cells = self._state.cells
        heads_seen: list[int] = []
        chained = 0

        for i, cell in enumerate(cells):
            if cell.successor is not None:
                assert cells[cell.successor].predecessor == i, f"broken link after square {i}"
            if cell.predecessor is not None:
                assert cells[cell.predecessor].successor == i, f"broken link before square {i}"
            if cell.predecessor is not None:
                continue

            chain = list(self._walk_forward(i))
            chained += len(chain)
            numbered = [cells[j].sequence_num != 0 for j in chain]
            assert all(numbered) or not any(numbered), f"chain at {i} is partly numbered"
            for j, k in zip(chain, chain[1:]):
                assert cells[j].head == i and cells[k].head == i, f"square in chain at {i} has wrong head"
                if numbered[0]:
                    assert cells[k].sequence_num == cells[j].sequence_num + 1, f"numbers skip after square {j}"
            assert cell.head == i, f"head of chain at {i} is not itself"

            if numbered[0]:
                assert cell.group == 0, f"numbered chain at {i} has group {cell.group}"
            elif len(chain) == 1:
                assert cell.group == -1, f"lone square {i} has group {cell.group}"
            else:
                assert cell.group > 0, f"chain at {i} has group {cell.group}"
                heads_seen.append(cell.group)

        assert chained == len(cells), "some squares are linked in a cycle"
        assert len(heads_seen) == len(set(heads_seen)), f"duplicate groups {sorted(heads_seen)}"
        assert sorted(heads_seen) == list(self._state.groups), (
            f"groups in use {list(self._state.groups)} do not match chains {sorted(heads_seen)}"
        )
        lacking = sum(1 for cell in cells if cell.successor is None)
        assert self._state.unconnected == lacking - 1, (
            f"unconnected={self._state.unconnected} but {lacking} squares lack a successor"
        )

    # -------------------------------------------------------------------------
    # Comparison and display
    # -------------------------------------------------------------------------

    def _cell_signature(self) -> tuple[tuple[int, bool, int | None, int | None], ...]:
        return tuple((c.sequence_num, c.fixed, c.predecessor, c.successor) for c in self._state.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._state.unconnected == other._state.unconnected
            and self._solution == other._solution
            and self._cell_signature() == other._cell_signature()
        )

    def __hash__(self) -> int:
        return hash((self._solution, self._state.unconnected, self._cell_signature()))

    def __str__(self) -> str:
        return render_board(self)

    def __repr__(self) -> str:
        return f"Model({self._width}x{self._height}, unconnected={self._state.unconnected})"

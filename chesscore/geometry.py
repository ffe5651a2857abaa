"""
Board geometry: squares and the displacements between them.

A Position is a square on (or, transiently, off) the board, stored as a file
index ``x`` (0 = the a-file) and a rank index ``y`` (0 = rank 1, White's back
rank). An Offset is the difference between two positions. Move generation is
written entirely in terms of these two types:

    target = origin + NORTH * 2      # pawn double step
    origin - target                  # -> Offset

Arithmetic never checks bounds. A slider walking off the edge simply produces
positions that on_board() rejects, which keeps the generators free of
special cases.

Square names ("e4") and python-chess square indices are provided for tests,
logging and FEN conversion only; the engine itself works on coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass

import chess

from chesscore.constants import BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Offset:
    """A displacement of ``dx`` files and ``dy`` ranks."""

    dx: int
    dy: int

    def __add__(self, other: Offset) -> Offset:
        if not isinstance(other, Offset):
            return NotImplemented
        return Offset(self.dx + other.dx, self.dy + other.dy)

    def __sub__(self, other: Offset) -> Offset:
        if not isinstance(other, Offset):
            return NotImplemented
        return Offset(self.dx - other.dx, self.dy - other.dy)

    def __neg__(self) -> Offset:
        return Offset(-self.dx, -self.dy)

    def __mul__(self, distance: int) -> Offset:
        if not isinstance(distance, int):
            return NotImplemented
        return Offset(self.dx * distance, self.dy * distance)

    __rmul__ = __mul__


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A square, addressed by file index ``x`` and rank index ``y``."""

    x: int
    y: int

    def __add__(self, offset: Offset) -> Position:
        if not isinstance(offset, Offset):
            return NotImplemented
        return Position(self.x + offset.dx, self.y + offset.dy)

    def __sub__(self, other: Position | Offset) -> Offset | Position:
        # Position - Position is the offset between them;
        # Position - Offset steps backwards.
        if isinstance(other, Position):
            return Offset(self.x - other.x, self.y - other.y)
        if isinstance(other, Offset):
            return Position(self.x - other.dx, self.y - other.dy)
        return NotImplemented

    @property
    def square(self) -> chess.Square:
        """The python-chess square index (a1 = 0, h8 = 63)."""
        if not on_board(self):
            raise ValueError(f"position off the board: ({self.x}, {self.y})")
        return chess.square(self.x, self.y)

    @classmethod
    def from_square(cls, square: chess.Square) -> Position:
        return cls(chess.square_file(square), chess.square_rank(square))

    @classmethod
    def from_name(cls, name: str) -> Position:
        """
        Parse an algebraic square name such as ``"e4"``.

        Raises:
            ValueError: if the name is not a valid square.
        """
        return cls.from_square(chess.parse_square(name))

    def __str__(self) -> str:
        if on_board(self):
            return chess.square_name(self.square)
        return f"({self.x}, {self.y})"


def on_board(pos: Position) -> bool:
    """Return True if both coordinates lie in [0, BOARD_SIZE)."""
    return 0 <= pos.x < BOARD_SIZE and 0 <= pos.y < BOARD_SIZE


# ---------------------------------------------------------------------------
# Compass directions
# ---------------------------------------------------------------------------
# North points from White's side of the board towards Black's.

NORTH = Offset(0, 1)
NORTH_EAST = Offset(1, 1)
EAST = Offset(1, 0)
SOUTH_EAST = Offset(1, -1)
SOUTH = Offset(0, -1)
SOUTH_WEST = Offset(-1, -1)
WEST = Offset(-1, 0)
NORTH_WEST = Offset(-1, 1)

CARDINAL_DIRECTIONS: tuple[Offset, ...] = (NORTH, EAST, SOUTH, WEST)
DIAGONAL_DIRECTIONS: tuple[Offset, ...] = (NORTH_EAST, SOUTH_EAST, SOUTH_WEST, NORTH_WEST)

# Clockwise from north. Also the king's eight steps.
ALL_DIRECTIONS: tuple[Offset, ...] = (
    NORTH,
    NORTH_EAST,
    EAST,
    SOUTH_EAST,
    SOUTH,
    SOUTH_WEST,
    WEST,
    NORTH_WEST,
)

# Two squares along one axis and one along the other.
KNIGHT_JUMPS: tuple[Offset, ...] = (
    NORTH * 2 + EAST,
    EAST * 2 + NORTH,
    EAST * 2 + SOUTH,
    SOUTH * 2 + EAST,
    SOUTH * 2 + WEST,
    WEST * 2 + SOUTH,
    WEST * 2 + NORTH,
    NORTH * 2 + WEST,
)

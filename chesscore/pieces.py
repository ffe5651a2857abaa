"""
Colors, piece kinds and pieces.

The enum values deliberately coincide with python-chess's constants
(``Color.WHITE.value is chess.WHITE``, ``Kind.ROOK == chess.ROOK``) so that
conversion to and from python-chess boards is a plain lookup.

Pieces carry no state beyond their color and kind, so the twelve canonical
instances defined at the bottom of this module are all a board ever needs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

import chess

from chesscore.constants import BLACK_PAWN_RANK, PIECE_VALUES, WHITE_PAWN_RANK
from chesscore.geometry import NORTH, SOUTH, Offset


class Color(Enum):
    WHITE = chess.WHITE
    BLACK = chess.BLACK

    @property
    def other(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> Offset:
        """The direction this color's pawns advance in."""
        return NORTH if self is Color.WHITE else SOUTH

    @property
    def pawn_rank(self) -> int:
        """Rank index this color's pawns start on."""
        return WHITE_PAWN_RANK if self is Color.WHITE else BLACK_PAWN_RANK

    def improves(self, score: int, best: int | None) -> bool:
        """
        Return True if ``score`` is strictly better than ``best`` for this color.

        White prefers higher scores and Black lower ones. Anything improves on
        no score at all. Equal scores never improve, so the first of several
        equally good moves is kept.
        """
        if best is None:
            return True
        if self is Color.WHITE:
            return score > best
        return score < best

    def __str__(self) -> str:
        return self.name.capitalize()


class Kind(IntEnum):
    PAWN = chess.PAWN
    KNIGHT = chess.KNIGHT
    BISHOP = chess.BISHOP
    ROOK = chess.ROOK
    QUEEN = chess.QUEEN
    KING = chess.KING

    @property
    def base_value(self) -> int:
        return PIECE_VALUES[self]


@dataclass(frozen=True, slots=True)
class Piece:
    color: Color
    kind: Kind

    @property
    def base_value(self) -> int:
        """Material value, positive for White and negative for Black."""
        value = self.kind.base_value
        return value if self.color is Color.WHITE else -value

    def symbol(self) -> str:
        """FEN letter: upper case for White, lower case for Black."""
        return chess.Piece(self.kind, self.color.value).symbol()

    @classmethod
    def of(cls, color: Color, kind: Kind) -> Piece:
        """Return the canonical instance for ``color`` and ``kind``."""
        return _CANONICAL[color, kind]

    @classmethod
    def from_symbol(cls, symbol: str) -> Piece:
        """
        Return the canonical piece for a FEN letter such as ``"N"`` or ``"q"``.

        Raises:
            ValueError: if ``symbol`` is not a piece letter.
        """
        piece = chess.Piece.from_symbol(symbol)
        return cls.of(Color(piece.color), Kind(piece.piece_type))

    def __str__(self) -> str:
        return self.symbol()


WHITE_PAWN = Piece(Color.WHITE, Kind.PAWN)
WHITE_KNIGHT = Piece(Color.WHITE, Kind.KNIGHT)
WHITE_BISHOP = Piece(Color.WHITE, Kind.BISHOP)
WHITE_ROOK = Piece(Color.WHITE, Kind.ROOK)
WHITE_QUEEN = Piece(Color.WHITE, Kind.QUEEN)
WHITE_KING = Piece(Color.WHITE, Kind.KING)

BLACK_PAWN = Piece(Color.BLACK, Kind.PAWN)
BLACK_KNIGHT = Piece(Color.BLACK, Kind.KNIGHT)
BLACK_BISHOP = Piece(Color.BLACK, Kind.BISHOP)
BLACK_ROOK = Piece(Color.BLACK, Kind.ROOK)
BLACK_QUEEN = Piece(Color.BLACK, Kind.QUEEN)
BLACK_KING = Piece(Color.BLACK, Kind.KING)

_CANONICAL: dict[tuple[Color, Kind], Piece] = {
    (piece.color, piece.kind): piece
    for piece in (
        WHITE_PAWN, WHITE_KNIGHT, WHITE_BISHOP, WHITE_ROOK, WHITE_QUEEN, WHITE_KING,
        BLACK_PAWN, BLACK_KNIGHT, BLACK_BISHOP, BLACK_ROOK, BLACK_QUEEN, BLACK_KING,
    )
}

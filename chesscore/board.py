"""
Position representation: the board grid, moves and game outcomes.

GameState holds exactly what the rules need and nothing more:

    board   8x8 grid of Piece | None, indexed board[rank][file]
    turn    the color to move
    kings   cache of each king's square, so check detection never has to
            scan the board for it

There are no castling rights, en-passant squares or move counters, because
those rules are not modelled. Game phase is not stored either: whether the
game is over is always recomputed from the grid (see rules.outcome), so a
copied and partially mutated state can never carry a stale flag.

Search explores every branch on its own copy of the state instead of
making and unmaking moves on a shared one, so perform() needs no undo record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping

import chess

from chesscore.constants import BOARD_SIZE
from chesscore.geometry import Position, on_board
from chesscore.pieces import Color, Kind, Piece

Grid = list[list[Piece | None]]


class IllegalMoveError(ValueError):
    """Raised when a move is applied that is not legal in the current state."""


class InvalidStateError(ValueError):
    """Raised when a literal layout cannot form a consistent GameState."""


@dataclass(frozen=True, slots=True)
class Move:
    """A move from ``origin`` to ``target``. Captures are implied by the target's occupant."""

    origin: Position
    target: Position

    def uci(self) -> str:
        return chess.Move(self.origin.square, self.target.square).uci()

    @classmethod
    def from_uci(cls, uci: str) -> Move:
        """
        Parse a move in UCI notation such as ``"e2e4"``.

        Raises:
            ValueError: if the string is malformed or carries a promotion or
                drop, neither of which this engine models.
        """
        move = chess.Move.from_uci(uci)
        if move.promotion is not None or move.drop is not None:
            raise ValueError(f"promotions and drops are not supported: {uci!r}")
        return cls(Position.from_square(move.from_square), Position.from_square(move.to_square))

    def __str__(self) -> str:
        return self.uci()


@dataclass(frozen=True)
class Outcome:
    """
    How a finished game ended. Mirrors chess.Outcome.

    Attributes:
        termination: chess.Termination.CHECKMATE or chess.Termination.STALEMATE.
        winner:      The winning color, or None for a stalemate.
    """

    termination: chess.Termination
    winner: Color | None

    @classmethod
    def checkmate(cls, winner: Color) -> Outcome:
        return cls(chess.Termination.CHECKMATE, winner)

    @classmethod
    def stalemate(cls) -> Outcome:
        return cls(chess.Termination.STALEMATE, None)

    def result(self) -> str:
        """The game result in PGN notation: "1-0", "0-1" or "1/2-1/2"."""
        if self.winner is None:
            return "1/2-1/2"
        return "1-0" if self.winner is Color.WHITE else "0-1"

    def __str__(self) -> str:
        if self.winner is None:
            return "stalemate"
        return f"{self.winner} wins"


_BACK_RANK: tuple[Kind, ...] = (
    Kind.ROOK, Kind.KNIGHT, Kind.BISHOP, Kind.QUEEN,
    Kind.KING, Kind.BISHOP, Kind.KNIGHT, Kind.ROOK,
)


def _empty_grid() -> Grid:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


class GameState:
    """
    A chess position: piece placement, side to move and the king cache.

    Construct one with GameState.initial() for a new game, or from a literal
    layout with the constructor, from_pieces() or from_fen(). A literal layout
    must contain exactly one king per side; the king cache is derived from
    the grid, and a cache passed in explicitly must agree with it.

    Args:
        board: 8x8 grid indexed board[rank][file], rank 0 = rank 1.
               The state takes ownership of the lists.
        turn:  The color to move.
        kings: Optional king cache to verify against the grid.

    Raises:
        InvalidStateError: if the grid is not 8x8, a side does not have
            exactly one king, or ``kings`` disagrees with the grid.
    """

    __slots__ = ("board", "turn", "kings")

    def __init__(
        self,
        board: Grid,
        turn: Color = Color.WHITE,
        kings: Mapping[Color, Position] | None = None,
    ) -> None:
        if len(board) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in board):
            raise InvalidStateError("board must be an 8x8 grid")
        self.board: Grid = board
        self.turn: Color = turn
        located = self._locate_kings()
        if kings is not None and dict(kings) != located:
            raise InvalidStateError(
                f"king cache {_format_kings(kings)} does not match the board {_format_kings(located)}"
            )
        self.kings: dict[Color, Position] = located

    # -----------------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------------

    @classmethod
    def initial(cls) -> GameState:
        """The standard starting position, White to move."""
        board = _empty_grid()
        for x, kind in enumerate(_BACK_RANK):
            board[0][x] = Piece.of(Color.WHITE, kind)
            board[1][x] = Piece.of(Color.WHITE, Kind.PAWN)
            board[6][x] = Piece.of(Color.BLACK, Kind.PAWN)
            board[7][x] = Piece.of(Color.BLACK, kind)
        return cls(board, Color.WHITE)

    @classmethod
    def from_pieces(cls, pieces: Mapping[str, Piece], turn: Color = Color.WHITE) -> GameState:
        """
        Build a state from square names, e.g. ``{"g8": BLACK_KING, "a1": WHITE_ROOK}``.

        Squares not mentioned are empty.
        """
        board = _empty_grid()
        for name, piece in pieces.items():
            pos = Position.from_name(name)
            board[pos.y][pos.x] = piece
        return cls(board, turn)

    @classmethod
    def from_fen(cls, fen: str) -> GameState:
        """
        Build a state from a FEN string.

        Only piece placement and the side to move are used; castling rights,
        the en-passant square and the move counters are ignored.

        Raises:
            ValueError: if python-chess cannot parse the FEN.
            InvalidStateError: if a side does not have exactly one king.
        """
        parsed = chess.Board(fen)
        board = _empty_grid()
        for square, piece in parsed.piece_map().items():
            pos = Position.from_square(square)
            board[pos.y][pos.x] = Piece.of(Color(piece.color), Kind(piece.piece_type))
        return cls(board, Color(parsed.turn))

    def copy(self) -> GameState:
        """Return an independent copy. Pieces are immutable and shared."""
        clone = GameState.__new__(GameState)
        clone.board = [row[:] for row in self.board]
        clone.turn = self.turn
        clone.kings = dict(self.kings)
        return clone

    def _locate_kings(self) -> dict[Color, Position]:
        found: dict[Color, list[Position]] = {Color.WHITE: [], Color.BLACK: []}
        for pos, piece in self.pieces():
            if piece.kind is Kind.KING:
                found[piece.color].append(pos)
        kings = {}
        for color, squares in found.items():
            if len(squares) != 1:
                raise InvalidStateError(f"{color} must have exactly one king, found {len(squares)}")
            kings[color] = squares[0]
        return kings

    # -----------------------------------------------------------------------
    # Access
    # -----------------------------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        # Off-board squares read as empty so generators can probe freely.
        if on_board(pos):
            return self.board[pos.y][pos.x]
        return None

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        self.board[pos.y][pos.x] = piece

    def pieces(self) -> Iterator[tuple[Position, Piece]]:
        """Yield every occupied square, file by file, rank 8 down to rank 1."""
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE - 1, -1, -1):
                piece = self.board[y][x]
                if piece is not None:
                    yield Position(x, y), piece

    # -----------------------------------------------------------------------
    # Mutation
    # -----------------------------------------------------------------------

    def perform(self, move: Move) -> None:
        """
        Play ``move`` without checking that it is legal.

        Any piece on the target square is captured by being overwritten. The
        king cache is updated when a king moves, and the turn passes to the
        other side. Use rules.apply() for moves that come from outside the
        engine.

        Raises:
            IllegalMoveError: if the origin square is empty.
        """
        piece = self[move.origin]
        if piece is None:
            raise IllegalMoveError(f"no piece on {move.origin} for {move}")
        if piece.kind is Kind.KING:
            self.kings[piece.color] = move.target
        self[move.target] = piece
        self[move.origin] = None
        self.turn = self.turn.other

    # -----------------------------------------------------------------------
    # Presentation
    # -----------------------------------------------------------------------

    def fen(self) -> str:
        """FEN of this position. Castling is always "-" and there is no en-passant square."""
        board = chess.Board(None)
        for pos, piece in self.pieces():
            board.set_piece_at(pos.square, chess.Piece(piece.kind, piece.color.value))
        board.turn = self.turn.value
        return board.fen()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.turn is other.turn and self.board == other.board

    __hash__ = None

    def __repr__(self) -> str:
        return f"GameState({self.fen()!r})"


def _format_kings(kings: Mapping[Color, Position]) -> str:
    return ", ".join(f"{color}={pos}" for color, pos in kings.items())


def new_initial_state() -> GameState:
    """Return a fresh game in the standard starting position."""
    return GameState.initial()

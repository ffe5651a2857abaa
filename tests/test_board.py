import chess
import pytest

from chesscore import GameState, IllegalMoveError, InvalidStateError, Move, Outcome, Position
from chesscore.board import new_initial_state
from chesscore.pieces import (
    BLACK_KING,
    BLACK_PAWN,
    BLACK_QUEEN,
    WHITE_KING,
    WHITE_KNIGHT,
    WHITE_ROOK,
    Color,
    Kind,
    Piece,
)


def sq(name: str) -> Position:
    return Position.from_name(name)


# ---------------------------------------------------------------------------
# Pieces and colors
# ---------------------------------------------------------------------------


def test_canonical_pieces() -> None:
    assert Piece.of(Color.WHITE, Kind.KNIGHT) is WHITE_KNIGHT
    assert Piece.from_symbol("q") is BLACK_QUEEN
    assert WHITE_ROOK.symbol() == "R"
    assert BLACK_PAWN.symbol() == "p"


def test_signed_base_values() -> None:
    assert BLACK_QUEEN.base_value == -9
    assert WHITE_ROOK.base_value == 5
    assert WHITE_KING.base_value == 0
    assert [k.base_value for k in Kind] == [1, 3, 3, 5, 9, 0]


def test_color_helpers() -> None:
    assert Color.WHITE.other is Color.BLACK
    assert Color.BLACK.other is Color.WHITE
    assert Color.WHITE.value is chess.WHITE
    assert str(Color.BLACK) == "Black"


def test_improves_is_strict_and_per_color() -> None:
    assert Color.WHITE.improves(3, None)
    assert Color.WHITE.improves(3, 2)
    assert not Color.WHITE.improves(2, 2)
    assert Color.BLACK.improves(-1, 0)
    assert not Color.BLACK.improves(0, 0)
    assert not Color.BLACK.improves(1, 0)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def test_initial_layout(initial: GameState) -> None:
    assert initial.turn is Color.WHITE
    assert initial.kings == {Color.WHITE: sq("e1"), Color.BLACK: sq("e8")}
    assert initial[sq("d1")] == Piece(Color.WHITE, Kind.QUEEN)
    assert initial[sq("g8")] == Piece(Color.BLACK, Kind.KNIGHT)
    assert initial[sq("e4")] is None
    assert len(list(initial.pieces())) == 32
    assert initial.fen() == chess.Board().fen().replace("KQkq", "-")


def test_new_initial_state_returns_fresh_states() -> None:
    first = new_initial_state()
    second = new_initial_state()
    first.perform(Move(sq("e2"), sq("e4")))
    assert second == GameState.initial()


def test_from_fen_matches_from_pieces(back_rank: GameState) -> None:
    literal = GameState.from_pieces(
        {
            "g8": BLACK_KING,
            "f7": BLACK_PAWN,
            "g7": BLACK_PAWN,
            "h7": BLACK_PAWN,
            "a1": WHITE_ROOK,
            "h1": WHITE_KING,
        },
        Color.WHITE,
    )
    assert literal == back_rank
    assert literal.kings == {Color.WHITE: sq("h1"), Color.BLACK: sq("g8")}


def test_from_fen_ignores_castling_and_en_passant() -> None:
    state = GameState.from_fen("rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 2")
    assert state.turn is Color.BLACK
    assert state.fen() == "rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR b - - 0 1"


def test_missing_king_is_rejected() -> None:
    with pytest.raises(InvalidStateError):
        GameState.from_pieces({"e1": WHITE_KING})


def test_second_king_is_rejected() -> None:
    with pytest.raises(InvalidStateError):
        GameState.from_pieces({"e1": WHITE_KING, "d1": WHITE_KING, "e8": BLACK_KING})


def test_king_cache_must_match_the_grid() -> None:
    board = GameState.from_pieces({"e1": WHITE_KING, "e8": BLACK_KING}).board
    with pytest.raises(InvalidStateError):
        GameState(board, Color.WHITE, {Color.WHITE: sq("d1"), Color.BLACK: sq("e8")})
    state = GameState(board, Color.WHITE, {Color.WHITE: sq("e1"), Color.BLACK: sq("e8")})
    assert state.kings[Color.WHITE] == sq("e1")


def test_grid_must_be_8x8() -> None:
    with pytest.raises(InvalidStateError):
        GameState([[None] * 8 for _ in range(7)])


def test_invalid_fen_raises_value_error() -> None:
    with pytest.raises(ValueError):
        GameState.from_fen("not a fen")


# ---------------------------------------------------------------------------
# Copy and perform
# ---------------------------------------------------------------------------


def test_copy_is_independent(initial: GameState) -> None:
    clone = initial.copy()
    clone.perform(Move(sq("e1"), sq("e3")))
    assert initial.turn is Color.WHITE
    assert initial[sq("e1")] == WHITE_KING
    assert initial.kings[Color.WHITE] == sq("e1")
    assert clone.kings[Color.WHITE] == sq("e3")
    assert clone != initial


def test_perform_moves_piece_and_flips_turn(initial: GameState) -> None:
    initial.perform(Move(sq("g1"), sq("f3")))
    assert initial[sq("g1")] is None
    assert initial[sq("f3")] == WHITE_KNIGHT
    assert initial.turn is Color.BLACK
    initial.perform(Move(sq("e7"), sq("e5")))
    assert initial.turn is Color.WHITE


def test_perform_captures_by_overwriting() -> None:
    state = GameState.from_pieces({"a1": WHITE_ROOK, "a8": BLACK_QUEEN, "e1": WHITE_KING, "h8": BLACK_KING})
    state.perform(Move(sq("a1"), sq("a8")))
    assert state[sq("a8")] == WHITE_ROOK
    assert BLACK_QUEEN not in [piece for _, piece in state.pieces()]


def test_perform_tracks_king_cache() -> None:
    state = GameState.from_pieces({"e1": WHITE_KING, "e8": BLACK_KING})
    state.perform(Move(sq("e1"), sq("f2")))
    state.perform(Move(sq("e8"), sq("d7")))
    assert state.kings == {Color.WHITE: sq("f2"), Color.BLACK: sq("d7")}
    assert state.kings == GameState(state.board, state.turn).kings


def test_perform_from_empty_square_fails_fast(initial: GameState) -> None:
    with pytest.raises(IllegalMoveError):
        initial.perform(Move(sq("e4"), sq("e5")))


def test_off_board_reads_are_empty(initial: GameState) -> None:
    assert initial[Position(-1, 0)] is None
    assert initial[Position(3, 8)] is None


# ---------------------------------------------------------------------------
# Moves and outcomes
# ---------------------------------------------------------------------------


def test_move_uci() -> None:
    move = Move(sq("a1"), sq("a8"))
    assert move.uci() == "a1a8"
    assert Move.from_uci("a1a8") == move
    assert str(move) == "a1a8"


def test_move_from_uci_rejects_promotion() -> None:
    with pytest.raises(ValueError):
        Move.from_uci("e7e8q")


def test_outcome_values() -> None:
    assert Outcome.checkmate(Color.WHITE).result() == "1-0"
    assert Outcome.checkmate(Color.BLACK).result() == "0-1"
    assert Outcome.stalemate().result() == "1/2-1/2"
    assert Outcome.stalemate().termination is chess.Termination.STALEMATE
    assert str(Outcome.checkmate(Color.BLACK)) == "Black wins"

"""
Move generation, legality and game termination.

Two generators are layered on top of each other:

    pseudo_legal_moves(state, color)
        Every move obeying the pieces' movement geometry, whether or not it
        leaves the mover's own king attacked.

    legal_moves(state)
        The side to move's pseudo-legal moves, filtered by playing each one
        on a private copy and asking is_checked() about the mover's king.

is_checked() asks whether any *pseudo-legal* move of the opponent lands on
the king's square. It must use the unfiltered generator: filtering the
opponent's moves would in turn ask about the opponent's king, and the two
checks would recurse forever. A pinned piece still gives check, so the
unfiltered answer is also the correct one.

The legality filter is O(moves x opponent moves) per position. It is
exhaustive rather than incremental, and it dominates the cost of search.
Everything here is lazy, so callers that only need to know whether a legal
move exists (outcome(), evaluate() at the leaves) stop at the first one.

Castling, en passant and promotion are not modelled. A pawn that reaches the
last rank stays a pawn and has no further moves.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from chesscore.board import GameState, IllegalMoveError, Move, Outcome
from chesscore.geometry import (
    ALL_DIRECTIONS,
    CARDINAL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    EAST,
    KNIGHT_JUMPS,
    WEST,
    Offset,
    Position,
    on_board,
)
from chesscore.pieces import Color, Kind

_log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudo-legal generation
# ---------------------------------------------------------------------------


def _pawn_moves(state: GameState, origin: Position, color: Color) -> Iterator[Move]:
    forward = color.forward

    # Diagonal captures, only onto enemy pieces, the mover's left-hand side
    # first. Off-board squares read as empty, so no bounds check is needed.
    sides = (WEST, EAST) if color is Color.WHITE else (EAST, WEST)
    for side in sides:
        target = origin + forward + side
        occupant = state[target]
        if occupant is not None and occupant.color is not color:
            yield Move(origin, target)

    step = origin + forward
    if not on_board(step) or state[step] is not None:
        return
    leap = step + forward
    if origin.y == color.pawn_rank and state[leap] is None:
        yield Move(origin, leap)
    yield Move(origin, step)


def _step_moves(
    state: GameState, origin: Position, color: Color, offsets: Iterable[Offset]
) -> Iterator[Move]:
    """Knight and king moves: one fixed displacement each."""
    for offset in offsets:
        target = origin + offset
        if not on_board(target):
            continue
        occupant = state[target]
        if occupant is None or occupant.color is not color:
            yield Move(origin, target)


def _slide_moves(
    state: GameState, origin: Position, color: Color, directions: Iterable[Offset]
) -> Iterator[Move]:
    """
    Rook, bishop and queen moves.

    Each direction is walked independently. Empty squares are passed
    through; the first occupied square ends the direction and is a target
    only if it holds an enemy piece.
    """
    for direction in directions:
        target = origin + direction
        while on_board(target):
            occupant = state[target]
            if occupant is not None:
                if occupant.color is not color:
                    yield Move(origin, target)
                break
            yield Move(origin, target)
            target = target + direction


def _piece_moves(state: GameState, origin: Position, color: Color, kind: Kind) -> Iterator[Move]:
    if kind is Kind.PAWN:
        return _pawn_moves(state, origin, color)
    if kind is Kind.KNIGHT:
        return _step_moves(state, origin, color, KNIGHT_JUMPS)
    if kind is Kind.BISHOP:
        return _slide_moves(state, origin, color, DIAGONAL_DIRECTIONS)
    if kind is Kind.ROOK:
        return _slide_moves(state, origin, color, CARDINAL_DIRECTIONS)
    if kind is Kind.QUEEN:
        return _slide_moves(state, origin, color, ALL_DIRECTIONS)
    if kind is Kind.KING:
        return _step_moves(state, origin, color, ALL_DIRECTIONS)
    raise AssertionError(f"unhandled piece kind: {kind!r}")


def pseudo_legal_moves(state: GameState, color: Color) -> Iterator[Move]:
    """
    Yield every pseudo-legal move for ``color``, ignoring self-check.

    ``color`` need not be the side to move; is_checked() uses this to ask
    what the opponent attacks.
    """
    for origin, piece in state.pieces():
        if piece.color is color:
            yield from _piece_moves(state, origin, color, piece.kind)


# ---------------------------------------------------------------------------
# Check and legality
# ---------------------------------------------------------------------------


def is_checked(state: GameState, color: Color) -> bool:
    """Return True if ``color``'s king is attacked by a pseudo-legal enemy move."""
    king = state.kings[color]
    return any(move.target == king for move in pseudo_legal_moves(state, color.other))


def is_safe(state: GameState, move: Move) -> bool:
    """Return True if playing ``move`` does not leave the mover's own king attacked."""
    mover = state.turn
    trial = state.copy()
    trial.perform(move)
    return not is_checked(trial, mover)


def legal_moves(state: GameState) -> Iterator[Move]:
    """
    Yield every legal move for the side to move.

    A fresh, lazy iterator on every call. Empty exactly when the game is
    over.
    """
    for move in pseudo_legal_moves(state, state.turn):
        if is_safe(state, move):
            yield move


def has_legal_moves(state: GameState) -> bool:
    return next(legal_moves(state), None) is not None


# ---------------------------------------------------------------------------
# Game termination
# ---------------------------------------------------------------------------


def outcome(state: GameState) -> Outcome | None:
    """
    Classify the position.

    Returns None while the side to move has a legal move. Otherwise the game
    is over: checkmate (won by the other side) if the side to move is in
    check, stalemate if it is not. Recomputed from the board on every call.
    """
    if has_legal_moves(state):
        return None
    if is_checked(state, state.turn):
        return Outcome.checkmate(state.turn.other)
    return Outcome.stalemate()


def apply(state: GameState, move: Move) -> GameState:
    """
    Play a legal move on ``state`` in place and return it.

    Raises:
        IllegalMoveError: if ``move`` is not among legal_moves(state). The
            state is left untouched.
    """
    if move not in legal_moves(state):
        fen = state.fen()
        _log.warning("Rejected illegal move %s fen=%s", move, fen)
        raise IllegalMoveError(f"illegal move {move} in {fen}")
    state.perform(move)
    return state

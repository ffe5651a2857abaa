"""
chesscore: chess rules and a fixed-depth minimax player.

Given a position, the package enumerates the legal moves, scores the
position, and searches the game tree with alpha-beta pruning to pick a move
for the side to move. Castling, en passant, promotion and draw rules are not
modelled.

Modules:
    constants — Piece values, score bounds and search defaults
    geometry  — Positions, offsets and compass directions
    pieces    — Colors, piece kinds and the twelve canonical pieces
    board     — GameState, Move and Outcome
    rules     — Move generation, legality, check and game termination
    evaluate  — Static evaluation (terminal scores and material)
    search    — Minimax with alpha-beta pruning

A game is driven through the functions exported here:

    >>> from chesscore import new_initial_state, best_move, apply, outcome
    >>> state = new_initial_state()
    >>> move, score = best_move(state, depth=2)
    >>> apply(state, move) is state
    True
"""

from chesscore.board import GameState, IllegalMoveError, InvalidStateError, Move, Outcome, new_initial_state
from chesscore.evaluate import evaluate
from chesscore.geometry import Offset, Position, on_board
from chesscore.pieces import Color, Kind, Piece
from chesscore.rules import apply, is_checked, legal_moves, outcome
from chesscore.search import SearchStats, alphabeta, best_move, minimax

__all__ = [
    "Color",
    "GameState",
    "IllegalMoveError",
    "InvalidStateError",
    "Kind",
    "Move",
    "Offset",
    "Outcome",
    "Piece",
    "Position",
    "SearchStats",
    "alphabeta",
    "apply",
    "best_move",
    "evaluate",
    "is_checked",
    "legal_moves",
    "minimax",
    "new_initial_state",
    "on_board",
    "outcome",
]

"""
Move selection: fixed-depth minimax with alpha-beta pruning.

Scores are always from White's point of view (see evaluate.py), so the search
alternates explicitly: White picks the child with the highest score, Black
the child with the lowest. Each child is searched on its own copy of the
state; nothing is ever undone.

Two searches live here:

    alphabeta()  The engine's search. Carries the window [alpha, beta]:
                 alpha is the score White is already guaranteed elsewhere,
                 beta the score Black is already guaranteed. Once
                 alpha >= beta the side to move has found a reply good enough
                 that the opponent will never allow this position, and the
                 remaining siblings are skipped.

    minimax()    The same recursion without the window. Slower, but useful as
                 an oracle: for a fixed depth and move order, alphabeta() must
                 return exactly the same move and score, only visiting fewer
                 nodes.

Both keep the first of several equally scored moves (a later move replaces
the incumbent only if it is strictly better), so results are deterministic
for a given move-generation order.

Depth is measured in plies and is the only bound on the search: there is no
time limit and no transposition table. Recursion depth is the search depth.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chesscore.board import GameState, Move
from chesscore.constants import DEFAULT_SEARCH_DEPTH, MAX_SCORE, MIN_SCORE
from chesscore.evaluate import evaluate, terminal_score
from chesscore.pieces import Color
from chesscore.rules import legal_moves, outcome

_log = logging.getLogger(__name__)

SearchResult = tuple[Move | None, int]


@dataclass
class SearchStats:
    """
    Counters filled in by a search.

    Pass one instance to a search call to observe how much work it did; the
    counters accumulate across calls if the same instance is reused.

    Attributes:
        node_count: Positions visited, including leaves.
        cutoffs:    Times alphabeta() abandoned the remaining moves of a node
                    because alpha >= beta.
    """

    node_count: int = 0
    cutoffs: int = 0


def _check_depth(depth: int) -> None:
    if depth < 0:
        raise ValueError(f"search depth must be non-negative, got {depth}")


def _leaf(state: GameState, depth: int) -> int | None:
    """Return the score of ``state`` if the search stops here, else None."""
    if depth == 0:
        return evaluate(state)
    result = outcome(state)
    if result is not None:
        return terminal_score(result)
    return None


def _child(state: GameState, move: Move) -> GameState:
    child = state.copy()
    child.perform(move)
    return child


def alphabeta(
    state: GameState,
    depth: int,
    alpha: int = MIN_SCORE,
    beta: int = MAX_SCORE,
    stats: SearchStats | None = None,
) -> SearchResult:
    """
    Minimax search with alpha-beta pruning.

    Args:
        state: Position to search. Not modified; every child is a copy.
        depth: Remaining plies. At 0 the position is scored statically.
        alpha: Lower bound of the window, the best score White can already
               force. Raised as better White moves are found.
        beta:  Upper bound of the window, the best score Black can already
               force. Lowered as better Black moves are found.
        stats: Optional counters to update.

    Returns:
        (move, score). ``move`` is None only when the search stops at this
        node: depth 0 or a finished game. Otherwise it is the first legal
        move with the best score for the side to move.

    Raises:
        ValueError: if ``depth`` is negative.
    """
    _check_depth(depth)
    if stats is not None:
        stats.node_count += 1

    score = _leaf(state, depth)
    if score is not None:
        return None, score

    maximizing = state.turn is Color.WHITE
    best_move: Move | None = None
    best_score = MIN_SCORE if maximizing else MAX_SCORE

    for move in legal_moves(state):
        _, score = alphabeta(_child(state, move), depth - 1, alpha, beta, stats)

        if maximizing:
            if best_move is None or score > best_score:
                best_move, best_score = move, score
            alpha = max(alpha, best_score)
        else:
            if best_move is None or score < best_score:
                best_move, best_score = move, score
            beta = min(beta, best_score)

        # The opponent already has a better alternative higher up the tree,
        # so no remaining sibling can change the result.
        if alpha >= beta:
            if stats is not None:
                stats.cutoffs += 1
            break

    return best_move, best_score


def minimax(state: GameState, depth: int, stats: SearchStats | None = None) -> SearchResult:
    """
    Plain minimax without pruning.

    Same contract as alphabeta(). Visits every node to ``depth``; kept as a
    reference to check pruning against.
    """
    _check_depth(depth)
    if stats is not None:
        stats.node_count += 1

    score = _leaf(state, depth)
    if score is not None:
        return None, score

    best_move: Move | None = None
    best_score: int | None = None
    for move in legal_moves(state):
        _, score = minimax(_child(state, move), depth - 1, stats)
        if state.turn.improves(score, best_score):
            best_move, best_score = move, score

    return best_move, best_score


def best_move(state: GameState, depth: int = DEFAULT_SEARCH_DEPTH) -> SearchResult:
    """
    Choose a move for the side to move.

    This is the entry point for callers driving a game. A None move means
    the game is over (or ``depth`` is 0) and nothing should be played.

    Args:
        state: The current position. Not modified.
        depth: Plies to search.

    Returns:
        Tuple of (move, score), score from White's point of view.
    """
    stats = SearchStats()
    move, score = alphabeta(state, depth, MIN_SCORE, MAX_SCORE, stats)
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(
            "Move=%s score=%d depth=%d nodes=%d cutoffs=%d fen=%s",
            move,
            score,
            depth,
            stats.node_count,
            stats.cutoffs,
            state.fen(),
        )
    return move, score

"""
Static evaluation: a single White-positive score for a position.

Finished games get the extreme scores (MAX_SCORE when White has won,
MIN_SCORE when Black has won, STALEMATE_SCORE for a stalemate), so the search
always prefers a forced mate over any amount of material. Unfinished games
are scored by material alone: the sum of every piece's base value, positive
for White's pieces and negative for Black's.

The turn only matters for deciding whether the game is over; the material
count depends on the grid alone.
"""

from chesscore.board import GameState, Outcome
from chesscore.constants import MAX_SCORE, MIN_SCORE, STALEMATE_SCORE
from chesscore.pieces import Color
from chesscore.rules import outcome


def terminal_score(result: Outcome) -> int:
    """The score of a finished game."""
    if result.winner is None:
        return STALEMATE_SCORE
    return MAX_SCORE if result.winner is Color.WHITE else MIN_SCORE


def material(state: GameState) -> int:
    """Signed material balance. The starting position scores 0."""
    return sum(piece.base_value for _, piece in state.pieces())


def evaluate(state: GameState) -> int:
    """
    Score ``state`` from White's point of view.

    Pure and deterministic: the state is not modified, and evaluating the
    same position twice gives the same score.

    Args:
        state: The position to score. Not modified.

    Returns:
        terminal_score() for a finished game, otherwise material().
    """
    result = outcome(state)
    if result is not None:
        return terminal_score(result)
    return material(state)

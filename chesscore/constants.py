"""
Engine constants: piece values, score bounds, board geometry, search defaults.

All numeric constants used throughout the engine are defined here so that
the other modules never need to introduce magic numbers.

Piece values use whole pawns (1 pawn = 1 point). The king has no material
value: it can never be captured, so counting it would only add the same
constant to both sides.
"""

import chess

# ---------------------------------------------------------------------------
# Piece values (pawns)
# ---------------------------------------------------------------------------

PAWN_VALUE: int = 1
KNIGHT_VALUE: int = 3
BISHOP_VALUE: int = 3
ROOK_VALUE: int = 5
QUEEN_VALUE: int = 9
KING_VALUE: int = 0

# Keyed by python-chess piece type. pieces.Kind shares these integer values,
# so a Kind member can be used directly as a key.
PIECE_VALUES: dict[int, int] = {
    chess.PAWN:   PAWN_VALUE,
    chess.KNIGHT: KNIGHT_VALUE,
    chess.BISHOP: BISHOP_VALUE,
    chess.ROOK:   ROOK_VALUE,
    chess.QUEEN:  QUEEN_VALUE,
    chess.KING:   KING_VALUE,
}

# ---------------------------------------------------------------------------
# Special scores
# ---------------------------------------------------------------------------
# Scores are White-positive: a won game for White is the largest score the
# evaluator can produce, a won game for Black the smallest. The bounds are the
# extremes of a signed 16-bit score, far outside any reachable material sum.

MAX_SCORE: int = 32_767
MIN_SCORE: int = -32_768
STALEMATE_SCORE: int = 0

# ---------------------------------------------------------------------------
# Board geometry
# ---------------------------------------------------------------------------

BOARD_SIZE: int = 8

# Rank indices (0 = rank 1) on which each side's pawns start. A pawn may only
# advance two squares from here.
WHITE_PAWN_RANK: int = 1
BLACK_PAWN_RANK: int = 6

# ---------------------------------------------------------------------------
# Search parameters
# ---------------------------------------------------------------------------
# Plies searched by best_move() when the caller does not ask for a depth.
DEFAULT_SEARCH_DEPTH: int = 4

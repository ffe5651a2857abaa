import pytest

from chesscore import GameState


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--slow",
        action="store_true",
        default=False,
        dest="run_slow",
        help="Run tests marked with @pytest.mark.slow (deep searches)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    if config.getoption("run_slow"):
        return
    skip_slow = pytest.mark.skip(reason="use --slow to enable deep search tests")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


# White to play Ra8#: the black king is boxed in by its own pawns.
BACK_RANK_FEN = "6k1/5ppp/8/8/8/8/8/R6K w - - 0 1"

# Black to move, not in check, with every king move covered.
STALEMATE_FEN = "7k/5K2/6Q1/8/8/8/8/8 b - - 0 1"

# Mate-in-N positions, White to move.
MATE_IN_ONE_FEN = "r1b2rk1/pppp2p1/8/3qPN1Q/8/8/P5PP/b1B2R1K w - - 0 1"
MATE_IN_TWO_FEN = "3r2rk/p4p1p/3p1Pp1/3R4/2p1B2Q/8/1q4PP/4R1K1 w - - 0 1"
MATE_IN_THREE_FEN = "r1bq1n1r/pp3QpB/2p1pb2/5R2/2pPk3/8/PPP3PP/R5K1 w - - 0 1"


@pytest.fixture
def initial() -> GameState:
    return GameState.initial()


@pytest.fixture
def back_rank() -> GameState:
    return GameState.from_fen(BACK_RANK_FEN)


@pytest.fixture
def stalemate() -> GameState:
    return GameState.from_fen(STALEMATE_FEN)


@pytest.fixture
def mate_in_one() -> GameState:
    return GameState.from_fen(MATE_IN_ONE_FEN)


@pytest.fixture
def mate_in_two() -> GameState:
    return GameState.from_fen(MATE_IN_TWO_FEN)


@pytest.fixture
def mate_in_three() -> GameState:
    return GameState.from_fen(MATE_IN_THREE_FEN)

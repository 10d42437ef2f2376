import pytest

from othello_agent.evaluation.evaluator import (
    DiscCountEvaluator,
    Evaluator,
    HeuristicEvaluator,
    corner_occupancy,
    disc_difference,
    edge_runs,
    frontier,
    mobility,
    near_corner_occupancy,
    normalized_difference,
    positional_score,
    terminal_bonus,
)
from othello_agent.evaluation.weights import DEFAULT_TABLE, EvaluatorWeights
from othello_agent.othello.board import BLACK, EMPTY, WHITE, Board
from othello_agent.othello.point import Point

ZERO_TABLE = [[0] * 8 for _ in range(8)]

ZERO_WEIGHTS = EvaluatorWeights(
    disc=0,
    position=0,
    corner=0,
    edge_run=0,
    full_edge=0,
    near_corner=0,
    mobility=0,
    frontier=0,
    terminal=0,
    table=ZERO_TABLE,
)


def board_with(discs: dict[tuple[int, int], int], turn: int = BLACK) -> Board:
    cells = [[EMPTY] * 8 for _ in range(8)]
    for (x, y), color in discs.items():
        cells[x][y] = color
    return Board.from_cells(cells, turn)


def full_board(color: int) -> Board:
    return Board.from_cells([[color] * 8 for _ in range(8)], BLACK)


def after_moves(*fields: str) -> Board:
    board = Board.start()
    for field in fields:
        assert board.do_move(Point.from_field(field))
    return board


def test_base_evaluator() -> None:
    with pytest.raises(NotImplementedError):
        Evaluator().evaluate(Board.start(), BLACK)


@pytest.mark.parametrize(
    ["mine", "theirs", "expected"],
    [
        pytest.param(0, 0, 0.0, id="both-zero"),
        pytest.param(3, 1, 50.0, id="more"),
        pytest.param(1, 3, -50.0, id="less"),
        pytest.param(4, 0, 100.0, id="only-mine"),
    ],
)
def test_normalized_difference(mine: int, theirs: int, expected: float) -> None:
    assert normalized_difference(mine, theirs) == expected


def test_disc_difference() -> None:
    board = after_moves("d3")
    assert disc_difference(board, BLACK) == 3
    assert disc_difference(board, WHITE) == -3


def test_positional_score() -> None:
    board = board_with({(0, 0): BLACK, (1, 1): WHITE})
    assert positional_score(board, BLACK, DEFAULT_TABLE) == 30 + 7
    assert positional_score(board, WHITE, DEFAULT_TABLE) == -37


def test_positional_score_start_is_balanced() -> None:
    assert positional_score(Board.start(), BLACK, DEFAULT_TABLE) == 0


def test_corner_occupancy() -> None:
    board = board_with({(0, 0): BLACK, (0, 7): BLACK, (7, 7): WHITE})
    assert corner_occupancy(board, BLACK) == 1
    assert corner_occupancy(board, WHITE) == -1


def test_edge_runs_full_edge() -> None:
    board = board_with({(0, y): BLACK for y in range(8)})

    # Both corners own the full top edge and one disc of their column.
    assert edge_runs(board, BLACK, 7) == 2 * ((8 + 7) + 1)
    assert edge_runs(board, WHITE, 7) == -32


def test_edge_runs_partial() -> None:
    board = board_with(
        {(7, 0): WHITE, (7, 1): WHITE, (7, 2): BLACK, (6, 0): WHITE, (0, 0): BLACK}
    )

    # a8 run: 2 along the bottom edge and 2 up the column.
    # a1 run: 1 along the top edge and 1 down the column.
    assert edge_runs(board, WHITE, 7) == 4 - 2
    assert edge_runs(board, BLACK, 7) == 2 - 4


def test_edge_runs_no_corners() -> None:
    assert edge_runs(Board.start(), BLACK, 7) == 0


def test_near_corner_occupancy() -> None:
    board = board_with({(1, 1): BLACK, (0, 1): WHITE, (6, 7): BLACK})
    assert near_corner_occupancy(board, BLACK) == 2 - 1 + 1
    assert near_corner_occupancy(board, WHITE) == -2


def test_near_corner_occupancy_ignores_taken_corners() -> None:
    board = board_with({(0, 0): WHITE, (1, 1): BLACK, (0, 1): BLACK})
    assert near_corner_occupancy(board, BLACK) == 0


def test_mobility_start() -> None:
    assert mobility(Board.start(), BLACK) == 0.0


def test_mobility_no_moves() -> None:
    # Neither side can move, the term must not divide by zero.
    assert mobility(full_board(BLACK), BLACK) == 0.0
    assert mobility(Board.empty(), WHITE) == 0.0


def test_mobility_one_sided() -> None:
    board = board_with({(0, 0): BLACK, (0, 1): WHITE})
    assert mobility(board, BLACK) == 100.0
    assert mobility(board, WHITE) == -100.0


def test_frontier() -> None:
    assert frontier(Board.start(), BLACK) == 0.0

    # a1 has no empty neighbours, so black has 2 frontier discs and white has 1.
    board = board_with({(0, 0): BLACK, (1, 0): BLACK, (0, 1): BLACK, (1, 1): WHITE})
    assert frontier(board, BLACK) == -normalized_difference(2, 1)
    assert frontier(board, WHITE) == normalized_difference(2, 1)


def test_terminal_bonus() -> None:
    assert terminal_bonus(Board.start(), BLACK, 1000) == 0
    assert terminal_bonus(full_board(BLACK), BLACK, 1000) == 1000
    assert terminal_bonus(full_board(BLACK), WHITE, 1000) == -1000
    assert terminal_bonus(Board.empty(), BLACK, 1000) == 0


def test_terminal_bonus_forfeit() -> None:
    board = Board.start()
    board.do_move(Point(0, 0))
    assert terminal_bonus(board, WHITE, 1000) == 1000
    assert terminal_bonus(board, BLACK, 1000) == -1000


def test_disc_count_evaluator() -> None:
    board = after_moves("d3")
    evaluator = DiscCountEvaluator()
    assert evaluator.evaluate(board, BLACK) == 3
    assert evaluator.evaluate(board, WHITE) == -3


@pytest.mark.parametrize(
    ["color"],
    [
        pytest.param(BLACK, id="black"),
        pytest.param(WHITE, id="white"),
    ],
)
def test_heuristic_start_is_zero(color: int) -> None:
    assert HeuristicEvaluator().evaluate(Board.start(), color) == 0


@pytest.mark.parametrize(
    ["board"],
    [
        pytest.param(after_moves("d3"), id="after-one-move"),
        pytest.param(after_moves("d3", "c3", "c4"), id="after-three-moves"),
        pytest.param(board_with({(0, 0): BLACK, (1, 1): WHITE}), id="corner"),
        pytest.param(full_board(WHITE), id="game-end"),
    ],
)
def test_heuristic_is_antisymmetric(board: Board) -> None:
    evaluator = HeuristicEvaluator()
    assert evaluator.evaluate(board, BLACK) == -evaluator.evaluate(board, WHITE)


def test_heuristic_truncates_toward_zero() -> None:
    weights = ZERO_WEIGHTS.model_copy(update={"disc": 0.5})
    evaluator = HeuristicEvaluator(weights)
    board = after_moves("d3")

    assert evaluator.evaluate(board, BLACK) == 1
    assert evaluator.evaluate(board, WHITE) == -1


def test_heuristic_weighted_sum() -> None:
    weights = ZERO_WEIGHTS.model_copy(
        update={"disc": 2, "corner": 100, "terminal": 5000}
    )
    evaluator = HeuristicEvaluator(weights)

    board = full_board(BLACK)
    assert evaluator.evaluate(board, BLACK) == 2 * 64 + 100 * 4 + 5000


def test_heuristic_prefers_corner() -> None:
    evaluator = HeuristicEvaluator()
    corner = board_with({(0, 0): BLACK, (4, 4): WHITE})
    x_square = board_with({(1, 1): BLACK, (4, 4): WHITE})
    assert evaluator.evaluate(corner, BLACK) > evaluator.evaluate(x_square, BLACK)


def test_heuristic_is_pure() -> None:
    evaluator = HeuristicEvaluator()
    board = after_moves("d3", "c3")
    before = board.copy()

    first = evaluator.evaluate(board, BLACK)
    second = evaluator.evaluate(board, BLACK)

    assert first == second
    assert board == before
    assert board.legal_moves == before.legal_moves

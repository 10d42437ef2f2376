from __future__ import annotations

from typing import Optional

from othello_agent.evaluation.weights import EvaluatorWeights
from othello_agent.othello.board import EMPTY, Board, opponent
from othello_agent.othello.point import (
    BOARD_SIZE,
    CORNERS,
    DIRECTIONS,
    Point,
    all_points,
)


class Evaluator:
    """
    Evaluator scores a board from the perspective of `color`: higher is better for
    `color`. Implementations must only look at the board, so the same board always
    gets the same score.
    """

    def evaluate(self, board: Board, color: int) -> int:
        raise NotImplementedError


class DiscCountEvaluator(Evaluator):
    def evaluate(self, board: Board, color: int) -> int:
        return disc_difference(board, color)


class HeuristicEvaluator(Evaluator):
    def __init__(self, weights: Optional[EvaluatorWeights] = None) -> None:
        if weights is None:
            weights = EvaluatorWeights()
        self.weights = weights

    def evaluate(self, board: Board, color: int) -> int:
        weights = self.weights

        total = (
            weights.disc * disc_difference(board, color)
            + weights.position * positional_score(board, color, weights.table)
            + weights.corner * corner_occupancy(board, color)
            + weights.edge_run * edge_runs(board, color, weights.full_edge)
            + weights.near_corner * near_corner_occupancy(board, color)
            + weights.mobility * mobility(board, color)
            + weights.frontier * frontier(board, color)
            + terminal_bonus(board, color, weights.terminal)
        )

        # int() truncates toward zero.
        return int(total)


def signed_occupancy(board: Board, point: Point, color: int) -> int:
    square = board.get_square(point)
    if square == color:
        return 1
    if square == EMPTY:
        return 0
    return -1


def normalized_difference(mine: int, theirs: int) -> float:
    if mine + theirs == 0:
        return 0.0
    return 100.0 * (mine - theirs) / (mine + theirs)


def disc_difference(board: Board, color: int) -> int:
    return board.count(color) - board.count(opponent(color))


def positional_score(board: Board, color: int, table: list[list[int]]) -> int:
    return sum(
        table[point.x][point.y] * signed_occupancy(board, point, color)
        for point in all_points()
    )


def corner_occupancy(board: Board, color: int) -> int:
    return sum(signed_occupancy(board, corner, color) for corner in CORNERS)


def edge_directions(corner: Point) -> list[Point]:
    dx = 1 if corner.x == 0 else -1
    dy = 1 if corner.y == 0 else -1
    return [Point(0, dy), Point(dx, 0)]


def edge_run(board: Board, corner: Point, direction: Point) -> int:
    owner = board.get_square(corner)
    assert owner != EMPTY

    length = 0
    point = corner
    while point.is_on_board() and board.get_square(point) == owner:
        length += 1
        point = point + direction
    return length


def edge_runs(board: Board, color: int, full_edge: int) -> int:
    """
    Rewards discs that are connected to an owned corner along an edge. Such discs can
    never be flipped again. An edge that is owned from corner to corner gets
    `full_edge` extra points.
    """
    total = 0

    for corner in CORNERS:
        sign = signed_occupancy(board, corner, color)
        if sign == 0:
            continue

        for direction in edge_directions(corner):
            length = edge_run(board, corner, direction)
            if length == BOARD_SIZE:
                length += full_edge
            total += sign * length

    return total


def near_corner_occupancy(board: Board, color: int) -> int:
    """
    Counts discs next to empty corners, positive for own discs. The diagonal neighbour
    (X-square) counts double. These discs tend to give the corner away, so this term
    gets a negative weight.
    """
    total = 0

    for corner in CORNERS:
        if board.get_square(corner) != EMPTY:
            continue

        along_row, along_col = edge_directions(corner)
        x_square = corner + along_row + along_col

        total += signed_occupancy(board, corner + along_row, color)
        total += signed_occupancy(board, corner + along_col, color)
        total += 2 * signed_occupancy(board, x_square, color)

    return total


def mobility(board: Board, color: int) -> float:
    mine = len(board.get_moves(color))
    theirs = len(board.get_moves(opponent(color)))
    return normalized_difference(mine, theirs)


def is_frontier(board: Board, point: Point) -> bool:
    for direction in DIRECTIONS:
        neighbour = point + direction
        if neighbour.is_on_board() and board.get_square(neighbour) == EMPTY:
            return True
    return False


def frontier(board: Board, color: int) -> float:
    mine = 0
    theirs = 0

    for point in all_points():
        square = board.get_square(point)
        if square == EMPTY or not is_frontier(board, point):
            continue

        if square == color:
            mine += 1
        else:
            theirs += 1

    # Fewer frontier discs is better.
    return -normalized_difference(mine, theirs)


def terminal_bonus(board: Board, color: int, bonus: int) -> int:
    if not board.is_terminal:
        return 0
    if board.winner == color:
        return bonus
    if board.winner == opponent(color):
        return -bonus
    return 0

from __future__ import annotations

import math
from typing import Optional

from othello_agent.config import get_verbose
from othello_agent.evaluation.evaluator import Evaluator
from othello_agent.othello.board import BLACK, WHITE, Board
from othello_agent.othello.point import Point


class SearchResult:
    def __init__(self, move: Optional[Point], score: int) -> None:
        # Move is None for leaves and for nodes where the player to move has to pass.
        self.move = move
        self.score = score

    def __repr__(self) -> str:
        return f"SearchResult({self.move}, {self.score})"

    def as_tuple(self) -> tuple[Optional[Point], int]:
        return (self.move, self.score)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchResult):
            raise TypeError(f"Cannot compare SearchResult with {type(other)}")

        # Point refuses to be compared with None.
        if self.move is None or other.move is None:
            return self.move is other.move and self.score == other.score

        return self.as_tuple() == other.as_tuple()


class AlphaBetaSearch:
    """
    Depth-limited minimax search with alpha-beta pruning.

    Scores are always computed from the perspective of `color`, the maximizing side.
    Every explored move is done on a copy of the board, so sibling branches never
    share state.
    """

    def __init__(self, evaluator: Evaluator, color: int) -> None:
        assert color in [BLACK, WHITE]

        self.evaluator = evaluator
        self.color = color
        self.nodes = 0

    def search(
        self,
        board: Board,
        depth: int,
        alpha: float = -math.inf,
        beta: float = math.inf,
    ) -> SearchResult:
        self.nodes += 1

        if depth <= 0 or board.is_terminal:
            return SearchResult(None, self.evaluator.evaluate(board, self.color))

        if not board.has_moves():
            child = board.copy()
            child.pass_turn()
            passed = self.search(child, depth - 1, alpha, beta)
            return SearchResult(None, passed.score)

        maximizing = board.current_player == self.color

        best_move: Optional[Point] = None
        best_score = -math.inf if maximizing else math.inf

        for move in board.legal_moves:
            child = board.copy()
            child.do_move(move)
            score = self.search(child, depth - 1, alpha, beta).score

            if maximizing:
                if score > best_score:
                    best_move, best_score = move, score
                alpha = max(alpha, best_score)
                if alpha >= beta:
                    break
            else:
                if score < best_score:
                    best_move, best_score = move, score
                beta = min(beta, best_score)
                if beta <= alpha:
                    break

        return SearchResult(best_move, int(best_score))

    def minimax(self, board: Board, depth: int) -> SearchResult:
        """
        Same tree walk as `search()` without pruning. Slow, used to check that pruning
        does not change results.
        """
        self.nodes += 1

        if depth <= 0 or board.is_terminal:
            return SearchResult(None, self.evaluator.evaluate(board, self.color))

        if not board.has_moves():
            child = board.copy()
            child.pass_turn()
            return SearchResult(None, self.minimax(child, depth - 1).score)

        maximizing = board.current_player == self.color

        best_move: Optional[Point] = None
        best_score = -math.inf if maximizing else math.inf

        for move in board.legal_moves:
            child = board.copy()
            child.do_move(move)
            score = self.minimax(child, depth - 1).score

            if maximizing and score > best_score:
                best_move, best_score = move, score
            elif not maximizing and score < best_score:
                best_move, best_score = move, score

        return SearchResult(best_move, int(best_score))


def choose_move(board: Board, depth: int, evaluator: Evaluator) -> SearchResult:
    """
    Searches for the best move of the player to move on `board`. The returned move is
    None if that player has no legal moves.
    """
    search = AlphaBetaSearch(evaluator, board.current_player)
    result = search.search(board, depth)

    if get_verbose():
        if result.move is None:
            move_text = "no move"
        else:
            move_text = result.move.to_field()
        print(
            f"Searched {search.nodes} nodes at depth {depth}: "
            f"{move_text} with score {result.score}"
        )

    return result

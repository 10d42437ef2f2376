from pathlib import Path

from othello_agent.config import get_verbose
from othello_agent.driver import read_state, write_move
from othello_agent.evaluation.evaluator import Evaluator
from othello_agent.search.minimax import choose_move


class FindMove:
    def __init__(
        self, input_file: Path, output_file: Path, depth: int, evaluator: Evaluator
    ) -> None:
        # A search without plies returns no move.
        if depth < 1:
            raise ValueError(f"Depth must be at least 1, got {depth}")

        self.input_file = input_file
        self.output_file = output_file
        self.depth = depth
        self.evaluator = evaluator
        self.verbose = get_verbose()

    def __call__(self) -> None:
        board = read_state(self.input_file)

        if self.verbose:
            board.show()

        if not board.has_moves():
            # Nothing to play, the caller should not have asked.
            print("No legal moves, not writing a move.")
            return

        result = choose_move(board, self.depth, self.evaluator)
        assert result.move is not None

        write_move(self.output_file, result.move)

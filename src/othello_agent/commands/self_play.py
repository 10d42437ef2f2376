from othello_agent.evaluation.evaluator import Evaluator
from othello_agent.othello.board import DRAW, Board, color_symbol
from othello_agent.search.minimax import choose_move


class SelfPlay:
    def __init__(self, depth: int, evaluator: Evaluator) -> None:
        if depth < 1:
            raise ValueError(f"Depth must be at least 1, got {depth}")

        self.depth = depth
        self.evaluator = evaluator

    def play(self) -> Board:
        board = Board.start()

        while not board.is_terminal:
            board.show()

            mover = board.current_player
            result = choose_move(board, self.depth, self.evaluator)

            # Boards that are not terminal always have moves after do_move().
            assert result.move is not None

            board.do_move(result.move)
            print(f"{color_symbol(mover)} plays {result.move.to_field()}")
            print()

        board.show()
        return board

    def __call__(self) -> None:
        board = self.play()

        if board.winner == DRAW:
            print("Game ended in a draw")
        else:
            print(
                f"{color_symbol(board.winner)} wins with score "
                f"{board.get_final_score(board.winner)}"
            )

from __future__ import annotations

from typing import Optional

from othello_agent.othello.point import BOARD_SIZE, DIRECTIONS, Point, all_points

EMPTY = 0
BLACK = 1
WHITE = 2

# Values of `Board.winner`
DRAW = EMPTY
UNDECIDED = -1


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return 3 - color


class Board:
    """
    Board stores a full othello game state: the squares, the player to move, the disc
    counts and the moves that player can make. It enforces the rules and mutates
    itself when a move is done. Use `copy()` to explore a move without touching the
    original.
    """

    def __init__(
        self,
        cells: list[list[int]],
        turn: int,
        legal_moves: Optional[list[Point]] = None,
    ) -> None:
        assert turn in [BLACK, WHITE]

        self.cells = cells
        self.current_player = turn

        self.disc_count = {EMPTY: 0, BLACK: 0, WHITE: 0}
        for row in cells:
            for square in row:
                self.disc_count[square] += 1

        self.is_terminal = False
        self.winner = UNDECIDED

        # A supplied move list sets the move order, do_move() still checks legality.
        if legal_moves is None:
            self.legal_moves = self.get_moves(turn)
        else:
            self.legal_moves = list(legal_moves)

        if not self.legal_moves and not self.get_moves(opponent(turn)):
            self.__finish()

    @classmethod
    def start(cls) -> Board:
        cells = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        cells[3][4] = cells[4][3] = BLACK
        cells[3][3] = cells[4][4] = WHITE
        return Board(cells, BLACK)

    @classmethod
    def empty(cls) -> Board:
        cells = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        return Board(cells, BLACK)

    @classmethod
    def from_cells(
        cls,
        cells: list[list[int]],
        turn: int,
        legal_moves: Optional[list[Point]] = None,
    ) -> Board:
        if len(cells) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in cells):
            raise ValueError(f"Board must have {BOARD_SIZE} rows of {BOARD_SIZE} cells")

        for row in cells:
            for square in row:
                if square not in [EMPTY, BLACK, WHITE]:
                    raise ValueError(f'Invalid square "{square}"')

        if turn not in [BLACK, WHITE]:
            raise ValueError(f'Invalid player "{turn}"')

        if legal_moves is not None:
            for move in legal_moves:
                if not move.is_on_board():
                    raise ValueError(f"Move {move.as_tuple()} is not on the board")

        return Board([list(row) for row in cells], turn, legal_moves)

    def copy(self) -> Board:
        board = Board.__new__(Board)
        board.cells = [list(row) for row in self.cells]
        board.current_player = self.current_player
        board.disc_count = dict(self.disc_count)
        board.legal_moves = list(self.legal_moves)
        board.is_terminal = self.is_terminal
        board.winner = self.winner
        return board

    def __repr__(self) -> str:
        return f"Board({self.cells}, {self.current_player})"

    def as_tuple(self) -> tuple[tuple[tuple[int, ...], ...], int]:
        return (tuple(tuple(row) for row in self.cells), self.current_player)

    def __hash__(self) -> int:  # pragma: nocover
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_tuple() == other.as_tuple()

    def get_square(self, point: Point) -> int:
        return self.cells[point.x][point.y]

    def __set_square(self, point: Point, color: int) -> None:
        self.cells[point.x][point.y] = color

    def __get_flips(self, center: Point, direction: Point, color: int) -> list[Point]:
        flips: list[Point] = []

        current = center + direction
        while current.is_on_board() and self.get_square(current) == opponent(color):
            flips.append(current)
            current = current + direction

        if current.is_on_board() and self.get_square(current) == color:
            return flips
        return []

    def get_flips(self, move: Point, color: int) -> list[Point]:
        flips: list[Point] = []
        for direction in DIRECTIONS:
            flips += self.__get_flips(move, direction, color)
        return flips

    def is_valid_move(self, move: Point, color: int) -> bool:
        if self.get_square(move) != EMPTY:
            return False

        for direction in DIRECTIONS:
            if self.__get_flips(move, direction, color):
                return True
        return False

    def get_moves(self, color: int) -> list[Point]:
        return [point for point in all_points() if self.is_valid_move(point, color)]

    def has_moves(self) -> bool:
        return len(self.legal_moves) > 0

    def do_move(self, move: Point) -> bool:
        """
        Places a disc for the player to move and flips captured discs.

        Returns False if the move is not legal on the current squares. That is a
        forfeit: the game ends and the opponent of the player to move wins. Legality is
        recomputed here, a move list supplied to the constructor only sets the order in
        which moves are tried.
        """
        assert not self.is_terminal

        if not move.is_on_board() or not self.is_valid_move(move, self.current_player):
            self.is_terminal = True
            self.winner = opponent(self.current_player)
            return False

        mover = self.current_player
        flips = self.get_flips(move, mover)

        self.__set_square(move, mover)
        self.disc_count[EMPTY] -= 1
        self.disc_count[mover] += 1

        for flip in flips:
            self.__set_square(flip, mover)
        self.disc_count[mover] += len(flips)
        self.disc_count[opponent(mover)] -= len(flips)

        self.current_player = opponent(mover)
        self.legal_moves = self.get_moves(self.current_player)

        if not self.legal_moves:
            # Opponent has to pass, mover plays again.
            self.current_player = mover
            self.legal_moves = self.get_moves(mover)

            if not self.legal_moves:
                self.__finish()

        return True

    def pass_turn(self) -> None:
        assert not self.is_terminal

        self.current_player = opponent(self.current_player)
        self.legal_moves = self.get_moves(self.current_player)

        if not self.legal_moves and not self.get_moves(opponent(self.current_player)):
            self.__finish()

    def __finish(self) -> None:
        self.is_terminal = True

        black = self.disc_count[BLACK]
        white = self.disc_count[WHITE]

        if black > white:
            self.winner = BLACK
        elif white > black:
            self.winner = WHITE
        else:
            self.winner = DRAW

    def count(self, color: int) -> int:
        assert color in [EMPTY, BLACK, WHITE]
        return self.disc_count[color]

    def count_discs(self) -> int:
        return self.disc_count[BLACK] + self.disc_count[WHITE]

    def count_empties(self) -> int:
        return self.disc_count[EMPTY]

    def get_final_score(self, color: int) -> int:
        me_count = self.count(color)
        opp_count = self.count(opponent(color))

        if me_count > opp_count:
            return 64 - (2 * opp_count)
        elif opp_count > me_count:
            return -64 + (2 * me_count)
        else:
            return 0

    def show(self) -> None:
        print("+-a-b-c-d-e-f-g-h-+")
        for x in range(BOARD_SIZE):
            print("{} ".format(x + 1), end="")

            for y in range(BOARD_SIZE):
                point = Point(x, y)
                square = self.get_square(point)

                if square == BLACK:
                    print("○ ", end="")
                elif square == WHITE:
                    print("● ", end="")
                elif point in self.legal_moves:
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")
        print(f"○: {self.count(BLACK)}; ●: {self.count(WHITE)}")

        if not self.is_terminal:
            print(f"{color_symbol(self.current_player)} to move")
        elif self.winner == DRAW:
            print("Draw")
        else:
            print(f"Winner is {color_symbol(self.winner)}")


def color_symbol(color: int) -> str:
    if color == BLACK:
        return "○"
    if color == WHITE:
        return "●"
    raise ValueError(f'Invalid color "{color}"')

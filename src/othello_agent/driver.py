from __future__ import annotations

from pathlib import Path

from othello_agent.othello.board import Board
from othello_agent.othello.point import BOARD_SIZE, Point

# Player, the squares and the move count.
HEADER_LENGTH = 1 + BOARD_SIZE * BOARD_SIZE + 1


def parse_state(contents: str) -> Board:
    """
    Parses a game state as handed to the engine:

    - the color the engine plays (1 for black, 2 for white)
    - 8 lines of 8 squares (0 empty, 1 black, 2 white)
    - the number of legal moves, followed by one "x y" line per move

    The returned board has the engine to move and uses the supplied legal moves.
    """
    words = contents.split()

    values: list[int] = []
    for word in words:
        try:
            values.append(int(word))
        except ValueError:
            raise ValueError(f'Could not parse state: "{word}" is not a number')

    if len(values) < HEADER_LENGTH:
        raise ValueError(
            f"Could not parse state: expected at least {HEADER_LENGTH} numbers, "
            f"got {len(values)}"
        )

    player = values[0]
    cells = [
        values[1 + BOARD_SIZE * x : 1 + BOARD_SIZE * (x + 1)] for x in range(BOARD_SIZE)
    ]

    move_count = values[HEADER_LENGTH - 1]
    coordinates = values[HEADER_LENGTH:]

    if move_count < 0 or len(coordinates) != 2 * move_count:
        raise ValueError(
            f"Could not parse state: expected {move_count} moves, "
            f"got {len(coordinates)} coordinates"
        )

    moves = [
        Point(coordinates[2 * i], coordinates[2 * i + 1]) for i in range(move_count)
    ]

    return Board.from_cells(cells, player, moves)


def read_state(file: Path) -> Board:
    return parse_state(file.read_text())


def format_move(move: Point) -> str:
    return f"{move.x} {move.y}\n"


def write_move(file: Path, move: Point) -> None:
    file.write_text(format_move(move))

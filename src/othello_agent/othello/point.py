from __future__ import annotations

from typing import Iterable

BOARD_SIZE = 8


class Point:
    """
    Point identifies a square on the board. The `x` coordinate is the row and `y` is
    the column, which matches the order used by the driver file format.
    """

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def __add__(self, rhs: Point) -> Point:
        return Point(self.x + rhs.x, self.y + rhs.y)

    def __sub__(self, rhs: Point) -> Point:
        return Point(self.x - rhs.x, self.y - rhs.y)

    def is_on_board(self) -> bool:
        return 0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            raise TypeError(f"Cannot compare Point with {type(other)}")

        return self.as_tuple() == other.as_tuple()

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"

    def to_field(self) -> str:
        if not self.is_on_board():
            raise ValueError(f"Point {self.as_tuple()} is not on the board")
        return "abcdefgh"[self.y] + "12345678"[self.x]

    @classmethod
    def from_field(cls, field: str) -> Point:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        y = ord(field[0]) - ord("a")
        x = ord(field[1]) - ord("1")
        return Point(x, y)

    @classmethod
    def points_to_fields(cls, points: Iterable[Point]) -> str:
        return " ".join(point.to_field() for point in points)


DIRECTIONS = [
    Point(-1, -1),
    Point(-1, 0),
    Point(-1, 1),
    Point(0, -1),
    Point(0, 1),
    Point(1, -1),
    Point(1, 0),
    Point(1, 1),
]

CORNERS = [
    Point(0, 0),
    Point(0, BOARD_SIZE - 1),
    Point(BOARD_SIZE - 1, 0),
    Point(BOARD_SIZE - 1, BOARD_SIZE - 1),
]


def all_points() -> list[Point]:
    # Row-major order, which is also the order legal moves are generated in.
    return [Point(x, y) for x in range(BOARD_SIZE) for y in range(BOARD_SIZE)]

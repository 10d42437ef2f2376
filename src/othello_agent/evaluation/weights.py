from __future__ import annotations

from pathlib import Path
from pydantic import BaseModel, field_validator
from typing import Optional

from othello_agent.othello.point import BOARD_SIZE

DEFAULT_TABLE = [
    [30, -3, 11, 8, 8, 11, -3, 30],
    [-3, -7, -4, 1, 1, -4, -7, -3],
    [11, -4, 2, 2, 2, 2, -4, 11],
    [8, 1, 2, -3, -3, 2, 1, 8],
    [8, 1, 2, -3, -3, 2, 1, 8],
    [11, -4, 2, 2, 2, 2, -4, 11],
    [-3, -7, -4, 1, 1, -4, -7, -3],
    [30, -3, 11, 8, 8, 11, -3, 30],
]

CLASSIC_TABLE = [
    [4, -3, 2, 2, 2, 2, -3, 4],
    [-3, -4, -1, -1, -1, -1, -4, -3],
    [2, -1, 1, 0, 0, 1, -1, 2],
    [2, -1, 0, 1, 1, 0, -1, 2],
    [2, -1, 0, 1, 1, 0, -1, 2],
    [2, -1, 1, 0, 0, 1, -1, 2],
    [-3, -4, -1, -1, -1, -1, -4, -3],
    [4, -3, 2, 2, 2, 2, -3, 4],
]

EDGES_TABLE = [
    [10, 2, 4, 4, 4, 4, 2, 10],
    [2, 1, 2, 2, 2, 2, 1, 2],
    [4, 2, 3, 3, 3, 3, 2, 4],
    [4, 2, 3, 3, 3, 3, 2, 4],
    [4, 2, 3, 3, 3, 3, 2, 4],
    [4, 2, 3, 3, 3, 3, 2, 4],
    [2, 1, 2, 2, 2, 2, 1, 2],
    [10, 2, 4, 4, 4, 4, 2, 10],
]

CORNERS_TABLE = [
    [100, -5, 11, 6, 6, 11, -5, 100],
    [-5, -10, 1, 3, 3, 1, -10, -5],
    [11, 1, 5, 4, 4, 5, 1, 11],
    [6, 3, 4, 2, 2, 4, 3, 6],
    [6, 3, 4, 2, 2, 4, 3, 6],
    [11, 1, 5, 4, 4, 5, 1, 11],
    [-5, -10, 1, 3, 3, 1, -10, -5],
    [100, -5, 11, 6, 6, 11, -5, 100],
]

PRESET_TABLES = {
    "default": DEFAULT_TABLE,
    "classic": CLASSIC_TABLE,
    "edges": EDGES_TABLE,
    "corners": CORNERS_TABLE,
}


class EvaluatorWeights(BaseModel):
    """
    Tunable constants of `HeuristicEvaluator`. Every sub-score is multiplied by its
    weight and the weighted sum is truncated to an int.
    """

    disc: float = 10
    position: float = 10
    corner: float = 800
    edge_run: float = 30
    # Extra edge run units for an edge that is completely owned.
    full_edge: int = 7
    near_corner: float = -380
    mobility: float = 78.922
    frontier: float = 74.396
    terminal: int = 100_000
    table: list[list[int]] = DEFAULT_TABLE

    @field_validator("table")
    @classmethod
    def validate_table(cls, table: list[list[int]]) -> list[list[int]]:
        if len(table) != BOARD_SIZE:
            raise ValueError(f"Table must have {BOARD_SIZE} rows, got {len(table)}")

        for row in table:
            if len(row) != BOARD_SIZE:
                raise ValueError(
                    f"Table rows must have {BOARD_SIZE} columns, got {len(row)}"
                )

        return table

    @classmethod
    def preset(cls, name: str) -> EvaluatorWeights:
        try:
            table = PRESET_TABLES[name]
        except KeyError:
            raise ValueError(
                f'Unknown preset "{name}", expected one of {sorted(PRESET_TABLES)}'
            )

        return cls(table=[list(row) for row in table])

    @classmethod
    def from_file(cls, file: Path) -> EvaluatorWeights:
        return cls.model_validate_json(file.read_text())

    @classmethod
    def load(cls, file: Optional[Path], preset: str) -> EvaluatorWeights:
        if file is not None:
            return cls.from_file(file)
        return cls.preset(preset)

# -*- coding: utf-8 -*-
"""Grid helpers shared by the generator, the solution counter and the validator.

A grid is a flat, row-major list of 81 integers where 0 marks an empty cell.
"""
import json
from collections.abc import Sequence
from typing import List, Tuple

import numpy as np

from zksudoku.common.constants import BOX_SIZE, CELL_COUNT, EMPTY, GRID_SIZE
from zksudoku.common.exceptions import InvalidInputError

Grid = List[int]


def cell_index(row: int, col: int) -> int:
    return row * GRID_SIZE + col


def row_of(index: int) -> int:
    return index // GRID_SIZE


def col_of(index: int) -> int:
    return index % GRID_SIZE


def box_of(index: int) -> int:
    """Box number (0-8, row-major over the 3x3 boxes) of a cell."""
    return (row_of(index) // BOX_SIZE) * BOX_SIZE + col_of(index) // BOX_SIZE


def _box_cells(box: int) -> Tuple[int, ...]:
    start_row = (box // BOX_SIZE) * BOX_SIZE
    start_col = (box % BOX_SIZE) * BOX_SIZE
    return tuple(
        cell_index(start_row + i, start_col + j) for i in range(BOX_SIZE) for j in range(BOX_SIZE)
    )


ROWS = tuple(tuple(cell_index(r, c) for c in range(GRID_SIZE)) for r in range(GRID_SIZE))
COLUMNS = tuple(tuple(cell_index(r, c) for r in range(GRID_SIZE)) for c in range(GRID_SIZE))
BOXES = tuple(_box_cells(b) for b in range(GRID_SIZE))

# every other cell sharing a row, column or box with the key cell
PEERS = tuple(
    tuple(
        sorted(
            (set(ROWS[row_of(i)]) | set(COLUMNS[col_of(i)]) | set(BOXES[box_of(i)])) - {i}
        )
    )
    for i in range(CELL_COUNT)
)


def empty_grid() -> Grid:
    return [EMPTY] * CELL_COUNT


def is_legal(grid: Grid, index: int, digit: int) -> bool:
    """Whether `digit` is absent from the row, column and box of `index`."""
    for peer in PEERS[index]:
        if grid[peer] == digit:
            return False
    return True


def to_grid(cells, name: str = "grid") -> Grid:
    """Check a caller-supplied grid and return it as a fresh flat list of ints.

    Accepts a flat sequence of 81 values, a nested 9x9 sequence or a numpy
    array of either shape. Raises `InvalidInputError` for anything else.
    """
    if isinstance(cells, np.ndarray):
        if cells.size != CELL_COUNT:
            raise InvalidInputError(f"{name} must be array of length {CELL_COUNT}")
        cells = cells.reshape(-1).tolist()
    elif isinstance(cells, (str, bytes)) or not isinstance(cells, Sequence):
        raise InvalidInputError(f"{name} must be array of length {CELL_COUNT}")
    elif len(cells) == GRID_SIZE and all(
        isinstance(row, (Sequence, np.ndarray)) and not isinstance(row, (str, bytes))
        for row in cells
    ):
        if any(len(row) != GRID_SIZE for row in cells):
            raise InvalidInputError(f"{name} rows must each have {GRID_SIZE} cells")
        cells = [value for row in cells for value in row]

    if len(cells) != CELL_COUNT:
        raise InvalidInputError(f"{name} must be array of length {CELL_COUNT}")

    grid = []
    for index, value in enumerate(cells):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise InvalidInputError(f"{name}[{index}] must be an integer, got {value!r}")
        value = int(value)
        if not EMPTY <= value <= GRID_SIZE:
            raise InvalidInputError(
                f"{name}[{index}] must be between {EMPTY} and {GRID_SIZE}, got {value}"
            )
        grid.append(value)
    return grid


def clue_flags(puzzle: Grid) -> List[int]:
    return [1 if value != EMPTY else 0 for value in puzzle]


def parse_grid(text: str, name: str = "grid") -> Grid:
    """Parse an 81 character string (`.` or `0` for empty cells) or a JSON array."""
    text = text.strip()
    if text.startswith("["):
        try:
            cells = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"{name} is not valid JSON: {e}") from e
        return to_grid(cells, name=name)

    compact = "".join(text.split())
    if len(compact) != CELL_COUNT:
        raise InvalidInputError(f"{name} must have {CELL_COUNT} cells, got {len(compact)}")
    cells = []
    for index, char in enumerate(compact):
        if char == ".":
            cells.append(EMPTY)
        elif char in "0123456789":
            cells.append(int(char))
        else:
            raise InvalidInputError(f"{name}[{index}] is not a digit: {char!r}")
    return to_grid(cells, name=name)


def format_grid(grid: Grid) -> str:
    """Render a grid as 81 characters, using `.` for empty cells."""
    return "".join("." if value == EMPTY else str(value) for value in grid)

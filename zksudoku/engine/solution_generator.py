# -*- coding: utf-8 -*-
"""Complete-grid generation by randomized backtracking."""
from typing import Optional

import numpy as np

from zksudoku.common.constants import BOX_SIZE, CELL_COUNT, DIGITS, EMPTY, GRID_SIZE
from zksudoku.common.exceptions import InvalidInputError
from zksudoku.common.grid import Grid, cell_index, empty_grid, is_legal
from zksudoku.engine.budget import SearchBudget


def make_rng(rng=None) -> np.random.Generator:
    """Normalise `None`, an integer seed or an existing `Generator`.

    Raises:
        InvalidInputError: If `rng` is a negative seed or not a supported type.
    """
    if rng is None or isinstance(rng, np.random.Generator):
        return np.random.default_rng(rng)
    if isinstance(rng, bool) or not isinstance(rng, (int, np.integer)):
        raise InvalidInputError(f"seed must be an integer or a numpy Generator, got {rng!r}")
    if rng < 0:
        raise InvalidInputError(f"seed must be non-negative, got {rng}")
    return np.random.default_rng(int(rng))


def shuffled_digits(rng: np.random.Generator) -> list:
    return [int(d) for d in rng.permutation(DIGITS)]


def _fill_box(grid: Grid, row: int, col: int, rng: np.random.Generator) -> None:
    digits = iter(shuffled_digits(rng))
    for i in range(BOX_SIZE):
        for j in range(BOX_SIZE):
            grid[cell_index(row + i, col + j)] = next(digits)


def _fill_remaining(
    grid: Grid, index: int, rng: np.random.Generator, budget: Optional[SearchBudget]
) -> bool:
    while index < CELL_COUNT and grid[index] != EMPTY:
        index += 1
    if index == CELL_COUNT:
        return True
    if budget is not None:
        budget.tick()

    for digit in shuffled_digits(rng):
        if is_legal(grid, index, digit):
            grid[index] = digit
            if _fill_remaining(grid, index + 1, rng, budget):
                return True
            grid[index] = EMPTY
    return False


def generate_solution(rng=None, budget: Optional[SearchBudget] = None) -> Grid:
    """Generate a random, fully filled and valid 9x9 grid.

    The three diagonal boxes share no row or column, so each is filled with an
    independent permutation of 1-9 before backtracking completes the rest.

    Args:
        rng: `None`, an integer seed or a `numpy.random.Generator`.
        budget (Optional[SearchBudget]): Limits the backtracking search.

    Returns:
        Grid: 81 values in row-major order.
    """
    rng = make_rng(rng)
    grid = empty_grid()
    for start in range(0, GRID_SIZE, BOX_SIZE):
        _fill_box(grid, start, start, rng)

    if not _fill_remaining(grid, 0, rng, budget):
        # any three independently filled diagonal boxes can be completed
        raise RuntimeError("Failed to complete a Sudoku grid from the diagonal boxes")
    return grid

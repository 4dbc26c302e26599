# -*- coding: utf-8 -*-
"""Bounded solution counting, used to keep generated puzzles unique."""
from typing import Optional

from zksudoku.common.constants import DIGITS, EMPTY, GRID_SIZE, MAX_SOLUTION_COUNT
from zksudoku.common.exceptions import InvalidInputError
from zksudoku.common.grid import PEERS, Grid, box_of, col_of, row_of, to_grid
from zksudoku.engine.budget import SearchBudget


def _has_conflicting_clues(grid: Grid) -> bool:
    for index, value in enumerate(grid):
        if value != EMPTY and any(grid[peer] == value for peer in PEERS[index]):
            return True
    return False


def count_completions(
    grid: Grid, budget: Optional[SearchBudget] = None, limit: int = MAX_SOLUTION_COUNT
) -> int:
    """Backtrack over the empty cells of an already checked grid in index order.

    Digits used by each row, column and box are kept as bit masks so that the
    legality of a digit is a single lookup. `grid` itself is only read.
    """
    row_used = [0] * GRID_SIZE
    col_used = [0] * GRID_SIZE
    box_used = [0] * GRID_SIZE
    empties = []
    for index, value in enumerate(grid):
        row, col, box = row_of(index), col_of(index), box_of(index)
        if value == EMPTY:
            empties.append((row, col, box))
        else:
            bit = 1 << value
            row_used[row] |= bit
            col_used[col] |= bit
            box_used[box] |= bit
    count = 0

    def solve(position: int) -> bool:
        # returns False once the search should stop
        nonlocal count
        if position == len(empties):
            count += 1
            return count < limit
        if budget is not None:
            budget.tick()

        row, col, box = empties[position]
        used = row_used[row] | col_used[col] | box_used[box]
        for digit in DIGITS:
            bit = 1 << digit
            if used & bit:
                continue
            row_used[row] |= bit
            col_used[col] |= bit
            box_used[box] |= bit
            keep_going = solve(position + 1)
            row_used[row] ^= bit
            col_used[col] ^= bit
            box_used[box] ^= bit
            if not keep_going:
                return False
        return True

    solve(0)
    return count


def count_solutions(
    grid, budget: Optional[SearchBudget] = None, limit: int = MAX_SOLUTION_COUNT
) -> int:
    """Count the completions of a partially filled grid, stopping at `limit`.

    Only "none / exactly one / several" matters for uniqueness checks, so the
    default cap of 2 keeps the search from enumerating further solutions.
    The caller's grid is not modified.

    Args:
        grid: 81 cells, 0 for empty.
        budget (Optional[SearchBudget]): Limits the backtracking search.
        limit (int): Stop once this many solutions have been found.

    Returns:
        int: A value in `0..limit`.
    """
    work = to_grid(grid)
    if limit < 1:
        raise InvalidInputError(f"limit must be at least 1, got {limit}")
    if _has_conflicting_clues(work):
        return 0
    return count_completions(work, budget, limit)


def has_unique_solution(grid, budget: Optional[SearchBudget] = None) -> bool:
    return count_solutions(grid, budget=budget) == 1

# -*- coding: utf-8 -*-
"""Puzzle generation: remove clues from a full solution while keeping it unique."""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from zksudoku.common.constants import (
    CELL_COUNT,
    DEFAULT_MAX_PUZZLES_PER_REQUEST,
    EMPTY,
    Difficulty,
)
from zksudoku.common.exceptions import GenerationBudgetExceeded, InvalidInputError
from zksudoku.common.grid import Grid, clue_flags, to_grid
from zksudoku.engine.budget import SearchBudget
from zksudoku.engine.solution_counter import count_completions
from zksudoku.engine.solution_generator import generate_solution, make_rng
from zksudoku.engine.validator import validate_solution
from zksudoku.utils.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PuzzleResult:
    """A puzzle together with the solution it was carved from.

    The grids are stored as tuples so the record cannot be changed after
    generation; `to_dict` returns fresh lists.
    """

    puzzle: Tuple[int, ...]
    solution: Tuple[int, ...]
    difficulty: Difficulty
    clue_flags: Tuple[int, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "puzzle", tuple(self.puzzle))
        object.__setattr__(self, "solution", tuple(self.solution))
        flags = self.clue_flags if self.clue_flags else clue_flags(self.puzzle)
        object.__setattr__(self, "clue_flags", tuple(flags))

    @property
    def clues(self) -> int:
        return sum(self.clue_flags)

    @property
    def removed(self) -> int:
        return CELL_COUNT - self.clues

    def to_dict(self) -> Dict:
        return {
            "puzzle": list(self.puzzle),
            "solution": list(self.solution),
            "clue_flags": list(self.clue_flags),
            "difficulty": self.difficulty.value,
            "clues": self.clues,
        }


def remove_clues(
    solution: Grid,
    cells_to_remove: int,
    rng=None,
    budget: Optional[SearchBudget] = None,
) -> Grid:
    """Greedily blank cells of `solution` in a random order, keeping one completion.

    Each position is tried once: a removal that would allow a second solution
    is undone and the position is not revisited, so fewer than
    `cells_to_remove` cells may end up empty.

    Raises:
        InvalidInputError: If `solution` is not a complete, valid grid.
    """
    solution = to_grid(solution, name="solution")
    result = validate_solution(solution)
    if not result.valid:
        raise InvalidInputError(f"solution is not a valid Sudoku grid: {result.error}")
    rng = make_rng(rng)
    puzzle = list(solution)
    removed = 0
    for position in rng.permutation(CELL_COUNT):
        if removed >= cells_to_remove:
            break
        position = int(position)
        original = puzzle[position]
        puzzle[position] = EMPTY
        if count_completions(puzzle, budget) == 1:
            removed += 1
        else:
            puzzle[position] = original
    return puzzle


def generate_puzzle(
    difficulty: Union[str, Difficulty, None] = None,
    rng=None,
    budget: Optional[SearchBudget] = None,
) -> PuzzleResult:
    """Generate a puzzle with a unique solution.

    Args:
        difficulty: `easy`, `medium`, `hard` or `expert`; defaults to `medium`.
        rng: `None`, an integer seed or a `numpy.random.Generator`. The same
            seed always yields the same puzzle.
        budget (Optional[SearchBudget]): Shared by every search of this call.

    Returns:
        PuzzleResult: The puzzle, its solution, the clue flags and the clue count.
    """
    difficulty = Difficulty.parse(difficulty)
    rng = make_rng(rng)

    solution = generate_solution(rng, budget=budget)
    puzzle = remove_clues(solution, difficulty.cells_to_remove, rng, budget=budget)
    result = PuzzleResult(puzzle=puzzle, solution=solution, difficulty=difficulty)
    logger.debug(
        f"Generated {difficulty.value} puzzle: removed {result.removed}/"
        f"{difficulty.cells_to_remove} cells, {result.clues} clues left."
    )
    return result


def generate_puzzles(
    count: int,
    difficulty: Union[str, Difficulty, None] = None,
    rng=None,
    max_count: int = DEFAULT_MAX_PUZZLES_PER_REQUEST,
    max_seconds: Optional[float] = None,
    max_nodes: Optional[int] = None,
    max_attempts: int = 1,
) -> List[PuzzleResult]:
    """Generate `count` independent puzzles from one random source.

    Each puzzle is generated by `generate_puzzle_with_retry` under its own budget.
    """
    if isinstance(count, bool) or not isinstance(count, int) or not 1 <= count <= max_count:
        raise InvalidInputError(
            f"count must be an integer between 1 and {max_count}, got {count!r}"
        )
    difficulty = Difficulty.parse(difficulty)
    rng = make_rng(rng)
    return [
        generate_puzzle_with_retry(
            difficulty,
            rng,
            max_seconds=max_seconds,
            max_nodes=max_nodes,
            max_attempts=max_attempts,
        )
        for _ in range(count)
    ]


def generate_puzzle_with_retry(
    difficulty: Union[str, Difficulty, None] = None,
    rng=None,
    max_seconds: Optional[float] = None,
    max_nodes: Optional[int] = None,
    max_attempts: int = 3,
) -> PuzzleResult:
    """Generate a puzzle under a search budget, starting over when it runs out.

    Every attempt gets a fresh budget. The random source keeps advancing
    between attempts, so a retry explores a different search path.

    Raises:
        GenerationBudgetExceeded: When all `max_attempts` attempts ran out.
    """
    if max_attempts < 1:
        raise InvalidInputError(f"max_attempts must be at least 1, got {max_attempts}")
    difficulty = Difficulty.parse(difficulty)
    rng = make_rng(rng)

    for attempt in range(1, max_attempts + 1):
        budget = SearchBudget(max_seconds=max_seconds, max_nodes=max_nodes)
        try:
            return generate_puzzle(difficulty, rng, budget=budget)
        except GenerationBudgetExceeded as e:
            logger.warning(
                f"Puzzle generation attempt {attempt}/{max_attempts} ran out of budget: {e}"
            )
            if attempt == max_attempts:
                raise

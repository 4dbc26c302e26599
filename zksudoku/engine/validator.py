# -*- coding: utf-8 -*-
"""Rule validation of completed grids and clue consistency of candidate solutions."""
from dataclasses import dataclass
from typing import Dict, List, Optional

from zksudoku.common.constants import EMPTY, ViolationKind
from zksudoku.common.exceptions import ConstraintViolationError
from zksudoku.common.grid import BOXES, COLUMNS, ROWS, Grid, clue_flags, to_grid
from zksudoku.utils.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation.

    `kind` and `index` (0-based) locate the first violated constraint;
    `error` is the message shown to users, which counts rows, columns and
    boxes from 1.
    """

    valid: bool
    error: Optional[str] = None
    kind: Optional[ViolationKind] = None
    index: Optional[int] = None

    def __bool__(self) -> bool:
        return self.valid

    def to_dict(self) -> Dict:
        return {
            "valid": self.valid,
            "error": self.error,
            "kind": self.kind.value if self.kind is not None else None,
            "index": self.index,
        }


@dataclass(frozen=True)
class WitnessInput:
    """The arrays an external proof pipeline feeds to its circuit."""

    unsolved: Grid
    solved: Grid
    clue_flags: List[int]

    def to_dict(self) -> Dict:
        return {
            "unsolved": list(self.unsolved),
            "solved": list(self.solved),
            "clue_flags": list(self.clue_flags),
        }


VALID = ValidationResult(valid=True)

_UNITS = (
    (ViolationKind.ROW, ROWS),
    (ViolationKind.COLUMN, COLUMNS),
    (ViolationKind.BOX, BOXES),
)


def _invalid(kind: ViolationKind, index: Optional[int], error: str) -> ValidationResult:
    return ValidationResult(valid=False, error=error, kind=kind, index=index)


def validate_solution(grid) -> ValidationResult:
    """Check that a completed grid follows every Sudoku rule.

    Checks run in order and stop at the first failure: every cell is filled,
    then rows, columns and boxes hold no repeated digit.

    Raises:
        InvalidInputError: If `grid` is not 81 integers in 0-9.
    """
    grid = to_grid(grid)
    if any(value == EMPTY for value in grid):
        return _invalid(ViolationKind.CELLS, grid.index(EMPTY), "Invalid cell values")

    for kind, units in _UNITS:
        for number, unit in enumerate(units):
            seen = set()
            for index in unit:
                if grid[index] in seen:
                    return _invalid(kind, number, f"Duplicate in {kind.value} {number + 1}")
                seen.add(grid[index])
    return VALID


def find_inconsistency(puzzle, candidate) -> Optional[int]:
    """Return the first clue index that `candidate` contradicts, or `None`."""
    puzzle = to_grid(puzzle, name="puzzle")
    candidate = to_grid(candidate, name="solution")
    for index, (clue, value) in enumerate(zip(puzzle, candidate)):
        if clue != EMPTY and clue != value:
            return index
    return None


def check_consistency(puzzle, candidate) -> bool:
    """Whether `candidate` keeps every clue of `puzzle`.

    This does not check the Sudoku rules; use `validate_solution` for that.
    """
    return find_inconsistency(puzzle, candidate) is None


def _inconsistent(index: int) -> ValidationResult:
    return _invalid(
        ViolationKind.CLUE, index, f"Solution doesn't match puzzle clue at position {index}"
    )


def verify_submission(puzzle, candidate) -> ValidationResult:
    """Validate a user's solution to `puzzle`: clue consistency first, then the rules."""
    index = find_inconsistency(puzzle, candidate)
    if index is not None:
        return _inconsistent(index)
    return validate_solution(candidate)


def generate_clue_flags(puzzle) -> List[int]:
    return clue_flags(to_grid(puzzle, name="puzzle"))


def prepare_witness(puzzle, solution) -> WitnessInput:
    """Check a puzzle/solution pair and package it for a proving pipeline.

    Raises:
        InvalidInputError: If either grid is malformed.
        ConstraintViolationError: If the solution breaks a rule or a clue.
    """
    puzzle = to_grid(puzzle, name="puzzle")
    solution = to_grid(solution, name="solution")

    result = validate_solution(solution)
    if not result.valid:
        raise ConstraintViolationError(
            f"Invalid Sudoku solution: {result.error}", kind=result.kind, index=result.index
        )
    index = find_inconsistency(puzzle, solution)
    if index is not None:
        result = _inconsistent(index)
        raise ConstraintViolationError(result.error, kind=result.kind, index=result.index)

    logger.debug(f"Prepared witness input for a puzzle with {sum(clue_flags(puzzle))} clues.")
    return WitnessInput(unsolved=puzzle, solved=solution, clue_flags=clue_flags(puzzle))

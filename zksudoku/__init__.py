# -*- coding: utf-8 -*-
"""Sudoku puzzle engine: generation with unique solutions and rule validation."""

from zksudoku.common.constants import Difficulty
from zksudoku.common.exceptions import (
    ConstraintViolationError,
    GenerationBudgetExceeded,
    InvalidInputError,
    ZkSudokuError,
)
from zksudoku.engine import (
    PuzzleResult,
    SearchBudget,
    ValidationResult,
    WitnessInput,
    check_consistency,
    count_solutions,
    generate_clue_flags,
    generate_puzzle,
    generate_puzzle_with_retry,
    generate_puzzles,
    generate_solution,
    prepare_witness,
    validate_solution,
    verify_submission,
)

__version__ = "0.1.0"

__all__ = [
    "Difficulty",
    "ZkSudokuError",
    "InvalidInputError",
    "ConstraintViolationError",
    "GenerationBudgetExceeded",
    "PuzzleResult",
    "SearchBudget",
    "ValidationResult",
    "WitnessInput",
    "generate_solution",
    "generate_puzzle",
    "generate_puzzles",
    "generate_puzzle_with_retry",
    "count_solutions",
    "validate_solution",
    "check_consistency",
    "verify_submission",
    "generate_clue_flags",
    "prepare_witness",
]

from zksudoku.engine.budget import SearchBudget
from zksudoku.engine.clue_remover import (
    PuzzleResult,
    generate_puzzle,
    generate_puzzle_with_retry,
    generate_puzzles,
    remove_clues,
)
from zksudoku.engine.solution_counter import count_solutions, has_unique_solution
from zksudoku.engine.solution_generator import generate_solution
from zksudoku.engine.validator import (
    ValidationResult,
    WitnessInput,
    check_consistency,
    find_inconsistency,
    generate_clue_flags,
    prepare_witness,
    validate_solution,
    verify_submission,
)

__all__ = [
    "SearchBudget",
    "PuzzleResult",
    "ValidationResult",
    "WitnessInput",
    "generate_solution",
    "generate_puzzle",
    "generate_puzzles",
    "generate_puzzle_with_retry",
    "remove_clues",
    "count_solutions",
    "has_unique_solution",
    "validate_solution",
    "check_consistency",
    "find_inconsistency",
    "verify_submission",
    "generate_clue_flags",
    "prepare_witness",
]

from abc import ABC, abstractmethod

from zksudoku.common.config import Config
from zksudoku.common.constants import (
    DEFAULT_MAX_PUZZLES_PER_REQUEST,
    LOG_LEVELS,
    Difficulty,
)
from zksudoku.common.exceptions import InvalidInputError
from zksudoku.utils.log import get_logger


class ConfigValidator(ABC):
    def __init__(self):
        self.logger = get_logger(__name__)

    @abstractmethod
    def validate(self, config: Config) -> None:
        pass


class SudokuConfigValidator(ConfigValidator):
    def validate(self, config: Config) -> None:
        # normalise the token, e.g. "Hard" -> "hard"
        config.sudoku.default_difficulty = Difficulty.parse(
            config.sudoku.default_difficulty
        ).value

        if config.sudoku.max_puzzles_per_request < 1:
            raise InvalidInputError(
                f"`sudoku.max_puzzles_per_request` must be positive, "
                f"got {config.sudoku.max_puzzles_per_request}"
            )
        if config.sudoku.max_puzzles_per_request > DEFAULT_MAX_PUZZLES_PER_REQUEST:
            self.logger.warning(
                f"`sudoku.max_puzzles_per_request` is set to "
                f"{config.sudoku.max_puzzles_per_request}, "
                "large batches of hard puzzles may take minutes to generate."
            )
        if config.sudoku.seed is not None and config.sudoku.seed < 0:
            raise InvalidInputError(f"`sudoku.seed` must be non-negative, got {config.sudoku.seed}")


class BudgetConfigValidator(ConfigValidator):
    def validate(self, config: Config) -> None:
        budget = config.budget
        if budget.max_attempts < 1:
            raise InvalidInputError(
                f"`budget.max_attempts` must be at least 1, got {budget.max_attempts}"
            )
        for name in ("max_seconds", "max_nodes"):
            value = getattr(budget, name)
            if value is not None and value <= 0:
                raise InvalidInputError(f"`budget.{name}` must be positive, got {value}")


class LogConfigValidator(ConfigValidator):
    def validate(self, config: Config) -> None:
        level = config.log.level.upper()
        if level not in LOG_LEVELS:
            raise InvalidInputError(
                f"Invalid log level: {config.log.level}. Must be one of: {', '.join(LOG_LEVELS)}"
            )
        config.log.level = level


validators = [
    SudokuConfigValidator(),
    BudgetConfigValidator(),
    LogConfigValidator(),
]

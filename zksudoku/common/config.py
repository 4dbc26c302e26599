# -*- coding: utf-8 -*-
"""Configs for the puzzle engine."""
import os
from dataclasses import dataclass, field
from typing import Optional

from omegaconf import OmegaConf

from zksudoku.common.constants import DEFAULT_DIFFICULTY, DEFAULT_MAX_PUZZLES_PER_REQUEST
from zksudoku.common.exceptions import InvalidInputError
from zksudoku.utils.log import get_logger

logger = get_logger(__name__)


@dataclass
class SudokuConfig:
    default_difficulty: str = DEFAULT_DIFFICULTY.value
    max_puzzles_per_request: int = DEFAULT_MAX_PUZZLES_PER_REQUEST
    # `None` draws fresh entropy on every run
    seed: Optional[int] = None


@dataclass
class BudgetConfig:
    max_seconds: Optional[float] = None
    max_nodes: Optional[int] = None
    max_attempts: int = 3


@dataclass
class LogConfig:
    level: str = "INFO"


@dataclass
class Config:
    """Global configuration."""

    sudoku: SudokuConfig = field(default_factory=SudokuConfig)
    budget: BudgetConfig = field(default_factory=BudgetConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def check_and_update(self) -> "Config":
        """Check the config and normalise its values in place."""
        from zksudoku.common.config_validator import validators

        for validator in validators:
            validator.validate(self)
        return self


def load_config(config_path: Optional[str] = None) -> Config:
    """Load a YAML config on top of the defaults.

    Args:
        config_path (Optional[str]): Path to a YAML file. Defaults are used when `None`.

    Returns:
        Config: The checked config.
    """
    schema = OmegaConf.structured(Config)
    if config_path is not None:
        if not os.path.exists(config_path):
            raise InvalidInputError(f"Config file not found: {config_path}")
        try:
            schema = OmegaConf.merge(schema, OmegaConf.load(config_path))
        except Exception as e:
            raise InvalidInputError(f"Invalid config file {config_path}: {e}") from e
        logger.debug(f"Loaded config from {config_path}")
    config = OmegaConf.to_object(schema)
    return config.check_and_update()

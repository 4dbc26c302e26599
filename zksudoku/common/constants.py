# -*- coding: utf-8 -*-
"""Constants."""
from enum import Enum, EnumMeta
from typing import Union

from zksudoku.common.exceptions import InvalidInputError

# grid geometry

GRID_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE
DIGITS = tuple(range(1, GRID_SIZE + 1))
EMPTY = 0

# the solution counter never needs to distinguish more than "0 / 1 / many"
MAX_SOLUTION_COUNT = 2

DEFAULT_MAX_PUZZLES_PER_REQUEST = 20

LOG_LEVEL_ENV_VAR = "ZKSUDOKU_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# enumerate types


class CaseInsensitiveEnumMeta(EnumMeta):
    def __getitem__(cls, name):
        return super().__getitem__(name.upper())


class CaseInsensitiveEnum(Enum, metaclass=CaseInsensitiveEnumMeta):
    pass


class Difficulty(CaseInsensitiveEnum):
    """Difficulty levels and the number of cells each one tries to remove."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def cells_to_remove(self) -> int:
        return CELLS_TO_REMOVE[self]

    @classmethod
    def parse(cls, token: Union[str, "Difficulty", None]) -> "Difficulty":
        """Resolve a difficulty token such as `"Hard"`; `None` means the default."""
        if token is None:
            return DEFAULT_DIFFICULTY
        if isinstance(token, cls):
            return token
        if isinstance(token, str):
            try:
                return cls[token.strip()]
            except KeyError:
                pass
        valid = ", ".join(d.value for d in cls)
        raise InvalidInputError(f"Invalid difficulty level: {token!r}. Must be one of: {valid}")


CELLS_TO_REMOVE = {
    Difficulty.EASY: 40,
    Difficulty.MEDIUM: 50,
    Difficulty.HARD: 60,
    Difficulty.EXPERT: 70,
}

DEFAULT_DIFFICULTY = Difficulty.MEDIUM


class ViolationKind(CaseInsensitiveEnum):
    """Which constraint a rejected grid broke."""

    CELLS = "cells"
    ROW = "row"
    COLUMN = "column"
    BOX = "box"
    CLUE = "clue"

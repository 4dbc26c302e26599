# -*- coding: utf-8 -*-
"""Exceptions raised by the puzzle engine."""


class ZkSudokuError(Exception):
    """Base class of every error raised on purpose by zksudoku."""


class InvalidInputError(ZkSudokuError, ValueError):
    """Malformed grid, unknown difficulty or a bad request parameter."""


class ConstraintViolationError(ZkSudokuError, ValueError):
    """A submitted solution breaks a Sudoku rule or contradicts a clue."""

    def __init__(self, message: str, kind=None, index=None):
        super().__init__(message)
        self.kind = kind
        self.index = index


class GenerationBudgetExceeded(ZkSudokuError, RuntimeError):
    """A backtracking search ran out of its time or node budget.

    The failure is retryable: a fresh attempt takes a different random path.
    """

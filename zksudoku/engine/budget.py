# -*- coding: utf-8 -*-
"""Search budget for the backtracking searches."""
import time
from typing import Optional

from zksudoku.common.exceptions import GenerationBudgetExceeded, InvalidInputError


class SearchBudget:
    """Caps the wall-clock time and the number of search nodes a search may spend.

    One budget is shared by every search run during a single generation call,
    so the limits apply to the call as a whole. Either limit may be `None`.
    """

    def __init__(self, max_seconds: Optional[float] = None, max_nodes: Optional[int] = None):
        if max_seconds is not None and max_seconds <= 0:
            raise InvalidInputError(f"max_seconds must be positive, got {max_seconds}")
        if max_nodes is not None and max_nodes <= 0:
            raise InvalidInputError(f"max_nodes must be positive, got {max_nodes}")
        self.max_seconds = max_seconds
        self.max_nodes = max_nodes
        self.nodes = 0
        self.start_time = time.monotonic()

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.start_time

    def tick(self) -> None:
        """Account for one search node; raise once a limit has been crossed."""
        self.nodes += 1
        if self.max_nodes is not None and self.nodes > self.max_nodes:
            raise GenerationBudgetExceeded(f"search exceeded {self.max_nodes} nodes")
        # checking the clock on every node is measurably slower
        if self.max_seconds is not None and self.nodes % 256 == 0:
            if self.elapsed > self.max_seconds:
                raise GenerationBudgetExceeded(
                    f"search exceeded {self.max_seconds}s after {self.nodes} nodes"
                )

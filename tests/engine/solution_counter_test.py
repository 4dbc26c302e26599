# -*- coding: utf-8 -*-
"""Tests for bounded solution counting."""
import unittest

from tests.tools import UNIQUE_PUZZLE, VALID_SOLUTION
from zksudoku.common.exceptions import GenerationBudgetExceeded, InvalidInputError
from zksudoku.engine.budget import SearchBudget
from zksudoku.engine.solution_counter import count_solutions, has_unique_solution


class TestSolutionCounter(unittest.TestCase):
    def test_empty_grid_is_capped(self):
        self.assertEqual(count_solutions([0] * 81), 2)

    def test_unique_puzzle(self):
        self.assertEqual(count_solutions(UNIQUE_PUZZLE), 1)
        self.assertTrue(has_unique_solution(UNIQUE_PUZZLE))

    def test_complete_grid(self):
        self.assertEqual(count_solutions(VALID_SOLUTION), 1)

    def test_ambiguous_puzzle(self):
        # swapping every 1 with every 2 gives a second solution
        puzzle = list(VALID_SOLUTION)
        for index, value in enumerate(puzzle):
            if value in (1, 2):
                puzzle[index] = 0
        self.assertEqual(count_solutions(puzzle), 2)
        self.assertFalse(has_unique_solution(puzzle))

    def test_unsolvable(self):
        conflicting = list(UNIQUE_PUZZLE)
        conflicting[2] = 5  # second 5 in the first row
        self.assertEqual(count_solutions(conflicting), 0)

        broken = list(VALID_SOLUTION)
        broken[0], broken[1] = broken[1], broken[0]
        self.assertEqual(count_solutions(broken), 0)

        # every digit but 9 is blocked for cell 0, and 9 sits in its column
        dead_end = [0] * 81
        dead_end[1:9] = [1, 2, 3, 4, 5, 6, 7, 8]
        dead_end[9 * 4] = 9
        self.assertEqual(count_solutions(dead_end), 0)

    def test_does_not_mutate_input(self):
        puzzle = list(UNIQUE_PUZZLE)
        count_solutions(puzzle)
        self.assertEqual(puzzle, UNIQUE_PUZZLE)

    def test_limit(self):
        self.assertEqual(count_solutions([0] * 81, limit=1), 1)
        self.assertEqual(count_solutions([0] * 81, limit=5), 5)
        with self.assertRaises(InvalidInputError):
            count_solutions([0] * 81, limit=0)

    def test_invalid_input(self):
        with self.assertRaises(InvalidInputError):
            count_solutions([0] * 80)
        with self.assertRaises(InvalidInputError):
            count_solutions([0] * 80 + [12])

    def test_budget(self):
        with self.assertRaises(GenerationBudgetExceeded):
            count_solutions(UNIQUE_PUZZLE, budget=SearchBudget(max_nodes=3))


if __name__ == "__main__":
    unittest.main()

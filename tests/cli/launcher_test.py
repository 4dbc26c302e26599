import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from tests.tools import UNIQUE_PUZZLE, VALID_SOLUTION
from zksudoku.cli.launcher import main
from zksudoku.common.grid import format_grid
from zksudoku.engine.solution_counter import count_solutions


def run_cli(*argv):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        code = main(list(argv))
    output = buffer.getvalue().strip()
    return code, json.loads(output) if output else None


class TestLauncher(unittest.TestCase):
    def test_generate(self):
        code, data = run_cli("generate", "--difficulty", "easy", "--seed", "42")
        self.assertEqual(code, 0)
        self.assertEqual(data["difficulty"], "easy")
        self.assertEqual(len(data["puzzle"]), 81)
        self.assertEqual(count_solutions(data["puzzle"]), 1)

        _, again = run_cli("generate", "--difficulty", "easy", "--seed", "42")
        self.assertEqual(again, data)

    def test_generate_batch(self):
        code, data = run_cli("generate", "--difficulty", "easy", "--count", "2", "--seed", "1")
        self.assertEqual(code, 0)
        self.assertEqual(len(data), 2)

    def test_generate_with_config(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "config.yaml")
            with open(path, "w") as f:
                f.write("sudoku:\n  default_difficulty: easy\n  seed: 5\n")
            code, data = run_cli("--config", path, "generate")
        self.assertEqual(code, 0)
        self.assertEqual(data["difficulty"], "easy")

    def test_invalid_difficulty(self):
        with self.assertLogs("zksudoku.cli.launcher", level="ERROR"):
            code, data = run_cli("generate", "--difficulty", "impossible")
        self.assertEqual(code, 1)
        self.assertIsNone(data)

    def test_validate(self):
        code, data = run_cli(
            "validate",
            "--puzzle",
            format_grid(UNIQUE_PUZZLE),
            "--solution",
            json.dumps(VALID_SOLUTION),
        )
        self.assertEqual(code, 0)
        self.assertTrue(data["valid"])

        wrong = list(VALID_SOLUTION)
        wrong[0] = 1
        code, data = run_cli(
            "validate", "--puzzle", format_grid(UNIQUE_PUZZLE), "--solution", format_grid(wrong)
        )
        self.assertEqual(code, 2)
        self.assertEqual(data["kind"], "clue")

    def test_count(self):
        code, data = run_cli("count", "--grid", "." * 81)
        self.assertEqual(code, 0)
        self.assertEqual(data, {"solutions": 2})

    def test_witness(self):
        code, data = run_cli(
            "witness",
            "--puzzle",
            format_grid(UNIQUE_PUZZLE),
            "--solution",
            format_grid(VALID_SOLUTION),
        )
        self.assertEqual(code, 0)
        self.assertEqual(data["unsolved"], UNIQUE_PUZZLE)
        self.assertEqual(sum(data["clue_flags"]), 30)

    def test_malformed_grid(self):
        with self.assertLogs("zksudoku.cli.launcher", level="ERROR"):
            code, _ = run_cli("count", "--grid", "123")
        self.assertEqual(code, 1)

    def test_negative_seed(self):
        with self.assertLogs("zksudoku.cli.launcher", level="ERROR") as cm:
            code, data = run_cli("generate", "--difficulty", "easy", "--seed", "-1")
        self.assertEqual(code, 1)
        self.assertIsNone(data)
        self.assertIn("seed must be non-negative", cm.output[0])


class TestLauncherBudget(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.tmp_dir.name, "config.yaml")

    def tearDown(self):
        self.tmp_dir.cleanup()

    def _write_budget(self, content: str) -> None:
        with open(self.config_path, "w") as f:
            f.write("budget:\n" + content)

    def test_count_respects_budget(self):
        # no conflicting clues, but the last cell has no candidate left, so an
        # unbounded search would try every filling of the other cells
        grid = [0] * 81
        grid[72:80] = [1, 2, 3, 4, 5, 6, 7, 8]
        grid[8] = 9
        self._write_budget("  max_seconds: 1\n")
        with self.assertLogs("zksudoku.cli.launcher", level="ERROR") as cm:
            code, data = run_cli("--config", self.config_path, "count", "--grid", format_grid(grid))
        self.assertEqual(code, 1)
        self.assertIsNone(data)
        self.assertIn("exceeded", cm.output[0])

    def test_batch_respects_budget(self):
        self._write_budget("  max_nodes: 1\n  max_attempts: 1\n")
        with self.assertLogs("zksudoku.cli.launcher", level="ERROR"):
            code, data = run_cli(
                "--config", self.config_path, "generate", "--difficulty", "easy", "--count", "2"
            )
        self.assertEqual(code, 1)
        self.assertIsNone(data)

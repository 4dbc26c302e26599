import os
import tempfile
import unittest

from tests.tools import get_template_config
from zksudoku.common.config import load_config
from zksudoku.common.exceptions import InvalidInputError


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp_dir.cleanup()

    def _write(self, content: str) -> str:
        path = os.path.join(self.tmp_dir.name, "config.yaml")
        with open(path, "w") as f:
            f.write(content)
        return path

    def test_default_config(self):
        config = get_template_config()
        self.assertEqual(config.sudoku.default_difficulty, "medium")
        self.assertEqual(config.sudoku.max_puzzles_per_request, 20)
        self.assertIsNone(config.sudoku.seed)
        self.assertEqual(config.budget.max_attempts, 3)
        self.assertEqual(config.log.level, "INFO")
        self.assertEqual(load_config(None), config)

    def test_load_yaml(self):
        path = self._write(
            "sudoku:\n"
            "  default_difficulty: Expert\n"
            "  seed: 42\n"
            "budget:\n"
            "  max_seconds: 2.5\n"
            "log:\n"
            "  level: debug\n"
        )
        config = load_config(path)
        self.assertEqual(config.sudoku.default_difficulty, "expert")
        self.assertEqual(config.sudoku.seed, 42)
        self.assertEqual(config.budget.max_seconds, 2.5)
        self.assertIsNone(config.budget.max_nodes)
        self.assertEqual(config.log.level, "DEBUG")

    def test_invalid_configs(self):
        invalid = [
            "sudoku:\n  default_difficulty: impossible\n",
            "sudoku:\n  max_puzzles_per_request: 0\n",
            "budget:\n  max_attempts: 0\n",
            "budget:\n  max_seconds: -1\n",
            "log:\n  level: verbose\n",
            "unknown_section:\n  key: 1\n",
            "budget:\n  max_nodes: many\n",
        ]
        for content in invalid:
            with self.subTest(content=content):
                with self.assertRaises(InvalidInputError):
                    load_config(self._write(content))

    def test_missing_file(self):
        with self.assertRaises(InvalidInputError):
            load_config(os.path.join(self.tmp_dir.name, "missing.yaml"))

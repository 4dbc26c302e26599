# -*- coding: utf-8 -*-
"""Command line entry point: `zksudoku generate | validate | count | witness`."""
import argparse
import json
import sys
from typing import List, Optional

from dotenv import load_dotenv

from zksudoku.common.config import Config, load_config
from zksudoku.common.exceptions import ZkSudokuError
from zksudoku.common.grid import parse_grid
from zksudoku.engine.budget import SearchBudget
from zksudoku.engine.clue_remover import generate_puzzle_with_retry, generate_puzzles
from zksudoku.engine.solution_counter import count_solutions
from zksudoku.engine.solution_generator import make_rng
from zksudoku.engine.validator import prepare_witness, verify_submission
from zksudoku.utils.log import get_logger, set_log_level

logger = get_logger(__name__)


def _emit(payload) -> None:
    json.dump(payload, sys.stdout)
    sys.stdout.write("\n")


def generate(args: argparse.Namespace, config: Config) -> int:
    difficulty = args.difficulty or config.sudoku.default_difficulty
    seed = args.seed if args.seed is not None else config.sudoku.seed
    max_seconds = args.max_seconds if args.max_seconds is not None else config.budget.max_seconds
    rng = make_rng(seed)

    if args.count == 1:
        result = generate_puzzle_with_retry(
            difficulty,
            rng,
            max_seconds=max_seconds,
            max_nodes=config.budget.max_nodes,
            max_attempts=config.budget.max_attempts,
        )
        _emit(result.to_dict())
    else:
        results = generate_puzzles(
            args.count,
            difficulty,
            rng,
            max_count=config.sudoku.max_puzzles_per_request,
            max_seconds=max_seconds,
            max_nodes=config.budget.max_nodes,
            max_attempts=config.budget.max_attempts,
        )
        _emit([result.to_dict() for result in results])
    return 0


def validate(args: argparse.Namespace, config: Config) -> int:
    puzzle = parse_grid(args.puzzle, name="puzzle")
    solution = parse_grid(args.solution, name="solution")
    result = verify_submission(puzzle, solution)
    _emit(result.to_dict())
    return 0 if result.valid else 2


def count(args: argparse.Namespace, config: Config) -> int:
    grid = parse_grid(args.grid)
    budget = SearchBudget(
        max_seconds=config.budget.max_seconds, max_nodes=config.budget.max_nodes
    )
    _emit({"solutions": count_solutions(grid, budget=budget)})
    return 0


def witness(args: argparse.Namespace, config: Config) -> int:
    puzzle = parse_grid(args.puzzle, name="puzzle")
    solution = parse_grid(args.solution, name="solution")
    _emit(prepare_witness(puzzle, solution).to_dict())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zksudoku", description="Sudoku puzzle engine")
    parser.add_argument(
        "--config", type=str, default=None, help="Path to a YAML configuration file"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Generate puzzles as JSON")
    generate_parser.add_argument(
        "--difficulty",
        type=str,
        default=None,
        help="easy, medium, hard or expert (default: from the config)",
    )
    generate_parser.add_argument(
        "--count", type=int, default=1, help="Number of puzzles to generate"
    )
    generate_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    generate_parser.add_argument(
        "--max-seconds",
        type=float,
        default=None,
        help="Wall-clock budget per generation attempt",
    )
    generate_parser.set_defaults(func=generate)

    validate_parser = subparsers.add_parser(
        "validate", help="Check a solution against a puzzle and the Sudoku rules"
    )
    validate_parser.add_argument("--puzzle", type=str, required=True)
    validate_parser.add_argument("--solution", type=str, required=True)
    validate_parser.set_defaults(func=validate)

    count_parser = subparsers.add_parser("count", help="Count solutions of a grid (capped at 2)")
    count_parser.add_argument("--grid", type=str, required=True)
    count_parser.set_defaults(func=count)

    witness_parser = subparsers.add_parser(
        "witness", help="Build the witness input for a puzzle/solution pair"
    )
    witness_parser.add_argument("--puzzle", type=str, required=True)
    witness_parser.add_argument("--solution", type=str, required=True)
    witness_parser.set_defaults(func=witness)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
        set_log_level(config.log.level)
        return args.func(args, config)
    except ZkSudokuError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

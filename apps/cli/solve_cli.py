"""Command-line front end: load a puzzle file, print it, solve it, print the result."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli --sudoku-path puzzles/classic.txt
#   python -m apps.cli.solve_cli -s puzzle.txt --json -v
#
# Exit codes: 0 solved, 1 load/config error, 2 unsolvable.

from __future__ import annotations

import argparse
import json
import logging
import sys

import yaml

from solver.config import load_config
from solver.loader import LoadingError, load_sudoku
from types_sudoku import SolveResult

log = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_LOAD_ERROR = 1
EXIT_UNSOLVABLE = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sudoku-solve", description="Sudoku solver")
    ap.add_argument("-s", "--sudoku-path", required=True, help="File with the task")
    ap.add_argument("--block-side", type=int, default=None, help="Block side (3 for the classic 9x9 grid)")
    ap.add_argument("--config", type=str, default=None, help="Optional YAML config file")
    ap.add_argument("--json", action="store_true", default=None, help="Print a JSON payload instead of text")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(
            args.config,
            block_side=args.block_side,
            json=args.json,
            log_level="DEBUG" if args.verbose else None,
        )
    except (OSError, ValueError, yaml.YAMLError) as e:
        logging.basicConfig(level=logging.INFO)
        log.error("Cannot read config: %s", e)
        return EXIT_LOAD_ERROR
    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.INFO))

    try:
        s = load_sudoku(args.sudoku_path, block_side=cfg.block_side)
    except LoadingError as e:
        log.error("Cannot load sudoku from file: %s", e)
        return EXIT_LOAD_ERROR

    if not cfg.json:
        print("Solving sudoku")
        print(s)
    result = s.solve()

    if cfg.json:
        payload = {
            "result": result.value,
            "cells": list(s.cells),
            "grid": s.rows(),
            "stats": s.stats.as_dict(),
        }
        print(json.dumps(payload, indent=2))
    elif result is SolveResult.SOLVED:
        print("Solved!")
        print(s)
    else:
        print("Cannot solve sudoku")
        for issue in s.duplicates():
            print(f"  duplicate {issue['digits']} in {issue['unit']}: {', '.join(issue['cells'])}")

    return EXIT_SOLVED if result is SolveResult.SOLVED else EXIT_UNSOLVABLE


if __name__ == "__main__":
    sys.exit(main())

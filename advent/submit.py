"""Checks the puzzles against the examples from the puzzle text."""

import argparse
from typing import List, Optional

from .args import DAYS
from .days import make_puzzle


def submit(day: int) -> List[Exception]:
    """Runs a puzzle against its example test cases."""
    puzzle = make_puzzle(day)

    results = []
    for test, *outputs in puzzle.tests:
        for solve, output in zip((puzzle.part1, puzzle.part2), outputs):
            try:
                result = solve(test)
                assert result == output, f"WA: Expected {output} got {result}"
            except Exception as e:
                results.append(e)

    return results


def main(argv: Optional[List[str]] = None):
    """Runs the examples."""
    parser = argparse.ArgumentParser(description="AoC 2022 examples")
    parser.add_argument(
        "-d", "--day", type=int, default=None, choices=DAYS, help="The day to check"
    )
    args = parser.parse_args(argv)

    days = DAYS if args.day is None else [args.day]

    results = []
    for day in days:
        results.extend(submit(day))

    if not results:
        print("OK")
    else:
        print(results)


if __name__ == "__main__":
    main()

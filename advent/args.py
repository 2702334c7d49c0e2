import logging

import argparse
from dataclasses import dataclass, field
from typing import List, Optional

DAY_CALORIE_COUNTING = 1
DAY_ROCK_PAPER_SCISSORS = 2
DAY_CAMP_CLEANUP = 4
DAY_SUPPLY_STACKS = 5

DAYS = [
    DAY_CALORIE_COUNTING,
    DAY_ROCK_PAPER_SCISSORS,
    DAY_CAMP_CLEANUP,
    DAY_SUPPLY_STACKS,
]


@dataclass
class Options:
    """Options for the script."""

    days: List[int] = field(default_factory=lambda: list(DAYS))
    input: Optional[str] = None
    example: bool = False
    progress: bool = False
    loglevel: int = logging.WARNING
    log_file: Optional[str] = None


def parse_args(argv: Optional[List[str]] = None) -> Options:
    levels = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warn": logging.WARNING,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
    }

    parser = argparse.ArgumentParser("Solve the Advent of Code 2022 puzzles")

    parser.add_argument(
        "-log",
        "--loglevel",
        default="warning",
        dest="loglevel",
        choices=list(levels.keys()),
        help="Provide logging level. Example --loglevel debug, default=warning",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        dest="log_file",
        help="Also write the log records to this file",
    )
    parser.add_argument(
        "-d",
        "--day",
        type=int,
        default=None,
        choices=DAYS,
        help="Day to solve, default=all days",
    )
    parser.add_argument(
        "-i",
        "--input",
        type=str,
        default=None,
        help="Puzzle input file, default=input/day_NN",
    )
    parser.add_argument(
        "--example",
        action="store_true",
        help="Solve the example from the puzzle text instead of the input",
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar"
    )

    args = parser.parse_args(argv)

    if args.input is not None and args.day is None:
        parser.error("--input requires --day")

    return Options(
        days=list(DAYS) if args.day is None else [args.day],
        input=args.input,
        example=args.example,
        progress=args.progress,
        loglevel=levels[args.loglevel],
        log_file=args.log_file,
    )

import logging
import os
import sys

from typing import Dict, Tuple

from .args import Options, parse_args
from .days import Puzzle, PuzzleInputError, make_puzzle

LOGGER = logging.getLogger(__name__)

dir_path = os.path.dirname(os.path.abspath(__file__))
INPUT_PATH = os.path.join(os.path.abspath(os.path.join(dir_path, os.pardir)), "input")


def input_path(day: int) -> str:
    return os.path.join(INPUT_PATH, f"day_{day:02d}")


def read_input(path: str) -> str:
    with open(path, "r", encoding="utf-8") as file:
        return file.read()


def load_test(puzzle: Puzzle, options: Options) -> str:
    if options.example:
        return puzzle.example

    path = options.input or input_path(puzzle.day)
    LOGGER.info("Reading %s", path)

    return read_input(path)


def main(options: Options) -> Dict[int, Tuple[str, str]]:
    logging.info("Options: %s", options)

    results = {}
    for day in options.days:
        puzzle = make_puzzle(day, progress=options.progress)
        test = load_test(puzzle, options)

        answers = puzzle(test)
        results[day] = answers

        if len(options.days) > 1:
            print(puzzle)
        for label, answer in zip(puzzle.labels, answers):
            print(f"{label}: {answer}")

    return results


def cli():
    args = parse_args()

    handlers = [logging.StreamHandler()]
    if args.log_file is not None:
        handlers.append(logging.FileHandler(args.log_file))
    logging.basicConfig(handlers=handlers, level=args.loglevel)

    try:
        main(args)
    except (PuzzleInputError, OSError) as e:
        LOGGER.debug("Aborting", exc_info=True)
        sys.exit(f"error: {e}")


if __name__ == "__main__":
    cli()

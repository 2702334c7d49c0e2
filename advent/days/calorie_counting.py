import logging
import re
from typing import List

from ..args import DAY_CALORIE_COUNTING
from .puzzle import Puzzle, PuzzleInputError

LOGGER = logging.getLogger(__name__)

DIGITS = re.compile(r"[0-9]+")

EXAMPLE = """1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""


def load_calories(test: str) -> List[List[int]]:
    """Splits the input into one list of calories per elf.

    Lines that are not unsigned integers are skipped.
    """
    elves = []
    for group in test.split("\n\n"):
        calories = []
        for line in group.splitlines(keepends=False):
            if not DIGITS.fullmatch(line):
                LOGGER.debug("Skipping food line %r", line)
                continue

            calories.append(int(line))
        elves.append(calories)

    return elves


def totals(test: str) -> List[int]:
    """Calorie totals per elf, largest first."""
    elves = [sum(calories) for calories in load_calories(test) if calories]
    if not elves:
        raise PuzzleInputError("There were no elves in the input")

    return sorted(elves, reverse=True)


class CalorieCounting(Puzzle):
    day = DAY_CALORIE_COUNTING
    title = "Calorie Counting"
    labels = (
        "The calories carried by the Elf that is carrying the most is",
        "The total calories carried by the top three Elves is",
    )
    example = EXAMPLE
    tests = [(EXAMPLE, "24000", "45000")]

    def part1(self, test: str) -> str:
        return str(totals(test)[0])

    def part2(self, test: str) -> str:
        return str(sum(totals(test)[:3]))

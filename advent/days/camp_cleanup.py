from dataclasses import dataclass
from typing import List, Tuple

from ..args import DAY_CAMP_CLEANUP
from .puzzle import Puzzle, PuzzleInputError

EXAMPLE = """2-4,6-8
2-3,4-5
5-7,7-9
2-8,3-7
6-6,4-6
2-6,4-8
"""


@dataclass(frozen=True)
class Assignment:
    """An inclusive range of section ids."""

    begin: int
    end: int

    def covers(self, section: int) -> bool:
        return self.begin <= section <= self.end

    def contains(self, other: "Assignment") -> bool:
        return other.begin >= self.begin and other.end <= self.end


def convert_to_assignment(text: str) -> Assignment:
    bounds = text.split("-")
    if len(bounds) != 2:
        raise PuzzleInputError(f"Not a section range: {text!r}")

    try:
        begin, end = map(int, bounds)
    except ValueError as e:
        raise PuzzleInputError(f"Not a section range: {text!r}") from e

    return Assignment(begin, end)


def load_assignments(test: str) -> List[Tuple[Assignment, Assignment]]:
    pairs = []
    for line in test.strip().splitlines(keepends=False):
        if not line.strip():
            continue

        ranges = line.split(",")
        if len(ranges) != 2:
            raise PuzzleInputError(f"Not an assignment pair: {line!r}")

        first, second = ranges
        pairs.append((convert_to_assignment(first), convert_to_assignment(second)))

    return pairs


def fully_overlaps(pair: Tuple[Assignment, Assignment]) -> bool:
    a, b = pair
    return a.contains(b) or b.contains(a)


def partially_overlaps(pair: Tuple[Assignment, Assignment]) -> bool:
    a, b = pair
    return a.covers(b.begin) or a.covers(b.end) or b.covers(a.begin) or b.covers(a.end)


class CampCleanup(Puzzle):
    day = DAY_CAMP_CLEANUP
    title = "Camp Cleanup"
    labels = (
        "The amount of assignment pairs that fully contain the other is",
        "The amount of assignment pairs that overlap at all is",
    )
    example = EXAMPLE
    tests = [(EXAMPLE, "2", "4")]

    def part1(self, test: str) -> str:
        return str(sum(1 for pair in load_assignments(test) if fully_overlaps(pair)))

    def part2(self, test: str) -> str:
        return str(sum(1 for pair in load_assignments(test) if partially_overlaps(pair)))

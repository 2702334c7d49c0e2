from typing import List, Tuple


class PuzzleInputError(ValueError):
    """Raised when the puzzle input cannot be solved. Ends the whole run."""


class Puzzle:
    """A single day: two parts solved from the same input text."""

    day: int = 0
    title: str = ""
    labels: Tuple[str, str] = ("Part 1", "Part 2")
    example: str = ""
    # (input, expected part 1, expected part 2)
    tests: List[Tuple[str, str, str]] = []

    def __init__(self, progress: bool = False):
        self.progress = progress

    def part1(self, test: str) -> str:
        raise NotImplementedError("This method must be implemented by a subclass.")

    def part2(self, test: str) -> str:
        raise NotImplementedError("This method must be implemented by a subclass.")

    def __call__(self, test: str) -> Tuple[str, str]:
        return self.part1(test), self.part2(test)

    def __str__(self) -> str:
        return f"--- Day {self.day}: {self.title} ---"

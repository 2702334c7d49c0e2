from ..args import (
    DAY_CALORIE_COUNTING,
    DAY_CAMP_CLEANUP,
    DAY_ROCK_PAPER_SCISSORS,
    DAY_SUPPLY_STACKS,
)

from .calorie_counting import CalorieCounting
from .camp_cleanup import CampCleanup
from .puzzle import Puzzle, PuzzleInputError
from .rock_paper_scissors import RockPaperScissors
from .supply_stacks import RearrangementError, SupplyStacks


def make_puzzle(day: int, **kwargs) -> Puzzle:
    if day == DAY_CALORIE_COUNTING:
        return CalorieCounting(**kwargs)

    if day == DAY_ROCK_PAPER_SCISSORS:
        return RockPaperScissors(**kwargs)

    if day == DAY_CAMP_CLEANUP:
        return CampCleanup(**kwargs)

    if day == DAY_SUPPLY_STACKS:
        return SupplyStacks(**kwargs)

    raise ValueError(f"Unknown day: {day}")


__all__ = [
    "make_puzzle",
    "Puzzle",
    "PuzzleInputError",
    "RearrangementError",
]

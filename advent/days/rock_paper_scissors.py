import enum
import logging
from typing import List, Tuple

from ..args import DAY_ROCK_PAPER_SCISSORS
from .puzzle import Puzzle, PuzzleInputError

LOGGER = logging.getLogger(__name__)

EXAMPLE = """A Y
B X
C Z
"""


class Sign(enum.Enum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    def loses_to(self) -> "Sign":
        return {
            Sign.ROCK: Sign.PAPER,
            Sign.PAPER: Sign.SCISSORS,
            Sign.SCISSORS: Sign.ROCK,
        }[self]

    def wins_from(self) -> "Sign":
        return {
            Sign.ROCK: Sign.SCISSORS,
            Sign.PAPER: Sign.ROCK,
            Sign.SCISSORS: Sign.PAPER,
        }[self]


OPPONENT = {"A": Sign.ROCK, "B": Sign.PAPER, "C": Sign.SCISSORS}
OWN = {"X": Sign.ROCK, "Y": Sign.PAPER, "Z": Sign.SCISSORS}


def load_guide(test: str) -> List[Tuple[str, str]]:
    """Reads the two columns of the strategy guide.

    Only the first character of each column counts. Lines that do not have
    exactly two columns are skipped.
    """
    guide = []
    for line in test.splitlines(keepends=False):
        columns = line.split()
        if len(columns) != 2:
            LOGGER.debug("Skipping guide line %r", line)
            continue

        opponent, own = columns
        guide.append((opponent[0], own[0]))

    return guide


def _opponent_sign(character: str) -> Sign:
    if character not in OPPONENT:
        raise PuzzleInputError(f"Got an unexpected character: '{character}'")
    return OPPONENT[character]


def translate_guide(guide: List[Tuple[str, str]]) -> List[Tuple[Sign, Sign]]:
    strategy = []
    for opponent, own in guide:
        if own not in OWN:
            raise PuzzleInputError(f"Got an unexpected character: '{own}'")
        strategy.append((_opponent_sign(opponent), OWN[own]))

    return strategy


def decrypt_guide(guide: List[Tuple[str, str]]) -> List[Tuple[Sign, Sign]]:
    strategy = []
    for opponent, outcome in guide:
        opponent_sign = _opponent_sign(opponent)

        if outcome == "X":
            own_sign = opponent_sign.wins_from()
        elif outcome == "Y":
            own_sign = opponent_sign
        elif outcome == "Z":
            own_sign = opponent_sign.loses_to()
        else:
            raise PuzzleInputError(f"Got an unexpected character: '{outcome}'")

        strategy.append((opponent_sign, own_sign))

    return strategy


def round_score(opponent_sign: Sign, own_sign: Sign) -> int:
    score = own_sign.value

    if opponent_sign == own_sign:
        score += 3

    if opponent_sign.loses_to() == own_sign:
        score += 6

    return score


def score_strategy(strategy: List[Tuple[Sign, Sign]]) -> int:
    return sum(round_score(opponent, own) for opponent, own in strategy)


class RockPaperScissors(Puzzle):
    day = DAY_ROCK_PAPER_SCISSORS
    title = "Rock Paper Scissors"
    labels = (
        "The total score according to the strategy guide is",
        "The total score using the new instructions according to the strategy guide is",
    )
    example = EXAMPLE
    tests = [(EXAMPLE, "15", "12")]

    def part1(self, test: str) -> str:
        return str(score_strategy(translate_guide(load_guide(test))))

    def part2(self, test: str) -> str:
        return str(score_strategy(decrypt_guide(load_guide(test))))

import pytest

from advent.days import PuzzleInputError
from advent.days.rock_paper_scissors import (
    EXAMPLE,
    RockPaperScissors,
    Sign,
    decrypt_guide,
    load_guide,
    round_score,
    score_strategy,
    translate_guide,
)


def test_load_guide():
    assert load_guide("A Y\nB X\nC Z") == [("A", "Y"), ("B", "X"), ("C", "Z")]


def test_load_guide_skips_bad_lines():
    assert load_guide("A Y\n\nB\nC Z Z\nCc Zz") == [("A", "Y"), ("C", "Z")]


def test_translate_guide():
    assert translate_guide([("A", "Y"), ("B", "X"), ("C", "Z")]) == [
        (Sign.ROCK, Sign.PAPER),
        (Sign.PAPER, Sign.ROCK),
        (Sign.SCISSORS, Sign.SCISSORS),
    ]


def test_decrypt_guide():
    # X means lose, Y means draw, Z means win
    assert decrypt_guide([("A", "Y"), ("B", "X"), ("C", "Z")]) == [
        (Sign.ROCK, Sign.ROCK),
        (Sign.PAPER, Sign.ROCK),
        (Sign.SCISSORS, Sign.ROCK),
    ]


@pytest.mark.parametrize(
    "guide", [[("D", "Y")], [("A", "W")]]
)
def test_unexpected_characters(guide):
    with pytest.raises(PuzzleInputError, match="unexpected character"):
        translate_guide(guide)

    with pytest.raises(PuzzleInputError, match="unexpected character"):
        decrypt_guide(guide)


def test_round_score():
    assert round_score(Sign.ROCK, Sign.PAPER) == 8
    assert round_score(Sign.PAPER, Sign.ROCK) == 1
    assert round_score(Sign.SCISSORS, Sign.SCISSORS) == 6


def test_score_strategy():
    strategy = [
        (Sign.ROCK, Sign.PAPER),
        (Sign.PAPER, Sign.ROCK),
        (Sign.SCISSORS, Sign.SCISSORS),
    ]

    assert score_strategy(strategy) == 15


def test_example():
    assert RockPaperScissors()(EXAMPLE) == ("15", "12")

import pytest

from advent.days import PuzzleInputError
from advent.days.calorie_counting import EXAMPLE, CalorieCounting, load_calories, totals


def test_load_calories():
    test = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000"

    assert load_calories(test) == [
        [1000, 2000, 3000],
        [4000],
        [5000, 6000],
        [7000, 8000, 9000],
        [10000],
    ]


def test_load_calories_skips_bad_lines():
    assert load_calories("100\nlots\n200\n\n300") == [[100, 200], [300]]


def test_totals_are_sorted():
    assert totals(EXAMPLE) == [24000, 11000, 10000, 6000, 4000]


def test_no_elves():
    with pytest.raises(PuzzleInputError):
        totals("")


def test_fewer_than_three_elves():
    assert CalorieCounting().part2("1\n\n2") == "3"


def test_example():
    assert CalorieCounting()(EXAMPLE) == ("24000", "45000")


@pytest.mark.parametrize("line", ["-5", " 12 ", "1_000", "+7", "12.5"])
def test_load_calories_skips_signed_and_formatted_numbers(line):
    assert load_calories(f"100\n{line}\n200") == [[100, 200]]

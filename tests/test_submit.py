import pytest

from advent import submit
from advent.days.supply_stacks import SupplyStacks


@pytest.mark.parametrize("day", [1, 2, 4, 5])
def test_examples_pass(day):
    assert submit.submit(day) == []


def test_wrong_answer_is_reported(monkeypatch):
    monkeypatch.setattr(SupplyStacks, "tests", [(SupplyStacks.example, "CMZ", "CMZ")])

    results = submit.submit(5)

    assert len(results) == 1
    assert str(results[0]) == "WA: Expected CMZ got MCD"


def test_errors_are_reported(monkeypatch):
    monkeypatch.setattr(SupplyStacks, "tests", [("no separator", "", "")])

    results = submit.submit(5)

    assert len(results) == 2
    assert all("no instructions" in str(result) for result in results)


def test_main(capsys):
    submit.main(["-d", "5"])

    assert capsys.readouterr().out == "OK\n"


def test_unknown_day():
    with pytest.raises(ValueError):
        submit.submit(3)

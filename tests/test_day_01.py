import pytest

from advent25.days.day_01 import (
    DayOne,
    Direction,
    Move,
    ParseDirectionError,
    ParseMoveError,
    SafeCracker,
)
from advent25.models import Part


def test_pt1():
    cracker = SafeCracker.from_raw_inputs(50, ["R50", "L50", "R100", "L1"], 100)
    assert cracker.count_zeros() == 1


def test_pt2():
    cracker = SafeCracker.from_raw_inputs(50, ["R50", "L50", "L500", "L1"], 100)
    assert cracker.count_zero_incl_passes() == 6


def test_run_positions():
    cracker = SafeCracker.from_raw_inputs(50, ["R50", "L50", "R100", "L1"], 100)
    assert cracker.run() == [50, 0, 50, 50, 49]


def test_run_with_passes_matches_run_positions():
    cracker = SafeCracker.from_raw_inputs(50, ["R50", "L50", "L500", "L1", "R250"], 100)
    _, positions = cracker.run_with_passes()
    assert positions == cracker.run()


def test_no_moves():
    cracker = SafeCracker.from_raw_inputs(50, [], 100)
    assert cracker.run() == [50]
    assert cracker.run_with_passes() == (0, [50])


@pytest.mark.parametrize(
    "text, expected",
    [("L", Direction.LEFT), (" left ", Direction.LEFT), ("R", Direction.RIGHT), ("Right", Direction.RIGHT)],
)
def test_direction_parse(text, expected):
    assert Direction.parse(text) is expected


def test_direction_parse_invalid():
    with pytest.raises(ParseDirectionError):
        Direction.parse("x")


def test_move_parse():
    assert Move.parse("R7") == Move(Direction.RIGHT, 7)
    assert Move.parse("l5") == Move(Direction.LEFT, 5)


@pytest.mark.parametrize("text", ["", "X5", "R", "Rx", "L9999999999"])
def test_move_parse_invalid(text):
    with pytest.raises(ParseMoveError):
        Move.parse(text)


def test_from_raw_inputs_rejects_bad_move():
    with pytest.raises(ParseMoveError):
        SafeCracker.from_raw_inputs(50, ["R5", "Q3"], 100)


def test_day_one_parts(tmp_path):
    path = tmp_path / "part1.txt"
    path.write_text("R50\nL50\nR100\nL1\n")
    assert DayOne(str(path)).part_1() == 1
    path2 = tmp_path / "part2.txt"
    path2.write_text("R50\nL50\nL500\nL1\n")
    assert DayOne(str(path2)).run(Part.PART2) == 6
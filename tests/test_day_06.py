import pytest

from advent25.days.day_06 import (
    DaySix,
    MathColumn,
    ParseMathColumnError,
    do_math_homework,
    do_math_homework_pt2,
)

PART1_INPUT = """123 328  51 64
 45 64  387 23
  6 98  215 314
*   +   *   +  """

PART2_INPUT = "\n".join(
    [
        "123 328  51 64 ",
        " 45 64  387 23 ",
        "  6 98  215 314",
        "*   +   *   +  ",
    ]
)


def test_do_homework_part1():
    assert do_math_homework(PART1_INPUT) == 4277556


def test_do_homework_part2():
    assert do_math_homework_pt2(PART2_INPUT) == 3263827


@pytest.mark.parametrize(
    ("tokens", "expected"),
    [
        (["1", "2", "3", "+"], 6),
        (["10", "3", "-"], 7),
        (["4", "5", "*"], 20),
        (["-7", "2", "/"], -3),
        (["7", "2", "/"], 3),
    ],
)
def test_math_column_calculate(tokens, expected):
    assert MathColumn.from_tokens(tokens).calculate() == expected


@pytest.mark.parametrize(
    "tokens",
    [[], ["1", "+"], ["1", "2", "%"], ["a", "2", "+"], ["1", "2", ""]],
)
def test_math_column_rejects_bad_tokens(tokens):
    with pytest.raises(ParseMathColumnError):
        MathColumn.from_tokens(tokens)


def test_day_six_parts(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(PART2_INPUT + "\n")
    day = DaySix(str(path))
    assert day.part_1() == 4277556
    assert day.part_2() == 3263827
import pytest

from advent25.days.day_03 import DayThree, ParseBankError, maximise_joltage_n_times

EXAMPLE = ["987654321111111", "811111111111119", "234234234278", "818181911112111"]


@pytest.mark.parametrize(
    ("bank", "expected"),
    [
        ("811111111111119", 89),
        ("11", 11),
        ("9111111118", 98),
        ("123456789", 89),
        ("1234567899", 99),
    ],
)
def test_maximise_joltage(bank, expected):
    assert maximise_joltage_n_times(bank, 2) == expected


@pytest.mark.parametrize(
    ("bank", "expected"),
    [
        ("987654321111111", 987654321111),
        ("811111111111119", 811111111119),
        ("234234234234278", 434234234278),
        ("818181911112111", 888911112111),
    ],
)
def test_maximise_joltage_n_times(bank, expected):
    assert maximise_joltage_n_times(bank, 12) == expected


@pytest.mark.parametrize(("bank", "n"), [("abc", 1), ("1", 2), ("123", 0), ("", 1)])
def test_invalid_banks_raise(bank, n):
    with pytest.raises(ParseBankError):
        maximise_joltage_n_times(bank, n)


def test_day_three_parts(tmp_path):
    path = tmp_path / "input.txt"
    banks = ["987654321111111", "811111111111119", "234234234234278", "818181911112111"]
    path.write_text("\n".join(banks) + "\n")
    day = DayThree(str(path))
    assert day.part_1() == 357
    assert day.part_2() == 3121910778619
import pytest

from advent25.grid import Grid, ParseGridError


def test_from_chars_reads_rows():
    grid = Grid.from_chars("ab\ncd\n")
    assert grid.width == 2
    assert grid.values == [["a", "b"], ["c", "d"]]
    assert grid.get(1, 0) == "b"
    assert grid.get(0, 1) == "c"


def test_from_chars_empty_raises():
    with pytest.raises(ParseGridError):
        Grid.from_chars("   \n ")


def test_from_words_reads_rows():
    grid = Grid.from_words("123 328  51\n 45 64  387\n*   +   *")
    assert grid.width == 3
    assert grid.values[1] == ["45", "64", "387"]
    assert grid.values[2] == ["*", "+", "*"]


def test_from_words_empty_raises():
    with pytest.raises(ParseGridError):
        Grid.from_words("")


def test_neighbours_of_centre():
    grid = Grid.from_chars("abc\ndef\nghi")
    assert sorted(grid.neighbours(1, 1)) == list("abcdfghi")


def test_neighbours_of_corner():
    grid = Grid.from_chars("abc\ndef\nghi")
    assert sorted(grid.neighbours(0, 0)) == ["b", "d", "e"]
    assert sorted(grid.neighbours(2, 2)) == ["e", "f", "h"]


def test_iter_yields_rows():
    grid = Grid.from_chars("ab\ncd")
    assert list(grid) == [["a", "b"], ["c", "d"]]


def test_transpose_rectangular():
    grid = Grid.from_words("1 2 3\n4 5 6")
    transposed = grid.transpose("")
    assert transposed.values == [["1", "4"], ["2", "5"], ["3", "6"]]
    assert transposed.width == 2


def test_transpose_twice_is_identity():
    grid = Grid.from_chars("abc\ndef")
    assert grid.transpose(" ").transpose(" ") == grid


def test_transpose_pads_short_rows():
    grid = Grid(2, [["a", "b"], ["c"]])
    assert grid.transpose("-").values == [["a", "c"], ["b", "-"]]


def test_transpose_empty_returns_copy():
    grid = Grid(0, [])
    assert grid.transpose("x") == Grid(0, [])


def test_str_format():
    grid = Grid.from_chars("ab\ncd")
    assert str(grid) == "Grid (Width: 2)\n[a b]\n[c d]\n"


def test_parse_grid_error_is_value_error():
    with pytest.raises(ValueError):
        Grid.from_words("")
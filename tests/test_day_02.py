import pytest

from advent25.days.day_02 import (
    DayTwo,
    ParseProductError,
    ProductRange,
    all_match,
    get_products,
    into_matching_snippets,
)
from advent25.models import Part


def test_get_repeating_twice():
    assert len(ProductRange(11, 22).get_repeating_twice()) == 2
    assert len(ProductRange(222220, 222224).get_repeating_twice()) == 1


def test_get_repeating():
    assert len(ProductRange(11, 22).get_repeating()) == 2
    assert len(ProductRange(998, 1012).get_repeating()) == 2


def test_get_repeating_twice_values():
    assert ProductRange(11, 22).get_repeating_twice() == [11, 22]


def test_repeating_twice_is_subset_of_repeating():
    product = ProductRange(1, 1200)
    assert set(product.get_repeating_twice()) <= set(product.get_repeating())


def test_parse_range():
    assert ProductRange.parse(" 11-22 ") == ProductRange(11, 22)


@pytest.mark.parametrize("text", ["1-2-3", "15", "a-5", "5-b", "-5-6", ""])
def test_parse_range_invalid(text):
    with pytest.raises(ParseProductError):
        ProductRange.parse(text)


def test_into_matching_snippets():
    assert into_matching_snippets(1212, 2) == ["12", "12"]
    assert into_matching_snippets(1213, 2) is None
    assert into_matching_snippets(1212, 4) is None
    assert into_matching_snippets(12121, 2) is None


def test_all_match():
    assert all_match(["a", "a", "a"]) is True
    assert all_match(["a", "b"]) is False
    assert all_match(["a"]) is False
    assert all_match([]) is False


def test_get_products(tmp_path):
    path = tmp_path / "part1.txt"
    path.write_text("11-22,95-115\n")
    assert get_products(path) == [ProductRange(11, 22), ProductRange(95, 115)]


def test_get_products_empty_file(tmp_path):
    path = tmp_path / "part1.txt"
    path.write_text("\n")
    with pytest.raises(ParseProductError):
        get_products(path)


def test_day_two_parts(tmp_path):
    path = tmp_path / "part1.txt"
    path.write_text("11-22\n")
    assert DayTwo(str(path)).part_1() == 33
    duplicated = tmp_path / "dup.txt"
    duplicated.write_text("11-22,11-22\n")
    assert DayTwo(str(duplicated)).run(Part.PART2) == 33
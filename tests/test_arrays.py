import pytest

from dsabasics.arrays import (
    array_max,
    array_sum,
    count_even,
    count_odd,
    count_pairs_with_sum,
    format_values,
    reverse_in_place,
)

SAMPLE = [1, 2, 4, 3, 4, 3, 5, 3, 5, 2]


def test_format_values_default_separator():
    assert format_values([1, 2, 3]) == "1 2 3"


def test_format_values_custom_separator_and_strings():
    names = ["Sagar", "Anand", "Akshay"]
    assert format_values(names, ", ") == "Sagar, Anand, Akshay"


def test_format_values_round_trip():
    text = format_values(SAMPLE)
    assert [int(part) for part in text.split(" ")] == SAMPLE


def test_format_values_empty():
    assert format_values([]) == ""


def test_array_sum_matches_parts():
    assert array_sum(SAMPLE) == array_sum(SAMPLE[:5]) + array_sum(SAMPLE[5:])


def test_array_sum_empty_is_zero():
    assert array_sum([]) == 0


def test_array_max_is_element_and_upper_bound():
    result = array_max(SAMPLE)
    assert result in SAMPLE
    assert all(value <= result for value in SAMPLE)


def test_array_max_single():
    assert array_max([-7]) == -7


def test_array_max_empty_raises():
    with pytest.raises(ValueError):
        array_max([])


def test_even_and_odd_partition_the_values():
    assert count_even(SAMPLE) + count_odd(SAMPLE) == len(SAMPLE)


def test_count_even_all_even():
    assert count_even([2, 4, 6, 0]) == 4
    assert count_odd([2, 4, 6, 0]) == 0


def test_negative_odd_numbers_are_odd():
    assert count_odd([-3, -1, -2]) == 2


def test_count_pairs_does_not_overlap():
    # (3, 4) straddles two pairs and must not be counted.
    assert count_pairs_with_sum([1, 3, 4, 1], 7) == 0


def test_count_pairs_ignores_trailing_value():
    assert count_pairs_with_sum([1, 1, 2], 2) == 1


def test_reverse_in_place():
    values = [1, 2, 3, 4, 5]
    original = values
    assert reverse_in_place(values) is None
    assert values is original
    assert values == [5, 4, 3, 2, 1]


def test_reverse_twice_restores():
    values = list(SAMPLE)
    reverse_in_place(values)
    reverse_in_place(values)
    assert values == SAMPLE
import pytest

from algopractice.arrays import (
    contains_duplicate,
    contains_nearby_duplicate,
    find_disappeared_numbers,
    longest_consecutive,
    max_area,
    max_sub_array,
    merge_intervals,
    move_zeroes,
    rotate,
    three_sum,
    two_sum,
)


def test_two_sum_source_case():
    assert two_sum([-1, -2, -3, -4, -5], -8) == [4, 2]


def test_two_sum_same_value_twice():
    assert two_sum([3, 3], 6) == [1, 0]


def test_two_sum_no_pair():
    assert two_sum([1, 2], 10) is None


def test_two_sum_does_not_reuse_element():
    assert two_sum([3, 1], 6) is None


def test_max_area_example():
    assert max_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


def test_max_area_edge_cases():
    assert max_area([]) == 0
    assert max_area([5]) == 5


def test_three_sum_source_case():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


def test_three_sum_short_or_one_signed():
    assert three_sum([0, 0]) == []
    assert three_sum([1, 2, 3]) == []
    assert three_sum([-1, -2, -3]) == []


def test_three_sum_does_not_mutate_input():
    nums = [3, -3, 0]
    assert three_sum(nums) == [[-3, 0, 3]]
    assert nums == [3, -3, 0]


def test_longest_consecutive_source_case():
    assert longest_consecutive([0, 3, 7, 2, 5, 8, 4, 6, 0, 1]) == 9


def test_longest_consecutive_other_cases():
    assert longest_consecutive([]) == 0
    assert longest_consecutive([100, 4, 200, 1, 3, 2]) == 4
    assert longest_consecutive([-3, -2, 5]) == 2


def test_rotate():
    nums = [1, 2, 3, 4, 5, 6, 7]
    rotate(nums, 3)
    assert nums == [5, 6, 7, 1, 2, 3, 4]


def test_rotate_by_length_or_zero_keeps_order():
    nums = [1, 2, 3]
    rotate(nums, 3)
    assert nums == [1, 2, 3]
    rotate(nums, 0)
    assert nums == [1, 2, 3]


def test_rotate_larger_than_length():
    nums = [1, 2, 3]
    rotate(nums, 4)
    assert nums == [3, 1, 2]


def test_rotate_empty_raises():
    with pytest.raises(ValueError):
        rotate([], 1)


def test_contains_duplicate_source_case():
    assert contains_duplicate([1, 2, 3, 1]) is True


def test_contains_duplicate_false():
    assert contains_duplicate([1, 2, 3]) is False


def test_contains_nearby_duplicate_source_case():
    assert contains_nearby_duplicate([1, 1], 2) is True


def test_contains_nearby_duplicate_too_far():
    assert contains_nearby_duplicate([1, 2, 3, 1], 2) is False


def test_contains_nearby_duplicate_measures_from_first_occurrence():
    assert contains_nearby_duplicate([1, 2, 3, 1, 4, 1], 2) is False


def test_move_zeroes():
    nums = [0, 1, 0, 3, 12]
    move_zeroes(nums)
    assert nums == [1, 3, 12, 0, 0]


def test_move_zeroes_without_zeroes():
    nums = [4, 5]
    move_zeroes(nums)
    assert nums == [4, 5]


def test_find_disappeared_numbers():
    assert find_disappeared_numbers([4, 3, 2, 7, 8, 2, 3, 1]) == [5, 6]


def test_find_disappeared_numbers_out_of_range():
    with pytest.raises(ValueError):
        find_disappeared_numbers([1, 5])


def test_max_sub_array_source_case():
    assert max_sub_array([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_sub_array_edge_cases():
    assert max_sub_array([]) == 0
    assert max_sub_array([-3]) == -3
    assert max_sub_array([-3, -1, -2]) == -1


def test_merge_intervals_source_case():
    assert merge_intervals([[1, 4], [0, 4]]) == [[0, 4]]


def test_merge_intervals_disjoint_and_touching():
    assert merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]]) == [
        [1, 6],
        [8, 10],
        [15, 18],
    ]
    assert merge_intervals([[1, 4], [4, 5]]) == [[1, 5]]


def test_merge_intervals_empty():
    assert merge_intervals([]) == []
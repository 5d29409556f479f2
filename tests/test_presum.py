import math

import pytest

from algopractice.presum import NumArray, product_except_self, subarray_sum


def test_product_except_self_example():
    assert product_except_self([1, 2, 3, 4]) == [24, 12, 8, 6]


def test_product_except_self_invariant():
    nums = [2, -3, 5, 7, 11]
    total = math.prod(nums)
    result = product_except_self(nums)
    assert len(result) == len(nums)
    assert all(part * value == total for part, value in zip(result, nums))


def test_product_except_self_single_and_empty():
    assert product_except_self([]) == []
    assert product_except_self([9]) == [1]


def test_num_array_example():
    array = NumArray([-2, 0, 3, -5, 2, -1])
    assert array.sum_range(0, 2) == 1


def test_num_array_single_elements():
    nums = [4, -1, 7, 3]
    array = NumArray(nums)
    assert [array.sum_range(i, i) for i in range(len(nums))] == nums


def test_num_array_whole_and_additive():
    nums = [5, 1, -4, 9, 2, 6]
    array = NumArray(nums)
    assert array.sum_range(0, len(nums) - 1) == sum(nums)
    for mid in range(1, len(nums) - 1):
        assert array.sum_range(1, mid) + array.sum_range(mid + 1, 5) == array.sum_range(1, 5)


def test_num_array_out_of_range():
    array = NumArray([1, 2, 3])
    with pytest.raises(IndexError):
        array.sum_range(0, 3)
    with pytest.raises(IndexError):
        array.sum_range(-1, 1)


def test_subarray_sum_example():
    assert subarray_sum([1, 1, 1], 2) == 2


def test_subarray_sum_empty():
    assert subarray_sum([], 5) == 0


def test_subarray_sum_whole_list_counts_once_for_positive_values():
    nums = [3, 4, 7]
    assert subarray_sum(nums, sum(nums)) == 1


def test_subarray_sum_single_element_targets():
    nums = [2, 5, 11]
    for value in nums:
        assert subarray_sum(nums, value) == 1
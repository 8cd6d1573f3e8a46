import math
import random

import pytest

from algopractice.subarrays import (
    max_product,
    max_subarray,
    max_subarray_sum_circular,
    max_subarray_sum_circular_minmax,
)


def _random_lists(seed, count=300):
    rng = random.Random(seed)
    return [
        [rng.randint(-10, 10) for _ in range(rng.randint(1, 9))]
        for _ in range(count)
    ]


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([5, -3, 5], 10),
        ([-2, 4, -5, 4, -5, 9, 4], 15),
        ([3, 5, -3, 4, -2, 5], 15),
    ],
)
def test_circular_examples(nums, expected):
    assert max_subarray_sum_circular(nums) == expected
    assert max_subarray_sum_circular_minmax(nums) == expected


def test_circular_variants_agree():
    for nums in _random_lists(15):
        assert max_subarray_sum_circular(nums) == max_subarray_sum_circular_minmax(nums)


def test_circular_is_at_least_linear():
    for nums in _random_lists(16):
        assert max_subarray_sum_circular(nums) >= max_subarray(nums)


def test_circular_all_negative_picks_largest():
    nums = [-3, -2, -1, -5]
    assert max_subarray_sum_circular(nums) == max(nums)
    assert max_subarray_sum_circular_minmax(nums) == max(nums)


def test_max_subarray_example():
    assert max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_bounds():
    for nums in _random_lists(53):
        best = max_subarray(nums)
        assert best >= max(nums)
        assert best >= sum(nums)


def test_max_subarray_of_non_negative_values_is_total():
    nums = [0, 3, 1, 0, 7, 2]
    assert max_subarray(nums) == sum(nums)


def test_max_product_examples():
    assert max_product([2, 3, -2, 4]) == 6
    assert max_product([-2, 0, -1]) == 0


def test_max_product_of_positive_values_is_full_product():
    nums = [2, 1, 3, 5, 4]
    assert max_product(nums) == math.prod(nums)


def test_max_product_even_negatives_use_everything():
    nums = [-2, 3, -4]
    assert max_product(nums) == math.prod(nums)


def test_max_product_is_at_least_largest_value():
    for nums in _random_lists(152):
        assert max_product(nums) >= max(nums)


def test_single_value():
    assert max_subarray([-7]) == -7
    assert max_product([-7]) == -7
    assert max_subarray_sum_circular([-7]) == -7
    assert max_subarray_sum_circular_minmax([-7]) == -7


def test_empty_input_is_rejected():
    with pytest.raises(ValueError):
        max_subarray([])
    with pytest.raises(ValueError):
        max_product([])
    with pytest.raises(ValueError):
        max_subarray_sum_circular([])
    with pytest.raises(ValueError):
        max_subarray_sum_circular_minmax([])
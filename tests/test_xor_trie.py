from itertools import combinations

import pytest

from algopractice.xor_trie import find_maximum_xor, max_xor_of_two, to_binary

SAMPLES = [
    [3, 10, 5, 25, 2, 8],
    [1, 2],
    [0, 0, 0],
    [14, 70, 53, 83, 49, 91, 36, 80, 92, 51, 66, 70],
    [7, 7, 8, 1 << 20, 12345, 99999],
]


def test_to_binary_fixed_width():
    assert to_binary(5, 4) == "0101"


@pytest.mark.parametrize("value", [0, 1, 5, 255, 123456789, (1 << 40) + 3])
def test_to_binary_round_trip(value):
    text = to_binary(value)
    assert len(text) == 64
    assert int(text, 2) == value


def test_to_binary_negative_is_twos_complement():
    assert to_binary(-1, 8) == to_binary(255, 8)


@pytest.mark.parametrize("bits", [-1, 65])
def test_to_binary_rejects_bad_width(bits):
    with pytest.raises(ValueError):
        to_binary(3, bits)


@pytest.mark.parametrize("values", [[], [42]])
def test_max_xor_of_two_needs_two_values(values):
    assert max_xor_of_two(values) == -1


@pytest.mark.parametrize("values", SAMPLES)
def test_max_xor_of_two_matches_best_pair(values):
    assert max_xor_of_two(values) == max(a ^ b for a, b in combinations(values, 2))


def test_find_maximum_xor_example():
    assert find_maximum_xor([3, 10, 5, 25, 2, 8]) == 28


@pytest.mark.parametrize("values", SAMPLES)
def test_find_maximum_xor_matches_best_pair(values):
    assert find_maximum_xor(values) == max(a ^ b for a, b in combinations(values, 2))


@pytest.mark.parametrize("values", SAMPLES)
def test_both_methods_agree(values):
    assert find_maximum_xor(values) == max_xor_of_two(values)


def test_find_maximum_xor_single_value():
    assert find_maximum_xor([7]) == find_maximum_xor([])
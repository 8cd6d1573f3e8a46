import copy

import pytest

from algopractice.grids import (
    check_straight_line,
    check_straight_line_reduced,
    find_judge,
    find_judge_xor,
    flood_fill,
)


def _everyone_trusts(n, judge):
    return [[person, judge] for person in range(1, n + 1) if person != judge]


def _trust_with_judge(n, judge):
    trust = _everyone_trusts(n, judge)
    others = [person for person in range(1, n + 1) if person != judge]
    if len(others) >= 2:
        trust.append([others[0], others[1]])
    return trust


@pytest.mark.parametrize("n,judge", [(2, 2), (3, 1), (5, 4), (6, 6)])
def test_judge_found(n, judge):
    trust = _trust_with_judge(n, judge)
    assert find_judge(n, trust) == judge
    assert find_judge_xor(n, trust) == judge


def test_judge_who_trusts_is_rejected():
    n, judge = 4, 3
    trust = _everyone_trusts(n, judge) + [[judge, 1]]
    assert find_judge(n, trust) == -1
    assert find_judge_xor(n, trust) == -1


def test_no_trust_among_many():
    assert find_judge(3, []) == -1
    assert find_judge_xor(3, []) == -1


def test_single_person_is_judge():
    assert find_judge(1, []) == 1
    assert find_judge_xor(1, []) == 1


def test_mutual_trust_has_no_judge():
    assert find_judge(2, [[1, 2], [2, 1]]) == -1
    assert find_judge_xor(2, [[1, 2], [2, 1]]) == -1


def _sample_image():
    return [[1, 1, 1], [1, 1, 0], [1, 0, 1]]


def test_flood_fill_returns_same_object_and_recolours_start():
    image = _sample_image()
    result = flood_fill(image, 1, 1, 7)
    assert result is image
    assert result[1][1] == 7


def test_flood_fill_leaves_disconnected_cells():
    image = _sample_image()
    flood_fill(image, 1, 1, 7)
    assert image[2][2] == _sample_image()[2][2]
    assert image[1][2] == _sample_image()[1][2]
    assert image[2][1] == _sample_image()[2][1]


def test_flood_fill_recolours_whole_region():
    image = _sample_image()
    flood_fill(image, 0, 0, 7)
    original = _sample_image()
    for row in range(3):
        for col in range(3):
            if (row, col) in {(1, 2), (2, 1), (2, 2)}:
                assert image[row][col] == original[row][col]
            else:
                assert image[row][col] == 7


def test_flood_fill_round_trip():
    image = _sample_image()
    flood_fill(image, 0, 0, 7)
    flood_fill(image, 0, 0, 1)
    assert image == _sample_image()


def test_flood_fill_same_colour_is_noop():
    image = _sample_image()
    before = copy.deepcopy(image)
    assert flood_fill(image, 2, 2, image[2][2]) == before


def test_flood_fill_large_region_no_recursion_limit():
    image = [[0] * 200 for _ in range(200)]
    flood_fill(image, 0, 0, 3)
    assert all(cell == 3 for row in image for cell in row)


@pytest.mark.parametrize("start,step", [((1, 2), (1, 1)), ((0, 0), (2, -3)), ((5, 1), (0, 4)), ((2, 2), (3, 0))])
def test_points_on_line(start, step):
    points = [[start[0] + t * step[0], start[1] + t * step[1]] for t in range(-2, 5)]
    assert check_straight_line(points) is True
    assert check_straight_line_reduced(points) is True


@pytest.mark.parametrize("start,step", [((1, 2), (1, 1)), ((0, 0), (2, -3)), ((5, 1), (0, 4))])
def test_point_off_line(start, step):
    points = [[start[0] + t * step[0], start[1] + t * step[1]] for t in range(4)]
    points.append([start[0] + step[0] + 1, start[1] + step[1]])
    assert check_straight_line(points) is False
    assert check_straight_line_reduced(points) is False


def test_two_points_always_line():
    assert check_straight_line([[3, 9], [-4, 1]]) is True
    assert check_straight_line_reduced([[3, 9], [-4, 1]]) is True


def test_too_few_points():
    with pytest.raises(ValueError):
        check_straight_line([[0, 0]])
    with pytest.raises(ValueError):
        check_straight_line_reduced([[0, 0]])
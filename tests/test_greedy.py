import pytest

from algos.greedy import (
    can_place_flowers,
    candy,
    erase_overlap_intervals,
    find_content_children,
    find_min_arrow_shots,
)


@pytest.mark.parametrize(
    "ratings, expected",
    [([], 0), ([5], 1), ([1, 0, 2], 5), ([1, 2, 2], 4), ([1, 2, 3], 6)],
)
def test_candy(ratings, expected):
    assert candy(ratings) == expected


@pytest.mark.parametrize(
    "intervals, expected",
    [
        ([[1, 2], [2, 5], [2, 3]], 1),
        ([[1, 100], [11, 22], [1, 1], [2, 12]], 2),
        ([], 0),
        ([[1, 2], [2, 3]], 0),
    ],
)
def test_erase_overlap_intervals(intervals, expected):
    assert erase_overlap_intervals(intervals) == expected


def test_erase_overlap_intervals_leaves_input_order():
    intervals = [[1, 100], [11, 22], [1, 1], [2, 12]]
    erase_overlap_intervals(intervals)
    assert intervals == [[1, 100], [11, 22], [1, 1], [2, 12]]


@pytest.mark.parametrize(
    "points, expected",
    [
        ([[10, 16], [2, 8], [1, 6], [7, 12]], 2),
        ([[1, 2], [3, 4], [5, 6], [7, 8]], 4),
        ([[1, 2], [2, 3], [3, 4], [4, 5]], 2),
        ([], 0),
        ([[1, 5]], 1),
    ],
)
def test_find_min_arrow_shots(points, expected):
    assert find_min_arrow_shots(points) == expected


@pytest.mark.parametrize(
    "g, s, expected",
    [([1, 2, 3], [1, 1], 1), ([1, 2], [1, 2, 3], 2), ([3, 1], [], 0), ([], [1], 0)],
)
def test_find_content_children(g, s, expected):
    assert find_content_children(g, s) == expected


@pytest.mark.parametrize(
    "flowerbed, n, expected",
    [
        ([1, 0, 0, 0, 1], 1, True),
        ([1, 0, 0, 0, 1], 2, False),
        ([1, 0, 0, 0, 1, 0, 0], 2, True),
        ([0], 1, True),
        ([1, 0, 1], 0, True),
    ],
)
def test_can_place_flowers(flowerbed, n, expected):
    assert can_place_flowers(flowerbed, n) is expected


def test_can_place_flowers_does_not_modify_bed():
    bed = [1, 0, 0, 0, 1]
    assert can_place_flowers(bed, 1) is True
    assert bed == [1, 0, 0, 0, 1]
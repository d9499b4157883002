from math import factorial

import pytest

from algos.arrays import (
    count_negatives,
    merge_sorted,
    move_zeroes,
    permute,
    plus_one,
    remove_duplicates,
    remove_element,
    search_insert,
    two_sum,
    two_sum_sorted,
)


@pytest.mark.parametrize(
    "grid, want",
    [
        ([[4, 3, 2, -1], [3, 2, 1, -1], [1, 1, -1, -2], [-1, -1, -2, -3]], 8),
        ([[3, 2], [1, 0]], 0),
        ([[-1]], 1),
    ],
)
def test_count_negatives(grid, want):
    assert count_negatives(grid) == want


def test_count_negatives_empty_grid():
    assert count_negatives([]) == 0


def test_two_sum():
    assert two_sum([2, 7, 11, 15], 9) == [0, 1]


def test_two_sum_missing():
    with pytest.raises(ValueError):
        two_sum([1, 2], 10)


def test_two_sum_sorted():
    assert two_sum_sorted([2, 7, 11, 15], 9) == [1, 2]


def test_two_sum_sorted_missing():
    with pytest.raises(ValueError):
        two_sum_sorted([1, 2, 3], 100)


@pytest.mark.parametrize(
    "nums, want",
    [
        ([1, 1, 2], 2),
        ([0, 0, 1, 1, 1, 2, 2, 3, 3, 4], 5),
    ],
)
def test_remove_duplicates(nums, want):
    original = list(nums)
    count = remove_duplicates(nums)
    assert count == want
    assert nums[:count] == sorted(set(original))


def test_remove_duplicates_empty():
    assert remove_duplicates([]) == 0


@pytest.mark.parametrize(
    "nums, val, want",
    [
        ([3, 2, 2, 3], 3, 2),
        ([0, 1, 2, 2, 3, 0, 4, 2], 2, 5),
        ([1], 1, 0),
        ([4, 5], 5, 1),
        ([3, 3], 3, 0),
    ],
)
def test_remove_element(nums, val, want):
    original = list(nums)
    count = remove_element(nums, val)
    assert count == want
    assert nums[:count] == [v for v in original if v != val]


def test_move_zeroes():
    nums = [0, 1, 0, 3, 12]
    move_zeroes(nums)
    assert nums == [1, 3, 12, 0, 0]


@pytest.mark.parametrize(
    "nums, target, want",
    [
        ([1, 3, 5, 6], 5, 2),
        ([1, 3, 5, 6], 2, 1),
        ([1, 3, 5, 6], 7, 4),
        ([1], 2, 1),
        ([1], 0, 0),
    ],
)
def test_search_insert(nums, target, want):
    assert search_insert(nums, target) == want


@pytest.mark.parametrize(
    "digits, want",
    [
        ([1, 2, 3], [1, 2, 4]),
        ([4, 3, 2, 1], [4, 3, 2, 2]),
        ([9], [1, 0]),
        (
            [7, 2, 8, 5, 0, 9, 1, 2, 9, 5, 3, 6, 6, 7, 3, 2, 8, 4, 3, 7, 9, 5, 7, 7, 4, 7, 4, 9, 4, 7, 0, 1, 1, 1, 7, 4, 0, 0, 6],
            [7, 2, 8, 5, 0, 9, 1, 2, 9, 5, 3, 6, 6, 7, 3, 2, 8, 4, 3, 7, 9, 5, 7, 7, 4, 7, 4, 9, 4, 7, 0, 1, 1, 1, 7, 4, 0, 0, 7],
        ),
    ],
)
def test_plus_one(digits, want):
    assert plus_one(digits) == want


def test_merge_sorted():
    nums1 = [1, 2, 3, 0, 0, 0]
    merge_sorted(nums1, 3, [2, 5, 6], 3)
    assert nums1 == [1, 2, 2, 3, 5, 6]


def test_merge_sorted_into_empty_prefix():
    nums1 = [0, 0]
    merge_sorted(nums1, 0, [4, 9], 2)
    assert nums1 == [4, 9]


def test_merge_sorted_without_room():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], 2, [3], 1)


def test_permute():
    assert permute([1, 2]) == [[1, 2], [2, 1]]


def test_permute_three_values_are_all_distinct_orderings():
    result = permute([1, 2, 3])
    assert len(result) == factorial(3)
    assert len({tuple(order) for order in result}) == len(result)
    assert all(sorted(order) == [1, 2, 3] for order in result)


def test_permute_empty():
    assert permute([]) == []
"""Greedy solutions to scheduling and allocation puzzles."""

from __future__ import annotations

from typing import Sequence


def candy(ratings: Sequence[int]) -> int:
    """Fewest candies to hand out so that each child gets at least one.

    A child rated higher than a neighbour must also get more than that neighbour.
    """
    count = len(ratings)
    if count < 2:
        return count
    extra = [0] * count
    for i in range(1, count):
        if ratings[i] > ratings[i - 1]:
            extra[i] = extra[i - 1] + 1
    for i in range(count - 1, 0, -1):
        if ratings[i - 1] > ratings[i] and extra[i - 1] <= extra[i]:
            extra[i - 1] = extra[i] + 1
    return sum(extra) + count


def erase_overlap_intervals(intervals: Sequence[Sequence[int]]) -> int:
    """Fewest intervals to remove so that the rest do not overlap.

    Intervals that only touch at an end point do not overlap.
    """
    if not intervals:
        return 0
    ordered = sorted(intervals, key=lambda interval: interval[1])
    removed = 0
    end = ordered[0][1]
    for start, finish in ordered[1:]:
        if start < end:
            removed += 1
        else:
            end = finish
    return removed


def find_min_arrow_shots(points: Sequence[Sequence[int]]) -> int:
    """Fewest vertical arrows needed to burst balloons spanning the given closed ranges."""
    if len(points) <= 1:
        return len(points)
    ordered = sorted(points, key=lambda point: point[1])
    arrows = 1
    low, high = ordered[0][0], ordered[0][1]
    for start, end in ordered[1:]:
        if start <= high:
            low = max(low, start)
        else:
            low, high = start, end
            arrows += 1
    return arrows


def find_content_children(g: Sequence[int], s: Sequence[int]) -> int:
    """Most children that can be satisfied, each needing a cookie of at least their greed."""
    greed = sorted(g)
    sizes = sorted(s)
    child = 0
    for size in sizes:
        if child == len(greed):
            break
        if greed[child] <= size:
            child += 1
    return child


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Report whether exactly ``n`` more flowers fit with no two in adjacent plots.

    The given flowerbed is left unchanged. A negative ``n`` is never satisfiable.
    """
    bed = list(flowerbed)
    remaining = n
    for i, plot in enumerate(bed):
        if remaining <= 0:
            break
        before = bed[i - 1] if i > 0 else 0
        after = bed[i + 1] if i + 1 < len(bed) else 0
        if plot == 0 and before == 0 and after == 0:
            bed[i] = 1
            remaining -= 1
    return remaining == 0
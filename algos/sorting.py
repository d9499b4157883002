"""In-place comparison sorts."""

from __future__ import annotations


def _partition(items: list, low: int, high: int) -> int:
    """Place items[low] at its final position within items[low..high] and return that index."""
    pivot = items[low]
    i, j = low, high
    while i < j:
        while i < j and items[j] >= pivot:
            j -= 1
        if i < j:
            items[i] = items[j]
            i += 1
        while i < j and items[i] <= pivot:
            i += 1
        if i < j:
            items[j] = items[i]
            j -= 1
    items[i] = pivot
    return i


def quick_sort(array: list) -> None:
    """Sort ``array`` in place in ascending order, using its first element as each pivot."""
    ranges = [(0, len(array) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low >= high:
            continue
        split = _partition(array, low, high)
        ranges.append((low, split - 1))
        ranges.append((split + 1, high))


def _merge(items: list, low: int, mid: int, high: int) -> None:
    """Merge the sorted runs items[low..mid] and items[mid+1..high]."""
    left = items[low : mid + 1]
    right = items[mid + 1 : high + 1]
    i = j = 0
    k = low
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            items[k] = left[i]
            i += 1
        else:
            items[k] = right[j]
            j += 1
        k += 1
    rest = left[i:] if i < len(left) else right[j:]
    items[k : k + len(rest)] = rest


def merge_sort(array: list) -> None:
    """Sort ``array`` in place in ascending order; equal elements keep their order."""
    width = 1
    size = len(array)
    while width < size:
        for low in range(0, size - width, 2 * width):
            mid = low + width - 1
            high = min(low + 2 * width - 1, size - 1)
            _merge(array, low, mid, high)
        width *= 2
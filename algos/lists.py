"""Algorithms on singly linked lists."""

from __future__ import annotations

from typing import Optional, Sequence

from algos.models import ListNode


def has_cycle(head: Optional[ListNode]) -> bool:
    """Report whether the list loops back on itself (Floyd's two pointers)."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if slow is fast:
            return True
    return False


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the n-th node counted from the end and return the new head.

    If n exceeds the length of the list, the head is removed.
    """
    if head is None:
        raise ValueError("cannot remove a node from an empty list")
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(0, head)
    fast = slow = dummy
    for _ in range(n):
        if fast.next is None:
            break
        fast = fast.next
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next


def merge_two_lists(list1: Optional[ListNode], list2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; on ties the node from list1 comes first."""
    dummy = ListNode(-1)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def _merge_pair(left: Optional[ListNode], right: Optional[ListNode]) -> Optional[ListNode]:
    dummy = ListNode(-1)
    tail = dummy
    while left is not None and right is not None:
        if left.val < right.val:
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def merge_k_lists(lists: Sequence[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists by splitting the input in halves."""
    if not lists:
        return None
    if len(lists) == 1:
        return lists[0]
    half = len(lists) // 2
    return _merge_pair(merge_k_lists(lists[:half]), merge_k_lists(lists[half:]))


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values from a sorted list, keeping the first of each run."""
    node = head
    while node is not None:
        if node.next is not None and node.next.val == node.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Move nodes below x ahead of the others, keeping relative order within each part."""
    smaller = ListNode(-1)
    larger = ListNode(-1)
    small_tail, large_tail = smaller, larger
    node = head
    while node is not None:
        following = node.next
        node.next = None
        if node.val >= x:
            large_tail.next = node
            large_tail = node
        else:
            small_tail.next = node
            small_tail = node
        node = following
    small_tail.next = larger.next
    return smaller.next


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow
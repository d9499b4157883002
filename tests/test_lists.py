import pytest

from algos.lists import (
    delete_duplicates,
    has_cycle,
    merge_k_lists,
    merge_two_lists,
    middle_node,
    partition,
    remove_nth_from_end,
)
from algos.models import ListNode, list_from_values, list_to_values


def test_merge_two_lists_source_case():
    merged = merge_two_lists(list_from_values([1, 2, 4]), list_from_values([1, 3, 4]))
    assert list_to_values(merged) == [1, 1, 2, 3, 4, 4]


def test_merge_two_lists_prefers_first_on_ties():
    first = ListNode(1)
    second = ListNode(1)
    merged = merge_two_lists(first, second)
    assert merged is first
    assert merged.next is second


def test_merge_two_lists_with_empty():
    assert merge_two_lists(None, None) is None
    assert list_to_values(merge_two_lists(None, list_from_values([2, 3]))) == [2, 3]


def test_delete_duplicates_source_case():
    head = list_from_values([1, 1, 2, 3])
    assert list_to_values(delete_duplicates(head)) == [1, 2, 3]


def test_delete_duplicates_long_runs():
    head = list_from_values([1, 1, 1, 2, 3, 3])
    assert list_to_values(delete_duplicates(head)) == [1, 2, 3]
    assert delete_duplicates(None) is None


def test_partition_empty():
    assert partition(None, 3) is None


def test_partition_keeps_order():
    head = list_from_values([1, 4, 3, 2, 5, 2])
    assert list_to_values(partition(head, 3)) == [1, 2, 2, 4, 3, 5]


def test_partition_all_larger():
    head = list_from_values([2, 1])
    assert list_to_values(partition(head, 2)) == [1, 2]


def test_has_cycle():
    head = list_from_values([3, 2, 0, -4])
    assert not has_cycle(head)
    head.next.next.next.next = head.next
    assert has_cycle(head)
    assert not has_cycle(None)


def test_remove_nth_from_end():
    head = list_from_values([1, 2, 3, 4, 5])
    assert list_to_values(remove_nth_from_end(head, 2)) == [1, 2, 3, 5]


def test_remove_nth_from_end_single():
    assert remove_nth_from_end(list_from_values([1]), 1) is None


def test_remove_nth_beyond_length_removes_head():
    head = list_from_values([1, 2])
    assert list_to_values(remove_nth_from_end(head, 5)) == [2]


def test_remove_nth_errors():
    with pytest.raises(ValueError):
        remove_nth_from_end(None, 1)
    with pytest.raises(ValueError):
        remove_nth_from_end(list_from_values([1, 2]), 0)


def test_merge_k_lists():
    lists = [list_from_values([1, 4, 5]), list_from_values([1, 3, 4]), list_from_values([2, 6])]
    assert list_to_values(merge_k_lists(lists)) == [1, 1, 2, 3, 4, 4, 5, 6]


def test_merge_k_lists_empty():
    assert merge_k_lists([]) is None
    assert merge_k_lists([None]) is None


def test_middle_node():
    assert middle_node(list_from_values([1, 2, 3, 4, 5])).val == 3
    assert middle_node(list_from_values([1, 2, 3, 4, 5, 6])).val == 4
    assert middle_node(None) is None
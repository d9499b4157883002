"""Node types shared by the list and tree algorithms, plus builders for tests and examples."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = field(default=None, repr=False)


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False)
class NaryNode:
    """A node of a tree whose nodes may have any number of children."""

    val: int = 0
    children: list[Optional[NaryNode]] = field(default_factory=list)


@dataclass(eq=False)
class LinkedTreeNode:
    """A binary tree node that also points at its right neighbour on the same level."""

    val: int = 0
    left: Optional[LinkedTreeNode] = None
    right: Optional[LinkedTreeNode] = None
    next: Optional[LinkedTreeNode] = field(default=None, repr=False)


def list_from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; an empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order.

    Raises ValueError if the list contains a cycle.
    """
    values = []
    seen = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("linked list contains a cycle")
        seen.add(id(node))
        values.append(node.val)
        node = node.next
    return values


def tree_from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a binary tree from a level-order listing where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root
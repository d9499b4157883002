"""Queries and edits on binary search trees."""

from __future__ import annotations

from itertools import groupby, pairwise
from typing import Optional

from algos.models import TreeNode
from algos.trees import inorder


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (counting from 1).

    Raises ValueError when k is outside the range of the tree's size.
    """
    values = inorder(root)
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}")
    return values[k - 1]


def _min_node(node: TreeNode) -> TreeNode:
    while node.left is not None:
        node = node.left
    return node


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove the node holding ``key`` and return the new root.

    A node with two children takes the value of its in-order successor,
    which is then removed from the right subtree.
    """
    if root is None:
        return None
    if key < root.val:
        root.left = delete_node(root.left, key)
    elif key > root.val:
        root.right = delete_node(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = _min_node(root.right)
        root.val = successor.val
        root.right = delete_node(root.right, successor.val)
    return root


def find_mode(root: Optional[TreeNode]) -> list[int]:
    """The most frequent values, in ascending order; an empty tree gives an empty list."""
    runs = [(value, sum(1 for _ in group)) for value, group in groupby(inorder(root))]
    if not runs:
        return []
    best = max(count for _, count in runs)
    return [value for value, count in runs if count == best]


def get_minimum_difference(root: Optional[TreeNode]) -> int:
    """Smallest difference between the values of any two nodes.

    Raises ValueError when the tree has fewer than two nodes.
    """
    values = inorder(root)
    if len(values) < 2:
        raise ValueError("at least two nodes are required")
    return min(b - a for a, b in pairwise(values))


def convert_bst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Replace each value by the sum of all values greater than or equal to it; return the root."""
    running = 0
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right
        node = stack.pop()
        running += node.val
        node.val = running
        node = node.left
    return root


def trim_bst(root: Optional[TreeNode], low: int, high: int) -> Optional[TreeNode]:
    """Drop every node whose value lies outside ``[low, high]`` and return the new root."""
    if root is None:
        return None
    if root.val < low:
        return trim_bst(root.right, low, high)
    if root.val > high:
        return trim_bst(root.left, low, high)
    root.left = trim_bst(root.left, low, high)
    root.right = trim_bst(root.right, low, high)
    return root


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val``, or None if there is none."""
    node = root
    while node is not None:
        if node.val == val:
            return node
        node = node.left if val < node.val else node.right
    return None


def insert_into_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Add ``val`` as a new leaf and return the root; a value already present is left alone."""
    if root is None:
        return TreeNode(val)
    node = root
    while True:
        if val < node.val:
            if node.left is None:
                node.left = TreeNode(val)
                return root
            node = node.left
        elif val > node.val:
            if node.right is None:
                node.right = TreeNode(val)
                return root
            node = node.right
        else:
            return root


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Report whether in-order values are strictly increasing; an empty tree is not valid."""
    if root is None:
        return False
    return all(a < b for a, b in pairwise(inorder(root)))


def lowest_common_ancestor_bst(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Deepest node with both ``p`` and ``q`` beneath it (a node counts as beneath itself)."""
    node = root
    while node is not None:
        if p.val < node.val and q.val < node.val:
            node = node.left
        elif p.val > node.val and q.val > node.val:
            node = node.right
        else:
            return node
    return None
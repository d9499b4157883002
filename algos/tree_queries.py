"""Questions asked of a binary or n-ary tree: paths, levels, ancestors and shape."""

from __future__ import annotations

from typing import Iterator, Optional

from algos.models import NaryNode, TreeNode


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    """Yield the nodes of each level, top to bottom, left to right."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def _nary_levels(root: Optional[NaryNode]) -> Iterator[list[NaryNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in node.children if child is not None]


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Deepest node having both ``p`` and ``q`` as descendants (a node descends from itself).

    Nodes are matched by identity. Returns None when neither node is in the tree.
    """
    if root is None:
        return None
    if root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def binary_tree_paths(root: Optional[TreeNode]) -> list[str]:
    """Every root-to-leaf path, left to right, written as ``a->b->c``."""
    paths = []
    stack = [(root, str(root.val))] if root is not None else []
    while stack:
        node, path = stack.pop()
        if _is_leaf(node):
            paths.append(path)
            continue
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, f"{path}->{child.val}"))
    return paths


def sum_of_left_leaves(root: Optional[TreeNode]) -> int:
    """Sum of the leaves that are the left child of their parent."""
    total = 0
    stack = [(root, False)] if root is not None else []
    while stack:
        node, is_left = stack.pop()
        if _is_leaf(node):
            if is_left:
                total += node.val
            continue
        if node.left is not None:
            stack.append((node.left, True))
        if node.right is not None:
            stack.append((node.right, False))
    return total


def nary_level_order(root: Optional[NaryNode]) -> list[list[int]]:
    """Values of an n-ary tree grouped by level, skipping missing children."""
    return [[node.val for node in level] for level in _nary_levels(root)]


def nary_max_depth(root: Optional[NaryNode]) -> int:
    """Number of nodes on the longest root-to-leaf path of an n-ary tree."""
    return sum(1 for _ in _nary_levels(root))


def find_bottom_left_value(root: Optional[TreeNode]) -> int:
    """Leftmost value on the deepest level.

    Raises ValueError for an empty tree.
    """
    if root is None:
        raise ValueError("an empty tree has no bottom-left value")
    *_, last = _levels(root)
    return last[0].val


def largest_values(root: Optional[TreeNode]) -> list[int]:
    """Largest value on each level, top to bottom."""
    return [max(node.val for node in level) for level in _levels(root)]


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def average_of_levels(root: Optional[TreeNode]) -> list[float]:
    """Mean value of each level, top to bottom."""
    return [sum(node.val for node in level) / len(level) for level in _levels(root)]


def is_unival_tree(root: Optional[TreeNode]) -> bool:
    """Report whether every node holds the same value; an empty tree qualifies."""
    if root is None:
        return True
    return all(node.val == root.val for level in _levels(root) for node in level)
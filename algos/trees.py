"""Traversals and whole-tree measurements on binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from algos.models import TreeNode


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


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Report whether the tree is a mirror image of itself around its centre."""
    if root is None:
        return True
    pairs = [(root.left, root.right)]
    while pairs:
        a, b = pairs.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        pairs.append((a.left, b.right))
        pairs.append((a.right, b.left))
    return True


def sum_root_to_leaf(root: Optional[TreeNode]) -> int:
    """Sum the numbers spelled in base 2 by every root-to-leaf path."""
    total = 0
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, prefix = stack.pop()
        value = prefix * 2 + node.val
        if _is_leaf(node):
            total += value
            continue
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, value))
    return total


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by level, from the root downwards."""
    return [[node.val for node in level] for level in _levels(root)]


def level_order_bottom(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by level, from the deepest level up to the root."""
    return level_order(root)[::-1]


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    return sum(1 for _ in _levels(root))


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest root-to-leaf path."""
    for depth, level in enumerate(_levels(root), start=1):
        if any(_is_leaf(node) for node in level):
            return depth
    return 0


def _height_if_balanced(node: Optional[TreeNode]) -> Optional[int]:
    if node is None:
        return 0
    left = _height_if_balanced(node.left)
    if left is None:
        return None
    right = _height_if_balanced(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Report whether every node's subtrees differ in height by at most one."""
    return _height_if_balanced(root) is not None


def _root_to_leaf_paths(root: Optional[TreeNode]) -> Iterator[list[int]]:
    stack = [(root, [root.val])] if root is not None else []
    while stack:
        node, path = stack.pop()
        if _is_leaf(node):
            yield path
            continue
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, path + [child.val]))


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Report whether some root-to-leaf path adds up to ``target_sum``."""
    return any(sum(path) == target_sum for path in _root_to_leaf_paths(root))


def path_sum(root: Optional[TreeNode], target_sum: int) -> list[list[int]]:
    """Every root-to-leaf path, left to right, whose values add up to ``target_sum``."""
    return [path for path in _root_to_leaf_paths(root) if sum(path) == target_sum]


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum of values along any path between two nodes.

    Raises ValueError for an empty tree.
    """
    if root is None:
        raise ValueError("an empty tree has no paths")
    best = root.val

    def one_side(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, one_side(node.left))
        right = max(0, one_side(node.right))
        best = max(best, left + right + node.val)
        return max(left, right) + node.val

    one_side(root)
    return best


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in node, left, right order."""
    values = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, node, right order."""
    values = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, node order."""
    values = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return values[::-1]


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """The rightmost value of each level, top to bottom."""
    return [level[-1].val for level in _levels(root)]


def count_nodes(root: Optional[TreeNode]) -> int:
    """Total number of nodes in the tree."""
    return sum(len(level) for level in _levels(root))


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap the children of every node in place and return the root."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return root
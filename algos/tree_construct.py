"""Building binary trees from other trees or from sequences of values."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from algos.models import LinkedTreeNode, TreeNode


def merge_trees(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> Optional[TreeNode]:
    """Overlay two trees into a new one; where both have a node, the values are added.

    Neither input is modified.
    """
    if root1 is None and root2 is None:
        return None
    value = 0
    left1 = right1 = left2 = right2 = None
    if root1 is not None:
        value += root1.val
        left1, right1 = root1.left, root1.right
    if root2 is not None:
        value += root2.val
        left2, right2 = root2.left, root2.right
    return TreeNode(value, merge_trees(left1, left2), merge_trees(right1, right2))


def _maximum_tree(nums: Sequence[int]) -> Optional[TreeNode]:
    if not nums:
        return None
    index = max(range(len(nums)), key=nums.__getitem__)
    return TreeNode(nums[index], _maximum_tree(nums[:index]), _maximum_tree(nums[index + 1 :]))


def construct_maximum_binary_tree(nums: Sequence[int]) -> TreeNode:
    """Root at the largest value (first on ties); the parts to its left and right form the subtrees.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("at least one value is required")
    return _maximum_tree(list(nums))


def _check_orders(first: Sequence[int], second: Sequence[int]) -> None:
    if not first:
        raise ValueError("traversals must not be empty")
    if len(first) != len(second):
        raise ValueError("traversals must have the same length")


def _position(values: Sequence[int], value: int, *, last: bool) -> int:
    indices = range(len(values) - 1, -1, -1) if last else range(len(values))
    for index in indices:
        if values[index] == value:
            return index
    raise ValueError(f"value {value!r} is missing from the inorder traversal")


def _from_pre_in(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    if not preorder:
        return None
    value = preorder[0]
    index = _position(inorder, value, last=True)
    return TreeNode(
        value,
        _from_pre_in(preorder[1 : 1 + index], inorder[:index]),
        _from_pre_in(preorder[1 + index :], inorder[index + 1 :]),
    )


def build_tree_from_preorder_inorder(preorder: Sequence[int], inorder: Sequence[int]) -> TreeNode:
    """Rebuild a tree from its preorder and inorder traversals.

    Raises ValueError when the traversals are empty or do not describe one tree.
    """
    _check_orders(preorder, inorder)
    return _from_pre_in(list(preorder), list(inorder))


def _from_in_post(inorder: Sequence[int], postorder: Sequence[int]) -> Optional[TreeNode]:
    if not postorder:
        return None
    value = postorder[-1]
    index = _position(inorder, value, last=False)
    return TreeNode(
        value,
        _from_in_post(inorder[:index], postorder[:index]),
        _from_in_post(inorder[index + 1 :], postorder[index:-1]),
    )


def build_tree_from_inorder_postorder(inorder: Sequence[int], postorder: Sequence[int]) -> TreeNode:
    """Rebuild a tree from its inorder and postorder traversals.

    Raises ValueError when the traversals are empty or do not describe one tree.
    """
    _check_orders(postorder, inorder)
    return _from_in_post(list(inorder), list(postorder))


def _linked_levels(root: Optional[LinkedTreeNode]) -> Iterator[list[LinkedTreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def connect(root: Optional[LinkedTreeNode]) -> Optional[LinkedTreeNode]:
    """Point each node's ``next`` at its right neighbour on the same level; return the root."""
    for level in _linked_levels(root):
        for node, neighbour in zip(level, level[1:]):
            node.next = neighbour
    return root
"""Binary search tree operations and an in-order iterator."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Optional

from dsakit.tree import TreeNode


def search(root: Optional[TreeNode], value: int) -> Optional[TreeNode]:
    """Return the node holding ``value``, or None."""
    node = root
    while node is not None and node.value != value:
        node = node.left if value < node.value else node.right
    return node


def ceil(root: Optional[TreeNode], value: int) -> Optional[int]:
    """Return the smallest value not below ``value``, or None if there is none."""
    result = None
    node = root
    while node is not None:
        if node.value == value:
            return node.value
        if value > node.value:
            node = node.right
        else:
            result = node.value
            node = node.left
    return result


def floor(root: Optional[TreeNode], value: int) -> Optional[int]:
    """Return the largest value not above ``value``, or None if there is none."""
    result = None
    node = root
    while node is not None:
        if node.value == value:
            return node.value
        if value > node.value:
            result = node.value
            node = node.right
        else:
            node = node.left
    return result


def insert(root: Optional[TreeNode], value: int) -> TreeNode:
    """Insert ``value`` as a new leaf and return the root.

    Values equal to a node's value go into its right subtree.
    """
    leaf = TreeNode(value)
    if root is None:
        return leaf
    node = root
    while True:
        if node.value <= value:
            if node.right is None:
                node.right = leaf
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = leaf
                return root
            node = node.left


def _rightmost(node: TreeNode) -> TreeNode:
    while node.right is not None:
        node = node.right
    return node


def _without(node: TreeNode) -> Optional[TreeNode]:
    """Return the subtree that replaces ``node`` once it is removed."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    _rightmost(node.left).right = node.right
    return node.left


def delete(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove the first node holding ``key`` and return the new root."""
    if root is None:
        return None
    if root.value == key:
        return _without(root)
    node = root
    while node is not None:
        if node.value > key:
            if node.left is not None and node.left.value == key:
                node.left = _without(node.left)
                break
            node = node.left
        else:
            if node.right is not None and node.right.value == key:
                node.right = _without(node.right)
                break
            node = node.right
    return root


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the ``k``-th smallest value (1-based)."""
    if k < 1:
        raise ValueError("k must be at least 1")
    for count, value in enumerate(BSTIterator(root), start=1):
        if count == k:
            return value
    raise ValueError(f"the tree holds fewer than {k} values")


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return whether every left value is smaller and every right value larger."""

    def check(node: Optional[TreeNode], low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.value < high:
            return False
        return check(node.left, low, node.value) and check(node.right, node.value, high)

    return check(root, -math.inf, math.inf)


def bst_lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest common ancestor of ``p`` and ``q``, guided by values."""
    node = root
    while node is not None:
        if node.value < p.value and node.value < q.value:
            node = node.right
        elif node.value > p.value and node.value > q.value:
            node = node.left
        else:
            return node
    return None


def from_preorder(preorder: Iterable[int]) -> Optional[TreeNode]:
    """Build the search tree whose preorder values are ``preorder``."""
    values = list(preorder)
    index = 0

    def build(bound: float) -> Optional[TreeNode]:
        nonlocal index
        if index == len(values) or values[index] > bound:
            return None
        node = TreeNode(values[index])
        index += 1
        node.left = build(node.value)
        node.right = build(bound)
        return node

    return build(math.inf)


def inorder_successor(root: Optional[TreeNode], node: TreeNode) -> Optional[TreeNode]:
    """Return the node with the smallest value above ``node``'s, or None."""
    successor = None
    current = root
    while current is not None:
        if node.value >= current.value:
            current = current.right
        else:
            successor = current
            current = current.left
    return successor


class BSTIterator:
    """Iterate over a search tree's values in ascending order, lazily."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._stack: list[TreeNode] = []
        self._push_left(root)

    def _push_left(self, node: Optional[TreeNode]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def __iter__(self) -> BSTIterator:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left(node.right)
        return node.value

    def has_next(self) -> bool:
        """Return whether any values remain."""
        return bool(self._stack)
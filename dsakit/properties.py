"""Structural properties of binary trees and questions about their nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Optional

from dsakit.tree import TreeNode


def _balanced_height(node: Optional[TreeNode]) -> int:
    """Return the height of ``node``, or -1 if any subtree is unbalanced."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left == -1:
        return -1
    right = _balanced_height(node.right)
    if right == -1 or abs(left - right) > 1:
        return -1
    return 1 + max(left, right)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) != -1


def diameter(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between two nodes."""
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


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum of values along any path between two nodes."""
    if root is None:
        raise ValueError("an empty tree has no paths")
    best = root.value

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, left + right + node.value)
        return node.value + max(left, right)

    gain(root)
    return best


def is_same_tree(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    """Return whether two trees have the same shape and values."""
    if first is None or second is None:
        return first is second
    return (
        first.value == second.value
        and is_same_tree(first.left, second.left)
        and is_same_tree(first.right, second.right)
    )


def _mirrored(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    if left is None or right is None:
        return left is right
    return (
        left.value == right.value
        and _mirrored(left.left, right.right)
        and _mirrored(left.right, right.left)
    )


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return whether the tree is a mirror image of itself."""
    return root is None or _mirrored(root.left, root.right)


def path_to(root: Optional[TreeNode], target: int) -> list[int]:
    """Return the values from the root down to the first node holding ``target``.

    The search goes depth first, left before right. The list is empty
    when no node holds ``target``.
    """
    path: list[int] = []

    def walk(node: Optional[TreeNode]) -> bool:
        if node is None:
            return False
        path.append(node.value)
        if node.value == target or walk(node.left) or walk(node.right):
            return True
        path.pop()
        return False

    walk(root)
    return path


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node having both ``p`` and ``q`` as descendants.

    A node counts as its own descendant. Nodes are matched by identity.
    """
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def lowest_common_ancestor_by_value(
    root: Optional[TreeNode], first: int, second: int
) -> Optional[TreeNode]:
    """Return the lowest common ancestor of the nodes holding two values.

    If only one of the values is present, its node is returned; if
    neither is, the result is None.
    """
    if root is None:
        return None
    if root.value in (first, second):
        return root
    left = lowest_common_ancestor_by_value(root.left, first, second)
    right = lowest_common_ancestor_by_value(root.right, first, second)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def enforce_children_sum(root: Optional[TreeNode]) -> None:
    """Raise values in place until every parent equals the sum of its children.

    Values are only ever increased; the shape of the tree is unchanged.
    """
    if root is None:
        return
    total = sum(child.value for child in (root.left, root.right) if child is not None)
    if total >= root.value:
        root.value = total
    elif root.left is not None:
        root.left.value = root.value
    elif root.right is not None:
        root.right.value = root.value

    enforce_children_sum(root.left)
    enforce_children_sum(root.right)

    children = [child for child in (root.left, root.right) if child is not None]
    if children:
        root.value = sum(child.value for child in children)


def time_to_burn(root: Optional[TreeNode], start: int) -> int:
    """Return the minutes a fire needs to spread from ``start`` to every node.

    Each minute the fire moves from a burning node to its children and
    parent. If several nodes hold ``start``, the last one met level by
    level is where the fire begins.
    """
    parents: dict[TreeNode, TreeNode] = {}
    target: Optional[TreeNode] = None
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        if node.value == start:
            target = node
        for child in (node.left, node.right):
            if child is not None:
                parents[child] = node
                queue.append(child)
    if target is None:
        raise ValueError(f"no node holds {start}")

    burned = {target}
    frontier = [target]
    minutes = 0
    while frontier:
        following = []
        for node in frontier:
            for neighbour in (node.left, node.right, parents.get(node)):
                if neighbour is not None and neighbour not in burned:
                    burned.add(neighbour)
                    following.append(neighbour)
        if following:
            minutes += 1
        frontier = following
    return minutes


def _edge_height(node: Optional[TreeNode], go_left: bool) -> int:
    height = 0
    while node is not None:
        height += 1
        node = node.left if go_left else node.right
    return height


def count_complete_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in a complete binary tree.

    Perfect subtrees are counted from their height alone.
    """
    if root is None:
        return 0
    left = _edge_height(root, go_left=True)
    right = _edge_height(root, go_left=False)
    if left == right:
        return (1 << left) - 1
    return 1 + count_complete_nodes(root.left) + count_complete_nodes(root.right)


def build_from_inorder_postorder(
    inorder: Iterable[int], postorder: Iterable[int]
) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its inorder and postorder values."""
    in_values = list(inorder)
    post_values = list(postorder)
    if len(in_values) != len(post_values):
        raise ValueError("inorder and postorder must have the same length")
    positions = {value: index for index, value in enumerate(in_values)}

    def build(in_start: int, in_end: int, post_start: int, post_end: int) -> Optional[TreeNode]:
        if post_start > post_end or in_start > in_end:
            return None
        value = post_values[post_end]
        try:
            root_index = positions[value]
        except KeyError:
            raise ValueError(f"{value} is missing from the inorder values") from None
        left_size = root_index - in_start
        node = TreeNode(value)
        node.left = build(in_start, root_index - 1, post_start, post_start + left_size - 1)
        node.right = build(root_index + 1, in_end, post_start + left_size, post_end - 1)
        return node

    return build(0, len(in_values) - 1, 0, len(post_values) - 1)
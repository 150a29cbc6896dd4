"""Iterative, level-based and view traversals of binary trees."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator
from typing import NamedTuple, Optional

from dsakit.tree import TreeNode


class Traversals(NamedTuple):
    """The three depth-first orders of one tree, gathered in a single pass."""

    preorder: list[int]
    inorder: list[int]
    postorder: list[int]


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values of each level, top to bottom, left to right."""
    return [[node.value for node in level] for level in _levels(root)]


def preorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Return the preorder values, walked with an explicit stack."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Return the inorder values, walked with an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while True:
        if node is not None:
            stack.append(node)
            node = node.left
        elif stack:
            node = stack.pop()
            result.append(node.value)
            node = node.right
        else:
            return result


def postorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Return the postorder values, walked with two stacks."""
    pending = [root] if root is not None else []
    visited: list[TreeNode] = []
    while pending:
        node = pending.pop()
        visited.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.value for node in reversed(visited)]


def pre_in_post(root: Optional[TreeNode]) -> Traversals:
    """Return preorder, inorder and postorder values from one stack walk.

    Each node is visited three times: first for preorder, then, with its
    left subtree done, for inorder, and last for postorder.
    """
    result = Traversals([], [], [])
    stack: list[tuple[TreeNode, int]] = [(root, 1)] if root is not None else []
    while stack:
        node, stage = stack.pop()
        if stage == 1:
            result.preorder.append(node.value)
            stack.append((node, 2))
            if node.left is not None:
                stack.append((node.left, 1))
        elif stage == 2:
            result.inorder.append(node.value)
            stack.append((node, 3))
            if node.right is not None:
                stack.append((node.right, 1))
        else:
            result.postorder.append(node.value)
    return result


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return level values, alternating left-to-right and right-to-left."""
    return [
        values if depth % 2 == 0 else values[::-1]
        for depth, values in enumerate(level_order(root))
    ]


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def _leaves(node: TreeNode) -> Iterator[int]:
    if _is_leaf(node):
        yield node.value
        return
    if node.left is not None:
        yield from _leaves(node.left)
    if node.right is not None:
        yield from _leaves(node.right)


def boundary(root: Optional[TreeNode]) -> list[int]:
    """Return the anticlockwise boundary: root, left edge, leaves, right edge."""
    if root is None:
        return []
    result = [] if _is_leaf(root) else [root.value]

    node = root.left
    while node is not None:
        if not _is_leaf(node):
            result.append(node.value)
        node = node.left if node.left is not None else node.right

    result.extend(_leaves(root))

    right_edge = []
    node = root.right
    while node is not None:
        if not _is_leaf(node):
            right_edge.append(node.value)
        node = node.right if node.right is not None else node.left
    result.extend(reversed(right_edge))
    return result


def _with_columns(root: Optional[TreeNode]) -> Iterator[tuple[TreeNode, int, int]]:
    if root is None:
        return
    queue = deque([(root, 0, 0)])
    while queue:
        node, column, row = queue.popleft()
        yield node, column, row
        if node.left is not None:
            queue.append((node.left, column - 1, row + 1))
        if node.right is not None:
            queue.append((node.right, column + 1, row + 1))


def vertical_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values of each column, left to right.

    Within a column values go top to bottom; values sharing a row and
    column are sorted.
    """
    columns: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(
        lambda: defaultdict(list)
    )
    for node, column, row in _with_columns(root):
        columns[column][row].append(node.value)
    return [
        [
            value
            for row in sorted(columns[column])
            for value in sorted(columns[column][row])
        ]
        for column in sorted(columns)
    ]


def top_view(root: Optional[TreeNode]) -> list[int]:
    """Return the first node seen in each column, left to right."""
    seen: dict[int, int] = {}
    for node, column, _ in _with_columns(root):
        seen.setdefault(column, node.value)
    return [seen[column] for column in sorted(seen)]


def bottom_view(root: Optional[TreeNode]) -> list[int]:
    """Return the last node seen in each column, left to right."""
    seen: dict[int, int] = {}
    for node, column, _ in _with_columns(root):
        seen[column] = node.value
    return [seen[column] for column in sorted(seen)]


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value of every level, top to bottom."""
    return [level[-1].value for level in _levels(root)]


def max_width(root: Optional[TreeNode]) -> int:
    """Return the widest level, counting the gaps between its end nodes."""
    if root is None:
        return 0
    widest = 0
    level = [(root, 0)]
    while level:
        offset = level[0][1]
        widest = max(widest, level[-1][1] - level[0][1] + 1)
        following = []
        for node, position in level:
            position -= offset
            if node.left is not None:
                following.append((node.left, 2 * position + 1))
            if node.right is not None:
                following.append((node.right, 2 * position + 2))
        level = following
    return widest


def morris_inorder(root: Optional[TreeNode]) -> list[int]:
    """Return the inorder values using threaded links instead of a stack.

    The tree is modified during the walk and left as it was at the end.
    """
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.value)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            result.append(current.value)
            current = current.right
    return result
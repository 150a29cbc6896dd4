"""Binary tree nodes, building from preorder input, and the basic traversals."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, Union

NULL_MARKER = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    value: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def parse_tree(tokens: Union[str, Iterable[Union[str, int]]]) -> Optional[TreeNode]:
    """Build a tree from preorder values where -1 stands for an empty child.

    ``tokens`` is a whitespace-separated string or an iterable of values.
    Values after the tree is complete are ignored.
    """
    if isinstance(tokens, str):
        tokens = tokens.split()
    stream = iter(tokens)

    def build() -> Optional[TreeNode]:
        try:
            raw = next(stream)
        except StopIteration:
            raise ValueError("input ended before the tree was complete") from None
        value = int(raw)
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def breadth_first(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values level by level, left to right."""
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left:
            queue.append(node.left)
        if node.right:
            queue.append(node.right)


def inorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values left subtree, node, right subtree."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.value
    yield from inorder(root.right)


def preorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    if root is None:
        return
    yield root.value
    yield from preorder(root.left)
    yield from preorder(root.right)


def postorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.value


_ORDERS = {
    "level": breadth_first,
    "inorder": inorder,
    "preorder": preorder,
    "postorder": postorder,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Read a preorder tree from standard input and print one traversal of it."""
    parser = argparse.ArgumentParser(
        description="Build a binary tree from preorder values (-1 for none) "
        "read from standard input and print a traversal."
    )
    parser.add_argument(
        "--order",
        choices=sorted(_ORDERS),
        default="level",
        help="traversal to print (default: level)",
    )
    args = parser.parse_args(argv)
    try:
        root = parse_tree(sys.stdin.read())
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(" ".join(str(value) for value in _ORDERS[args.order](root)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
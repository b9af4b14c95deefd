"""Linked binary trees, binary search trees, traversals and text rendering.

The traversal and rendering functions work on any tree whose nodes expose
``value``, ``left`` and ``right`` and whose empty trees are falsy, so they
accept both :class:`BinaryTree` nodes (with ``None`` as the empty tree) and
array-backed complete trees.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class BinaryTree:
    """A node of a linked binary tree that also knows its parent."""

    value: Any
    left: Optional["BinaryTree"] = None
    right: Optional["BinaryTree"] = None
    parent: Optional["BinaryTree"] = field(default=None, repr=False, compare=False)


def make_binary_tree(
    value: Any,
    left: Optional[BinaryTree] = None,
    right: Optional[BinaryTree] = None,
) -> BinaryTree:
    """Build a node from a value and two subtrees, linking the subtrees to it."""
    root = BinaryTree(value, left, right)
    for child in (left, right):
        if child is not None:
            child.parent = root
    return root


def bst_search(tree: Any, value: Any) -> Any:
    """Return the node holding ``value``, or else the largest one below it.

    Returns ``None`` when every value in the tree exceeds ``value``.
    """
    best = None
    node = tree
    while node:
        if value == node.value:
            return node
        if value < node.value:
            node = node.left
        else:
            best = node
            node = node.right
    return best


def bst_insert(tree: Optional[BinaryTree], value: Any) -> BinaryTree:
    """Insert ``value`` into a binary search tree and return its root.

    Values equal to a node go to its left subtree.
    """
    node = BinaryTree(value)
    if tree is None:
        return node
    current = tree
    while True:
        if value <= current.value:
            if current.left is None:
                current.left = node
                break
            current = current.left
        else:
            if current.right is None:
                current.right = node
                break
            current = current.right
    node.parent = current
    return tree


def bst_min(tree: Any) -> Any:
    """Return the node with the smallest value, or ``None`` for an empty tree."""
    if not tree:
        return None
    while tree.left:
        tree = tree.left
    return tree


def bst_max(tree: Any) -> Any:
    """Return the node with the largest value, or ``None`` for an empty tree."""
    if not tree:
        return None
    while tree.right:
        tree = tree.right
    return tree


def height(tree: Any) -> int:
    """Return the height of the tree; an empty tree has height -1."""
    if not tree:
        return -1
    return 1 + max(height(tree.left), height(tree.right))


def df_traversal(tree: Any, action: Callable[[Any], Any]) -> None:
    """Visit every node depth first, in order: left, node, right."""
    if not tree:
        return
    df_traversal(tree.left, action)
    action(tree)
    df_traversal(tree.right, action)


def bf_traversal(tree: Any, action: Callable[[Any], Any]) -> None:
    """Visit every node breadth first, level by level from the left."""
    queue = deque([tree])
    while queue:
        current = queue.popleft()
        if current:
            action(current)
            queue.append(current.left)
            queue.append(current.right)


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _render(tree: Any) -> list[str]:
    if not tree:
        return []
    text = _format_value(tree.value)
    left_lines = _render(tree.left)
    right_lines = _render(tree.right)

    left_width = len(left_lines[0]) if left_lines else 0
    right_width = len(right_lines[0]) if right_lines else 0

    rows = max(len(left_lines), len(right_lines))
    left_lines += [" " * left_width] * (rows - len(left_lines))
    right_lines += [" " * right_width] * (rows - len(right_lines))

    padded_width = max(len(text) + 2, left_width)
    pad = " " * (padded_width - left_width)
    fill = "-" if right_width else " "
    text += " " + fill * (padded_width - len(text) - 1)
    if right_width:
        text += "v" + " " * (right_width - 1)

    return [text] + [left + pad + right for left, right in zip(left_lines, right_lines)]


def format_binary_tree(tree: Any) -> str:
    """Render the tree as lines of text, each node above its left subtree."""
    return "\n".join(_render(tree))


def print_binary_tree(tree: Any) -> None:
    """Print the rendering of the tree, one line at a time."""
    for line in _render(tree):
        print(line)
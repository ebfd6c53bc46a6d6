"""Rooted binary trees stored as lists of nodes, with the root at index 0."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass
class Node:
    """A tree node; absent neighbours and taxa are ``None``."""

    parent: int | None = None
    lchild: int | None = None
    rchild: int | None = None
    taxon: int | None = None

    def child(self, right: bool) -> int | None:
        """Return the right child if ``right`` is true, else the left child."""
        return self.rchild if right else self.lchild

    def __str__(self) -> str:
        def fmt(value: int | None) -> str:
            return "none" if value is None else str(value)

        return f"({fmt(self.parent)}, {fmt(self.lchild)}, {fmt(self.rchild)})"


def is_leaf(node: Node) -> bool:
    """True if the node has no children."""
    return node.lchild is None and node.rchild is None


def is_root(node: Node) -> bool:
    """True if the node has no parent."""
    return node.parent is None


def postorder(tree: Sequence[Node]) -> Iterator[int]:
    """Yield node indices so that children come before their parent, left before right."""
    if not tree:
        return
    stack: list[tuple[int, bool]] = [(0, False)]
    while stack:
        index, expanded = stack.pop()
        node = tree[index]
        if expanded or is_leaf(node):
            yield index
            continue
        stack.append((index, True))
        stack.append((node.rchild, False))
        stack.append((node.lchild, False))


def preorder(tree: Sequence[Node]) -> Iterator[int]:
    """Yield node indices so that a parent comes before its children, left before right."""
    if not tree:
        return
    stack = [0]
    while stack:
        index = stack.pop()
        yield index
        node = tree[index]
        if not is_leaf(node):
            stack.append(node.rchild)
            stack.append(node.lchild)


def num_leaves_from_nodes(num_nodes: int) -> int:
    """Number of leaves of a binary tree with ``num_nodes`` nodes."""
    return num_nodes // 2 + 1


def num_nodes_from_leaves(num_leaves: int) -> int:
    """Number of nodes of a binary tree with ``num_leaves`` leaves."""
    return 2 * num_leaves - 1
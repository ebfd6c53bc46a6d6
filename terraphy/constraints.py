"""LCA constraints extracted from rooted binary trees."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .trees import Node, is_leaf, postorder, preorder


@dataclass(frozen=True, order=True)
class Constraint:
    """The constraint lca(left, shared) < lca(shared, right), by height in the tree."""

    left: int
    shared: int
    right: int

    def __str__(self) -> str:
        return f"lca({self.left},{self.shared}) < lca({self.shared},{self.right})"

    def named(self, names: Sequence[str]) -> str:
        """Render the constraint using taxon names."""
        left, shared, right = names[self.left], names[self.shared], names[self.right]
        return f"lca({left},{shared}) < lca({shared},{right})"


def compute_constraints(trees: Sequence[Sequence[Node]]) -> list[Constraint]:
    """Extract one LCA constraint for every inner edge of every tree."""
    result: list[Constraint] = []
    for tree in trees:
        outermost: dict[int, tuple[int, int]] = {}
        for i in postorder(tree):
            node = tree[i]
            if is_leaf(node):
                outermost[i] = (i, i)
            else:
                outermost[i] = (outermost[node.lchild][0], outermost[node.rchild][1])

        for i in preorder(tree):
            node = tree[i]
            if is_leaf(node):
                continue
            lchild, rchild = node.lchild, node.rchild
            leftmost = tree[outermost[i][0]].taxon
            left_rightmost = tree[outermost[lchild][1]].taxon
            right_leftmost = tree[outermost[rchild][0]].taxon
            rightmost = tree[outermost[i][1]].taxon
            if not is_leaf(tree[lchild]):
                result.append(Constraint(left_rightmost, leftmost, rightmost))
            if not is_leaf(tree[rchild]):
                result.append(Constraint(right_leftmost, rightmost, leftmost))
    return result


def deduplicate_constraints(constraints: list[Constraint]) -> int:
    """Normalise, sort and deduplicate the list in place; return how many were removed."""
    normalised = {
        Constraint(min(c.left, c.shared), max(c.left, c.shared), c.right) for c in constraints
    }
    removed = len(constraints) - len(normalised)
    constraints[:] = sorted(normalised)
    return removed
"""Compressed representation of many trees sharing structure."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto


class MultitreeNodeType(Enum):
    """The kinds of multitree nodes."""

    BASE_SINGLE_LEAF = auto()
    BASE_TWO_LEAVES = auto()
    BASE_UNCONSTRAINED = auto()
    INNER_NODE = auto()
    ALTERNATIVE_ARRAY = auto()
    UNEXPLORED = auto()


@dataclass(eq=False)
class MultitreeNode:
    """A multitree node.

    ``leaves`` holds the leaf indices of leaf, unconstrained and unexplored
    nodes; ``left`` and ``right`` the subtrees of inner nodes; and
    ``alternatives`` the choices of an alternative array.
    """

    kind: MultitreeNodeType
    num_leaves: int
    num_trees: int
    leaves: tuple[int, ...] = ()
    left: MultitreeNode | None = None
    right: MultitreeNode | None = None
    alternatives: list[MultitreeNode] = field(default_factory=list)


def count_unrooted_trees(num_leaves: int) -> int:
    """Number of rooted binary trees on ``num_leaves`` labelled leaves.

    This equals the number of unrooted binary trees with one leaf more.
    """
    result = 1
    for k in range(3, 2 * num_leaves - 2, 2):
        result *= k
    return result


def single_leaf(leaf: int) -> MultitreeNode:
    """A subtree made of one leaf."""
    return MultitreeNode(MultitreeNodeType.BASE_SINGLE_LEAF, 1, 1, leaves=(leaf,))


def two_leaves(left: int, right: int) -> MultitreeNode:
    """A cherry of two leaves."""
    return MultitreeNode(MultitreeNodeType.BASE_TWO_LEAVES, 2, 1, leaves=(left, right))


def unconstrained(leaves: Iterable[int]) -> MultitreeNode:
    """Every possible subtree on the given leaves."""
    leaf_tuple = tuple(leaves)
    return MultitreeNode(
        MultitreeNodeType.BASE_UNCONSTRAINED,
        len(leaf_tuple),
        count_unrooted_trees(len(leaf_tuple)),
        leaves=leaf_tuple,
    )


def inner_node(left: MultitreeNode, right: MultitreeNode) -> MultitreeNode:
    """Every combination of a left and a right subtree."""
    return MultitreeNode(
        MultitreeNodeType.INNER_NODE,
        left.num_leaves + right.num_leaves,
        left.num_trees * right.num_trees,
        left=left,
        right=right,
    )


def alternative_array(num_leaves: int) -> MultitreeNode:
    """An empty list of alternatives, each on ``num_leaves`` leaves."""
    return MultitreeNode(MultitreeNodeType.ALTERNATIVE_ARRAY, num_leaves, 0)


def unexplored(leaves: Iterable[int]) -> MultitreeNode:
    """A subtree on the given leaves that was never explored."""
    leaf_tuple = tuple(leaves)
    return MultitreeNode(MultitreeNodeType.UNEXPLORED, len(leaf_tuple), 0, leaves=leaf_tuple)


def format_multitree(node: MultitreeNode, names: Sequence[str]) -> str:
    """Render a multitree in extended Newick form.

    Alternatives are separated by ``|``, unconstrained leaf sets are written
    as ``{a,b,c}`` and unexplored ones as ``[a,b,c]``.
    """
    out: list[str] = []
    stack: list[MultitreeNode | str] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
            continue
        kind = item.kind
        if kind is MultitreeNodeType.BASE_SINGLE_LEAF:
            out.append(names[item.leaves[0]])
        elif kind is MultitreeNodeType.BASE_TWO_LEAVES:
            left, right = item.leaves
            out.append(f"({names[left]},{names[right]})")
        elif kind is MultitreeNodeType.BASE_UNCONSTRAINED:
            out.append("{" + ",".join(names[leaf] for leaf in item.leaves) + "}")
        elif kind is MultitreeNodeType.UNEXPLORED:
            out.append("[" + ",".join(names[leaf] for leaf in item.leaves) + "]")
        elif kind is MultitreeNodeType.INNER_NODE:
            stack.extend([")", item.right, ",", item.left, "("])
        else:
            pieces: list[MultitreeNode | str] = []
            for position, alternative in enumerate(item.alternatives):
                if position:
                    pieces.append("|")
                pieces.append(alternative)
            stack.extend(reversed(pieces))
    return "".join(out)
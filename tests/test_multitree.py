from terraphy.multitree import (
    MultitreeNodeType,
    alternative_array,
    count_unrooted_trees,
    format_multitree,
    inner_node,
    single_leaf,
    two_leaves,
    unconstrained,
    unexplored,
)

NAMES = ["a", "b", "c", "d"]


def test_count_unrooted_trees_known_values():
    assert count_unrooted_trees(3) == 3
    assert count_unrooted_trees(7) == 10395


def test_single_leaf():
    node = single_leaf(2)
    assert node.kind is MultitreeNodeType.BASE_SINGLE_LEAF
    assert (node.num_leaves, node.num_trees) == (1, 1)
    assert format_multitree(node, NAMES) == NAMES[2]


def test_two_leaves_counts():
    node = two_leaves(0, 3)
    assert node.leaves == (0, 3)
    assert (node.num_leaves, node.num_trees) == (2, 1)


def test_unconstrained_counts():
    node = unconstrained([0, 1, 2, 3])
    assert node.num_leaves == 4
    assert node.num_trees == count_unrooted_trees(4)


def test_inner_node_combines_counts():
    left = unconstrained([0, 1, 2])
    right = two_leaves(3, 4)
    node = inner_node(left, right)
    assert node.num_leaves == left.num_leaves + right.num_leaves
    assert node.num_trees == left.num_trees * right.num_trees
    assert node.left is left and node.right is right


def test_alternative_array_starts_empty():
    node = alternative_array(3)
    assert node.num_leaves == 3
    assert node.alternatives == []
    assert node.num_trees == 0


def test_unexplored_has_no_trees():
    node = unexplored([0, 2])
    assert node.num_trees == 0
    assert format_multitree(node, NAMES) == "[a,c]"


def test_format_composite():
    alt = alternative_array(3)
    alt.alternatives.append(inner_node(single_leaf(1), two_leaves(2, 3)))
    alt.alternatives.append(unconstrained([1, 2, 3]))
    root = inner_node(single_leaf(0), alt)
    assert format_multitree(root, NAMES) == "(a,(b,(c,d))|{b,c,d})"


def test_format_deep_chain_is_not_recursive():
    depth = 5000
    names = [str(i) for i in range(depth + 1)]
    node = single_leaf(0)
    for leaf in range(1, depth + 1):
        node = inner_node(single_leaf(leaf), node)
    text = format_multitree(node, names)
    assert text.count("(") == depth
    assert text.count(",") == depth
    assert node.num_leaves == depth + 1
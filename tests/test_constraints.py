from terraphy.constraints import Constraint, compute_constraints, deduplicate_constraints
from terraphy.trees import Node


def full_tree():
    return [
        Node(None, 4, 5, None),
        Node(2, None, None, 0),
        Node(4, 6, 1, None),
        Node(4, None, None, 1),
        Node(0, 2, 3, None),
        Node(0, None, None, 2),
        Node(2, None, None, 3),
    ]


def test_extraction_full_data():
    result = compute_constraints([full_tree()])
    assert result == [Constraint(1, 3, 2), Constraint(0, 3, 1)]


def test_extraction_example():
    # The two pruned subtrees of the example: taxa {0,1,2} and {0,2,3}.
    first = [
        Node(None, 1, 4, None),
        Node(0, 2, 3, None),
        Node(1, None, None, 0),
        Node(1, None, None, 1),
        Node(0, None, None, 2),
    ]
    second = [
        Node(None, 1, 4, None),
        Node(0, 2, 3, None),
        Node(1, None, None, 3),
        Node(1, None, None, 0),
        Node(0, None, None, 2),
    ]
    result = compute_constraints([first, second])
    assert result == [Constraint(1, 0, 2), Constraint(0, 3, 2)]


def test_extraction_of_leaf_only_edges_is_empty():
    cherry = [Node(None, 1, 2, None), Node(0, None, None, 0), Node(0, None, None, 1)]
    assert compute_constraints([cherry]) == []


def test_deduplication():
    dup = [
        Constraint(0, 1, 2),
        Constraint(0, 1, 2),
        Constraint(3, 4, 5),
        Constraint(4, 3, 5),
        Constraint(7, 6, 8),
        Constraint(6, 7, 8),
    ]
    num = deduplicate_constraints(dup)
    assert num == 3
    assert dup == [Constraint(0, 1, 2), Constraint(3, 4, 5), Constraint(6, 7, 8)]


def test_deduplication_without_duplicates():
    cs = [Constraint(1, 3, 2), Constraint(0, 3, 1)]
    assert deduplicate_constraints(cs) == 0
    assert cs == [Constraint(0, 3, 1), Constraint(1, 3, 2)]


def test_str_and_named():
    c = Constraint(0, 1, 2)
    assert str(c) == "lca(0,1) < lca(1,2)"
    assert c.named(["a", "b", "c"]) == "lca(a,b) < lca(b,c)"
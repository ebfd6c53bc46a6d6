# terraphy

Building blocks for working with phylogenetic terraces. A terrace is the set
of binary trees that a missing-data matrix cannot tell apart. The matrix
records which taxa are present in each partition.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `terraphy.trees`

The rooted tree model. A tree is a list of `Node` objects with the root at
index 0. Each `Node` has the fields `parent`, `lchild`, `rchild` and `taxon`.
An absent value is `None`.

The module also provides:

- `is_leaf` and `is_root`.
- `preorder` and `postorder`, which are generators of node indices.
- `num_leaves_from_nodes` and `num_nodes_from_leaves`.

### `terraphy.bitmatrix`

`Bitmatrix` is the species × partition occurrence matrix. It starts with
every entry false. Its methods are:

- `rows`, `cols`, `get` and `set`.
- `row_or`, which writes the OR of two rows into a third.
- `get_cols`, which returns a new matrix holding only the given columns.

Two matrices compare equal when their dimensions and contents match.

### `terraphy.constraints`

`Constraint(left, shared, right)` stands for
`lca(left, shared) < lca(shared, right)`. It prints in that form, and
`named(names)` prints it with taxon names.

- `compute_constraints(trees)` extracts one constraint per inner edge of each
  tree.
- `deduplicate_constraints(constraints)` works in place on the list. It
  normalises the order of `left` and `shared`, sorts the list, removes
  duplicates and returns how many were removed.

### `terraphy.checked`

Counters limited to 64 unsigned bits:

- `ClampedUint` saturates at the maximum. `is_clamped()` then reports true,
  and `str()` prefixes the value with `>= `.
- `OverflowExceptUint` raises `TreeCountOverflowError` when it would
  overflow.

Arbitrary-precision counts simply use `int`.

### `terraphy.bipartitions`

`Bipartitions(leaves, sets)` numbers every split of a family of leaf groups
into two non-empty sides. The numbers run from `begin_bip()` up to, but not
including, `end_bip()`. `num_bip()` gives their count.

- `get_first_set(bip)` returns one side of a split.
- `get_both_sets(bip)` returns both sides.
- `flip_set(subset)` returns the complement of `subset` within the leaves.

Constructing a `Bipartitions` raises `TreeCountOverflowError` when there are
64 or more groups.

### `terraphy.multitree`

A compressed representation of many trees. Its contents:

- `MultitreeNode` and `MultitreeNodeType`.
- Constructors: `single_leaf`, `two_leaves`, `unconstrained`, `inner_node`,
  `alternative_array` and `unexplored`.
- `count_unrooted_trees(n)`, the number of rooted binary trees on `n`
  labelled leaves.

`format_multitree(node, names)` renders a multitree in an extended Newick
form:

- `A|B` means "either A or B".
- `{a,b,c}` means "any binary tree on a, b and c".
- `[a,b,c]` marks leaves that were never explored.

### `terraphy.variants`

Callbacks that define what is computed while supertrees are enumerated. The
abstract base class is `Callback`.

- `CountCallback(number=int)` counts trees.
- `ClampedCountCallback` counts with `ClampedUint` and stops once the count
  saturates.
- `CheckCallback` computes a quick lower bound on the number of trees.
- `MultitreeCallback` builds a multitree. `total_size()` reports the
  approximate number of bytes it has used.
- `MemoryLimitedMultitreeCallback(limit)` builds a multitree and stops once
  `limit` bytes are exceeded. `has_hit_memory_limit()` then reports true.
- `TimeoutDecorator(inner, timeout_seconds)` wraps any callback with a time
  limit and reports `has_timed_out()`.

### `terraphy.advanced`

- `SupertreeData` holds the constraints, the number of leaves and the root
  taxon.
- `ExecutionLimits` holds a time limit and a memory limit, both unlimited by
  default.
- `find_comprehensive_taxon(matrix)` returns the first row that is set in
  every column, or `None` if there is no such row.
- `maximum_comprehensive_columnset(matrix)` keeps only the columns of the
  fullest row, so that row becomes comprehensive.

## Example

```python
from terraphy.bitmatrix import Bitmatrix
from terraphy.advanced import find_comprehensive_taxon, maximum_comprehensive_columnset

matrix = Bitmatrix(4, 2)
for row, col in [(0, 0), (0, 1), (1, 0), (2, 1), (3, 1)]:
    matrix.set(row, col, True)

print(find_comprehensive_taxon(matrix))   # 0: taxon 0 occurs in every partition
reduced = maximum_comprehensive_columnset(matrix)
print(reduced.rows(), reduced.cols())     # 4 2
```

## What the package does not do

The package provides the pieces of a terrace analysis, not a finished tool.
It does not include:

- A Newick parser or a reader for occurrence-matrix files.
- Subtree extraction or rerooting.
- The recursive engine that drives the callbacks in `terraphy.variants`.
- Functions that count, check or print a whole terrace from a tree and a
  matrix.
- A command-line program.

## Errors

Every error the package raises derives from `terraphy.errors.TerraceError`:

- `BadInputError`: its `kind` is a `BadInputErrorType`.
- `NoUsableRootError`
- `FileOpenError`
- `TreeCountOverflowError`
- `MultitreeUnexploredError`
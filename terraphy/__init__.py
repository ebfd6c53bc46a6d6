"""Building blocks for phylogenetic terraces: trees, occurrence matrices, LCA constraints, counters, bipartitions, multitrees and enumeration callbacks."""

__version__ = "0.1.0"
"""Enumeration of the bipartitions of a partitioned leaf set."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Sequence

from .errors import TreeCountOverflowError

WORD_BITS = 64
"""Width of the machine word that indexes bipartitions."""


class Bipartitions:
    """All ways of splitting a family of leaf sets into two non-empty groups.

    ``leaves`` holds the leaf indices; they are taken in increasing order.
    ``sets`` gives, for the leaf at each position of that order, the
    representative of the set it belongs to.  Leaves that share a
    representative always end up on the same side of a bipartition.

    Bipartitions are numbered from :meth:`begin_bip` (inclusive) to
    :meth:`end_bip` (exclusive).  The set with the smallest representative
    always lies in the second group, so every split is listed exactly once.
    """

    def __init__(self, leaves: Iterable[int], sets: Sequence[Hashable]) -> None:
        self.leaves: tuple[int, ...] = tuple(sorted(set(leaves)))
        self.sets: tuple[Hashable, ...] = tuple(sets)
        if not self.leaves:
            raise ValueError("cannot bipartition an empty leaf set")
        if len(self.sets) != len(self.leaves):
            raise ValueError(
                f"{len(self.sets)} set representatives given for {len(self.leaves)} leaves"
            )
        representatives = sorted(set(self.sets))
        if len(representatives) >= WORD_BITS:
            raise TreeCountOverflowError("Huge terrace encountered")
        rank_of = {rep: rank for rank, rep in enumerate(representatives)}
        self._ranks = tuple(rank_of[rep] for rep in self.sets)
        self._leaf_set = frozenset(self.leaves)
        self._end = 1 << (len(representatives) - 1)

    @staticmethod
    def _in_left_partition(bip: int, rank: int) -> bool:
        return rank > 0 and (bip >> (rank - 1)) & 1 == 1

    def begin_bip(self) -> int:
        """Index of the first bipartition."""
        return 1

    def end_bip(self) -> int:
        """Index one past the last bipartition."""
        return self._end

    def num_bip(self) -> int:
        """Number of bipartitions."""
        return self._end - 1

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.begin_bip(), self.end_bip()))

    def get_first_set(self, bip: int) -> frozenset[int]:
        """Return the first leaf group of bipartition ``bip``."""
        return frozenset(
            leaf
            for leaf, rank in zip(self.leaves, self._ranks)
            if self._in_left_partition(bip, rank)
        )

    def flip_set(self, subset: Iterable[int]) -> frozenset[int]:
        """Return the complement of ``subset`` within the leaves."""
        return self._leaf_set.symmetric_difference(subset)

    def get_both_sets(self, bip: int) -> tuple[frozenset[int], frozenset[int]]:
        """Return both leaf groups of bipartition ``bip``."""
        first = self.get_first_set(bip)
        return first, self.flip_set(first)

    def __repr__(self) -> str:
        return f"Bipartitions(leaves={self.leaves!r}, sets={self.sets!r})"
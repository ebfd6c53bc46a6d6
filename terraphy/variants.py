"""Callbacks that steer the supertree enumeration and build its result.

A callback decides what is computed while the enumeration recurses over leaf
sets.  Results of different bipartitions are *accumulated*, results of the
left and right subtrees are *combined*.  Hooks allow returning early or
stopping an iteration once enough is known.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from .bipartitions import Bipartitions
from .checked import INDEX_MAX, CheckedUint, ClampedUint
from .constraints import Constraint
from .multitree import (
    MultitreeNode,
    alternative_array,
    inner_node,
    single_leaf,
    two_leaves,
    unconstrained,
    unexplored,
)

NODE_BYTES = 48
"""Memory charged for one multitree node."""

LEAF_BYTES = 8
"""Memory charged for one stored leaf index."""


class Callback(ABC):
    """Controls one run of the supertree enumeration."""

    def enter(self, leaves: Iterable[int]) -> None:
        """Called when a recursive call on ``leaves`` begins."""

    def exit(self, value: Any) -> Any:
        """Called when a recursive call finishes; returns the value to pass upwards."""
        return value

    @abstractmethod
    def base_one_leaf(self, leaf: int) -> Any:
        """Result for a single leaf."""

    @abstractmethod
    def base_two_leaves(self, left: int, right: int) -> Any:
        """Result for two leaves."""

    @abstractmethod
    def base_unconstrained(self, leaves: Iterable[int]) -> Any:
        """Result for several leaves without any constraint."""

    @abstractmethod
    def null_result(self) -> Any:
        """An empty result."""

    def fast_return(self, bipartitions: Bipartitions) -> bool:
        """True to skip iterating over the bipartitions of the current call."""
        return False

    @abstractmethod
    def fast_return_value(self, bipartitions: Bipartitions) -> Any:
        """Result to return when :meth:`fast_return` is true."""

    def begin_iteration(
        self,
        bipartitions: Bipartitions,
        constraint_occurrences: Any,
        constraints: Sequence[Constraint],
    ) -> Any:
        """Initial accumulator before iterating over the bipartitions."""
        return self.null_result()

    def continue_iteration(self, accumulator: Any) -> bool:
        """True while the iteration over bipartitions should go on."""
        return True

    def step_iteration(self, bipartitions: Bipartitions, bip: int) -> None:
        """Called when an iteration step begins."""

    def finish_iteration(self) -> None:
        """Called when the last iteration step has finished."""

    def left_subcall(self) -> None:
        """Called before descending into the left subset."""

    def right_subcall(self) -> None:
        """Called before descending into the right subset."""

    @abstractmethod
    def accumulate(self, accumulator: Any, value: Any) -> Any:
        """Add the result of one bipartition to the accumulator."""

    @abstractmethod
    def combine(self, left: Any, right: Any) -> Any:
        """Combine the results of the left and right subcalls."""


def _count_rooted_trees(number: Callable[[int], Any], num_leaves: int) -> Any:
    result = number(1)
    for factor in range(3, 2 * num_leaves - 2, 2):
        result = result * number(factor)
    return result


class CountCallback(Callback):
    """Counts all trees using the given number type (``int`` by default)."""

    def __init__(self, number: Callable[[int], Any] = int) -> None:
        self.number = number

    def base_one_leaf(self, leaf: int) -> Any:
        return self.number(1)

    def base_two_leaves(self, left: int, right: int) -> Any:
        return self.number(1)

    def base_unconstrained(self, leaves: Iterable[int]) -> Any:
        return _count_rooted_trees(self.number, len(tuple(leaves)))

    def null_result(self) -> Any:
        return self.number(0)

    def fast_return_value(self, bipartitions: Bipartitions) -> Any:
        # The number of bipartitions is a lower bound on the number of trees.
        return self.number(bipartitions.num_bip())

    def accumulate(self, accumulator: Any, value: Any) -> Any:
        return accumulator + value

    def combine(self, left: Any, right: Any) -> Any:
        return left * right


class ClampedCountCallback(CountCallback):
    """Counts trees with a saturating counter and stops once it saturates."""

    def __init__(self) -> None:
        super().__init__(ClampedUint)

    def continue_iteration(self, accumulator: CheckedUint) -> bool:
        return not accumulator.is_clamped()


class CheckCallback(Callback):
    """Computes a quick lower bound on the number of trees.

    Enough to decide whether a tree lies on a terrace.
    """

    def base_one_leaf(self, leaf: int) -> int:
        return 1

    def base_two_leaves(self, left: int, right: int) -> int:
        return 1

    def base_unconstrained(self, leaves: Iterable[int]) -> int:
        return 2

    def null_result(self) -> int:
        return 0

    def fast_return(self, bipartitions: Bipartitions) -> bool:
        return bipartitions.num_bip() > 1

    def fast_return_value(self, bipartitions: Bipartitions) -> int:
        return bipartitions.num_bip()

    def continue_iteration(self, accumulator: int) -> bool:
        return accumulator < 2

    def accumulate(self, accumulator: int, value: int) -> int:
        return accumulator + value

    def combine(self, left: int, right: int) -> int:
        return left * right


class TimeoutDecorator(Callback):
    """Wraps a callback and stops the enumeration once a time limit has passed."""

    def __init__(self, inner: Callback, timeout_seconds: int = INDEX_MAX) -> None:
        self.inner = inner
        self.timeout_seconds = timeout_seconds
        self._start = time.monotonic()
        self._timed_out = False

    def _check_timed_out(self) -> bool:
        elapsed = int(time.monotonic() - self._start)
        if elapsed > self.timeout_seconds:
            self._timed_out = True
        return self._timed_out

    def has_timed_out(self) -> bool:
        """True once the time limit was found to be exceeded."""
        return self._timed_out

    def fast_return(self, bipartitions: Bipartitions) -> bool:
        return self.inner.fast_return(bipartitions) or self._check_timed_out()

    def continue_iteration(self, accumulator: Any) -> bool:
        return self.inner.continue_iteration(accumulator) and not self._check_timed_out()

    def enter(self, leaves: Iterable[int]) -> None:
        self.inner.enter(leaves)

    def exit(self, value: Any) -> Any:
        return self.inner.exit(value)

    def base_one_leaf(self, leaf: int) -> Any:
        return self.inner.base_one_leaf(leaf)

    def base_two_leaves(self, left: int, right: int) -> Any:
        return self.inner.base_two_leaves(left, right)

    def base_unconstrained(self, leaves: Iterable[int]) -> Any:
        return self.inner.base_unconstrained(leaves)

    def null_result(self) -> Any:
        return self.inner.null_result()

    def fast_return_value(self, bipartitions: Bipartitions) -> Any:
        return self.inner.fast_return_value(bipartitions)

    def begin_iteration(
        self,
        bipartitions: Bipartitions,
        constraint_occurrences: Any,
        constraints: Sequence[Constraint],
    ) -> Any:
        return self.inner.begin_iteration(bipartitions, constraint_occurrences, constraints)

    def step_iteration(self, bipartitions: Bipartitions, bip: int) -> None:
        self.inner.step_iteration(bipartitions, bip)

    def finish_iteration(self) -> None:
        self.inner.finish_iteration()

    def left_subcall(self) -> None:
        self.inner.left_subcall()

    def right_subcall(self) -> None:
        self.inner.right_subcall()

    def accumulate(self, accumulator: Any, value: Any) -> Any:
        return self.inner.accumulate(accumulator, value)

    def combine(self, left: Any, right: Any) -> Any:
        return self.inner.combine(left, right)

    def __getattr__(self, name: str) -> Any:
        if name == "inner":
            raise AttributeError(name)
        return getattr(self.inner, name)


class MultitreeCallback(Callback):
    """Builds a multitree describing every tree on the terrace."""

    def __init__(self) -> None:
        self._node_count = 0
        self._leaf_count = 0
        self._node_memory_limit: int | None = None

    def _charge_nodes(self, count: int) -> None:
        if self._node_memory_limit is not None:
            if (self._node_count + count) * NODE_BYTES > self._node_memory_limit:
                raise MemoryError("multitree node memory limit exceeded")
        self._node_count += count

    def _charge_leaves(self, leaves: Iterable[int]) -> tuple[int, ...]:
        leaf_tuple = tuple(sorted(leaves))
        self._leaf_count += len(leaf_tuple)
        return leaf_tuple

    def _set_node_memory_limit(self, limit: int) -> None:
        self._node_memory_limit = limit

    def total_size(self) -> int:
        """Approximate memory in bytes used by the nodes and leaves built so far."""
        return self._node_count * NODE_BYTES + self._leaf_count * LEAF_BYTES

    def base_one_leaf(self, leaf: int) -> MultitreeNode:
        self._node_count += 1
        return single_leaf(leaf)

    def base_two_leaves(self, left: int, right: int) -> MultitreeNode:
        self._node_count += 1
        return two_leaves(left, right)

    def base_unconstrained(self, leaves: Iterable[int]) -> MultitreeNode:
        self._node_count += 1
        return unconstrained(self._charge_leaves(leaves))

    def null_result(self) -> None:
        return None

    def fast_return_value(self, bipartitions: Bipartitions) -> MultitreeNode:
        self._node_count += 1
        return unexplored(self._charge_leaves(bipartitions.leaves))

    def begin_iteration(
        self,
        bipartitions: Bipartitions,
        constraint_occurrences: Any,
        constraints: Sequence[Constraint],
    ) -> MultitreeNode:
        self._node_count += 1
        try:
            # Reserving room for every alternative may fail for huge bipartition
            # counts; an unexplored node is returned instead of failing outright.
            self._charge_nodes(bipartitions.num_bip())
        except MemoryError:
            return unexplored(self._charge_leaves(bipartitions.leaves))
        return alternative_array(len(bipartitions.leaves))

    def accumulate(self, accumulator: MultitreeNode, value: MultitreeNode) -> MultitreeNode:
        if accumulator.num_leaves != value.num_leaves:
            raise ValueError("alternatives must span the same number of leaves")
        accumulator.num_trees += value.num_trees
        accumulator.alternatives.append(value)
        return accumulator

    def combine(self, left: MultitreeNode, right: MultitreeNode) -> MultitreeNode:
        self._node_count += 1
        return inner_node(left, right)


class MemoryLimitedMultitreeCallback(MultitreeCallback):
    """A multitree builder that stops once a memory limit has been passed."""

    def __init__(self, limit: int) -> None:
        super().__init__()
        self.memory_limit = limit
        self._hit_memory_limit = False
        # A rough bound: leaves should take far less room than nodes.
        self._set_node_memory_limit(limit)

    def _check_memory_limit(self) -> bool:
        if self.total_size() > self.memory_limit:
            self._hit_memory_limit = True
        return self._hit_memory_limit

    def fast_return(self, bipartitions: Bipartitions) -> bool:
        return super().fast_return(bipartitions) or self._check_memory_limit()

    def continue_iteration(self, accumulator: Any) -> bool:
        return super().continue_iteration(accumulator) and not self._check_memory_limit()

    def has_hit_memory_limit(self) -> bool:
        """True once the memory limit was found to be exceeded."""
        return self._hit_memory_limit
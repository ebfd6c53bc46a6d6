"""Fixed-width unsigned counters that clamp or raise on overflow.

Arbitrary precision counts need no special type: Python's ``int`` serves.
"""

from __future__ import annotations

from .errors import TreeCountOverflowError

INDEX_MAX = 2**64 - 1
"""Largest value of the 64-bit index type."""


class CheckedUint:
    """A 64-bit unsigned counter; subclasses decide what overflow does."""

    __slots__ = ("_value",)
    _raises = False

    def __init__(self, value: int = 0) -> None:
        if not 0 <= value <= INDEX_MAX:
            raise ValueError(f"value {value} does not fit in 64 unsigned bits")
        self._value = int(value)

    def _operand(self, other: object) -> int | None:
        if isinstance(other, CheckedUint):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def _finish(self, result: int, what: str) -> CheckedUint:
        if result > INDEX_MAX:
            if self._raises:
                raise TreeCountOverflowError(f"{what} overflowed")
            result = INDEX_MAX
        return type(self)(result)

    def __add__(self, other: object) -> CheckedUint:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._finish(self._value + operand, "Addition")

    __radd__ = __add__

    def __mul__(self, other: object) -> CheckedUint:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._finish(self._value * operand, "Multiplication")

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._value == operand

    def __hash__(self) -> int:
        return hash(self._value)

    def is_clamped(self) -> bool:
        """True if the value sits at the maximum, i.e. may have overflowed."""
        return self._value == INDEX_MAX

    def value(self) -> int:
        """The stored value."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        prefix = ">= " if self.is_clamped() else ""
        return f"{prefix}{self._value}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"


class ClampedUint(CheckedUint):
    """Counter that saturates at the maximum on overflow."""

    __slots__ = ()
    _raises = False


class OverflowExceptUint(CheckedUint):
    """Counter that raises :class:`TreeCountOverflowError` on overflow."""

    __slots__ = ()
    _raises = True
"""A boolean matrix of taxa (rows) by partitions (columns)."""

from __future__ import annotations

from collections.abc import Sequence


class Bitmatrix:
    """A rows-by-columns matrix of booleans, initially all false."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self._rows = rows
        self._cols = cols
        self._data = [[False] * cols for _ in range(rows)]

    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"entry ({row}, {col}) outside {self._rows}x{self._cols} matrix")

    def get(self, row: int, col: int) -> bool:
        """Return the entry at (row, col)."""
        self._check(row, col)
        return self._data[row][col]

    def set(self, row: int, col: int, val: bool) -> None:
        """Set the entry at (row, col)."""
        self._check(row, col)
        self._data[row][col] = bool(val)

    def row_or(self, in1: int, in2: int, out: int) -> None:
        """Write the element-wise OR of rows ``in1`` and ``in2`` into row ``out``."""
        for row in (in1, in2, out):
            if not 0 <= row < self._rows:
                raise IndexError(f"row {row} outside matrix with {self._rows} rows")
        self._data[out] = [a or b for a, b in zip(self._data[in1], self._data[in2])]

    def get_cols(self, cols: Sequence[int]) -> Bitmatrix:
        """Return a new matrix holding only the given columns, in the given order."""
        if len(cols) > self._cols:
            raise ValueError("more columns requested than the matrix has")
        result = Bitmatrix(self._rows, len(cols))
        for row in range(self._rows):
            for j, col in enumerate(cols):
                result.set(row, j, self.get(row, col))
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmatrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._data == other._data
        )

    def __repr__(self) -> str:
        return f"Bitmatrix({self._rows}, {self._cols})"
"""Data describing a terrace and helpers on occurrence matrices."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bitmatrix import Bitmatrix
from .checked import INDEX_MAX
from .constraints import Constraint


@dataclass
class SupertreeData:
    """What is needed to enumerate every supertree equivalent to a tree.

    ``root`` is the comprehensive taxon placed directly below the root of
    all supertrees.
    """

    constraints: list[Constraint] = field(default_factory=list)
    num_leaves: int = 0
    root: int = 0


@dataclass
class ExecutionLimits:
    """Limits after whose crossing an enumeration is interrupted."""

    time_limit_seconds: int = INDEX_MAX
    mem_limit_bytes: int = INDEX_MAX


def find_comprehensive_taxon(data: Bitmatrix) -> int | None:
    """Return the first row that is set in every column, or ``None``."""
    for row in range(data.rows()):
        if all(data.get(row, col) for col in range(data.cols())):
            return row
    return None


def maximum_comprehensive_columnset(data: Bitmatrix) -> Bitmatrix:
    """Keep only the columns of the fullest row, so that row becomes comprehensive.

    On ties the first fullest row wins.
    """
    if data.rows() == 0:
        return Bitmatrix(0, 0)
    row_counts = [
        sum(data.get(row, col) for col in range(data.cols())) for row in range(data.rows())
    ]
    best_row = row_counts.index(max(row_counts))
    columns = [col for col in range(data.cols()) if data.get(best_row, col)]
    return data.get_cols(columns)
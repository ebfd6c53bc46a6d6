"""Exceptions raised while reading input and exploring terraces."""

from __future__ import annotations

from enum import Enum


class BadInputErrorType(Enum):
    """The kinds of malformed input that can be reported."""

    NWK_MISMATCHED_QUOTES = "nwk_mismatched_quotes"
    NWK_MISMATCHED_PARENTHESES = "nwk_mismatched_parentheses"
    NWK_TAXON_UNKNOWN = "nwk_taxon_unknown"
    NWK_TAXON_DUPLICATE = "nwk_taxon_duplicate"
    NWK_MULTIFURCATING = "nwk_multifurcating"
    NWK_MALFORMED = "nwk_malformed"
    NWK_TREE_TRIVIAL = "nwk_tree_trivial"
    BITMATRIX_NAME_DUPLICATE = "bitmatrix_name_duplicate"
    BITMATRIX_NAME_EMPTY = "bitmatrix_name_empty"
    BITMATRIX_SIZE_INVALID = "bitmatrix_size_invalid"
    BITMATRIX_MALFORMED = "bitmatrix_malformed"
    TREE_MISMATCHING_SIZE = "tree_mismatching_size"
    TREE_UNNAMED_LEAF = "tree_unnamed_leaf"

    @property
    def description(self) -> str:
        """Human-readable description of this kind of error."""
        return _MESSAGES.get(self, "Unknown error")


_MESSAGES = {
    BadInputErrorType.NWK_MISMATCHED_QUOTES: "Mismatching quotes in nwk tree",
    BadInputErrorType.NWK_MISMATCHED_PARENTHESES: "Mismatching parentheses in nwk tree",
    BadInputErrorType.NWK_TAXON_UNKNOWN: "Unknown taxon in nwk tree",
    BadInputErrorType.NWK_TAXON_DUPLICATE: "Duplicate taxon in nwk tree",
    BadInputErrorType.NWK_MULTIFURCATING: "Only bifurcating trees are supported",
    BadInputErrorType.NWK_MALFORMED: "Malformed nwk tree",
    BadInputErrorType.NWK_TREE_TRIVIAL: "Less than 4 taxa in nwk tree",
    BadInputErrorType.BITMATRIX_NAME_DUPLICATE: "Duplicate taxon in bitmatrix ",
    BadInputErrorType.BITMATRIX_NAME_EMPTY: "Empty taxon name in bitmatrix",
    BadInputErrorType.BITMATRIX_SIZE_INVALID: (
        "Mismatching number of rows/columns between bitmatrix header and content"
    ),
    BadInputErrorType.BITMATRIX_MALFORMED: "Malformed bitmatrix",
    BadInputErrorType.TREE_MISMATCHING_SIZE: "Mismatching size between tree and bitmatrix",
    BadInputErrorType.TREE_UNNAMED_LEAF: "Unnamed leaf found in tree",
}


class TerraceError(Exception):
    """Base class of all errors raised by this package."""


class BadInputError(TerraceError, ValueError):
    """Raised when the input to a function is malformed."""

    def __init__(self, kind: BadInputErrorType, message: str | None = None) -> None:
        text = kind.description
        if message is not None:
            text = f"{text}\n{message}"
        super().__init__(text)
        self.kind = kind


class NoUsableRootError(TerraceError):
    """Raised when a dataset has no comprehensive taxon."""


class FileOpenError(TerraceError, OSError):
    """Raised when a file could not be opened."""


class TreeCountOverflowError(TerraceError, OverflowError):
    """Raised when a terrace is too large to explore or a count overflows."""


class MultitreeUnexploredError(TerraceError, RuntimeError):
    """Raised when iterating a multitree reaches a node that was never explored."""

    def __init__(self) -> None:
        super().__init__("multitree_iterator hit unexplored node")
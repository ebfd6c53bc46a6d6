import pytest

from terraphy.errors import (
    BadInputError,
    BadInputErrorType,
    MultitreeUnexploredError,
    NoUsableRootError,
    TerraceError,
    TreeCountOverflowError,
)


def test_bad_input_message_without_detail():
    err = BadInputError(BadInputErrorType.NWK_MALFORMED)
    assert str(err) == "Malformed nwk tree"
    assert err.kind is BadInputErrorType.NWK_MALFORMED


def test_bad_input_message_with_detail():
    err = BadInputError(BadInputErrorType.NWK_MULTIFURCATING, "at node 3")
    assert str(err) == "Only bifurcating trees are supported\nat node 3"


@pytest.mark.parametrize("kind", list(BadInputErrorType))
def test_every_kind_has_a_description(kind):
    err = BadInputError(kind)
    assert str(err) == kind.description
    assert str(err) != "Unknown error"


def test_descriptions_are_distinct():
    messages = [str(BadInputError(kind)) for kind in BadInputErrorType]
    assert len(set(messages)) == len(messages)


def test_bad_input_is_value_error():
    err = BadInputError(BadInputErrorType.TREE_MISMATCHING_SIZE)
    assert isinstance(err, ValueError)
    assert err.kind is BadInputErrorType.TREE_MISMATCHING_SIZE
    assert str(err) == "Mismatching size between tree and bitmatrix"


def test_unexplored_message():
    assert str(MultitreeUnexploredError()) == "multitree_iterator hit unexplored node"


def test_overflow_error_is_caught_as_overflow():
    err = TreeCountOverflowError("Huge terrace encountered")
    assert isinstance(err, OverflowError)
    assert isinstance(err, TerraceError)
    assert str(err) == "Huge terrace encountered"


def test_no_usable_root_caught_as_terrace_error():
    err = NoUsableRootError("No comprehensive taxon found")
    assert isinstance(err, TerraceError)
    assert str(err) == "No comprehensive taxon found"
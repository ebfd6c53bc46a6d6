import pytest

from terraphy.checked import INDEX_MAX, ClampedUint, OverflowExceptUint
from terraphy.errors import TreeCountOverflowError

MAX = 2**64 - 1


def test_index_max_is_clamp_point():
    assert ClampedUint(INDEX_MAX).value() == MAX
    assert ClampedUint(INDEX_MAX).is_clamped()
    assert not ClampedUint(INDEX_MAX - 1).is_clamped()


def test_clamped_uint():
    assert (ClampedUint(10) + ClampedUint(417)).value() == 10 + 417
    assert (ClampedUint(10) * ClampedUint(417)).value() == 10 * 417
    assert (ClampedUint(MAX) + ClampedUint(1)).is_clamped()
    assert (ClampedUint(MAX) + ClampedUint(1)).value() == MAX
    assert (ClampedUint(MAX // 2) * ClampedUint(3)).is_clamped()
    assert (ClampedUint(MAX // 2) * ClampedUint(3)).value() == MAX


def test_overflow_except_uint():
    assert (OverflowExceptUint(10) + OverflowExceptUint(417)).value() == 10 + 417
    assert (OverflowExceptUint(10) * OverflowExceptUint(417)).value() == 10 * 417
    with pytest.raises(TreeCountOverflowError):
        OverflowExceptUint(MAX) + OverflowExceptUint(1)
    with pytest.raises(TreeCountOverflowError):
        OverflowExceptUint(MAX // 2) * OverflowExceptUint(3)


def test_result_keeps_type():
    total = ClampedUint(2) + ClampedUint(3)
    assert type(total) is ClampedUint
    assert total.value() == 5
    product = OverflowExceptUint(2) * OverflowExceptUint(3)
    assert type(product) is OverflowExceptUint
    assert product.value() == 6


def test_equality_and_hash():
    assert ClampedUint(5) == ClampedUint(5)
    assert ClampedUint(5) == 5
    assert hash(ClampedUint(5)) == hash(ClampedUint(5))
    assert not (ClampedUint(5) == ClampedUint(6))


def test_str_marks_clamped():
    assert str(ClampedUint(42)) == "42"
    assert str(ClampedUint(MAX)) == f">= {MAX}"


def test_sum_works_with_plain_ints():
    total = sum([ClampedUint(1), ClampedUint(2), ClampedUint(3)])
    assert total.value() == 6


def test_rejects_out_of_range():
    with pytest.raises(ValueError):
        ClampedUint(-1)
    with pytest.raises(ValueError):
        ClampedUint(MAX + 1)
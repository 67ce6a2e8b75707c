"""Tests for fixed-width integer elements."""

from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pairmath.core.scalar import Int8, Int32, Int64, UInt8, UInt16, UInt64
from pairmath.geometry import Size

int32_values = st.integers(min_value=Int32.min_value, max_value=Int32.max_value)


def test_ranges_follow_width_and_signedness():
    assert (Int8.min_value, Int8.max_value) == (-128, 127)
    assert (UInt8.min_value, UInt8.max_value) == (0, 255)
    assert UInt16.max_value == 65535
    assert (Int64.min_value, Int64.max_value) == (-(2**63), 2**63 - 1)
    assert UInt64.max_value == 2**64 - 1


def test_construction_out_of_range_overflows():
    with pytest.raises(OverflowError, match="out of range for UInt8"):
        UInt8(256)
    with pytest.raises(OverflowError):
        UInt8(-1)


def test_construction_requires_integral_value():
    with pytest.raises(TypeError):
        Int8(1.5)  # type: ignore[arg-type]


def test_arithmetic_overflow_is_raised_not_wrapped():
    """CRITICAL: Results outside the range fail loudly.

    Why: Silent wraparound would corrupt pair components.
    """
    with pytest.raises(OverflowError):
        UInt8(200) + UInt8(100)
    with pytest.raises(OverflowError):
        UInt8(1) - UInt8(2)
    with pytest.raises(OverflowError):
        -Int8(-128)


def test_plain_int_operands_are_coerced():
    assert UInt8(200) + 55 == UInt8(255)
    assert Int8(6) * 2 == Int8(12)
    assert isinstance(UInt8(3) * 4, UInt8)


def test_plain_int_operands_are_range_checked():
    """CRITICAL: A literal that does not fit the type overflows before use."""
    with pytest.raises(OverflowError):
        UInt8(10) + (-5)
    with pytest.raises(OverflowError):
        UInt8(10) - 300
    with pytest.raises(OverflowError):
        Int8(2) * 200
    with pytest.raises(OverflowError):
        UInt8(10) / 1000
    with pytest.raises(OverflowError):
        Size(UInt8(10), UInt8(20)) / 1000


def test_plain_int_operands_on_the_left():
    assert 2 * Int8(3) == Int8(6)
    assert 3 - UInt8(1) == UInt8(2)
    assert 250 + UInt8(5) == UInt8(255)
    assert isinstance(2 * Int8(3), Int8)
    with pytest.raises(OverflowError):
        1 - UInt8(2)
    with pytest.raises(OverflowError):
        -1 + UInt8(2)


def test_comparisons_accept_any_int():
    assert Int8(1) <= Int8(1)
    assert Int8(2) > Int8(1)
    assert Int8(-1) >= -1
    assert UInt8(3) != 300
    assert UInt8(3) < 300
    assert UInt8(0) > -1
    assert sorted([UInt8(9), UInt8(2), UInt8(5)]) == [UInt8(2), UInt8(5), UInt8(9)]


def test_mixed_widths_are_rejected():
    with pytest.raises(TypeError):
        UInt8(1) + UInt16(1)  # type: ignore[operator]


def test_division_truncates_toward_zero():
    assert Int8(7) / 2 == 3
    assert Int8(-7) / 2 == -3
    assert Int8(7) / -2 == -3
    assert Int8(-7) / Int8(-2) == 3


def test_division_by_zero_propagates():
    with pytest.raises(ZeroDivisionError):
        UInt8(1) / 0


def test_signed_division_overflow():
    with pytest.raises(OverflowError):
        Int8(-128) / -1


def test_unsigned_has_no_negation():
    with pytest.raises(TypeError):
        -UInt8(1)  # type: ignore[operator]


def test_equality_hash_and_conversions():
    assert UInt8(3) == 3
    assert UInt8(3) != Int8(3)
    assert hash(UInt8(3)) == hash(3)
    assert int(Int8(-5)) == -5
    assert [10, 20, 30][UInt8(1)] == 20
    assert float(UInt8(2)) == 2.0
    assert repr(Int8(-3)) == "Int8(-3)"
    assert Int8(-1) < Int8(1)


@given(a=int32_values, b=int32_values.filter(lambda n: n != 0))
def test_division_matches_truncated_rational(a, b):
    """PROPERTY: a / b == trunc(a / b) computed exactly, whenever it fits."""
    expected = int(Fraction(a, b))
    if not Int32.min_value <= expected <= Int32.max_value:
        with pytest.raises(OverflowError):
            Int32(a) / Int32(b)
        return
    assert Int32(a) / Int32(b) == expected


@given(a=int32_values, b=int32_values)
def test_addition_matches_python_int_or_overflows(a, b):
    """PROPERTY: In-range sums are exact; out-of-range sums raise."""
    total = a + b
    if Int32.min_value <= total <= Int32.max_value:
        assert Int32(a) + Int32(b) == total
    else:
        with pytest.raises(OverflowError):
            Int32(a) + Int32(b)

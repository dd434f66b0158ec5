"""Tests for the fixed-width integer adapters."""

import pytest

from algebrakit.core.capabilities import EuclideanDomain, OrderedRing
from algebrakit.errors import DivisionByZero, Overflow, UnsupportedOperation
from algebrakit.primitives.integers import Int8, Int16, Int32, Int64, Int128

ALL_INTS = [Int8, Int16, Int32, Int64, Int128]


# =========================================================================
# 1. Range checking
# =========================================================================


@pytest.mark.parametrize("cls", ALL_INTS)
def test_bounds(cls):
    assert cls.MIN == -(2 ** (cls.BITS - 1))
    assert cls.MAX == 2 ** (cls.BITS - 1) - 1
    assert cls(cls.MIN).val == cls.MIN
    assert cls(cls.MAX).val == cls.MAX


@pytest.mark.parametrize("cls", ALL_INTS)
def test_construction_out_of_range(cls):
    with pytest.raises(Overflow):
        cls(cls.MAX + 1)
    with pytest.raises(Overflow):
        cls(cls.MIN - 1)


@pytest.mark.parametrize("cls", ALL_INTS)
def test_add_overflow(cls):
    with pytest.raises(Overflow):
        cls(cls.MAX) + 1
    with pytest.raises(OverflowError):
        cls(cls.MIN) - 1


@pytest.mark.parametrize("cls", ALL_INTS)
def test_negate_min_overflows(cls):
    with pytest.raises(Overflow):
        -cls(cls.MIN)


def test_mul_overflow():
    with pytest.raises(Overflow):
        Int32(2**16) * Int32(2**16)
    assert Int64(2**16) * Int64(2**16) == 2**32


def test_rejects_bool_and_float():
    with pytest.raises(TypeError):
        Int64(True)
    with pytest.raises(TypeError):
        Int64(1.0)


# =========================================================================
# 2. Ring behaviour
# =========================================================================


@pytest.mark.parametrize("cls", ALL_INTS)
def test_ring_identities(cls, rng):
    for _ in range(100):
        a = cls(rng.randint(cls.MIN // 2, cls.MAX // 2))
        assert a + cls.zero() == a
        assert a * cls.one() == a
        assert a - a == cls.zero()
        assert (a - a).is_zero()


@pytest.mark.parametrize("cls", ALL_INTS)
def test_negative_power_unsupported(cls):
    with pytest.raises(UnsupportedOperation):
        cls(2).power(-1)
    with pytest.raises(UnsupportedOperation):
        cls(1) ** -3


def test_power():
    assert Int32(2) ** 10 == 1024
    assert Int8(0) ** 0 == 1
    assert Int32(-2) ** 31 == -(2**31)
    assert Int128(3) ** 80 == 3**80
    with pytest.raises(Overflow):
        Int32(2) ** 31
    with pytest.raises(Overflow):
        Int8(2) ** 7


def test_mixed_widths_do_not_combine():
    with pytest.raises(TypeError):
        Int8(1) + Int16(1)
    assert Int8(1) != Int16(1)


def test_ordering():
    assert Int64(3) < Int64(5)
    assert Int64(3) < 5
    assert Int64(5) >= 5
    assert Int8(1) < 1000
    assert Int64(3).compare(Int64(5)) == -1
    assert Int64(5).compare(5) == 0
    assert Int64(7).compare(5) == 1
    assert sorted([Int16(3), Int16(-1), Int16(2)]) == [-1, 2, 3]


def test_capabilities():
    assert isinstance(Int32(1), OrderedRing)
    assert not isinstance(Int32(1), EuclideanDomain)
    assert isinstance(Int64(1), EuclideanDomain)
    assert isinstance(Int64(1), OrderedRing)


def test_value_protocol():
    assert int(Int64(-7)) == -7
    assert repr(Int64(-7)) == "Int64(-7)"
    assert str(Int8(5)) == "5"
    assert [10, 20, 30][Int8(1)] == 20
    assert len({Int64(4), Int64(4), Int64(5)}) == 2


# =========================================================================
# 3. Int64 as a Euclidean domain
# =========================================================================


def test_euc_size():
    assert Int64(-5).euc_size() == 5
    assert Int64(0).euc_size() == 0
    assert Int64(Int64.MAX).euc_size() == Int64.MAX


def test_euc_size_of_min_overflows():
    with pytest.raises(Overflow):
        Int64(Int64.MIN).euc_size()


@pytest.mark.parametrize(
    "a, b, q, r",
    [
        (7, 2, 3, 1),
        (-7, 2, -3, -1),
        (7, -2, -3, 1),
        (-7, -2, 3, -1),
        (6, 3, 2, 0),
        (0, 5, 0, 0),
    ],
)
def test_quotient_and_remainder_truncates(a, b, q, r):
    assert Int64(a).quotient_and_remainder(Int64(b)) == (q, r)
    assert divmod(Int64(a), Int64(b)) == (q, r)
    assert Int64(a) // b == q
    assert Int64(a) % b == r


def test_division_identity(rng):
    for _ in range(500):
        a = Int64(rng.randint(-10**12, 10**12))
        b = Int64(rng.choice([-1, 1]) * rng.randint(1, 10**6))
        q, r = a.quotient_and_remainder(b)
        assert a == b * q + r
        assert r.euc_size() < b.euc_size()


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        Int64(5).quotient_and_remainder(Int64(0))
    with pytest.raises(ZeroDivisionError):
        Int64(5) % 0


def test_min_divided_by_minus_one_overflows():
    with pytest.raises(Overflow):
        Int64(Int64.MIN) // -1

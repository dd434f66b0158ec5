"""Tests for the capability interfaces themselves."""

from __future__ import annotations

import math

import pytest

from algebrakit.core.capabilities import (
    EuclideanDomain,
    Field,
    Group,
    InnerProductSpace,
    NormSpace,
    OrderedField,
    OrderedRing,
    PoField,
    PoRing,
    Ring,
)
from algebrakit.errors import UnsupportedOperation
from algebrakit.modular.field import ZM
from algebrakit.primitives.floats import Float64
from algebrakit.primitives.integers import Int64


class Counted(Ring):
    """Integers that count their multiplications."""

    multiplications = 0

    __slots__ = ("v",)

    def __init__(self, v: int) -> None:
        self.v = v

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    def is_zero(self) -> bool:
        return self.v == 0

    def add(self, other):
        return Counted(self.v + other.v)

    def negate(self):
        return Counted(-self.v)

    def multiply(self, other):
        Counted.multiplications += 1
        return Counted(self.v * other.v)


class Vec2(InnerProductSpace[Float64], NormSpace):
    """Minimal concrete space, used only to exercise the contracts."""

    def __init__(self, x: float, y: float) -> None:
        self.x = Float64(x)
        self.y = Float64(y)

    def inner_product(self, other: "Vec2") -> Float64:
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        return math.sqrt(self.inner_product(self).val)


# =========================================================================
# 1. Abstractness and hierarchy
# =========================================================================


@pytest.mark.parametrize(
    "iface",
    [Group, Ring, Field, PoRing, OrderedRing, PoField, OrderedField, EuclideanDomain, NormSpace],
)
def test_interfaces_are_abstract(iface):
    with pytest.raises(TypeError):
        iface()


def test_inner_product_space_is_abstract():
    with pytest.raises(TypeError):
        InnerProductSpace()


def test_hierarchy():
    assert issubclass(Field, Ring)
    assert issubclass(PoRing, Ring)
    assert issubclass(OrderedRing, PoRing)
    assert issubclass(PoField, Field) and issubclass(PoField, PoRing)
    assert issubclass(OrderedField, PoField) and issubclass(OrderedField, OrderedRing)
    assert issubclass(EuclideanDomain, Ring)
    assert not issubclass(Group, Ring)


def test_concrete_types_satisfy_capabilities():
    assert isinstance(ZM[13](1), Field)
    assert isinstance(Int64(1), EuclideanDomain)
    assert isinstance(Float64(1.0), PoField)


# =========================================================================
# 2. Default ring behaviour
# =========================================================================


def test_subtract_defaults_to_add_negate():
    assert (Counted(7) - Counted(3)).v == 4


def test_power_by_squaring_is_logarithmic():
    Counted.multiplications = 0
    assert Counted(1).power(1 << 20).v == 1
    assert Counted.multiplications <= 2 * 21


def test_power_zero_is_one():
    assert Counted(5).power(0).v == 1


def test_ring_negative_power_unsupported():
    with pytest.raises(UnsupportedOperation):
        Counted(2).power(-1)


def test_field_negative_power_uses_inverse():
    f = ZM[11]
    assert f(3) ** -2 == (f(3) ** 2).inverse()


def test_foreign_operands_are_rejected():
    with pytest.raises(TypeError):
        Int64(1) + "a"
    with pytest.raises(TypeError):
        Int64(1).add("a")
    with pytest.raises(TypeError):
        Counted(1) + 1


# =========================================================================
# 3. Spaces
# =========================================================================


def test_inner_product_and_norm():
    u, v = Vec2(3.0, 4.0), Vec2(1.0, 0.0)
    assert u.inner_product(v) == Float64(3.0)
    assert u.norm() == 5.0
    assert v.norm() < u.norm()

"""Fixed-width signed integer adapters.

``Int8`` .. ``Int128`` are ordered rings over Python ints with *checked*
arithmetic: a result outside ``[-(2**(bits-1)), 2**(bits-1) - 1]``
raises ``Overflow`` instead of wrapping.  There are no inverses, so
``power`` with a negative exponent raises ``UnsupportedOperation``.

``Int64`` is additionally a Euclidean domain.  Its division truncates
toward zero (the remainder takes the sign of the dividend), and
``abs(INT64_MIN)`` does not fit back into the type, so its Euclidean size
raises ``Overflow``.
"""

from __future__ import annotations

from typing import Any, ClassVar, Tuple

from algebrakit.core.capabilities import EuclideanDomain, OrderedRing
from algebrakit.errors import DivisionByZero, Overflow


class SignedInt(OrderedRing):
    """Base for the fixed-width adapters; subclasses set ``BITS``."""

    BITS: ClassVar[int] = 0
    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 0

    __slots__ = ("_val",)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        bits = cls.__dict__.get("BITS")
        if bits:
            cls.MIN = -(1 << (bits - 1))
            cls.MAX = (1 << (bits - 1)) - 1

    def __init__(self, val: int = 0) -> None:
        if not self.BITS:
            raise TypeError("SignedInt has no width; use Int8, Int16, Int32, Int64 or Int128")
        if isinstance(val, bool) or not isinstance(val, int):
            raise TypeError(f"{type(self).__name__} expects an int, got {type(val).__name__}")
        self._val = self._checked(val)

    @classmethod
    def _checked(cls, val: int) -> int:
        if val < cls.MIN or val > cls.MAX:
            raise Overflow(f"{val} does not fit in {cls.__name__} [{cls.MIN}, {cls.MAX}]")
        return val

    @property
    def val(self) -> int:
        return self._val

    def _coerce(self, other: Any) -> Any:
        if isinstance(other, type(self)):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return type(self)(other)
        return NotImplemented

    # ---- ring ----

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    def is_zero(self) -> bool:
        return self._val == 0

    def add(self, other):
        return type(self)(self._val + self._operand(other)._val)

    def subtract(self, other):
        return type(self)(self._val - self._operand(other)._val)

    def negate(self):
        return type(self)(-self._val)

    def multiply(self, other):
        return type(self)(self._val * self._operand(other)._val)

    # ---- order ----

    def _raw(self, other: Any) -> Any:
        # comparisons accept any int, in range or not
        if isinstance(other, type(self)):
            return other._val
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __lt__(self, other):
        raw = self._raw(other)
        if raw is None:
            return NotImplemented
        return self._val < raw

    def __le__(self, other):
        raw = self._raw(other)
        if raw is None:
            return NotImplemented
        return self._val <= raw

    def __gt__(self, other):
        raw = self._raw(other)
        if raw is None:
            return NotImplemented
        return self._val > raw

    def __ge__(self, other):
        raw = self._raw(other)
        if raw is None:
            return NotImplemented
        return self._val >= raw

    # ---- value protocol ----

    def __eq__(self, other):
        raw = self._raw(other)
        if raw is None:
            return NotImplemented
        return self._val == raw

    def __hash__(self) -> int:
        return hash(self._val)

    def __int__(self) -> int:
        return self._val

    def __index__(self) -> int:
        return self._val

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._val})"

    def __str__(self) -> str:
        return str(self._val)


class Int8(SignedInt):
    BITS = 8
    __slots__ = ()


class Int16(SignedInt):
    BITS = 16
    __slots__ = ()


class Int32(SignedInt):
    BITS = 32
    __slots__ = ()


class Int64(SignedInt, EuclideanDomain):
    """Signed 64-bit integer; the Euclidean domain behind ``gcd``/``ext_gcd``."""

    BITS = 64
    __slots__ = ()

    def euc_size(self) -> int:
        if self._val == self.MIN:
            raise Overflow("abs(INT64_MIN) does not fit in Int64")
        return abs(self._val)

    def quotient_and_remainder(self, divisor) -> Tuple["Int64", "Int64"]:
        """Truncating division: ``q`` rounds toward zero, ``r`` has the sign of ``self``."""
        divisor = self._operand(divisor)
        if divisor.is_zero():
            raise DivisionByZero(f"cannot divide {self._val} by zero")
        q = abs(self._val) // abs(divisor._val)
        if (self._val < 0) != (divisor._val < 0):
            q = -q
        r = self._val - divisor._val * q
        # INT64_MIN // -1 overflows here
        return Int64(q), Int64(r)


class Int128(SignedInt):
    BITS = 128
    __slots__ = ()

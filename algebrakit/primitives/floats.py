"""IEEE floating-point adapters.

``Float64`` wraps a Python ``float``; ``Float32`` wraps ``numpy.float32``
so every result is rounded to single precision.  Both are partially
ordered fields (NaN compares with nothing).

``is_zero`` is an exact comparison with ``0.0``: there is no epsilon
tolerance, so ``1e-300`` is a perfectly invertible element.  ``-0.0``
compares equal to ``0.0`` under IEEE rules and therefore counts as zero.

Overflow: ``add``, ``subtract``, ``multiply`` and ``inverse`` follow IEEE
and saturate to ``inf`` silently.  Only ``power`` traps, raising
``Overflow`` when a finite base gives a result beyond the type's range.
``power`` works on the exact integer exponent: the sign comes from its
parity, and exponents too large for a float are clamped to one that has
already saturated every base other than +-1.
"""

from __future__ import annotations

from abc import abstractmethod
import math
from typing import Any

import numpy as np

from algebrakit.core.capabilities import PoField, check_exponent
from algebrakit.errors import DivisionByZero, Overflow

# |base| ** 2**64 has reached 0 or overflowed for every float base but 1,
# and every exponent up to it converts to a float without error
_EXPONENT_CAP = 2**64

_FLOAT32_MAX = float(np.finfo(np.float32).max)


class IEEEFloat(PoField):
    """Shared implementation; subclasses choose the storage via ``_box``."""

    __slots__ = ("_val",)

    def __init__(self, val: float = 0.0) -> None:
        if isinstance(val, bool) or not isinstance(val, (int, float, np.floating)):
            raise TypeError(f"{type(self).__name__} expects a real number, got {type(val).__name__}")
        self._val = self._box(val)

    @staticmethod
    @abstractmethod
    def _box(val: Any) -> Any:
        """Store *val* in the subclass's representation."""

    @staticmethod
    @abstractmethod
    def _pow(base: float, n: int) -> Any:
        """``base ** n`` for ``base >= 0``; raises ``Overflow`` when out of range."""

    @property
    def val(self) -> float:
        return float(self._val)

    def _coerce(self, other: Any) -> Any:
        if isinstance(other, type(self)):
            return other
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return type(self)(other)
        return NotImplemented

    # ---- field ----

    @classmethod
    def zero(cls):
        return cls(0.0)

    @classmethod
    def one(cls):
        return cls(1.0)

    def is_zero(self) -> bool:
        return bool(self._val == 0.0)

    def add(self, other):
        return type(self)(self._val + self._operand(other)._val)

    def subtract(self, other):
        return type(self)(self._val - self._operand(other)._val)

    def negate(self):
        return type(self)(-self._val)

    def multiply(self, other):
        return type(self)(self._val * self._operand(other)._val)

    def inverse(self):
        if self.is_zero():
            raise DivisionByZero(f"cannot invert {type(self).__name__} zero")
        return type(self)(self._box(1.0) / self._val)

    def power(self, n: int):
        """Platform power of the magnitude, signed by the parity of *n*.

        Negative powers of zero are a division by zero.
        """
        check_exponent(n)
        if n < 0 and self.is_zero():
            raise DivisionByZero(f"cannot raise {type(self).__name__} zero to the negative power {n}")
        base = float(self._val)
        exponent = max(-_EXPONENT_CAP, min(n, _EXPONENT_CAP))
        result = self._pow(abs(base), exponent)
        if n & 1 and math.copysign(1.0, base) < 0:
            result = -result
        return type(self)(result)

    # ---- order ----

    def __lt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return bool(self._val < other._val)

    def __le__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return bool(self._val <= other._val)

    # ---- value protocol ----

    def __eq__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return bool(self._val == other._val)

    def __hash__(self) -> int:
        return hash(float(self._val))

    def __float__(self) -> float:
        return float(self._val)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self._val)!r})"

    def __str__(self) -> str:
        return str(float(self._val))


class Float64(IEEEFloat):
    __slots__ = ()

    @staticmethod
    def _box(val: Any) -> float:
        return float(val)

    @staticmethod
    def _pow(base: float, n: int) -> float:
        try:
            return math.pow(base, n)
        except OverflowError as exc:
            raise Overflow(f"{base} ** {n} is out of range for Float64") from exc


class Float32(IEEEFloat):
    __slots__ = ()

    @staticmethod
    def _box(val: Any) -> np.float32:
        return np.float32(val)

    @staticmethod
    def _pow(base: float, n: int) -> np.float32:
        # computed in double precision, then narrowed once
        with np.errstate(over="raise"):
            try:
                wide = float(np.power(np.float64(base), np.float64(n)))
            except FloatingPointError as exc:
                raise Overflow(f"{base} ** {n} is out of range for Float32") from exc
        if math.isfinite(base) and abs(wide) > _FLOAT32_MAX:
            raise Overflow(f"{base} ** {n} is out of range for Float32")
        return np.float32(wide)

"""Capability interfaces for algebraic structures.

Every interface is an abstract base class exposing *named* methods
(``add``, ``multiply``, ``inverse``, ``quotient_and_remainder`` ...).
The Python operators are a thin layer mapped onto those methods:

    a + b   -> a.add(b)              a * b  -> a.multiply(b)   (Ring)
    a - b   -> a.subtract(b)         a * b  -> a.operate(b)    (Group)
    -a      -> a.negate()            a / b  -> a.divide(b)
    a ** n  -> a.power(n)            a // b, a % b, divmod(a, b)  (EuclideanDomain)

Concrete types decide which foreign operands they accept through
``_coerce``; anything it rejects makes the operator return
``NotImplemented`` so Python can try the reflected form.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Tuple, TypeVar

from algebrakit.errors import UnsupportedOperation

R = TypeVar("R", bound="Ring")


def binary_operator(name: str) -> Callable[[Any, Any], Any]:
    """Build ``self <op> other`` dispatching to the named method *name*."""

    def op(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return getattr(self, name)(other)

    op.__name__ = f"__{name}__"
    return op


def reflected_operator(name: str) -> Callable[[Any, Any], Any]:
    """Build ``other <op> self`` (the ``__r*__`` form) for method *name*."""

    def op(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return getattr(other, name)(self)

    op.__name__ = f"__r{name}__"
    return op


class AlgebraicValue(ABC):
    """Root of every algebraic value type."""

    __slots__ = ()

    def _coerce(self, other: Any) -> Any:
        """Return *other* as an instance of ``type(self)``, or ``NotImplemented``."""
        if isinstance(other, type(self)):
            return other
        return NotImplemented

    def _operand(self, other: Any) -> Any:
        coerced = self._coerce(other)
        if coerced is NotImplemented:
            raise TypeError(
                f"unsupported operand for {type(self).__name__}: {type(other).__name__}"
            )
        return coerced


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


class Group(AlgebraicValue):
    """A group written multiplicatively.

    Laws: ``a * identity() == a`` and ``a * a.inverse() == identity()``.
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def identity(cls):
        """The group identity element."""

    @abstractmethod
    def inverse(self):
        """The inverse of this element."""

    @abstractmethod
    def operate(self, other):
        """The group operation."""

    def divide(self, other):
        return self.operate(self._operand(other).inverse())

    __mul__ = binary_operator("operate")
    __rmul__ = reflected_operator("operate")
    __truediv__ = binary_operator("divide")
    __rtruediv__ = reflected_operator("divide")


# ---------------------------------------------------------------------------
# Rings and fields
# ---------------------------------------------------------------------------


class Ring(AlgebraicValue):
    """An algebraic ring with a multiplicative identity."""

    __slots__ = ()

    @classmethod
    @abstractmethod
    def zero(cls):
        """The additive identity."""

    @classmethod
    @abstractmethod
    def one(cls):
        """The multiplicative identity."""

    @abstractmethod
    def is_zero(self) -> bool:
        """Whether this element is the additive identity."""

    @abstractmethod
    def add(self, other):
        ...

    @abstractmethod
    def negate(self):
        ...

    @abstractmethod
    def multiply(self, other):
        ...

    def subtract(self, other):
        return self.add(self._operand(other).negate())

    def power(self, n: int):
        """Raise this element to the integer power *n*.

        ``power(0)`` is ``one()``.  Rings have no inverses, so a negative
        exponent raises ``UnsupportedOperation``; ``Field`` overrides this.
        """
        check_exponent(n)
        if n < 0:
            raise UnsupportedOperation(
                f"cannot raise {type(self).__name__} to the negative power {n}: "
                "ring elements have no inverse"
            )
        return self._power_by_squaring(n)

    def _power_by_squaring(self, n: int):
        result = self.one()
        base = self
        while n:
            if n & 1:
                result = result.multiply(base)
            n >>= 1
            if n:
                base = base.multiply(base)
        return result

    __add__ = binary_operator("add")
    __radd__ = reflected_operator("add")
    __sub__ = binary_operator("subtract")
    __rsub__ = reflected_operator("subtract")
    __mul__ = binary_operator("multiply")
    __rmul__ = reflected_operator("multiply")

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __pow__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        return self.power(n)


def check_exponent(n: Any) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"exponent must be an int, got {type(n).__name__}")


class Field(Ring):
    """A ring in which every non-zero element has a multiplicative inverse."""

    __slots__ = ()

    @abstractmethod
    def inverse(self):
        """Multiplicative inverse.  Raises ``DivisionByZero`` on zero."""

    def divide(self, other):
        return self.multiply(self._operand(other).inverse())

    def power(self, n: int):
        """Like ``Ring.power`` but negative exponents go through ``inverse()``."""
        check_exponent(n)
        if n < 0:
            return self.inverse().power(-n)
        return self._power_by_squaring(n)

    __truediv__ = binary_operator("divide")
    __rtruediv__ = reflected_operator("divide")


# ---------------------------------------------------------------------------
# Ordered variants
# ---------------------------------------------------------------------------


class PoRing(Ring):
    """A partially ordered ring."""

    __slots__ = ()

    @abstractmethod
    def __lt__(self, other):
        ...

    @abstractmethod
    def __le__(self, other):
        ...

    def __gt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other < self

    def __ge__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other <= self


class OrderedRing(PoRing):
    """A totally ordered ring: any two elements are comparable."""

    __slots__ = ()

    def compare(self, other) -> int:
        """Return -1, 0 or 1 as this element is below, equal to or above *other*."""
        other = self._operand(other)
        if self < other:
            return -1
        if other < self:
            return 1
        return 0


class PoField(Field, PoRing):
    """A partially ordered field."""

    __slots__ = ()


class OrderedField(PoField, OrderedRing):
    """A totally ordered field."""

    __slots__ = ()


# ---------------------------------------------------------------------------
# Euclidean domain
# ---------------------------------------------------------------------------


class EuclideanDomain(Ring):
    """A ring with division-with-remainder.

    ``euc_size`` is the Euclidean size function (named so because "size"
    usually means something else on a value type).  For ``b`` non-zero,
    ``q, r = a.quotient_and_remainder(b)`` satisfies ``a == b*q + r``
    and ``r.euc_size() < b.euc_size()``.
    """

    __slots__ = ()

    @abstractmethod
    def euc_size(self):
        """Orderable Euclidean size of this element."""

    @abstractmethod
    def quotient_and_remainder(self, divisor) -> Tuple[Any, Any]:
        """Return ``(q, r)`` with ``self == divisor * q + r``."""

    def quotient(self, divisor):
        return self.quotient_and_remainder(divisor)[0]

    def remainder(self, divisor):
        return self.quotient_and_remainder(divisor)[1]

    __floordiv__ = binary_operator("quotient")
    __rfloordiv__ = reflected_operator("quotient")
    __mod__ = binary_operator("remainder")
    __rmod__ = reflected_operator("remainder")
    __divmod__ = binary_operator("quotient_and_remainder")
    __rdivmod__ = reflected_operator("quotient_and_remainder")


# ---------------------------------------------------------------------------
# Spaces
# ---------------------------------------------------------------------------


class InnerProductSpace(ABC, Generic[R]):
    """A space with an inner product valued in the ring ``R``."""

    __slots__ = ()

    @abstractmethod
    def inner_product(self, other) -> R:
        ...


class NormSpace(ABC):
    """A space with a norm; the norm type only needs to be orderable."""

    __slots__ = ()

    @abstractmethod
    def norm(self):
        ...

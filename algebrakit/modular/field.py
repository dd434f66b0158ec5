"""Prime-field arithmetic Z/q.

``ZM[q]`` is the field of integers modulo a prime ``q``.  Values hold the
canonical residue in ``[0, q)``; ``q`` is fixed on the type.

``q`` being prime is the caller's responsibility and is not checked:
with a composite ``q`` some non-zero residues have no inverse and
division silently produces a wrong value (see ``mod_inv``).
"""

from __future__ import annotations

from algebrakit.core.capabilities import Field
from algebrakit.core.euclid import mod_inv
from algebrakit.errors import DivisionByZero
from algebrakit.modular.modulus import ModularValue
from algebrakit.primitives.integers import Int64


class ZM(ModularValue, Field):
    """Element of Z/q for a prime ``q`` (``ZM[q]``)."""

    MIN_MODULUS = 2

    __slots__ = ()

    @classmethod
    def zero(cls) -> "ZM":
        return cls._from_residue(0)

    @classmethod
    def one(cls) -> "ZM":
        return cls._from_residue(1)

    def is_zero(self) -> bool:
        return self._val == 0

    def add(self, other) -> "ZM":
        """Field addition."""
        other = self._operand(other)
        return self._from_residue((self._val + other._val) % self.MODULUS)

    def subtract(self, other) -> "ZM":
        """Field subtraction."""
        other = self._operand(other)
        return self._from_residue((self._val - other._val) % self.MODULUS)

    def negate(self) -> "ZM":
        """Additive inverse."""
        return self._from_residue((self.MODULUS - self._val) % self.MODULUS)

    def multiply(self, other) -> "ZM":
        """Field multiplication.

        Both residues are below ``q <= 2**63 - 1``, so the product needs
        up to 126 bits; it is formed as an unbounded int and reduced.
        """
        other = self._operand(other)
        q = self.MODULUS
        product = (self._val % q) * (other._val % q)
        return self._from_residue(product % q)

    def inverse(self) -> "ZM":
        """Multiplicative inverse via the extended Euclidean algorithm."""
        if self._val == 0:
            raise DivisionByZero(f"cannot invert zero in {type(self).__name__}")
        return type(self)(int(mod_inv(Int64(self._val), Int64(self.MODULUS))))

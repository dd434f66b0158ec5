"""The additive group of the integers modulo N.

``AdditiveGroupZM[n]`` only carries the additive group structure of Z/n
(``n`` need not be prime).  To fit the multiplicative ``Group`` surface,
the group operation is addition, so ``*`` is an alias of ``+`` and ``/``
an alias of ``-``; ``a * b`` is NOT the product of
residues.
"""

from __future__ import annotations

from algebrakit.core.capabilities import Group, binary_operator, reflected_operator
from algebrakit.modular.modulus import ModularValue


class AdditiveGroupZM(ModularValue, Group):
    """Element of (Z/n, +)."""

    MIN_MODULUS = 1

    __slots__ = ()

    @classmethod
    def identity(cls) -> "AdditiveGroupZM":
        return cls._from_residue(0)

    def inverse(self) -> "AdditiveGroupZM":
        return self.negate()

    def operate(self, other) -> "AdditiveGroupZM":
        return self.add(other)

    def divide(self, other) -> "AdditiveGroupZM":
        return self.subtract(other)

    def add(self, other) -> "AdditiveGroupZM":
        other = self._operand(other)
        return self._from_residue((self._val + other._val) % self.MODULUS)

    def subtract(self, other) -> "AdditiveGroupZM":
        other = self._operand(other)
        return self._from_residue((self._val - other._val) % self.MODULUS)

    def negate(self) -> "AdditiveGroupZM":
        return self._from_residue(-self._val % self.MODULUS)

    __add__ = binary_operator("add")
    __radd__ = reflected_operator("add")
    __sub__ = binary_operator("subtract")
    __rsub__ = reflected_operator("subtract")

    def __neg__(self) -> "AdditiveGroupZM":
        return self.negate()

"""Error taxonomy shared by every algebraic type.

All errors derive from ``AlgebraError`` and, where one exists, from the
closest built-in exception so that generic handlers keep working.
"""

from __future__ import annotations


class AlgebraError(ArithmeticError):
    """Base class for algebrakit failures."""


class DivisionByZero(AlgebraError, ZeroDivisionError):
    """Raised when inverting or dividing by the zero element."""


class UnsupportedOperation(AlgebraError):
    """Raised when a Ring is asked for something only a Field can do,
    e.g. a negative power."""


class PreconditionViolation(AlgebraError, ValueError):
    """Raised when an input breaks a documented precondition (bad modulus,
    non-coprime operands under strict ``mod_inv``)."""


class Overflow(AlgebraError, OverflowError):
    """Raised when a result does not fit the fixed-width representation."""


class ModulusMismatch(AlgebraError, TypeError):
    """Raised when values of two different modular types are mixed."""

"""Euclidean algorithms over any ``EuclideanDomain``.

API
---
gcd(a, b)          -> g
ext_gcd(a, b)      -> BezoutTriple(g, x, y)   with a*x + b*y == g
mod_inv(x, m)      -> the Bezout coefficient of x in ext_gcd(x, m)

Plain ``int`` operands are lifted to ``Int64``.  Both algorithms run as
loops, so their depth does not grow with the input.
"""

from __future__ import annotations

from typing import Any, List, NamedTuple, Optional, Tuple

from algebrakit import config
from algebrakit.core.capabilities import EuclideanDomain
from algebrakit.errors import PreconditionViolation
from algebrakit.primitives.integers import Int64


class BezoutTriple(NamedTuple):
    """``(g, x, y)`` with ``g == gcd(a, b)`` and ``a*x + b*y == g``."""

    g: Any
    x: Any
    y: Any


def _lift(value: Any) -> EuclideanDomain:
    if isinstance(value, EuclideanDomain):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Int64(value)
    raise TypeError(f"expected a EuclideanDomain value or int, got {type(value).__name__}")


def _lift_pair(a: Any, b: Any) -> Tuple[EuclideanDomain, EuclideanDomain]:
    a, b = _lift(a), _lift(b)
    if type(a) is not type(b):
        raise TypeError(f"operands must share a type, got {type(a).__name__} and {type(b).__name__}")
    return a, b


def gcd(a: Any, b: Any) -> EuclideanDomain:
    """Greatest common divisor by the Euclidean algorithm.

    The operand with the smaller Euclidean size is always the divisor.
    ``Int64`` division truncates toward zero, so the remainder is only
    guaranteed to shrink when dividing by the smaller operand.
    """
    a, b = _lift_pair(a, b)
    while True:
        if a.is_zero():
            return b
        if b.is_zero():
            return a
        if a.euc_size() < b.euc_size():
            a, b = b, a
            continue
        _, r = a.quotient_and_remainder(b)
        a, b = b, r


def ext_gcd(a: Any, b: Any) -> BezoutTriple:
    """Extended Euclidean algorithm.

    Follows the recursive definition

        ext_gcd(0, b) = (b, 0, 1)
        ext_gcd(a, b) = (g, y1 - q*x1, x1)
            where q, r = divmod(b, a) and (g, x1, y1) = ext_gcd(r, a)

    unrolled into a loop: the quotients are stacked on the way down and
    the coefficients back-substituted on the way up.  Note the third
    component is the inner call's ``x1`` as-is.
    """
    a, b = _lift_pair(a, b)
    quotients: List[EuclideanDomain] = []
    while not a.is_zero():
        q, r = b.quotient_and_remainder(a)
        quotients.append(q)
        a, b = r, a

    g, x, y = b, a.zero(), a.one()
    for q in reversed(quotients):
        x, y = y.subtract(q.multiply(x)), x
    return BezoutTriple(g, x, y)


def mod_inv(x: Any, m: Any, check_coprime: Optional[bool] = None) -> EuclideanDomain:
    """Return the coefficient of *x* from ``ext_gcd(x, m)``.

    It is a multiplicative inverse of *x* modulo *m* only when
    ``gcd(x, m) == 1``.  The value is not reduced into ``[0, m)``
    (``mod_inv(4, 13) == -3``).

    With ``check_coprime`` false (the default unless
    ``config.STRICT_MOD_INV`` is set) a non-unit gcd is NOT detected and
    the returned value is meaningless as an inverse.  With it true, a
    gcd that is not a unit raises ``PreconditionViolation``.

    Truncating division can give a unit gcd other than one (``-1`` for
    ``mod_inv(4, -13)``); the coefficient is then scaled by the inverse
    of that unit, so the result is still an inverse (``-3`` here).
    """
    if check_coprime is None:
        check_coprime = config.STRICT_MOD_INV
    g, inverse, _ = ext_gcd(x, m)
    one = g.one()
    if g == one:
        return inverse
    # units are exactly the elements of the same size as one
    if g.euc_size() == one.euc_size():
        return inverse.multiply(one.quotient(g))
    if check_coprime:
        raise PreconditionViolation(f"{x} has no inverse modulo {m} (gcd is {g})")
    return inverse

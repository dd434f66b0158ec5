"""Modulus parameterisation shared by the modular types.

A modular type carries its modulus on the *class*, as ``MODULUS``; all
instances of that class share it.  There are two ways to declare one::

    F13 = ZM[13]                  # specialised on the fly, cached

    class F13(ZM):                # or spelled out
        MODULUS = 13

The modulus is validated (via ``ModulusParams``) once, when the class is
created.  Residues are stored canonically in ``[0, MODULUS)``.  Values of
two different modular types never mix implicitly: arithmetic between
them raises ``ModulusMismatch``; use ``convert`` instead.  Equality holds
only between values of one type, so ``ZM[13](4) != 4`` even though
``ZM[13](4) + 4`` coerces the int.
"""

from __future__ import annotations

import functools
import logging
import random
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from pydantic import Field as pd_field

from algebrakit import sampling
from algebrakit.config import REPR_MAX
from algebrakit.errors import ModulusMismatch, PreconditionViolation

logger = logging.getLogger(__name__)


class ModulusParams(BaseModel):
    """A validated modulus.

    ``modulus`` must be a genuine ``int`` (strict: no bools, floats or
    strings) between ``minimum`` and ``REPR_MAX``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    modulus: int = pd_field(le=REPR_MAX)
    minimum: int = 1

    @model_validator(mode="after")
    def _check_lower_bound(self) -> "ModulusParams":
        if self.modulus < self.minimum:
            raise ValueError(f"modulus must be at least {self.minimum}, got {self.modulus}")
        return self


def validate_modulus(modulus: Any, minimum: int = 1) -> int:
    """Return *modulus* if valid, else raise ``PreconditionViolation``."""
    try:
        return ModulusParams(modulus=modulus, minimum=minimum).modulus
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"]
        raise PreconditionViolation(f"invalid modulus {modulus!r}: {reason}") from exc


@functools.lru_cache(maxsize=None)
def _specialise(base: type, modulus: int) -> type:
    name = f"{base.__name__}[{modulus}]"
    cls = type(base)(
        name,
        (base,),
        {"MODULUS": modulus, "__slots__": (), "__module__": base.__module__, "__qualname__": name},
    )
    logger.debug("specialised modular type %s", name)
    return cls


class ModularValue:
    """Mixin holding a canonical residue modulo ``type(self).MODULUS``."""

    MODULUS: ClassVar[int] = 0
    MIN_MODULUS: ClassVar[int] = 1

    __slots__ = ("_val",)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "MODULUS" in cls.__dict__:
            cls.MODULUS = validate_modulus(cls.MODULUS, cls.MIN_MODULUS)

    def __class_getitem__(cls, modulus: Any) -> type:
        if cls.MODULUS:
            raise TypeError(f"{cls.__name__} already has modulus {cls.MODULUS}")
        return _specialise(cls, validate_modulus(modulus, cls.MIN_MODULUS))

    def __init__(self, x: int = 0) -> None:
        cls = type(self)
        if not cls.MODULUS:
            raise TypeError(f"{cls.__name__} has no modulus; use {cls.__name__}[m]")
        if isinstance(x, bool) or not isinstance(x, int):
            raise TypeError(f"{cls.__name__} expects an int, got {type(x).__name__}")
        # Python's % already has the sign of the (positive) modulus
        self._val = x % cls.MODULUS

    @classmethod
    def _from_residue(cls, r: int):
        # r is already canonical; skips re-reduction on the hot paths
        if not cls.MODULUS:
            raise TypeError(f"{cls.__name__} has no modulus; use {cls.__name__}[m]")
        obj = cls.__new__(cls)
        obj._val = r
        return obj

    # ---- conversions ----

    @classmethod
    def from_int(cls, x: int):
        """Reduce the integer *x* into this type."""
        return cls(x)

    @classmethod
    def convert(cls, other: "ModularValue"):
        """Explicitly move a value of another modular type into this one."""
        if not isinstance(other, ModularValue):
            raise TypeError(f"expected a modular value, got {type(other).__name__}")
        return cls(other._val)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None):
        """Uniform random residue.  NOT cryptographically secure."""
        return cls._from_residue(sampling.uniform_below(cls.MODULUS, rng))

    @property
    def val(self) -> int:
        return self._val

    def __int__(self) -> int:
        return self._val

    # ---- coercion and equality ----

    def _coerce(self, other: Any) -> Any:
        if type(other) is type(self):
            return other
        if isinstance(other, ModularValue):
            raise ModulusMismatch(
                f"cannot mix {type(self).__name__} with {type(other).__name__}; "
                "convert one of them explicitly"
            )
        if isinstance(other, int) and not isinstance(other, bool):
            return type(self)(other)
        return NotImplemented

    def __eq__(self, other: Any) -> Any:
        # only values of the very same type compare; ints and other moduli
        # fall back to identity, which keeps hashing consistent
        if type(other) is not type(self):
            return NotImplemented
        return self._val == other._val

    def __hash__(self) -> int:
        return hash((type(self), self._val))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._val})"

    def __str__(self) -> str:
        return str(self._val)

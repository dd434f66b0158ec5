"""Random element generation.

NOT cryptographically secure.  Draws come from ``random.Random`` (a
Mersenne Twister), never from ``secrets``, so nothing produced here may
be used as secret material.  Deterministic arithmetic never touches this
module; only the explicit ``random()`` constructors do.

Every function takes an optional ``rng``.  Without one, a shared module
RNG is used, seeded from ``config.RANDOM_SEED`` when that is set.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from algebrakit import config
from algebrakit.errors import PreconditionViolation

logger = logging.getLogger(__name__)

_rng = random.Random(config.RANDOM_SEED)


def seed(value: Optional[int] = None) -> None:
    """Reseed the shared RNG (``None`` means system entropy)."""
    _rng.seed(value)
    logger.debug("sampling RNG reseeded (seed=%r)", value)


def uniform_below(n: int, rng: Optional[random.Random] = None) -> int:
    """Return a uniform integer in ``[0, n)``."""
    if n < 1:
        raise PreconditionViolation(f"cannot sample below {n}")
    return (rng or _rng).randrange(n)

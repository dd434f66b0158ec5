"""Global configuration for algebrakit."""

import os

# ---------- Residue representation (signed 64-bit) ----------
# Modular values store their canonical residue in this range, so every
# modulus must fit in it.  Products of two residues are formed wide and
# reduced back.
REPR_BITS = 64
REPR_MIN = -(2 ** (REPR_BITS - 1))
REPR_MAX = 2 ** (REPR_BITS - 1) - 1

INT64_MIN = REPR_MIN
INT64_MAX = REPR_MAX

# Largest prime that still fits the residue representation.
LARGEST_REPR_PRIME = 2**63 - 25

# ---------- Modular inverse ----------
# When set, mod_inv() rejects operands whose gcd is not one instead of
# returning a Bezout coefficient that is not an inverse.
STRICT_MOD_INV = os.environ.get("ALGEBRAKIT_STRICT_MOD_INV", "0").lower() in ("1", "true", "yes")

# ---------- Sampling ----------
# Seed for the shared (non-cryptographic) sampling RNG.  Unset means
# seeded from system entropy.
_SEED = os.environ.get("ALGEBRAKIT_RANDOM_SEED", "")
RANDOM_SEED = int(_SEED) if _SEED.strip() else None

"""Stark field GF(p) used by the Cairo VM.

Uses galois library for all field arithmetic. FF is the field type; memory
cells hold FF scalars (0-d galois arrays) or relocatable addresses.
"""

from typing import Union

import galois
import numpy as np

from vm.errors import CouldntParsePrimeError

# --- Field Construction ---

PRIME_STR = "0x800000000000011000000000000000000000000000000000000000000000001"


def parse_prime(prime_str: str) -> int:
    """Parse a hex prime literal of the form '0x...'."""
    if not prime_str.startswith("0x"):
        raise CouldntParsePrimeError(prime_str)
    try:
        return int(prime_str[2:], 16)
    except ValueError:
        raise CouldntParsePrimeError(prime_str) from None


STARK_PRIME = parse_prime(PRIME_STR)

# 3 generates the multiplicative group; given explicitly so galois does not
# factor p - 1 at import time.
FF = galois.GF(STARK_PRIME, primitive_element=3, verify=False)
"""Base field GF(p) - Stark prime field."""

IntLike = Union[int, np.integer]


def felt(value: IntLike) -> FF:
    """Reduce an integer (possibly negative or >= p) into FF."""
    return FF(int(value) % STARK_PRIME)


def to_biguint(value: FF) -> int:
    """Canonical unsigned integer representative in [0, p)."""
    return int(value)

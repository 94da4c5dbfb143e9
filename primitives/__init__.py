"""Primitives - field elements, relocatable addresses and write-once memory."""

from primitives.field import (
    FF,
    PRIME_STR,
    STARK_PRIME,
    felt,
    parse_prime,
    to_biguint,
)
from primitives.memory import (
    MaybeRelocatable,
    Memory,
    MemorySegmentManager,
)
from primitives.relocatable import Relocatable

__all__ = [
    # Field
    "FF",
    "PRIME_STR",
    "STARK_PRIME",
    "felt",
    "parse_prime",
    "to_biguint",
    # Memory
    "MaybeRelocatable",
    "Memory",
    "MemorySegmentManager",
    "Relocatable",
]

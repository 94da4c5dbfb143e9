"""Common Starknet hints and the hint processor that serves them.

EXTRA_HINTS lists (hint code, function) pairs in insertion order. They are
layered on top of the builtin hints; when two entries share a hint code the
later one replaces the earlier one.
"""

import logging
from typing import Dict, Iterable, Mapping, Tuple

from vm.hint_processor import BuiltinHintProcessor, HintFunc, builtin_hints, hint_name

from .common_hints import alon, normalize_address_set_is_250, normalize_address_set_is_small
from .hint_code import (
    ALON_HINT,
    NORMALIZE_ADDRESS_SET_IS_250_HINT,
    NORMALIZE_ADDRESS_SET_IS_SMALL_HINT,
)
from .uint256 import Uint256

logger = logging.getLogger(__name__)

EXTRA_HINTS: list[tuple[str, HintFunc]] = [
    (NORMALIZE_ADDRESS_SET_IS_SMALL_HINT, normalize_address_set_is_small),
    (NORMALIZE_ADDRESS_SET_IS_250_HINT, normalize_address_set_is_250),
    (ALON_HINT, alon),
]


def build_hint_table(
    base: Mapping[str, HintFunc], insertions: Iterable[Tuple[str, HintFunc]]
) -> Dict[str, HintFunc]:
    """Insert (code, func) pairs in order into a copy of base. Last insert wins."""
    table = dict(base)
    for code, func in insertions:
        if code in table:
            logger.debug(
                "Hint %s replaces %s for the same hint code",
                hint_name(func),
                hint_name(table[code]),
            )
        table[code] = func
    return table


def extended_builtin_hint_processor() -> BuiltinHintProcessor:
    """Builtin hint processor extended with the common hints."""
    return BuiltinHintProcessor(build_hint_table(builtin_hints(), EXTRA_HINTS))


__all__ = [
    "Uint256",
    "alon",
    "normalize_address_set_is_small",
    "normalize_address_set_is_250",
    "ALON_HINT",
    "NORMALIZE_ADDRESS_SET_IS_SMALL_HINT",
    "NORMALIZE_ADDRESS_SET_IS_250_HINT",
    "EXTRA_HINTS",
    "build_hint_table",
    "extended_builtin_hint_processor",
]

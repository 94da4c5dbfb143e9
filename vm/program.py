"""Named constants of a compiled Cairo program.

The compiler emits an ``identifiers`` table keyed by fully qualified name.
Entries of type ``const`` carry an integer ``value``; ``alias`` entries
point at another identifier through ``destination``. Hints look constants
up by their fully qualified name, e.g.
``starkware.starknet.common.storage.ADDR_BOUND``.
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from primitives.field import FF, felt


def _resolve_alias(identifiers: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    seen = set()
    entry = identifiers[name]
    while entry.get("type") == "alias":
        if name in seen:
            raise ValueError(f"Cyclic alias for identifier '{name}'")
        seen.add(name)
        name = entry["destination"]
        entry = identifiers.get(name, {})
    return entry


def constants_from_identifiers(identifiers: Mapping[str, Any]) -> Dict[str, FF]:
    """Collect const identifiers (directly or through aliases) as field elements."""
    constants: Dict[str, FF] = {}
    for name, entry in identifiers.items():
        resolved = _resolve_alias(identifiers, name)
        if resolved.get("type") == "const":
            constants[name] = felt(resolved["value"])
    return constants


def load_constants(path: Union[str, Path]) -> Dict[str, FF]:
    """Read the named constants from a compiled program JSON file."""
    with open(path) as f:
        program = json.load(f)
    return constants_from_identifiers(program.get("identifiers", {}))

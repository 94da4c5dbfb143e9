"""Write-once VM memory and segment allocation.

A cell, once written, keeps its value for the rest of the run. Writing the
same value again is accepted; writing a different value raises
InconsistentMemoryError.
"""

from typing import Dict, Iterable, Optional, Union

from primitives.field import FF
from primitives.relocatable import Relocatable
from vm.errors import InconsistentMemoryError

MaybeRelocatable = Union[FF, Relocatable]


def same_value(a: MaybeRelocatable, b: MaybeRelocatable) -> bool:
    """Compare two cell values without numpy broadcasting across types."""
    if isinstance(a, Relocatable) or isinstance(b, Relocatable):
        return isinstance(a, Relocatable) and isinstance(b, Relocatable) and a == b
    return int(a) == int(b)


class Memory:
    """Mapping from Relocatable to cell value with write-once semantics."""

    def __init__(self) -> None:
        self.data: Dict[Relocatable, MaybeRelocatable] = {}

    def get(self, addr: Relocatable) -> Optional[MaybeRelocatable]:
        return self.data.get(addr)

    def __contains__(self, addr: Relocatable) -> bool:
        return addr in self.data

    def __len__(self) -> int:
        return len(self.data)

    def insert(self, addr: Relocatable, value: MaybeRelocatable) -> None:
        existing = self.data.get(addr)
        if existing is None:
            self.data[addr] = value
        elif not same_value(existing, value):
            raise InconsistentMemoryError(addr, existing, value)


class MemorySegmentManager:
    """Allocates segments and bulk-loads data into them."""

    def __init__(self, memory: Memory) -> None:
        self.memory = memory
        self.num_segments = 0

    def add(self) -> Relocatable:
        base = Relocatable(self.num_segments, 0)
        self.num_segments += 1
        return base

    def load_data(self, ptr: Relocatable, data: Iterable[MaybeRelocatable]) -> Relocatable:
        """Write consecutive cells starting at ptr. Returns the end pointer."""
        n = 0
        for value in data:
            self.memory.insert(ptr + n, value)
            n += 1
        return ptr + n

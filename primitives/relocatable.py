"""Relocatable memory addresses: (segment_index, offset) pairs."""

from dataclasses import dataclass

from vm.errors import RelocatableOffsetError, RelocatableSegmentError


@dataclass(frozen=True)
class Relocatable:
    """Address into a memory segment. Offsets are never negative."""
    segment_index: int
    offset: int

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise RelocatableOffsetError(self.segment_index, self.offset)

    def __add__(self, other: int) -> "Relocatable":
        if not isinstance(other, int):
            return NotImplemented
        return Relocatable(self.segment_index, self.offset + other)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Relocatable):
            if other.segment_index != self.segment_index:
                raise RelocatableSegmentError(self, other)
            return self.offset - other.offset
        if isinstance(other, int):
            return Relocatable(self.segment_index, self.offset - other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.segment_index}:{self.offset}"

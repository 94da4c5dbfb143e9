"""Uint256: a 256-bit unsigned integer stored as two field elements.

Cairo represents ``Uint256`` as the struct ``{low: felt, high: felt}`` with
value ``low + high * 2**128``. Values produced here by ``split`` always have
both limbs below 2**128. Values read from memory are taken as-is; bounding
them is the responsibility of whoever wrote them.

Limbs read from memory are the same objects memory holds (no copy). They are
copied only in ``insert_from_var_name``, right before being written back.
"""

from dataclasses import dataclass

from primitives.field import FF, to_biguint
from primitives.relocatable import Relocatable
from vm.errors import IdentifierHasNoMemberError, MemoryAccessError
from vm.hint_reference import ApTracking, IdsData, get_relocatable_from_var_name
from vm.vm_core import VirtualMachine

LIMB_BITS = 128
LIMB_MASK = (1 << LIMB_BITS) - 1


@dataclass
class Uint256:
    low: FF
    high: FF

    @classmethod
    def from_values(cls, low: FF, high: FF) -> "Uint256":
        return cls(low=low, high=high)

    @classmethod
    def from_offsets(
        cls,
        addr: Relocatable,
        name: str,
        vm: VirtualMachine,
        low_offset: int,
        high_offset: int,
    ) -> "Uint256":
        """Read the limbs at addr + low_offset and addr + high_offset.

        Raises:
            IdentifierHasNoMemberError: if a limb is unset or not an integer
        """
        try:
            low = vm.get_integer(addr + low_offset)
        except MemoryAccessError:
            raise IdentifierHasNoMemberError(name, "low") from None
        try:
            high = vm.get_integer(addr + high_offset)
        except MemoryAccessError:
            raise IdentifierHasNoMemberError(name, "high") from None
        return cls(low=low, high=high)

    @classmethod
    def from_base_addr(cls, addr: Relocatable, name: str, vm: VirtualMachine) -> "Uint256":
        return cls.from_offsets(addr, name, vm, 0, 1)

    @classmethod
    def from_var_name(
        cls, name: str, vm: VirtualMachine, ids_data: IdsData, ap_tracking: ApTracking
    ) -> "Uint256":
        base_addr = get_relocatable_from_var_name(name, vm, ids_data, ap_tracking)
        return cls.from_base_addr(base_addr, name, vm)

    @classmethod
    def split(cls, num: int) -> "Uint256":
        """Canonical encoding of 0 <= num < 2**256."""
        return cls.from_values(FF(num & LIMB_MASK), FF(num >> LIMB_BITS))

    @classmethod
    def from_felt(cls, value: FF) -> "Uint256":
        return cls.split(to_biguint(value))

    def pack(self) -> int:
        """Merge the limbs: (high << 128) + low."""
        return (to_biguint(self.high) << LIMB_BITS) + to_biguint(self.low)

    def insert_from_var_name(
        self, var_name: str, vm: VirtualMachine, ids_data: IdsData, ap_tracking: ApTracking
    ) -> None:
        """Write low to ids.<var_name>.low and high to ids.<var_name>.high."""
        addr = get_relocatable_from_var_name(var_name, vm, ids_data, ap_tracking)
        vm.insert_value(addr, self.low.copy())
        vm.insert_value(addr + 1, self.high.copy())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Uint256):
            return NotImplemented
        return (to_biguint(self.low), to_biguint(self.high)) == (
            to_biguint(other.low),
            to_biguint(other.high),
        )

"""Helpers for laying out hint operands in VM memory."""

from primitives.field import FF
from vm.hint_reference import HintReference
from vm.vm_core import VirtualMachine


def write_felts(vm: VirtualMachine, fp_offset: int, values) -> None:
    """Write integers to consecutive cells starting at [fp + fp_offset]."""
    vm.segments.load_data(vm.get_fp() + fp_offset, [FF(v) for v in values])


def read_felts(vm: VirtualMachine, fp_offset: int, n: int) -> list:
    """Read n cells starting at [fp + fp_offset] as ints (None when unset)."""
    cells = [vm.get_maybe(vm.get_fp() + fp_offset + i) for i in range(n)]
    return [None if c is None else int(c) for c in cells]


def fp_ids(**offsets: int) -> dict:
    """ids_data with every variable at [fp + offset]."""
    return {name: HintReference.from_fp(offset) for name, offset in offsets.items()}

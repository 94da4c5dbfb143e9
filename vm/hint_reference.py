"""Resolution of hint variables (``ids.*``) to memory addresses.

The compiler describes every variable visible to a hint as a HintReference:
a register-relative cell, optionally dereferenced, plus a second offset.
References relative to ap are recorded together with the ap tracking data at
the point they were defined. When the hint runs later in the same tracking
group, ap has moved by ``hint.offset - reference.offset`` cells and the base
is corrected accordingly. References from another group cannot be resolved.

Example:
    # ids.a lives at [fp - 3]
    ids_data = {"a": HintReference.from_fp(-3)}
    addr = get_relocatable_from_var_name("a", vm, ids_data, ApTracking())
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from primitives.field import FF
from primitives.memory import MaybeRelocatable
from primitives.relocatable import Relocatable
from vm.errors import IdentifierNotIntegerError, UnknownIdentifierError
from vm.vm_core import VirtualMachine


class Register(Enum):
    AP = "ap"
    FP = "fp"


@dataclass(frozen=True)
class ApTracking:
    group: int = 0
    offset: int = 0


# --- Offset values ---

@dataclass(frozen=True)
class Reference:
    """``[reg + offset]`` when dereference is set, else ``reg + offset``."""
    register: Register
    offset: int
    dereference: bool


@dataclass(frozen=True)
class Value:
    value: int


@dataclass(frozen=True)
class Immediate:
    value: FF


OffsetValue = Union[Reference, Value, Immediate]


@dataclass(frozen=True)
class HintReference:
    """Location of one hint variable."""
    offset1: OffsetValue
    offset2: OffsetValue = Value(0)
    dereference: bool = True
    ap_tracking_data: Optional[ApTracking] = None

    @classmethod
    def from_fp(cls, offset: int) -> "HintReference":
        """Variable stored at [fp + offset]."""
        return cls(Reference(Register.FP, offset, False))

    @classmethod
    def from_ap(cls, offset: int, ap_tracking: ApTracking) -> "HintReference":
        """Variable stored at [ap + offset], ap as of ap_tracking."""
        return cls(
            Reference(Register.AP, offset, False),
            ap_tracking_data=ap_tracking,
        )


IdsData = Dict[str, HintReference]


def _apply_ap_tracking_correction(
    ap: Relocatable, ref_ap_tracking: ApTracking, hint_ap_tracking: ApTracking
) -> Optional[Relocatable]:
    if ref_ap_tracking.group != hint_ap_tracking.group:
        return None
    ap_diff = hint_ap_tracking.offset - ref_ap_tracking.offset
    if ap.offset < ap_diff:
        return None
    return ap - ap_diff


def _get_offset_value_reference(
    vm: VirtualMachine,
    hint_reference: HintReference,
    hint_ap_tracking: ApTracking,
    offset_value: OffsetValue,
) -> Optional[MaybeRelocatable]:
    if not isinstance(offset_value, Reference):
        return None
    if offset_value.register is Register.FP:
        base_addr = vm.get_fp()
    else:
        if hint_reference.ap_tracking_data is None:
            return None
        base_addr = _apply_ap_tracking_correction(
            vm.get_ap(), hint_reference.ap_tracking_data, hint_ap_tracking
        )
        if base_addr is None:
            return None
    if base_addr.offset + offset_value.offset < 0:
        return None
    addr = base_addr + offset_value.offset
    if offset_value.dereference:
        return vm.get_maybe(addr)
    return addr


def compute_addr_from_reference(
    hint_reference: HintReference, vm: VirtualMachine, hint_ap_tracking: ApTracking
) -> Optional[Relocatable]:
    """Address of the variable, or None if the reference cannot be resolved."""
    base = _get_offset_value_reference(
        vm, hint_reference, hint_ap_tracking, hint_reference.offset1
    )
    if not isinstance(base, Relocatable):
        return None

    offset2 = hint_reference.offset2
    if isinstance(offset2, Value):
        if base.offset + offset2.value < 0:
            return None
        return base + offset2.value
    if isinstance(offset2, Reference):
        value = _get_offset_value_reference(vm, hint_reference, hint_ap_tracking, offset2)
        if value is None or isinstance(value, Relocatable):
            return None
        return base + int(value)
    return None


def get_reference_from_var_name(name: str, ids_data: IdsData) -> HintReference:
    try:
        return ids_data[name]
    except KeyError:
        raise UnknownIdentifierError(name) from None


def get_relocatable_from_var_name(
    name: str, vm: VirtualMachine, ids_data: IdsData, ap_tracking: ApTracking
) -> Relocatable:
    """Address of ``ids.<name>``."""
    reference = get_reference_from_var_name(name, ids_data)
    addr = compute_addr_from_reference(reference, vm, ap_tracking)
    if addr is None:
        raise UnknownIdentifierError(name)
    return addr


def get_maybe_relocatable_from_reference(
    vm: VirtualMachine, hint_reference: HintReference, ap_tracking: ApTracking
) -> Optional[MaybeRelocatable]:
    if isinstance(hint_reference.offset1, Immediate):
        return hint_reference.offset1.value
    addr = compute_addr_from_reference(hint_reference, vm, ap_tracking)
    if addr is None:
        return None
    if hint_reference.dereference:
        return vm.get_maybe(addr)
    return addr


def get_integer_from_var_name(
    name: str, vm: VirtualMachine, ids_data: IdsData, ap_tracking: ApTracking
) -> FF:
    """Value of ``ids.<name>``; it must be a field element."""
    reference = get_reference_from_var_name(name, ids_data)
    value = get_maybe_relocatable_from_reference(vm, reference, ap_tracking)
    if value is None or isinstance(value, Relocatable):
        raise IdentifierNotIntegerError(name)
    return value


def insert_value_from_var_name(
    name: str,
    value: MaybeRelocatable,
    vm: VirtualMachine,
    ids_data: IdsData,
    ap_tracking: ApTracking,
) -> None:
    """Write ``ids.<name> = value``. Write-once errors propagate from memory."""
    addr = get_relocatable_from_var_name(name, vm, ids_data, ap_tracking)
    vm.insert_value(addr, value)

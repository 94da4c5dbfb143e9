"""Native implementations of common Starknet hints.

All hint functions follow the HintFunc signature expected by
BuiltinHintProcessor. They read every operand before writing any result and
let every error propagate to the caller.
"""

from primitives.field import FF, STARK_PRIME, to_biguint
from vm.errors import AssertionFailedError, MissingConstantError
from vm.hint_processor import Constants
from vm.hint_reference import (
    ApTracking,
    IdsData,
    get_integer_from_var_name,
    get_relocatable_from_var_name,
    insert_value_from_var_name,
)
from vm.vm_core import ExecutionScopes, VirtualMachine

from hints.uint256 import Uint256

ADDR_BOUND = "starkware.starknet.common.storage.ADDR_BOUND"


# --- Address normalization ---

def normalize_address_set_is_small(
    vm: VirtualMachine,
    exec_scopes: ExecutionScopes,
    ids_data: IdsData,
    ap_tracking: ApTracking,
    constants: Constants,
) -> None:
    """ids.is_small = 1 if ids.addr < ADDR_BOUND else 0.

    ADDR_BOUND comes from the program constants and is checked on every call:
    2**250 < ADDR_BOUND <= 2**251 and 2 * 2**250 < PRIME < 2 * ADDR_BOUND.
    """
    if ADDR_BOUND not in constants:
        raise MissingConstantError("ADDR_BOUND")
    addr_bound = to_biguint(constants[ADDR_BOUND])

    if not (
        2**250 < addr_bound <= 2**251
        and STARK_PRIME > 2 * 2**250
        and STARK_PRIME < 2 * addr_bound
    ):
        raise AssertionFailedError(
            f"assert (2**250 < {addr_bound} <= 2**251) and (2 * 2**250 < PRIME) and "
            f"({addr_bound} * 2 > PRIME); normalize_address() cannot be used with the "
            "current constants."
        )

    addr = to_biguint(get_integer_from_var_name("addr", vm, ids_data, ap_tracking))
    is_small = FF(1) if addr < addr_bound else FF(0)
    insert_value_from_var_name("is_small", is_small, vm, ids_data, ap_tracking)


def normalize_address_set_is_250(
    vm: VirtualMachine,
    exec_scopes: ExecutionScopes,
    ids_data: IdsData,
    ap_tracking: ApTracking,
    constants: Constants,
) -> None:
    """ids.is_250 = 1 if ids.addr < 2**250 else 0."""
    addr = to_biguint(get_integer_from_var_name("addr", vm, ids_data, ap_tracking))
    is_250 = FF(1) if addr < 2**250 else FF(0)
    insert_value_from_var_name("is_250", is_250, vm, ids_data, ap_tracking)


# --- Uint256 division ---

def uint256_offseted_unsigned_div_rem(
    vm: VirtualMachine,
    ids_data: IdsData,
    ap_tracking: ApTracking,
    div_offset_low: int,
    div_offset_high: int,
) -> None:
    """quotient, remainder = divmod(ids.a, ids.div) over unsigned 256-bit values.

    The divisor limbs are read at div_offset_low / div_offset_high from the
    address of ids.div, so a Uint256 embedded in a larger struct can be used
    directly. A zero divisor raises ZeroDivisionError.
    """
    a = Uint256.from_var_name("a", vm, ids_data, ap_tracking)
    div_addr = get_relocatable_from_var_name("div", vm, ids_data, ap_tracking)
    div = Uint256.from_offsets(div_addr, "div", vm, div_offset_low, div_offset_high)

    # Both limbs come from field elements, so both operands are non-negative.
    quotient, remainder = divmod(a.pack(), div.pack())

    Uint256.split(quotient).insert_from_var_name("quotient", vm, ids_data, ap_tracking)
    Uint256.split(remainder).insert_from_var_name("remainder", vm, ids_data, ap_tracking)


def alon(
    vm: VirtualMachine,
    exec_scopes: ExecutionScopes,
    ids_data: IdsData,
    ap_tracking: ApTracking,
    constants: Constants,
) -> None:
    """uint256_unsigned_div_rem with the divisor at its default limb offsets."""
    uint256_offseted_unsigned_div_rem(vm, ids_data, ap_tracking, 0, 1)

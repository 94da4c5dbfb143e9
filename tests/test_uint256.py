"""Unit tests for the Uint256 limb encoding and its memory I/O."""

import random

import pytest

from primitives.field import FF, STARK_PRIME
from vm.errors import IdentifierHasNoMemberError, InconsistentMemoryError, UnknownIdentifierError
from hints.uint256 import Uint256

from tests.helpers import fp_ids, read_felts, write_felts


class TestSplit:

    def test_small_value(self) -> None:
        value = Uint256.split(5)
        assert int(value.low) == 5
        assert int(value.high) == 0

    def test_limb_boundary(self) -> None:
        value = Uint256.split(2**128)
        assert (int(value.low), int(value.high)) == (0, 1)
        value = Uint256.split(2**128 - 1)
        assert (int(value.low), int(value.high)) == (2**128 - 1, 0)

    def test_max_value(self) -> None:
        value = Uint256.split(2**256 - 1)
        assert (int(value.low), int(value.high)) == (2**128 - 1, 2**128 - 1)

    def test_split_pack_round_trip(self) -> None:
        rng = random.Random(1234)
        for _ in range(50):
            low, high = rng.getrandbits(128), rng.getrandbits(128)
            packed = Uint256.from_values(FF(low), FF(high)).pack()
            assert packed == (high << 128) + low
            assert Uint256.split(packed) == Uint256.from_values(FF(low), FF(high))

    def test_from_felt(self) -> None:
        value = Uint256.from_felt(FF(STARK_PRIME - 1))
        assert value.pack() == STARK_PRIME - 1
        assert int(value.high) == (STARK_PRIME - 1) >> 128


class TestMemoryIO:

    def test_from_var_name(self, vm, ap_tracking) -> None:
        write_felts(vm, -4, [11, 22])
        value = Uint256.from_var_name("a", vm, fp_ids(a=-4), ap_tracking)
        assert (int(value.low), int(value.high)) == (11, 22)

    def test_limbs_are_not_copied_on_read(self, vm, ap_tracking) -> None:
        write_felts(vm, -4, [11, 22])
        value = Uint256.from_var_name("a", vm, fp_ids(a=-4), ap_tracking)
        assert value.low is vm.get_maybe(vm.get_fp() - 4)

    def test_missing_low_limb(self, vm, ap_tracking) -> None:
        with pytest.raises(IdentifierHasNoMemberError) as exc_info:
            Uint256.from_var_name("a", vm, fp_ids(a=-4), ap_tracking)
        assert (exc_info.value.name, exc_info.value.member) == ("a", "low")

    def test_missing_high_limb(self, vm, ap_tracking) -> None:
        write_felts(vm, -4, [11])
        with pytest.raises(IdentifierHasNoMemberError) as exc_info:
            Uint256.from_var_name("a", vm, fp_ids(a=-4), ap_tracking)
        assert (exc_info.value.name, exc_info.value.member) == ("a", "high")

    def test_unknown_variable(self, vm, ap_tracking) -> None:
        with pytest.raises(UnknownIdentifierError):
            Uint256.from_var_name("a", vm, {}, ap_tracking)

    def test_from_offsets(self, vm, ap_tracking) -> None:
        write_felts(vm, -6, [1, 2, 3, 4])
        value = Uint256.from_offsets(vm.get_fp() - 6, "div", vm, 2, 3)
        assert (int(value.low), int(value.high)) == (3, 4)

    def test_insert_from_var_name(self, vm, ap_tracking) -> None:
        Uint256.split(2**130 + 7).insert_from_var_name("r", vm, fp_ids(r=-2), ap_tracking)
        assert read_felts(vm, -2, 2) == [7, 4]

    def test_insert_over_different_value(self, vm, ap_tracking) -> None:
        write_felts(vm, -2, [9])
        with pytest.raises(InconsistentMemoryError):
            Uint256.split(7).insert_from_var_name("r", vm, fp_ids(r=-2), ap_tracking)

"""Errors raised by the host VM: memory, addressing and scope handling."""


class VirtualMachineError(Exception):
    """Base class for host VM failures."""


class CouldntParsePrimeError(VirtualMachineError):
    def __init__(self, prime_str: str):
        super().__init__(f"Couldn't parse prime: {prime_str}")
        self.prime_str = prime_str


class RelocatableOffsetError(VirtualMachineError):
    """Relocatable arithmetic produced a negative offset."""

    def __init__(self, segment_index: int, offset: int):
        super().__init__(f"Offset {offset} is negative in segment {segment_index}")
        self.segment_index = segment_index
        self.offset = offset


class RelocatableSegmentError(VirtualMachineError):
    """Address arithmetic across two different segments."""

    def __init__(self, lhs, rhs):
        super().__init__(f"Cannot subtract addresses from different segments: {lhs} - {rhs}")
        self.lhs = lhs
        self.rhs = rhs


class ExitMainScopeError(VirtualMachineError):
    def __init__(self):
        super().__init__("Cannot exit main scope.")


# --- Memory ---

class MemoryAccessError(VirtualMachineError):
    """Base class for failed memory reads and writes."""


class UnknownMemoryCellError(MemoryAccessError):
    def __init__(self, addr):
        super().__init__(f"Unknown memory cell at address {addr}")
        self.addr = addr


class ExpectedIntegerError(MemoryAccessError):
    def __init__(self, addr):
        super().__init__(f"Expected integer at address {addr}")
        self.addr = addr


class InconsistentMemoryError(MemoryAccessError):
    """A write targeted a cell that already holds a different value."""

    def __init__(self, addr, old_value, new_value):
        super().__init__(
            f"Inconsistent memory assignment at address {addr}. "
            f"{old_value} != {new_value}"
        )
        self.addr = addr
        self.old_value = old_value
        self.new_value = new_value


# --- Hints ---

class HintError(Exception):
    """Base class for failures raised while executing a hint."""


class UnknownHintError(HintError):
    def __init__(self, code: str):
        super().__init__(f"Unknown hint: {code}")
        self.code = code


class MissingConstantError(HintError):
    def __init__(self, name: str):
        super().__init__(f"Missing constant: {name}")
        self.name = name


class UnknownIdentifierError(HintError):
    def __init__(self, name: str):
        super().__init__(f"Unknown identifier {name}")
        self.name = name


class IdentifierNotIntegerError(HintError):
    def __init__(self, name: str):
        super().__init__(f"Expected ids.{name} to be an Integer value")
        self.name = name


class IdentifierHasNoMemberError(HintError):
    def __init__(self, name: str, member: str):
        super().__init__(f"Variable {name} has no member {member}")
        self.name = name
        self.member = member


class AssertionFailedError(HintError):
    """A hint precondition over configuration constants does not hold."""

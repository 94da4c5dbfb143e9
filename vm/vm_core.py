"""Minimal VM handle exposed to hints: registers, memory and exec scopes.

Instruction execution is not modeled. Hints see only the run context
registers, read/write access to memory, and the execution scope stack.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from primitives.field import FF
from primitives.memory import MaybeRelocatable, Memory, MemorySegmentManager
from primitives.relocatable import Relocatable
from vm.errors import (
    ExitMainScopeError,
    ExpectedIntegerError,
    UnknownMemoryCellError,
)


@dataclass
class RunContext:
    """Register state. ap/fp/pc are addresses in memory."""
    ap: Relocatable
    fp: Relocatable
    pc: Relocatable


class VirtualMachine:
    """Memory and registers as seen from inside a hint."""

    def __init__(
        self,
        run_context: Optional[RunContext] = None,
        memory: Optional[Memory] = None,
    ) -> None:
        self.memory = memory if memory is not None else Memory()
        self.segments = MemorySegmentManager(self.memory)
        if run_context is None:
            program_base = self.segments.add()
            execution_base = self.segments.add()
            run_context = RunContext(ap=execution_base, fp=execution_base, pc=program_base)
        self.run_context = run_context

    def get_ap(self) -> Relocatable:
        return self.run_context.ap

    def get_fp(self) -> Relocatable:
        return self.run_context.fp

    def get_pc(self) -> Relocatable:
        return self.run_context.pc

    def get_maybe(self, addr: Relocatable) -> Optional[MaybeRelocatable]:
        return self.memory.get(addr)

    def get_integer(self, addr: Relocatable) -> FF:
        value = self.memory.get(addr)
        if value is None:
            raise UnknownMemoryCellError(addr)
        if isinstance(value, Relocatable):
            raise ExpectedIntegerError(addr)
        return value

    def insert_value(self, addr: Relocatable, value: MaybeRelocatable) -> None:
        self.memory.insert(addr, value)


@dataclass
class ExecutionScopes:
    """Stack of hint-local variable scopes. The first scope is the main scope."""
    data: List[Dict[str, Any]] = field(default_factory=lambda: [{}])

    def enter_scope(self, new_scope: Optional[Dict[str, Any]] = None) -> None:
        self.data.append(dict(new_scope) if new_scope else {})

    def exit_scope(self) -> None:
        if len(self.data) == 1:
            raise ExitMainScopeError()
        self.data.pop()

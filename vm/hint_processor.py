"""Dispatch of hint code strings to native callbacks.

Every callback has the signature

    func(vm, exec_scopes, ids_data, ap_tracking, constants) -> None

and signals failure by raising. The processor never catches: a failing hint
aborts the current VM step with the original exception.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional

from primitives.field import FF
from vm.errors import UnknownHintError
from vm.hint_reference import ApTracking, IdsData
from vm.vm_core import ExecutionScopes, VirtualMachine

logger = logging.getLogger(__name__)

Constants = Mapping[str, FF]
HintFunc = Callable[[VirtualMachine, ExecutionScopes, IdsData, ApTracking, Constants], None]

ENTER_SCOPE_HINT = "vm_enter_scope()"
EXIT_SCOPE_HINT = "vm_exit_scope()"


@dataclass
class HintProcessorData:
    """Compiled hint: source code plus the variables visible to it."""
    code: str
    ids_data: IdsData = field(default_factory=dict)
    ap_tracking: ApTracking = field(default_factory=ApTracking)


def enter_scope(vm, exec_scopes, ids_data, ap_tracking, constants) -> None:
    exec_scopes.enter_scope()


def exit_scope(vm, exec_scopes, ids_data, ap_tracking, constants) -> None:
    exec_scopes.exit_scope()


def hint_name(func: HintFunc) -> str:
    """Name used in log lines; partials and callable objects have no __name__."""
    return getattr(func, "__name__", repr(func))


def builtin_hints() -> Dict[str, HintFunc]:
    """Baseline hints every processor understands."""
    return {
        ENTER_SCOPE_HINT: enter_scope,
        EXIT_SCOPE_HINT: exit_scope,
    }


class BuiltinHintProcessor:
    """Hint table made of the builtin hints updated with extra_hints."""

    def __init__(self, extra_hints: Optional[Mapping[str, HintFunc]] = None) -> None:
        self.hints: Dict[str, HintFunc] = builtin_hints()
        if extra_hints:
            self.hints.update(extra_hints)

    def execute_hint(
        self,
        vm: VirtualMachine,
        exec_scopes: ExecutionScopes,
        hint_data: HintProcessorData,
        constants: Constants,
    ) -> None:
        func = self.hints.get(hint_data.code)
        if func is None:
            raise UnknownHintError(hint_data.code)
        logger.debug("Executing hint %s at pc=%s", hint_name(func), vm.get_pc())
        func(vm, exec_scopes, hint_data.ids_data, hint_data.ap_tracking, constants)

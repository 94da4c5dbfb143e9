"""
Pytest configuration and shared fixtures for the hint tests.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so absolute imports work
# (tests/ is inside the repository root, so parent is the root)
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

from vm.hint_reference import ApTracking  # noqa: E402
from vm.vm_core import ExecutionScopes, VirtualMachine  # noqa: E402


@pytest.fixture
def vm() -> VirtualMachine:
    """VM with fp = ap = 1:10, so [fp - 10] .. [fp - 1] are addressable."""
    machine = VirtualMachine()
    machine.run_context.fp = machine.run_context.fp + 10
    machine.run_context.ap = machine.run_context.ap + 10
    return machine


@pytest.fixture
def exec_scopes() -> ExecutionScopes:
    return ExecutionScopes()


@pytest.fixture
def ap_tracking() -> ApTracking:
    return ApTracking()


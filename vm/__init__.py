"""VM - the host side seen by hints: memory handle, variable references,
execution scopes and the hint processor.

Submodules are imported directly (``from vm.hint_reference import ...``);
this package does not re-export them so that ``primitives`` can depend on
``vm.errors`` without an import cycle.
"""

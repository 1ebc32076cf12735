"""
Enumerator — Declaration-ordered listings over a Registry

Every call derives a fresh list from the immutable registry; there is no
cursor state, so listings are restartable and identical across calls.
"""

from typing import List

from .errors import NotFound
from .registry import Registry
from .schema import CapabilityRecord, Module


class Enumerator:
    """Read-only listings of modules and capabilities."""

    def __init__(self, registry: Registry):
        self.registry = registry

    def list_modules(self) -> List[str]:
        """Module ids in declaration order."""
        return list(self.registry.module_ids)

    def get_module(self, module_id: str) -> Module:
        """
        Module by exact id.

        Raises:
            NotFound: Unknown module id
        """
        module = self.registry.module(module_id)
        if module is None:
            raise NotFound(module_id=module_id)
        return module

    def list_capabilities(self, module_id: str) -> List[str]:
        """
        Capability names of a module in declaration order.

        Raises:
            NotFound: Unknown module id
        """
        return list(self.get_module(module_id).capability_names)

    def list_records(self, module_id: str) -> List[CapabilityRecord]:
        """Capability records of a module in declaration order."""
        return list(self.get_module(module_id).capabilities)

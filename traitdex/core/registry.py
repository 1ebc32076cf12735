"""
Registry — Immutable, indexed catalog aggregate

Two indexes are derived from the validated modules:

    by_qualified_name   (module id, name) -> CapabilityRecord   ground truth
    by_bare_name        name -> (module id, ...)                 declaration order

A bare name may map to several modules ("Write" lives in both fmt and io).
That is not an error here; the resolver decides what to do with it.

The registry exposes tuples and read-only mapping views only. Rebuilding
from a different input means calling build() again and dropping the old
instance.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .schema import CapabilityRecord, Module


QualifiedName = Tuple[str, str]


@dataclass(frozen=True)
class Registry:
    """
    Validated catalog with qualified and bare-name indexes.

    Equality compares modules only (indexes are derived), so two registries
    built from content-equal inputs compare equal.
    """
    modules: Tuple[Module, ...]
    by_qualified_name: Mapping[QualifiedName, CapabilityRecord] = field(
        repr=False, compare=False
    )
    by_bare_name: Mapping[str, Tuple[str, ...]] = field(repr=False, compare=False)
    _modules_by_id: Mapping[str, Module] = field(repr=False, compare=False)

    # -------------------------------------------------------------------------
    # Module access
    # -------------------------------------------------------------------------

    @property
    def module_ids(self) -> Tuple[str, ...]:
        """Module ids in declaration order."""
        return tuple(module.id for module in self.modules)

    def module(self, module_id: str) -> Optional[Module]:
        """Module by exact id, or None."""
        return self._modules_by_id.get(module_id)

    def has_module(self, module_id: str) -> bool:
        return module_id in self._modules_by_id

    # -------------------------------------------------------------------------
    # Record access
    # -------------------------------------------------------------------------

    def record(self, module_id: str, name: str) -> Optional[CapabilityRecord]:
        """Record by qualified name, or None."""
        return self.by_qualified_name.get((module_id, name))

    def owners(self, name: str) -> Tuple[str, ...]:
        """Modules declaring `name`, in declaration order (empty if none)."""
        return self.by_bare_name.get(name, ())

    def shared_names(self) -> Dict[str, Tuple[str, ...]]:
        """Bare names declared by more than one module."""
        return {
            name: owners for name, owners in self.by_bare_name.items()
            if len(owners) > 1
        }

    def iter_records(self) -> Iterator[Tuple[str, CapabilityRecord]]:
        """Yield (module id, record) pairs in declaration order."""
        for module in self.modules:
            for record in module.capabilities:
                yield module.id, record

    def __len__(self) -> int:
        """Number of declared capabilities."""
        return len(self.by_qualified_name)

    def stats(self) -> Dict[str, int]:
        return {
            "modules": len(self.modules),
            "capabilities": len(self.by_qualified_name),
            "names": len(self.by_bare_name),
            "shared_names": len(self.shared_names()),
        }


def build(modules: Iterable[Module]) -> Registry:
    """
    Assemble validated modules into a Registry.

    Args:
        modules: Validated modules in declaration order

    Returns:
        Immutable Registry

    Raises:
        ValueError: If two modules share an id (the validator's mapping
            input cannot produce this; guards direct callers)
    """
    ordered = tuple(modules)
    modules_by_id: Dict[str, Module] = {}
    qualified: Dict[QualifiedName, CapabilityRecord] = {}
    bare: Dict[str, List[str]] = {}

    for module in ordered:
        if module.id in modules_by_id:
            raise ValueError(f"Duplicate module id: {module.id}")
        modules_by_id[module.id] = module

        for record in module.capabilities:
            key = (module.id, record.name)
            if key in qualified:
                raise ValueError(f"Duplicate capability: {module.id}::{record.name}")
            qualified[key] = record
            bare.setdefault(record.name, []).append(module.id)

    return Registry(
        modules=ordered,
        by_qualified_name=MappingProxyType(qualified),
        by_bare_name=MappingProxyType({name: tuple(ids) for name, ids in bare.items()}),
        _modules_by_id=MappingProxyType(modules_by_id),
    )

"""
Schema — Record types for the trait catalog

A catalog is a sequence of topical modules, each holding capability
(trait) records in declaration order:

    Module "fmt"
      ├─ Display
      ├─ Debug
      └─ Write

Records are frozen once built. Facts are stored as tuples and capabilities
as an ordered tuple, so equality between two modules is order-sensitive
and two loads of the same input compare equal.

Wire keys (the published catalog format) are kept here as constants so the
validator and the exporter read and write the same shape.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple


# =============================================================================
# Wire Format Keys
# =============================================================================

KEY_INTRODUCTORY = "introductory"
KEY_CAPABILITIES = "traits"
KEY_IMPLEMENTOR = "implementor"
KEY_TRAIT = "trait"
KEY_EXAMPLE = "examples"
KEY_SIGNATURE = "trait_signature"


def is_blank(text: str) -> bool:
    """True if text is empty or whitespace only."""
    return not text or not text.strip()


# =============================================================================
# Records
# =============================================================================

@dataclass(frozen=True)
class CapabilityRecord:
    """
    One documented trait.

    Attributes:
        name: Unique within its owning module
        implementor_facts: What a type gains by implementing the trait
        trait_facts: Meta-properties of the trait itself
        example: Illustrative source text (opaque)
        signature: Formal declaration of the trait (opaque)
    """
    name: str
    implementor_facts: Tuple[str, ...]
    trait_facts: Tuple[str, ...]
    example: str
    signature: str

    def to_dict(self) -> Dict:
        """Wire-shaped dict (without the name, which is the mapping key)."""
        return {
            KEY_IMPLEMENTOR: list(self.implementor_facts),
            KEY_TRAIT: list(self.trait_facts),
            KEY_EXAMPLE: self.example,
            KEY_SIGNATURE: self.signature,
        }


@dataclass(frozen=True)
class Module:
    """
    A named topical grouping of capability records.

    `capabilities` is a tuple in declaration order; that order is the
    canonical enumeration order for the module.
    """
    id: str
    introductory: str
    capabilities: Tuple[CapabilityRecord, ...]
    _index: Mapping[str, CapabilityRecord] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        index = {record.name: record for record in self.capabilities}
        object.__setattr__(self, "_index", MappingProxyType(index))

    @property
    def capability_names(self) -> Tuple[str, ...]:
        """Capability names in declaration order."""
        return tuple(record.name for record in self.capabilities)

    def get(self, name: str) -> Optional[CapabilityRecord]:
        """Record by exact name, or None."""
        return self._index.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self.capabilities)

    def to_dict(self) -> Dict:
        """Wire-shaped dict (without the id, which is the mapping key)."""
        return {
            KEY_INTRODUCTORY: self.introductory,
            KEY_CAPABILITIES: {
                record.name: record.to_dict() for record in self.capabilities
            },
        }

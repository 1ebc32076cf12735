"""
Resolver — Name resolution with explicit disambiguation

Enables callers to reference a capability by:
- Qualified name (module hint + name): always one record or not found
- Bare name: found only when exactly one module declares it

When a bare name is declared by several modules the resolver reports every
candidate module in declaration order and never picks one.

Matching is exact and case-sensitive. Trimming, case folding and fuzzy
matching belong to the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .errors import Ambiguous, NotFound
from .registry import Registry
from .schema import CapabilityRecord


class ResolveStatus(Enum):
    """Resolution outcome."""
    FOUND = "found"
    AMBIGUOUS = "ambiguous"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ResolveResult:
    """Result of name resolution."""
    status: ResolveStatus
    name: str
    module_id: Optional[str] = None
    record: Optional[CapabilityRecord] = None
    candidates: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return self.status == ResolveStatus.FOUND

    def unwrap(self) -> CapabilityRecord:
        """Return the record or raise the matching typed failure."""
        if self.status == ResolveStatus.FOUND:
            return self.record
        if self.status == ResolveStatus.AMBIGUOUS:
            raise Ambiguous(self.name, self.candidates)
        raise NotFound(self.name, self.module_id)


class Resolver:
    """
    Stateless lookup façade over a Registry.

    Safe to share between threads: it only reads the immutable registry.
    """

    def __init__(self, registry: Registry):
        self.registry = registry

    def lookup(self, name: str, module: Optional[str] = None) -> ResolveResult:
        """
        Resolve a name without raising.

        Args:
            name: Capability name (exact, case-sensitive)
            module: Optional module hint

        Returns:
            ResolveResult with status and record or candidates
        """
        if module is not None:
            record = self.registry.record(module, name)
            if record is None:
                return ResolveResult(ResolveStatus.NOT_FOUND, name, module_id=module)
            return ResolveResult(ResolveStatus.FOUND, name, module_id=module, record=record)

        owners = self.registry.owners(name)
        if not owners:
            return ResolveResult(ResolveStatus.NOT_FOUND, name)
        if len(owners) > 1:
            return ResolveResult(ResolveStatus.AMBIGUOUS, name, candidates=owners)

        owner = owners[0]
        return ResolveResult(
            ResolveStatus.FOUND,
            name,
            module_id=owner,
            record=self.registry.record(owner, name),
            candidates=owners,
        )

    def resolve(self, name: str, module: Optional[str] = None) -> CapabilityRecord:
        """
        Resolve a name to exactly one record.

        Raises:
            NotFound: No such capability (in `module`, if given)
            Ambiguous: Bare name declared by several modules
        """
        return self.lookup(name, module).unwrap()

    def owners(self, name: str) -> Tuple[str, ...]:
        """Modules declaring a bare name, in declaration order."""
        return self.registry.owners(name)

    def is_ambiguous(self, name: str) -> bool:
        return len(self.registry.owners(name)) > 1

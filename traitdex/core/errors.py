"""
Errors — Typed failures raised by the catalog core

    DexError
      ├─ SchemaViolation     fatal, raised while loading
      ├─ CatalogFormatError  fatal, catalog file could not be decoded
      ├─ NotFound            recoverable query miss
      └─ Ambiguous           recoverable, bare name owned by several modules

The core never prints or logs; callers decide how to present these.
"""

from typing import Optional, Tuple


class DexError(Exception):
    """Base class for all traitdex errors."""


def qualified(module_id: Optional[str], name: Optional[str]) -> str:
    """Format a qualified name as module::Name (parts may be missing)."""
    if module_id and name:
        return f"{module_id}::{name}"
    return module_id or name or ""


class SchemaViolation(DexError):
    """
    Raw catalog input does not match the schema.

    Attributes:
        module_id: Offending module (None for root-level problems)
        capability_name: Offending capability, if the problem is inside one
        field: Wire key (or "<root>", "<module>", "<capability>")
        reason: Human-readable description
    """

    def __init__(
        self,
        module_id: Optional[str],
        field: str,
        reason: str,
        capability_name: Optional[str] = None
    ):
        self.module_id = module_id
        self.capability_name = capability_name
        self.field = field
        self.reason = reason
        location = qualified(module_id, capability_name) or "catalog"
        super().__init__(f"{location}: '{field}' {reason}")


class CatalogFormatError(DexError):
    """A catalog file could not be decoded into a mapping."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class NotFound(DexError):
    """
    A lookup referenced a name or module absent from the registry.

    For module lookups `name` is None; for bare-name lookups `module_id`
    is None.
    """

    def __init__(self, name: Optional[str] = None, module_id: Optional[str] = None):
        self.name = name
        self.module_id = module_id
        if name is None:
            message = f"No module named '{module_id}'"
        elif module_id is None:
            message = f"No capability named '{name}'"
        else:
            message = f"No capability named '{name}' in module '{module_id}'"
        super().__init__(message)


class Ambiguous(DexError):
    """
    A bare name is declared by more than one module.

    `candidates` lists every owning module id in declaration order.
    """

    def __init__(self, name: str, candidates: Tuple[str, ...]):
        self.name = name
        self.candidates = tuple(candidates)
        options = ", ".join(qualified(m, name) for m in self.candidates)
        super().__init__(f"'{name}' is declared in several modules: {options}")

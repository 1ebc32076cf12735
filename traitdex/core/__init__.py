"""
Core — Catalog data model and lookup engine

Contains the foundational pieces:
- Schema: Module and CapabilityRecord record types
- Validator: Fail-fast checks of raw catalog input
- Registry: Immutable aggregate with qualified and bare-name indexes
- Resolver: Name resolution with explicit disambiguation
- Enumerator: Declaration-ordered listings
- Export: Wire-shape serialization and fingerprints
- Loader: load() from raw input, files, or the bundled catalog
"""

from .errors import DexError, SchemaViolation, CatalogFormatError, NotFound, Ambiguous, qualified
from .schema import (
    CapabilityRecord, Module,
    KEY_INTRODUCTORY, KEY_CAPABILITIES, KEY_IMPLEMENTOR, KEY_TRAIT, KEY_EXAMPLE, KEY_SIGNATURE,
)
from .validator import validate
from .registry import Registry, build
from .resolver import Resolver, ResolveStatus, ResolveResult
from .enumerator import Enumerator
from .export import export, dumps, fingerprint, EXPORT_FORMATS
from .loader import load, load_file, load_default, read_catalog, DEFAULT_CATALOG

__all__ = [
    # Errors
    "DexError", "SchemaViolation", "CatalogFormatError", "NotFound", "Ambiguous", "qualified",
    # Schema
    "CapabilityRecord", "Module",
    "KEY_INTRODUCTORY", "KEY_CAPABILITIES", "KEY_IMPLEMENTOR", "KEY_TRAIT",
    "KEY_EXAMPLE", "KEY_SIGNATURE",
    # Validation and building
    "validate", "Registry", "build",
    # Queries
    "Resolver", "ResolveStatus", "ResolveResult", "Enumerator",
    # Export
    "export", "dumps", "fingerprint", "EXPORT_FORMATS",
    # Loading
    "load", "load_file", "load_default", "read_catalog", "DEFAULT_CATALOG",
]

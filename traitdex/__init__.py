"""
traitdex — Reference dictionary of Rust standard-library traits

Exact, case-sensitive lookup. Shared names are never guessed.

Usage:
    traitdex list
    traitdex list io
    traitdex show Clone
    traitdex show io::Write
    traitdex where Write
    traitdex check my_catalog.yaml
    traitdex export --to yaml -o catalog.yaml
    traitdex config --set display.format json

Library:
    from traitdex import load_default, Resolver

    registry = load_default()
    record = Resolver(registry).resolve("Write", "fmt")
"""

__version__ = "0.1.0"

# Core layer (data)
from .core.errors import DexError, SchemaViolation, CatalogFormatError, NotFound, Ambiguous
from .core.schema import CapabilityRecord, Module
from .core.validator import validate
from .core.registry import Registry, build
from .core.resolver import Resolver, ResolveStatus, ResolveResult
from .core.enumerator import Enumerator
from .core.export import export, dumps, fingerprint
from .core.loader import load, load_file, load_default

# Configuration
from .config import Config, ConfigManager, get_config

__all__ = [
    "__version__",
    # Errors
    "DexError", "SchemaViolation", "CatalogFormatError", "NotFound", "Ambiguous",
    # Data
    "CapabilityRecord", "Module", "Registry",
    # Operations
    "validate", "build", "load", "load_file", "load_default",
    "Resolver", "ResolveStatus", "ResolveResult", "Enumerator",
    "export", "dumps", "fingerprint",
    # Configuration
    "Config", "ConfigManager", "get_config",
]

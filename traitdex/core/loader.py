"""
Loader — Build a Registry from raw input or a catalog file

    load(raw)          validate + build, one explicit value per call
    load_file(path)    decode .json (orjson) or .yaml/.yml (PyYAML), then load
    load_default()     the catalog bundled with the package

There is no process-wide registry: each call returns a new, independent
Registry, so a caller can hold several (e.g. a real catalog and a
deliberately malformed one in tests) side by side.
"""

from pathlib import Path
from typing import Any, Union

import orjson
import yaml

from .errors import CatalogFormatError
from .registry import Registry, build
from .validator import validate


DEFAULT_CATALOG = Path(__file__).resolve().parent.parent / "data" / "catalog.json"

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def load(raw: Any) -> Registry:
    """
    Validate raw catalog input and build a Registry.

    Raises:
        SchemaViolation: First violation found; no registry is produced
    """
    return build(validate(raw))


def read_catalog(path: Union[str, Path]) -> Any:
    """
    Decode a catalog file without validating it.

    Raises:
        FileNotFoundError: Path does not exist
        OSError: Path is a directory or cannot be read
        CatalogFormatError: Unknown suffix or undecodable content
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
        valid = ", ".join(JSON_SUFFIXES + YAML_SUFFIXES)
        raise CatalogFormatError(path, f"unsupported file type '{suffix}'. Valid: {valid}")

    content = path.read_bytes()

    if suffix in JSON_SUFFIXES:
        try:
            return orjson.loads(content)
        except orjson.JSONDecodeError as e:
            raise CatalogFormatError(path, f"invalid JSON: {e}") from e

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise CatalogFormatError(path, f"invalid YAML: {e}") from e


def load_file(path: Union[str, Path]) -> Registry:
    """Read, validate and build a catalog file."""
    return load(read_catalog(path))


def load_default() -> Registry:
    """Load the catalog bundled with the package."""
    return load_file(DEFAULT_CATALOG)

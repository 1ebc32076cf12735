"""
Export — Serialize a Registry back to the wire shape

export() produces the same nested shape the loader accepts, in
declaration order, so load(export(load(x))) == load(x).

Serialization:
    json   orjson, two-space indent, key order kept
    yaml   PyYAML, sort_keys=False, multi-line text as literal blocks

fingerprint() hashes the compact JSON export with xxhash. Content-equal
registries share a fingerprint; a reload can compare fingerprints to see
whether anything changed.
"""

from typing import Any, Dict

import orjson
import xxhash
import yaml

from .registry import Registry


EXPORT_FORMATS = ("json", "yaml")


def export(registry: Registry) -> Dict[str, Any]:
    """Registry -> wire-shaped nested dict (plain lists and dicts)."""
    return {module.id: module.to_dict() for module in registry.modules}


class _LiteralDumper(yaml.SafeDumper):
    """SafeDumper that writes multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str):
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_LiteralDumper.add_representer(str, _represent_str)


def dumps(registry: Registry, format: str = "json") -> str:
    """
    Serialize a registry.

    Args:
        registry: Registry to serialize
        format: "json" | "yaml"

    Raises:
        ValueError: If format is unknown
    """
    data = export(registry)

    if format == "json":
        return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n"

    if format == "yaml":
        return yaml.dump(
            data,
            Dumper=_LiteralDumper,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )

    raise ValueError(f"Unknown export format '{format}'. Valid: {', '.join(EXPORT_FORMATS)}")


def fingerprint(registry: Registry) -> str:
    """Stable content digest (xxh64 hex) of the registry."""
    return xxhash.xxh64(orjson.dumps(export(registry))).hexdigest()

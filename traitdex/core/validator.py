"""
Validator — Check raw catalog input against the schema

Turns the loosely structured nested literal into `Module` records, or
raises `SchemaViolation` for the first problem found.

Traversal order is fixed so the same malformed input always reports the
same violation:
    1. Modules in declaration order
    2. Module fields: introductory, traits
    3. Capabilities in declaration order
    4. Capability fields: implementor, trait, examples, trait_signature

Text payloads (examples, signatures, facts) are kept verbatim; "empty"
means empty or whitespace only.
"""

from collections.abc import Mapping
from typing import Any, List, Tuple

from .errors import SchemaViolation
from .schema import (
    CapabilityRecord, Module, is_blank,
    KEY_INTRODUCTORY, KEY_CAPABILITIES,
    KEY_IMPLEMENTOR, KEY_TRAIT, KEY_EXAMPLE, KEY_SIGNATURE,
)


def validate(raw: Any) -> Tuple[Module, ...]:
    """
    Validate a raw catalog and return its modules in declaration order.

    Args:
        raw: Mapping of module id -> module-shaped mapping

    Returns:
        Tuple of validated Module records

    Raises:
        SchemaViolation: On the first violation, in traversal order
    """
    if not isinstance(raw, Mapping):
        raise SchemaViolation(None, "<root>", f"must be a mapping, got {_type_name(raw)}")

    modules = []
    for module_id, body in raw.items():
        modules.append(validate_module(module_id, body))
    return tuple(modules)


def validate_module(module_id: Any, body: Any) -> Module:
    """Validate one module entry."""
    if not isinstance(module_id, str) or is_blank(module_id):
        raise SchemaViolation(
            str(module_id), "<module>", "module id must be a non-empty string"
        )

    if not isinstance(body, Mapping):
        raise SchemaViolation(module_id, "<module>", f"must be a mapping, got {_type_name(body)}")

    introductory = _require_text(body, KEY_INTRODUCTORY, module_id)

    if KEY_CAPABILITIES not in body:
        raise SchemaViolation(module_id, KEY_CAPABILITIES, "is missing")
    traits = body[KEY_CAPABILITIES]
    if not isinstance(traits, Mapping):
        raise SchemaViolation(
            module_id, KEY_CAPABILITIES, f"must be a mapping, got {_type_name(traits)}"
        )
    if not traits:
        raise SchemaViolation(module_id, KEY_CAPABILITIES, "must declare at least one capability")

    records = [validate_capability(module_id, name, value) for name, value in traits.items()]
    return Module(id=module_id, introductory=introductory, capabilities=tuple(records))


def validate_capability(module_id: str, name: Any, body: Any) -> CapabilityRecord:
    """Validate one capability entry of `module_id`."""
    if not isinstance(name, str) or is_blank(name):
        raise SchemaViolation(
            module_id, "<capability>", "capability name must be a non-empty string",
            capability_name=str(name)
        )

    if not isinstance(body, Mapping):
        raise SchemaViolation(
            module_id, "<capability>", f"must be a mapping, got {_type_name(body)}",
            capability_name=name
        )

    implementor = _require_facts(body, KEY_IMPLEMENTOR, module_id, name)
    trait = _require_facts(body, KEY_TRAIT, module_id, name)
    if not implementor and not trait:
        raise SchemaViolation(
            module_id, KEY_TRAIT,
            f"must contain at least one fact when '{KEY_IMPLEMENTOR}' is empty",
            capability_name=name
        )

    example = _require_text(body, KEY_EXAMPLE, module_id, name)
    signature = _require_text(body, KEY_SIGNATURE, module_id, name)

    return CapabilityRecord(
        name=name,
        implementor_facts=implementor,
        trait_facts=trait,
        example=example,
        signature=signature,
    )


# =============================================================================
# Field Checks
# =============================================================================

def _require_text(body: Mapping, key: str, module_id: str, name: str = None) -> str:
    """Required non-empty string field."""
    if key not in body:
        raise SchemaViolation(module_id, key, "is missing", capability_name=name)
    value = body[key]
    if not isinstance(value, str):
        raise SchemaViolation(
            module_id, key, f"must be a string, got {_type_name(value)}", capability_name=name
        )
    if is_blank(value):
        raise SchemaViolation(module_id, key, "must be non-empty", capability_name=name)
    return value


def _require_facts(body: Mapping, key: str, module_id: str, name: str) -> Tuple[str, ...]:
    """Required sequence of non-empty strings (the sequence itself may be empty)."""
    if key not in body:
        raise SchemaViolation(module_id, key, "is missing", capability_name=name)
    value = body[key]
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise SchemaViolation(
            module_id, key, f"must be a list of strings, got {_type_name(value)}",
            capability_name=name
        )

    facts: List[str] = []
    for position, fact in enumerate(value):
        if not isinstance(fact, str) or is_blank(fact):
            raise SchemaViolation(
                module_id, key, f"entry {position} must be a non-empty string",
                capability_name=name
            )
        facts.append(fact)
    return tuple(facts)


def _type_name(value: Any) -> str:
    return type(value).__name__

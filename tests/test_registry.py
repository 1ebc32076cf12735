"""
Tests for Registry — Indexed, immutable catalog aggregate

These tests validate:
- Qualified index holds every record exactly once
- Bare-name index lists owners in declaration order
- Shared names are kept, not rejected
- Immutability of modules, records and indexes
- Content equality between independent loads
"""

import dataclasses

import pytest

from traitdex.core.loader import load
from traitdex.core.registry import build
from traitdex.core.schema import CapabilityRecord, Module


class TestIndexes:
    """Qualified and bare-name indexes."""

    def test_qualified_index_covers_every_record(self, shared_registry):
        assert len(shared_registry) == 5
        assert set(shared_registry.by_qualified_name) == {
            ("fmt", "Display"), ("fmt", "Write"),
            ("io", "Read"), ("io", "Write"),
            ("clone", "Clone"),
        }

    def test_record_by_qualified_name(self, shared_registry):
        record = shared_registry.record("io", "Write")
        assert record.name == "Write"
        assert record.implementor_facts == ("I can be written into with bytes.",)

    def test_record_missing(self, shared_registry):
        assert shared_registry.record("io", "Display") is None
        assert shared_registry.record("nope", "Write") is None

    def test_bare_index_in_declaration_order(self, shared_registry):
        assert shared_registry.owners("Write") == ("fmt", "io")

    def test_bare_index_single_owner(self, shared_registry):
        assert shared_registry.owners("Clone") == ("clone",)

    def test_bare_index_unknown(self, shared_registry):
        assert shared_registry.owners("Iterator") == ()

    def test_shared_names(self, shared_registry):
        assert shared_registry.shared_names() == {"Write": ("fmt", "io")}

    def test_declaration_order_follows_input(self, catalog_factory):
        catalog_factory.add_trait("io", "Write")
        catalog_factory.add_trait("fmt", "Write")
        registry = catalog_factory.build()
        assert registry.owners("Write") == ("io", "fmt")
        assert registry.module_ids == ("io", "fmt")

    def test_stats(self, shared_registry):
        assert shared_registry.stats() == {
            "modules": 3,
            "capabilities": 5,
            "names": 4,
            "shared_names": 1,
        }

    def test_iter_records(self, shared_registry):
        pairs = [(m, r.name) for m, r in shared_registry.iter_records()]
        assert pairs == [
            ("fmt", "Display"), ("fmt", "Write"),
            ("io", "Read"), ("io", "Write"),
            ("clone", "Clone"),
        ]

    def test_empty_registry(self):
        registry = load({})
        assert registry.modules == ()
        assert len(registry) == 0
        assert registry.owners("Write") == ()


class TestBuild:
    """build() guards for direct callers."""

    def _module(self, module_id, *names):
        records = tuple(
            CapabilityRecord(name=n, implementor_facts=("x",), trait_facts=(), example="e", signature="s")
            for n in names
        )
        return Module(id=module_id, introductory="intro", capabilities=records)

    def test_duplicate_module_rejected(self):
        with pytest.raises(ValueError, match="Duplicate module"):
            build([self._module("fmt", "Display"), self._module("fmt", "Debug")])

    def test_duplicate_capability_rejected(self):
        with pytest.raises(ValueError, match="Duplicate capability"):
            build([self._module("fmt", "Display", "Display")])


class TestImmutability:
    """Nothing reachable from a registry can be changed."""

    def test_registry_frozen(self, shared_registry):
        with pytest.raises(dataclasses.FrozenInstanceError):
            shared_registry.modules = ()

    def test_module_frozen(self, shared_registry):
        with pytest.raises(dataclasses.FrozenInstanceError):
            shared_registry.modules[0].introductory = "changed"

    def test_record_frozen(self, shared_registry):
        record = shared_registry.record("fmt", "Write")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.example = "changed"

    def test_indexes_read_only(self, shared_registry):
        with pytest.raises(TypeError):
            shared_registry.by_qualified_name[("fmt", "Debug")] = None
        with pytest.raises(TypeError):
            shared_registry.by_bare_name["Debug"] = ("fmt",)

    def test_input_mutation_does_not_leak(self, shared_factory):
        raw = shared_factory.raw()
        registry = load(raw)
        raw["io"]["traits"]["Write"]["implementor"].append("Injected.")
        raw["io"]["introductory"] = "changed"
        assert registry.record("io", "Write").implementor_facts == ("I can be written into with bytes.",)
        assert registry.module("io").introductory == "I deal with input and output."


class TestEquality:
    """Content equality between independent registries."""

    def test_two_loads_equal(self, shared_factory):
        assert load(shared_factory.raw()) == load(shared_factory.raw())

    def test_independent_instances(self, shared_factory):
        first = load(shared_factory.raw())
        second = load(shared_factory.raw())
        assert first is not second

    def test_order_matters(self, catalog_factory):
        catalog_factory.add_trait("fmt", "Display").add_trait("fmt", "Debug")
        reordered = catalog_factory.raw()
        traits = reordered["fmt"]["traits"]
        reordered["fmt"]["traits"] = {"Debug": traits["Debug"], "Display": traits["Display"]}
        assert catalog_factory.build() != load(reordered)

    def test_content_difference(self, shared_factory):
        changed = shared_factory.raw()
        changed["clone"]["traits"]["Clone"]["examples"] = "different"
        assert shared_factory.build() != load(changed)


class TestModule:
    """Per-module access."""

    def test_get(self, shared_registry):
        module = shared_registry.module("fmt")
        assert module.get("Write") is shared_registry.record("fmt", "Write")
        assert module.get("Read") is None

    def test_contains_is_exact(self, shared_registry):
        module = shared_registry.module("io")
        assert "Read" in module
        assert "read" not in module

    def test_to_dict_keeps_order(self, shared_registry):
        assert list(shared_registry.module("io").to_dict()["traits"]) == ["Read", "Write"]

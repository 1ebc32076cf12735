"""
Tests for Export — Wire-shape serialization

These tests validate:
- export() reproduces the loader's input shape in declaration order
- load(export(load(x))) == load(x) for JSON and YAML text as well
- Fingerprints follow content, not identity
"""

import orjson
import pytest
import yaml

from traitdex.core.export import dumps, export, fingerprint
from traitdex.core.loader import load


class TestExport:

    def test_shape_matches_input(self, shared_factory):
        assert export(shared_factory.build()) == shared_factory.raw()

    def test_key_order(self, shared_registry):
        data = export(shared_registry)
        assert list(data) == ["fmt", "io", "clone"]
        assert list(data["io"]["traits"]) == ["Read", "Write"]
        assert list(data["io"]["traits"]["Read"]) == [
            "implementor", "trait", "examples", "trait_signature"
        ]

    def test_round_trip(self, shared_registry):
        assert load(export(shared_registry)) == shared_registry

    def test_export_is_plain_data(self, shared_registry):
        data = export(shared_registry)
        data["fmt"]["traits"]["Write"]["trait"].append("Mutated.")
        assert shared_registry.record("fmt", "Write").trait_facts == ("I can't be derived.",)

    def test_bundled_round_trip(self, bundled_registry):
        assert load(export(bundled_registry)) == bundled_registry


class TestDumps:

    def test_json_round_trip(self, shared_registry):
        text = dumps(shared_registry, "json")
        assert load(orjson.loads(text)) == shared_registry

    def test_json_indented(self, shared_registry):
        text = dumps(shared_registry, "json")
        assert text.startswith("{\n  \"fmt\"")
        assert text.endswith("\n")

    def test_yaml_round_trip(self, shared_registry):
        text = dumps(shared_registry, "yaml")
        assert load(yaml.safe_load(text)) == shared_registry

    def test_yaml_literal_blocks(self, shared_registry):
        text = dumps(shared_registry, "yaml")
        assert "examples: |" in text

    def test_yaml_bundled_round_trip(self, bundled_registry):
        text = dumps(bundled_registry, "yaml")
        assert load(yaml.safe_load(text)) == bundled_registry

    def test_unknown_format(self, shared_registry):
        with pytest.raises(ValueError, match="Unknown export format"):
            dumps(shared_registry, "toml")


class TestFingerprint:

    def test_stable_across_loads(self, shared_factory):
        assert fingerprint(shared_factory.build()) == fingerprint(shared_factory.build())

    def test_changes_with_content(self, shared_factory):
        changed = shared_factory.raw()
        changed["io"]["traits"]["Read"]["implementor"] = ["Something else."]
        assert fingerprint(shared_factory.build()) != fingerprint(load(changed))

    def test_hex_digest(self, shared_registry):
        digest = fingerprint(shared_registry)
        assert len(digest) == 16
        int(digest, 16)

"""
Tests for Loader — Registries from raw input, files and the bundled catalog

These tests validate:
- JSON and YAML files load to equal registries
- Decode failures surface as CatalogFormatError, schema failures as SchemaViolation
- The bundled catalog is valid and carries the known fmt/io collision
- No shared state between loads
"""

import pytest
import yaml

from traitdex.core.errors import CatalogFormatError, SchemaViolation
from traitdex.core.loader import DEFAULT_CATALOG, load, load_default, load_file, read_catalog
from traitdex.core.resolver import Resolver


class TestLoadFile:

    def test_json(self, shared_factory, tmp_path):
        path = shared_factory.write_json(tmp_path / "c.json")
        assert load_file(path) == shared_factory.build()

    def test_yaml(self, shared_factory, tmp_path):
        path = shared_factory.write_yaml(tmp_path / "c.yaml")
        assert load_file(path) == shared_factory.build()

    def test_yml_suffix(self, shared_factory, tmp_path):
        path = shared_factory.write_yaml(tmp_path / "c.yml")
        assert load_file(str(path)) == shared_factory.build()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_file(tmp_path / "absent.json")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "c.toml"
        path.write_text("x = 1")
        with pytest.raises(CatalogFormatError, match="unsupported file type"):
            read_catalog(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text("{not json")
        with pytest.raises(CatalogFormatError, match="invalid JSON"):
            load_file(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("fmt: [unclosed")
        with pytest.raises(CatalogFormatError, match="invalid YAML"):
            load_file(path)

    def test_schema_violation_from_file(self, shared_factory, tmp_path):
        raw = shared_factory.raw()
        raw["io"]["traits"]["Write"]["examples"] = ""
        path = tmp_path / "bad.yaml"
        path.write_text(yaml.safe_dump(raw))
        with pytest.raises(SchemaViolation) as exc:
            load_file(path)
        assert exc.value.capability_name == "Write"

    def test_empty_yaml_is_not_a_catalog(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(SchemaViolation) as exc:
            load_file(path)
        assert exc.value.field == "<root>"


class TestBundledCatalog:

    def test_default_path_exists(self):
        assert DEFAULT_CATALOG.exists()

    def test_module_count(self, bundled_registry):
        assert len(bundled_registry.modules) == 12

    def test_capability_count(self, bundled_registry):
        assert len(bundled_registry) == 74

    def test_module_order(self, bundled_registry):
        assert bundled_registry.module_ids[:4] == ("borrow", "clone", "cmp", "convert")
        assert bundled_registry.module_ids[-1] == "any"

    def test_write_collision(self, bundled_registry):
        assert bundled_registry.owners("Write") == ("fmt", "io")
        assert bundled_registry.shared_names() == {"Write": ("fmt", "io")}

    def test_resolve_known_traits(self, bundled_registry):
        resolver = Resolver(bundled_registry)
        assert resolver.resolve("Clone").name == "Clone"
        assert resolver.resolve("Write", "io").name == "Write"
        assert resolver.resolve("Iterator").signature.strip().startswith("pub trait Iterator")

    def test_every_record_resolves(self, bundled_registry):
        resolver = Resolver(bundled_registry)
        seen = 0
        for module_id, record in bundled_registry.iter_records():
            assert resolver.resolve(record.name, module_id) == record
            if len(resolver.owners(record.name)) == 1:
                assert resolver.resolve(record.name) == record
            seen += 1
        assert seen == 74

    def test_independent_loads(self, bundled_registry):
        again = load_default()
        assert again == bundled_registry
        assert again is not bundled_registry


class TestLoad:

    def test_load_does_not_keep_global_state(self, shared_factory, catalog_factory):
        catalog_factory.add_trait("any", "Any")
        first = load(shared_factory.raw())
        second = load(catalog_factory.raw())
        assert first.module_ids == ("fmt", "io", "clone")
        assert second.module_ids == ("any",)

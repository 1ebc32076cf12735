"""
Shared pytest fixtures for the traitdex test suite.

Usage in tests:
    def test_something(catalog_factory):
        catalog_factory.add_trait("fmt", "Display")
        registry = catalog_factory.build()

    def test_with_data(shared_registry):
        # fmt::Write and io::Write both declared
        ...

    def test_cli(run_cli, catalog_file):
        code, out, err = run_cli("--catalog", str(catalog_file), "show", "Clone")
"""

import pytest

from traitdex.cli import main
from traitdex.core.loader import load_default
from tests.factories import CatalogFactory, shared_write_catalog


@pytest.fixture
def catalog_factory():
    """Empty CatalogFactory."""
    return CatalogFactory()


@pytest.fixture
def shared_factory():
    """CatalogFactory with fmt, io and clone modules (Write is shared)."""
    return shared_write_catalog()


@pytest.fixture
def shared_registry(shared_factory):
    return shared_factory.build()


@pytest.fixture(scope="session")
def bundled_registry():
    """The catalog shipped with the package (loaded once per session)."""
    return load_default()


@pytest.fixture
def catalog_file(tmp_path, shared_factory):
    """JSON file holding the shared_factory catalog."""
    return shared_factory.write_json(tmp_path / "catalog.json")


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """
    Keep tests away from the real user config and environment overrides.

    HOME points at a temp dir; TRAITDEX_* variables are cleared.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for var in ("TRAITDEX_CATALOG", "TRAITDEX_FORMAT", "TRAITDEX_SYMBOLS", "TRAITDEX_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("TRAITDEX_SYMBOLS", "ascii")
    return home


@pytest.fixture
def run_cli(tmp_path, isolated_env, capsys):
    """
    Run the CLI in-process against a temp project directory.

    Returns (exit code, stdout, stderr).
    """
    project = tmp_path / "project"
    project.mkdir()

    def _run(*argv):
        code = main(["--project", str(project), *argv])
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    _run.project = project
    return _run

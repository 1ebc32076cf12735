"""
BaseCommand — Shared foundation for all CLI commands

Commands receive the CLI instance and access its resources through
properties instead of building their own.
"""

from typing import TYPE_CHECKING

from ..output import OutputSpec, render
from ..presentation.symbols import safe_print

if TYPE_CHECKING:
    from ..cli import DexCLI


class BaseCommand:
    """Base class for CLI commands with access to shared resources."""

    def __init__(self, cli: 'DexCLI'):
        self._cli = cli

    # -------------------------------------------------------------------------
    # Resources
    # -------------------------------------------------------------------------

    @property
    def config(self):
        """Application configuration."""
        return self._cli.config

    @property
    def config_manager(self):
        return self._cli.config_manager

    @property
    def symbols(self):
        """Symbol set for display (Unicode/ASCII)."""
        return self._cli.symbols

    @property
    def output_format(self) -> str:
        """Effective display format (--format flag, then config)."""
        return self._cli.output_format

    @property
    def registry(self):
        """Loaded catalog registry (loaded on first access)."""
        return self._cli.registry

    @property
    def resolver(self):
        return self._cli.resolver

    @property
    def enumerator(self):
        return self._cli.enumerator

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def emit(self, spec: OutputSpec, full: bool = False):
        """Render an OutputSpec in the effective format and print it."""
        safe_print(render(spec, format=self.output_format, symbols=self.symbols, full=full))

    @property
    def wants_json(self) -> bool:
        return self.output_format == "json"

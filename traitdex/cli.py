"""
CLI — Command interface for the trait catalog

Lookup is exact: a bare name resolves only when a single module declares
it, otherwise the CLI lists the candidates and asks for module::Name.

Lazy loading: the catalog is read and validated on first use, so config
and help never touch it.
"""

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import ConfigManager
from .core.errors import DexError
from .core.enumerator import Enumerator
from .core.loader import DEFAULT_CATALOG, load_file
from .core.registry import Registry
from .core.resolver import Resolver
from .output import VALID_FORMATS
from .presentation.symbols import get_symbols
from .commands.show_cmd import ShowCommand
from .commands.where_cmd import WhereCommand
from .commands.list_cmd import ListCommand
from .commands.check_cmd import CheckCommand
from .commands.export_cmd import ExportCommand
from .commands.config_cmd import ConfigCommand
from . import __version__


ENV_DEBUG = "TRAITDEX_DEBUG"


class DexCLI:
    """Command-line interface for the trait catalog."""

    def __init__(
        self,
        project_dir: Path,
        catalog: Optional[str] = None,
        output_format: Optional[str] = None
    ):
        self.project_dir = Path(project_dir)
        self._catalog_flag = catalog
        self._format_flag = output_format

        self.config_manager = ConfigManager(self.project_dir)
        self.config = self.config_manager.load()
        self.symbols = get_symbols(self.config.display.symbols)

        self._registry: Optional[Registry] = None
        self._resolver: Optional[Resolver] = None
        self._enumerator: Optional[Enumerator] = None

        # Command handlers
        self._show_cmd = ShowCommand(self)
        self._where_cmd = WhereCommand(self)
        self._list_cmd = ListCommand(self)
        self._check_cmd = CheckCommand(self)
        self._export_cmd = ExportCommand(self)
        self._config_cmd = ConfigCommand(self)

    # =========================================================================
    # Resources
    # =========================================================================

    @property
    def output_format(self) -> str:
        """--format flag, then display.format; unknown values fall back to auto."""
        fmt = self._format_flag or self.config.display.format
        if fmt not in VALID_FORMATS:
            print(f"Warning: Unknown format '{fmt}', using auto", file=sys.stderr)
            return "auto"
        return fmt

    @property
    def catalog_path(self) -> Path:
        """--catalog flag, then catalog.path, then the bundled catalog."""
        if self._catalog_flag:
            return Path(self._catalog_flag).expanduser()
        return self.config_manager.catalog_path() or DEFAULT_CATALOG

    @property
    def registry(self) -> Registry:
        if self._registry is None:
            path = self.catalog_path
            if os.environ.get(ENV_DEBUG):
                print(f"[traitdex] loading catalog {path}", file=sys.stderr)
            self._registry = load_file(path)
        return self._registry

    @property
    def resolver(self) -> Resolver:
        if self._resolver is None:
            self._resolver = Resolver(self.registry)
        return self._resolver

    @property
    def enumerator(self) -> Enumerator:
        if self._enumerator is None:
            self._enumerator = Enumerator(self.registry)
        return self._enumerator


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the traitdex CLI.

    Parser definitions and dispatch logic are in individual command modules.

    Returns:
        Process exit status
    """
    parser = argparse.ArgumentParser(
        prog="traitdex",
        description="traitdex -- Reference dictionary of Rust standard-library traits",
        epilog="Names are exact and case-sensitive. Use module::Name when a name is shared."
    )

    parser.add_argument(
        '--project', '-p',
        default=".",
        help='Project directory holding .traitdex/config.yaml (default: current)'
    )
    parser.add_argument(
        '--catalog',
        help='Catalog file to load instead of the configured or bundled one'
    )
    parser.add_argument(
        '--format', '-f',
        dest='output_format',
        choices=VALID_FORMATS,
        help='Output format (default: display.format from config)'
    )
    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'traitdex {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Register all commands from command modules (self-registration pattern)
    from .commands import register_all, dispatch
    register_all(subparsers)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    cli = DexCLI(Path(args.project), catalog=args.catalog, output_format=args.output_format)

    try:
        return dispatch(args.command, cli, args) or 0
    except KeyError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_help()
        return 2
    except (DexError, OSError) as e:
        if os.environ.get(ENV_DEBUG):
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())

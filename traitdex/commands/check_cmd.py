"""
CheckCommand — Validate a catalog file

Reports the first schema violation (module, trait, field, reason), or the
catalog's counts and fingerprint when it is valid. Does not touch the
catalog the CLI is configured with unless no file is given.
"""

from pathlib import Path
from typing import Optional

from ..commands.base import BaseCommand
from ..core.errors import CatalogFormatError, SchemaViolation
from ..core.export import fingerprint
from ..core.loader import load_file
from ..output import OutputSpec
from ..presentation.template import OutputTemplate
from ..presentation.symbols import safe_print


class CheckCommand(BaseCommand):
    """Command for catalog validation."""

    def check(self, path: Optional[str] = None) -> int:
        """
        Validate a catalog file.

        Args:
            path: Catalog file (default: the configured catalog)
        """
        s = self.symbols
        target = Path(path) if path else self._cli.catalog_path

        try:
            registry = load_file(target)
        except FileNotFoundError:
            print(f"{s.check_fail} Catalog not found: {target}")
            return 1
        except OSError as e:
            print(f"{s.check_fail} Cannot read catalog {target}: {e.strerror or e}")
            return 1
        except CatalogFormatError as e:
            print(f"{s.check_fail} {e}")
            return 1
        except SchemaViolation as e:
            if self.wants_json:
                self.emit(OutputSpec(data={
                    "valid": False,
                    "path": str(target),
                    "module": e.module_id,
                    "trait": e.capability_name,
                    "field": e.field,
                    "reason": e.reason,
                }))
                return 1
            template = OutputTemplate(symbols=s)
            template.header("TRAITDEX CHECK", str(target))
            template.section("VIOLATION", "\n".join([
                f"Module: {e.module_id or '-'}",
                f"Trait:  {e.capability_name or '-'}",
                f"Field:  {e.field}",
                f"Reason: {e.reason}",
            ]))
            template.footer(f"{s.check_fail} invalid")
            safe_print(template.render())
            return 1

        stats = registry.stats()
        digest = fingerprint(registry)

        if self.wants_json:
            self.emit(OutputSpec(data={"valid": True, "path": str(target), "fingerprint": digest, **stats}))
            return 0

        template = OutputTemplate(symbols=s)
        template.header("TRAITDEX CHECK", str(target))
        template.section("CATALOG", "\n".join([
            f"Modules:      {stats['modules']}",
            f"Traits:       {stats['capabilities']}",
            f"Shared names: {stats['shared_names']}",
            f"Fingerprint:  {digest}",
        ]))
        template.footer(f"{s.check_pass} valid")
        safe_print(template.render(command="check", context={"valid": True}))
        return 0


def register_parser(subparsers):
    """Register check command parser."""
    p = subparsers.add_parser('check', help='Validate a catalog file')
    p.add_argument('path', nargs='?', help='Catalog file (default: configured catalog)')
    return p


def handle(cli, args):
    """Handle check command dispatch."""
    return cli._check_cmd.check(args.path)

"""
ExportCommand — Write the loaded catalog in its wire shape

The output can be fed back to the loader: load(export(load(x))) == load(x).
"""

from pathlib import Path
from typing import Optional

from ..commands.base import BaseCommand
from ..core.export import dumps, fingerprint, EXPORT_FORMATS


class ExportCommand(BaseCommand):
    """Command for catalog serialization."""

    def export(self, to: str = "json", output: Optional[str] = None) -> int:
        """
        Serialize the catalog.

        Args:
            to: "json" | "yaml"
            output: File to write (stdout if None)
        """
        text = dumps(self.registry, to)

        if output is None:
            print(text, end="")
            return 0

        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

        stats = self.registry.stats()
        print(
            f"{self.symbols.check_pass} Wrote {stats['modules']} modules, "
            f"{stats['capabilities']} traits to {path} ({to}, {fingerprint(self.registry)})"
        )
        return 0


def register_parser(subparsers):
    """Register export command parser."""
    p = subparsers.add_parser('export', help='Write the catalog as JSON or YAML')
    p.add_argument('--to', choices=EXPORT_FORMATS, default='json', help='Output format (default: json)')
    p.add_argument('--output', '-o', help='Output file (default: stdout)')
    return p


def handle(cli, args):
    """Handle export command dispatch."""
    return cli._export_cmd.export(to=args.to, output=args.output)

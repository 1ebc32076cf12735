"""
WhereCommand — Which modules declare a bare trait name

Reads the bare-name index directly: zero, one or several modules.
"""

from ..commands.base import BaseCommand
from ..core.errors import qualified
from ..output import OutputSpec


class WhereCommand(BaseCommand):
    """Command for bare-name ownership queries."""

    def where(self, name: str) -> int:
        owners = self.resolver.owners(name)

        if self.wants_json:
            self.emit(OutputSpec(data={"name": name, "modules": list(owners)}))
            return 0 if owners else 1

        if not owners:
            print(f"\n{self.symbols.check_fail} No trait named \"{name}\".")
            return 1

        marker = self.symbols.shared_name if len(owners) > 1 else self.symbols.capability
        self.emit(OutputSpec(
            data=[
                {"name": qualified(module_id, name), "description": self.registry.module(module_id).introductory}
                for module_id in owners
            ],
            shape="list",
            title=f"{marker} {name}: {len(owners)} module(s)",
            command="where",
            context={"found": True},
        ))
        return 0


def register_parser(subparsers):
    """Register where command parser."""
    p = subparsers.add_parser('where', help='List the modules that declare a trait name')
    p.add_argument('name', help='Bare trait name (exact, case-sensitive)')
    return p


def handle(cli, args):
    """Handle where command dispatch."""
    return cli._where_cmd.where(args.name)

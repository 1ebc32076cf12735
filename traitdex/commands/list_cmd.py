"""
ListCommand — Declaration-ordered catalog browsing

- Overview: every module with its trait count and introduction
- Module listing: the traits of one module, in declaration order
- Tree: modules with their traits nested beneath them

Names shared with other modules are marked so the user knows a bare
lookup of that name will need a module.
"""

from ..commands.base import BaseCommand
from ..core.errors import NotFound
from ..output import OutputSpec
from ..presentation.formatters import format_module_line
from ..presentation.symbols import safe_print
from ..presentation.template import OutputTemplate
from ..utils.pagination import add_pagination_args, paginate_from_args


class ListCommand(BaseCommand):
    """Command for module and trait enumeration."""

    def list_overview(self, full: bool = False) -> int:
        """Show all modules with counts."""
        modules = [self.enumerator.get_module(m) for m in self.enumerator.list_modules()]

        if self.wants_json:
            self.emit(OutputSpec(data=[
                {"module": m.id, "introductory": m.introductory, "traits": len(m)}
                for m in modules
            ]))
            return 0

        s = self.symbols
        stats = self.registry.stats()

        template = OutputTemplate(symbols=s)
        template.header("TRAITDEX", "Modules")
        template.legend({s.module: "module", s.arrow: "drill-down hint"})
        template.section(
            "MODULES",
            "\n".join(format_module_line(m, s, template.width, full=full) for m in modules)
        )

        shared = self.registry.shared_names()
        if shared:
            lines = [
                f"{s.shared_name} {name}: {', '.join(owners)}"
                for name, owners in shared.items()
            ]
            template.section("SHARED NAMES", "\n".join(lines))

        template.footer(
            f"{stats['modules']} modules | {stats['capabilities']} traits | "
            f"{stats['shared_names']} shared names"
        )
        safe_print(template.render(command="list"))
        return 0

    def list_module(self, module_id: str, args=None) -> int:
        """List the traits of one module."""
        try:
            module = self.enumerator.get_module(module_id)
        except NotFound as e:
            print(f"\n{self.symbols.check_fail} {e}.")
            print(f"Modules: {', '.join(self.enumerator.list_modules())}")
            return 1

        names = self.enumerator.list_capabilities(module_id)

        if self.wants_json:
            self.emit(OutputSpec(data={
                "module": module.id,
                "introductory": module.introductory,
                "traits": names,
            }))
            return 0

        s = self.symbols
        paginator = paginate_from_args(names, args)

        lines = []
        for name in paginator.items():
            marker = s.shared_name if self.resolver.is_ambiguous(name) else s.capability
            lines.append(f"  {marker} {name}")

        template = OutputTemplate(symbols=s)
        template.header("TRAITDEX", module.id)
        template.legend({s.capability: "trait", s.shared_name: "name shared with another module"})
        template.section("ABOUT", module.introductory)
        template.section(paginator.header("TRAITS"), "\n".join(lines))
        if paginator.is_truncated():
            template.section("", paginator.summary(command_hint=f"traitdex list {module.id}"))
        template.footer(f"{len(names)} traits in {module.id}")
        safe_print(template.render(command="list", context={"in_module": True}))
        return 0

    def list_tree(self) -> int:
        """Modules with their traits nested beneath."""
        tree = [
            {
                "name": module_id,
                "children": [{"name": name} for name in self.enumerator.list_capabilities(module_id)],
            }
            for module_id in self.enumerator.list_modules()
        ]
        self.emit(OutputSpec(data=tree, shape="list", title="Catalog"), full=True)
        return 0


def register_parser(subparsers):
    """Register list command parser."""
    p = subparsers.add_parser('list', help='List modules, or the traits of one module')
    p.add_argument('module', nargs='?', help='Module to list (omit for all modules)')
    p.add_argument('--tree', action='store_true', help='Show every module with its traits')
    p.add_argument('--full', action='store_true', help='Do not truncate introductions')
    add_pagination_args(p)
    return p


def handle(cli, args):
    """Handle list command dispatch."""
    if args.tree:
        return cli._list_cmd.list_tree()
    if args.module:
        return cli._list_cmd.list_module(args.module, args)
    return cli._list_cmd.list_overview(full=args.full)

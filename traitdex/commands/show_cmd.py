"""
ShowCommand — Resolve a trait name and print its record

Accepts a bare name ("Clone"), a qualified name ("io::Write") or a bare
name plus --module. Ambiguous bare names are never guessed: the command
lists every declaring module and asks for a qualified name.

Exit status: 0 when a record is printed, 1 on not found or ambiguous.
"""

from typing import Optional, Tuple

from ..commands.base import BaseCommand
from ..core.errors import qualified
from ..core.resolver import ResolveStatus, ResolveResult
from ..output import OutputSpec
from ..presentation.formatters import format_record, format_candidates, record_to_dict, RECORD_SECTIONS
from ..presentation.succession import get_hint
from ..presentation.symbols import safe_print


QUALIFIER = "::"


def split_qualified(query: str) -> Tuple[Optional[str], str]:
    """
    Split "module::Name" into ("module", "Name").

    A query without "::" is a bare name: (None, query).
    """
    if QUALIFIER in query:
        module_id, _, name = query.partition(QUALIFIER)
        return module_id, name
    return None, query


class ShowCommand(BaseCommand):
    """Command for looking up one trait."""

    def show(self, query: str, module: Optional[str] = None, brief: bool = False) -> int:
        """
        Resolve and print a trait.

        Args:
            query: Bare or qualified name
            module: Module hint (overrides a qualifier in query)
            brief: Facts and signature only, no example
        """
        qualifier, name = split_qualified(query)
        module = module or qualifier

        result = self.resolver.lookup(name, module)

        if result.status == ResolveStatus.FOUND:
            return self._show_found(result, brief)
        if result.status == ResolveStatus.AMBIGUOUS:
            return self._show_ambiguous(result)
        return self._show_not_found(result)

    def _show_found(self, result: ResolveResult, brief: bool) -> int:
        if self.output_format in ("json", "detail"):
            data = record_to_dict(result.module_id, result.record)
            if brief:
                data.pop("examples")
            self.emit(OutputSpec(
                data=data,
                shape="detail",
                title=qualified(result.module_id, result.name),
                show_actions=False,
            ), full=True)
            return 0

        sections = tuple(s for s in RECORD_SECTIONS if not (brief and s == "example"))
        safe_print(format_record(result.module_id, result.record, self.symbols, sections))

        hint = get_hint("show", {"found": True})
        if hint:
            print(f"\n{hint}")
        return 0

    def _show_ambiguous(self, result: ResolveResult) -> int:
        if self.wants_json:
            self.emit(OutputSpec(data={
                "status": result.status.value,
                "name": result.name,
                "candidates": list(result.candidates),
            }))
            return 1

        s = self.symbols
        print(f"\n{s.ambiguous} \"{result.name}\" is declared in {len(result.candidates)} modules:\n")
        for line in format_candidates(result.name, result.candidates, s):
            print(line)

        hint = get_hint("show", {"ambiguous": True})
        if hint:
            print(f"\n{hint}")
        return 1

    def _show_not_found(self, result: ResolveResult) -> int:
        if self.wants_json:
            self.emit(OutputSpec(data={
                "status": result.status.value,
                "name": result.name,
                "module": result.module_id,
            }))
            return 1

        s = self.symbols
        if result.module_id is not None and not self.registry.has_module(result.module_id):
            print(f"\n{s.check_fail} No module named \"{result.module_id}\".")
        elif result.module_id is not None:
            print(f"\n{s.check_fail} No trait \"{result.name}\" in module \"{result.module_id}\".")
            owners = self.resolver.owners(result.name)
            if owners:
                print("\n  Declared in:")
                for line in format_candidates(result.name, owners, s):
                    print(line)
        else:
            print(f"\n{s.check_fail} No trait named \"{result.name}\".")
            print("  Names are matched exactly (case-sensitive).")

        hint = get_hint("show", {"not_found": True})
        if hint:
            print(f"\n{hint}")
        return 1


def register_parser(subparsers):
    """Register show command parser."""
    p = subparsers.add_parser('show', help='Show one trait (Name or module::Name)')
    p.add_argument('name', help='Trait name, optionally qualified as module::Name')
    p.add_argument('--module', '-m', help='Module to look in (disambiguates shared names)')
    p.add_argument('--brief', '-b', action='store_true', help='Omit the example')
    return p


def handle(cli, args):
    """Handle show command dispatch."""
    return cli._show_cmd.show(args.name, module=args.module, brief=args.brief)

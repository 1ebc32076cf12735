"""
Paginator — Offset pagination for list-producing commands

Stateless: every page is derived from the full sequence plus an offset,
so the same arguments always produce the same page.

Usage:
    paginator = Paginator(names, limit=20, offset=0)

    for name in paginator.items():
        print(name)

    print(paginator.summary(command_hint="traitdex list ops"))
"""

import argparse
from typing import Any, Iterable, List, Optional


DEFAULT_LIMIT = 20


class Paginator:
    """Offset-based pagination with a consistent summary line."""

    def __init__(self, items: Iterable[Any], limit: int = DEFAULT_LIMIT, offset: int = 0):
        """
        Args:
            items: Items to paginate (materialized once)
            limit: Maximum items per page (minimum 1)
            offset: Number of items to skip (minimum 0)
        """
        self._all_items = list(items)
        self._limit = max(1, limit)
        self._offset = max(0, offset)

    @property
    def total(self) -> int:
        return len(self._all_items)

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def start_index(self) -> int:
        """1-based start index for display (e.g., "Showing 1-20")."""
        if self.total == 0:
            return 0
        return min(self._offset + 1, self.total)

    @property
    def end_index(self) -> int:
        """1-based end index for display."""
        return min(self._offset + self._limit, self.total)

    def items(self) -> List[Any]:
        """Items on the current page."""
        return self._all_items[self._offset:self._offset + self._limit]

    def has_more(self) -> bool:
        return self._offset + self._limit < self.total

    def has_previous(self) -> bool:
        return self._offset > 0

    def is_truncated(self) -> bool:
        """True if the page does not show every item."""
        return self.start_index > 1 or self.end_index < self.total

    def summary(self, command_hint: Optional[str] = None) -> str:
        """
        Summary line with optional navigation hints.

        Example:
            Showing 1-20 of 31
            -> Next: traitdex list ops --offset 20
        """
        if self.total == 0:
            return "No items found."

        lines = [f"Showing {self.start_index}-{self.end_index} of {self.total}"]

        if command_hint and self.has_more():
            lines.append(f"-> Next: {command_hint} --offset {self._offset + self._limit}")

        if command_hint and self.has_previous():
            lines.append(f"-> Prev: {command_hint} --offset {max(0, self._offset - self._limit)}")

        return "\n".join(lines)

    def header(self, title: str) -> str:
        """Header with count info, e.g. "Traits (1-20 of 31):"."""
        if self.total == 0:
            return f"{title}: none"
        if not self.is_truncated():
            return f"{title} ({self.total}):"
        return f"{title} ({self.start_index}-{self.end_index} of {self.total}):"


def add_pagination_args(parser: argparse.ArgumentParser, default_limit: int = DEFAULT_LIMIT):
    """Add --limit, --offset and --all to a command parser."""
    group = parser.add_argument_group('pagination')

    group.add_argument(
        '--limit', '-l',
        type=int,
        default=default_limit,
        metavar='N',
        help=f'Maximum items to show (default: {default_limit})'
    )
    group.add_argument(
        '--offset',
        type=int,
        default=0,
        metavar='N',
        help='Skip first N items (default: 0)'
    )
    group.add_argument(
        '--all', '-a',
        action='store_true',
        dest='show_all',
        help='Show all items (ignores --limit)'
    )


def paginate_from_args(items: Iterable[Any], args) -> Paginator:
    """Create a Paginator from parsed --limit/--offset/--all arguments."""
    items_list = list(items)

    if getattr(args, 'show_all', False):
        return Paginator(items_list, limit=len(items_list) or 1, offset=0)

    return Paginator(
        items_list,
        limit=getattr(args, 'limit', DEFAULT_LIMIT),
        offset=getattr(args, 'offset', 0)
    )

"""
Tests for Paginator — Offset pagination for module listings

These tests validate:
- Core properties (total, offset, limit, indices)
- items() slices
- Navigation helpers and summary/header text
- Edge cases (empty lists, offset beyond total)
- add_pagination_args() / paginate_from_args()
"""

import argparse

from traitdex.utils.pagination import (
    DEFAULT_LIMIT,
    Paginator,
    add_pagination_args,
    paginate_from_args,
)


class TestPaginatorBasics:

    def test_default_limit(self):
        assert Paginator(range(50)).limit == DEFAULT_LIMIT == 20

    def test_items_first_page(self):
        assert Paginator(range(50), limit=5).items() == [0, 1, 2, 3, 4]

    def test_items_with_offset(self):
        assert Paginator(range(50), limit=5, offset=10).items() == [10, 11, 12, 13, 14]

    def test_negative_values_clamped(self):
        paginator = Paginator(range(5), limit=0, offset=-3)
        assert paginator.limit == 1
        assert paginator.offset == 0

    def test_indices(self):
        paginator = Paginator(range(31), limit=10, offset=20)
        assert paginator.start_index == 21
        assert paginator.end_index == 30


class TestNavigation:

    def test_has_more(self):
        assert Paginator(range(31), limit=10).has_more()
        assert not Paginator(range(31), limit=10, offset=30).has_more()

    def test_has_previous(self):
        assert not Paginator(range(31), limit=10).has_previous()
        assert Paginator(range(31), limit=10, offset=10).has_previous()

    def test_is_truncated(self):
        assert Paginator(range(31), limit=10).is_truncated()
        assert not Paginator(range(5), limit=10).is_truncated()


class TestSummary:

    def test_summary_with_hints(self):
        summary = Paginator(range(31), limit=10, offset=10).summary(command_hint="traitdex list ops")
        assert "Showing 11-20 of 31" in summary
        assert "-> Next: traitdex list ops --offset 20" in summary
        assert "-> Prev: traitdex list ops --offset 0" in summary

    def test_summary_empty(self):
        assert Paginator([]).summary() == "No items found."

    def test_header_full(self):
        assert Paginator(range(4)).header("TRAITS") == "TRAITS (4):"

    def test_header_truncated(self):
        assert Paginator(range(31), limit=10).header("TRAITS") == "TRAITS (1-10 of 31):"

    def test_header_empty(self):
        assert Paginator([]).header("TRAITS") == "TRAITS: none"

    def test_offset_beyond_total(self):
        paginator = Paginator(range(5), limit=10, offset=50)
        assert paginator.items() == []
        assert not paginator.has_more()


class TestArgs:

    def _parse(self, *argv):
        parser = argparse.ArgumentParser()
        add_pagination_args(parser)
        return parser.parse_args(list(argv))

    def test_defaults(self):
        args = self._parse()
        assert args.limit == DEFAULT_LIMIT
        assert args.offset == 0
        assert args.show_all is False

    def test_limit_and_offset(self):
        paginator = paginate_from_args(range(50), self._parse("-l", "5", "--offset", "5"))
        assert paginator.items() == [5, 6, 7, 8, 9]

    def test_all(self):
        paginator = paginate_from_args(range(50), self._parse("--all", "--offset", "5"))
        assert len(paginator.items()) == 50

    def test_all_on_empty(self):
        paginator = paginate_from_args([], self._parse("--all"))
        assert paginator.items() == []

    def test_none_args(self):
        assert paginate_from_args(range(3), None).items() == [0, 1, 2]

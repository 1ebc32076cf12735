"""
OutputTemplate — Framed page for catalog views

A page is a banner (title, optional subject, optional legend), any number
of titled blocks, and a closing rule with a summary and the next-step hint
for the command that produced it.

    page = OutputTemplate(symbols=s)
    page.header("TRAITDEX", "io")
    page.section("TRAITS", "  [>] Read\n  [*] Write")
    page.footer("2 traits in io")
    safe_print(page.render(command="list", context={"in_module": True}))
"""

import shutil
from typing import Any, Dict, List, Optional, Tuple

from .symbols import SymbolSet, get_symbols
from .succession import get_hint


HEADER_CHAR = "="
SECTION_CHAR = "-"
DEFAULT_WIDTH = 80


class OutputTemplate:
    """Collects the parts of a page; render() lays them out."""

    def __init__(self, symbols: Optional[SymbolSet] = None, width: Optional[int] = None):
        self.symbols = symbols or get_symbols()
        self.width = width or shutil.get_terminal_size().columns or DEFAULT_WIDTH

        self._banner: Optional[str] = None
        self._legend: Dict[str, str] = {}
        self._blocks: List[Tuple[str, str]] = []
        self._summary: Optional[str] = None

    def header(self, title: str, subject: Optional[str] = None) -> "OutputTemplate":
        self._banner = f"{title} - {subject}" if subject else title
        return self

    def legend(self, markers: Dict[str, str]) -> "OutputTemplate":
        """Explain the markers used in the blocks, e.g. {"[*]": "shared name"}."""
        self._legend = dict(markers)
        return self

    def section(self, title: str, body: str) -> "OutputTemplate":
        """Add a block. An empty title adds the body without an underline."""
        self._blocks.append((title, body))
        return self

    def footer(self, summary: Optional[str] = None) -> "OutputTemplate":
        self._summary = summary
        return self

    def render(self, command: Optional[str] = None, context: Optional[Dict[str, Any]] = None) -> str:
        """Lay the page out; `command` and `context` select the succession hint."""
        heavy = HEADER_CHAR * self.width
        lines: List[str] = []

        if self._banner:
            lines += [heavy, self._banner, heavy]
            if self._legend:
                lines.append("Legend: " + "  ".join(f"{mark} {meaning}" for mark, meaning in self._legend.items()))
            lines.append("")

        for title, body in self._blocks:
            if title:
                lines += [title, SECTION_CHAR * len(title)]
            if body:
                lines.append(body)
            lines.append("")

        lines.append(SECTION_CHAR * self.width)
        if self._summary:
            lines.append(f"Summary: {self._summary}")
        hint = get_hint(command, context) if command else None
        if hint:
            lines.append(hint)
        lines.append(heavy)

        return "\n".join(lines)

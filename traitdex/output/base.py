"""
BaseRenderer — Shared state and text helpers for the OutputSpec renderers
"""

import shutil
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..presentation.symbols import SymbolSet
    from . import OutputSpec


class BaseRenderer(ABC):
    """
    A renderer turns one OutputSpec into terminal text.

    `full` disables shortening of long facts and signatures; `width`
    falls back to the current terminal.
    """

    def __init__(self, symbols: "SymbolSet" = None, width: int = None, full: bool = False):
        from ..presentation.symbols import get_symbols

        self.symbols = symbols or get_symbols()
        self.width = width or shutil.get_terminal_size().columns
        self.full = full

    @abstractmethod
    def render(self, spec: "OutputSpec") -> str:
        raise NotImplementedError

    def truncate(self, text: str, length: Optional[int] = None) -> str:
        """Shorten `text` to `length` columns, ending in the symbol set's ellipsis."""
        if not text or self.full:
            return text or ""

        limit = max(20, self.width - 10) if length is None else length
        if len(text) <= limit:
            return text

        mark = self.symbols.ellipsis
        if limit <= len(mark):
            return text[:limit]
        return text[:limit - len(mark)] + mark

    def indent(self, text: str, spaces: int = 2) -> str:
        """Indent every non-empty line, e.g. a multi-line signature block."""
        pad = " " * spaces
        return "\n".join(pad + line if line else line for line in text.split("\n"))

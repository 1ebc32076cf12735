"""
Presentation — Display helpers for the CLI

- Symbols: Unicode/ASCII symbol sets and safe printing
- Template: Header/section/footer output builder
- Succession: Next-step hints per command
- Formatters: Capability and module text blocks
"""

from .symbols import (
    SymbolSet, UNICODE, ASCII, get_symbols, supports_unicode,
    safe_print, sanitize_control_chars,
)
from .succession import get_hint
from .template import OutputTemplate
from .formatters import (
    truncate, format_record, format_module_line, format_candidates, record_to_dict,
)

__all__ = [
    "SymbolSet", "UNICODE", "ASCII", "get_symbols", "supports_unicode",
    "safe_print", "sanitize_control_chars",
    "get_hint", "OutputTemplate",
    "truncate", "format_record", "format_module_line", "format_candidates", "record_to_dict",
]

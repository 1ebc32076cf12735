"""
Symbols — Visual vocabulary for catalog output

Progressive enhancement: Unicode when supported, ASCII fallback.
Configurable via display.symbols setting.

Also provides safe output utilities:
- safe_print(): Encoding-safe printing for catalog text
- sanitize_control_chars(): Strip terminal control characters from
  user-supplied catalog files
"""

import os
import sys
from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Safe Output Utilities
# =============================================================================

# Common Unicode to ASCII replacements for display
UNICODE_TO_ASCII = {
    '→': '->',
    '←': '<-',
    '…': '...',
    '–': '-',
    '—': '--',
    '“': '"',
    '”': '"',
    '‘': "'",
    '’': "'",
    '•': '*',
    '·': '.',
    '×': 'x',
    '≠': '!=',
    '≤': '<=',
    '≥': '>=',
}


def sanitize_control_chars(text: str) -> str:
    """
    Remove control characters that could manipulate the terminal.

    Preserves: newlines (\\n), tabs (\\t), carriage returns (\\r)
    """
    if not text:
        return text

    result = []
    for char in text:
        code = ord(char)
        if code >= 32 or code in (9, 10, 13):
            result.append(char)

    return ''.join(result)


def safe_print(text: str, end: str = '\n', file=None) -> None:
    """
    Print with graceful encoding fallback.

    Handles UnicodeEncodeError by replacing unencodable characters
    with ASCII equivalents or '?' as last resort.

    Args:
        text: Text to print (may contain any Unicode)
        end: String appended after text (default: newline)
        file: Output stream (default: sys.stdout)
    """
    if file is None:
        file = sys.stdout

    text = sanitize_control_chars(text)

    try:
        print(text, end=end, file=file)
    except UnicodeEncodeError:
        safe_text = text
        for unicode_char, ascii_equiv in UNICODE_TO_ASCII.items():
            safe_text = safe_text.replace(unicode_char, ascii_equiv)

        try:
            print(safe_text, end=end, file=file)
        except UnicodeEncodeError:
            encoding = getattr(file, 'encoding', 'utf-8') or 'utf-8'
            encoded = safe_text.encode(encoding, errors='replace')
            print(encoded.decode(encoding), end=end, file=file)


# =============================================================================
# Symbol Sets
# =============================================================================

@dataclass(frozen=True)
class SymbolSet:
    """Complete set of symbols for catalog output."""
    # Entry kinds
    module: str
    capability: str
    shared_name: str     # capability name declared by several modules

    # Fact kinds
    implementor_fact: str
    trait_fact: str

    # Status markers
    check_pass: str
    check_fail: str
    ambiguous: str
    arrow: str

    # Tree/structure markers
    tree_branch: str
    tree_end: str
    bullet: str

    # Text truncation
    ellipsis: str


UNICODE = SymbolSet(
    module='▣',
    capability='◇',
    shared_name='◈',
    implementor_fact='•',
    trait_fact='◦',
    check_pass='✓',
    check_fail='❌',
    ambiguous='?',
    arrow='→',
    tree_branch='├─',
    tree_end='└─',
    bullet='•',
    ellipsis='…',
)

ASCII = SymbolSet(
    module='[#]',
    capability='[>]',
    shared_name='[*]',
    implementor_fact='*',
    trait_fact='-',
    check_pass='[OK]',
    check_fail='[ERR]',
    ambiguous='[?]',
    arrow='->',
    tree_branch='+-',
    tree_end='+-',
    bullet='*',
    ellipsis='...',
)


def supports_unicode() -> bool:
    """
    Check if environment likely supports Unicode output.

    Conservative: defaults to ASCII if uncertain.
    """
    # Explicit environment override
    if os.environ.get('TRAITDEX_ASCII_ONLY', '').lower() in ('1', 'true', 'yes'):
        return False
    if os.environ.get('TRAITDEX_UNICODE', '').lower() in ('1', 'true', 'yes'):
        return True

    stdout_encoding = getattr(sys.stdout, 'encoding', None)
    if stdout_encoding:
        encoding_lower = stdout_encoding.lower().replace('-', '').replace('_', '')
        if encoding_lower.startswith('cp') or encoding_lower in ('ascii', 'latin1', 'iso88591'):
            return False

    lang = os.environ.get('LANG', '').lower()
    lc_all = os.environ.get('LC_ALL', '').lower()
    if 'utf-8' in lang or 'utf8' in lang:
        return True
    if 'utf-8' in lc_all or 'utf8' in lc_all:
        return True

    # Windows Terminal
    if os.environ.get('WT_SESSION'):
        return True

    if stdout_encoding and 'utf' in stdout_encoding.lower():
        return True

    return False


def get_symbols(preference: Optional[str] = None) -> SymbolSet:
    """
    Get appropriate symbol set based on preference or auto-detection.

    Args:
        preference: "unicode", "ascii", or "auto" (None = auto)
    """
    if preference == 'unicode':
        return UNICODE
    if preference == 'ascii':
        return ASCII
    return UNICODE if supports_unicode() else ASCII


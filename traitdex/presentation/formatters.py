"""
Formatters — Data-to-string transformations for catalog output

Centralized formatting for capability records and modules:
- Text truncation with ellipsis
- Record blocks (facts, signature, example)
- Module overview lines
- Ambiguity candidate listings

Dependency direction: commands → presentation → core
"""

from typing import Dict, List, Sequence

from ..core.errors import qualified
from ..core.schema import CapabilityRecord, Module
from .symbols import SymbolSet


SUMMARY_LENGTH = 120      # Default for one-line summaries

# Record sections, in display order
RECORD_SECTIONS = ("facts", "signature", "example")


def truncate(text: str, length: int = SUMMARY_LENGTH, full: bool = False) -> str:
    """
    Truncate text with ellipsis, respecting full mode.

    Examples:
        truncate("Short", 50)                -> "Short"
        truncate("Any length", 5, full=True) -> "Any length"
    """
    if not text:
        return ""
    if full or len(text) <= length:
        return text
    if length <= 3:
        return text[:length]
    return text[:length - 3] + "..."


def code_block(text: str, indent: int = 4) -> str:
    """Trim surrounding blank lines from source text and indent it."""
    lines = text.strip("\n").splitlines()
    prefix = " " * indent
    return "\n".join(prefix + line if line.strip() else "" for line in lines)


def record_to_dict(module_id: str, record: CapabilityRecord) -> Dict:
    """Flat dict for detail/json rendering."""
    return {
        "module": module_id,
        "name": record.name,
        "implementor": list(record.implementor_facts),
        "trait": list(record.trait_facts),
        "examples": record.example,
        "trait_signature": record.signature,
    }


def format_record(
    module_id: str,
    record: CapabilityRecord,
    symbols: SymbolSet,
    sections: Sequence[str] = RECORD_SECTIONS
) -> str:
    """
    Format one capability as a text block.

    Format:
        ◇ fmt::Write

          • I can be written into with formatted text.
          ◦ I can't be derived.

          Signature:
            pub trait Write { ... }

          Example:
            fn main() { ... }
    """
    lines = [f"{symbols.capability} {qualified(module_id, record.name)}"]

    if "facts" in sections:
        lines.append("")
        for fact in record.implementor_facts:
            lines.append(f"  {symbols.implementor_fact} {fact}")
        for fact in record.trait_facts:
            lines.append(f"  {symbols.trait_fact} {fact}")

    if "signature" in sections:
        lines.extend(["", "  Signature:", code_block(record.signature)])

    if "example" in sections:
        lines.extend(["", "  Example:", code_block(record.example)])

    return "\n".join(lines)


def format_module_line(module: Module, symbols: SymbolSet, width: int = 80, full: bool = False) -> str:
    """
    One-line module overview.

    Example:
        ▣ fmt         10 traits  I deal with String formatting
    """
    count = len(module)
    noun = "trait" if count == 1 else "traits"
    head = f"{symbols.module} {module.id:<10} {count:>3} {noun:<6}  "
    return head + truncate(module.introductory, max(20, width - len(head)), full=full)


def format_candidates(name: str, candidates: Sequence[str], symbols: SymbolSet) -> List[str]:
    """Lines listing every module that declares `name`."""
    lines = []
    for i, module_id in enumerate(candidates):
        marker = symbols.tree_end if i == len(candidates) - 1 else symbols.tree_branch
        lines.append(f"  {marker} {qualified(module_id, name)}")
    return lines

"""
Output Module — View layer for the traitdex CLI

Separates data from presentation.
Commands build an OutputSpec, renderers handle display.

Usage:
    from traitdex.output import OutputSpec, render

    spec = OutputSpec(data=[...], shape="list", title="Modules")
    print(render(spec, format="auto", symbols=symbols))
"""

import builtins
from dataclasses import dataclass
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..presentation.symbols import SymbolSet

from .base import BaseRenderer
from .list import ListRenderer
from .detail import DetailRenderer
from .json import JsonRenderer


@dataclass
class OutputSpec:
    """
    Data envelope that commands return for rendering.

    Attributes:
        data: The actual data (dict, list, or any structure)
        shape: Rendering hint - "list" | "detail" | "auto"
        title: Optional section title/header
        show_actions: Whether to show "next step" prompts
        empty_message: Message when data is empty
        command: Which command produced this output (for succession hints)
        context: State flags for conditional hints (e.g., {"ambiguous": True})
    """
    data: Any
    shape: str = "auto"
    title: Optional[str] = None
    show_actions: bool = True
    empty_message: str = "No data to display."
    command: Optional[str] = None
    context: Optional[dict] = None


RENDERERS = {
    "list": ListRenderer,
    "detail": DetailRenderer,
    "json": JsonRenderer,
}

# Valid format values for config/CLI
VALID_FORMATS = ("auto", "list", "detail", "json")


def auto_detect_shape(data: Any) -> str:
    """Infer rendering shape from data structure: lists -> list, else detail."""
    if isinstance(data, (builtins.list, tuple)):
        return "list"
    if isinstance(data, dict) and "items" in data:
        return "list"
    return "detail"


def get_renderer(format: str, symbols: "SymbolSet", width: int = None, full: bool = False) -> BaseRenderer:
    """
    Get appropriate renderer instance.

    Raises:
        ValueError: If format is invalid
    """
    if format not in RENDERERS:
        valid = ", ".join(RENDERERS.keys())
        raise ValueError(f"Unknown format '{format}'. Valid: {valid}")

    return RENDERERS[format](symbols=symbols, width=width, full=full)


def render(
    spec: OutputSpec,
    format: str = "auto",
    symbols: "SymbolSet" = None,
    width: int = None,
    full: bool = False
) -> str:
    """
    Render OutputSpec to formatted string.

    Args:
        spec: OutputSpec from command
        format: "auto" | "list" | "detail" | "json"
        symbols: SymbolSet for visual elements (auto-detect if None)
        width: Terminal width (auto-detect if None)
        full: If True, don't truncate content

    Returns:
        Formatted string ready for printing
    """
    import shutil
    from ..presentation.symbols import get_symbols

    if symbols is None:
        symbols = get_symbols()

    if width is None:
        width = shutil.get_terminal_size().columns

    if format == "auto":
        if spec.shape and spec.shape != "auto":
            effective_format = spec.shape
        else:
            effective_format = auto_detect_shape(spec.data)
    else:
        effective_format = format

    # Detail view has no layout for sequences
    if effective_format == "detail" and isinstance(spec.data, (builtins.list, tuple)):
        effective_format = "list"

    renderer = get_renderer(effective_format, symbols, width, full)
    output = renderer.render(spec)

    # Hints are for humans; keep JSON output machine-readable
    if spec.show_actions and spec.command and effective_format != "json":
        from ..presentation.succession import get_hint
        hint = get_hint(spec.command, spec.context)
        if hint:
            output += f"\n\n{hint}"

    return output

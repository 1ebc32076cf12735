"""
Command Succession — Data-driven next-step guidance

Main loop: list -> list <module> -> show <name>
Disambiguation: show <name> (ambiguous) -> show <module>::<name>
Maintenance: check -> export
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class NextStep:
    """Single next-step hint with optional condition."""
    command: Optional[str]    # e.g., "show" (None = terminal)
    label: str                # e.g., "traitdex show <name>"
    condition: str = None     # When to show (None = always)
    why: str = None           # Brief rationale


@dataclass
class Succession:
    """Succession rules for a command."""
    default: NextStep
    alternatives: List[NextStep] = field(default_factory=list)


RULES: Dict[str, Succession] = {
    "list": Succession(
        default=NextStep("list", "traitdex list <module>",
                         why="See a module's traits"),
        alternatives=[
            NextStep("show", "traitdex show <name>", condition="in_module",
                     why="Read one trait"),
        ]
    ),

    "show": Succession(
        default=NextStep("list", "traitdex list <module>",
                         condition="found", why="Other traits in the same module"),
        alternatives=[
            NextStep("show", "traitdex show <module>::<name>", condition="ambiguous",
                     why="Name is declared in several modules"),
            NextStep("list", "traitdex list", condition="not_found",
                     why="Browse modules"),
        ]
    ),

    "where": Succession(
        default=NextStep("show", "traitdex show <module>::<name>",
                         condition="found", why="Read one declaration"),
    ),

    "check": Succession(
        default=NextStep("export", "traitdex export --to yaml",
                         condition="valid", why="Write the catalog in another format"),
    ),
}


def get_hint(command: str, context: dict = None) -> Optional[str]:
    """
    Get contextual next-step hint for command.

    Args:
        command: Command that just ran (e.g., "show", "list")
        context: Result state flags (e.g., {"ambiguous": True})

    Returns:
        Formatted hint string or None
    """
    context = context or {}
    rules = RULES.get(command)

    if not rules:
        return None

    for alt in rules.alternatives:
        if alt.condition and context.get(alt.condition):
            return _format_hint(alt)

    if rules.default.condition and not context.get(rules.default.condition):
        return None

    return _format_hint(rules.default)


def _format_hint(step: NextStep) -> str:
    """Format NextStep as display hint."""
    if not step.command:
        return f"-> {step.label}" + (f"  ({step.why})" if step.why else "")

    hint = f"-> Next: {step.label}"
    if step.why:
        hint += f"  ({step.why})"
    return hint

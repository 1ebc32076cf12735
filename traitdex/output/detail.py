"""
DetailRenderer — Render single item with full details

Supports:
- Key-value pairs
- Lists as bullets
- Multi-line text (source code) as indented blocks
"""

from typing import TYPE_CHECKING

from .base import BaseRenderer

if TYPE_CHECKING:
    from . import OutputSpec


# Lists longer than this are cut unless full mode is on
LIST_PREVIEW = 5


class DetailRenderer(BaseRenderer):
    """
    Render single item view with detailed information.

    Format:
        Title

          Field: value
          Field:
            • item
          Field:
            line 1
            line 2
    """

    def render(self, spec: "OutputSpec") -> str:
        """
        Render OutputSpec as detailed view.

        Expected data format: dict; keys starting with "_" are skipped.
        """
        if not spec.data:
            return spec.empty_message

        if not isinstance(spec.data, dict):
            return str(spec.data)

        s = self.symbols
        lines = []

        if spec.title:
            lines.append(f"\n{spec.title}")
            lines.append("")

        for key, value in spec.data.items():
            if key.startswith("_"):
                continue

            label = key.replace("_", " ").title()

            if isinstance(value, dict):
                lines.append(f"  {label}:")
                for k, v in value.items():
                    lines.append(f"    {k}: {self.truncate(str(v), self.width - 10)}")
            elif isinstance(value, (list, tuple)):
                lines.append(f"  {label}:")
                shown = value if self.full else value[:LIST_PREVIEW]
                for item in shown:
                    lines.append(f"    {s.bullet} {self.truncate(str(item), self.width - 6)}")
                if len(value) > len(shown):
                    lines.append(f"    ... and {len(value) - len(shown)} more")
                if not value:
                    lines.append("    (none)")
            elif isinstance(value, str) and "\n" in value:
                lines.append(f"  {label}:")
                lines.append(self.indent(value.strip("\n"), 4))
            else:
                value_str = self.truncate(str(value), self.width - len(label) - 6)
                lines.append(f"  {label}: {value_str}")

        return "\n".join(lines)

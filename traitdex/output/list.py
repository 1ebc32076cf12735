"""
ListRenderer — Render data as bullet lists or trees

Supports:
- Simple bullet lists (strings or dicts with name/description)
- Nested lists (dicts with "children")
"""

from typing import TYPE_CHECKING, Dict, List

from .base import BaseRenderer

if TYPE_CHECKING:
    from . import OutputSpec


class ListRenderer(BaseRenderer):
    """
    Render data as formatted lists.

    Formats:
    - Bullet list: Simple items with bullet prefix
    - Nested: Hierarchical items with tree markers
    """

    def render(self, spec: "OutputSpec") -> str:
        """
        Render OutputSpec as a list.

        Expected data formats:
        - List of strings: ["Display", "Debug"]
        - List of dicts: [{"name": "fmt", "description": "...", "children": [...]}]
        - Dict with "items" key: {"items": [...]}
        """
        if isinstance(spec.data, list):
            items = spec.data
        elif isinstance(spec.data, dict):
            items = spec.data.get("items", [])
        else:
            items = []

        if not items:
            return spec.empty_message

        lines = []

        if spec.title:
            lines.append(f"\n{spec.title}\n")

        if self._is_nested(items):
            lines.extend(self._render_nested(items))
        else:
            lines.extend(self._render_bullets(items))

        return "\n".join(lines)

    def _is_nested(self, items: List) -> bool:
        """Check if items have children (nested structure)."""
        if not items or not isinstance(items[0], dict):
            return False
        return "children" in items[0]

    def _item_text(self, item) -> str:
        if not isinstance(item, dict):
            return str(item)
        name = item.get("name") or item.get("text") or str(item)
        description = item.get("description")
        return f"{name}  {description}" if description else name

    # =========================================================================
    # Bullet List
    # =========================================================================

    def _render_bullets(self, items: List) -> List[str]:
        """Render simple bullet list."""
        s = self.symbols
        lines = []

        for item in items:
            text = self.truncate(self._item_text(item), self.width - 4)
            lines.append(f"  {s.bullet} {text}")

        return lines

    # =========================================================================
    # Nested List
    # =========================================================================

    def _render_nested(self, items: List[Dict], level: int = 0) -> List[str]:
        """Render nested list with indentation."""
        s = self.symbols
        lines = []
        indent = "  " * (level + 1)

        for i, item in enumerate(items):
            is_last = i == len(items) - 1

            if level > 0:
                branch = s.tree_end if is_last else s.tree_branch
            else:
                branch = s.bullet

            text = self.truncate(self._item_text(item), self.width - len(indent) - 4)
            lines.append(f"{indent}{branch} {text}")

            children = item.get("children", []) if isinstance(item, dict) else []
            if children:
                lines.extend(self._render_nested(children, level + 1))

        return lines

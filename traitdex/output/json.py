"""
JsonRenderer — Render data as JSON for piping

Supports:
- Pretty-printed JSON output
- Clean data (strips internal keys)
"""

import json
from typing import TYPE_CHECKING, Any

from .base import BaseRenderer

if TYPE_CHECKING:
    from . import OutputSpec


class JsonRenderer(BaseRenderer):
    """
    Render data as JSON.

    Useful for piping to jq, editors and documentation generators.
    """

    def render(self, spec: "OutputSpec") -> str:
        data = self._clean_data(spec.data)

        if spec.title:
            output = {"title": spec.title, "data": data}
        else:
            output = data

        return json.dumps(output, indent=2, default=self._json_serializer, ensure_ascii=False)

    def _clean_data(self, data: Any) -> Any:
        """Remove internal keys (starting with _), recursively."""
        if isinstance(data, dict):
            return {
                k: self._clean_data(v)
                for k, v in data.items()
                if not k.startswith("_")
            }
        if isinstance(data, (list, tuple)):
            return [self._clean_data(item) for item in data]
        return data

    def _json_serializer(self, obj: Any) -> Any:
        """Fallback for non-standard types."""
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        if hasattr(obj, "value"):  # Enum
            return obj.value
        return str(obj)

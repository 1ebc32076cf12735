"""
Tests for Output — OutputSpec rendering

These tests validate:
- Shape auto-detection and explicit formats
- List, nested list, detail and JSON renderers
- Succession hints appended for humans, never for JSON
"""

import json

import pytest

from traitdex.output import OutputSpec, auto_detect_shape, get_renderer, render
from traitdex.output.base import BaseRenderer
from traitdex.presentation.symbols import ASCII


class TestShape:

    def test_list_data(self):
        assert auto_detect_shape(["fmt", "io"]) == "list"

    def test_items_dict(self):
        assert auto_detect_shape({"items": []}) == "list"

    def test_plain_dict(self):
        assert auto_detect_shape({"name": "Clone"}) == "detail"

    def test_unknown_renderer(self):
        with pytest.raises(ValueError, match="Unknown format"):
            get_renderer("table", ASCII)


class TestListRenderer:

    def test_bullets(self):
        spec = OutputSpec(data=[{"name": "fmt::Write", "description": "I deal with formatting."}])
        output = render(spec, format="list", symbols=ASCII, width=80)
        assert "  * fmt::Write  I deal with formatting." in output

    def test_nested(self):
        spec = OutputSpec(data=[
            {"name": "io", "children": [{"name": "Read"}, {"name": "Write"}]},
        ])
        output = render(spec, format="list", symbols=ASCII, width=80)
        assert output.splitlines() == ["  * io", "    +- Read", "    +- Write"]

    def test_empty(self):
        spec = OutputSpec(data=[], empty_message="No traits.")
        assert render(spec, format="list", symbols=ASCII, width=80) == "No traits."


class TestDetailRenderer:

    def test_fields(self):
        spec = OutputSpec(data={
            "module": "clone",
            "trait": ["I can be derived."],
            "implementor": [],
            "trait_signature": "\npub trait Clone {\n}\n",
        }, title="clone::Clone")
        output = render(spec, format="detail", symbols=ASCII, width=80)
        assert "clone::Clone" in output
        assert "  Module: clone" in output
        assert "    * I can be derived." in output
        assert "    (none)" in output
        assert "  Trait Signature:\n    pub trait Clone {\n    }" in output

    def test_long_list_preview(self):
        spec = OutputSpec(data={"facts": [f"fact {i}" for i in range(8)]})
        output = render(spec, format="detail", symbols=ASCII, width=80)
        assert "... and 3 more" in output
        full = render(spec, format="detail", symbols=ASCII, width=80, full=True)
        assert "fact 7" in full


class TestJsonRenderer:

    def test_plain(self):
        spec = OutputSpec(data={"name": "Write", "modules": ["fmt", "io"], "_internal": 1})
        output = render(spec, format="json", symbols=ASCII)
        assert json.loads(output) == {"name": "Write", "modules": ["fmt", "io"]}

    def test_title_envelope(self):
        spec = OutputSpec(data=[1], title="Catalog")
        assert json.loads(render(spec, format="json", symbols=ASCII)) == {"title": "Catalog", "data": [1]}

    def test_no_hint_in_json(self):
        spec = OutputSpec(data={"valid": True}, command="check", context={"valid": True})
        output = render(spec, format="json", symbols=ASCII)
        assert "Next" not in output
        json.loads(output)


class TestHints:

    def test_hint_appended(self):
        spec = OutputSpec(data=["fmt::Write"], command="where", context={"found": True})
        output = render(spec, format="auto", symbols=ASCII, width=80)
        assert output.endswith("-> Next: traitdex show <module>::<name>  (Read one declaration)")

    def test_hint_suppressed(self):
        spec = OutputSpec(data=["fmt::Write"], command="where", context={"found": True}, show_actions=False)
        assert "Next" not in render(spec, format="auto", symbols=ASCII, width=80)


class TestBaseRenderer:

    def test_render_is_abstract(self):
        class Partial(BaseRenderer):
            pass

        with pytest.raises(TypeError):
            Partial(symbols=ASCII, width=40)

    def test_truncate(self):
        renderer = get_renderer("list", ASCII, 40, False)
        assert renderer.truncate("x" * 50, 10) == "x" * 7 + "..."
        assert renderer.truncate("short", 10) == "short"
        assert renderer.truncate("", 10) == ""

    def test_truncate_full(self):
        renderer = get_renderer("list", ASCII, 40, True)
        assert renderer.truncate("x" * 50, 10) == "x" * 50

    def test_indent_skips_blank_lines(self):
        renderer = get_renderer("detail", ASCII, 40, False)
        assert renderer.indent("fn a()\n\nfn b()", 4) == "    fn a()\n\n    fn b()"

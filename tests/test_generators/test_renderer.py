"""Tests for specment.generators.renderer."""

import pytest

from specment.generators.records import NavItem, Preset
from specment.generators.renderer import JsExpr, render_module, to_js


class TestToJs:
    """Tests for to_js()."""

    @pytest.mark.parametrize("value, expected", [
        (True, "true"),
        (False, "false"),
        (None, "undefined"),
        (3, "3"),
        (1.5, "1.5"),
        ("plain", "'plain'"),
        ({}, "{}"),
        ([], "[]"),
    ])
    def test_scalars(self, value, expected):
        assert to_js(value) == expected

    def test_escapes_quotes(self):
        assert to_js("it's \"here\"") == "'it\\'s \"here\"'"

    def test_keeps_non_ascii(self):
        assert to_js("日本語") == "'日本語'"

    def test_quotes_non_identifier_keys(self):
        rendered = to_js({"item.label": 1, "plain": 2})
        assert "'item.label': 1," in rendered
        assert "plain: 2," in rendered

    def test_quotes_key_with_trailing_newline(self):
        assert "'a\\n': 1," in to_js({"a\n": 1})

    def test_nested_indentation(self):
        rendered = to_js({"a": {"b": [1]}})
        assert rendered == "{\n  a: {\n    b: [\n      1,\n    ],\n  },\n}"

    def test_expression_emitted_verbatim(self):
        assert to_js({"theme": JsExpr("prismThemes.github")}) == "{\n  theme: prismThemes.github,\n}"

    def test_records(self):
        rendered = to_js([Preset("classic", {"blog": False}), NavItem(label="API", to="/api/")])
        assert "'classic'," in rendered
        assert "blog: false," in rendered
        assert "to: '/api/'," in rendered

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            to_js(object())


class TestRenderModule:
    """Tests for render_module()."""

    def test_module_layout(self):
        source = render_module(
            "sidebars",
            {"main": []},
            imports=["import type { SidebarsConfig } from '@docusaurus/plugin-content-docs';"],
            type_annotation="SidebarsConfig",
        )
        assert source.startswith("import type { SidebarsConfig }")
        assert "const sidebars: SidebarsConfig = {\n  main: [],\n};" in source
        assert source.endswith("export default sidebars;\n")

    def test_header_first(self):
        source = render_module("config", {}, header="// generated")
        assert source.splitlines()[0] == "// generated"

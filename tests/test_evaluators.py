# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the default structured and snippet evaluators."""

from __future__ import annotations

import pytest

from protoforge.errors import TemplateEvaluationError
from protoforge.evaluators import ParamImportEvaluator, SnippetEvaluator
from protoforge.evaluators.jsonnet import param_reference


def _rewrite(source: str) -> str:
    return ParamImportEvaluator().evaluate(source, "component")


def test_param_imports_become_params_lookups() -> None:
    source = "{ a: import 'param://name', b: import \"param://port\" }"

    assert _rewrite(source) == "{ a: params.name, b: params.port }"


def test_non_identifier_params_use_brackets() -> None:
    assert _rewrite("{ a: import 'param://my-port' }") == '{ a: params["my-port"] }'
    assert param_reference("name") == "params.name"


def test_strings_and_comments_are_left_alone() -> None:
    source = "\n".join(
        (
            "// import 'param://ignored'",
            "# import 'param://ignored'",
            "/* import 'param://ignored' { */",
            "{ a: \"import 'param://ignored'\", b: 'it\\'s', c: @'a''b', d: |||",
            "  import 'param://ignored' {",
            "|||, e: import 'param://name' }",
        ),
    )

    rewritten = _rewrite(source)

    assert rewritten.count("param://ignored") == 5
    assert rewritten.endswith("e: params.name }")


def test_other_imports_are_untouched() -> None:
    source = "local k = import 'k.libsonnet'; { a: importstr 'param://x', b: reimport }"

    assert _rewrite(source) == source


@pytest.mark.parametrize(
    ("source", "message"),
    [
        ("{ a: [1, 2 }", "unexpected '}'"),
        ("{ a: 1", "unclosed '{'"),
        ("{ a: 'open }", "unterminated string"),
        ("{ a: 1 } /* trailing", "unterminated block comment"),
        ("   \n", "template body is empty"),
    ],
)
def test_malformed_sources_are_rejected(source: str, message: str) -> None:
    with pytest.raises(TemplateEvaluationError, match=message) as excinfo:
        _rewrite(source)

    assert excinfo.value.source_name == "component"


def test_snippet_substitutes_all_placeholder_forms() -> None:
    template = SnippetEvaluator().parse("name: ${name}\nport: ${1:port}\nimage: $image\ncost: $$5")

    text = template.evaluate({"name": '"web"', "port": "80", "image": '"nginx"'})

    assert text == 'name: "web"\nport: 80\nimage: "nginx"\ncost: $5'
    assert template.placeholders == ("name", "port", "image")


def test_snippet_supports_dashed_names_in_braces() -> None:
    template = SnippetEvaluator().parse("port: ${container-port}")

    assert template.evaluate({"container-port": "8080"}) == "port: 8080"


def test_snippet_missing_value_is_an_error() -> None:
    template = SnippetEvaluator().parse("name: ${name}\nimage: ${2:image}")

    with pytest.raises(TemplateEvaluationError, match="placeholder 'image'"):
        template.evaluate({"name": '"web"'})


def test_snippet_malformed_placeholder_is_an_error() -> None:
    with pytest.raises(TemplateEvaluationError, match="line 2, column 8"):
        SnippetEvaluator().parse("ok: yes\nvalue: ${bad")

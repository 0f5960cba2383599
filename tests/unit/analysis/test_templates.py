"""Tests for parasail_lsp.analysis.templates module."""

import pytest

from parasail_lsp.analysis.templates import TEMPLATES, templates_matching


class TestTemplatesMatching:
    """Tests for templates_matching function."""

    def test_partial_func_offers_function_skeleton(self) -> None:
        matches = templates_matching("fun")

        assert [t.label for t in matches] == ["func"]
        assert matches[0].snippet.startswith("func ")

    def test_leading_whitespace_allowed(self) -> None:
        assert [t.label for t in templates_matching("    for")] == ["for"]

    def test_trigger_ignores_case(self) -> None:
        assert [t.label for t in templates_matching("INTERFACE Stack")] == ["interface"]

    def test_trigger_must_start_the_line(self) -> None:
        assert templates_matching("x := fun") == []

    def test_plain_statement_matches_nothing(self) -> None:
        assert templates_matching("x := 1") == []

    def test_empty_line_matches_nothing(self) -> None:
        assert templates_matching("") == []

    @pytest.mark.parametrize(
        ("line", "label"),
        [("typ", "type"), ("cla", "class"), ("if", "if"), ("func Foo", "func")],
    )
    def test_each_trigger(self, line: str, label: str) -> None:
        assert label in [t.label for t in templates_matching(line)]


class TestTemplateCatalog:
    """Tests for the template table itself."""

    def test_labels(self) -> None:
        assert [t.label for t in TEMPLATES] == ["func", "type", "interface", "class", "for", "if"]

    def test_snippets_have_placeholders(self) -> None:
        for template in TEMPLATES:
            assert "${1:" in template.snippet

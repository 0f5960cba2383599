"""Tests for parasail_lsp.core.utils module."""

from parasail_lsp.core.utils import deep_merge, split_lines


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_nested_dicts_merged(self) -> None:
        base = {"settings": {"maxNumberOfProblems": 10, "enableFormatting": False}}
        override = {"settings": {"maxNumberOfProblems": 20}}

        assert deep_merge(base, override) == {
            "settings": {"maxNumberOfProblems": 20, "enableFormatting": False}
        }

    def test_lists_replaced(self) -> None:
        base = {"settings": {"libraryPaths": ["/a", "/b"]}}
        override = {"settings": {"libraryPaths": []}}

        assert deep_merge(base, override)["settings"]["libraryPaths"] == []

    def test_originals_untouched(self) -> None:
        base = {"a": {"b": 1}}
        override = {"a": {"c": 2}}

        deep_merge(base, override)

        assert base == {"a": {"b": 1}}
        assert override == {"a": {"c": 2}}

    def test_scalar_replaces_dict(self) -> None:
        assert deep_merge({"a": {"b": 1}}, {"a": None}) == {"a": None}


class TestSplitLines:
    """Tests for split_lines function."""

    def test_lf(self) -> None:
        assert split_lines("a\nb") == ["a", "b"]

    def test_crlf(self) -> None:
        assert split_lines("a\r\nb\r\n") == ["a", "b", ""]

    def test_empty_text_is_one_line(self) -> None:
        assert split_lines("") == [""]

    def test_lone_cr_is_not_a_terminator(self) -> None:
        assert split_lines("a\rb") == ["a\rb"]

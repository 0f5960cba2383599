"""Tests for parasail_lsp.analysis.catalog module."""

import pytest

from parasail_lsp.analysis.catalog import (
    KEYWORDS,
    STANDARD_LIBRARY,
    keywords_with_prefix,
    library_namespace,
    lookup_keyword,
    lookup_library_symbols,
)


class TestKeywordCatalog:
    """Tests for keyword lookups."""

    def test_catalog_size(self) -> None:
        assert len(KEYWORDS) == 32

    def test_catalog_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            KEYWORDS["new_keyword"] = "doc"  # type: ignore[index]

    @pytest.mark.parametrize("name", ["func", "FUNC", "Func", "fUnC"])
    def test_lookup_ignores_case(self, name: str) -> None:
        assert lookup_keyword(name) == KEYWORDS["func"]

    def test_every_keyword_resolves_in_upper_case(self) -> None:
        for name, doc in KEYWORDS.items():
            assert lookup_keyword(name.upper()) == doc

    def test_unknown_word(self) -> None:
        assert lookup_keyword("Foo") is None

    def test_qualified_name_is_not_a_keyword(self) -> None:
        assert lookup_keyword("IO::Print") is None

    def test_prefix_in_catalog_order(self) -> None:
        assert keywords_with_prefix("fo") == ["for", "forward"]

    def test_prefix_ignores_case(self) -> None:
        assert keywords_with_prefix("WH") == ["while"]

    def test_empty_prefix_lists_everything(self) -> None:
        assert keywords_with_prefix("") == list(KEYWORDS)


class TestStandardLibrary:
    """Tests for standard library lookups."""

    def test_catalog_size(self) -> None:
        assert len(STANDARD_LIBRARY) == 8

    def test_substring_match(self) -> None:
        assert lookup_library_symbols("print") == [("IO::Print", STANDARD_LIBRARY["IO::Print"])]

    def test_match_ignores_case(self) -> None:
        names = [name for name, _ in lookup_library_symbols("CONTAINERS")]
        assert names == ["Containers::Vector"]

    def test_empty_substring_lists_everything(self) -> None:
        assert len(lookup_library_symbols("")) == len(STANDARD_LIBRARY)

    def test_no_match(self) -> None:
        assert lookup_library_symbols("zzz") == []

    def test_namespace(self) -> None:
        assert library_namespace("Containers::Vector") == "Containers"
        assert library_namespace("IO") == "IO"

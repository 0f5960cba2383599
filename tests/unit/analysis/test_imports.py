"""Tests for parasail_lsp.analysis.imports module."""

from parasail_lsp.analysis.imports import import_label, import_namespaces, imports_declared


class TestImportsDeclared:
    """Tests for imports_declared function."""

    def test_collects_every_clause(self) -> None:
        text = "imports PSL::Containers::Vector\nimports IO\n\nfunc Main() is\nend func"

        assert imports_declared(text) == {"PSL::Containers::Vector", "IO"}

    def test_duplicates_collapse(self) -> None:
        assert imports_declared("imports IO\nimports IO") == {"IO"}

    def test_singular_keyword(self) -> None:
        assert imports_declared("import Math") == {"Math"}

    def test_wildcards_kept(self) -> None:
        text = "imports PSL::Containers::all\nimport PSL::Short_Set::*"

        assert imports_declared(text) == {"PSL::Containers::all", "PSL::Short_Set::*"}

    def test_comma_separated_list(self) -> None:
        assert imports_declared("imports A::B, C::D") == {"A::B", "C::D"}

    def test_word_containing_import_is_ignored(self) -> None:
        assert imports_declared("important Foo") == set()

    def test_no_imports(self) -> None:
        assert imports_declared("func F() is\nend func") == set()


class TestImportLabel:
    """Tests for import_label function."""

    def test_last_segment(self) -> None:
        assert import_label("PSL::Containers::Vector") == "Vector"

    def test_skips_all_wildcard(self) -> None:
        assert import_label("PSL::Containers::all") == "Containers"

    def test_skips_star_wildcard(self) -> None:
        assert import_label("A::*") == "A"

    def test_single_segment(self) -> None:
        assert import_label("IO") == "IO"


class TestImportNamespaces:
    """Tests for import_namespaces function."""

    def test_top_level_segments(self) -> None:
        assert import_namespaces({"IO::Print", "Math", "Math::Sin"}) == {"IO", "Math"}

    def test_empty(self) -> None:
        assert import_namespaces(set()) == set()

    def test_only_wildcards_keeps_last(self) -> None:
        assert import_label("all::*") == "*"

"""Tests for UTF-16 position helpers in parasail_lsp.core.encoding."""

import pytest

from parasail_lsp.core.encoding import index_to_utf16, utf16_len, utf16_to_index

SMILE = "\U0001F600"


class TestUtf16Len:
    def test_ascii(self) -> None:
        assert utf16_len("func") == 4

    def test_astral_counts_double(self) -> None:
        assert utf16_len(f"a{SMILE}") == 3

    def test_bmp_non_ascii(self) -> None:
        assert utf16_len("é") == 1


class TestUtf16ToIndex:
    @pytest.mark.parametrize(
        ("column", "index"),
        [(0, 0), (1, 1), (3, 2), (4, 3), (100, 3), (-1, 0)],
    )
    def test_conversion(self, column: int, index: int) -> None:
        assert utf16_to_index(f"a{SMILE}b", column) == index

    def test_inside_surrogate_pair(self) -> None:
        """A column between the two halves belongs to the astral character."""
        assert utf16_to_index(f"a{SMILE}b", 2) == 1


class TestIndexToUtf16:
    @pytest.mark.parametrize(("index", "column"), [(0, 0), (1, 1), (2, 3), (3, 4)])
    def test_conversion(self, index: int, column: int) -> None:
        assert index_to_utf16(f"a{SMILE}b", index) == column

    def test_clamps(self) -> None:
        assert index_to_utf16("ab", 10) == 2
        assert index_to_utf16("ab", -3) == 0

    def test_round_trip_on_character_boundaries(self) -> None:
        line = f"x{SMILE}y{SMILE}z"
        for index in range(len(line) + 1):
            assert utf16_to_index(line, index_to_utf16(line, index)) == index

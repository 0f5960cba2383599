"""Declarations found in ParaSail sources under the configured library paths."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from parasail_lsp.analysis.symbols import symbols_in
from parasail_lsp.core.constants import SOURCE_SUFFIXES
from parasail_lsp.core.encoding import ENCODING, ENCODING_ERRORS
from parasail_lsp.core.types import SymbolKind

logger = logging.getLogger(__name__)

_MAX_LIBRARY_FILES = 2000


@dataclass(frozen=True)
class LibrarySymbol:
    """A declaration from a library source file."""

    name: str
    kind: SymbolKind
    path: Path


class LibraryIndex:
    """Immutable snapshot of library declarations.

    Built once per settings change with ``scan()``; never updated in place.
    """

    def __init__(self, symbols: Iterable[LibrarySymbol] = ()) -> None:
        self._symbols: tuple[LibrarySymbol, ...] = tuple(symbols)

    @classmethod
    def scan(cls, paths: Iterable[str]) -> LibraryIndex:
        """Index every ParaSail source below the given directories.

        Missing directories and unreadable files are logged and skipped.
        """
        symbols: list[LibrarySymbol] = []
        seen = 0
        for root in paths:
            base = Path(root)
            if not base.is_dir():
                logger.warning("Library path is not a directory: %s", root)
                continue
            for file in sorted(base.rglob("*")):
                if file.suffix not in SOURCE_SUFFIXES or not file.is_file():
                    continue
                seen += 1
                if seen > _MAX_LIBRARY_FILES:
                    logger.warning("Library scan stopped after %d files", _MAX_LIBRARY_FILES)
                    return cls(symbols)
                try:
                    text = file.read_text(encoding=ENCODING, errors=ENCODING_ERRORS)
                except OSError as e:
                    logger.warning("Cannot read library file %s: %s", file, e)
                    continue
                symbols.extend(
                    LibrarySymbol(entry.name, entry.kind, file) for entry in symbols_in(text)
                )
        logger.debug("Library index: %d symbols", len(symbols))
        return cls(symbols)

    def matching(self, substring: str) -> list[LibrarySymbol]:
        """Symbols whose name contains substring, ignoring case."""
        folded = substring.casefold()
        return [s for s in self._symbols if folded in s.name.casefold()]

    def __len__(self) -> int:
        return len(self._symbols)

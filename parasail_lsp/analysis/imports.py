"""Import declarations scanned from document text."""

import re

# A::B::C, optionally ending in a wildcard (A::B::all or A::B::*)
_QUALIFIED = r"\w+(?:::\w+)*(?:::\*)?"

IMPORT_RE = re.compile(
    rf"\bimports?\s+({_QUALIFIED}(?:\s*,\s*{_QUALIFIED})*)"
)

WILDCARD_SEGMENTS = frozenset({"all", "*"})


def imports_declared(text: str) -> set[str]:
    """Qualified paths named by import clauses anywhere in text."""
    found: set[str] = set()
    for match in IMPORT_RE.finditer(text):
        for path in match.group(1).split(","):
            found.add(path.strip())
    return found


def import_label(path: str) -> str:
    """Completion label for an import: its last non-wildcard segment.

    This is not simply the last segment. Wildcards (``all``, ``*``) are
    skipped, so ``PSL::Containers::all`` is labelled ``Containers`` rather
    than ``all``. A path made only of wildcards keeps its last segment.
    """
    segments = path.split("::")
    for segment in reversed(segments):
        if segment not in WILDCARD_SEGMENTS:
            return segment
    return segments[-1]


def import_namespaces(paths: set[str]) -> set[str]:
    """Top-level namespaces covered by a set of import paths."""
    return {path.split("::", 1)[0] for path in paths}

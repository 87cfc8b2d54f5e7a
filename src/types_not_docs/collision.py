"""Disambiguation of item names that occur in more than one source file."""

import re
from collections.abc import Iterable

NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def to_anchor(text: str) -> str:
    """Convert text to a markdown anchor: lower, hyphenate non-alnum runs."""
    return NON_ALNUM_RE.sub("-", text.lower())


def find_duplicate_names(names: Iterable[str]) -> frozenset[str]:
    """Return the names that appear more than once."""
    seen: set[str] = set()
    duplicates: set[str] = set()
    for name in names:
        if name in seen:
            duplicates.add(name)
        seen.add(name)
    return frozenset(duplicates)


def display_name(name: str, source_file: str, duplicates: frozenset[str]) -> str:
    """Label for an item, suffixed with its file when the name collides."""
    if name in duplicates:
        return f"{name} ({source_file})"
    return name


def anchor_for(name: str, source_file: str, duplicates: frozenset[str]) -> str:
    """Anchor for an item, suffixed with its file when the name collides."""
    if name in duplicates:
        return to_anchor(f"{name}-{source_file}")
    return to_anchor(name)

"""Permissive search patterns built from free-text queries."""

from __future__ import annotations

import re

_ATOM_SEPARATOR_RE = re.compile(r"(?:[^\w&]|_)+")


def query_atoms(query: object) -> list[str]:
    """Split a query into words made of letters, digits, and `&`."""

    text = "" if query is None else str(query)
    return [atom for atom in _ATOM_SEPARATOR_RE.split(text) if atom]


def build_query_pattern(query: object, exhaustive: bool = True) -> re.Pattern[str]:
    """Compile a case-insensitive pattern matching texts that contain the query words.

    Each word must appear as a whole word, in any order. With `exhaustive`
    every word is required, otherwise any one of them is enough. Test
    candidates with `pattern.search(text)`.
    """

    # Not `\b`: an atom made only of `&` has no word characters to anchor on.
    assertions = [rf"(?=.*(?<!\w){re.escape(atom)}(?!\w))" for atom in query_atoms(query)]
    joiner = "" if exhaustive else "|"
    return re.compile(joiner.join(assertions), re.IGNORECASE | re.DOTALL)

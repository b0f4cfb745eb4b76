"""Heuristic English pluralization.

These rules cover the regular cases met in resource and field names. They are
deliberately simple; irregular nouns should be special-cased by the caller.
"""

from __future__ import annotations

import re

_CONSONANT_YS_RE = re.compile(r"([b-df-hj-np-tv-z])ys$")


def pluralize(word: object) -> str:
    """Return the plural form of a singular English noun; `None` yields `""`."""

    if word is None:
        return ""
    word = str(word)
    plural = f"{word}es" if word.endswith("x") else f"{word}s"
    return _CONSONANT_YS_RE.sub(r"\1ies", plural)


def singularize(word: object) -> str:
    """Return the singular form of a plural English noun; `None` yields `""`."""

    word = "" if word is None else str(word)
    if word.endswith("xes"):
        return word[:-2]
    if word.endswith("ies"):
        return f"{word[:-3]}y"
    if word.endswith("s"):
        return word[:-1]
    return word

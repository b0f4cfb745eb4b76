"""Accent folding for Western European Latin text.

Responsibilities:
- Map accented Latin-1 Supplement and Latin Extended-A letters to their base letter.
- Keep the lookup table static so folding is deterministic and thread-safe.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


# Only letters with a single-letter base are listed; ligatures such as
# `Æ`, `Œ` or `ß` stay untouched.
_ACCENTED_LETTERS: Mapping[str, str] = MappingProxyType(
    {
        "A": "ÀÁÂÃÄÅĀĂĄ",
        "a": "àáâãäåāăą",
        "C": "ÇĆĈĊČ",
        "c": "çćĉċč",
        "D": "ÐĎĐ",
        "d": "ðďđ",
        "E": "ÈÉÊËĒĔĖĘĚ",
        "e": "èéêëēĕėęě",
        "G": "ĜĞĠĢ",
        "g": "ĝğġģ",
        "H": "ĤĦ",
        "h": "ĥħ",
        "I": "ÌÍÎÏĨĪĬĮİ",
        "i": "ìíîïĩīĭįı",
        "J": "Ĵ",
        "j": "ĵ",
        "K": "Ķ",
        "k": "ķĸ",
        "L": "ĹĻĽĿŁ",
        "l": "ĺļľŀł",
        "N": "ÑŃŅŇŊ",
        "n": "ñńņňŉŋ",
        "O": "ÒÓÔÕÖØŌŎŐ",
        "o": "òóôõöøōŏő",
        "R": "ŔŖŘ",
        "r": "ŕŗř",
        "S": "ŚŜŞŠ",
        "s": "śŝşšſ",
        "T": "ŢŤŦ",
        "t": "ţťŧ",
        "U": "ÙÚÛÜŨŪŬŮŰŲ",
        "u": "ùúûüũūŭůűų",
        "W": "Ŵ",
        "w": "ŵ",
        "Y": "ÝŶŸ",
        "y": "ýÿŷ",
        "Z": "ŹŻŽ",
        "z": "źżž",
    }
)

ACCENT_TABLE: Mapping[int, str] = MappingProxyType(
    {
        ord(accented): base
        for base, variants in _ACCENTED_LETTERS.items()
        for accented in variants
    }
)


def transliterate(text: str) -> str:
    """Return `text` with every known accented letter replaced by its base letter."""

    return text.translate(ACCENT_TABLE)

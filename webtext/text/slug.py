"""Deterministic slug helpers for URL path segments.

Responsibilities:
- Normalize free-form titles into stable ASCII slugs.
- Keep slug behavior locale-independent so the same title always maps to the same URL.
"""

from __future__ import annotations

import re
from urllib.parse import quote

from .transliteration import transliterate

_SEPARATOR_RUN_RE = re.compile(r"(?:-|[^0-9A-Za-z])+")


def slugify(value: object, lowercase: bool = True) -> str:
    """Return a URL-friendly slug for an arbitrary value.

    Args:
        value: Text to convert. `None` yields an empty slug; other values are
            converted with `str()`.
        lowercase: Whether to fold the slug to lowercase.

    Returns:
        Hyphen-delimited slug without leading or trailing hyphens.
    """

    if value is None:
        return ""
    text = transliterate(str(value))
    text = text.replace("&", "and").replace("%", " percent")
    slug = _SEPARATOR_RUN_RE.sub("-", text).strip("-")
    if lowercase:
        slug = slug.lower()
    return quote(slug, safe="-")

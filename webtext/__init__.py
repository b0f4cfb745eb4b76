"""Top-level package for webtext.

This package provides stateless text normalization and format conversion
helpers for web applications: slugs, prices, pluralization, typecasting,
search patterns, and rich-text autolinking.
"""

from .price import format_price, parse_price
from .query import build_query_pattern
from .text import (
    complete_link,
    is_external_link,
    linkify,
    nl2br,
    pluralize,
    singularize,
    slugify,
    transliterate,
    truncate,
)
from .typecast import typecast

__all__ = [
    "build_query_pattern",
    "complete_link",
    "format_price",
    "is_external_link",
    "linkify",
    "nl2br",
    "parse_price",
    "pluralize",
    "singularize",
    "slugify",
    "transliterate",
    "truncate",
    "typecast",
    "__version__",
]

__version__ = "0.1.0"

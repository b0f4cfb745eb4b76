"""Text transformation components.

This package provides accent folding, slugs, English pluralization, naming
helpers, and HTML-aware rich-text conversion.
"""

from .morphology import pluralize, singularize
from .naming import (
    branded_filename,
    dasherize_class_name,
    filename_variation,
    guess_related_class_name,
    label_for_field,
    undasherize_class_name,
)
from .richtext import complete_link, is_external_link, linkify, nl2br, truncate
from .slug import slugify
from .transliteration import transliterate

__all__ = [
    "pluralize",
    "singularize",
    "slugify",
    "transliterate",
    "complete_link",
    "is_external_link",
    "linkify",
    "nl2br",
    "truncate",
    "dasherize_class_name",
    "undasherize_class_name",
    "guess_related_class_name",
    "label_for_field",
    "branded_filename",
    "filename_variation",
]

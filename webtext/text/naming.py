"""Naming helpers for class names, form fields, and derived filenames.

Responsibilities:
- Convert namespaced class names to and from dashed URL/CSS-friendly names.
- Build human-readable labels from field names.
- Derive branded or variant filenames from a source path.
"""

from __future__ import annotations

import posixpath
import re

from .morphology import singularize

_UPPER_OR_DIGITS_RE = re.compile(r"[A-Z]|\d+")
_DASHED_CHAR_RE = re.compile(r"-([a-z0-9])")
_FIELD_WORD_RE = re.compile(r"[a-zA-Z0-9]+")


def dasherize_class_name(name: str) -> str:
    """Return a dashed name such as `rest-a-p-i--request` for `RestAPI::Request`."""

    dashed = _UPPER_OR_DIGITS_RE.sub(lambda match: f"-{match.group(0).lower()}", name)
    return dashed[1:].replace("::", "-")


def undasherize_class_name(name: str) -> str:
    """Return the class name encoded by `dasherize_class_name`."""

    camel = _DASHED_CHAR_RE.sub(lambda match: match.group(1).upper(), name.capitalize())
    return camel.replace("-", "::")


def guess_related_class_name(context: str, clue: object) -> str:
    """Return the class name a `clue` refers to, resolved inside `context`.

    A capitalized clue is already a class name and is returned as is. A
    lowercase clue such as `related_things` is singularized and camel-cased
    into a nested name, and a clue starting with `::` is appended to `context`.
    """

    clue = "" if clue is None else str(clue)
    if clue[:1].isupper():
        return clue
    if clue[:1].islower():
        clue = "::" + undasherize_class_name(singularize(clue).replace("_", "-"))
    return f"{context}{clue}"


def label_for_field(field_name: object) -> str:
    """Return a title-cased label, e.g. `Hello World 1234` for `hello-world_1234`."""

    return " ".join(word.capitalize() for word in _FIELD_WORD_RE.findall(str(field_name)))


def branded_filename(path: str, brand: str = "WebText") -> str:
    """Prefix the basename of `path` with `brand` and a hyphen."""

    directory = posixpath.dirname(path) or "."
    branded = f"{directory}/{brand}-{posixpath.basename(path)}"
    return branded.removeprefix("./")


def filename_variation(path: str, variation: str, ext: str) -> str:
    """Replace the extension of `path` with `.<variation>.<ext>`."""

    stem, _ = posixpath.splitext(path)
    return f"{stem}.{variation}.{ext}"

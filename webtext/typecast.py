"""Automatic typecasting of string values from web forms and CSV tables.

Responsibilities:
- Recognize booleans, nulls, integers, and floats hidden in raw strings.
- Let callers restrict which kinds are recognized, accepting common synonyms.
- Walk nested form payloads and typecast every leaf in place.
"""

from __future__ import annotations

from enum import Enum
import re
from typing import Any, Callable, Iterable

_INTEGER_RE = re.compile(r"-?\d+", re.ASCII)
_FLOAT_RE = re.compile(r"-?\d*\.\d+", re.ASCII)


class CastKind(str, Enum):
    """Kinds of values `typecast` can recognize in a string."""

    BOOLEAN = "boolean"
    NULL = "null"
    INTEGER = "integer"
    FLOAT = "float"


_KIND_SYNONYMS: dict[str, CastKind] = {
    "bool": CastKind.BOOLEAN,
    "boolean": CastKind.BOOLEAN,
    "nil": CastKind.NULL,
    "none": CastKind.NULL,
    "null": CastKind.NULL,
    "int": CastKind.INTEGER,
    "integer": CastKind.INTEGER,
    "float": CastKind.FLOAT,
}

DEFAULT_KINDS: frozenset[CastKind] = frozenset(CastKind)


def normalize_kinds(kinds: Iterable[str | CastKind]) -> frozenset[CastKind]:
    """Map kind names and synonyms to canonical kinds, ignoring unknown names."""

    normalized: set[CastKind] = set()
    for kind in kinds:
        name = kind.value if isinstance(kind, CastKind) else str(kind).strip().lower()
        canonical = _KIND_SYNONYMS.get(name)
        if canonical is not None:
            normalized.add(canonical)
    return frozenset(normalized)


def typecast(value: Any, kinds: Iterable[str | CastKind] = DEFAULT_KINDS) -> Any:
    """Return the typed value a string represents, or the value unchanged.

    Kinds are tried in a fixed order: `"true"`/`"false"`, empty string as
    `None`, integer, then float. Non-string values pass through untouched.

    Args:
        value: Raw value, usually a string from a form or a CSV cell.
        kinds: Enabled kinds. Synonyms such as `bool`, `int`, or `nil` are
            accepted and unknown names are ignored.
    """

    if not isinstance(value, str):
        return value

    enabled = normalize_kinds(kinds)
    if CastKind.BOOLEAN in enabled and value in ("true", "false"):
        return value == "true"
    if CastKind.NULL in enabled and value == "":
        return None
    if CastKind.INTEGER in enabled and _INTEGER_RE.fullmatch(value):
        return int(value)
    if CastKind.FLOAT in enabled and _FLOAT_RE.fullmatch(value):
        return float(value)
    return value


def each_leaf(container: Any, callback: Callable[[Any, Any, Any], None]) -> None:
    """Call `callback(parent, key_or_index, value)` for every leaf of a nested structure.

    Dicts and lists are descended into; every other value is a leaf. The
    callback may assign `parent[key_or_index]` to update the structure.

    Raises:
        TypeError: If `container` is neither a dict nor a list.
    """

    if isinstance(container, dict):
        entries = list(container.items())
    elif isinstance(container, list):
        entries = list(enumerate(container))
    else:
        raise TypeError("`each_leaf` expects a dict or a list.")

    for key, value in entries:
        if isinstance(value, (dict, list)):
            each_leaf(value, callback)
        else:
            callback(container, key, value)


def typecast_nested(container: Any, kinds: Iterable[str | CastKind] = DEFAULT_KINDS) -> Any:
    """Typecast every leaf of a nested dict/list payload in place and return it."""

    enabled = normalize_kinds(kinds)

    def _cast_leaf(parent: Any, key: Any, value: Any) -> None:
        parent[key] = typecast(value, enabled)

    each_leaf(container, _cast_leaf)
    return container

"""Price codec between display strings and integer minor units.

Responsibilities:
- Render integer cents/pence as human-readable amounts with thousands separators.
- Parse loosely formatted amounts, including comma-decimal European numerals.

Key public functions:
- `format_price`: cents to display string.
- `parse_price`: display string to cents.
- `detect_decimal_mark`: the separator disambiguation policy used by `parse_price`.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
import re

from .errors import PriceParseError, PriceTypeError

_NON_NUMERAL_RE = re.compile(r"[^\d.\-,]")
_COMMA_DECIMAL_TAIL_RE = re.compile(r"(?:\.\d{3}|,\d{1,2})$")
_SEPARATOR_SWAP = str.maketrans({".": ",", ",": "."})
_CENT = Decimal("0.01")
_DECIMAL_MARKS = frozenset({".", ","})


def format_price(cents: int) -> str:
    """Return a display string for a price expressed in minor units.

    Cents are omitted when they are zero, and thousands are separated with
    commas, e.g. `format_price(-140000) == "-1,400"`.

    Raises:
        PriceTypeError: If `cents` is not an integer.
    """

    if not isinstance(cents, int) or isinstance(cents, bool):
        raise PriceTypeError("The price needs to be the price in cents/pence as an integer.")

    sign = "-" if cents < 0 else ""
    units, minor = divmod(abs(cents), 100)
    if minor == 0:
        return f"{sign}{units:,}"
    return f"{sign}{units:,}.{minor:02d}"


def detect_decimal_mark(numeral: str) -> str:
    """Return the decimal mark a stripped numeral most likely uses.

    A trailing group of exactly three digits after a dot, or of one or two
    digits after a comma, reads as a comma-decimal numeral. Everything else
    reads as dot-decimal with comma thousands. `"20.000"` is therefore twenty
    thousand, never twenty with three decimals.
    """

    if _COMMA_DECIMAL_TAIL_RE.search(numeral):
        return ","
    return "."


def parse_price(text: str, decimal_mark: str | None = None) -> int:
    """Parse a price string into integer minor units.

    Currency symbols, spaces, and other decoration are ignored.

    Args:
        text: Price as typed by a user, e.g. `"£-12.345.678,90"`.
        decimal_mark: Force `"."` or `","` as decimal mark instead of detecting it.

    Raises:
        PriceTypeError: If `text` is not a string.
        PriceParseError: If no valid numeral remains after stripping decoration.
        ValueError: If `decimal_mark` is not `"."` or `","`.
    """

    if not isinstance(text, str):
        raise PriceTypeError("The price needs to be parsed from a string.")
    if decimal_mark is not None and decimal_mark not in _DECIMAL_MARKS:
        raise ValueError("`decimal_mark` must be `.` or `,`.")

    numeral = _NON_NUMERAL_RE.sub("", text)
    mark = decimal_mark or detect_decimal_mark(numeral)
    if mark == ",":
        numeral = numeral.translate(_SEPARATOR_SWAP)
    numeral = numeral.replace(",", "")

    with localcontext() as context:
        context.prec = len(numeral) + 2
        try:
            amount = Decimal(numeral).quantize(_CENT, rounding=ROUND_HALF_UP)
        except InvalidOperation as exc:
            raise PriceParseError(f"No price could be parsed from `{text}`.") from exc
        return int(amount.scaleb(2))

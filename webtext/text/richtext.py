"""Rich-text helpers for user-submitted plain text.

Responsibilities:
- Turn URLs, email addresses, and line breaks into HTML markup.
- Produce plain-text teasers from HTML fragments without cutting words.
- Classify and complete links for `href` attributes.
"""

from __future__ import annotations

import re

from ..parsing import is_blank

_URL_PATTERN = r"\b(?:https?://|ftps?://|www\.)[A-Za-z0-9\-_=%&@?./]+\b"
_EMAIL_PATTERN = r"\S+@\S*[a-zA-Z]"
_LINKABLE_RE = re.compile(rf"(?P<url>{_URL_PATTERN})|(?P<email>{_EMAIL_PATTERN})")
_NEWLINE_RE = re.compile(r"\r?\n")
_TAG_RE = re.compile(r"<[^>]*>")
_WORD_TAIL_RE = re.compile(r"\S*")
_COMPLETE_LINK_RE = re.compile(r"^(?:/|[a-z]*:)")
_EXTERNAL_LINK_RE = re.compile(r"^(?:[a-z]*:)?//")


def complete_link(link: object) -> str:
    """Prefix scheme-less links with `//` so the browser keeps the current scheme.

    Blank links, absolute paths, and links that already carry a scheme are
    returned untouched. `None` yields an empty string.
    """

    link = "" if link is None else str(link)
    if is_blank(link) or _COMPLETE_LINK_RE.match(link):
        return link
    return f"//{link}"


def is_external_link(link: object) -> bool:
    """Return whether a link points to another host and needs `target='_blank'`."""

    if link is None:
        return False
    return bool(_EXTERNAL_LINK_RE.match(str(link)))


def nl2br(text: object, br_tag: str = "<br>") -> str:
    """Replace every newline, including Windows line endings, with `br_tag`."""

    return _NEWLINE_RE.sub(lambda _: br_tag, "" if text is None else str(text))


def _link_markup(match: re.Match[str]) -> str:
    """Return anchor markup for one URL or email match."""

    url = match.group("url")
    if url is not None:
        return f"<a href='{complete_link(url)}' target='_blank'>{url}</a>"
    address = match.group("email")
    return f"<a href='mailto:{address.lower()}'>{address}</a>"


def linkify(text: object, br_tag: str = "<br>", obfuscate_at: bool = False) -> str:
    """Wrap URLs and email addresses in anchors and convert newlines to `br_tag`.

    URLs and emails are found in a single left-to-right scan, so the markup
    generated for one span is never matched again.

    Args:
        text: Plain text to convert. `None` yields an empty string.
        br_tag: Markup inserted for each line break.
        obfuscate_at: Replace every `@` with the `&#64;` entity in the output.

    Returns:
        HTML fragment.
    """

    linked = _LINKABLE_RE.sub(_link_markup, "" if text is None else str(text))
    html = nl2br(linked, br_tag)
    if obfuscate_at:
        html = html.replace("@", "&#64;")
    return html


def truncate(text: object, limit: int = 320, ellipsis: str = "...") -> str:
    """Return a plain-text teaser of at most `limit` characters plus the current word.

    HTML tags are stripped and newlines become spaces. The cut is moved to the
    end of the word it falls into, and `ellipsis` is appended only when some
    content was actually dropped.
    """

    plain = _TAG_RE.sub("", "" if text is None else str(text))
    plain = _NEWLINE_RE.sub(" ", plain)
    if len(plain) <= limit:
        return plain

    word_tail = _WORD_TAIL_RE.match(plain, limit).group(0)
    cut = limit + len(word_tail)
    if cut >= len(plain):
        return plain
    return f"{plain[:cut]}{ellipsis}"

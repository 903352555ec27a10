"""Minimal HTML text helpers (tag stripping and entity escaping)."""

from __future__ import annotations

import re

# A trailing unterminated tag ("<b") is stripped too.
_TAG_RE = re.compile(r"<[^>]*>?")

_ESCAPES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}
_UNESCAPES: dict[str, str] = {entity: char for char, entity in _ESCAPES.items()}

_ESCAPE_RE = re.compile("[" + re.escape("".join(_ESCAPES)) + "]")
_UNESCAPE_RE = re.compile("|".join(re.escape(entity) for entity in _UNESCAPES))


def strip_html(text: str) -> str:
    """Remove anything that looks like an HTML tag."""

    return _TAG_RE.sub("", text)


def escape_html(text: str) -> str:
    """Escape `& < > " '` into HTML entities."""

    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], text)


def unescape_html(text: str) -> str:
    """Reverse `escape_html`; other entities are left untouched."""

    return _UNESCAPE_RE.sub(lambda m: _UNESCAPES[m.group(0)], text)

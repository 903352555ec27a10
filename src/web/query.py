"""URL query-string parsing with repeated and array-style keys.

`parse_query_string` accepts a full URL or a bare query string:
    - the part after the first `?` is used when present, and one leading `?`/`#` is dropped,
    - a URL or absolute path without `?` has no query,
    - anything from `#` onwards (the fragment) is ignored,
    - `key[]=v` always collects into a list under `key`,
    - a plain key seen a second time is promoted to a list; once a list, it stays a list.

Malformed percent-encoding never raises: the undecodable token is kept verbatim.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import unquote_plus

logger = logging.getLogger(__name__)

_LEADING_MARKER_RE = re.compile(r"^[?#]")
_PERCENT_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_URL_PREFIX_RE = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.\-]*://|/)")

ARRAY_SUFFIX = "[]"

QueryParams = dict[str, str | list[str]]


def _decode(token: str) -> str:
    """Percent-decode a key or value (`+` means space), falling back to the raw token."""

    if _PERCENT_ESCAPE_RE.search(token):
        logger.debug("keeping malformed percent-encoding verbatim token=%r", token)
        return token
    try:
        return unquote_plus(token, errors="strict")
    except UnicodeDecodeError:
        logger.debug("keeping undecodable percent-encoding verbatim token=%r", token)
        return token


def _extract_query(value: str) -> str:
    if "?" in value:
        query = value.split("?", 1)[1]
    elif _URL_PREFIX_RE.match(value):
        # A URL or path without "?" carries no query.
        return ""
    else:
        query = value
    query = _LEADING_MARKER_RE.sub("", query)
    return query.split("#", 1)[0]


def _append(params: QueryParams, key: str, value: str) -> None:
    existing = params.get(key)
    if existing is None:
        params[key] = [value]
    elif isinstance(existing, list):
        existing.append(value)
    else:
        params[key] = [existing, value]


def parse_query_string(value: str) -> QueryParams:
    """Parse a URL or query string into a mapping of key -> value or list of values.

    Examples:
        >>> parse_query_string("a=1&a=2&b[]=x")
        {'a': ['1', '2'], 'b': ['x']}
        >>> parse_query_string("https://x.com/p?id=5#frag")
        {'id': '5'}
    """

    return parse_query_pairs(_extract_query(value or ""))


def parse_query_pairs(query: str) -> QueryParams:
    """Parse an already-extracted query component (no `?`, no fragment) into a mapping."""

    params: QueryParams = {}
    for pair in query.split("&"):
        if not pair:
            continue

        raw_key, _, raw_value = pair.partition("=")
        key = _decode(raw_key)
        item = _decode(raw_value)

        if key.endswith(ARRAY_SUFFIX):
            _append(params, key[: -len(ARRAY_SUFFIX)], item)
        elif key in params:
            _append(params, key, item)
        else:
            params[key] = item

    return params

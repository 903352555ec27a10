"""URL inspection and reversible base64url packing."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, field
from urllib.parse import quote, unquote, urlsplit

from src.web.query import QueryParams, parse_query_pairs

# Characters `encodeURIComponent`-style encoding leaves untouched.
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class URLParts:
    """Components of an absolute URL."""

    scheme: str
    host: str
    hostname: str
    port: int | None
    path: str
    query: str
    fragment: str
    origin: str
    query_params: QueryParams = field(default_factory=dict)


def get_url_parts(url: str) -> URLParts:
    """Split `url` into its components.

    Raises:
        ValueError: If the URL is malformed (e.g. an out-of-range port).
    """

    parts = urlsplit(url)
    scheme = parts.scheme
    host = parts.netloc.rpartition("@")[2]
    origin = f"{scheme}://{host}" if scheme and host else ""
    return URLParts(
        scheme=scheme,
        host=host,
        hostname=parts.hostname or "",
        port=parts.port,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
        origin=origin,
        query_params=parse_query_pairs(parts.query),
    )


def is_valid_url(value: str) -> bool:
    """Whether `value` parses as an absolute URL (scheme plus host or path)."""

    try:
        parts = urlsplit(value)
        _ = parts.port
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc or parts.path)


def shorten_url(url: str) -> str:
    """Pack `url` into an unpadded base64url token (an encoding, not a URL shortener)."""

    encoded = quote(url, safe=_URI_COMPONENT_SAFE).encode("ascii")
    return base64.urlsafe_b64encode(encoded).decode("ascii").rstrip("=")


def expand_url(token: str) -> str:
    """Reverse `shorten_url`.

    Raises:
        ValueError: If `token` is not valid unpadded base64url.
    """

    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        return unquote(raw.decode("ascii"), errors="strict")
    except (binascii.Error, UnicodeError) as exc:
        raise ValueError(f"invalid packed URL token: {token!r}") from exc

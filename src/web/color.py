"""CSS colour helpers: hex conversion and WCAG contrast ratio."""

from __future__ import annotations

import re

_CHANNEL_RE = re.compile(r"\d+")


def _channels(color: str) -> tuple[int, int, int]:
    values = [int(v) for v in _CHANNEL_RE.findall(color)[:3]]
    if len(values) != 3:
        raise ValueError(f"expected three colour channels in {color!r}")
    return values[0], values[1], values[2]


def rgb_to_hex(r: int | str, g: int | None = None, b: int | None = None) -> str:
    """Convert channels, or an `rgb(r, g, b)` string, to `#rrggbb`.

    Examples:
        >>> rgb_to_hex(120, 150, 200)
        '#789cc8'
        >>> rgb_to_hex("rgb(120, 150, 200)")
        '#789cc8'
    """

    if isinstance(r, str):
        r, g, b = _channels(r)
    channels = (r, g, b)
    if any(c is None or not 0 <= c <= 255 for c in channels):
        raise ValueError("colour channels must be integers in 0..255")
    return "#" + "".join(f"{c:02x}" for c in channels)


def luminance(color: str) -> float:
    """Relative luminance of an `rgb(...)` colour as defined by WCAG 2."""

    def linear(channel: int) -> float:
        c = channel / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (linear(c) for c in _channels(color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(color1: str, color2: str) -> float:
    """WCAG contrast ratio between two colours, from 1 (none) to 21 (black on white)."""

    lighter, darker = sorted((luminance(color1), luminance(color2)), reverse=True)
    return (lighter + 0.05) / (darker + 0.05)

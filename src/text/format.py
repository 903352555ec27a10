"""Formatting helpers for sizes, file names and regex literals."""

from __future__ import annotations

import re

_BYTE_UNITS: tuple[str, ...] = ("Bytes", "KB", "MB", "GB", "TB")
_REGEX_SPECIAL_RE = re.compile(r"[.*+?^${}()|\[\]\\]")


def format_bytes(num_bytes: float, decimals: int = 2) -> str:
    """Human-readable size with 1024-based units, e.g. `1536 -> "1.5 KB"`.

    Trailing zeros are dropped; sizes beyond terabytes are still reported in TB.
    """

    if num_bytes < 0:
        raise ValueError("num_bytes must be non-negative")
    if num_bytes == 0:
        return "0 Bytes"

    index = 0
    while index < len(_BYTE_UNITS) - 1 and num_bytes >= 1024 ** (index + 1):
        index += 1

    text = f"{num_bytes / 1024 ** index:.{max(decimals, 0)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {_BYTE_UNITS[index]}"


def file_extension(filename: str) -> str:
    """Text after the last dot; empty for names without one and for dotfiles like `.bashrc`."""

    index = filename.rfind(".")
    if index <= 0:
        return ""
    return filename[index + 1:]


def escape_regex(value: str) -> str:
    """Backslash-escape regex metacharacters so `value` matches literally."""

    return _REGEX_SPECIAL_RE.sub(r"\\\g<0>", value)

"""Textual escaping helpers.

These operate on raw characters, not on a parsed document.
"""

from __future__ import annotations

import re

from json_toolbox.constants import ASCII_MAX

_UNICODE_ESCAPE = re.compile(r"\\u([0-9a-fA-F]{4})")


def escape_json(text: str) -> str:
    # Backslashes first, otherwise the quote escapes would be doubled.
    return text.replace("\\", "\\\\").replace('"', '\\"')


def unescape_json(text: str) -> str:
    return text.replace('\\"', '"').replace("\\\\", "\\")


def _join_surrogates(text: str) -> str:
    # Escaped UTF-16 pairs decode to two surrogate units; merge them into one
    # code point and leave lone surrogates untouched.
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def unicode_to_chinese(text: str) -> str:
    """Expand every ``\\uXXXX`` escape into the character it names."""
    expanded = _UNICODE_ESCAPE.sub(lambda match: chr(int(match.group(1), 16)), text)
    return _join_surrogates(expanded)


def _utf16_units(code: int) -> list[int]:
    if code <= 0xFFFF:
        return [code]
    code -= 0x10000
    return [0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF)]


def chinese_to_unicode(text: str) -> str:
    """Replace every non-ASCII character with lowercase ``\\uXXXX`` escapes."""
    chunks: list[str] = []
    for char in text:
        code = ord(char)
        if code <= ASCII_MAX:
            chunks.append(char)
            continue
        chunks.extend(f"\\u{unit:04x}" for unit in _utf16_units(code))
    return "".join(chunks)

"""
Lenient JSON pretty-printer.

Uses jsbeautifier, so comments and trailing commas survive formatting.
Any failure returns the caller's text untouched: the formatter runs on
content that may still be half-typed.
"""

from __future__ import annotations

import logging

import jsbeautifier

from json_toolbox.config import FormatterOptions


logger = logging.getLogger(__name__)

_CLOSERS = {"}": "{", "]": "["}


class UnbalancedBracketsError(ValueError):
    """Raised when braces or brackets outside strings and comments do not pair up."""

    pass


def check_brackets(text: str) -> None:
    """
    Verify that ``{}`` and ``[]`` pair up outside string literals and comments.

    Raises:
        UnbalancedBracketsError: On the first unmatched or unclosed bracket.
    """
    stack: list[tuple[str, int]] = []
    quote: str | None = None
    escape = False
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if quote is not None:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == quote or ch == "\n":
                quote = None
            i += 1
            continue
        if ch in "\"'":
            quote = ch
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = n if end == -1 else end
            continue
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                raise UnbalancedBracketsError(f"Unterminated comment at offset {i}")
            i = end + 2
            continue
        elif ch in "{[":
            stack.append((ch, i))
        elif ch in _CLOSERS:
            if not stack or stack[-1][0] != _CLOSERS[ch]:
                raise UnbalancedBracketsError(f"Unexpected '{ch}' at offset {i}")
            stack.pop()
        i += 1
    if stack:
        opener, offset = stack[-1]
        raise UnbalancedBracketsError(f"Unclosed '{opener}' at offset {offset}")


def format_json(text: str, options: FormatterOptions | None = None) -> str:
    """Re-indent JSON-like text; return it unchanged if that fails."""
    try:
        check_brackets(text)
        opts = (options or FormatterOptions()).as_beautifier_options()
        result = jsbeautifier.beautify(text, opts)
    except Exception as exc:
        logger.debug(f"Formatting skipped, returning input unchanged: {exc}")
        return text
    if text and not result:
        return text
    return result

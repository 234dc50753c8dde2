"""Minification and deep key sorting."""

from __future__ import annotations

from typing import Any

from json_toolbox.constants import DEFAULT_INDENT
from json_toolbox.io.json_io import dump_document, dump_minified, parse_document


def minify_json(text: str) -> str:
    """Strip all insignificant whitespace.

    Raises:
        ValueError: If ``text`` is not strict JSON (``json.JSONDecodeError``
            for syntax errors).
    """
    return dump_minified(parse_document(text))


def sort_document(item: Any) -> Any:
    """Return a copy with every object's keys in ascending order.

    Array order is preserved; scalars are returned as-is.
    """
    if isinstance(item, list):
        return [sort_document(value) for value in item]
    if isinstance(item, dict):
        return {key: sort_document(item[key]) for key in sorted(item)}
    return item


def sort_json_keys(text: str, indent: int = DEFAULT_INDENT) -> str:
    """Sort object keys at every depth and indent the result.

    Raises:
        ValueError: If ``text`` is not strict JSON.
    """
    return dump_document(sort_document(parse_document(text)), indent=indent)

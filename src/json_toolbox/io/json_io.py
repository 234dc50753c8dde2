"""Strict JSON parse and serialize helpers."""

from __future__ import annotations

import json
import math
from typing import Any


def _reject_invalid_constant(value: str) -> Any:
    raise ValueError(f"Invalid constant '{value}' in JSON input.")


def _parse_int(value: str) -> int | float:
    # Past the interpreter's int digit limit the literal can only be a float.
    try:
        return int(value)
    except ValueError:
        return float(value)


def parse_document(text: str) -> Any:
    """Parse strict JSON text.

    NaN and Infinity are rejected. Syntax errors surface as
    ``json.JSONDecodeError`` whose message carries ``line N column M``.
    Numbers out of float range parse to ``inf``.
    """
    return json.loads(
        text,
        parse_int=_parse_int,
        parse_constant=_reject_invalid_constant,
    )


def _finite(data: Any) -> Any:
    """Replace non-finite floats with ``None`` so they serialize as ``null``."""
    if isinstance(data, float):
        return data if math.isfinite(data) else None
    if isinstance(data, dict):
        return {key: _finite(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_finite(value) for value in data]
    return data


def dump_document(data: Any, indent: int | None = None) -> str:
    return json.dumps(_finite(data), indent=indent, ensure_ascii=False, allow_nan=False)


def dump_minified(data: Any) -> str:
    return json.dumps(_finite(data), separators=(",", ":"), ensure_ascii=False, allow_nan=False)

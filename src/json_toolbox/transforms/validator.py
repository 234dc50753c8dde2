"""JSON validation with line/column reporting."""

from __future__ import annotations

import logging
import re

from json_toolbox.constants import EMPTY_CONTENT_MESSAGE
from json_toolbox.io.json_io import parse_document
from json_toolbox.schemas.validation import ValidationResult


logger = logging.getLogger(__name__)

_LINE_PATTERN = re.compile(r"line (\d+)", re.IGNORECASE)
_COLUMN_PATTERN = re.compile(r"column (\d+)", re.IGNORECASE)


def extract_position(message: str) -> tuple[int | None, int | None]:
    """Pull 1-based ``line N`` / ``column N`` numbers out of a parser message."""
    line_match = _LINE_PATTERN.search(message)
    column_match = _COLUMN_PATTERN.search(message)
    line = int(line_match.group(1)) if line_match else None
    column = int(column_match.group(1)) if column_match else None
    # Both are 1-based; a zero would not be a real position.
    return (line or None), (column or None)


def validate_json(text: str) -> ValidationResult:
    """Check ``text`` for strict JSON. Never raises."""
    if not text.strip():
        return ValidationResult(valid=False, error=EMPTY_CONTENT_MESSAGE)
    try:
        parse_document(text)
    except (ValueError, RecursionError) as exc:
        message = str(exc) or exc.__class__.__name__
        line, column = extract_position(message)
        logger.debug(f"Validation failed: {message}")
        return ValidationResult(valid=False, error=message, line=line, column=column)
    return ValidationResult(valid=True)

from __future__ import annotations

import pytest
from pydantic import ValidationError

from json_toolbox.schemas.validation import ValidationResult
from json_toolbox.transforms.validator import extract_position, validate_json


def test_validate_json_accepts_valid_document() -> None:
    result = validate_json('{"a": [1, 2, {"b": null}]}')

    assert result.valid is True
    assert result.to_dict() == {"valid": True}


@pytest.mark.parametrize("text", ["", "   ", "\n\t  \n"])
def test_validate_json_reports_empty_content(text: str) -> None:
    result = validate_json(text)

    assert result.to_dict() == {"valid": False, "error": "content is empty"}


def test_validate_json_reports_trailing_comma_with_position() -> None:
    result = validate_json('{"a":1,}')

    assert result.valid is False
    assert result.error
    assert result.line == 1
    assert result.column is not None and result.column >= 1


def test_validate_json_reports_line_and_column_on_later_line() -> None:
    result = validate_json('{\n  "a": 1\n  "b": 2\n}')

    assert result.valid is False
    assert "delimiter" in (result.error or "")
    assert result.line == 3
    assert result.column == 3


def test_validate_json_rejects_non_standard_constants_without_position() -> None:
    result = validate_json('{"a": NaN}')

    assert result.valid is False
    assert "NaN" in (result.error or "")
    assert result.line is None
    assert result.column is None


def test_validate_json_reports_excessive_nesting_instead_of_raising() -> None:
    depth = 100_000
    result = validate_json("[" * depth + "]" * depth)

    assert result.valid is False
    assert result.error


def test_extract_position_is_case_insensitive() -> None:
    assert extract_position("Unexpected token at LINE 4 Column 12") == (4, 12)


def test_extract_position_without_position() -> None:
    assert extract_position("Invalid constant 'NaN' in JSON input.") == (None, None)


def test_validation_result_rejects_position_on_valid_result() -> None:
    with pytest.raises(ValidationError, match="only reported for invalid content"):
        ValidationResult(valid=True, line=1, column=1)


def test_validation_result_requires_error_when_invalid() -> None:
    with pytest.raises(ValidationError, match="must carry an error message"):
        ValidationResult(valid=False)


def test_validation_result_rejects_non_positive_line() -> None:
    with pytest.raises(ValidationError):
        ValidationResult(valid=False, error="bad", line=0)


def test_validate_json_accepts_integer_past_digit_limit() -> None:
    assert validate_json("1" * 5000).to_dict() == {"valid": True}
    assert validate_json('{"n": -' + "9" * 5000 + "}").valid is True


def test_validate_json_accepts_out_of_range_float() -> None:
    assert validate_json("[1e400]").valid is True

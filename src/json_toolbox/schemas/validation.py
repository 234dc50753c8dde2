"""Validation result schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class ValidationResult(BaseModel):
    valid: bool
    error: str | None = None
    line: int | None = Field(default=None, ge=1)
    column: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def validate_position(self) -> "ValidationResult":
        if self.valid and (self.line is not None or self.column is not None):
            raise ValueError("line and column are only reported for invalid content")
        if not self.valid and not (self.error or "").strip():
            raise ValueError("invalid results must carry an error message")
        return self

    def to_dict(self) -> dict[str, Any]:
        """Host-facing shape: absent fields are omitted rather than null."""
        return self.model_dump(exclude_none=True)

"""Runtime configuration loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import jsbeautifier
import yaml
from pydantic import BaseModel, Field

from json_toolbox.constants import DEFAULT_INDENT


class FormatterOptions(BaseModel):
    indent_size: int = Field(default=2, ge=0)
    indent_char: str = Field(default=" ", min_length=1, max_length=1)
    max_preserve_newlines: int = Field(default=2, ge=0)
    preserve_newlines: bool = True
    keep_array_indentation: bool = False
    break_chained_methods: bool = False
    brace_style: Literal["collapse", "expand", "end-expand", "none"] = "collapse"
    space_before_conditional: bool = True
    unescape_strings: bool = False
    jslint_happy: bool = False
    end_with_newline: bool = False
    wrap_line_length: int = Field(default=0, ge=0)
    comma_first: bool = False
    e4x: bool = False
    indent_empty_lines: bool = False

    def as_beautifier_options(self) -> Any:
        options = jsbeautifier.default_options()
        for key, value in self.model_dump().items():
            setattr(options, key, value)
        return options


class TransformConfig(BaseModel):
    formatter: FormatterOptions = Field(default_factory=FormatterOptions)
    indent: int = Field(default=DEFAULT_INDENT, ge=0, le=16)
    yaml_allow_unicode: bool = True


def load_config(config_path: Path) -> TransformConfig:
    """Load and validate YAML config."""
    raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    return TransformConfig.model_validate(raw)

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


SAMPLE_DOCUMENTS: list[Any] = [
    {"b": 1, "a": {"d": [3, 1, 2], "c": None}},
    {"name": "你好", "tags": ["x", "y"], "nested": {"z": True, "y": False, "x": 1.5}},
    [{"b": 2, "a": 1}, [{"d": 4, "c": 3}], "text", 7],
    {"empty_object": {}, "empty_list": [], "quote": 'He said "hi"', "path": "C:\\tmp"},
    "plain string",
    42,
    None,
]


def sample_texts() -> list[str]:
    return [json.dumps(document, indent=2, ensure_ascii=False) for document in SAMPLE_DOCUMENTS]


def assert_keys_sorted(item: Any) -> None:
    if isinstance(item, dict):
        keys = list(item)
        assert keys == sorted(keys)
        for value in item.values():
            assert_keys_sorted(value)
    elif isinstance(item, list):
        for value in item:
            assert_keys_sorted(value)


def write_config(
    path: Path,
    formatter_overrides: dict[str, Any] | None = None,
    indent: int = 2,
    yaml_allow_unicode: bool = True,
) -> Path:
    payload = {
        "formatter": formatter_overrides or {},
        "indent": indent,
        "yaml_allow_unicode": yaml_allow_unicode,
    }
    out = path / "config.yaml"
    out.write_text(json.dumps(payload), encoding="utf-8")
    return out

"""JSON to YAML and JSON to XML conversion."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape

import xmltodict
import yaml

from json_toolbox.constants import DEFAULT_INDENT
from json_toolbox.io.json_io import parse_document


def json_to_yaml(text: str, allow_unicode: bool = True) -> str:
    """Dump strict JSON text as block-style YAML, keeping key order."""
    data = parse_document(text)
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=allow_unicode,
    )


def _scalar_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _prepare(value: Any) -> Any:
    # Booleans keep their JSON spelling at any depth.
    if isinstance(value, dict):
        return {key: _prepare(item) for key, item in value.items()}
    if isinstance(value, list):
        # Nested arrays flatten into the same run of sibling elements.
        items: list[Any] = []
        for item in value:
            prepared = _prepare(item)
            if isinstance(prepared, list):
                items.extend(prepared)
            else:
                items.append(prepared)
        return items
    if isinstance(value, bool):
        return _scalar_text(value)
    return value


def _mapping_to_xml(data: dict[str, Any], indent: int) -> str:
    # One unparse call per root element so sibling roots land on separate lines.
    parts: list[str] = []
    for key, value in data.items():
        for item in value if isinstance(value, list) else [value]:
            parts.append(
                xmltodict.unparse(
                    {key: item},
                    full_document=False,
                    pretty=True,
                    indent=" " * indent,
                )
            )
    return "\n".join(parts)


def _node_to_xml(data: Any, indent: int) -> str:
    if isinstance(data, dict):
        return _mapping_to_xml(data, indent)
    if isinstance(data, list):
        return "\n".join(_node_to_xml(item, indent) for item in data)
    return escape(_scalar_text(data))


def json_to_xml(text: str, indent: int = DEFAULT_INDENT) -> str:
    """
    Convert strict JSON text to XML using the compact key-as-tag convention.

    Object keys become element names, scalars become text and arrays become
    repeated sibling elements named after their key. ``@name`` keys map to
    attributes and ``#text`` to element text. A root array is converted item
    by item; a root scalar becomes its escaped text.

    Raises:
        ValueError: If ``text`` is not strict JSON.
    """
    return _node_to_xml(_prepare(parse_document(text)), indent)

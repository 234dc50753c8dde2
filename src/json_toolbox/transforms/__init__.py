"""
Text transforms over JSON content.

- formatter: lenient pretty-printing, fail-soft
- structure: minification and deep key sorting
- validator: strict validation with line/column reporting
- converters: JSON to YAML and XML
- escaping: quote/backslash escaping and \\uXXXX conversion
"""

from .converters import json_to_xml, json_to_yaml
from .escaping import chinese_to_unicode, escape_json, unescape_json, unicode_to_chinese
from .formatter import UnbalancedBracketsError, format_json
from .structure import minify_json, sort_document, sort_json_keys
from .validator import extract_position, validate_json

__all__ = [
    "format_json",
    "minify_json",
    "validate_json",
    "extract_position",
    "sort_json_keys",
    "sort_document",
    "json_to_yaml",
    "json_to_xml",
    "escape_json",
    "unescape_json",
    "unicode_to_chinese",
    "chinese_to_unicode",
    "UnbalancedBracketsError",
]

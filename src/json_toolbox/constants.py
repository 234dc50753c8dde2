"""Project constants."""

from __future__ import annotations

from enum import StrEnum


class OperationName(StrEnum):
    FORMAT_JSON = "formatJson"
    MINIFY_JSON = "minifyJson"
    VALIDATE_JSON = "validateJson"
    SORT_JSON_KEYS = "sortJsonKeys"
    JSON_TO_YAML = "jsonToYaml"
    JSON_TO_XML = "jsonToXml"
    ESCAPE_JSON = "escapeJson"
    UNESCAPE_JSON = "unescapeJson"
    UNICODE_TO_CHINESE = "unicodeToChinese"
    CHINESE_TO_UNICODE = "chineseToUnicode"


class FailurePolicy(StrEnum):
    FAIL_SOFT = "fail_soft"
    RESULT = "result"
    PROPAGATE = "propagate"
    NEVER_FAILS = "never_fails"


EMPTY_CONTENT_MESSAGE = "content is empty"

DEFAULT_INDENT = 2

# Highest code point copied through unchanged by chinese_to_unicode.
ASCII_MAX = 127

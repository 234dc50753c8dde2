"""Operation registry keyed by host-facing name."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from json_toolbox.config import TransformConfig
from json_toolbox.constants import FailurePolicy, OperationName
from json_toolbox.schemas.validation import ValidationResult
from json_toolbox.transforms import (
    chinese_to_unicode,
    escape_json,
    format_json,
    json_to_xml,
    json_to_yaml,
    minify_json,
    sort_json_keys,
    unescape_json,
    unicode_to_chinese,
    validate_json,
)


logger = logging.getLogger(__name__)


class UnknownOperationError(KeyError):
    """Raised when no operation is registered under the requested name."""

    pass


def _no_options(config: TransformConfig) -> dict[str, Any]:
    return {}


@dataclass(frozen=True)
class Operation:
    function: Callable[..., str | ValidationResult]
    failure_policy: FailurePolicy
    options: Callable[[TransformConfig], dict[str, Any]] = _no_options


OPERATIONS: dict[OperationName, Operation] = {
    OperationName.FORMAT_JSON: Operation(
        format_json,
        FailurePolicy.FAIL_SOFT,
        lambda config: {"options": config.formatter},
    ),
    OperationName.MINIFY_JSON: Operation(minify_json, FailurePolicy.PROPAGATE),
    OperationName.VALIDATE_JSON: Operation(validate_json, FailurePolicy.RESULT),
    OperationName.SORT_JSON_KEYS: Operation(
        sort_json_keys,
        FailurePolicy.PROPAGATE,
        lambda config: {"indent": config.indent},
    ),
    OperationName.JSON_TO_YAML: Operation(
        json_to_yaml,
        FailurePolicy.PROPAGATE,
        lambda config: {"allow_unicode": config.yaml_allow_unicode},
    ),
    OperationName.JSON_TO_XML: Operation(
        json_to_xml,
        FailurePolicy.PROPAGATE,
        lambda config: {"indent": config.indent},
    ),
    OperationName.ESCAPE_JSON: Operation(escape_json, FailurePolicy.NEVER_FAILS),
    OperationName.UNESCAPE_JSON: Operation(unescape_json, FailurePolicy.NEVER_FAILS),
    OperationName.UNICODE_TO_CHINESE: Operation(unicode_to_chinese, FailurePolicy.NEVER_FAILS),
    OperationName.CHINESE_TO_UNICODE: Operation(chinese_to_unicode, FailurePolicy.NEVER_FAILS),
}


def list_operations() -> list[str]:
    return [name.value for name in OPERATIONS]


def get_operation(name: str) -> Operation:
    try:
        return OPERATIONS[OperationName(name)]
    except ValueError:
        raise UnknownOperationError(f"Unknown operation: {name}") from None


def run_operation(name: str, text: str, config: TransformConfig | None = None) -> str | ValidationResult:
    """Run the named operation on ``text``.

    Settings from ``config`` are passed to the operations that take them.
    Errors from ``propagate`` operations are not caught here.
    """
    operation = get_operation(name)
    kwargs = operation.options(config or TransformConfig())
    logger.debug(f"Running {name} on {len(text)} characters")
    return operation.function(text, **kwargs)

"""
Parameter Serialization

Turns structured request parameters into the flat string pairs the
action API expects.

Rules, applied per key in iteration order:
- ``None`` and ``False`` drop the key entirely.
- ``True`` becomes the empty string.
- datetimes are sent as ISO-8601 UTC with millisecond precision.
- sequences are joined with ``|``; when any element contains ``|`` the
  values are joined with U+001F and prefixed with U+001F instead.
- ``format``, ``formatversion`` and ``errorformat`` are forced last.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, Union

from huiji.schemas.actions import SUPPORTED_ACTIONS
from huiji.schemas.errors import ErrorCodes, ParameterValidationException
from huiji.schemas.params import RequestParams

PIPE = "|"
UNIT_SEPARATOR = "\x1f"

FIXED_PARAMS: dict[str, str] = {
    "format": "json",
    "formatversion": "2",
    "errorformat": "plaintext",
}

ParamsLike = Union[Mapping[str, Any], RequestParams]


def format_timestamp(value: datetime | date) -> str:
    """
    Format a date or datetime as ISO-8601 in UTC with a Z suffix.

    Naive datetimes are treated as UTC; a plain date is midnight UTC.
    Example: ``2024-01-02T03:04:05.000Z``.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def convert_value(value: Any) -> str:
    """Convert one scalar to its wire string."""
    if isinstance(value, Enum):
        value = value.value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ""
    if isinstance(value, (datetime, date)):
        return format_timestamp(value)
    return str(value)


def join_values(values: Any) -> str:
    """
    Join one or many converted values with the multi-value delimiter.

    Any element containing ``|`` switches the whole value to the
    U+001F form, which the server decodes without splitting on pipes.
    """
    if isinstance(values, (list, tuple)):
        strings = [str(v) for v in values]
        if any(PIPE in s for s in strings):
            return UNIT_SEPARATOR + UNIT_SEPARATOR.join(strings)
        return PIPE.join(strings)
    value = str(values)
    if PIPE in value:
        return UNIT_SEPARATOR + value
    return value


def _is_multi(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset))


def to_mapping(params: ParamsLike) -> dict[str, Any]:
    """Normalize a parameter record or mapping to a plain dict."""
    if isinstance(params, RequestParams):
        return params.to_params()
    if isinstance(params, Mapping):
        return dict(params)
    raise ParameterValidationException(
        f"Parameters must be a mapping or RequestParams, got {type(params).__name__}"
    )


def validate_action(params: Mapping[str, Any]) -> None:
    """
    Reject parameters whose ``action`` is missing or unknown.

    Raises:
        ParameterValidationException: before any request is made.
    """
    action = params.get("action")
    if action is None:
        raise ParameterValidationException("Missing required parameter 'action'", key="action")
    if isinstance(action, Enum):
        action = action.value
    if not isinstance(action, str) or action not in SUPPORTED_ACTIONS:
        raise ParameterValidationException(
            f"Unsupported action: {action!r}",
            key="action",
            code=ErrorCodes.UNSUPPORTED_ACTION,
            details={"action": str(action)},
        )


def create_search_params(params: ParamsLike) -> dict[str, str]:
    """
    Serialize request parameters to ordered string pairs.

    Args:
        params: Mapping or RequestParams record. Must name a supported action.

    Returns:
        Ordered dict suitable for a query string or a form body.

    Raises:
        ParameterValidationException: If ``action`` is missing or unknown.
    """
    mapping = to_mapping(params)
    validate_action(mapping)

    search: dict[str, str] = {}
    for key, value in mapping.items():
        if value is None or value is False:
            continue
        if _is_multi(value):
            if isinstance(value, (set, frozenset)):
                value = sorted(value, key=str)
            # Elements follow the scalar rules; booleans become "", None is dropped.
            converted = [convert_value(v) for v in value if v is not None]
            search[key] = join_values(converted)
        else:
            search[key] = join_values(convert_value(value))

    search.update(FIXED_PARAMS)
    return search

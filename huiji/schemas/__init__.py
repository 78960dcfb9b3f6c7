"""
Schemas
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

# Supported actions
from .actions import (
    SUPPORTED_ACTIONS,
    Action,
    is_supported_action,
)

# Error models and exceptions
from .errors import (
    ErrorCodes,
    MediaWikiApiException,
    MediaWikiMessage,
    MWClientError,
    MWClientException,
    ParameterValidationException,
)

# Request parameter records
from .params import (
    EditParams,
    ParamValue,
    ParseParams,
    Primitive,
    QueryParams,
    RequestParams,
)

# Response envelopes
from .responses import (
    QueryResponseBody,
    ResponseBody,
)

__all__ = [
    # Actions
    "SUPPORTED_ACTIONS",
    "Action",
    "is_supported_action",
    # Errors
    "ErrorCodes",
    "MediaWikiApiException",
    "MediaWikiMessage",
    "MWClientError",
    "MWClientException",
    "ParameterValidationException",
    # Params
    "EditParams",
    "ParamValue",
    "ParseParams",
    "Primitive",
    "QueryParams",
    "RequestParams",
    # Responses
    "QueryResponseBody",
    "ResponseBody",
]

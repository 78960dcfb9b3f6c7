"""
huiji - a thin client for the MediaWiki action API.

Serializes request parameters the way api.php expects, keeps cookies
across requests and turns the response envelope into log lines and
exceptions.
"""

__version__ = "0.1.0"

from huiji.http import HttpClient, SyncHttpClient
from huiji.schemas import (
    Action,
    MediaWikiApiException,
    MediaWikiMessage,
    MWClientException,
    ParameterValidationException,
)

__all__ = [
    "__version__",
    "Action",
    "HttpClient",
    "MediaWikiApiException",
    "MediaWikiMessage",
    "MWClientException",
    "ParameterValidationException",
    "SyncHttpClient",
]

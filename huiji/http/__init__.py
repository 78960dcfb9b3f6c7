"""
HTTP Client Module

MediaWiki action API clients with parameter serialization and
response envelope checks.
"""

from .client import HttpClient, SyncHttpClient
from .envelope import check_envelope, check_errors, check_warnings
from .params import create_search_params
from .user_agent import build_user_agent

__all__ = [
    "HttpClient",
    "SyncHttpClient",
    "build_user_agent",
    "check_envelope",
    "check_errors",
    "check_warnings",
    "create_search_params",
]

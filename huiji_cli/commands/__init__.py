"""CLI command implementations."""

from . import request

__all__ = ["request"]

"""
Runtime Configuration Module

Provides configuration loading and management for the client.
"""

from .runtime import ClientConfig, get_default_config, set_default_config

__all__ = [
    "ClientConfig",
    "get_default_config",
    "set_default_config",
]

"""
Pytest configuration and shared fixtures.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_envelopes = importlib.import_module("fixtures.envelopes")

ENDPOINT = _envelopes.ENDPOINT
make_message = _envelopes.make_message
make_envelope = _envelopes.make_envelope
RecordingTransport = _envelopes.RecordingTransport


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def endpoint() -> str:
    return ENDPOINT


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep HUIJI_* variables from the developer's shell out of the tests."""
    for name in (
        "HUIJI_API_ENDPOINT",
        "HUIJI_USER_AGENT",
        "HUIJI_TIMEOUT",
        "HUIJI_HTTP_PROXY",
        "HUIJI_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_default_config():
    """Each test starts without a cached process-wide default config."""
    from huiji.config import set_default_config

    set_default_config(None)
    yield
    set_default_config(None)

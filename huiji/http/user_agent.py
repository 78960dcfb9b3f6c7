"""
User-Agent Discovery

Builds ``HuijiMWClient/<version> <library>/<version>`` from installed
package metadata. Missing metadata degrades to ``HuijiMWClient/Unknown``.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

logger = logging.getLogger(__name__)

PRODUCT = "HuijiMWClient"
DISTRIBUTION = "huiji-mwclient"
FALLBACK_USER_AGENT = f"{PRODUCT}/Unknown"


@lru_cache(maxsize=None)
def build_user_agent(library: str = "httpx") -> str:
    """
    Return the User-Agent for a client built on ``library``.

    Args:
        library: Distribution name of the HTTP library (``httpx`` or ``requests``).
    """
    try:
        own_version = version(DISTRIBUTION)
        library_version = version(library)
    except PackageNotFoundError:
        logger.debug("Package metadata not found; using %s", FALLBACK_USER_AGENT)
        return FALLBACK_USER_AGENT
    return f"{PRODUCT}/{own_version} {library}/{library_version}"

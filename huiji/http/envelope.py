"""
Response Envelope Checks

The action API reports problems inside a 200 response. ``warnings`` are
logged and otherwise ignored; ``errors`` abort the call.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from huiji.schemas.errors import MediaWikiApiException, MediaWikiMessage

logger = logging.getLogger(__name__)


def _as_messages(entries: Any) -> list[MediaWikiMessage]:
    """Normalize a single entry or a sequence of entries to models."""
    if isinstance(entries, dict):
        entries = [entries]
    return [
        entry if isinstance(entry, MediaWikiMessage) else MediaWikiMessage.model_validate(entry)
        for entry in entries
    ]


def check_warnings(warnings: Optional[Any]) -> None:
    """Log every warning as ``[<module>] <code>: <text>`` in server order."""
    if warnings is None:
        return
    for warning in _as_messages(warnings):
        logger.warning(warning.format())


def check_errors(errors: Optional[Any], docref: Optional[str] = None) -> None:
    """
    Raise if the envelope carries errors.

    Raises:
        MediaWikiApiException: one line per entry, in server order.
    """
    if errors is None:
        return
    raise MediaWikiApiException(_as_messages(errors), docref=docref)


def check_envelope(body: Any) -> None:
    """Run the warning check, then the error check, on a parsed body."""
    if not isinstance(body, dict):
        return
    check_warnings(body.get("warnings"))
    check_errors(body.get("errors"), docref=body.get("docref"))

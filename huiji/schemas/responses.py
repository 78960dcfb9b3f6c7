"""
Schemas
File: responses.py

Purpose: Response envelope models. Action payloads stay open
(``extra="allow"``); only the envelope keys are typed.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import MediaWikiMessage


class ResponseBody(BaseModel):
    """Envelope shared by every action response."""

    model_config = ConfigDict(extra="allow")

    warnings: Optional[list[MediaWikiMessage]] = None
    errors: Optional[list[MediaWikiMessage]] = None
    docref: Optional[str] = None


class QueryResponseBody(ResponseBody):
    """Envelope of ``action=query``."""

    batchcomplete: Union[bool, str] = Field(default=False)
    query: Optional[dict[str, Any]] = None
    continue_: Optional[dict[str, Any]] = Field(default=None, alias="continue")

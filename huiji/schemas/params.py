"""
Schemas
File: params.py

Purpose: Typed request-parameter records for the action API.

Each record documents the keys it knows about. Keys it does not declare
are passed through explicitly (``extra="allow"``) so that module
prefixed parameters (``rvprop``, ``aplimit``, ...) remain usable.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from .actions import Action

Primitive = Union[str, int, float, bool, datetime, date, Enum, None]
ParamValue = Union[Primitive, Sequence[Primitive]]


class RequestParams(BaseModel):
    """Base record: every request names an action."""

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        use_enum_values=True,
    )

    action: Action

    def to_params(self) -> dict[str, Any]:
        """Dump to a plain mapping, declared keys first, unset keys dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)


class QueryParams(RequestParams):
    """Parameters for ``action=query``."""

    action: Action = Action.QUERY

    prop: Optional[Union[str, Sequence[str]]] = Field(default=None, description="Properties to get for the pages")
    list: Optional[Union[str, Sequence[str]]] = Field(default=None, description="Lists to get")
    meta: Optional[Union[str, Sequence[str]]] = Field(default=None, description="Metadata to get")
    titles: Optional[Union[str, Sequence[str]]] = Field(default=None, description="Page titles to work on")
    pageids: Optional[Union[int, Sequence[int]]] = Field(default=None, description="Page IDs to work on")
    revids: Optional[Union[int, Sequence[int]]] = Field(default=None, description="Revision IDs to work on")
    generator: Optional[str] = Field(default=None, description="Generator module")
    redirects: Optional[bool] = Field(default=None, description="Resolve redirects")
    converttitles: Optional[bool] = Field(default=None, description="Convert titles to other variants")
    indexpageids: Optional[bool] = Field(default=None, description="Include a pageids section")
    continue_: Optional[str] = Field(default=None, alias="continue", description="Continuation token")


class ParseParams(RequestParams):
    """Parameters for ``action=parse``."""

    action: Action = Action.PARSE

    title: Optional[str] = None
    text: Optional[str] = None
    page: Optional[str] = None
    pageid: Optional[int] = None
    oldid: Optional[int] = None
    prop: Optional[Union[str, Sequence[str]]] = None
    redirects: Optional[bool] = None
    contentmodel: Optional[str] = None
    disablelimitreport: Optional[bool] = None
    disableeditsection: Optional[bool] = None


class EditParams(RequestParams):
    """Parameters for ``action=edit``. ``token`` is required by the server."""

    action: Action = Action.EDIT

    title: Optional[str] = None
    pageid: Optional[int] = None
    section: Optional[str] = None
    sectiontitle: Optional[str] = None
    text: Optional[str] = None
    appendtext: Optional[str] = None
    prependtext: Optional[str] = None
    summary: Optional[str] = None
    tags: Optional[Union[str, Sequence[str]]] = None
    minor: Optional[bool] = None
    notminor: Optional[bool] = None
    bot: Optional[bool] = None
    basetimestamp: Optional[datetime] = None
    starttimestamp: Optional[datetime] = None
    recreate: Optional[bool] = None
    createonly: Optional[bool] = None
    nocreate: Optional[bool] = None
    watchlist: Optional[Literal["nochange", "preferences", "unwatch", "watch"]] = None
    md5: Optional[str] = None
    baserevid: Optional[int] = None
    token: Optional[str] = None

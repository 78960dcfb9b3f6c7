"""
HTTP Client

MediaWiki action API clients bound to a single ``api.php`` endpoint.

``HttpClient`` is the asynchronous client (httpx); ``SyncHttpClient``
offers the same surface over a blocking requests session. Both keep a
cookie store for the lifetime of the instance and send a fixed
User-Agent on every request.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Type

import httpx
import requests
from pydantic import BaseModel

from huiji.config.runtime import ClientConfig, get_default_config
from huiji.schemas.actions import Action

from .envelope import check_envelope
from .params import ParamsLike, create_search_params, to_mapping
from .user_agent import build_user_agent

logger = logging.getLogger(__name__)


class _BaseClient:
    """Construction and response handling shared by both clients."""

    _library: str = "httpx"

    def __init__(
        self,
        endpoint: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            endpoint: URL of api.php; falls back to ``config.endpoint``
            config: Client configuration supplying defaults; the process default when omitted
            user_agent: User-Agent override; otherwise discovered from metadata
            timeout: Request timeout in seconds; None waits indefinitely
        """
        config = config or get_default_config()
        resolved = endpoint or config.endpoint
        if not resolved:
            raise ValueError("An API endpoint URL is required")
        self._endpoint = str(resolved)
        self.config = config
        self.user_agent = user_agent or config.user_agent or build_user_agent(self._library)
        self.timeout = timeout if timeout is not None else config.timeout
        self.proxy = config.proxy

    @property
    def endpoint(self) -> str:
        """The API endpoint. Fixed for the lifetime of the client."""
        return self._endpoint

    @staticmethod
    def _query_params(params: ParamsLike) -> dict[str, Any]:
        mapping = to_mapping(params)
        mapping["action"] = Action.QUERY.value
        return mapping

    @staticmethod
    def _finish(body: Any, response_model: Optional[Type[BaseModel]]) -> Any:
        check_envelope(body)
        if response_model is not None:
            return response_model.model_validate(body)
        return body

    @staticmethod
    def _unwrap_query(body: dict[str, Any], response_model: Optional[Type[BaseModel]]) -> Any:
        payload = body.get("query")
        if response_model is not None and payload is not None:
            return response_model.model_validate(payload)
        return payload


class HttpClient(_BaseClient):
    """
    Asynchronous MediaWiki API client.

    A single instance may serve many concurrently awaited calls; there
    is no ordering guarantee between them.

    Usage:
        async with HttpClient("https://example.org/w/api.php") as client:
            pages = await client.query({"action": "query", "list": "allpages"})
    """

    _library = "httpx"

    def __init__(
        self,
        endpoint: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(endpoint, config=config, user_agent=user_agent, timeout=timeout)
        self._client = httpx.AsyncClient(
            cookies=httpx.Cookies(),
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
            proxy=self.proxy,
            transport=transport,
        )

    @property
    def cookies(self) -> httpx.Cookies:
        """Cookie store shared by every request of this client."""
        return self._client.cookies

    async def request(
        self,
        method: str,
        params: ParamsLike,
        *,
        response_model: Optional[Type[BaseModel]] = None,
    ) -> Any:
        """
        Send one API request and check its envelope.

        Args:
            method: "GET" (query string) or "POST" (form body)
            params: Request parameters
            response_model: Optional pydantic model to validate the body into

        Returns:
            Parsed JSON body, or the validated model

        Raises:
            ParameterValidationException: Invalid parameters, nothing sent
            MediaWikiApiException: The envelope carried ``errors``
            httpx.HTTPError: Transport failure or non-2xx status
        """
        search = create_search_params(params)
        logger.debug("%s %s action=%s", method, self.endpoint, search.get("action"))

        if method == "GET":
            response = await self._client.get(self.endpoint, params=search)
        elif method == "POST":
            response = await self._client.post(self.endpoint, data=search)
        else:
            raise ValueError(f"Unsupported HTTP method: {method}")

        response.raise_for_status()
        return self._finish(response.json(), response_model)

    async def get(
        self,
        params: ParamsLike,
        *,
        response_model: Optional[Type[BaseModel]] = None,
    ) -> Any:
        """Make a GET request."""
        return await self.request("GET", params, response_model=response_model)

    async def post(
        self,
        params: ParamsLike,
        *,
        response_model: Optional[Type[BaseModel]] = None,
    ) -> Any:
        """Make a POST request with a form-encoded body."""
        return await self.request("POST", params, response_model=response_model)

    async def query(
        self,
        params: ParamsLike,
        *,
        response_model: Optional[Type[BaseModel]] = None,
    ) -> Any:
        """GET with ``action=query`` forced; returns only the ``query`` payload."""
        body = await self.get(self._query_params(params))
        return self._unwrap_query(body, response_model)

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()


class SyncHttpClient(_BaseClient):
    """
    Blocking MediaWiki API client over a requests session.

    Usage:
        with SyncHttpClient("https://example.org/w/api.php") as client:
            body = client.get({"action": "parse", "page": "Main Page"})
    """

    _library = "requests"

    def __init__(
        self,
        endpoint: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(endpoint, config=config, user_agent=user_agent, timeout=timeout)
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": self.user_agent})
        if self.proxy:
            self._session.proxies = {
                "http": self.proxy,
                "https": self.proxy,
            }

    @property
    def cookies(self) -> requests.cookies.RequestsCookieJar:
        """Cookie store shared by every request of this client."""
        return self._session.cookies

    def request(
        self,
        method: str,
        params: ParamsLike,
        *,
        response_model: Optional[Type[BaseModel]] = None,
    ) -> Any:
        """
        Send one API request and check its envelope.

        Raises:
            ParameterValidationException: Invalid parameters, nothing sent
            MediaWikiApiException: The envelope carried ``errors``
            requests.RequestException: Transport failure or non-2xx status
        """
        search = create_search_params(params)
        logger.debug("%s %s action=%s", method, self.endpoint, search.get("action"))

        if method == "GET":
            response = self._session.request("GET", self.endpoint, params=search, timeout=self.timeout)
        elif method == "POST":
            response = self._session.request("POST", self.endpoint, data=search, timeout=self.timeout)
        else:
            raise ValueError(f"Unsupported HTTP method: {method}")

        response.raise_for_status()
        return self._finish(response.json(), response_model)

    def get(
        self,
        params: ParamsLike,
        *,
        response_model: Optional[Type[BaseModel]] = None,
    ) -> Any:
        """Make a GET request."""
        return self.request("GET", params, response_model=response_model)

    def post(
        self,
        params: ParamsLike,
        *,
        response_model: Optional[Type[BaseModel]] = None,
    ) -> Any:
        """Make a POST request with a form-encoded body."""
        return self.request("POST", params, response_model=response_model)

    def query(
        self,
        params: ParamsLike,
        *,
        response_model: Optional[Type[BaseModel]] = None,
    ) -> Any:
        """GET with ``action=query`` forced; returns only the ``query`` payload."""
        body = self.get(self._query_params(params))
        return self._unwrap_query(body, response_model)

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()

    def __enter__(self) -> "SyncHttpClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

"""
Unit tests for the requests-based SyncHttpClient.
"""

import http.client
import io
import json
from types import SimpleNamespace
from unittest.mock import MagicMock
from urllib.parse import parse_qsl

import pytest
import requests
import urllib3
from requests.adapters import HTTPAdapter

from fixtures.envelopes import ENDPOINT, make_envelope, make_message
from huiji.config import ClientConfig
from huiji.http import SyncHttpClient
from huiji.schemas import MediaWikiApiException, QueryResponseBody


def make_response(body, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"HTTP {status_code}")
    return response


@pytest.fixture
def session():
    session = requests.Session()
    session.request = MagicMock()
    return session


class TestSyncClient:
    def test_get_sends_query_string(self, session):
        session.request.return_value = make_response({"parse": {"title": "Foo"}})
        client = SyncHttpClient(ENDPOINT, session=session, user_agent="TestAgent/1.0")

        result = client.get({"action": "parse", "page": "Foo", "prop": ["text", "links"]})

        assert result == {"parse": {"title": "Foo"}}
        args, kwargs = session.request.call_args
        assert args == ("GET", ENDPOINT)
        assert kwargs["params"] == {
            "action": "parse",
            "page": "Foo",
            "prop": "text|links",
            "format": "json",
            "formatversion": "2",
            "errorformat": "plaintext",
        }
        assert "data" not in kwargs

    def test_post_sends_form_body(self, session):
        session.request.return_value = make_response({"purge": []})
        client = SyncHttpClient(ENDPOINT, session=session, user_agent="TestAgent/1.0")

        client.post({"action": "purge", "titles": ["A", "B"], "forcelinkupdate": True})

        args, kwargs = session.request.call_args
        assert args == ("POST", ENDPOINT)
        assert kwargs["data"]["titles"] == "A|B"
        assert kwargs["data"]["forcelinkupdate"] == ""
        assert "params" not in kwargs

    def test_query_unwraps(self, session):
        session.request.return_value = make_response({"batchcomplete": True, "query": {"pages": [{"title": "A"}]}})
        client = SyncHttpClient(ENDPOINT, session=session, user_agent="TestAgent/1.0")

        result = client.query({"action": "ignoredOnPurpose", "list": "foo"})

        assert result == {"pages": [{"title": "A"}]}
        _, kwargs = session.request.call_args
        assert list(kwargs["params"].items()) == [
            ("action", "query"),
            ("list", "foo"),
            ("format", "json"),
            ("formatversion", "2"),
            ("errorformat", "plaintext"),
        ]

    def test_errors_raise(self, session):
        session.request.return_value = make_response(
            make_envelope(errors=[make_message("a", "b", "c"), make_message("d", "e", "f")])
        )
        client = SyncHttpClient(ENDPOINT, session=session, user_agent="TestAgent/1.0")

        with pytest.raises(MediaWikiApiException) as exc_info:
            client.get({"action": "query"})

        assert str(exc_info.value) == "[c] a: b\n[f] d: e"

    def test_response_model(self, session):
        session.request.return_value = make_response({"batchcomplete": True, "query": {"pages": []}})
        client = SyncHttpClient(ENDPOINT, session=session, user_agent="TestAgent/1.0")

        result = client.get({"action": "query"}, response_model=QueryResponseBody)

        assert isinstance(result, QueryResponseBody)
        assert result.batchcomplete is True
        assert result.query == {"pages": []}

    def test_http_error_propagates(self, session):
        session.request.return_value = make_response({}, status_code=500)
        client = SyncHttpClient(ENDPOINT, session=session, user_agent="TestAgent/1.0")

        with pytest.raises(requests.HTTPError):
            client.get({"action": "query"})

    def test_session_headers_and_cookies(self, session):
        client = SyncHttpClient(ENDPOINT, session=session, user_agent="TestAgent/1.0")

        assert session.headers["User-Agent"] == "TestAgent/1.0"
        assert client.cookies is session.cookies

    def test_config_timeout_and_proxy(self, session):
        session.request.return_value = make_response({})
        config = ClientConfig(endpoint=ENDPOINT, timeout=12.5, proxy="http://proxy:8080", user_agent="X/1")
        client = SyncHttpClient(config=config, session=session)

        client.get({"action": "query"})

        _, kwargs = session.request.call_args
        assert kwargs["timeout"] == 12.5
        assert session.proxies == {"http": "http://proxy:8080", "https": "http://proxy:8080"}

    def test_context_manager_closes_session(self, session):
        session.close = MagicMock()

        with SyncHttpClient(ENDPOINT, session=session, user_agent="TestAgent/1.0"):
            pass

        session.close.assert_called_once()


class CannedAdapter(HTTPAdapter):
    """
    Transport adapter answering from a callable instead of the network.

    Responses go through ``build_response`` so the session extracts
    ``Set-Cookie`` headers into its jar exactly as it would for a real
    server. The ``Cookie`` header of every request is recorded.
    """

    def __init__(self, responder):
        super().__init__()
        self.responder = responder
        self.sent_cookies = []

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.sent_cookies.append(request.headers.get("Cookie"))
        body, set_cookie = self.responder(request)

        headers = {"Content-Type": "application/json"}
        msg = http.client.HTTPMessage()
        if set_cookie:
            headers["Set-Cookie"] = set_cookie
            msg["Set-Cookie"] = set_cookie

        raw = urllib3.HTTPResponse(
            body=io.BytesIO(json.dumps(body).encode()),
            headers=headers,
            status=200,
            preload_content=False,
            original_response=SimpleNamespace(msg=msg, isclosed=lambda: True, close=lambda: None),
        )
        return self.build_response(request, raw)


class TestSyncCookies:
    def test_cookies_persist_between_requests(self):
        def responder(request):
            fields = dict(parse_qsl(request.body or ""))
            if request.method == "POST" and fields.get("action") == "login":
                return {"login": {"result": "Success"}}, "session=abc123; Path=/"
            return {"query": {"userinfo": {"name": "Bot"}}}, None

        adapter = CannedAdapter(responder)
        session = requests.Session()
        session.mount("https://", adapter)
        client = SyncHttpClient(ENDPOINT, session=session, user_agent="TestAgent/1.0")

        client.post({"action": "login", "lgname": "Bot", "lgpassword": "secret"})
        result = client.query({"meta": "userinfo"})

        assert result == {"userinfo": {"name": "Bot"}}
        assert adapter.sent_cookies[0] is None
        assert "session=abc123" in adapter.sent_cookies[1]
        assert client.cookies.get("session") == "abc123"

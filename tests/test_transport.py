"""Tests for the requests-based transport."""

import asyncio

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from wkdclient.transport import HttpResponse, RequestsFetcher


def _make_response(status, reason, content, headers=None):
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response._content = content
    response.headers = CaseInsensitiveDict(headers or {})
    return response


class TestHttpResponse:
    """Tests for HttpResponse."""

    def test_ok_only_for_200(self):
        assert HttpResponse(200).ok
        assert not HttpResponse(201).ok
        assert not HttpResponse(404).ok

    def test_status_text(self):
        """Server reason wins over the standard phrase."""
        assert HttpResponse(404, "Nope").status_text == "Nope"
        assert HttpResponse(404).status_text == "Not Found"
        assert HttpResponse(599).status_text == "599"

    def test_headers_case_insensitive(self):
        response = HttpResponse(200, headers={"Content-Type": "text/html"})
        assert response.content_type == "text/html"
        assert response.headers["CONTENT-TYPE"] == "text/html"


class TestRequestsFetcher:
    """Tests for RequestsFetcher."""

    def test_get(self, monkeypatch):
        """Convert a requests response and pass timeout and headers through."""
        calls = []

        def fake_get(url, timeout, headers):
            calls.append((url, timeout, headers))
            return _make_response(
                200, "OK", b"\x99key", {"Content-Type": "application/octet-stream"}
            )

        monkeypatch.setattr(requests, "get", fake_get)
        fetcher = RequestsFetcher(timeout=3, headers={"User-Agent": "test"})
        response = asyncio.run(fetcher.get("https://example.org/key"))

        assert calls == [("https://example.org/key", 3, {"User-Agent": "test"})]
        assert response.status == 200
        assert response.body == b"\x99key"
        assert response.content_type == "application/octet-stream"

    def test_error_status_is_returned(self, monkeypatch):
        """Non-200 statuses are returned, not raised."""
        monkeypatch.setattr(
            requests,
            "get",
            lambda url, timeout, headers: _make_response(404, "Not Found", b""),
        )
        response = asyncio.run(RequestsFetcher().get("https://example.org/key"))
        assert response.status == 404
        assert response.status_text == "Not Found"

    def test_transport_error_propagates(self, monkeypatch):
        """requests exceptions reach the caller unchanged."""

        def fail(url, timeout, headers):
            raise requests.ConnectionError("refused")

        monkeypatch.setattr(requests, "get", fail)
        with pytest.raises(requests.ConnectionError, match="refused"):
            asyncio.run(RequestsFetcher().get("https://example.org/key"))

    def test_uses_session(self):
        """A supplied session is used instead of requests.get."""

        class FakeSession:
            def get(self, url, timeout, headers):
                return _make_response(200, "OK", b"from-session")

        fetcher = RequestsFetcher(session=FakeSession())
        response = asyncio.run(fetcher.get("https://example.org/key"))
        assert response.body == b"from-session"

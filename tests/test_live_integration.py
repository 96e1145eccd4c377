"""Live WKD lookups against public servers."""

import asyncio
import os

import pytest

from wkdclient import HtmlContentTypeError, LookupFailedError, WKDResolver

pytestmark = [
    pytest.mark.network,
    pytest.mark.skipif(
        os.getenv("WKD_LIVE_TESTS") != "1",
        reason="Set WKD_LIVE_TESTS=1 to execute live WKD lookups.",
    ),
]


def test_lookup_by_email():
    key = asyncio.run(WKDResolver().lookup("test-wkd@metacode.biz"))
    assert isinstance(key, bytes)
    assert len(key) > 0


def test_lookup_not_found():
    with pytest.raises(LookupFailedError) as exc_info:
        asyncio.run(WKDResolver().lookup("test-wkd-does-not-exist@metacode.biz"))
    assert str(exc_info.value) == "Direct WKD lookup failed: Not Found"


def test_lookup_on_html_website():
    with pytest.raises(HtmlContentTypeError):
        asyncio.run(WKDResolver().lookup("beep@boop.com"))

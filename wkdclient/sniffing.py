"""HTML detection for WKD responses.

Some servers answer a WKD request with status 200 and an HTML login or
error page instead of the binary key. The rules below flag such bodies:

* the ``Content-Type`` header is exactly ``text/html``, or
* the body, decoded as UTF-8 and stripped, contains within its first
  ``HTML_SNIFF_LIMIT`` characters a ``<!doctype html>`` declaration or an
  opening ``<html>``, ``<body>`` or custom element (``<x-...>``) tag,
  matched case-insensitively.

A ``text/html; charset=...`` header is not matched by the header rule and is
left to the body rule. A binary key whose first characters decode to one of
the tags above is rejected as well.
"""

import re
from typing import Optional

# Adapted from the is-html package.
HTML_PATTERN = re.compile(
    r"\s?<!doctype html>|(<html\b[^>]*>|<body\b[^>]*>|<x-[^>]+>)+",
    re.IGNORECASE,
)

HTML_SNIFF_LIMIT = 1000


def is_html_content_type(content_type: Optional[str]) -> bool:
    """Return True if the Content-Type header is exactly text/html."""
    return content_type == "text/html"


def looks_like_html(body: bytes, limit: int = HTML_SNIFF_LIMIT) -> bool:
    """
    Check whether a response body looks like an HTML document.

    Args:
        body: Raw response body
        limit: Number of characters examined after stripping whitespace

    Returns:
        True if the body matches the HTML heuristic, False otherwise
    """
    text = body.decode("utf-8", errors="replace")
    if not text:
        return False
    return HTML_PATTERN.search(text.strip()[:limit]) is not None

"""Exceptions raised by WKD lookups."""

from typing import Optional


class WKDError(Exception):
    """Base exception for this library."""


class InvalidArgumentError(WKDError, TypeError):
    """Raised when the email argument is missing or not a string."""


class InvalidEmailError(WKDError, ValueError):
    """Raised when the email cannot be split into local part and domain."""


class LookupFailedError(WKDError):
    """Raised when a WKD endpoint answered with a non-200 status."""

    def __init__(
        self, method: str, status_text: str, status: Optional[int] = None
    ):
        self.method = method
        self.status = status
        self.status_text = status_text
        super().__init__(f"{method} WKD lookup failed: {status_text}")


class InvalidLookupResultError(WKDError):
    """Raised when a successful response does not look like a key."""


class HtmlContentTypeError(InvalidLookupResultError):
    """Raised when the response declares a text/html Content-Type."""

    def __init__(self):
        super().__init__(
            "Invalid WKD lookup result (text/html Content-Type header)"
        )


class HtmlContentDetectedError(InvalidLookupResultError):
    """Raised when the response body is sniffed as HTML."""

    def __init__(self):
        super().__init__("Invalid WKD lookup result (HTML content detected)")

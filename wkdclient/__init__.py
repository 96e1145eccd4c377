"""wkdclient: OpenPGP public key lookup via the Web Key Directory."""

from .discovery import WKDDiscovery, WKDUrls
from .errors import (
    HtmlContentDetectedError,
    HtmlContentTypeError,
    InvalidArgumentError,
    InvalidEmailError,
    InvalidLookupResultError,
    LookupFailedError,
    WKDError,
)
from .resolver import ChainResolver, KeyResolver, LocalDirectoryResolver, WKDResolver
from .transport import Fetcher, HttpResponse, RequestsFetcher

__version__ = "1.0.0"
__all__ = [
    "WKDDiscovery",
    "WKDUrls",
    "WKDError",
    "InvalidArgumentError",
    "InvalidEmailError",
    "LookupFailedError",
    "InvalidLookupResultError",
    "HtmlContentTypeError",
    "HtmlContentDetectedError",
    "KeyResolver",
    "WKDResolver",
    "LocalDirectoryResolver",
    "ChainResolver",
    "Fetcher",
    "HttpResponse",
    "RequestsFetcher",
]

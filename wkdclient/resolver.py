"""Key resolvers for Web Key Directory lookups."""

import asyncio
import inspect
import logging
import os
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, List, Optional, Union

from .discovery import WKDDiscovery, WKDUrls
from .errors import (
    HtmlContentDetectedError,
    HtmlContentTypeError,
    LookupFailedError,
)
from .hashing import sha1
from .sniffing import is_html_content_type, looks_like_html
from .transport import Fetcher, HttpResponse, RequestsFetcher

logger = logging.getLogger(__name__)

ADVANCED = "Advanced"
DIRECT = "Direct"
LOCAL = "Local"

Hasher = Callable[[bytes], Union[bytes, Awaitable[bytes]]]


class KeyResolver(ABC):
    """Abstract base class for public key resolution."""

    @abstractmethod
    async def lookup(self, email: str) -> bytes:
        """Resolve the public key published for an email address.

        Returns:
            Raw key bytes.

        Raises:
            WKDError: If no key could be resolved.
        """


class WKDResolver(KeyResolver):
    """Resolves keys via the WKD advanced method, falling back to direct."""

    def __init__(
        self,
        fetcher: Optional[Fetcher] = None,
        hasher: Optional[Hasher] = None,
    ):
        self._fetcher = fetcher if fetcher is not None else RequestsFetcher()
        self._hasher = hasher if hasher is not None else sha1

    async def urls_for(self, email: str) -> WKDUrls:
        """
        Build the candidate URLs for an email without fetching them.

        Raises:
            InvalidArgumentError: If email is missing or not a string
            InvalidEmailError: If email does not contain exactly one "@"
        """
        local_part, domain = WKDDiscovery.parse_email(email)
        digest = self._hasher(WKDDiscovery.normalize_local_part(local_part))
        if inspect.isawaitable(digest):
            digest = await digest
        encoded = WKDDiscovery.encode_digest(bytes(digest))
        return WKDDiscovery.construct_urls(local_part, domain, encoded)

    async def _fetch(self, url: str, method: str) -> HttpResponse:
        logger.debug("%s WKD lookup: GET %s", method, url)
        response = await self._fetcher.get(url)
        if not response.ok:
            raise LookupFailedError(method, response.status_text, response.status)
        return response

    @staticmethod
    def validate_response(response: HttpResponse) -> None:
        """
        Reject successful responses that carry an HTML page instead of a key.

        Raises:
            HtmlContentTypeError: If the Content-Type header is text/html
            HtmlContentDetectedError: If the body is sniffed as HTML
        """
        if is_html_content_type(response.content_type):
            logger.warning("WKD response declared text/html, rejecting")
            raise HtmlContentTypeError()
        if looks_like_html(response.body):
            logger.warning("WKD response body looks like HTML, rejecting")
            raise HtmlContentDetectedError()

    async def lookup(self, email: str) -> bytes:
        """
        Look up the public key for an email address.

        The advanced URL is tried first. Any failure there, whether a
        transport error or a non-200 status, leads to exactly one request to
        the direct URL. Transport errors from the direct request propagate
        unchanged.

        Args:
            email: Email address

        Returns:
            Raw response body of the successful request

        Raises:
            InvalidArgumentError: If email is missing or not a string
            InvalidEmailError: If email does not contain exactly one "@"
            LookupFailedError: If the direct request returned non-200
            HtmlContentTypeError: If the response declared text/html
            HtmlContentDetectedError: If the response body looks like HTML
        """
        urls = await self.urls_for(email)
        try:
            response = await self._fetch(urls.advanced, ADVANCED)
        except Exception as exc:
            logger.info(
                "Advanced WKD lookup for %s failed (%s), trying direct method",
                urls.domain,
                exc,
            )
            response = await self._fetch(urls.direct, DIRECT)

        self.validate_response(response)
        logger.debug(
            "Found WKD key for %s (%d bytes)", urls.domain, len(response.body)
        )
        return response.body


class LocalDirectoryResolver(KeyResolver):
    """Resolves keys from a WKD tree on the local filesystem.

    Keys are read from ``<root>/<domain>/hu/<hash>``, or ``<root>/hu/<hash>``
    when ``flat`` is set (a single domain's ``openpgpkey`` directory).
    """

    def __init__(
        self, root: str, flat: bool = False, hasher: Callable[[bytes], bytes] = sha1
    ):
        self._root = root
        self._flat = flat
        self._hasher = hasher

    def key_path(self, email: str) -> str:
        """Return the path a key for email would be stored at."""
        local_part, domain = WKDDiscovery.parse_email(email)
        encoded = WKDDiscovery.hash_local_part(local_part, self._hasher)
        if self._flat:
            return os.path.join(self._root, "hu", encoded)
        if not domain or domain in (".", "..") or os.sep in domain or "/" in domain:
            raise LookupFailedError(LOCAL, "Not Found", 404)
        return os.path.join(self._root, domain, "hu", encoded)

    @staticmethod
    def _read(path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    async def lookup(self, email: str) -> bytes:
        """Read the key file for email in a worker thread."""
        path = self.key_path(email)
        try:
            data = await asyncio.to_thread(self._read, path)
        except FileNotFoundError:
            logger.debug("No local WKD key at %s", path)
            raise LookupFailedError(LOCAL, "Not Found", 404) from None
        return data


class ChainResolver(KeyResolver):
    """Tries multiple resolvers in order, returning the first success."""

    def __init__(self, resolvers: List[KeyResolver]):
        if not resolvers:
            raise ValueError("ChainResolver requires at least one resolver")
        self._resolvers = resolvers

    async def lookup(self, email: str) -> bytes:
        """Try each resolver in order; re-raise the last error if all fail."""
        last_error: Optional[Exception] = None
        for resolver in self._resolvers:
            try:
                return await resolver.lookup(email)
            except Exception as exc:
                logger.debug(
                    "%s failed: %s", type(resolver).__name__, exc
                )
                last_error = exc
        raise last_error

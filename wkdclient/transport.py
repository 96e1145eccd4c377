"""HTTP fetch capability used by the WKD resolver."""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Dict, Optional, Union

import requests
from requests.structures import CaseInsensitiveDict

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


@dataclass
class HttpResponse:
    """Status, headers and body of a completed GET request."""

    status: int
    reason: str = ""
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    body: bytes = b""

    def __post_init__(self):
        if not isinstance(self.headers, CaseInsensitiveDict):
            self.headers = CaseInsensitiveDict(self.headers)

    @property
    def ok(self) -> bool:
        """Only 200 counts as a successful WKD response."""
        return self.status == 200

    @property
    def status_text(self) -> str:
        """Reason phrase sent by the server, or the standard phrase for the status."""
        if self.reason:
            return self.reason
        try:
            return HTTPStatus(self.status).phrase
        except ValueError:
            return str(self.status)

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get("content-type")


class Fetcher(ABC):
    """Abstract base class for HTTP GET transports."""

    @abstractmethod
    async def get(self, url: str) -> HttpResponse:
        """Issue a GET request.

        Returns:
            HttpResponse for any status code.

        Raises:
            Exception: Transport-level failures (DNS, TLS, connection).
        """


class RequestsFetcher(Fetcher):
    """Issues GET requests with requests in a worker thread."""

    def __init__(
        self,
        timeout: Union[int, float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self._timeout = timeout
        self._session = session
        self._headers = dict(headers or {})

    def _get(self, url: str) -> HttpResponse:
        get = self._session.get if self._session is not None else requests.get
        response = get(url, timeout=self._timeout, headers=self._headers)
        logger.debug("GET %s -> %s", url, response.status_code)
        return HttpResponse(
            status=response.status_code,
            reason=response.reason or "",
            headers=response.headers,
            body=response.content,
        )

    async def get(self, url: str) -> HttpResponse:
        """Fetch url; requests.RequestException propagates to the caller."""
        return await asyncio.to_thread(self._get, url)

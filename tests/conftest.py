"""Shared test helpers."""

from typing import Dict, List, Union

from wkdclient.transport import Fetcher, HttpResponse


class FakeFetcher(Fetcher):
    """Fetcher returning canned responses and recording requested URLs.

    URLs without a canned response answer 404 Not Found.
    """

    def __init__(self, responses: Dict[str, Union[HttpResponse, Exception]]):
        self.responses = responses
        self.requested: List[str] = []

    async def get(self, url: str) -> HttpResponse:
        self.requested.append(url)
        result = self.responses.get(url, HttpResponse(404, "Not Found"))
        if isinstance(result, Exception):
            raise result
        return result

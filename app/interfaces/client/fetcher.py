"""HTTP access to the backend message endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

# InvalidURL, StreamError and CookieConflict do not derive from HTTPError.
REQUEST_ERRORS = (
    httpx.HTTPError,
    httpx.InvalidURL,
    httpx.StreamError,
    httpx.CookieConflict,
)


class MessageFetchError(Exception):
    """Raised when the message could not be retrieved or decoded."""


class MessageFetcher:
    """Request the backend message with an ``httpx.AsyncClient``.

    Malformed URLs, connection failures, non-2xx responses and bodies that
    are not JSON are all reported as :class:`MessageFetchError`. A ``timeout`` of ``None``
    waits for the response indefinitely.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def fetch(self) -> Any:
        """Perform a single GET request and return the decoded JSON body."""

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
        except REQUEST_ERRORS as exc:
            raise MessageFetchError(f"Request to {self.url} failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise MessageFetchError(f"Response from {self.url} is not valid JSON") from exc


__all__ = ["MessageFetchError", "MessageFetcher"]

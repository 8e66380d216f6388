"""HTTP transport that retrieves raw sheet text from a published document."""

from __future__ import annotations

import httpx

from sheetview.exceptions import TransportError

DEFAULT_TIMEOUT = 30.0
_USER_AGENT = "sheetview"


def http_status_message(status_code: int) -> str:
    return (
        f"HTTP error! status: {status_code}. "
        "This might mean the sheet is not publicly accessible for CSV export."
    )


class HttpTextFetcher:
    """Async callable returning the decoded body of ``uri``.

    Non-success responses and network failures raise :class:`TransportError`.
    A shared ``client`` can be injected; otherwise one is opened per call.
    """

    def __init__(self, *, timeout: float = DEFAULT_TIMEOUT, client: httpx.AsyncClient | None = None) -> None:
        self._timeout = httpx.Timeout(timeout)
        self._client = client

    async def __call__(self, uri: str) -> str:
        if self._client is not None:
            return await self._fetch(self._client, uri)

        try:
            async with httpx.AsyncClient(follow_redirects=True, timeout=self._timeout) as client:
                return await self._fetch(client, uri)
        except TransportError:
            raise
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or type(exc).__name__) from exc

    async def _fetch(self, client: httpx.AsyncClient, uri: str) -> str:
        try:
            response = await client.get(uri, headers={"User-Agent": _USER_AGENT})
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise TransportError(http_status_message(response.status_code), status_code=response.status_code)
        return response.text


__all__ = ["DEFAULT_TIMEOUT", "HttpTextFetcher", "http_status_message"]

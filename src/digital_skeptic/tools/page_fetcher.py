"""Article fetching."""

from __future__ import annotations

import asyncio

import httpx

from digital_skeptic.config import Settings
from digital_skeptic.errors import ExtractionError
from digital_skeptic.logging import get_logger
from digital_skeptic.models.article import RawDocument

logger = get_logger(__name__)


class PageFetcher:
    """Fetch article pages over HTTP with a browser user agent."""

    def __init__(self, settings: Settings, *, transport: httpx.BaseTransport | None = None) -> None:
        self._settings = settings
        self._client = httpx.Client(
            timeout=httpx.Timeout(settings.http_timeout_s),
            headers={"User-Agent": settings.http_user_agent},
            follow_redirects=True,
            transport=transport,
        )

    def fetch(self, url: str) -> RawDocument:
        """Fetch a URL (synchronous).

        Raises:
            ExtractionError: On a non-2xx status or a transport failure.
        """

        try:
            resp = self._client.get(url)
        except httpx.HTTPError as e:
            raise ExtractionError(f"Failed to fetch article: {e}") from e

        if not resp.is_success:
            raise ExtractionError(f"Failed to fetch article: HTTP error! status: {resp.status_code}")

        logger.info(
            "Article fetched",
            extra={"url": str(resp.url), "status_code": resp.status_code, "bytes": len(resp.content)},
        )
        return RawDocument(url=str(resp.url), html=resp.text)

    async def fetch_async(self, url: str) -> RawDocument:
        """Async variant of :meth:`fetch`."""

        return await asyncio.to_thread(self.fetch, url)

    def close(self) -> None:
        self._client.close()

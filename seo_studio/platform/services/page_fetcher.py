from typing import Optional

import httpx

from seo_studio.platform.config import Settings
from seo_studio.platform.exceptions import FetchOrParseError
from seo_studio.platform.logger import get_logger

logger = get_logger(__name__)


class PageFetcher:
    """
    Retrieves a URL and hands back the response body as text.
    No retries and no caching: one GET per call.
    """

    def __init__(
        self,
        timeout: float = 15.0,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent} if user_agent else {}
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "PageFetcher":
        return cls(
            timeout=settings.FETCH_TIMEOUT_SECONDS,
            user_agent=settings.FETCH_USER_AGENT,
        )

    async def fetch(self, url: str) -> str:
        logger.info("Fetching %s", url)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise FetchOrParseError(
                "Failed to fetch page", details=f"Timed out fetching {url}"
            ) from e
        except httpx.HTTPStatusError as e:
            raise FetchOrParseError(
                "Failed to fetch page",
                details=f"{url} responded with status {e.response.status_code}",
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchOrParseError(
                "Failed to fetch page", details=str(e) or type(e).__name__
            ) from e

        logger.info(
            "Fetched %s: status=%s length=%s",
            url,
            response.status_code,
            len(response.text),
        )
        return response.text

from seo_studio.features.scraping.schemas.scraping import PageMetadata, ScrapedContent
from seo_studio.features.scraping.services.text_extractor import extract_content, extract_metadata
from seo_studio.platform.exceptions import FetchOrParseError, InputValidationError
from seo_studio.platform.services.page_fetcher import PageFetcher
from seo_studio.platform.utils.url_validator import validate_url


class ScrapingService:
    """Fetch -> extract. Stateless; one instance per request."""

    def __init__(self, fetcher: PageFetcher, max_chars: int):
        self.fetcher = fetcher
        self.max_chars = max_chars

    @staticmethod
    def normalize_target(url: str) -> str:
        """
        Missing URL is a 400. A URL that is present but cannot be fetched
        (wrong scheme, no host) fails like an unreachable page.
        """
        if not url or not url.strip():
            raise InputValidationError("URL is required")
        is_valid, normalized_url, error = validate_url(url)
        if not is_valid:
            raise FetchOrParseError("Failed to fetch page", details=error)
        return normalized_url

    async def scrape_content(self, url: str) -> ScrapedContent:
        html = await self.fetcher.fetch(self.normalize_target(url))
        return extract_content(html, max_chars=self.max_chars)

    async def scrape_metadata(self, url: str) -> PageMetadata:
        html = await self.fetcher.fetch(self.normalize_target(url))
        return extract_metadata(html)

from fastapi import APIRouter, Depends

from seo_studio.features.scraping.schemas.scraping import ScrapeRequest, ScrapeResponse
from seo_studio.features.scraping.services.scraping_service import ScrapingService
from seo_studio.platform.config import Settings, get_settings
from seo_studio.platform.dependencies import get_page_fetcher
from seo_studio.platform.exceptions import InputValidationError, ServiceError
from seo_studio.platform.logger import get_logger
from seo_studio.platform.services.page_fetcher import PageFetcher

logger = get_logger(__name__)

router = APIRouter(tags=["scraping"])


@router.post("/scrape", response_model=ScrapeResponse, response_model_by_alias=True)
async def scrape_website(
    payload: ScrapeRequest,
    fetcher: PageFetcher = Depends(get_page_fetcher),
    settings: Settings = Depends(get_settings),
):
    """
    Fetch the URL and return the readable text of its content areas
    with word, character and sentence counts.
    """
    if not payload.url or not payload.url.strip():
        raise InputValidationError("URL is required")

    logger.info("[scrape] start url=%s", payload.url)
    service = ScrapingService(fetcher, max_chars=settings.MAX_CONTENT_CHARS)

    try:
        content = await service.scrape_content(payload.url)
    except InputValidationError:
        raise
    except ServiceError as e:
        raise e.with_headline("Failed to scrape website") from e

    logger.info("[scrape] done url=%s words=%s", payload.url, content.word_count)
    return ScrapeResponse(
        content=content.text,
        wordCount=content.word_count,
        characterCount=content.character_count,
        sentenceCount=content.sentence_count,
    )

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from seo_studio.features.scraping.services.scraping_service import ScrapingService
from seo_studio.features.seo_analysis.schemas.seo_analysis import (
    AnalyzePageRequest,
    AnalyzeSeoRequest,
    AnalyzeSeoResponse,
)
from seo_studio.features.seo_analysis.services.seo_analyzer import SeoAnalyzerService
from seo_studio.platform.config import LLMConfig, Settings, get_settings
from seo_studio.platform.dependencies import (
    LLMClientFactory,
    get_llm_client_factory,
    get_page_fetcher,
)
from seo_studio.platform.exceptions import InputValidationError, ServiceError
from seo_studio.platform.logger import get_logger
from seo_studio.platform.services.page_fetcher import PageFetcher
from seo_studio.platform.utils.markdown_render import render_markdown

logger = get_logger(__name__)

router = APIRouter(tags=["seo-analysis"])
legacy_router = APIRouter(tags=["seo-analysis"])


@router.post("/analyze-seo", response_model=AnalyzeSeoResponse, response_model_by_alias=True)
async def analyze_seo(
    payload: AnalyzeSeoRequest,
    settings: Settings = Depends(get_settings),
    llm_factory: LLMClientFactory = Depends(get_llm_client_factory),
):
    """
    Score already-extracted content for SEO.

    `analysis` is the JSON text that validated as an SEOAnalysis; post it
    back as `seoData` to /api/generate-content.
    """
    config = LLMConfig.resolve(settings, settings.ANALYSIS_MODEL, payload.api_key)
    if not payload.content or not payload.content.strip() or config is None:
        raise InputValidationError("Content and API key are required")

    logger.info("[analyze-seo] start content_chars=%s", len(payload.content))
    try:
        async with llm_factory(config) as llm:
            result = await SeoAnalyzerService(llm).analyze_content(
                payload.content,
                topic=payload.topic,
                max_tokens=settings.ANALYSIS_MAX_TOKENS,
                temperature=settings.ANALYSIS_TEMPERATURE,
            )
    except ServiceError as e:
        raise e.with_headline("Failed to analyze SEO") from e

    logger.info("[analyze-seo] done score=%s", result.analysis.seo_score)
    return AnalyzeSeoResponse(analysis=result.analysis_json, rawAnalysis=result.raw)


@legacy_router.post("/analyze-seo")
async def analyze_page_seo(
    payload: AnalyzePageRequest,
    settings: Settings = Depends(get_settings),
    fetcher: PageFetcher = Depends(get_page_fetcher),
    llm_factory: LLMClientFactory = Depends(get_llm_client_factory),
):
    """
    Fetch a URL, read its metadata and body, and have the model review it.
    responseType=html renders the Markdown answer to HTML.
    """
    if not payload.url or not payload.url.strip():
        raise InputValidationError("URL is required")

    config = LLMConfig.resolve(settings, settings.LEGACY_MODEL, payload.api_key)
    if config is None:
        raise InputValidationError("API key is required")

    target_keywords = payload.target_keywords or settings.DEFAULT_TARGET_KEYWORDS

    logger.info(
        "[analysis/analyze-seo] start url=%s keywords=%s response_type=%s",
        payload.url,
        len(target_keywords),
        payload.response_type,
    )

    scraper = ScrapingService(fetcher, max_chars=settings.MAX_CONTENT_CHARS)

    try:
        page = await scraper.scrape_metadata(payload.url)
        async with llm_factory(config) as llm:
            analysis = await SeoAnalyzerService(llm).analyze_page(
                page,
                target_keywords=target_keywords,
                industry=payload.industry,
                structured=payload.structured,
                max_body_chars=settings.MAX_CONTENT_CHARS,
            )
    except InputValidationError:
        raise
    except ServiceError as e:
        raise e.with_headline("Failed to analyze SEO") from e

    logger.info("[analysis/analyze-seo] done url=%s chars=%s", payload.url, len(analysis))

    if payload.response_type == "html":
        return HTMLResponse(content=render_markdown(analysis))

    return {"analysis": analysis, "page": page.model_dump()}

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from seo_studio.features.content_generation.schemas.content_generation import (
    GenerateContentRequest,
    GenerateContentResponse,
    GenerateFromSuggestionsRequest,
)
from seo_studio.features.content_generation.services.content_generator import (
    ContentGeneratorService,
    build_generation_request,
)
from seo_studio.platform.config import LLMConfig, Settings, get_settings
from seo_studio.platform.dependencies import LLMClientFactory, get_llm_client_factory
from seo_studio.platform.exceptions import (
    InputValidationError,
    ServiceError,
    StructuredOutputError,
)
from seo_studio.platform.logger import get_logger
from seo_studio.platform.utils.markdown_render import render_markdown

logger = get_logger(__name__)

router = APIRouter(tags=["content-generation"])
legacy_router = APIRouter(tags=["content-generation"])


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return not value


@router.post("/generate-content", response_model=GenerateContentResponse)
async def generate_content(
    payload: GenerateContentRequest,
    settings: Settings = Depends(get_settings),
    llm_factory: LLMClientFactory = Depends(get_llm_client_factory),
):
    """
    Draft new content from an SEO analysis.

    generationType picks the template (FAQ, Blog Post, Product Description,
    Landing Page Content); anything else gets the general-purpose one.
    """
    config = LLMConfig.resolve(settings, settings.GENERATION_MODEL, payload.api_key)
    if (
        _is_blank(payload.seo_data)
        or _is_blank(payload.content_topic)
        or _is_blank(payload.generation_type)
        or config is None
    ):
        raise InputValidationError(
            "SEO data, content topic, generation type, and API key are required"
        )

    try:
        request = build_generation_request(
            payload.seo_data,
            content_topic=payload.content_topic,
            generation_type=payload.generation_type,
            max_tokens=payload.max_tokens or settings.DEFAULT_MAX_TOKENS,
            temperature=(
                payload.temperature
                if payload.temperature is not None
                else settings.DEFAULT_TEMPERATURE
            ),
            selected_keywords=payload.selected_keywords,
            selected_improvements=payload.selected_improvements,
        )
    except StructuredOutputError as e:
        raise e.with_headline("Failed to parse SEO data") from e

    logger.info(
        "[generate-content] start type=%s topic=%r",
        request.generation_type.value,
        request.content_topic,
    )

    try:
        async with llm_factory(config) as llm:
            content = await ContentGeneratorService(llm).generate(request)
    except ServiceError as e:
        raise e.with_headline("Failed to generate content") from e

    logger.info("[generate-content] done chars=%s", len(content))
    return GenerateContentResponse(content=content)


@legacy_router.post("/generate-content")
async def generate_content_from_suggestions(
    payload: GenerateFromSuggestionsRequest,
    settings: Settings = Depends(get_settings),
    llm_factory: LLMClientFactory = Depends(get_llm_client_factory),
):
    """Turn free-form SEO suggestions into an article; responseType=html renders it."""
    if _is_blank(payload.suggestions):
        raise InputValidationError("suggestions are required")

    config = LLMConfig.resolve(settings, settings.LEGACY_MODEL, payload.api_key)
    if config is None:
        raise InputValidationError("API key is required")

    logger.info(
        "[analysis/generate-content] start suggestions_chars=%s response_type=%s",
        len(payload.suggestions),
        payload.response_type,
    )

    try:
        async with llm_factory(config) as llm:
            content = await ContentGeneratorService(llm).generate_from_suggestions(
                payload.suggestions, focus_keywords=payload.focus_keywords
            )
    except ServiceError as e:
        raise e.with_headline("Failed to generate content") from e

    if payload.response_type == "html":
        return HTMLResponse(content=render_markdown(content))

    return {"content": content}

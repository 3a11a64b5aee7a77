from typing import Any, Dict, List, Optional, Sequence, Union

from seo_studio.features.content_generation.schemas.content_generation import (
    GenerationRequest,
    GenerationType,
)
from seo_studio.features.content_generation.services.prompts import (
    build_generation_prompt,
    build_suggestions_prompt,
)
from seo_studio.features.seo_analysis.schemas.seo_analysis import SeoAnalysis
from seo_studio.platform.logger import get_logger
from seo_studio.platform.services.llm_client import LLMClient
from seo_studio.platform.utils.llm_output import clean_model_output

logger = get_logger(__name__)


def _non_empty(items: Optional[Sequence[str]]) -> List[str]:
    return [item.strip() for item in items or [] if item and item.strip()]


def build_generation_request(
    seo_data: Union[str, Dict[str, Any]],
    content_topic: str,
    generation_type: Optional[str],
    max_tokens: int,
    temperature: float,
    selected_keywords: Optional[Sequence[str]] = None,
    selected_improvements: Optional[Sequence[str]] = None,
) -> GenerationRequest:
    """
    Merge the caller's choices over the analysis.

    A non-empty selection replaces the analysis' suggested keywords (or
    improvements); otherwise the analysis values are used as-is.

    Raises:
        StructuredOutputError: seo_data is not a valid SEOAnalysis
    """
    analysis = SeoAnalysis.from_payload(seo_data)

    keywords = _non_empty(selected_keywords) or _non_empty(
        analysis.new_keyword_targets.suggested_keywords
    )
    improvements = _non_empty(selected_improvements) or _non_empty(analysis.improvements)

    return GenerationRequest(
        content_topic=content_topic.strip(),
        generation_type=GenerationType.resolve(generation_type),
        requested_type=generation_type or "",
        keywords=keywords,
        improvements=improvements,
        content_topics=_non_empty(analysis.new_keyword_targets.content_topics_to_add),
        max_tokens=max_tokens,
        temperature=temperature,
    )


class ContentGeneratorService:
    def __init__(self, llm: LLMClient):
        self.llm = llm

    async def generate(self, request: GenerationRequest) -> str:
        prompt = build_generation_prompt(request)
        logger.info(
            "Generating %s: topic=%r keywords=%s improvements=%s",
            request.generation_type.value,
            request.content_topic,
            len(request.keywords),
            len(request.improvements),
        )
        raw = await self.llm.complete(
            prompt,
            max_tokens=request.max_tokens,
            temperature=request.temperature,
        )
        return clean_model_output(raw)

    async def generate_from_suggestions(
        self, suggestions: str, focus_keywords: Sequence[str] = ()
    ) -> str:
        prompt = build_suggestions_prompt(suggestions, focus_keywords=_non_empty(focus_keywords))
        raw = await self.llm.complete(prompt)
        return clean_model_output(raw)

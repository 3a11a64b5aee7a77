from dataclasses import dataclass
from typing import Optional, Sequence

from seo_studio.features.scraping.schemas.scraping import PageMetadata
from seo_studio.features.scraping.services.text_extractor import truncate_text
from seo_studio.features.seo_analysis.schemas.seo_analysis import SeoAnalysis
from seo_studio.features.seo_analysis.services.prompts import (
    build_content_analysis_prompt,
    build_page_analysis_prompt,
)
from seo_studio.platform.logger import get_logger
from seo_studio.platform.services.llm_client import LLMClient
from seo_studio.platform.utils.llm_output import clean_model_output

logger = get_logger(__name__)


@dataclass(frozen=True)
class ContentAnalysisResult:
    analysis: SeoAnalysis
    # Cleaned JSON text that validated as `analysis`
    analysis_json: str
    raw: str


class SeoAnalyzerService:
    def __init__(self, llm: LLMClient):
        self.llm = llm

    async def analyze_content(
        self,
        content: str,
        topic: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> ContentAnalysisResult:
        """
        Ask the model for an SEOAnalysis of plain page text.

        Raises:
            UpstreamModelError: the completion call failed
            StructuredOutputError: the reply is not a valid SEOAnalysis
        """
        prompt = build_content_analysis_prompt(content, topic=topic)
        raw = await self.llm.complete(
            prompt,
            max_tokens=max_tokens,
            temperature=temperature,
            json_output=True,
        )

        cleaned = clean_model_output(raw)
        analysis = SeoAnalysis.from_payload(cleaned)
        logger.info(
            "SEO analysis parsed: score=%s suggested_keywords=%s",
            analysis.seo_score,
            len(analysis.new_keyword_targets.suggested_keywords),
        )
        return ContentAnalysisResult(analysis=analysis, analysis_json=cleaned, raw=raw)

    async def analyze_page(
        self,
        page: PageMetadata,
        target_keywords: Sequence[str] = (),
        industry: Optional[str] = None,
        structured: bool = False,
        max_body_chars: Optional[int] = None,
    ) -> str:
        """Free-form (Markdown) or, with structured=True, validated JSON analysis of a page."""
        if max_body_chars is not None:
            page = page.model_copy(
                update={"body_text": truncate_text(page.body_text, max_body_chars)}
            )

        prompt = build_page_analysis_prompt(
            page,
            target_keywords=target_keywords,
            industry=industry,
            structured=structured,
        )
        raw = await self.llm.complete(prompt, json_output=structured)
        cleaned = clean_model_output(raw)

        if structured:
            SeoAnalysis.from_payload(cleaned)

        return cleaned

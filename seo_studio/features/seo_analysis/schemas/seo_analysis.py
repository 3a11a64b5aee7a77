from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from seo_studio.platform.exceptions import StructuredOutputError
from seo_studio.platform.utils.llm_output import parse_json_payload

# Key the model wraps its answer in
ANALYSIS_ROOT_KEY = "SEOAnalysis"


class NewKeywordTargets(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    suggested_keywords: List[str] = Field(default_factory=list, alias="SuggestedKeywords")
    content_topics_to_add: List[str] = Field(default_factory=list, alias="ContentTopicsToAdd")


class SeoAnalysis(BaseModel):
    """
    Structured result of an SEO analysis.

    Field aliases are the keys the model is told to produce, so the same
    JSON round-trips between /api/analyze-seo and /api/generate-content.
    """

    model_config = ConfigDict(populate_by_name=True)

    current_keywords: List[str] = Field(alias="CurrentKeywords")
    seo_score: float = Field(alias="SEOScore")
    improvements: List[str] = Field(alias="Improvements")
    new_keyword_targets: NewKeywordTargets = Field(alias="NewKeywordTargets")

    @classmethod
    def from_payload(cls, payload: Union[str, Dict[str, Any]]) -> "SeoAnalysis":
        """
        Accepts the model's raw text (fenced or not) or an already decoded
        object, with or without the top-level SEOAnalysis wrapper.

        Raises:
            StructuredOutputError: payload is not JSON or not this shape
        """
        if isinstance(payload, str):
            data = parse_json_payload(payload)
        elif isinstance(payload, dict):
            data = payload
        else:
            raise StructuredOutputError(
                "Failed to parse SEO analysis",
                details=f"Expected a JSON string or object, got {type(payload).__name__}",
            )

        if ANALYSIS_ROOT_KEY in data:
            data = data[ANALYSIS_ROOT_KEY]
        if not isinstance(data, dict):
            raise StructuredOutputError(
                "Failed to parse SEO analysis",
                details=f"'{ANALYSIS_ROOT_KEY}' must be an object",
            )

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise StructuredOutputError(
                "Failed to parse SEO analysis",
                details=[
                    {"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()
                ],
            ) from e

    def to_payload(self) -> Dict[str, Any]:
        return {ANALYSIS_ROOT_KEY: self.model_dump(by_alias=True)}


class AnalyzeSeoRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: Optional[str] = None
    api_key: Optional[str] = Field(None, alias="apiKey")
    topic: Optional[str] = None


class AnalyzeSeoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    analysis: str
    raw_analysis: str = Field(alias="rawAnalysis")


class AnalyzePageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = None
    response_type: Literal["json", "html"] = Field("json", alias="responseType")
    target_keywords: List[str] = Field(default_factory=list, alias="targetKeywords")
    industry: Optional[str] = None
    structured: bool = False
    api_key: Optional[str] = Field(None, alias="apiKey")

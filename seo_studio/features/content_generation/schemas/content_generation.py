from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class GenerationType(str, Enum):
    FAQ = "FAQ"
    BLOG_POST = "Blog Post"
    PRODUCT_DESCRIPTION = "Product Description"
    LANDING_PAGE = "Landing Page Content"
    DEFAULT = "default"

    @classmethod
    def resolve(cls, value: Optional[str]) -> "GenerationType":
        """Case-insensitive lookup; anything unrecognised is DEFAULT."""
        if isinstance(value, cls):
            return value
        normalized = (value or "").strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        return cls.DEFAULT


class GenerationRequest(BaseModel):
    """Everything a generation prompt is built from."""

    model_config = ConfigDict(frozen=True)

    content_topic: str
    generation_type: GenerationType = GenerationType.DEFAULT
    # Label shown to the model; the caller's own wording when it was unrecognised
    requested_type: str = ""
    keywords: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    content_topics: List[str] = Field(default_factory=list)
    max_tokens: int = 1500
    temperature: float = 0.7

    @property
    def type_label(self) -> str:
        if self.generation_type is not GenerationType.DEFAULT:
            return self.generation_type.value
        label = self.requested_type.strip()
        if not label or label.lower() == GenerationType.DEFAULT.value:
            return "article"
        return label


class GenerateContentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    seo_data: Optional[Union[str, Dict[str, Any]]] = Field(None, alias="seoData")
    content_topic: Optional[str] = Field(None, alias="contentTopic")
    generation_type: Optional[str] = Field(None, alias="generationType")
    api_key: Optional[str] = Field(None, alias="apiKey")
    max_tokens: Optional[int] = Field(None, alias="maxTokens", gt=0)
    temperature: Optional[float] = Field(None, ge=0, le=2)
    selected_keywords: Optional[List[str]] = Field(None, alias="selectedKeywords")
    selected_improvements: Optional[List[str]] = Field(None, alias="selectedImprovements")


class GenerateContentResponse(BaseModel):
    content: str


class GenerateFromSuggestionsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    suggestions: Optional[str] = None
    response_type: Literal["json", "html"] = Field("json", alias="responseType")
    focus_keywords: List[str] = Field(default_factory=list, alias="focusKeywords")
    api_key: Optional[str] = Field(None, alias="apiKey")

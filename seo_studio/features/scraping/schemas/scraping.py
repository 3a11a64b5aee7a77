from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PageMetadata(BaseModel):
    """Head metadata plus flattened body text of one page. Missing tags are ""."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    meta_description: str = ""
    meta_keywords: str = ""
    og_title: str = ""
    og_description: str = ""
    canonical_url: str = ""
    body_text: str = ""


class ScrapedContent(BaseModel):
    """Readable text pulled from the content areas of a page, with naive counts."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    word_count: int = 0
    character_count: int = 0
    sentence_count: int = 0


class ScrapeRequest(BaseModel):
    url: Optional[str] = None


class ScrapeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: str
    word_count: int = Field(alias="wordCount")
    character_count: int = Field(alias="characterCount")
    sentence_count: int = Field(alias="sentenceCount")

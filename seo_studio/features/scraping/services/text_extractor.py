import re
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup

from seo_studio.features.scraping.schemas.scraping import PageMetadata, ScrapedContent
from seo_studio.platform.exceptions import FetchOrParseError
from seo_studio.platform.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_CHARS = 10_000

# Semantic containers, scanned in this order
CONTENT_TAGS = ("main", "section", "article")
# Substrings of a div's class attribute that mark it as a content block
CONTENT_CLASS_HINTS = ("content", "main", "text")
NON_TEXT_TAGS = ("script", "style", "noscript", "template")

_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text or "").strip()


def truncate_text(text: str, max_chars: int) -> str:
    """str slicing works on code points, so a character is never split."""
    if max_chars < 0:
        raise ValueError("max_chars must be >= 0")
    return text[:max_chars]


def dedupe_preserving_order(items: Iterable[str]) -> List[str]:
    seen = set()
    unique = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        unique.append(item)
    return unique


def _make_soup(html: str) -> BeautifulSoup:
    if not isinstance(html, (str, bytes)):
        raise FetchOrParseError(
            "Failed to parse page", details=f"Expected HTML text, got {type(html).__name__}"
        )
    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as e:
        # html.parser is lenient; this only trips on truly broken input
        raise FetchOrParseError("Failed to parse page", details=str(e)) from e

    for tag in soup(list(NON_TEXT_TAGS)):
        tag.decompose()
    return soup


def _element_text(element) -> str:
    return collapse_whitespace(element.get_text(separator=" "))


def _body_text(soup: BeautifulSoup) -> str:
    # Fragments without a <body> still have text worth keeping
    root = soup.body or soup
    return _element_text(root)


def _meta_content(soup: BeautifulSoup, **attrs) -> str:
    # name="Description" is common enough to match case-insensitively
    pattern = {key: re.compile(f"^{re.escape(value)}$", re.I) for key, value in attrs.items()}
    tag = soup.find("meta", attrs=pattern)
    if tag is None:
        return ""
    return (tag.get("content") or "").strip()


def _canonical_url(soup: BeautifulSoup) -> str:
    for link in soup.find_all("link", href=True):
        rel = link.get("rel") or []
        if isinstance(rel, str):
            rel = rel.split()
        if "canonical" in (r.lower() for r in rel):
            return link["href"].strip()
    return ""


def extract_metadata(html: str) -> PageMetadata:
    """Read title, description/keywords meta, Open Graph, canonical link and body text."""
    soup = _make_soup(html)

    title_tag = soup.find("title")
    title = collapse_whitespace(title_tag.get_text()) if title_tag else ""

    metadata = PageMetadata(
        title=title,
        meta_description=_meta_content(soup, name="description"),
        meta_keywords=_meta_content(soup, name="keywords"),
        og_title=_meta_content(soup, property="og:title"),
        og_description=_meta_content(soup, property="og:description"),
        canonical_url=_canonical_url(soup),
        body_text=_body_text(soup),
    )
    logger.info(
        "Extracted metadata: title=%r body_chars=%s",
        metadata.title[:80],
        len(metadata.body_text),
    )
    return metadata


def _has_content_class(element) -> bool:
    classes = element.get("class") or []
    if isinstance(classes, str):
        classes = [classes]
    class_attr = " ".join(classes)
    return any(hint in class_attr for hint in CONTENT_CLASS_HINTS)


def collect_content_blocks(soup: BeautifulSoup) -> List[str]:
    """Text of semantic containers first, then of content-ish divs, deduplicated."""
    texts = []

    for tag_name in CONTENT_TAGS:
        for element in soup.find_all(tag_name):
            text = _element_text(element)
            if text:
                texts.append(text)

    for element in soup.find_all("div"):
        if not _has_content_class(element):
            continue
        text = _element_text(element)
        if text:
            texts.append(text)

    if not texts:
        body_text = _body_text(soup)
        if body_text:
            texts.append(body_text)

    return dedupe_preserving_order(texts)


def count_sentences(text: str) -> int:
    """Naive: number of '.'-delimited segments."""
    if not text:
        return 0
    return len(text.split("."))


def build_scraped_content(text: str) -> ScrapedContent:
    return ScrapedContent(
        text=text,
        word_count=len(text.split()),
        character_count=len(text),
        sentence_count=count_sentences(text),
    )


def extract_content(html: str, max_chars: Optional[int] = DEFAULT_MAX_CHARS) -> ScrapedContent:
    """Reduce a page to the text of its content areas, capped at max_chars."""
    soup = _make_soup(html)
    blocks = collect_content_blocks(soup)

    text = "\n".join(blocks)
    if max_chars is not None:
        text = truncate_text(text, max_chars)

    content = build_scraped_content(text)
    logger.info(
        "Extracted content: blocks=%s words=%s chars=%s",
        len(blocks),
        content.word_count,
        content.character_count,
    )
    return content

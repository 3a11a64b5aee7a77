from typing import Optional, Sequence

from seo_studio.features.scraping.schemas.scraping import PageMetadata

SEO_ANALYSIS_JSON_SCHEMA = """{
    "SEOAnalysis": {
        "CurrentKeywords": ["keyword1", "keyword2"],
        "SEOScore": 75,
        "Improvements": ["improvement1", "improvement2"],
        "NewKeywordTargets": {
            "SuggestedKeywords": ["new_keyword1", "new_keyword2"],
            "ContentTopicsToAdd": ["topic1", "topic2"]
        }
    }
}"""

JSON_ONLY_DIRECTIVE = (
    "Provide the output in JSON format with the following structure:\n"
    f"{SEO_ANALYSIS_JSON_SCHEMA}\n\n"
    "SEOScore is a number from 0 to 100. "
    "Do not include any text before or after the JSON. Only output valid JSON."
)


def _keyword_lines(keywords: Sequence[str]) -> str:
    return "\n".join(f"   - {keyword}" for keyword in keywords)


def build_content_analysis_prompt(content: str, topic: Optional[str] = None) -> str:
    """Prompt for /api/analyze-seo: plain extracted text in, SEOAnalysis JSON out."""
    subject = topic.strip() if topic and topic.strip() else "the page's subject"

    return f"""You are an SEO expert. Analyze the following content about {subject} for SEO performance. Assess:
1. Does the content use relevant keywords about {subject} and related topics? Is it likely to rank well for high-volume keywords?
2. What improvements can be made to increase SEO performance?
3. Suggest new keywords (with high search volume) that should be targeted, and recommend content topics or sections to add.

Content:
{content}

{JSON_ONLY_DIRECTIVE}"""


def build_page_analysis_prompt(
    page: PageMetadata,
    target_keywords: Sequence[str] = (),
    industry: Optional[str] = None,
    structured: bool = False,
) -> str:
    """
    Prompt for /analysis/analyze-seo: the page's metadata and body text,
    judged against a set of target keywords.

    With structured=True the model is also told to answer in the SEOAnalysis
    JSON shape so the result can feed content generation directly.
    """
    analyst = f"an expert SEO analyst for a {industry} company" if industry else "an expert SEO analyst"

    if target_keywords:
        keyword_check = (
            "1. How effectively does the page use the following important keywords:\n"
            f"{_keyword_lines(target_keywords)}"
        )
        metadata_check = (
            "2. Whether the meta tags (title, description, keywords) are optimized for these keywords."
        )
    else:
        keyword_check = (
            "1. Which keywords the page is effectively targeting, and how well it uses them."
        )
        metadata_check = (
            "2. Whether the meta tags (title, description, keywords) are optimized for those keywords."
        )

    prompt = f"""You are {analyst}.

Analyze the SEO performance of the following webpage. The focus is on how well it performs for the topic of the page.

Please assess:
{keyword_check}

{metadata_check}

3. Whether the content aligns with what users are searching for related to the topic of the page.

4. Is the structure SEO-friendly (headings, relevance, keyword distribution)?

5. What's missing? For example, should it include FAQs or comparisons that users commonly search for?

Finally, suggest:
- Weak areas in content or metadata.
- Better keywords (based on user interest/search trends).
- Topics for new blog posts or FAQ pages.
- A short summary of what content should be created next.

Here is the webpage content and metadata:
---
Title: {page.title}
Meta Description: {page.meta_description}
Meta Keywords: {page.meta_keywords}
OG Title: {page.og_title}
OG Description: {page.og_description}
Canonical URL: {page.canonical_url}
Page Content:
{page.body_text}"""

    if structured:
        prompt = f"{prompt}\n\n{JSON_ONLY_DIRECTIVE}"

    return prompt

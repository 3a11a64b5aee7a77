from typing import Callable, Dict, Sequence

from seo_studio.features.content_generation.schemas.content_generation import (
    GenerationRequest,
    GenerationType,
)

FORMAT_DIRECTIVE = """FORMATTING REQUIREMENTS:
- Return the content as a single top-level <div> container.
- Do NOT include <html>, <head> or <body> tags, Markdown, or code fences.
- Use utility classes for presentation:
  - <h1 class="text-3xl font-bold mb-4"> for the main title
  - <h2 class="text-2xl font-semibold mt-6 mb-3"> for section headings
  - <h3 class="text-xl font-semibold mt-4 mb-2"> for sub-headings
  - <p class="mb-4 leading-relaxed"> for paragraphs
  - <ul class="list-disc pl-6 mb-4"> / <ol class="list-decimal pl-6 mb-4"> with <li class="mb-1"> for lists
  - <strong> for emphasis on key terms"""


def _bullets(items: Sequence[str], empty: str = "- (none provided)") -> str:
    lines = [f"- {item}" for item in items if item and item.strip()]
    return "\n".join(lines) if lines else empty


def _seo_guidance(request: GenerationRequest) -> str:
    return f"""SEO KEYWORDS (weave these in naturally; never stuff them):
{_bullets(request.keywords)}

IMPROVEMENTS TO APPLY:
{_bullets(request.improvements)}"""


def _outline(request: GenerationRequest) -> str:
    return f"""TOPICS TO COVER:
{_bullets(request.content_topics, empty="- Use your judgement based on the topic")}"""


def faq_template(request: GenerationRequest) -> str:
    # Topics to add become the seed questions
    questions = _bullets(
        request.content_topics,
        empty="- Derive the questions from the topic and keywords",
    )
    return f"""You are an expert content writer and SEO strategist.

Write an FAQ page for the topic: "{request.content_topic}".

REQUIREMENTS:
- Produce between 8 and 12 question and answer pairs.
- Start with an <h2> title for the FAQ section.
- Put every question in an <h3> and answer it in one or two concise <p> paragraphs (40-120 words each).
- Use lists only when an answer enumerates steps or options.
- Tone: helpful, direct and trustworthy. Phrase questions the way users search for them.

SEED QUESTIONS:
{questions}

{_seo_guidance(request)}

{FORMAT_DIRECTIVE}"""


def blog_post_template(request: GenerationRequest) -> str:
    return f"""You are an expert content writer and SEO strategist.

Write a Blog Post for the topic: "{request.content_topic}".

REQUIREMENTS:
- Length: 1200-1500 words.
- One <h1> title that contains the primary keyword.
- An engaging introduction of two short paragraphs.
- 4-6 main sections as <h2>, each with <h3> sub-sections where useful.
- Use bullet lists for takeaways and <strong> for key terms.
- Finish with a conclusion and a clear call to action.
- Tone: informative, conversational and authoritative.

{_outline(request)}

{_seo_guidance(request)}

{FORMAT_DIRECTIVE}"""


def product_description_template(request: GenerationRequest) -> str:
    return f"""You are an expert e-commerce copywriter and SEO strategist.

Write a Product Description for: "{request.content_topic}".

REQUIREMENTS:
- Length: 250-400 words.
- An <h2> headline that names the product and its main benefit.
- A benefit-led opening paragraph.
- A "Key Features" <h3> followed by a bullet list of 4-6 features, each tied to a benefit.
- A short "Specifications" <h3> with a bullet list where details are known.
- Close with a persuasive call to action.
- Tone: persuasive, clear and customer-focused. No unverifiable claims.

{_outline(request)}

{_seo_guidance(request)}

{FORMAT_DIRECTIVE}"""


def landing_page_template(request: GenerationRequest) -> str:
    return f"""You are an expert conversion copywriter and SEO strategist.

Write Landing Page Content for: "{request.content_topic}".

REQUIREMENTS:
- A hero section: an <h1> headline and a one-sentence subheadline <p>.
- 3-5 benefit sections, each an <h2> with a short paragraph and an optional bullet list.
- A social proof section (testimonial-style statements or trust signals, clearly generic).
- A short FAQ snippet with 3-4 questions as <h3>.
- A strong closing call to action.
- Length: 600-900 words. Tone: confident, benefit-driven and scannable.

{_outline(request)}

{_seo_guidance(request)}

{FORMAT_DIRECTIVE}"""


def default_template(request: GenerationRequest) -> str:
    return f"""You are an expert content writer and SEO strategist.

Write a comprehensive {request.type_label} for the topic: "{request.content_topic}".

REQUIREMENTS:
- Length: 800-1200 words.
- An <h1> title, an introduction, <h2> sections with <h3> sub-sections where useful, and a conclusion.
- Use lists where they aid scanning and <strong> for key terms.
- Tone: clear, informative and engaging.
- Structure the output appropriately for a {request.type_label}.

{_outline(request)}

{_seo_guidance(request)}

{FORMAT_DIRECTIVE}"""


TEMPLATES: Dict[GenerationType, Callable[[GenerationRequest], str]] = {
    GenerationType.FAQ: faq_template,
    GenerationType.BLOG_POST: blog_post_template,
    GenerationType.PRODUCT_DESCRIPTION: product_description_template,
    GenerationType.LANDING_PAGE: landing_page_template,
    GenerationType.DEFAULT: default_template,
}


def build_generation_prompt(request: GenerationRequest) -> str:
    template = TEMPLATES.get(request.generation_type, default_template)
    return template(request)


def build_suggestions_prompt(suggestions: str, focus_keywords: Sequence[str] = ()) -> str:
    """Single-template prompt for /analysis/generate-content; answers in Markdown."""
    if focus_keywords:
        keyword_line = f"- Naturally use these focus keywords: {', '.join(focus_keywords)}."
    else:
        keyword_line = "- Naturally use the focus keywords recommended in the insights."

    return f"""You are a content strategist.

Use the following SEO insights and keyword suggestions to create a new content piece that fills the identified gaps.

Requirements:
- Create an SEO-optimized article (or FAQ page if recommended).
- Include a compelling title and a clear introduction.
- Organize into main sections and sub-sections using H2/H3 headings.
- Include FAQs if suggested.
{keyword_line}
- Make it readable and useful for a general audience.
- Format the answer in Markdown.

Here are the SEO insights and content suggestions:

{suggestions}
"""

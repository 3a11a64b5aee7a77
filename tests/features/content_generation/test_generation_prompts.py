import pytest

from seo_studio.features.content_generation.schemas.content_generation import (
    GenerationRequest,
    GenerationType,
)
from seo_studio.features.content_generation.services.content_generator import (
    build_generation_request,
)
from seo_studio.features.content_generation.services.prompts import (
    FORMAT_DIRECTIVE,
    TEMPLATES,
    build_generation_prompt,
    build_suggestions_prompt,
    default_template,
)
from seo_studio.platform.exceptions import StructuredOutputError

ANALYSIS = {
    "SEOAnalysis": {
        "CurrentKeywords": ["wifi"],
        "SEOScore": 55,
        "Improvements": ["Add comparisons", "Shorten intro"],
        "NewKeywordTargets": {
            "SuggestedKeywords": ["mesh wifi", "wifi 6"],
            "ContentTopicsToAdd": ["Is WiFi 6 better than WiFi 5", "Mesh vs extender"],
        },
    }
}


def _request(generation_type: str, **overrides) -> GenerationRequest:
    fields = dict(
        content_topic="Smart WiFi",
        generation_type=GenerationType.resolve(generation_type),
        requested_type=generation_type,
        keywords=["mesh wifi", "wifi 6"],
        improvements=["Add comparisons"],
        content_topics=["Is WiFi 6 better than WiFi 5"],
    )
    fields.update(overrides)
    return GenerationRequest(**fields)


class TestGenerationType:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("FAQ", GenerationType.FAQ),
            ("faq", GenerationType.FAQ),
            ("Blog Post", GenerationType.BLOG_POST),
            (" product description ", GenerationType.PRODUCT_DESCRIPTION),
            ("Landing Page Content", GenerationType.LANDING_PAGE),
            ("Press Release", GenerationType.DEFAULT),
            ("", GenerationType.DEFAULT),
            (None, GenerationType.DEFAULT),
        ],
    )
    def test_resolve(self, value, expected):
        assert GenerationType.resolve(value) is expected

    def test_every_variant_has_a_template(self):
        assert set(TEMPLATES) == set(GenerationType)


class TestGenerationPrompts:
    def test_faq_asks_for_8_to_12_pairs(self):
        prompt = build_generation_prompt(_request("FAQ"))

        assert "between 8 and 12 question and answer pairs" in prompt
        assert "- Is WiFi 6 better than WiFi 5" in prompt

    def test_unknown_type_uses_default_template(self):
        request = _request("Press Release")
        prompt = build_generation_prompt(request)

        assert prompt == default_template(request)
        assert "comprehensive Press Release" in prompt

    @pytest.mark.parametrize("generation_type", [member.value for member in GenerationType])
    def test_every_template_carries_keywords_improvements_and_format(self, generation_type):
        prompt = build_generation_prompt(_request(generation_type))

        assert "Smart WiFi" in prompt
        assert "- mesh wifi" in prompt
        assert "- wifi 6" in prompt
        assert "- Add comparisons" in prompt
        assert prompt.endswith(FORMAT_DIRECTIVE)
        assert "<html>, <head> or <body>" in prompt

    @pytest.mark.parametrize(
        "generation_type, marker",
        [
            ("Blog Post", "1200-1500 words"),
            ("Product Description", "250-400 words"),
            ("Landing Page Content", "hero section"),
            ("default", "800-1200 words"),
        ],
    )
    def test_type_specific_structure(self, generation_type, marker):
        assert marker in build_generation_prompt(_request(generation_type))

    def test_deterministic(self):
        assert build_generation_prompt(_request("Blog Post")) == build_generation_prompt(
            _request("Blog Post")
        )

    def test_empty_keywords_are_called_out(self):
        prompt = build_generation_prompt(_request("Blog Post", keywords=[]))
        assert "(none provided)" in prompt

    def test_suggestions_prompt(self):
        prompt = build_suggestions_prompt("Add a WiFi 6 FAQ", focus_keywords=["Fiber", "ISP"])

        assert "Add a WiFi 6 FAQ" in prompt
        assert "Fiber, ISP" in prompt
        assert "Markdown" in prompt


class TestBuildGenerationRequest:
    def test_uses_analysis_suggestions(self):
        request = build_generation_request(
            ANALYSIS, "Smart WiFi", "FAQ", max_tokens=1500, temperature=0.7
        )

        assert request.generation_type is GenerationType.FAQ
        assert request.keywords == ["mesh wifi", "wifi 6"]
        assert request.improvements == ["Add comparisons", "Shorten intro"]
        assert request.content_topics == ["Is WiFi 6 better than WiFi 5", "Mesh vs extender"]

    def test_selections_override_analysis(self):
        request = build_generation_request(
            ANALYSIS,
            "Smart WiFi",
            "Blog Post",
            max_tokens=900,
            temperature=0.2,
            selected_keywords=["fiber broadband"],
            selected_improvements=["Add pricing table"],
        )

        assert request.keywords == ["fiber broadband"]
        assert request.improvements == ["Add pricing table"]
        assert request.max_tokens == 900
        assert request.temperature == 0.2

    def test_empty_selection_falls_back_to_analysis(self):
        request = build_generation_request(
            ANALYSIS,
            "Smart WiFi",
            "FAQ",
            max_tokens=1500,
            temperature=0.7,
            selected_keywords=["", "  "],
        )
        assert request.keywords == ["mesh wifi", "wifi 6"]

    def test_unparsable_seo_data(self):
        with pytest.raises(StructuredOutputError):
            build_generation_request("{oops", "Smart WiFi", "FAQ", max_tokens=1, temperature=0)

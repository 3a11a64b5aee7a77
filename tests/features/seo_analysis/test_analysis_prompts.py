import json

import pytest

from seo_studio.features.scraping.schemas.scraping import PageMetadata
from seo_studio.features.seo_analysis.schemas.seo_analysis import SeoAnalysis
from seo_studio.features.seo_analysis.services.prompts import (
    SEO_ANALYSIS_JSON_SCHEMA,
    build_content_analysis_prompt,
    build_page_analysis_prompt,
)
from seo_studio.platform.exceptions import StructuredOutputError


class TestContentAnalysisPrompt:
    def test_embeds_content_and_schema(self):
        prompt = build_content_analysis_prompt("Our routers cover every room.", topic="Smart WiFi")

        assert "Our routers cover every room." in prompt
        assert "Smart WiFi" in prompt
        assert '"SEOAnalysis"' in prompt
        assert '"ContentTopicsToAdd"' in prompt
        assert "Only output valid JSON" in prompt

    def test_is_deterministic(self):
        assert build_content_analysis_prompt("x") == build_content_analysis_prompt("x")

    def test_schema_example_parses_as_analysis(self):
        analysis = SeoAnalysis.from_payload(SEO_ANALYSIS_JSON_SCHEMA)
        assert analysis.seo_score == 75


class TestPageAnalysisPrompt:
    page = PageMetadata(
        title="Home",
        meta_description="Fast broadband",
        canonical_url="https://example.com/",
        body_text="Fiber plans for every home.",
    )

    def test_embeds_metadata_and_body(self):
        prompt = build_page_analysis_prompt(self.page, target_keywords=["Broadband", "Fiber"])

        assert "Title: Home" in prompt
        assert "Meta Description: Fast broadband" in prompt
        assert "Meta Keywords: \n" in prompt
        assert "Canonical URL: https://example.com/" in prompt
        assert "Fiber plans for every home." in prompt
        assert "   - Broadband" in prompt
        assert "   - Fiber" in prompt

    def test_covers_every_assessment(self):
        prompt = build_page_analysis_prompt(self.page, target_keywords=["Fiber"])

        for phrase in (
            "important keywords",
            "meta tags",
            "aligns with what users are searching for",
            "structure SEO-friendly",
            "What's missing",
            "Better keywords",
        ):
            assert phrase in prompt

    def test_structured_adds_schema(self):
        assert '"SEOAnalysis"' not in build_page_analysis_prompt(self.page)
        assert '"SEOAnalysis"' in build_page_analysis_prompt(self.page, structured=True)

    def test_industry(self):
        prompt = build_page_analysis_prompt(self.page, industry="broadband/ISP")
        assert "SEO analyst for a broadband/ISP company" in prompt


class TestSeoAnalysisParsing:
    payload = {
        "CurrentKeywords": ["wifi"],
        "SEOScore": 70,
        "Improvements": ["Add FAQs"],
        "NewKeywordTargets": {
            "SuggestedKeywords": ["mesh wifi"],
            "ContentTopicsToAdd": ["WiFi 6 vs WiFi 5"],
        },
    }

    def test_wrapped_and_unwrapped(self):
        wrapped = SeoAnalysis.from_payload({"SEOAnalysis": self.payload})
        bare = SeoAnalysis.from_payload(self.payload)

        assert wrapped == bare
        assert wrapped.new_keyword_targets.suggested_keywords == ["mesh wifi"]

    def test_fenced_string(self):
        text = "```json\n" + json.dumps({"SEOAnalysis": self.payload}) + "\n```"
        assert SeoAnalysis.from_payload(text).improvements == ["Add FAQs"]

    def test_round_trip_through_aliases(self):
        analysis = SeoAnalysis.from_payload(self.payload)
        assert SeoAnalysis.from_payload(analysis.to_payload()) == analysis

    @pytest.mark.parametrize(
        "bad",
        [
            "not json",
            {"SEOAnalysis": "nope"},
            {"SEOAnalysis": {"SEOScore": "high"}},
            {"CurrentKeywords": ["a"]},
            42,
        ],
    )
    def test_wrong_shape_is_structured_output_error(self, bad):
        with pytest.raises(StructuredOutputError):
            SeoAnalysis.from_payload(bad)

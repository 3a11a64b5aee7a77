"""
Test configuration and fixtures for the SEO Content Studio API.

The page fetcher and the LLM client are swapped out through
app.dependency_overrides, so no test touches the network.
"""

import json
import os
from typing import Dict, Generator, List, Optional
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

# Requests must supply apiKey unless a test sets one explicitly
os.environ.pop("OPENAI_API_KEY", None)
os.environ["LOG_TO_FILE"] = "false"

from seo_studio.platform.config import LLMConfig, get_settings  # noqa: E402
from seo_studio.platform.dependencies import get_llm_client_factory, get_page_fetcher  # noqa: E402
from seo_studio.platform.exceptions import FetchOrParseError  # noqa: E402

get_settings.cache_clear()


SAMPLE_ANALYSIS: Dict = {
    "SEOAnalysis": {
        "CurrentKeywords": ["smart wifi", "router"],
        "SEOScore": 62,
        "Improvements": ["Add an FAQ section", "Use longer meta description"],
        "NewKeywordTargets": {
            "SuggestedKeywords": ["mesh wifi", "wifi 6 router"],
            "ContentTopicsToAdd": ["Is WiFi 6 better than WiFi 5", "Mesh vs extender"],
        },
    }
}

SAMPLE_HTML = """
<html>
  <head>
    <title>Smart WiFi Plans</title>
    <meta name="description" content="Fast smart wifi for every room.">
  </head>
  <body>
    <nav>Home | Plans</nav>
    <main><h1>Smart WiFi</h1><p>Coverage   in every
    room.</p></main>
    <footer>Contact us</footer>
  </body>
</html>
"""


class FakeLLMClient:
    def __init__(self, config: LLMConfig, reply: str = "", error: Optional[Exception] = None):
        self.config = config
        self.complete = AsyncMock(return_value=reply, side_effect=error)
        self.closed = False

    async def __aenter__(self) -> "FakeLLMClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.closed = True


class FakeLLMFactory:
    """Stands in for LLMClient; remembers every client it built."""

    def __init__(self, reply: str = "", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.clients: List[FakeLLMClient] = []

    def __call__(self, config: LLMConfig) -> FakeLLMClient:
        client = FakeLLMClient(config, reply=self.reply, error=self.error)
        self.clients.append(client)
        return client

    @property
    def last(self) -> FakeLLMClient:
        return self.clients[-1]


class FakePageFetcher:
    def __init__(self, html: str = SAMPLE_HTML, error: Optional[Exception] = None):
        self.html = html
        self.error = error
        self.requested: List[str] = []

    async def fetch(self, url: str) -> str:
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        return self.html


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from seo_studio.main import app

    return app


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()


@pytest.fixture
def llm_factory(test_app) -> FakeLLMFactory:
    factory = FakeLLMFactory(reply=json.dumps(SAMPLE_ANALYSIS))
    test_app.dependency_overrides[get_llm_client_factory] = lambda: factory
    return factory


@pytest.fixture
def page_fetcher(test_app) -> FakePageFetcher:
    fetcher = FakePageFetcher()
    test_app.dependency_overrides[get_page_fetcher] = lambda: fetcher
    return fetcher


@pytest.fixture
def unreachable_fetcher(test_app) -> FakePageFetcher:
    fetcher = FakePageFetcher(
        error=FetchOrParseError(
            "Failed to fetch page", details="[Errno -2] Name or service not known"
        )
    )
    test_app.dependency_overrides[get_page_fetcher] = lambda: fetcher
    return fetcher

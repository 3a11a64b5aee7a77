from typing import Callable

from fastapi import Depends

from seo_studio.platform.config import LLMConfig, Settings, get_settings
from seo_studio.platform.services.llm_client import LLMClient
from seo_studio.platform.services.page_fetcher import PageFetcher

LLMClientFactory = Callable[[LLMConfig], LLMClient]


def get_page_fetcher(settings: Settings = Depends(get_settings)) -> PageFetcher:
    return PageFetcher.from_settings(settings)


def get_llm_client_factory() -> LLMClientFactory:
    """
    Routes build their client per request from the resolved LLMConfig
    and close it with `async with`.
    """
    return LLMClient

from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── App ─────────────────────────────────────
    APP_NAME: str = "SEO Content Studio"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 6500
    CORS_ORIGINS: List[str] = ["*"]

    # ── Logging ─────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = False

    # ── OpenAI ──────────────────────────────────
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: Optional[str] = None
    LLM_TIMEOUT_SECONDS: Optional[float] = None

    ANALYSIS_MODEL: str = "gpt-4o"
    GENERATION_MODEL: str = "gpt-4o"
    # Model used by the /analysis/* endpoints
    LEGACY_MODEL: str = "gpt-4o-mini"

    ANALYSIS_MAX_TOKENS: int = 800
    ANALYSIS_TEMPERATURE: float = 0.3
    DEFAULT_MAX_TOKENS: int = 1500
    DEFAULT_TEMPERATURE: float = 0.7

    # ── Scraping ────────────────────────────────
    FETCH_TIMEOUT_SECONDS: float = 15.0
    FETCH_USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
    MAX_CONTENT_CHARS: int = 10_000
    DEFAULT_TARGET_KEYWORDS: List[str] = []

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class LLMConfig(BaseModel):
    """Everything a single model call needs, resolved for one request."""

    api_key: str
    model: str
    base_url: Optional[str] = None
    timeout: Optional[float] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def resolve(
        cls, settings: Settings, model: str, api_key: Optional[str] = None
    ) -> Optional["LLMConfig"]:
        """
        Request-supplied key wins over OPENAI_API_KEY.
        Returns None when neither is available.
        """
        key = (api_key or "").strip() or settings.OPENAI_API_KEY
        if not key:
            return None
        return cls(
            api_key=key,
            model=model,
            base_url=settings.OPENAI_BASE_URL,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()

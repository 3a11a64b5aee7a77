from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from seo_studio.platform.config import LLMConfig
from seo_studio.platform.exceptions import UpstreamModelError
from seo_studio.platform.logger import get_logger

logger = get_logger(__name__)


class LLMClient:
    """
    Chat-completion client bound to one LLMConfig.

    A new client is built per request from the resolved config, so the
    caller's apiKey never leaks into another request. Use it as an async
    context manager so its connections are closed when the request ends.
    """

    def __init__(self, config: LLMConfig):
        self.config = config
        kwargs = {"api_key": config.api_key}
        if config.base_url:
            kwargs["base_url"] = config.base_url
        if config.timeout is not None:
            kwargs["timeout"] = config.timeout
        self._client = AsyncOpenAI(**kwargs)

    async def __aenter__(self) -> "LLMClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the connection pool held by the underlying AsyncOpenAI client."""
        await self._client.close()

    async def complete(
        self,
        prompt: str,
        *,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        json_output: bool = False,
    ) -> str:
        """
        Send `prompt` as a single user message and return the reply text.

        Raises:
            UpstreamModelError: the API call failed or the reply was empty
        """
        params = {
            "model": self.config.model,
            "messages": [{"role": "user", "content": prompt}],
        }
        if max_tokens is not None:
            params["max_tokens"] = max_tokens
        if temperature is not None:
            params["temperature"] = temperature
        if json_output:
            params["response_format"] = {"type": "json_object"}

        logger.info(
            "Calling %s: prompt_chars=%s max_tokens=%s temperature=%s json=%s",
            self.config.model,
            len(prompt),
            max_tokens,
            temperature,
            json_output,
        )

        try:
            completion = await self._client.chat.completions.create(**params)
        except OpenAIError as e:
            raise UpstreamModelError("Model request failed", details=str(e)) from e

        if not completion.choices:
            raise UpstreamModelError("Model request failed", details="Model returned no choices")

        content = completion.choices[0].message.content
        if not content:
            raise UpstreamModelError(
                "Model request failed", details="Model returned an empty response"
            )

        logger.info("Model %s replied with %s chars", self.config.model, len(content))
        return content

"""
AI service: one single-turn chat completion against an OpenAI-compatible endpoint, with error classification.
"""
import logging

from openai import AsyncOpenAI
from openai import APIError as OpenAIAPIError
from openai import AuthenticationError, RateLimitError

from tone_picker.config import Settings, settings as default_settings
from tone_picker.exceptions import UpstreamAuthError, UpstreamRateLimited, UpstreamUnavailable

logger = logging.getLogger(__name__)


async def _chat(
    client: AsyncOpenAI,
    prompt: str,
    model: str,
    temperature: float,
    max_tokens: int,
) -> tuple[str | None, int, int]:
    """Call the chat endpoint, return content, input_tokens, output_tokens."""
    resp = await client.chat.completions.create(
        model=model,
        messages=[{"role": "user", "content": prompt}],
        temperature=temperature,
        max_tokens=max_tokens,
    )
    if not resp.choices:
        return None, 0, 0
    content = resp.choices[0].message.content
    usage = getattr(resp, "usage", None)
    # Some OpenAI-compatible providers send usage with null counts
    input_tokens = (usage.prompt_tokens or 0) if usage else 0
    output_tokens = (usage.completion_tokens or 0) if usage else 0
    return content, input_tokens, output_tokens


class AIService:
    def __init__(self, config: Settings | None = None, client: AsyncOpenAI | None = None) -> None:
        self.config = config or default_settings
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.config.llm_api_key:
                raise UpstreamAuthError("Model API key is not set. Please check your model API configuration.")
            # No SDK retries: failures surface to the caller immediately.
            self._client = AsyncOpenAI(
                api_key=self.config.llm_api_key,
                base_url=self.config.llm_base_url,
                timeout=self.config.llm_timeout,
                max_retries=0,
            )
        return self._client

    async def complete(self, prompt: str) -> str:
        """Send a prompt and return the raw text of the first choice."""
        try:
            content, inp, out = await _chat(
                self._get_client(),
                prompt,
                model=self.config.llm_model,
                temperature=self.config.llm_temperature,
                max_tokens=self.config.llm_max_tokens,
            )
        except AuthenticationError as e:
            logger.warning("Model API rejected credentials: %s", e)
            raise UpstreamAuthError() from e
        except RateLimitError as e:
            logger.warning("Model API rate limit hit: %s", e)
            raise UpstreamRateLimited() from e
        except OpenAIAPIError as e:
            logger.exception("Model API error: %s", e)
            raise UpstreamUnavailable() from e

        if content is None or not content.strip():
            logger.warning("Model returned an empty response")
            raise UpstreamUnavailable()
        logger.info(
            "Model call finished: model=%s input_tokens=%d output_tokens=%d",
            self.config.llm_model,
            inp,
            out,
        )
        return content

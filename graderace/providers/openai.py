"""
OpenAI provider for summarization
"""

import logging
from typing import Any, Dict

from openai import AsyncOpenAI

from .base import BaseProvider, join_parts
from ..core.config import GradeRaceConfig
from ..exceptions import ApiError, ConfigurationError

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseProvider):
    """OpenAI chat completions provider"""

    name = "openai"

    def __init__(self, config: GradeRaceConfig):
        super().__init__(config)

        if not config.openai_api_key:
            raise ConfigurationError("OpenAI API key is required (set OPENAI_API_KEY)")

    async def generate_text(self, prompt: str, model: str) -> str:
        """Each choice is a candidate with a single text part"""
        request: Dict[str, Any] = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.config.temperature,
        }
        if self.config.max_tokens is not None:
            request["max_tokens"] = self.config.max_tokens

        client = AsyncOpenAI(api_key=self.config.openai_api_key)
        try:
            response = await client.chat.completions.create(**request)
        except Exception as e:
            logger.error(f"OpenAI text processing failed: {e}")
            raise ApiError(f"Text processing failed: {e}", self.name) from e
        finally:
            await self._close_client(client)

        self._record_call(model)
        result = join_parts(choice.message.content for choice in response.choices)
        logger.debug(f"OpenAI text response: {result[:50]}...")

        return result

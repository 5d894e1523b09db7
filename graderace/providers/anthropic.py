"""
Anthropic Claude provider for summarization
"""

import logging

import anthropic

from .base import BaseProvider, join_parts
from ..core.config import GradeRaceConfig
from ..exceptions import ApiError, ConfigurationError

logger = logging.getLogger(__name__)

# The messages API requires an output limit
DEFAULT_MAX_TOKENS = 4096


class AnthropicProvider(BaseProvider):
    """Anthropic Claude messages provider"""

    name = "anthropic"

    def __init__(self, config: GradeRaceConfig):
        super().__init__(config)

        if not config.anthropic_api_key:
            raise ConfigurationError("Anthropic API key is required (set ANTHROPIC_API_KEY)")

    async def generate_text(self, prompt: str, model: str) -> str:
        """A single candidate whose text blocks are its parts"""
        client = anthropic.AsyncAnthropic(api_key=self.config.anthropic_api_key)
        try:
            response = await client.messages.create(
                model=model,
                max_tokens=self.config.max_tokens or DEFAULT_MAX_TOKENS,
                temperature=self.config.temperature,
                messages=[{"role": "user", "content": prompt}]
            )
        except Exception as e:
            logger.error(f"Anthropic text processing failed: {e}")
            raise ApiError(f"Text processing failed: {e}", self.name) from e
        finally:
            await self._close_client(client)

        self._record_call(model)
        # Tool use and thinking blocks carry no summary text
        result = join_parts(block.text for block in response.content if block.type == "text")
        logger.debug(f"Anthropic text response: {result[:50]}...")

        return result

"""
Google Gemini provider for summarization
"""

import logging
from typing import Any, Dict, Iterable, Iterator, Optional

from google import genai
from google.genai import types

from .base import BaseProvider, join_parts
from ..core.config import GradeRaceConfig
from ..exceptions import ApiError, ConfigurationError

logger = logging.getLogger(__name__)


def iter_candidate_parts(candidates: Optional[Iterable[Any]]) -> Iterator[Optional[str]]:
    """Yield the text of every part of every candidate, in order"""
    for candidate in candidates or []:
        content = getattr(candidate, "content", None)
        if content is None:
            continue
        for part in content.parts or []:
            yield getattr(part, "text", None)


def flatten_candidates(candidates: Optional[Iterable[Any]]) -> str:
    """
    Flatten Gemini candidates into one newline-joined string

    Args:
        candidates: ``response.candidates`` from ``generate_content``

    Returns:
        e.g. candidates [C1{p1, p2}, C2{p3}] -> "p1\\np2\\np3"
    """
    return join_parts(iter_candidate_parts(candidates))


class GeminiProvider(BaseProvider):
    """Google Gemini provider using the google-genai SDK"""

    name = "gemini"

    def __init__(self, config: GradeRaceConfig):
        super().__init__(config)

        if not config.gemini_api_key:
            raise ConfigurationError("Gemini API key is required (set GEMINI_API_KEY)")

    async def generate_text(self, prompt: str, model: str) -> str:
        """Generate content and flatten every candidate part"""
        # Gemini 2.5 counts thinking tokens against max_output_tokens
        config_kwargs: Dict[str, Any] = {"temperature": self.config.temperature}
        if self.config.max_tokens is not None:
            config_kwargs["max_output_tokens"] = self.config.max_tokens
        generation_config = types.GenerateContentConfig(**config_kwargs)

        try:
            client = genai.Client(api_key=self.config.gemini_api_key)
        except Exception as e:
            logger.error(f"Failed to initialize Gemini client: {e}")
            raise ApiError(f"Failed to initialize Gemini client: {e}", self.name) from e

        try:
            response = await client.aio.models.generate_content(
                model=model,
                contents=prompt,
                config=generation_config
            )
        except Exception as e:
            logger.error(f"Gemini generation failed: {e}")
            raise ApiError(f"Gemini generation failed: {e}", self.name) from e
        finally:
            await self._close_client(client)

        self._record_call(model)
        result = flatten_candidates(response.candidates)
        if not result:
            reasons = [str(getattr(c, "finish_reason", None)) for c in response.candidates or []]
            logger.error(f"Empty response from Gemini (finish reasons: {reasons})")
            raise ApiError(f"Gemini returned no text (finish reasons: {reasons})", self.name)
        logger.debug(f"Gemini response: {result[:50]}...")

        return result

    async def _close_client(self, client: genai.Client) -> None:
        try:
            await client.aio.aclose()
        except Exception as e:
            logger.warning(f"Failed to close {self.name} async client: {e}")

        try:
            client.close()
        except Exception as e:
            logger.warning(f"Failed to close {self.name} client: {e}")

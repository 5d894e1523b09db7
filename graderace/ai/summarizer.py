"""
Text summarizer backed by a hosted generative model
"""

from typing import Optional, Dict, Any
import logging

from ..providers.base import BaseProvider
from ..core.config import GradeRaceConfig
from ..models.summary import SummaryResult
from .prompts import build_prompt

logger = logging.getLogger(__name__)


class TextSummarizer:
    """Summarizes extracted page text with the configured provider"""

    def __init__(self, config: GradeRaceConfig, provider: Optional[BaseProvider] = None):
        self.config = config
        if provider:
            self.provider = provider
        else:
            from ..providers.factory import create_provider
            self.provider = create_provider(config)

    async def summarize(
        self,
        text: str,
        model_name: Optional[str] = "flash",
        source_url: Optional[str] = None
    ) -> SummaryResult:
        """
        Summarize text with the model selected by name

        Args:
            text: Whitespace-normalized page text
            model_name: Requested model; any name containing "pro" selects the pro model
            source_url: URL the text was extracted from

        Returns:
            SummaryResult with the flattened response text

        Raises:
            ApiError: If the model call fails
        """
        model = self.config.model_for(model_name)
        prompt = build_prompt(text)
        logger.info(f"Summarizing {len(text)} characters with {self.provider.name}/{model}")

        summary = await self.provider.generate_text(prompt, model)

        return SummaryResult(
            text=summary,
            model=model,
            provider=self.provider.name,
            source_url=source_url
        )

    def get_summary_stats(self) -> Dict[str, Any]:
        """Get summarizer statistics"""
        return {
            'provider': self.provider.name,
            'flash_model': self.config.flash_model,
            'pro_model': self.config.pro_model,
            'last_model': self.provider.last_model,
            'calls': self.provider.call_count
        }

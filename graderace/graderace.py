"""
Main GradeRace API class
Fetch a race data page, extract its content and summarize it
"""

from typing import Optional, Dict, Any
import logging

from .core.config import GradeRaceConfig
from .exceptions import NoContentError
from .models.summary import SummaryResult
from .processors.fetcher import PageFetcher
from .processors.extractor import ContentExtractor
from .providers.base import BaseProvider
from .ai.summarizer import TextSummarizer
from .utils.async_helpers import sync_wrapper

logger = logging.getLogger(__name__)


class RaceSummarizer:
    """
    Main GradeRace API class

    Runs the fetch -> extract -> summarize pipeline for one URL at a time.
    Each stage finishes before the next starts; errors propagate unchanged.
    """

    def __init__(
        self,
        config: Optional[GradeRaceConfig] = None,
        provider: Optional[BaseProvider] = None
    ):
        """
        Initialize the pipeline

        Args:
            config: Configuration object (uses defaults if None)
            provider: Summarization provider (created from config if None)

        Raises:
            ConfigurationError: If the provider's API key is missing
        """
        if config is None:
            config = GradeRaceConfig()

        self.config = config
        self.fetcher = PageFetcher(config)
        self.extractor = ContentExtractor(config)
        self.summarizer = TextSummarizer(config, provider)

        logger.debug(f"Initialized RaceSummarizer with {self.summarizer.provider.name} provider")

    async def summarize_url(self, url: str, model_name: Optional[str] = "flash") -> SummaryResult:
        """
        Summarize the content container of a race data page

        Args:
            url: Page URL
            model_name: Requested model; any name containing "pro" selects the pro model

        Returns:
            SummaryResult for the page

        Raises:
            FetchError: If the page cannot be fetched or decoded
            ParseError: If the markup is rejected
            NoContentError: If the container is missing or empty
            ApiError: If the model call fails
        """
        html = self.fetcher.fetch(url)
        page = self.extractor.extract_page(url, html)

        if page.is_empty:
            raise NoContentError(
                f"No text found in {self.config.container_selector!r} at {url}", url
            )

        result = await self.summarizer.summarize(page.text, model_name, source_url=url)
        logger.info(f"Summarized {url} with {result.model}")
        return result

    def summarize_url_sync(self, url: str, model_name: Optional[str] = "flash") -> SummaryResult:
        """Synchronous version of summarize_url"""
        return sync_wrapper(self.summarize_url(url, model_name))

    def get_stats(self) -> Dict[str, Any]:
        """Get pipeline statistics"""
        return {
            'container_selector': self.config.container_selector,
            'page_encoding': self.config.page_encoding,
            'summarizer': self.summarizer.get_summary_stats()
        }

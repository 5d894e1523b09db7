"""
Base provider interface for summarization models
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional
import logging

from ..core.config import GradeRaceConfig

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """
    Base class for hosted generative model providers

    Providers check their credential on construction. The SDK client is
    opened per call and closed before the call returns.
    """

    name = "base"

    def __init__(self, config: GradeRaceConfig):
        self.config = config
        self.last_model: Optional[str] = None  # Model used by the last call
        self.call_count: int = 0

    @abstractmethod
    async def generate_text(self, prompt: str, model: str) -> str:
        """
        Send a prompt and return the flattened response text

        Every part of every candidate is joined by newlines, candidates
        first, then parts within each candidate.
        """
        pass

    def _record_call(self, model: str):
        self.last_model = model
        self.call_count += 1

    async def _close_client(self, client: Any) -> None:
        """Close an SDK client, logging rather than masking the call's outcome"""
        try:
            await client.close()
        except Exception as e:
            logger.warning(f"Failed to close {self.name} client: {e}")


def join_parts(parts: Iterable[Optional[str]]) -> str:
    """Join response parts with newlines, skipping parts without text"""
    return "\n".join(part for part in parts if part is not None)

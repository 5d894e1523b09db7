"""
Summary models and data structures for GradeRace
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ModelTier(str, Enum):
    """Capability/cost tiers of the hosted model"""
    FLASH = "flash"  # Fast, cheap default
    PRO = "pro"      # Higher capability


def resolve_model_tier(name: Optional[str]) -> ModelTier:
    """
    Map a requested model name onto a tier

    Any name containing "pro" selects the pro tier; everything else,
    including an empty name, selects flash.
    """
    if name and "pro" in name:
        return ModelTier.PRO
    return ModelTier.FLASH


@dataclass(frozen=True)
class ExtractedPage:
    """Normalized text extracted from a fetched race data page"""
    url: str
    text: str

    @property
    def is_empty(self) -> bool:
        return not self.text


@dataclass(frozen=True)
class SummaryResult:
    """Summary produced by the generative model"""
    text: str
    model: str
    provider: str
    source_url: Optional[str] = None

    def __str__(self) -> str:
        return self.text

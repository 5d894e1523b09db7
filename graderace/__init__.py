"""
GradeRace - race data page summarizer

Fetches a race data analysis page, extracts the text of its main content
container and summarizes it with a hosted generative model.
"""

__version__ = "0.1.0"

from .graderace import RaceSummarizer
from .models.summary import ExtractedPage, ModelTier, SummaryResult, resolve_model_tier
from .core.config import GradeRaceConfig, load_environment
from .providers import BaseProvider, create_provider
from .exceptions import (
    GradeRaceError, ConfigurationError, FetchError, ParseError, NoContentError, ApiError
)

__all__ = [
    "RaceSummarizer",
    "ExtractedPage",
    "ModelTier",
    "SummaryResult",
    "resolve_model_tier",
    "GradeRaceConfig",
    "load_environment",
    "BaseProvider",
    "create_provider",
    "GradeRaceError",
    "ConfigurationError",
    "FetchError",
    "ParseError",
    "NoContentError",
    "ApiError"
]

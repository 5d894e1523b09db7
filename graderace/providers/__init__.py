"""Summarization model providers for GradeRace"""

from .base import BaseProvider
from .gemini import GeminiProvider, flatten_candidates
from .openai import OpenAIProvider
from .anthropic import AnthropicProvider
from .factory import create_provider, get_available_providers

__all__ = [
    "BaseProvider",
    "GeminiProvider",
    "OpenAIProvider",
    "AnthropicProvider",
    "flatten_candidates",
    "create_provider",
    "get_available_providers"
]

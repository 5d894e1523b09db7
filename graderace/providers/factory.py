"""
Provider factory for creating summarization providers
"""

from typing import Dict, List, Type

from .base import BaseProvider
from .gemini import GeminiProvider
from .openai import OpenAIProvider
from .anthropic import AnthropicProvider
from ..core.config import GradeRaceConfig
from ..exceptions import ConfigurationError

_PROVIDERS: Dict[str, Type[BaseProvider]] = {
    "gemini": GeminiProvider,
    "openai": OpenAIProvider,
    "anthropic": AnthropicProvider,
}


def create_provider(config: GradeRaceConfig) -> BaseProvider:
    """
    Create AI provider based on configuration

    Args:
        config: GradeRace configuration

    Returns:
        Configured provider instance

    Raises:
        ConfigurationError: If the provider is unknown or its API key is missing
    """
    provider_class = _PROVIDERS.get(config.provider)
    if provider_class is None:
        raise ConfigurationError(f"Unsupported provider: {config.provider}")
    return provider_class(config)


def get_available_providers() -> List[str]:
    """Get list of available provider names"""
    return list(_PROVIDERS)

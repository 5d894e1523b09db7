"""
GradeRace Configuration
Settings for fetching race data pages and summarizing them with a hosted model
"""

import os
from dataclasses import dataclass
from typing import Optional, Dict, Any
import logging

from dotenv import load_dotenv

from ..exceptions import ConfigurationError
from ..models.summary import ModelTier, resolve_model_tier

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("gemini", "openai", "anthropic")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

PROVIDER_DEFAULTS: Dict[str, Dict[str, str]] = {
    "gemini": {
        "flash_model": "gemini-2.5-flash",
        "pro_model": "gemini-2.5-pro",
    },
    "openai": {
        "flash_model": "gpt-4o-mini",
        "pro_model": "gpt-4o",
    },
    "anthropic": {
        "flash_model": "claude-3-5-haiku-latest",
        "pro_model": "claude-sonnet-4-20250514",
    },
}


@dataclass
class GradeRaceConfig:
    """GradeRace configuration with sensible defaults"""

    # AI Provider Settings
    provider: str = "gemini"  # gemini, openai, anthropic
    flash_model: Optional[str] = None  # Filled from PROVIDER_DEFAULTS
    pro_model: Optional[str] = None

    # API keys loaded from environment variables if not provided
    gemini_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None

    # Generation
    max_tokens: Optional[int] = None  # Unset: no output limit where the provider allows it
    temperature: float = 0.3

    # Scraping - the analysis pages are served as Shift_JIS
    container_selector: str = "div#main_contents"
    page_encoding: str = "cp932"
    user_agent: str = "graderace-summarizer/0.1"

    # Output
    copy_to_clipboard: bool = True

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        """Initialize and validate configuration"""
        if self.provider not in SUPPORTED_PROVIDERS:
            raise ConfigurationError(f"Unsupported provider: {self.provider}")

        if not self.gemini_api_key:
            self.gemini_api_key = os.getenv("GEMINI_API_KEY")

        if not self.openai_api_key:
            self.openai_api_key = os.getenv("OPENAI_API_KEY")

        if not self.anthropic_api_key:
            self.anthropic_api_key = os.getenv("ANTHROPIC_API_KEY")

        self._set_provider_defaults()

        if self.max_tokens is not None and self.max_tokens <= 0:
            raise ConfigurationError("max_tokens must be positive")

        if self.temperature < 0 or self.temperature > 2:
            raise ConfigurationError("temperature must be between 0 and 2")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

    def _set_provider_defaults(self):
        """Fill unset model identifiers from the provider defaults"""
        defaults = PROVIDER_DEFAULTS[self.provider]
        if not self.flash_model:
            self.flash_model = defaults["flash_model"]
        if not self.pro_model:
            self.pro_model = defaults["pro_model"]

    def model_for(self, name: Optional[str]) -> str:
        """Model identifier for a requested model name ("flash", "pro", ...)"""
        if resolve_model_tier(name) is ModelTier.PRO:
            return self.pro_model
        return self.flash_model

    @classmethod
    def from_env(cls, **overrides: Any) -> 'GradeRaceConfig':
        """Create config from environment variables, explicit overrides win"""
        config_dict: Dict[str, Any] = {}

        env_mapping = {
            'GRADERACE_PROVIDER': 'provider',
            'GRADERACE_FLASH_MODEL': 'flash_model',
            'GRADERACE_PRO_MODEL': 'pro_model',
            'GRADERACE_ENCODING': 'page_encoding',
            'GRADERACE_LOG_LEVEL': 'log_level',
        }

        for env_var, config_field in env_mapping.items():
            value = os.getenv(env_var)
            if value is not None:
                config_dict[config_field] = value

        config_dict.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**config_dict)


def load_environment(path: str = ".env") -> bool:
    """
    Load variables from a dotenv file into the process environment

    A missing file is not an error; variables already set are kept.

    Returns:
        True if the file was found and loaded
    """
    loaded = load_dotenv(path)
    if loaded:
        logger.debug(f"Loaded environment from {path}")
    else:
        logger.debug(f"No dotenv file loaded from {path}")
    return loaded

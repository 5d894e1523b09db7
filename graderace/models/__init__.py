"""Data models for GradeRace"""

from .summary import ModelTier, ExtractedPage, SummaryResult, resolve_model_tier

__all__ = ["ModelTier", "ExtractedPage", "SummaryResult", "resolve_model_tier"]

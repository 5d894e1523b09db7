"""Page fetching and content extraction for GradeRace"""

from .fetcher import PageFetcher
from .extractor import ContentExtractor

__all__ = [
    "PageFetcher",
    "ContentExtractor"
]

"""
Custom exceptions for GradeRace summarizer
"""

from typing import Optional


class GradeRaceError(Exception):
    """Base exception for GradeRace errors"""
    pass


class ConfigurationError(GradeRaceError, ValueError):
    """Invalid or incomplete configuration (e.g. missing API key)"""
    pass


class FetchError(GradeRaceError):
    """Error occurred while fetching or decoding the race data page"""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


class ParseError(GradeRaceError):
    """The HTML parser rejected the page markup"""
    pass


class NoContentError(GradeRaceError):
    """The content container was missing or held no text"""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


class ApiError(GradeRaceError):
    """Error occurred while calling the summarization API"""

    def __init__(self, message: str, provider: str):
        self.provider = provider
        super().__init__(message)

"""
Content extractor for race data analysis pages
"""

import logging

from bs4 import BeautifulSoup, ParserRejectedMarkup

from ..core.config import GradeRaceConfig
from ..core.utils import normalize_whitespace
from ..exceptions import ParseError
from ..models.summary import ExtractedPage

logger = logging.getLogger(__name__)


class ContentExtractor:
    """Extracts the normalized text of the page's content container"""

    def __init__(self, config: GradeRaceConfig):
        self.config = config

    def extract(self, html: str) -> str:
        """
        Extract the whitespace-normalized text of the content container

        A page without the container yields an empty string rather than
        an error.

        Args:
            html: Decoded HTML document

        Returns:
            Normalized container text, or "" when the container is absent

        Raises:
            ParseError: If the parser rejects the markup
        """
        try:
            soup = BeautifulSoup(html, "html.parser")
        except ParserRejectedMarkup as e:
            logger.error(f"HTML parser rejected markup: {e}")
            raise ParseError(f"Malformed HTML: {e}") from e

        container = soup.select_one(self.config.container_selector)
        if container is None:
            logger.warning(f"No element matches {self.config.container_selector!r}")
            return ""

        text = normalize_whitespace(container.get_text())
        logger.debug(f"Extracted {len(text)} characters from {self.config.container_selector!r}")
        return text

    def extract_page(self, url: str, html: str) -> ExtractedPage:
        """Extract container text and pair it with its source URL"""
        return ExtractedPage(url=url, text=self.extract(html))

"""
Page fetcher for race data analysis pages
"""

import logging

import requests

from ..core.config import GradeRaceConfig
from ..exceptions import FetchError

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetches a page over HTTP and decodes it from the legacy encoding"""

    def __init__(self, config: GradeRaceConfig):
        self.config = config

    def fetch(self, url: str) -> str:
        """
        Fetch a page and return its decoded HTML

        Args:
            url: Page URL

        Returns:
            Page body decoded with the configured encoding

        Raises:
            FetchError: On transport errors, non-success status or undecodable body
        """
        logger.info(f"Fetching {url}")
        headers = {"User-Agent": self.config.user_agent}

        try:
            with requests.get(url, headers=headers) as response:
                response.raise_for_status()
                body = response.content
                logger.debug(f"Received {len(body)} bytes from {url} (status {response.status_code})")
        except requests.RequestException as e:
            logger.error(f"Failed to fetch {url}: {e}")
            raise FetchError(f"Failed to fetch {url}: {e}", url) from e

        return self._decode(body, url)

    def _decode(self, body: bytes, url: str) -> str:
        """Decode the raw body, failing on invalid byte sequences"""
        encoding = self.config.page_encoding
        try:
            return body.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.error(f"Failed to decode {url} as {encoding}: {e}")
            raise FetchError(f"Failed to decode {url} as {encoding}: {e}", url) from e

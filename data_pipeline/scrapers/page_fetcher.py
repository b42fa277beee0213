import re
import logging
from typing import Optional
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

from config import config

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r"\s+")


class FetchError(Exception):
    """Raised when a page cannot be downloaded or parsed"""


class PageFetcher:
    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[int] = None):
        self.session = session or requests.Session()
        self.timeout = timeout or config.FETCH_TIMEOUT

        self.session.headers.update({
            'User-Agent': config.USER_AGENT,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
        })

    def fetch(self, url: str) -> str:
        """
        Download a page and return its visible body text
        """
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise FetchError(f"Invalid URL: {url}")

        try:
            logger.info(f"Fetching page: {url}")
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Error fetching {url}: {e}")
            raise FetchError(f"Failed to fetch {url}: {e}") from e

        text = self.extract_text(response.text)
        logger.info(f"Extracted {len(text)} characters from {url}")
        return text

    def extract_text(self, html: str) -> str:
        """Body text with scripts and styles removed, whitespace collapsed"""
        try:
            soup = BeautifulSoup(html, 'html.parser')
        except Exception as e:
            raise FetchError(f"Failed to parse page: {e}") from e

        for tag in soup(['script', 'style', 'noscript']):
            tag.decompose()

        root = soup.body or soup
        return WHITESPACE.sub(" ", root.get_text(separator=" ")).strip()


def fetch(url: str) -> str:
    """Fetch a URL with a fresh PageFetcher"""
    return PageFetcher().fetch(url)
